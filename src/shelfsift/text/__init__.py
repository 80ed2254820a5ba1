"""Text utilities."""

from shelfsift.text.sanitize import sanitize

__all__ = ["sanitize"]
