"""Provider-agnostic request and result models."""

from shelfsift.models.query import SearchRequest
from shelfsift.models.result import ErrorInfo, ItemFormat, ResultItem, ResultSet

__all__ = ["ErrorInfo", "ItemFormat", "ResultItem", "ResultSet", "SearchRequest"]
