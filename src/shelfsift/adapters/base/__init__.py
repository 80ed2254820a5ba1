"""Base adapter interface — Abstract classes for metadata provider connectors."""

from shelfsift.adapters.base.adapter import SearchAdapter, SemanticField
from shelfsift.adapters.base.registry import AdapterRegistry

__all__ = ["AdapterRegistry", "SearchAdapter", "SemanticField"]
