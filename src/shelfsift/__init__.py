"""ShelfSift — Book-metadata search adapters for multi-source aggregation."""

__version__ = "0.1.0"
