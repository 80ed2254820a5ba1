"""Google Books adapter."""

from shelfsift.adapters.google_books.adapter import GoogleBooksAdapter, fielded_query, parse_year

__all__ = ["GoogleBooksAdapter", "fielded_query", "parse_year"]
