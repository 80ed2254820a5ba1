"""Search adapter layer — Per-provider connectors for the aggregator.

Built-in adapters:
  - google_books: Google Books Volumes API (book and magazine metadata)

Implement ``SearchAdapter`` to connect another metadata provider.
"""
