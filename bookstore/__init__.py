"""
Bookstore catalog query engine.

Free-text and structured search, favorite-count ranking, manual
pagination and saturating favorite counters over a catalog snapshot.
"""

__version__ = "1.0.0"
