"""
Post Browser

Fetches posts from JSONPlaceholder and presents them in a
master-detail flow.
"""

__version__ = "0.1.0"
