"""
API Client Module

Provides the async HTTP client for fetching posts from JSONPlaceholder.
"""

from .client import APIClient, FetchResult, Post

__all__ = ["APIClient", "FetchResult", "Post"]
