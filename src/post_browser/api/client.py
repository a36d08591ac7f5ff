"""
API Client Module

Async HTTP client for fetching posts from the JSONPlaceholder API.
Every failure is absorbed at this boundary: callers of fetch_posts()
always get a list back, empty when anything went wrong.
"""

import logging
from typing import Any, List, Optional
from dataclasses import dataclass, field

import httpx

from ..config import config


logger = logging.getLogger(__name__)


def _as_int(value: Any, name: str) -> int:
    """Accept JSON integers and integral strings; bools and floats are rejected."""
    if isinstance(value, bool):
        raise TypeError(f"'{name}' must be an integer, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        return int(value.strip())
    raise TypeError(f"'{name}' must be an integer, got {type(value).__name__}")


def _as_str(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"'{name}' must be a string, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Post:
    """Represents a post from the API."""
    id: int
    user_id: int
    title: str
    body: str

    @classmethod
    def from_json(cls, item: Any) -> "Post":
        """
        Build a Post from one decoded JSON object.

        Raises:
            KeyError: If a field is missing.
            TypeError: If the item is not an object or a field has the wrong type.
            ValueError: If a numeric string is not an integer.
        """
        return cls(
            id=_as_int(item["id"], "id"),
            user_id=_as_int(item["userId"], "userId"),
            title=_as_str(item["title"], "title"),
            body=_as_str(item["body"], "body"),
        )

    def summary(self, width: int = 60) -> str:
        """One-line title for list rows, cut to width."""
        title = " ".join(self.title.split())
        if len(title) <= width:
            return title
        return title[:width - 3].rstrip() + "..."


@dataclass
class FetchResult:
    """Outcome of a single fetch, keeping failure apart from an empty list."""
    posts: List[Post] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class APIClient:
    """
    HTTP client for the JSONPlaceholder API.

    One GET per call, no retries and no caching. A fresh
    httpx.AsyncClient is opened for each call and closed before
    the call returns.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the API client.

        Args:
            base_url: API root (uses config default if None).
            timeout: Transport timeout in seconds (uses config default if None).
            transport: Optional httpx transport, e.g. a MockTransport in tests.
        """
        self.base_url = base_url or config.api.base_url
        self.timeout = timeout if timeout is not None else config.api.timeout_seconds
        self.transport = transport
        logger.debug(f"APIClient initialized (base_url: {self.base_url})")

    @property
    def posts_url(self) -> str:
        return f"{self.base_url}{config.api.posts_endpoint}"

    async def fetch_posts(self) -> List[Post]:
        """
        Fetch all posts.

        Returns:
            List of Post objects in server order, or an empty list
            if the request or decoding failed.
        """
        result = await self.fetch_posts_result()
        return result.posts

    async def fetch_posts_result(self) -> FetchResult:
        """
        Fetch all posts and report failure explicitly.

        Returns:
            FetchResult with the posts, or with an error message and
            no posts.
        """
        url = self.posts_url
        logger.info(f"Fetching posts from {url}")

        try:
            posts = await self._fetch(url)

        except httpx.TimeoutException as e:
            logger.warning(f"Timeout fetching posts: {e}")
            return FetchResult(error=f"timeout: {e}")

        except httpx.HTTPStatusError as e:
            logger.warning(f"HTTP {e.response.status_code} fetching posts")
            return FetchResult(error=f"http status {e.response.status_code}")

        except httpx.HTTPError as e:
            logger.warning(f"HTTP error fetching posts: {e}")
            return FetchResult(error=f"http error: {e}")

        except (ValueError, KeyError, TypeError) as e:
            logger.warning(f"Malformed posts payload: {e!r}")
            return FetchResult(error=f"malformed payload: {e!r}")

        except Exception as e:
            logger.error(f"Unexpected error fetching posts: {e!r}")
            return FetchResult(error=f"unexpected error: {e!r}")

        logger.info(f"Fetched {len(posts)} posts successfully")
        return FetchResult(posts=posts)

    async def _fetch(self, url: str) -> List[Post]:
        """
        Perform the GET and decode the body.

        Args:
            url: Posts endpoint URL.

        Returns:
            List of Post objects.
        """
        async with httpx.AsyncClient(
            timeout=self.timeout,
            transport=self.transport,
        ) as client:
            response = await client.get(url)
            response.raise_for_status()

            data = response.json()

        if not isinstance(data, list):
            raise ValueError(f"Unexpected API response format: {type(data).__name__}")

        return [Post.from_json(item) for item in data]
