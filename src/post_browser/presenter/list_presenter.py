"""
List Presenter Module

Holds the observable post collection a list view binds to, refreshes
it from the API when the view appears, and hands a selected post to
the detail view.
"""

import logging
from typing import Callable, Optional

from ..api import APIClient, Post
from .command import Command
from .detail_presenter import PostDetailPresenter
from .observable import ObservableCollection


logger = logging.getLogger(__name__)


class PostListPresenter:
    """
    View model for the post list screen.

    After refresh() resolves, posts mirrors the latest fetch result in
    server order. When refreshes overlap, the most recently started one
    wins and older results are dropped.
    """

    def __init__(
        self,
        client: Optional[APIClient] = None,
        on_navigate: Optional[Callable[[PostDetailPresenter], None]] = None,
    ):
        """
        Initialize the presenter.

        Args:
            client: API client to fetch from (a default one if None).
            on_navigate: Called with the detail presenter when a post is selected.
        """
        self.client = client or APIClient()
        self.on_navigate = on_navigate
        self.posts: ObservableCollection[Post] = ObservableCollection()
        self.load_posts_command = Command(self.refresh, name="load_posts")
        self.last_error: Optional[str] = None
        self._generation = 0

    @property
    def is_busy(self) -> bool:
        return not self.load_posts_command.can_execute

    async def on_appearing(self) -> None:
        """Lifecycle signal from the view: reload the list."""
        await self.load_posts_command.execute()

    async def refresh(self) -> None:
        """Replace the collection contents with the latest fetch result."""
        self._generation += 1
        generation = self._generation

        result = await self.client.fetch_posts_result()

        if generation != self._generation:
            logger.debug(
                f"Discarding refresh #{generation}, superseded by #{self._generation}"
            )
            return

        self.last_error = result.error
        self.posts.replace_all(result.posts)
        logger.info(f"Post list refreshed ({len(self.posts)} posts)")

    def select(self, post: Optional[Post]) -> Optional[PostDetailPresenter]:
        """
        Hand a selected post to the detail view.

        Args:
            post: The selected post, or None when the selection was cleared.

        Returns:
            The detail presenter for the post, or None if nothing was selected.
        """
        if post is None:
            return None

        detail = PostDetailPresenter(post)
        logger.info(f"Post {post.id} selected")
        if self.on_navigate is not None:
            self.on_navigate(detail)
        return detail
