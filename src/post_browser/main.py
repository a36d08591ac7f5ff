"""
Main Entry Point

Console front-end for the Post Browser. Plays the part of the UI:

1. Show the post list screen (fires "view appeared")
2. Render each post as a numbered row
3. Optionally select a post and show its detail view
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional, TextIO

from .config import config
from .api import Post
from .presenter import CollectionChange, PostDetailPresenter, PostListPresenter


# Configure logging
def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """Set up logging for the application."""
    # Ensure log directory exists
    config.log.log_directory.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger("post_browser")
    # Handlers filter; the file log always gets DEBUG
    logger.setLevel(logging.DEBUG)

    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, log_level.upper()))
    console_format = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%H:%M:%S"
    )
    console_handler.setFormatter(console_format)

    # File handler
    file_handler = logging.FileHandler(
        config.log.log_file_path,
        mode='w',
        encoding='utf-8'
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(config.log.log_format))

    logger.addHandler(console_handler)
    logger.addHandler(file_handler)

    return logger


class ConsoleApp:
    """
    Text rendering of the master-detail flow.

    Binds to the presenter's post collection and re-renders the list
    whenever it changes.
    """

    def __init__(
        self,
        presenter: Optional[PostListPresenter] = None,
        out: Optional[TextIO] = None,
    ):
        self.logger = logging.getLogger("post_browser.main")
        self.out = out or sys.stdout
        self.presenter = presenter or PostListPresenter()
        self.presenter.on_navigate = self.show_detail
        self.rendered_rows: List[str] = []
        self._unsubscribe = self.presenter.posts.subscribe(self._on_posts_changed)

    def close(self) -> None:
        self._unsubscribe()

    async def show_list(self) -> None:
        """Display the list screen and wait for its data to load."""
        await self.presenter.on_appearing()
        self.render_list()

    def render_list(self) -> None:
        print("Posts", file=self.out)
        print("=" * 40, file=self.out)
        if not self.rendered_rows:
            print("No posts available.", file=self.out)
        for row in self.rendered_rows:
            print(row, file=self.out)

    def select_by_id(self, post_id: int) -> Optional[PostDetailPresenter]:
        """
        Select the row whose post has the given id.

        Returns:
            The detail presenter, or None if no such post is listed.
        """
        post = next((p for p in self.presenter.posts if p.id == post_id), None)
        if post is None:
            self.logger.warning(f"Post {post_id} is not in the list")
            return None
        return self.presenter.select(post)

    def show_detail(self, detail: PostDetailPresenter) -> None:
        print("", file=self.out)
        print(detail.heading, file=self.out)
        print("-" * 40, file=self.out)
        print(detail.title, file=self.out)
        print("", file=self.out)
        print(detail.body, file=self.out)

    def _on_posts_changed(self, change: CollectionChange[Post]) -> None:
        self.rendered_rows = [
            f"[{post.id}] {post.summary()}" for post in self.presenter.posts
        ]
        self.logger.debug(f"List re-rendered after '{change.action}' ({len(self.rendered_rows)} rows)")


async def run(post_id: Optional[int] = None, out: Optional[TextIO] = None) -> int:
    """
    Run one screen visit.

    Args:
        post_id: If given, select this post after the list loads.
        out: Stream to render to (stdout if None).

    Returns:
        Process exit code.
    """
    app = ConsoleApp(out=out)
    try:
        await app.show_list()
        if post_id is not None and app.select_by_id(post_id) is None:
            return 1
        return 0
    finally:
        app.close()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="post-browser",
        description="Browse posts from JSONPlaceholder.",
    )
    parser.add_argument(
        "--show",
        type=int,
        metavar="POST_ID",
        help="show the detail view of this post after loading the list",
    )
    parser.add_argument(
        "--log-level",
        default=config.log.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="console log level (default: %(default)s)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None):
    """Main entry point for the post browser."""
    args = parse_args(argv)
    logger = setup_logging(args.log_level)

    try:
        sys.exit(asyncio.run(run(post_id=args.show)))

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(130)

    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
