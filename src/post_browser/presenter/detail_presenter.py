"""Detail view state for a single post."""

from ..api import Post


class PostDetailPresenter:
    """Exposes one selected post to a detail view."""

    def __init__(self, post: Post):
        self.post = post

    @property
    def title(self) -> str:
        return self.post.title

    @property
    def body(self) -> str:
        return self.post.body

    @property
    def heading(self) -> str:
        return f"Post #{self.post.id} by user {self.post.user_id}"
