"""
Tests for the Console Front-End

Tests for list rendering, detail navigation and the CLI entry point.
"""

import io
import pytest
import sys
from pathlib import Path
from unittest.mock import AsyncMock, Mock, patch

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from post_browser import main as main_module
from post_browser.api.client import APIClient, FetchResult, Post
from post_browser.main import ConsoleApp, parse_args
from post_browser.presenter import PostListPresenter


POSTS = [
    Post(id=1, user_id=1, title="first title", body="first body"),
    Post(id=2, user_id=3, title="second title", body="second body"),
]


def make_app(result: FetchResult) -> ConsoleApp:
    client = Mock(spec=APIClient)
    client.fetch_posts_result = AsyncMock(return_value=result)
    return ConsoleApp(presenter=PostListPresenter(client=client), out=io.StringIO())


class TestConsoleApp:
    """Tests for the console UI."""

    @pytest.mark.asyncio
    async def test_renders_rows_after_appearing(self):
        app = make_app(FetchResult(posts=POSTS))

        await app.show_list()

        output = app.out.getvalue()
        assert app.rendered_rows == ["[1] first title", "[2] second title"]
        assert "[2] second title" in output

    @pytest.mark.asyncio
    async def test_empty_list_message(self):
        app = make_app(FetchResult(error="http error: refused"))

        await app.show_list()

        assert "No posts available." in app.out.getvalue()

    @pytest.mark.asyncio
    async def test_select_by_id_shows_detail(self):
        app = make_app(FetchResult(posts=POSTS))
        await app.show_list()

        detail = app.select_by_id(2)

        assert detail.post is POSTS[1]
        output = app.out.getvalue()
        assert "Post #2 by user 3" in output
        assert "second body" in output

    @pytest.mark.asyncio
    async def test_select_unknown_id(self):
        app = make_app(FetchResult(posts=POSTS))
        await app.show_list()

        assert app.select_by_id(99) is None

    @pytest.mark.asyncio
    async def test_close_stops_rendering(self):
        app = make_app(FetchResult(posts=POSTS))
        app.close()

        await app.show_list()

        assert app.rendered_rows == []


class TestCli:
    """Tests for argument parsing and exit codes."""

    def test_parse_defaults(self):
        args = parse_args([])

        assert args.show is None
        assert args.log_level == "INFO"

    def test_parse_show(self):
        assert parse_args(["--show", "5"]).show == 5

    @pytest.mark.asyncio
    async def test_run_exit_codes(self):
        client = Mock(spec=APIClient)
        client.fetch_posts_result = AsyncMock(return_value=FetchResult(posts=POSTS))

        with patch.object(main_module, "PostListPresenter",
                          lambda: PostListPresenter(client=client)):
            assert await main_module.run(out=io.StringIO()) == 0
            assert await main_module.run(post_id=1, out=io.StringIO()) == 0
            assert await main_module.run(post_id=42, out=io.StringIO()) == 1

    def test_main_exits_with_run_result(self, tmp_path):
        with patch.object(main_module.config.log, "log_directory", tmp_path), \
                patch.object(main_module, "run", AsyncMock(return_value=0)):
            with pytest.raises(SystemExit) as exc:
                main_module.main(["--show", "1"])

        assert exc.value.code == 0


if __name__ == "__main__":
    pytest.main([__file__, "-v", "-s"])
