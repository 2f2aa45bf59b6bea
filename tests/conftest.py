import textwrap
from pathlib import Path

import pytest

from portfolio.repos.posts_repo import FilePostsRepo
from portfolio.settings import BASE_DIR, Settings


def write_post(root: Path, name: str, raw: str) -> Path:
    """Write a dedented Markdown post under root and return its path."""
    path = root / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(raw).lstrip(), encoding="utf-8")
    return path


@pytest.fixture
def content_dir(tmp_path) -> Path:
    root = tmp_path / "content" / "posts"
    root.mkdir(parents=True)
    return root


@pytest.fixture
def repo(content_dir) -> FilePostsRepo:
    return FilePostsRepo(content_dir)


@pytest.fixture
def site_settings(content_dir) -> Settings:
    return Settings(
        CONTENT_DIR=content_dir,
        TEMPLATES_DIR=BASE_DIR / "templates",
        STATIC_DIR=BASE_DIR / "static",
    )


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, list_posts_return=None, get_post_return=None):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return
        self.requested_slugs = []

    def list_posts(self):
        return self._list_posts_return

    def get_post(self, slug: str):
        self.requested_slugs.append(slug)
        return self._get_post_return


class BrokenTemplates:
    """Jinja2Templates stand-in whose rendering always fails."""

    def TemplateResponse(self, *args, **kwargs):
        raise RuntimeError("template exploded")
