import datetime
import logging
from pathlib import Path
from typing import List, Optional, Tuple

import frontmatter
import yaml
from frontmatter.default_handlers import YAMLHandler

from portfolio.schemas.blog import FrontMatter, Post
from portfolio.services.markdown_renderer import render_markdown

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"
SENTINEL_DATE = datetime.date(1970, 1, 1)
DEFAULT_READ_TIME = "5 min"


class _TextDateLoader(yaml.SafeLoader):
    """SafeLoader that leaves timestamps as text.

    Otherwise an impossible date like 2024-02-30 fails the whole YAML load
    instead of reaching parse_date.
    """


_TextDateLoader.add_constructor(
    "tag:yaml.org,2002:timestamp", yaml.SafeLoader.construct_yaml_str
)


class TextDateYAMLHandler(YAMLHandler):
    def load(self, fm, **kwargs):
        kwargs.setdefault("Loader", _TextDateLoader)
        return super().load(fm, **kwargs)


yaml_handler = TextDateYAMLHandler()


class PostsService:
    """Loads posts from a FilePostsRepo.

    Nothing is cached: every call re-reads the content directory and
    re-renders Markdown, so edits on disk show up on the next request.
    """

    def __init__(self, repo):
        self.repo = repo

    def list_posts(self) -> List[Post]:
        loaded = (
            load_post(path, reader=self.repo.read)
            for path in self.repo.list_post_paths()
        )
        posts = [post for post in loaded if post is not None]
        # sorted() is stable, so posts sharing a date keep directory order
        return sorted(posts, key=lambda p: p.date, reverse=True)

    def get_post(self, slug: str) -> Optional[Post]:
        path = self.repo.path_for_slug(slug)
        if path is None:
            logger.info(f"Rejected unsafe post slug {slug!r}")
            return None
        post = load_post(path, reader=self.repo.read)
        if post is not None:
            return post
        # front-matter slugs and nested files only resolve through a scan
        return next((p for p in self.list_posts() if p.slug == slug), None)


def load_post(path: Path, *, reader) -> Optional[Post]:
    """Read, parse and assemble one post; any failure yields None."""
    try:
        raw = reader(path)
        meta, body = parse_front_matter(raw)
        return assemble_post(meta, render_markdown(body), path)
    except FileNotFoundError:
        logger.info(f"No post file at {path}")
        return None
    except Exception as e:
        logger.warning(f"Failed to load post {path}: {e}")
        return None


def parse_front_matter(raw: str) -> Tuple[FrontMatter, str]:
    """Split the YAML block from the body and validate it.

    Raises the YAML parser's error on malformed front matter and
    pydantic.ValidationError when required fields are missing.
    """
    parsed = frontmatter.loads(raw, handler=yaml_handler)
    return FrontMatter.model_validate(parsed.metadata or {}), parsed.content


def assemble_post(meta: FrontMatter, html: str, path: Path) -> Post:
    return Post(
        title=meta.title,
        date=parse_date(meta.date),
        excerpt=resolve_excerpt(meta.excerpt),
        categories=resolve_categories(meta.categories, meta.category),
        read_time=resolve_read_time(meta.read_time),
        slug=resolve_slug(meta.slug, path),
        html=html,
    )


def parse_date(value: Optional[str]) -> datetime.date:
    if value is None:
        return SENTINEL_DATE
    try:
        return datetime.datetime.strptime(value.strip(), DATE_FORMAT).date()
    except (TypeError, ValueError, AttributeError):
        logger.debug(f"Unparseable post date {value!r}, using {SENTINEL_DATE}")
        return SENTINEL_DATE


def resolve_slug(slug: Optional[str], path: Path) -> str:
    if slug and slug.strip():
        return slug
    return Path(path).stem


def resolve_excerpt(excerpt: Optional[str]) -> str:
    return excerpt or ""


def resolve_read_time(read_time: Optional[str]) -> str:
    if read_time and read_time.strip():
        return read_time
    return DEFAULT_READ_TIME


def resolve_categories(categories, category: Optional[str] = None) -> List[str]:
    """
    Normalize both category schemas into a list of non-empty strings.
    The list form wins when a file carries both keys.
    """
    if categories:
        if isinstance(categories, str):
            return [categories]
        return [str(item) for item in categories if item]
    if category:
        return [category]
    return []
