import logging
from pathlib import Path
from typing import List

import frontmatter

from portfolio.services.posts_service import resolve_categories, yaml_handler

logger = logging.getLogger(__name__)


def migrate_post(path: Path) -> bool:
    """
    Rewrite a post that still uses the legacy single ``category`` key so it
    carries a ``categories`` list instead. Returns True when the file changed.
    """
    post = frontmatter.load(str(path), handler=yaml_handler)
    legacy = post.metadata.get("category")
    if "categories" in post.metadata or not isinstance(legacy, str):
        return False

    post.metadata["categories"] = resolve_categories(None, legacy)
    del post.metadata["category"]
    path.write_text(frontmatter.dumps(post) + "\n", encoding="utf-8")
    logger.info(f"Migrated category of {path} to {post.metadata['categories']}")
    return True


def migrate_all(repo) -> List[Path]:
    changed = []
    for path in repo.list_post_paths():
        try:
            if migrate_post(path):
                changed.append(path)
        except Exception as e:
            logger.warning(f"Skipping {path}, could not migrate: {e}")
    return changed
