import logging

from portfolio.repos.posts_repo import FilePostsRepo
from portfolio.services import category_migrator
from portfolio.settings import settings

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

if __name__ == "__main__":
    try:
        changed = category_migrator.migrate_all(FilePostsRepo(settings.CONTENT_DIR))
        logger.info(f"Category migration completed, {len(changed)} file(s) rewritten.")
    except Exception as e:
        logger.error(f"Category migration failed: {e}", exc_info=True)
