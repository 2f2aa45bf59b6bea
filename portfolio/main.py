import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from portfolio.routers import blog, pages
from portfolio.settings import settings
from portfolio.static_files import CachedStaticFiles

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        f"Serving posts from {settings.CONTENT_DIR} on {settings.bind_address}"
    )
    yield
    logger.info("Portfolio site shut down")


app = FastAPI(title=settings.SITE_TITLE, lifespan=lifespan)

app.mount(
    "/static",
    CachedStaticFiles(
        directory=settings.STATIC_DIR, cache_control=settings.STATIC_CACHE_CONTROL
    ),
    name="static",
)
app.include_router(pages.router)
app.include_router(blog.router)


def run():
    uvicorn.run(
        "portfolio.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
