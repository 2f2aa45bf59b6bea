import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from portfolio import dependencies as deps
from portfolio.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/blog", response_class=HTMLResponse)
def blog_index(
    request: Request,
    service: PostsService = Depends(deps.get_posts_service),
    templates: Jinja2Templates = Depends(deps.get_templates),
):
    """List every valid post, newest first."""
    try:
        posts = service.list_posts()
        return templates.TemplateResponse(
            request, "blog_index.html", {"posts": posts}
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error rendering blog index: {e}")
        raise HTTPException(status_code=500, detail="Failed to render blog index")


@router.get("/blog/{slug}", response_class=HTMLResponse)
def blog_post(
    slug: str,
    request: Request,
    service: PostsService = Depends(deps.get_posts_service),
    templates: Jinja2Templates = Depends(deps.get_templates),
):
    """Render a single post, or the not-found page."""
    try:
        post = service.get_post(slug)
        if post is None:
            return templates.TemplateResponse(
                request, "404.html", {"slug": slug}, status_code=404
            )
        return templates.TemplateResponse(request, "post.html", {"post": post})
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error rendering post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to render post")
