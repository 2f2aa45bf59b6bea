import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from portfolio import dependencies as deps
from portfolio.settings import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def home(
    request: Request,
    current_settings: Settings = Depends(get_settings),
    templates: Jinja2Templates = Depends(deps.get_templates),
):
    try:
        return templates.TemplateResponse(
            request,
            "index.html",
            {"title": current_settings.SITE_TITLE, "name": current_settings.SITE_OWNER},
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error rendering home page: {e}")
        raise HTTPException(status_code=500, detail="Failed to render home page")
