from fastapi import Depends
from fastapi.templating import Jinja2Templates

from portfolio.repos.posts_repo import FilePostsRepo
from portfolio.services.posts_service import PostsService
from portfolio.settings import Settings, get_settings

_templates_by_dir: dict = {}


def get_posts_repo(current_settings: Settings = Depends(get_settings)):
    return FilePostsRepo(current_settings.CONTENT_DIR)


def get_posts_service(repo=Depends(get_posts_repo)):
    return PostsService(repo=repo)


def get_templates(current_settings: Settings = Depends(get_settings)) -> Jinja2Templates:
    directory = str(current_settings.TEMPLATES_DIR)
    if directory not in _templates_by_dir:
        _templates_by_dir[directory] = Jinja2Templates(directory=directory)
    return _templates_by_dir[directory]
