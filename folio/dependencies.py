from fastapi import Depends

from folio.repos.posts_repo import FilePostsRepo
from folio.services.posts_service import PostsService
from folio.settings import Settings, settings


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_posts_repo(current_settings: Settings = Depends(get_settings)):
    return FilePostsRepo(
        current_settings.CONTENT_ROOT, extension=current_settings.CONTENT_EXTENSION
    )


def get_posts_service(repo=Depends(get_posts_repo)):
    return PostsService(repo=repo)
