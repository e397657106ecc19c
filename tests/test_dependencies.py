from pathlib import Path

from folio.dependencies import get_posts_repo, get_posts_service, get_settings
from folio.repos.posts_repo import FilePostsRepo
from folio.services.posts_service import PostsService
from folio.settings import Settings, settings


def test_get_settings_returns_global_instance():
    assert get_settings() is settings


def test_get_posts_repo_uses_settings():
    s = Settings(CONTENT_ROOT=Path("/tmp/blog"), CONTENT_EXTENSION=".md")

    repo = get_posts_repo(current_settings=s)

    assert isinstance(repo, FilePostsRepo)
    assert repo.content_root == Path("/tmp/blog")
    assert repo.extension == ".md"


def test_get_posts_service_constructs_service():
    class FakeRepo:
        pass

    repo = FakeRepo()
    svc = get_posts_service(repo=repo)

    assert isinstance(svc, PostsService)
    assert svc.repo is repo
