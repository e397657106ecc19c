import textwrap
from pathlib import Path

import pytest

from folio.locales import UnsupportedLocaleError, is_supported
from folio.repos.posts_repo import FilePostsRepo
from folio.schemas.blog import BlogPost, BlogPostMetadata


def write_post(root: Path, locale: str, slug: str, text: str, extension: str = ".mdx") -> Path:
    """Write a dedented post file under ``root/<locale>/``."""
    directory = root / locale
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{slug}{extension}"
    path.write_text(textwrap.dedent(text).lstrip(), encoding="utf-8")
    return path


@pytest.fixture
def content_root(tmp_path) -> Path:
    root = tmp_path / "content" / "blog"
    (root / "en").mkdir(parents=True)
    (root / "zh").mkdir(parents=True)
    return root


@pytest.fixture
def repo(content_root) -> FilePostsRepo:
    return FilePostsRepo(content_root)


def make_post(slug: str, date: str = "", locale: str = "en", **extra) -> BlogPost:
    return BlogPost(
        metadata=BlogPostMetadata(
            title=slug.replace("-", " ").title(), date=date, readingTime=1, **extra
        ),
        slug=slug,
        source=f"<p>{slug}</p>",
        locale=locale,
    )


class FakeRepo:
    """
    Minimal repo stand-in: ``files`` maps (locale, slug) -> raw text.
    ``listed`` can name slugs that are listed but have no file.
    """

    def __init__(self, files: dict, listed: dict | None = None):
        self.files = files
        self.listed = listed or {}

    def list_slugs(self, locale: str):
        if not is_supported(locale):
            raise UnsupportedLocaleError(locale)
        if locale in self.listed:
            return list(self.listed[locale])
        return [slug for (loc, slug) in self.files if loc == locale]

    def exists(self, locale: str, slug: str) -> bool:
        if not is_supported(locale):
            raise UnsupportedLocaleError(locale)
        return (locale, slug) in self.files

    async def read(self, locale: str, slug: str) -> str:
        return textwrap.dedent(self.files[(locale, slug)]).lstrip()


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(
        self,
        blog_posts_return=None,
        get_post_return=None,
        get_post_error: Exception | None = None,
        available_locales=None,
    ):
        self._blog_posts_return = blog_posts_return or []
        self._get_post_return = get_post_return
        self._get_post_error = get_post_error
        self._available_locales = available_locales or {}
        self.calls = []

    async def get_blog_posts(self, locale: str = "en"):
        self.calls.append(("get_blog_posts", locale))
        return self._blog_posts_return

    async def get_post(self, slug: str, locale: str = "en"):
        self.calls.append(("get_post", slug, locale))
        if self._get_post_error:
            raise self._get_post_error
        return self._get_post_return

    def get_available_locales(self, slug: str, locales):
        self.calls.append(("get_available_locales", slug, tuple(locales)))
        return [loc for loc in locales if loc in self._available_locales.get(slug, ())]
