import asyncio
import datetime
import logging
from typing import Any, Awaitable, Callable, Dict, Iterable, List, Optional

from folio.locales import CHINESE, ENGLISH, UnsupportedLocaleError, is_supported
from folio.schemas.blog import BlogPost, BlogPostMetadata
from folio.services.content_parser import parse_front_matter
from folio.services.markdown_renderer import render_markdown
from folio.services.reading_time import calculate_reading_time

logger = logging.getLogger(__name__)

METADATA_DEFAULTS = {"title": "", "date": "", "summary": ""}


class PostsService:
    def __init__(
        self,
        repo,
        renderer: Optional[Callable[[str], Awaitable[str]]] = None,
    ):
        self.repo = repo
        self.renderer = renderer or render_markdown

    async def get_post(self, slug: str, locale: str = ENGLISH) -> Optional[BlogPost]:
        """
        Load and render one post.

        Returns None when no file exists for the slug. Unsupported locales
        raise UnsupportedLocaleError; malformed front matter or markdown
        propagates to the caller.
        """
        if not is_supported(locale):
            raise UnsupportedLocaleError(locale)
        if not self.repo.exists(locale, slug):
            return None

        raw = await self.repo.read(locale, slug)
        parsed = parse_front_matter(raw)
        source = await self.renderer(parsed.body)
        reading_time = calculate_reading_time(parsed.body, locale)

        return BlogPost(
            source=source,
            metadata=build_metadata(parsed.metadata, reading_time),
            slug=slug,
            locale=locale,
        )

    async def get_blog_posts(self, locale: str = ENGLISH) -> List[BlogPost]:
        """All posts for a locale. Never raises; failures are logged."""
        try:
            slugs = self.repo.list_slugs(locale)
        except Exception as e:
            logger.error(f"Error getting blog posts for locale {locale}: {e}")
            return []

        results = await asyncio.gather(
            *(self.get_post(slug, locale) for slug in slugs),
            return_exceptions=True,
        )

        posts = []
        for slug, result in zip(slugs, results):
            if isinstance(result, BaseException):
                logger.warning(f"Failed to load post {slug} ({locale}): {result}")
                continue
            # The file may have vanished between listing and loading
            if result is not None:
                posts.append(result)
        return posts

    def get_available_locales(self, slug: str, locales: Iterable[str]) -> List[str]:
        """Locales, in the given order, that have a file for this slug."""
        available = []
        for locale in locales:
            if not is_supported(locale):
                logger.debug(f"Skipping unsupported locale {locale} for {slug}")
                continue
            if self.repo.exists(locale, slug):
                available.append(locale)
        return available

    def has_chinese_version(self, slug: str) -> bool:
        return bool(self.get_available_locales(slug, [CHINESE]))

    def has_english_version(self, slug: str) -> bool:
        return bool(self.get_available_locales(slug, [ENGLISH]))


def build_metadata(front_matter: Dict[str, Any], reading_time: int) -> BlogPostMetadata:
    """
    Merge defaults, the computed reading time and the author's front matter.

    Front matter is applied last, so an explicit ``readingTime`` wins over the
    computed one.
    """
    raw = {}
    for key, value in front_matter.items():
        # A blank key in YAML means "not set"; keep the default or computed value
        if value is None and (key in METADATA_DEFAULTS or key == "readingTime"):
            continue
        value = _convert_date(value)
        if key in METADATA_DEFAULTS and isinstance(value, (bool, int, float)):
            value = str(value)
        raw[key] = value
    return BlogPostMetadata.model_validate(
        {**METADATA_DEFAULTS, "readingTime": reading_time, **raw}
    )


def _convert_date(value):
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    return value
