import asyncio
import logging
from pathlib import Path
from typing import List, Optional

from folio.locales import locale_directory

logger = logging.getLogger(__name__)


class FilePostsRepo:
    """Locates post files under ``<content_root>/<locale dir>/<slug><extension>``."""

    def __init__(self, content_root: Path, extension: str = ".mdx"):
        self.content_root = Path(content_root)
        self.extension = extension

    def content_dir(self, locale: str) -> Path:
        return self.content_root / locale_directory(locale)

    def list_slugs(self, locale: str) -> List[str]:
        """Slugs of every post file directly inside the locale's directory."""
        directory = self.content_dir(locale)
        return [
            path.name[: -len(self.extension)]
            for path in sorted(directory.iterdir())
            if path.is_file() and path.name.endswith(self.extension)
        ]

    def path_for(self, locale: str, slug: str) -> Optional[Path]:
        if not self._is_safe_slug(slug):
            logger.warning(f"Rejected unsafe slug {slug!r}")
            return None
        return self.content_dir(locale) / f"{slug}{self.extension}"

    def exists(self, locale: str, slug: str) -> bool:
        path = self.path_for(locale, slug)
        return path is not None and path.is_file()

    async def read(self, locale: str, slug: str) -> str:
        path = self.path_for(locale, slug)
        if path is None:
            raise FileNotFoundError(f"No post file for slug {slug!r}")
        return await asyncio.to_thread(path.read_text, encoding="utf-8")

    @staticmethod
    def _is_safe_slug(slug: str) -> bool:
        return (
            bool(slug)
            and "/" not in slug
            and "\\" not in slug
            and slug not in (".", "..")
        )
