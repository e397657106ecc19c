"""Supported content locales and the directories that hold them."""

from typing import Dict

LOCALE_DIRECTORIES: Dict[str, str] = {
    "en": "en",
    "zh": "zh",
}
SUPPORTED_LOCALES = tuple(LOCALE_DIRECTORIES)
CHINESE = "zh"
ENGLISH = "en"


class UnsupportedLocaleError(ValueError):
    def __init__(self, locale: str):
        self.locale = locale
        super().__init__(
            f"Unsupported locale {locale!r}; expected one of {', '.join(SUPPORTED_LOCALES)}"
        )


def is_supported(locale: str) -> bool:
    return locale in LOCALE_DIRECTORIES


def locale_directory(locale: str) -> str:
    """Map a locale code to its content directory name."""
    try:
        return LOCALE_DIRECTORIES[locale]
    except KeyError:
        raise UnsupportedLocaleError(locale) from None
