import math
import re

from folio.locales import CHINESE

# Words (en) or characters (zh) read per minute
READING_SPEED_EN = 225
READING_SPEED_ZH = 350

CODE_BLOCK_RE = re.compile(r"```[\s\S]*?```")
INLINE_CODE_RE = re.compile(r"`[^`]+`")
LINK_RE = re.compile(r"\[([^\]]+)\]\([^)]+\)")
MARKUP_CHARS_RE = re.compile(r"[#*_~`]")
NEWLINES_RE = re.compile(r"\n+")
CJK_RE = re.compile(r"[\u4e00-\u9fff]")
WHITESPACE_RE = re.compile(r"\s+")


def strip_markdown(content: str) -> str:
    """Reduce markdown to the prose a reader actually reads."""
    text = CODE_BLOCK_RE.sub("", content)
    text = INLINE_CODE_RE.sub("", text)
    text = LINK_RE.sub(r"\1", text)
    text = MARKUP_CHARS_RE.sub("", text)
    text = NEWLINES_RE.sub(" ", text)
    return text.strip()


def _count_words(text: str) -> int:
    return len([w for w in WHITESPACE_RE.split(text) if w])


def calculate_reading_time(content: str, locale: str) -> int:
    """
    Estimate reading time in whole minutes for a markdown body.

    Chinese posts count each CJK ideograph as one unit and add any remaining
    whitespace-separated tokens, so mixed-language text is weighted fairly.
    Every other locale counts words. The result is never below one minute.
    """
    text = strip_markdown(content)

    if locale == CHINESE:
        chinese_count = len(CJK_RE.findall(text))
        other_words = _count_words(CJK_RE.sub("", text).strip())
        minutes = math.ceil((chinese_count + other_words) / READING_SPEED_ZH)
    else:
        minutes = math.ceil(_count_words(text) / READING_SPEED_EN)

    return max(1, minutes)
