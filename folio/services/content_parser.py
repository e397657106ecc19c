from typing import Any, Dict, NamedTuple

import frontmatter


class ParsedContent(NamedTuple):
    metadata: Dict[str, Any]
    body: str


def parse_front_matter(raw: str) -> ParsedContent:
    """Split a post file into its front-matter mapping and markdown body."""
    # A leading BOM hides the opening fence from python-frontmatter
    raw = raw.lstrip("\ufeff")
    parsed = frontmatter.loads(raw)
    return ParsedContent(metadata=dict(parsed.metadata or {}), body=parsed.content)
