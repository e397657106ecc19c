from typing import List, Union

from pydantic import BaseModel, ConfigDict


class BlogPostMetadata(BaseModel):
    # Front matter is an open mapping; unknown keys are kept as-is
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    title: str = ""
    date: str = ""
    summary: str = ""
    readingTime: Union[int, str]


class BlogPost(BaseModel):
    metadata: BlogPostMetadata
    slug: str
    source: str  # Rendered HTML
    locale: str


class PostLocales(BaseModel):
    slug: str
    locales: List[str]
