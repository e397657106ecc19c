import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from folio import dependencies as deps
from folio.locales import SUPPORTED_LOCALES, UnsupportedLocaleError, is_supported
from folio.schemas.blog import BlogPost, PostLocales
from folio.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_model=List[BlogPost])
async def list_posts(
    locale: str = "en",
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get all posts for a locale, newest first."""
    if not is_supported(locale):
        raise HTTPException(status_code=400, detail=f"Unsupported locale: {locale}")
    try:
        posts = await service.get_blog_posts(locale)
    except Exception as e:
        logger.error(f"Unexpected error listing posts for {locale}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")
    return sort_posts_by_date(posts)


@router.get("/posts/{slug}", response_model=BlogPost)
async def get_post(
    slug: str,
    locale: str = "en",
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single rendered post by slug."""
    try:
        post = await service.get_post(slug, locale)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        return post
    except HTTPException:
        raise
    except UnsupportedLocaleError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug} ({locale}): {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")


@router.get("/posts/{slug}/locales", response_model=PostLocales)
def get_post_locales(
    slug: str,
    locales: Optional[List[str]] = Query(None),
    service: PostsService = Depends(deps.get_posts_service),
):
    """Which locales have a version of this post."""
    candidates = locales or list(SUPPORTED_LOCALES)
    return PostLocales(
        slug=slug, locales=service.get_available_locales(slug, candidates)
    )


def sort_posts_by_date(posts: List[BlogPost]) -> List[BlogPost]:
    return sorted(posts, key=lambda p: p.metadata.date or "0000-01-01", reverse=True)
