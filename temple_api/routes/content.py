"""Read-only proxies to the content service."""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query

from content_client import ContentClient
from errors import ContentError
from temple_api.config import POSTS_PAGE_SIZE
from temple_api.dependencies import get_content_client
from temple_api.utils import validate_page
from temple_api.utils.time_utils import is_upcoming

router = APIRouter(prefix="/api/content", tags=["content"])


def _bad_gateway(exc: ContentError) -> HTTPException:
    return HTTPException(status_code=502, detail=str(exc))


@router.get("/events")
def list_events(
    client: Annotated[ContentClient, Depends(get_content_client)],
    upcoming: bool = False,
) -> list[dict[str, object]]:
    """Published events, optionally only those not yet over."""
    try:
        events = client.fetch_events()
    except ContentError as exc:
        raise _bad_gateway(exc) from exc
    if upcoming:
        events = [event for event in events if is_upcoming(event)]
    return events


@router.get("/gallery")
def list_gallery(
    client: Annotated[ContentClient, Depends(get_content_client)],
) -> list[dict[str, object]]:
    """Gallery albums with cover URLs resolved."""
    try:
        albums = client.fetch_gallery_albums()
    except ContentError as exc:
        raise _bad_gateway(exc) from exc
    for album in albums:
        album["coverPhotoUrl"] = client.image_url(album.get("coverPhoto"))
    return albums


@router.get("/posts")
def list_posts(
    client: Annotated[ContentClient, Depends(get_content_client)],
    offset: int = 0,
    limit: int = POSTS_PAGE_SIZE,
    category: Annotated[str | None, Query(max_length=100)] = None,
) -> dict[str, object]:
    """One page of blog posts, newest first."""
    offset, limit = validate_page(offset, limit)
    try:
        page = client.fetch_posts(offset=offset, limit=limit, category=category)
    except ContentError as exc:
        raise _bad_gateway(exc) from exc
    return {
        "posts": page.posts,
        "hasMore": page.has_more,
        "nextOffset": offset + len(page.posts),
    }


@router.get("/categories")
def list_categories(
    client: Annotated[ContentClient, Depends(get_content_client)],
) -> list[str]:
    try:
        return client.fetch_categories()
    except ContentError as exc:
        raise _bad_gateway(exc) from exc
