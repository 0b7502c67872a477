from __future__ import annotations

import logging
import re
from typing import Any

import requests

from errors import ContentError
from models import PostPage
from temple_api import config

log = logging.getLogger(__name__)


EVENTS_QUERY = """
*[_type == "event" && status == "published"] | order(startDate asc) {
  _id,
  title,
  slug,
  shortDescription,
  startDate,
  endDate,
  venue,
  poster,
  category,
  featured,
  registrationRequired,
  registrationLink
}
"""

GALLERY_QUERY = """
*[_type == "galleryAlbum"] | order(publishedAt desc) {
  _id,
  title,
  description,
  coverPhoto,
  photos,
  event->{
    title,
    slug
  }
}
"""

POSTS_QUERY = """
*[_type == "post"{category_filter}] | order(publishedAt desc) [{start}...{end}] {{
  _id,
  title,
  slug,
  excerpt,
  featuredImage,
  category,
  tags,
  author,
  publishedAt,
  featured,
  readingTime
}}
"""

CATEGORIES_QUERY = '*[_type == "post" && defined(category)].category'

IMAGE_CDN_URL = "https://cdn.sanity.io/images"
_IMAGE_REF_RE = re.compile(r"image-(?P<id>[A-Za-z0-9]+)-(?P<dims>\d+x\d+)-(?P<ext>[a-z0-9]+)")


def _escape(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def build_posts_query(offset: int = 0, limit: int = 10, category: str | None = None) -> str:
    category_filter = f' && category == "{_escape(category)}"' if category else ""
    return POSTS_QUERY.format(
        category_filter=category_filter,
        start=offset,
        end=offset + limit,
    )


class ContentClient:
    """Read-only client for the CMS query API."""

    def __init__(
        self,
        project_id: str | None = None,
        dataset: str | None = None,
        api_version: str | None = None,
        use_cdn: bool | None = None,
        session: requests.Session | None = None,
        timeout: int | None = None,
    ):
        self.project_id = project_id or config.CMS_PROJECT_ID
        self.dataset = dataset or config.CMS_DATASET
        self.api_version = api_version or config.CMS_API_VERSION
        self.use_cdn = config.CMS_USE_CDN if use_cdn is None else use_cdn
        self.timeout = timeout or config.CMS_TIMEOUT_SECONDS
        self.session = session or requests.Session()

    @property
    def query_url(self) -> str:
        host = "apicdn" if self.use_cdn else "api"
        return (
            f"https://{self.project_id}.{host}.sanity.io"
            f"/v{self.api_version}/data/query/{self.dataset}"
        )

    def fetch(self, query: str) -> Any:
        """Run a GROQ query and return its ``result``."""
        try:
            response = self.session.get(
                self.query_url,
                params={"query": query.strip()},
                timeout=self.timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as exc:
            log.warning("Content query failed: %s", exc)
            raise ContentError(f"Content query failed: {exc}") from exc
        if not isinstance(payload, dict) or "result" not in payload:
            log.warning("Content query returned unexpected payload")
            raise ContentError("Content query returned unexpected payload")
        return payload["result"]

    def _fetch_list(self, query: str) -> list[dict[str, Any]]:
        result = self.fetch(query)
        if result is None:
            return []
        if not isinstance(result, list):
            raise ContentError("Expected a list of records")
        if not all(isinstance(record, dict) for record in result):
            log.warning("Content query returned non-object records")
            raise ContentError("Expected a list of records")
        return result

    def fetch_events(self) -> list[dict[str, Any]]:
        return self._fetch_list(EVENTS_QUERY)

    def fetch_gallery_albums(self) -> list[dict[str, Any]]:
        return self._fetch_list(GALLERY_QUERY)

    def fetch_posts(
        self,
        offset: int = 0,
        limit: int | None = None,
        category: str | None = None,
    ) -> PostPage:
        limit = limit or config.POSTS_PAGE_SIZE
        posts = self._fetch_list(build_posts_query(offset, limit, category))
        return PostPage(posts=posts, has_more=len(posts) == limit)

    def fetch_categories(self) -> list[str]:
        result = self.fetch(CATEGORIES_QUERY) or []
        if not isinstance(result, list):
            raise ContentError("Expected a list of categories")
        categories: list[str] = []
        for item in result:
            if isinstance(item, dict):
                item = item.get("category")
            if item and isinstance(item, str) and item not in categories:
                categories.append(item)
        return categories

    def image_url(
        self,
        source: Any,
        width: int | None = None,
        height: int | None = None,
    ) -> str | None:
        """Build a CDN URL for an image field, asset object or asset ref."""
        ref = source
        if isinstance(ref, dict):
            ref = ref.get("asset", ref)
        if isinstance(ref, dict):
            ref = ref.get("_ref") or ref.get("_id")
        if not isinstance(ref, str):
            return None
        match = _IMAGE_REF_RE.fullmatch(ref)
        if not match:
            return None
        url = (
            f"{IMAGE_CDN_URL}/{self.project_id}/{self.dataset}/"
            f"{match['id']}-{match['dims']}.{match['ext']}"
        )
        params = []
        if width:
            params.append(f"w={width}")
        if height:
            params.append(f"h={height}")
        if params:
            url += "?" + "&".join(params)
        return url
