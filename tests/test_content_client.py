import pytest
import requests

import content_client
from content_client import ContentClient
from errors import ContentError


class FakeResponse:
    def __init__(self, payload=None, status_code=200):
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class FakeSession:
    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append((url, params, timeout))
        return self.responses.pop(0)


def _client(*responses) -> tuple[ContentClient, FakeSession]:
    session = FakeSession(*responses)
    client = ContentClient(
        project_id="proj",
        dataset="production",
        api_version="2024-01-01",
        use_cdn=True,
        session=session,
        timeout=5,
    )
    return client, session


def test_fetch_events_hits_query_endpoint() -> None:
    client, session = _client(FakeResponse({"result": [{"_id": "e1", "title": "Janmashtami"}]}))
    events = client.fetch_events()
    assert events == [{"_id": "e1", "title": "Janmashtami"}]
    url, params, timeout = session.calls[0]
    assert url == "https://proj.apicdn.sanity.io/v2024-01-01/data/query/production"
    assert params["query"].startswith('*[_type == "event" && status == "published"]')
    assert timeout == 5


def test_query_url_without_cdn() -> None:
    client = ContentClient(project_id="proj", dataset="staging", use_cdn=False, session=FakeSession())
    assert client.query_url.startswith("https://proj.api.sanity.io/")
    assert client.query_url.endswith("/data/query/staging")


def test_fetch_posts_pagination_and_has_more() -> None:
    posts = [{"_id": str(i)} for i in range(3)]
    client, session = _client(FakeResponse({"result": posts}), FakeResponse({"result": posts[:1]}))

    page = client.fetch_posts(offset=0, limit=3)
    assert page.posts == posts
    assert page.has_more is True
    assert "[0...3]" in session.calls[0][1]["query"]

    page = client.fetch_posts(offset=3, limit=3, category="Festivals")
    assert page.has_more is False
    query = session.calls[1][1]["query"]
    assert "[3...6]" in query
    assert '&& category == "Festivals"' in query


def test_posts_query_escapes_category() -> None:
    query = content_client.build_posts_query(0, 10, 'a"b')
    assert 'category == "a\\"b"' in query


def test_fetch_categories_dedupes_and_drops_empty() -> None:
    client, _ = _client(FakeResponse({"result": ["Festivals", None, "Philosophy", "Festivals", ""]}))
    assert client.fetch_categories() == ["Festivals", "Philosophy"]


def test_http_error_becomes_content_error() -> None:
    client, _ = _client(FakeResponse({"error": "nope"}, status_code=500))
    with pytest.raises(ContentError):
        client.fetch_gallery_albums()


def test_bad_payload_becomes_content_error() -> None:
    client, _ = _client(FakeResponse(ValueError("not json")))
    with pytest.raises(ContentError):
        client.fetch_events()

    client, _ = _client(FakeResponse({"unexpected": True}))
    with pytest.raises(ContentError):
        client.fetch_events()


def test_image_url_from_reference() -> None:
    client, _ = _client()
    image = {"_type": "image", "asset": {"_ref": "image-abc123-800x600-jpg"}}
    assert client.image_url(image) == (
        "https://cdn.sanity.io/images/proj/production/abc123-800x600.jpg"
    )
    assert client.image_url(image, width=400).endswith("abc123-800x600.jpg?w=400")
    assert client.image_url({"_id": "image-xyz-10x10-png"}, height=5).endswith("xyz-10x10.png?h=5")
    assert client.image_url(None) is None
    assert client.image_url({"asset": {"_ref": "file-abc-pdf"}}) is None


def test_non_object_records_become_content_error() -> None:
    client, _ = _client(FakeResponse({"result": ["x"]}))
    with pytest.raises(ContentError):
        client.fetch_gallery_albums()
