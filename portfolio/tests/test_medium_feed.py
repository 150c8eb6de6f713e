# portfolio/tests/test_medium_feed.py
import pytest
import requests

from portfolio.feeds import MediumFeed, UpstreamError, normalize_handle
from portfolio.feeds.medium import DEFAULT_USER_AGENT
from conftest import FakeResponse, FakeSession, make_feed

def test_normalize_handle():
    assert normalize_handle("@foo") == "foo"
    assert normalize_handle("foo") == "foo"
    assert normalize_handle("  @foo ") == "foo"
    assert normalize_handle("@") == ""
    assert normalize_handle(None) == ""

def test_fetch_sends_single_get_with_user_agent():
    session = FakeSession(FakeResponse(200, make_feed(2)))
    feed = MediumFeed("foo", session=session)
    articles = feed.fetch_articles()

    assert len(articles) == 2
    assert len(session.calls) == 1
    url, kwargs = session.calls[0]
    assert url == "https://medium.com/feed/@foo"
    assert kwargs["headers"]["User-Agent"] == DEFAULT_USER_AGENT

def test_url_template_from_env(monkeypatch):
    monkeypatch.setenv("MEDIUM_FEED_URL", "https://mirror.local/{username}.xml")
    assert MediumFeed("bar", session=FakeSession()).url == "https://mirror.local/bar.xml"

def test_non_success_status_raises():
    feed = MediumFeed("foo", session=FakeSession(FakeResponse(404, "nope")))
    with pytest.raises(UpstreamError) as exc:
        feed.fetch()
    assert exc.value.status_code == 404

def test_network_error_raises():
    feed = MediumFeed("foo", session=FakeSession(exc=requests.ConnectionError("boom")))
    with pytest.raises(UpstreamError):
        feed.fetch()

def test_username_is_used_as_given():
    # a normalização é feita uma única vez, no endpoint
    assert MediumFeed("@foo", session=FakeSession()).url == "https://medium.com/feed/@@foo"
