# portfolio/tests/conftest.py
import pytest

RSS_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<rss xmlns:dc="http://purl.org/dc/elements/1.1/" xmlns:content="http://purl.org/rss/1.0/modules/content/" version="2.0">
<channel>
<title><![CDATA[Stories by Foo on Medium]]></title>
<link>https://medium.com/@foo</link>
{items}
</channel>
</rss>"""

def make_item(n, pub_date="Mon, 01 Jan 2024 10:00:00 GMT"):
    return (
        "<item>"
        f"<title><![CDATA[Post {n}]]></title>"
        f"<link>https://medium.com/@foo/post-{n}</link>"
        f"<dc:creator><![CDATA[Foo Bar]]></dc:creator>"
        f"<pubDate>{pub_date}</pubDate>"
        f"<description><![CDATA[<p>Summary {n}</p>]]></description>"
        "</item>"
    )

def make_feed(n_items=0, extra=""):
    items = "".join(make_item(i) for i in range(1, n_items + 1)) + extra
    return RSS_TEMPLATE.format(items=items)


class FakeResponse:
    def __init__(self, status_code=200, text="", payload=None):
        self.status_code = status_code
        self.text = text
        self._payload = payload

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


class FakeSession:
    """Registra as chamadas GET e devolve uma resposta fixa (ou levanta `exc`)."""

    def __init__(self, response=None, exc=None):
        self.response = response or FakeResponse()
        self.exc = exc
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.exc is not None:
            raise self.exc
        return self.response


class DummyScheduler:
    """Guarda jobs 'date' e só os executa quando o teste avança o relógio."""

    def __init__(self):
        self.jobs = []

    def add_job(self, func, trigger, run_date=None, **kwargs):
        assert trigger == "date"
        self.jobs.append((run_date, func))

    def run_until(self, moment):
        due = sorted((j for j in self.jobs if j[0] <= moment), key=lambda j: j[0])
        self.jobs = [j for j in self.jobs if j[0] > moment]
        for _, func in due:
            func()

    def shutdown(self, wait=False):
        pass


@pytest.fixture()
def fake_session(monkeypatch):
    from portfolio.feeds import medium
    session = FakeSession(FakeResponse(200, make_feed(3)))
    monkeypatch.setattr(medium, "_SESSION", session, raising=True)
    return session

@pytest.fixture()
def app(fake_session):
    from portfolio.api import main as api_main
    return api_main.app

@pytest.fixture()
def client(app):
    from fastapi.testclient import TestClient
    with TestClient(app) as c:
        yield c

@pytest.fixture()
def store(tmp_path):
    from portfolio.storage.preferences import PreferenceStore
    return PreferenceStore(str(tmp_path / "preferences.json"))

@pytest.fixture()
def scheduler():
    return DummyScheduler()
