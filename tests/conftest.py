import pytest

from contentful_cleanup.config import ContentfulConfig
from contentful_cleanup.errors import RateLimited
from contentful_cleanup.models import Page


def make_asset(asset_id, title="Title", file_name="file.png", created_by="user-1"):
    return {
        "sys": {
            "id": asset_id,
            "createdAt": "2024-01-01T00:00:00.000Z",
            "updatedAt": "2024-01-02T00:00:00.000Z",
            "publishedAt": "2024-01-03T00:00:00.000Z",
            "createdBy": {"sys": {"type": "Link", "linkType": "User", "id": created_by}},
        },
        "fields": {
            "title": {"en-US": title},
            "file": {"en-US": {"fileName": file_name, "contentType": "image/png"}},
        },
    }


def make_user(user_id, first="Ada", last="Lovelace"):
    return {"sys": {"id": user_id}, "firstName": first, "lastName": last}


class DummyResponse:
    def __init__(self, status_code=200, payload=None, headers=None):
        self.status_code = status_code
        self.payload = payload if payload is not None else {}
        self.headers = headers or {}

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        return self.payload


class DummySession:
    """Records GET calls and replays queued responses"""

    def __init__(self, responses=None):
        self.responses = list(responses or [])
        self.calls = []
        self.closed = False

    def get(self, url, headers=None, params=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "params": params, "timeout": timeout})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def close(self):
        self.closed = True


class FakeClient:
    """Serves assets, users and link counts from memory, page by page"""

    def __init__(self, assets=None, users=None, links=None, limit=2, rate_limited=None):
        self.assets = list(assets or [])
        self.users = list(users or [])
        self.links = dict(links or {})
        self.limit = limit
        self.rate_limited = dict(rate_limited or {})
        self.asset_calls = []
        self.user_calls = []
        self.link_calls = []
        self.closed = False

    def _page(self, items, skip):
        return Page(total=len(items), limit=self.limit, skip=skip, items=items[skip:skip + self.limit])

    def get_assets(self, skip=0):
        self.asset_calls.append(skip)
        return self._page(self.assets, skip)

    def get_users(self, skip=0):
        self.user_calls.append(skip)
        return self._page(self.users, skip)

    def get_linked_entries(self, asset_id, skip=0):
        self.link_calls.append(asset_id)
        if self.rate_limited.get(asset_id, 0) > 0:
            self.rate_limited[asset_id] -= 1
            raise RateLimited("rate limited", status=429)
        return Page(total=self.links.get(asset_id, 0), limit=1, skip=0, items=[])

    def close(self):
        self.closed = True


@pytest.fixture
def config(tmp_path):
    return ContentfulConfig(
        space_id="space",
        environment_id="master",
        cma_token="cma-token",
        cda_token="cda-token",
        cma_base_url="https://api.example.test",
        cda_base_url="https://cdn.example.test",
        log_file=str(tmp_path / "cleanup_log.txt"),
    )


@pytest.fixture
def no_sleep(monkeypatch):
    """Replace time.sleep with a recorder"""
    sleeps = []
    monkeypatch.setattr("contentful_cleanup.links.time.sleep", lambda seconds: sleeps.append(seconds))
    return sleeps
