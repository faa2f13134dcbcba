"""
Shared fixtures: sample API payloads and a recording mock transport.
"""

import json
import sys
from pathlib import Path

import httpx
import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


SAMPLE_USER = {
    "id": 1,
    "name": "Leanne Graham",
    "username": "Bret",
    "email": "Sincere@april.biz",
    "address": {
        "street": "Kulas Light",
        "suite": "Apt. 556",
        "city": "Gwenborough",
        "zipcode": "92998-3874",
        "geo": {"lat": "-37.3159", "lng": "81.1496"},
    },
    "phone": "1-770-736-8031 x56442",
    "website": "hildegard.org",
    "company": {
        "name": "Romaguera-Crona",
        "catchPhrase": "Multi-layered client-server neural-net",
        "bs": "harness real-time e-markets",
    },
}


def make_post(post_id: int, user_id: int = 42) -> dict:
    return {"userId": user_id, "id": post_id, "title": f"post {post_id}", "body": "body"}


def make_comment(comment_id: int, post_id: int) -> dict:
    return {
        "postId": post_id,
        "id": comment_id,
        "name": f"comment {comment_id}",
        "email": "someone@example.com",
        "body": "Ünïcödé body",
    }


def make_todo(todo_id: int, completed: bool, user_id: int = 1) -> dict:
    return {"userId": user_id, "id": todo_id, "title": f"todo {todo_id}", "completed": completed}


class RecordingTransport(httpx.MockTransport):
    """
    MockTransport serving canned responses keyed by (method, path).

    Unknown routes answer 404. Every request is recorded in ``requests``.
    """

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.requests = []
        super().__init__(self._handle)

    def add(self, method: str, path: str, response):
        self.routes[(method, path)] = response

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={})
        if callable(route):
            return route(request)
        if isinstance(route, httpx.Response):
            return route
        return httpx.Response(200, text=json.dumps(route))

    @property
    def paths(self):
        return [request.url.path for request in self.requests]


@pytest.fixture
def transport():
    """Create an empty RecordingTransport."""
    return RecordingTransport()


@pytest.fixture
def sample_user_dict():
    """Return a fresh copy of the sample user payload."""
    return json.loads(json.dumps(SAMPLE_USER))
