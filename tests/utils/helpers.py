"""Fake upstream/downstream services for notifier tests."""

from typing import Any

import httpx

BRIGHTCOVE_HOST = "cms.brightcove.test"
OAUTH_HOST = "oauth.brightcove.test"
CMS_NOTIFIER_HOST = "cms-notifier.test"


def token_body(token: str) -> dict[str, Any]:
    """Brightcove OAuth access token response."""
    return {"access_token": token, "token_type": "Bearer", "expires_in": 300}


class FakeServices:
    """In-memory Brightcove CMS, Brightcove OAuth and CMS notifier.

    Each service answers from its own list of (status, body) pairs, consumed in
    order; the last pair keeps answering once the list is down to one.
    A body of type Exception is raised instead of answered.
    """

    def __init__(self):
        self.responses: dict[str, list[tuple[int, Any]]] = {
            BRIGHTCOVE_HOST: [(200, {})],
            OAUTH_HOST: [(200, token_body("fresh-token"))],
            CMS_NOTIFIER_HOST: [(200, None)],
        }
        self.requests: list[httpx.Request] = []

    def answer(self, host: str, *responses: tuple[int, Any]) -> None:
        self.responses[host] = list(responses)

    def requests_to(self, host: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.host == host]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        queue = self.responses[request.url.host]
        status_code, body = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(body, Exception):
            raise body
        if body is None:
            return httpx.Response(status_code)
        if isinstance(body, str):
            return httpx.Response(status_code, text=body)
        return httpx.Response(status_code, json=body)
