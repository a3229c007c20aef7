from __future__ import annotations

import json
from collections.abc import Callable

import httpx
import pytest


def file_entry(path: str, contents: str) -> dict:
    return {
        "name": path.rsplit("/", 1)[-1],
        "type": "file",
        "contents": contents,
        "fullPath": path,
    }


def dir_entry(path: str) -> dict:
    return {"name": path.rsplit("/", 1)[-1], "type": "directory", "fullPath": path}


def project_payload(app_files: dict[str, dict]) -> dict:
    return {"project": {"appFiles": app_files}}


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture
def serve_json():
    """Return a factory: payload -> (client, transport) answering every GET with *payload*."""
    clients: list[httpx.Client] = []

    def _factory(payload, status_code: int = 200):
        body = payload if isinstance(payload, bytes) else json.dumps(payload).encode("utf-8")
        transport = RecordingTransport(
            lambda request: httpx.Response(
                status_code, content=body, headers={"Content-Type": "application/json"}
            )
        )
        client = httpx.Client(transport=transport)
        clients.append(client)
        return client, transport

    yield _factory
    for c in clients:
        c.close()
