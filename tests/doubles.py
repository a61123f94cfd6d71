"""
Collaborator doubles shared by the test suite.

Provides: Scripted language model, in-memory Redis, in-memory embeddings,
raw ASGI GET helper
System role: Test doubles for outbound dependencies
"""

import asyncio
from typing import Callable
from urllib.parse import quote


class ScriptedLanguageModel:
    """
    Language model double.

    ``responder`` receives (prompt, model_name) and returns the reply or
    raises. Every call is recorded.
    """

    def __init__(self, responder: Callable[[str, str], str] | None = None, delay: float = 0.0) -> None:
        self.responder = responder or (lambda prompt, model_name: "finding")
        self.delay = delay
        self.calls: list[tuple[str, str]] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def complete(self, prompt: str, model_name: str) -> str:
        self.calls.append((prompt, model_name))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
            return self.responder(prompt, model_name)
        finally:
            self.in_flight -= 1

    def calls_for(self, model_name: str) -> list[str]:
        return [prompt for prompt, name in self.calls if name == model_name]


class InMemoryRedis:
    """Subset of redis.asyncio.Redis used by the cache adapter."""

    def __init__(self) -> None:
        self.store: dict[str, str] = {}
        self.expirations: dict[str, int] = {}
        self.set_calls = 0
        self.closed = False

    async def get(self, key: str) -> str | None:
        return self.store.get(key)

    async def set(self, key: str, value: str, ex: int | None = None) -> bool:
        self.set_calls += 1
        self.store[key] = value
        if ex is not None:
            self.expirations[key] = ex
        return True

    async def ping(self) -> bool:
        return True

    async def aclose(self) -> None:
        self.closed = True


class FixedEmbeddings:
    """Embeddings double returning constant vectors of a fixed size."""

    def __init__(self, size: int = 4) -> None:
        self.size = size
        self.calls: list[list[str]] = []

    async def aembed_documents(self, texts: list[str]) -> list[list[float]]:
        self.calls.append(list(texts))
        return [[float(i % 7) / 7.0] * self.size for i, _ in enumerate(texts)]

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        return [[0.0] * self.size for _ in texts]

    def embed_query(self, text: str) -> list[float]:
        return [0.0] * self.size


async def asgi_get(app, prefix: str, identity: str) -> tuple[int, bytes]:
    """
    Send one GET straight to an ASGI app, the way uvicorn would.

    The identity is percent-encoded once in ``raw_path`` and decoded once
    in ``path``. TestClient unquotes an already-decoded path a second
    time, so it can't show what a real server hands the route.

    Returns:
        tuple: (status code, response body)
    """
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "scheme": "http",
        "path": prefix + identity,
        "raw_path": (prefix + quote(identity, safe="")).encode("ascii"),
        "root_path": "",
        "query_string": b"",
        "headers": [(b"host", b"testserver")],
        "client": ("127.0.0.1", 50000),
        "server": ("testserver", 80),
    }
    messages: list[dict] = []
    request_sent = False
    response_complete = asyncio.Event()

    async def receive() -> dict:
        nonlocal request_sent
        if not request_sent:
            request_sent = True
            return {"type": "http.request", "body": b"", "more_body": False}
        await response_complete.wait()
        return {"type": "http.disconnect"}

    async def send(message: dict) -> None:
        messages.append(message)
        if message["type"] == "http.response.body" and not message.get("more_body", False):
            response_complete.set()

    await app(scope, receive, send)

    start = next(message for message in messages if message["type"] == "http.response.start")
    body = b"".join(message.get("body", b"") for message in messages if message["type"] == "http.response.body")
    return start["status"], body
