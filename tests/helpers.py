import asyncio
import json
import threading

import httpx

RICK = {"id": 1, "name": "Rick", "status": "Alive", "species": "Human", "image": "u1"}
MORTY = {"id": 2, "name": "Morty Smith", "status": "Alive", "species": "Human", "image": "u2"}
BIRDPERSON = {"id": 47, "name": "Birdperson", "status": "Dead", "species": "Alien", "image": "u47"}


def page_payload(*characters: dict) -> dict:
    items = list(characters) if characters else [RICK, MORTY, BIRDPERSON]
    return {"info": {"count": len(items), "pages": 1, "next": None, "prev": None}, "results": items}


class RecordingTransport(httpx.MockTransport):
    """Serves a canned response and records every outbound request."""

    def __init__(self, *, json_body=None, status_code: int = 200, content: bytes | None = None, error: Exception | None = None):
        self.requests: list[httpx.Request] = []
        self.json_body = json_body
        self.status_code = status_code
        self.content = content
        self.error = error
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, content=json.dumps(self.json_body).encode("utf-8"))


class GatedTransport(httpx.MockTransport):
    """Holds every response until ``release`` is set from the test thread."""

    def __init__(self, *, json_body):
        self.release = threading.Event()
        self.requests: list[httpx.Request] = []
        self.json_body = json_body
        super().__init__(self._handle)

    async def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        while not self.release.is_set():
            await asyncio.sleep(0.01)
        return httpx.Response(200, content=json.dumps(self.json_body).encode("utf-8"))
