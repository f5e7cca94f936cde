import json

import httpx
import pytest

from ascii_studio.connections.gateway_client import GatewayClient

GATEWAY = "http://gateway.test"


class RecordingTransport:
    """Collects every request the gateway client sends and answers via ``handler``."""

    def __init__(self, handler):
        self.handler = handler
        self.requests = []
        self.transport = httpx.MockTransport(self._handle)

    async def _handle(self, request):
        self.requests.append(request)
        response = self.handler(request)
        if not isinstance(response, httpx.Response):
            response = await response
        return response

    def bodies(self):
        return [json.loads(r.content) if r.content else None for r in self.requests]


def art(font, ascii_art=None, metadata=None):
    return {
        "ascii_art": ascii_art if ascii_art is not None else f"<{font}>",
        "font_used": font,
        "metadata": metadata if metadata is not None else {},
    }


@pytest.fixture
def make_client():
    """Build a GatewayClient over a recording mock transport."""
    def _make(handler):
        recorder = RecordingTransport(handler)
        client = GatewayClient(base_url=GATEWAY, timeout=5, transport=recorder.transport)
        return client, recorder
    return _make
