"""Pytest configuration and fixtures."""

import io
import json

import httpx
import pytest
from PIL import Image


def make_scores(**overrides):
    """A complete score set, zero everywhere except for the given emotions."""
    scores = {
        "anger": 0.0, "contempt": 0.0, "disgust": 0.0, "fear": 0.0,
        "happiness": 0.0, "neutral": 0.0, "sadness": 0.0, "surprise": 0.0,
    }
    scores.update(overrides)
    return scores


def make_hit(top=0, left=0, width=100, height=100, **scores):
    return {
        "faceRectangle": {"top": top, "left": left, "width": width, "height": height},
        "scores": make_scores(**scores),
    }


@pytest.fixture
def png_bytes():
    """A small RGBA PNG, so encoding has to drop the alpha channel."""
    buffer = io.BytesIO()
    Image.new("RGBA", (64, 48), (200, 120, 40, 255)).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def happy_reply():
    return [make_hit(top=0, left=0, width=100, height=100, anger=0.1, happiness=0.9)]


@pytest.fixture
def recorder():
    """Collects the requests a mock transport receives."""
    return []


@pytest.fixture
async def mock_http(recorder):
    """
    Build an AsyncClient whose transport answers every request with the given
    body, or raises the given exception. Clients are closed after the test.
    """
    clients = []

    def factory(body=b"", status_code=200, raises=None):
        def handler(request):
            recorder.append(request)
            if raises is not None:
                raise raises
            content = body if isinstance(body, bytes) else json.dumps(body).encode("utf-8")
            return httpx.Response(status_code, content=content)
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield factory

    for client in clients:
        await client.aclose()
