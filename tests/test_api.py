import io
import json

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from productframe.config import settings
from productframe.main import create_app

RED = (255, 0, 0, 255)
CLEAR = (0, 0, 0, 0)


@pytest.fixture
def client():
    return TestClient(create_app())


def _post(client, product, overlay, options):
    return client.post(
        "/api/v1/composites",
        files={
            "product": ("product.png", product, "image/png"),
            "overlay": ("overlay.png", overlay, "image/png"),
        },
        data={"options": options if isinstance(options, str) else json.dumps(options)},
    )


def test_health(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_composite_returns_png(client, solid, png_bytes):
    response = _post(
        client,
        png_bytes(solid((10, 10), RED)),
        png_bytes(solid((30, 20), CLEAR)),
        {"backgroundColor": [0, 0, 255, 255], "offsetMode": {"type": "Percent", "value": [0, 0]}},
    )
    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"

    with Image.open(io.BytesIO(response.content)) as img:
        assert img.size == (30, 20)
        assert img.convert("RGBA").getpixel((0, 0)) == RED
        assert img.convert("RGBA").getpixel((29, 19)) == (0, 0, 255, 255)


def test_unknown_mode_is_bad_request(client, solid, png_bytes):
    response = _post(
        client,
        png_bytes(solid((10, 10), RED)),
        png_bytes(solid((30, 20), CLEAR)),
        {"backgroundColor": [0, 0, 255, 255], "resizeMode": {"type": "Diagonal", "value": 2}},
    )
    assert response.status_code == 400
    assert "resize_mode" in response.json()["detail"]


def test_malformed_image_is_bad_request(client, solid, png_bytes):
    response = _post(client, b"garbage", png_bytes(solid((30, 20), CLEAR)), {"backgroundColor": [0, 0, 0, 0]})
    assert response.status_code == 400
    assert "product image" in response.json()["detail"]


@pytest.mark.parametrize("options", ["{not json", "[1, 2, 3]"])
def test_options_must_be_json_object(client, solid, png_bytes, options):
    image = png_bytes(solid((4, 4), RED))
    assert _post(client, image, image, options).status_code == 400


def test_oversized_upload_is_rejected(client, monkeypatch, solid, png_bytes):
    monkeypatch.setattr(settings, "max_upload_bytes", 16)
    image = png_bytes(solid((64, 64), RED))
    response = _post(client, image, image, {"backgroundColor": [0, 0, 0, 0]})
    assert response.status_code == 413
