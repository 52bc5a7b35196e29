from __future__ import annotations

import json
import logging

from fastapi import APIRouter, File, Form, HTTPException, Response, UploadFile, status

from productframe.canvas.codec import encode_png
from productframe.canvas.pipeline import render_composite
from productframe.config import settings
from productframe.errors import DecodeError, EncodeOrWriteError, InvalidArgument


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/composites", tags=["composites"])


def _read_upload(upload: UploadFile, field: str) -> bytes:
    try:
        data = upload.file.read(settings.max_upload_bytes + 1)
    finally:
        try:
            upload.file.close()
        except OSError:
            pass
    if len(data) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"{field} exceeds {settings.max_upload_bytes} bytes",
        )
    return data


def _load_options(raw: str) -> dict:
    try:
        options = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise HTTPException(status_code=400, detail=f"options is not valid JSON: {exc.msg}") from exc
    if not isinstance(options, dict):
        raise HTTPException(status_code=400, detail="options must be a JSON object")
    return options


@router.post(
    "",
    response_class=Response,
    responses={200: {"content": {"image/png": {}}}},
)
def create_composite(
    product: UploadFile = File(...),
    overlay: UploadFile = File(...),
    options: str = Form(...),
) -> Response:
    parsed_options = _load_options(options)
    product_bytes = _read_upload(product, "product")
    overlay_bytes = _read_upload(overlay, "overlay")

    try:
        result = render_composite(product_bytes, overlay_bytes, parsed_options)
        body = encode_png(result)
    except (DecodeError, InvalidArgument) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except EncodeOrWriteError as exc:
        logger.exception("encoding composite failed")
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return Response(content=body, media_type="image/png")
