from __future__ import annotations

from pathlib import Path

from productframe.errors import DecodeError, EncodeOrWriteError


def read_input_file(path: str | Path, *, label: str) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise DecodeError(f"{label}: cannot read {path} ({exc.strerror or exc})") from exc


def save_result_file(data: bytes, output_path: str | Path) -> Path:
    destination = Path(output_path)
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_bytes(data)
    except OSError as exc:
        raise EncodeOrWriteError(f"cannot write output {destination}: {exc}") from exc
    return destination
