from __future__ import annotations

import io

import pytest

from locres.format.primitives import BinaryReader


@pytest.fixture
def reader_for():
    """Return a factory wrapping raw bytes in a BinaryReader."""
    def _make(data: bytes) -> BinaryReader:
        return BinaryReader(io.BytesIO(data))
    return _make


@pytest.fixture
def write_locres(tmp_path):
    """Return a factory writing bytes to a .locres file under tmp_path."""
    def _write(data: bytes, name: str = "Game.locres"):
        path = tmp_path / name
        path.write_bytes(data)
        return path
    return _write
