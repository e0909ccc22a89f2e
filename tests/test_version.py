"""Tests for magic header detection."""
import pytest

from locres.config import MAGIC
from locres.errors import InvalidVersionError, TruncatedDataError
from locres.format.version import Version, detect_version


def test_versions_are_ordered():
    assert Version.LEGACY < Version.COMPACT < Version.OPTIMIZED < Version.OPTIMIZED_CITYHASH
    assert Version.OPTIMIZED_CITYHASH >= Version.OPTIMIZED


@pytest.mark.parametrize("version", list(Version))
def test_magic_then_version_byte(reader_for, version):
    reader = reader_for(MAGIC + bytes([version]) + b"\x00" * 8)

    assert detect_version(reader) is version
    assert reader.tell() == 17


def test_missing_magic_rewinds_to_start(reader_for):
    reader = reader_for(b"\x01\x00\x00\x00" + b"x" * 20)

    assert detect_version(reader) is Version.LEGACY
    assert reader.tell() == 0


def test_magic_off_by_one_byte_is_legacy(reader_for):
    near_magic = MAGIC[:-1] + bytes([MAGIC[-1] ^ 0x01])
    reader = reader_for(near_magic + b"\x02")

    assert detect_version(reader) is Version.LEGACY
    assert reader.tell() == 0
    assert reader.read_bytes(16) == near_magic


def test_unknown_version_byte(reader_for):
    reader = reader_for(MAGIC + b"\x04")

    with pytest.raises(InvalidVersionError) as excinfo:
        detect_version(reader)

    assert excinfo.value.version == 4
    assert "Invalid version 4" in str(excinfo.value)


def test_missing_version_byte_after_magic(reader_for):
    with pytest.raises(TruncatedDataError):
        detect_version(reader_for(MAGIC))


def test_source_shorter_than_magic(reader_for):
    with pytest.raises(TruncatedDataError):
        detect_version(reader_for(b"\x00" * 10))
