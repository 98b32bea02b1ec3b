import pytest
import structlog


def encode_units(*units: int) -> bytes:
    """Build a big-endian UTF-16 buffer from raw code units."""
    return b"".join(unit.to_bytes(2, "big") for unit in units)


def encode_wide(text: str) -> bytes:
    """Encode text as a null-terminated UTF-16BE buffer."""
    return text.encode("utf-16-be") + b"\x00\x00"


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()
