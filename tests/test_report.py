"""
Unit Tests for Encoding Reports
===============================
Tests for message inspection.
"""

from conftest import encode_units, encode_wide


class TestInspectMessage:
    """Tests for the outbound encoding report."""

    def test_gsm_message(self):
        """Basic text should report GSM-7 and be valid."""
        from smscodec.report import inspect_message
        from smscodec.gsm import EncodingType

        report = inspect_message(encode_wide("Hello"))

        assert report.encoding == EncodingType.GSM7
        assert report.valid is True
        assert report.unit_count == 5
        assert report.byte_count == 10

    def test_ucs2_message(self):
        """Astral text should report UCS-2 and count symbols."""
        from smscodec.report import inspect_message
        from smscodec.gsm import EncodingType

        report = inspect_message(encode_wide("Hi 😀"))

        assert report.encoding == EncodingType.UCS2
        assert report.unit_count == 5
        assert report.symbol_count == 4

    def test_invalid_message(self):
        """Malformed text should carry the first error."""
        from smscodec.report import inspect_message
        from smscodec.scanner import DecodeError

        report = inspect_message(encode_units(0x0041, 0xD800, 0x0000))

        assert report.valid is False
        assert report.error == DecodeError.UNMATCHED_SURROGATE
        assert report.error_offset == 2
        assert report.invalid_byte_count == 2

    def test_model_dump(self):
        """Report should serialise to plain values."""
        from smscodec.report import inspect_message

        data = inspect_message(encode_wide("A")).model_dump(mode="json")

        assert data["encoding"] == "GSM-7"
        assert data["error"] == "none"
        assert data["symbol_count"] == 1
