"""
Layer 1: Data URL encoding tests
"""
import pytest

from core.encoding import decode, decode_bytes, encode, extension_for
from core.errors import ReadError


@pytest.mark.unit
class TestEncode:
    def test_encode_builds_data_url(self):
        assert encode(b"abc", "image/png") == "data:image/png;base64,YWJj"

    def test_encode_empty_payload(self):
        assert encode(b"", "image/gif") == "data:image/gif;base64,"

    def test_round_trip_binary_content(self):
        data = bytes(range(256)) * 3
        mime_type, decoded = decode_bytes(encode(data, "image/webp"))

        assert mime_type == "image/webp"
        assert decoded == data

    def test_round_trip_keeps_mime_parameters(self):
        mime_type, decoded = decode_bytes(encode(b"\x00\x01", "application/x-custom;v=2"))

        assert mime_type == "application/x-custom;v=2"
        assert decoded == b"\x00\x01"

    @pytest.mark.parametrize("mime_type", ["", "text/x;", "a/base64,b", "image/png;;base64,"])
    def test_round_trip_keeps_unusual_mime_strings(self, mime_type):
        decoded_mime_type, decoded = decode_bytes(encode(b"\x00\x01", mime_type))

        assert decoded_mime_type == mime_type
        assert decoded == b"\x00\x01"


@pytest.mark.unit
class TestDecode:
    def test_decode_splits_prefix(self):
        assert decode("data:image/jpeg;base64,AAAA") == ("image/jpeg", "AAAA")

    def test_decode_raw_payload_passes_through(self):
        assert decode("iVBORw0KGgo=") == (None, "iVBORw0KGgo=")

    def test_decode_bare_base64_marker_strips_prefix(self):
        assert decode("base64,AAAA") == (None, "AAAA")

    def test_decode_empty_string(self):
        assert decode("") == (None, "")

    def test_decode_bytes_rejects_invalid_base64(self):
        with pytest.raises(ReadError):
            decode_bytes("data:image/png;base64,not*base64!")


@pytest.mark.unit
def test_extension_for_known_and_unknown_types():
    assert extension_for("image/jpeg") == "jpg"
    assert extension_for("image/webp") == "webp"
    assert extension_for("image/heic") == "png"
    assert extension_for(None) == "png"
