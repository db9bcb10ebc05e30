import base64

import pytest

from aushadh_ai.services import image_encoder
from aushadh_ai.services.image_encoder import ImageError, decode_image, encode_image_part, split_data_url

JPEG = b"\xff\xd8\xff\xe0fake-jpeg"
JPEG_B64 = base64.b64encode(JPEG).decode("ascii")


def test_split_data_url():
    assert split_data_url(f"data:image/png;base64,{JPEG_B64}") == ("image/png", JPEG_B64)
    assert split_data_url(JPEG_B64) == (None, JPEG_B64)


def test_decode_plain_base64():
    assert decode_image(JPEG_B64) == (JPEG, "image/jpeg")


def test_data_url_mime_wins():
    raw, mime = decode_image(f"data:image/webp;base64,{JPEG_B64}", "image/jpeg")
    assert raw == JPEG
    assert mime == "image/webp"


def test_jpg_alias_and_line_breaks():
    wrapped = JPEG_B64[:8] + "\n" + JPEG_B64[8:]
    assert decode_image(wrapped, "image/JPG") == (JPEG, "image/jpeg")


@pytest.mark.parametrize(
    "data, mime",
    [("", "image/jpeg"), ("not base64!!", "image/jpeg"), (JPEG_B64, "application/pdf")],
)
def test_rejected_inputs(data, mime):
    with pytest.raises(ImageError):
        decode_image(data, mime)


def test_size_limit(monkeypatch):
    monkeypatch.setattr(image_encoder, "MAX_IMAGE_BYTES", 4)
    with pytest.raises(ImageError):
        decode_image(JPEG_B64)


def test_encode_image_part():
    part = encode_image_part(JPEG, "image/png")
    assert part == {"inlineData": {"mimeType": "image/png", "data": JPEG_B64}}
