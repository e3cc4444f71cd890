import base64

import pytest

from vots_core.domain_models import SecretSubmission, UnwrappedSecret
from vots_core.errors import NotAFileError


def test_text_submission_wrap_fields():
    submission = SecretSubmission.from_text("hola mundo", ttl_days=3)
    assert submission.to_wrap_fields() == {"secret": "hola mundo"}
    assert submission.ttl_seconds == 3 * 86400


def test_file_submission_wrap_fields():
    payload = b"\x00\x01\xfe\xff"
    submission = SecretSubmission.from_file(payload, 1, "application/pdf", "a.pdf")
    fields = submission.to_wrap_fields()
    assert fields == {
        "secret": base64.b64encode(payload).decode("ascii"),
        "content_type": "application/pdf",
        "filename": "a.pdf",
    }


def test_file_submission_defaults_content_type():
    submission = SecretSubmission.from_file(b"x", 1, None, None)
    assert submission.content_type == "application/octet-stream"


def test_unwrapped_file_accepts_wrapped_base64_lines():
    payload = bytes(range(256)) * 4
    encoded = base64.encodebytes(payload).decode("ascii")
    assert "\n" in encoded

    unwrapped = UnwrappedSecret({"secret": encoded, "content_type": "image/png", "filename": "x.png"})
    file = unwrapped.to_file()
    assert file.content == payload
    assert file.content_type == "image/png"
    assert file.filename == "x.png"


def test_unwrapped_text_has_no_file_metadata():
    unwrapped = UnwrappedSecret({"secret": "hello"})
    assert unwrapped.secret == "hello"
    assert unwrapped.content_type is None
    assert unwrapped.filename is None


@pytest.mark.parametrize("value", [123, ["text/html"], {"a": 1}, "", "  ", "text/html\r\nX-Evil: 1"])
def test_unusable_metadata_falls_back_to_defaults(value):
    unwrapped = UnwrappedSecret({"secret": "eA==", "content_type": value, "filename": value})
    file = unwrapped.to_file()
    assert file.content == b"x"
    assert file.content_type == "application/octet-stream"
    assert file.filename is None


def test_unwrapped_non_file_raises():
    with pytest.raises(NotAFileError):
        UnwrappedSecret({"secret": "hello"}).to_file()
    with pytest.raises(NotAFileError):
        UnwrappedSecret({"other": "x"}).to_file()
