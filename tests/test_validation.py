import pytest

from vots_core.errors import FileTooLargeError, InvalidTTLError, InvalidTokenFormatError
from vots_core.validation import check_token, check_upload_size, is_valid_token, parse_ttl_days


@pytest.mark.parametrize("token", ["ABC.123", "hvs.CAESIJ", "s.abcdef", "0", "..."])
def test_valid_tokens(token):
    assert is_valid_token(token)
    assert check_token(token) == token


@pytest.mark.parametrize("token", ["", None, "a b", "a/b", "a-b", "a_b", "ñ", "abc\n"])
def test_invalid_tokens(token):
    assert not is_valid_token(token)
    with pytest.raises(InvalidTokenFormatError):
        check_token(token)


def test_ttl_conversion_and_clamp():
    assert parse_ttl_days("1") == (1, 86400)
    assert parse_ttl_days("30") == (30, 30 * 86400)
    assert parse_ttl_days("31") == (30, 30 * 86400)
    assert parse_ttl_days("007") == (7, 7 * 86400)


@pytest.mark.parametrize("raw", [None, "", "0", "00", "-1", "+5", " 5", "1e3", "٣"])
def test_ttl_rejects_non_positive_or_non_numeric(raw):
    with pytest.raises(InvalidTTLError) as exc_info:
        parse_ttl_days(raw)
    assert exc_info.value.status_code == 500


def test_upload_size_boundary():
    check_upload_size(768 * 1024, 768)
    with pytest.raises(FileTooLargeError) as exc_info:
        check_upload_size(768 * 1024 + 1, 768)
    assert exc_info.value.message == "File too big, 768 KB max"
