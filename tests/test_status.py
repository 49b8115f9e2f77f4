import pytest

from extctl.status import ReturnCode, Status, StatusError


def test_default_status_is_unspecified_and_empty():
    status = Status()
    assert status.return_code is ReturnCode.UNSPECIFIED
    assert status.message == ""
    assert status.ok is False


def test_ok_status():
    assert Status(ReturnCode.OK).ok is True


@pytest.mark.parametrize(
    "code", [ReturnCode.WARN, ReturnCode.ERROR, ReturnCode.TIMEOUT, ReturnCode.UNSUPPORTED]
)
def test_non_ok_codes_are_not_ok(code):
    assert Status(code, "msg").ok is False


@pytest.mark.parametrize("code", [ReturnCode.ERROR, ReturnCode.TIMEOUT, ReturnCode.UNSUPPORTED])
def test_raise_for_error_raises_on_failures(code):
    status = Status(code, "Error: socket closed.")
    with pytest.raises(StatusError) as info:
        status.raise_for_error()
    assert info.value.status is status
    assert info.value.return_code is code
    assert str(info.value) == "Error: socket closed."


@pytest.mark.parametrize("code", [ReturnCode.OK, ReturnCode.WARN, ReturnCode.UNSPECIFIED])
def test_raise_for_error_passes_through_non_failures(code):
    status = Status(code, "Warning: StartControlling called with default event handler.")
    assert status.raise_for_error() is status


def test_error_without_message_uses_code_name():
    with pytest.raises(StatusError, match="TIMEOUT"):
        Status(ReturnCode.TIMEOUT).raise_for_error()


def test_message_is_bounded():
    long_text = "x" * 1000
    status = Status(ReturnCode.ERROR, long_text)
    assert len(status.message) == 255
    assert long_text.startswith(status.message)


def test_short_message_kept_whole():
    text = "Invalid IP in configuration"
    assert Status(ReturnCode.ERROR, text).message == text