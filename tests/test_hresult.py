import pytest

from offloadkit.hresult import HResultError, check_hresult


def test_success_returns_code():
    assert check_hresult(0, "ok") == 0
    assert check_hresult(1, "false") == 1


def test_failure_raises_with_message():
    with pytest.raises(HResultError) as info:
        check_hresult(0x80004005, "Failed to create fence.")
    err = info.value
    assert err.message == "Failed to create fence."
    assert err.hresult == 0x80004005
    assert err.code < 0
    assert err.code & 0xFFFFFFFF == 0x80004005


def test_negative_code_accepted():
    with pytest.raises(HResultError) as info:
        check_hresult(-1, "bad")
    assert info.value.hresult == 0xFFFFFFFF


def test_str_includes_message_and_hex():
    with pytest.raises(HResultError) as info:
        check_hresult(0x80070057, "Failed to create PSO.")
    text = str(info.value)
    assert "Failed to create PSO." in text
    assert "0x80070057" in text


def test_is_oserror():
    with pytest.raises(OSError):
        check_hresult(0x80000000, "x")