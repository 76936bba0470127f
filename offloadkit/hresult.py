"""Conversion of Windows HRESULT status codes into exceptions."""

from __future__ import annotations


def _to_signed32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


class HResultError(OSError):
    """A failed HRESULT together with a description of what failed."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(code, message)
        self.code = code
        self.message = message

    @property
    def hresult(self) -> int:
        """The code as an unsigned 32-bit value."""
        return self.code & 0xFFFFFFFF

    def __str__(self) -> str:
        return f"{self.message} (HRESULT 0x{self.hresult:08X})"


def check_hresult(hr: int, message: str) -> int:
    """Raise HResultError if hr denotes failure; otherwise return it signed."""
    code = _to_signed32(hr)
    if code < 0:
        raise HResultError(code, message)
    return code