"""Error raised when a payload is extracted from the wrong variant."""

from __future__ import annotations

__all__ = ['UnwrapError']


class UnwrapError(RuntimeError):
    """Payload accessor called on a variant that does not carry it.

    Raised by ``unwrap``/``expect`` on ``Nothing`` or ``Err`` and by
    ``unwrap_err``/``expect_err`` on ``Ok``. Pattern matching on the
    variant classes avoids it entirely.
    """

    def __init__(self, message: str, value: object = None) -> None:
        self.value = value
        super().__init__(message)
