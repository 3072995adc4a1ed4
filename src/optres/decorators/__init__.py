"""Decorators: @safe, @safe_async and @result."""

from optres.decorators.result import result
from optres.decorators.safe import safe, safe_async

__all__ = [
    'result',
    'safe',
    'safe_async',
]
