"""Core types: Result, Ok, Err, Option, Some, Nothing."""

from optres.types.option import Nothing, NothingType, Option, Some, from_nullable, from_undefinable
from optres.types.propagate import Propagate
from optres.types.result import Err, Ok, Result, collect

__all__ = [
    'Err',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Propagate',
    'Result',
    'Some',
    'collect',
    'from_nullable',
    'from_undefinable',
]
