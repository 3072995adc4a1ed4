"""optres: Rust-style Option and Result types for Python 3.13+.

Flat imports (preferred):
    from optres import Option, Some, Nothing, Result, Ok, Err
    from optres import from_nullable, from_undefinable, collect
    from optres import safe, safe_async, result

Submodule imports (for organization):
    from optres.types import Option, Result
    from optres.decorators import safe, result
"""

# Configuration
from optres._config import Config, configure, get_config

# Decorators
from optres.decorators import result, safe, safe_async
from optres.errors import UnwrapError

# Types
from optres.types import (
    Err,
    Nothing,
    NothingType,
    Ok,
    Option,
    Propagate,
    Result,
    Some,
    collect,
    from_nullable,
    from_undefinable,
)

__all__ = [
    # Configuration
    'Config',
    # Result types
    'Err',
    # Option types
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    # Propagation
    'Propagate',
    'Result',
    'Some',
    # Errors
    'UnwrapError',
    'collect',
    'configure',
    'from_nullable',
    'from_undefinable',
    'get_config',
    # Decorators
    'result',
    'safe',
    'safe_async',
]
