"""kettle-result: Option, Result and Collection types for Python 3.13+.

Flat imports (preferred):
    from kettle_result import Option, Some, Nothing, Result, Ok, Err
    from kettle_result import Collection, tea_call, safe, match

Submodule imports (for organization):
    from kettle_result.types import Option, Result, OptionCell
    from kettle_result.collection import Collection, CollectionIter
    from kettle_result.decorators import safe, tea_call
"""

# Collection
from kettle_result.collection import Collection, CollectionIter

# Configuration
from kettle_result.config import Equality, KettleConfig, get_config, init

# Decorators
from kettle_result.decorators import safe, tea_call

# Errors
from kettle_result.errors import (
    CloneError,
    CollectionError,
    MatchError,
    SerializeError,
    UnwrapError,
)

# Dispatch
from kettle_result.match import match

# Types
from kettle_result.types import (
    Err,
    Nothing,
    NothingType,
    Ok,
    Option,
    OptionCell,
    Result,
    Some,
    collect,
    from_nullable,
)

__all__ = [
    'CloneError',
    'Collection',
    'CollectionError',
    'CollectionIter',
    'Equality',
    'Err',
    'KettleConfig',
    'MatchError',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'OptionCell',
    'Result',
    'SerializeError',
    'Some',
    'UnwrapError',
    'collect',
    'from_nullable',
    'get_config',
    'init',
    'match',
    'safe',
    'tea_call',
]
