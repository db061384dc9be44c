"""Core types: Result, Ok, Err, Option, Some, Nothing, OptionCell."""

from kettle_result.types.cell import OptionCell
from kettle_result.types.option import Nothing, NothingType, Option, Some, from_nullable
from kettle_result.types.result import Err, Ok, Result, collect

__all__ = [
    'Err',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'OptionCell',
    'Result',
    'Some',
    'collect',
    'from_nullable',
]
