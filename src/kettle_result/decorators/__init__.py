"""Decorators: @safe and the tea_call adapter."""

from kettle_result.decorators.safe import safe, tea_call

__all__ = [
    'safe',
    'tea_call',
]
