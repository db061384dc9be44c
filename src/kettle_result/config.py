"""Process-wide configuration: Equality mode, KettleConfig, and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum

from kettle_result._logging import configure_logging

__all__ = [
    'Equality',
    'KettleConfig',
    'get_config',
    'init',
    'reset_config',
]


class Equality(Enum):
    """How Collection.union decides whether two values differ."""

    VALUE = 'value'
    IDENTITY = 'identity'


@dataclass(frozen=True)
class KettleConfig:
    """Configuration for kettle-result.

    Attributes:
        union_equality: Default comparison used by Collection.union.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_logs: Render logs as JSON (True) or console text (False).
    """

    union_equality: Equality = Equality.VALUE
    log_level: str | None = None
    json_logs: bool = True


_config: KettleConfig | None = None


def _detect_union_equality() -> Equality:
    """Read KETTLE_UNION_EQUALITY ("value" or "identity"), defaulting to VALUE."""
    env_value = os.environ.get('KETTLE_UNION_EQUALITY', '').lower()
    if not env_value:
        return Equality.VALUE
    try:
        return Equality(env_value)
    except ValueError:
        logging.warning("Unknown KETTLE_UNION_EQUALITY value '%s', defaulting to value", env_value)
        return Equality.VALUE


def _detect_json_logs() -> bool:
    """Read KETTLE_LOG_FORMAT ("json" or "console"), defaulting to JSON."""
    env_format = os.environ.get('KETTLE_LOG_FORMAT', '').lower()
    if env_format == 'console':
        return False
    if env_format and env_format != 'json':
        logging.warning("Unknown KETTLE_LOG_FORMAT value '%s', defaulting to json", env_format)
    return True


def init(
    union_equality: Equality | str | None = None,
    log_level: str | None = None,
    json_logs: bool | None = None,
) -> KettleConfig:
    """Initialize kettle-result with the given configuration.

    Args:
        union_equality: Default Collection.union comparison. Read from the
            environment if None. Accepts Equality or "value"/"identity".
        log_level: Logging level ("DEBUG", "INFO", etc.). Falls back to
            KETTLE_LOG_LEVEL; when neither is set logging is not touched.
        json_logs: JSON (True) or console (False) log rendering. Read from
            KETTLE_LOG_FORMAT if None.

    Returns:
        The KettleConfig that was set.

    Example:
        ```python
        from kettle_result.config import init, Equality

        init(union_equality=Equality.IDENTITY, log_level='DEBUG')
        ```
    """
    global _config  # noqa: PLW0603

    if union_equality is None:
        resolved_equality = _detect_union_equality()
    elif isinstance(union_equality, str):
        resolved_equality = Equality(union_equality.lower())
    else:
        resolved_equality = union_equality

    resolved_level = log_level if log_level is not None else os.environ.get('KETTLE_LOG_LEVEL') or None
    resolved_json = json_logs if json_logs is not None else _detect_json_logs()

    _config = KettleConfig(
        union_equality=resolved_equality,
        log_level=resolved_level,
        json_logs=resolved_json,
    )

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> KettleConfig:
    """Get the current configuration.

    Unlike an explicit init(), the first implicit lookup never touches
    logging: it only reads the equality mode and log format from the
    environment.
    """
    global _config  # noqa: PLW0603

    if _config is None:
        _config = KettleConfig(
            union_equality=_detect_union_equality(),
            json_logs=_detect_json_logs(),
        )
    return _config


def reset_config() -> None:
    """Forget the current configuration so the next lookup re-reads the environment."""
    global _config  # noqa: PLW0603
    _config = None
