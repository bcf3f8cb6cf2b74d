# config.py
"""
Process-wide quiz settings.

The live configuration is a module global behind ``get_config`` /
``set_config``. There is no locking: concurrent writers from several
threads are not supported. Code that needs isolation should pass an
explicit ``config=`` to the generators, or wrap a change in
``config_override`` which restores the previous values on exit.
"""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from typing import Any, Iterator, Mapping, Optional, Union

from pydantic import ValidationError

from schemas.config import NumberRange, QuizConfig

logger = logging.getLogger("math-captcha")


_ENV_SETTINGS = (
    ("MATH_CAPTCHA_DIVISION_PRECISION", "division_precision", int),
    ("MATH_CAPTCHA_MAX_ATTEMPTS", "max_attempts", int),
    ("MATH_CAPTCHA_TOLERANCE", "tolerance", float),
)


def _defaults_from_env() -> QuizConfig:
    overrides: dict = {}
    for var, field, cast in _ENV_SETTINGS:
        raw = os.getenv(var)
        if not raw:
            continue
        try:
            overrides[field] = cast(raw)
        except ValueError:
            logger.warning("ignoring %s=%r: not a valid %s", var, raw, cast.__name__)
    try:
        return QuizConfig(**overrides)
    except ValidationError as e:
        logger.warning("ignoring MATH_CAPTCHA_* overrides: %s", e)
        return QuizConfig()


_config: QuizConfig = _defaults_from_env()


def get_config() -> QuizConfig:
    """Return a deep copy; mutating it never touches the live settings."""
    return _config.model_copy(deep=True)


def set_config(
    partial: Optional[Union[QuizConfig, Mapping[str, Any]]] = None, **changes: Any
) -> QuizConfig:
    """
    Merge ``partial`` and ``changes`` into the live configuration.

    The merged result is validated as a whole; on ``ValidationError`` the
    live configuration is left as it was.
    """
    global _config

    merged = _config.model_dump()
    if isinstance(partial, QuizConfig):
        merged.update(partial.model_dump())
    elif partial is not None:
        merged.update(_by_field_name(partial))
    merged.update(_by_field_name(changes))

    new = QuizConfig.model_validate(merged)
    if new != _config:
        logger.info("config updated: %s", _diff(_config, new))
    _config = new
    return get_config()


def reset_config() -> QuizConfig:
    """Back to the defaults (including any MATH_CAPTCHA_* environment overrides)."""
    global _config
    _config = _defaults_from_env()
    return get_config()


@contextmanager
def config_override(**changes: Any) -> Iterator[QuizConfig]:
    """Apply ``changes`` for the duration of the block, then restore."""
    snapshot = get_config()
    try:
        yield set_config(changes)
    finally:
        set_config(snapshot)


# --- helpers ----------------------------------------------------------------------


def _by_field_name(data: Mapping[str, Any]) -> dict:
    """Translate legacy upper-case aliases (DIVISION_PRECISION, ...) to field names."""
    aliases = {f.alias: name for name, f in QuizConfig.model_fields.items() if f.alias}
    out = {}
    for key, value in data.items():
        name = aliases.get(key, key)
        if isinstance(value, NumberRange):
            value = value.model_dump()
        out[name] = value
    return out


def _diff(old: QuizConfig, new: QuizConfig) -> dict:
    before, after = old.model_dump(), new.model_dump()
    return {k: after[k] for k in after if before.get(k) != after[k]}
