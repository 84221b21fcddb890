"""Interpreter and driver settings.

Values come from ``DEFAULT_CONFIG``, then ``DOCONSOLE_*`` environment
variables, then explicit overrides (the CLI passes its flags here).
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any

from frozendict import frozendict

ENV_PREFIX = "DOCONSOLE_"

DEFAULT_CONFIG: frozendict[str, Any] = frozendict(
    {
        "log_level": "WARNING",
        "trace_steps": False,
        "separator": "----------",
        "show_result": True,
    }
)

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off", ""})


def _parse_bool(name: str, raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{ENV_PREFIX}{name.upper()} must be a boolean; got {raw!r}")


@dataclass(frozen=True)
class InterpreterConfig:
    log_level: str = DEFAULT_CONFIG["log_level"]
    trace_steps: bool = DEFAULT_CONFIG["trace_steps"]
    separator: str = DEFAULT_CONFIG["separator"]
    show_result: bool = DEFAULT_CONFIG["show_result"]

    def __post_init__(self) -> None:
        object.__setattr__(self, "log_level", self.log_level.upper())

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides: Any,
    ) -> InterpreterConfig:
        """Build a config from ``DOCONSOLE_*`` variables plus explicit overrides.

        Overrides whose value is ``None`` are ignored, so unset CLI flags fall
        through to the environment.
        """

        source = os.environ if environ is None else environ
        values: dict[str, Any] = dict(DEFAULT_CONFIG)
        for field in fields(cls):
            raw = source.get(f"{ENV_PREFIX}{field.name.upper()}")
            if raw is None:
                continue
            if isinstance(DEFAULT_CONFIG[field.name], bool):
                values[field.name] = _parse_bool(field.name, raw)
            else:
                values[field.name] = raw
        config = cls(**values)
        explicit = {key: value for key, value in overrides.items() if value is not None}
        return replace(config, **explicit) if explicit else config


__all__ = ["DEFAULT_CONFIG", "ENV_PREFIX", "InterpreterConfig"]
