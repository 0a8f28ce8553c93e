from __future__ import annotations

import os
from dataclasses import dataclass

from selectorkit.rot13 import DEFAULT_MESSAGE

ENV_PREFIX = "SELECTORKIT_"


@dataclass(frozen=True)
class SelectorKitConfig:
    log_level: str = "WARNING"
    rot13_message: str = DEFAULT_MESSAGE
    json_indent: int | None = None  # None = compact single-line JSON

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> SelectorKitConfig:
        """Build a config from ``SELECTORKIT_*`` environment variables.

        Unset variables keep their defaults.  ``SELECTORKIT_JSON_INDENT``
        must be an integer.
        """
        env = os.environ if environ is None else environ
        defaults = cls()
        indent_raw = env.get(f"{ENV_PREFIX}JSON_INDENT")
        if indent_raw is None or indent_raw == "":
            indent = defaults.json_indent
        else:
            try:
                indent = int(indent_raw)
            except ValueError:
                raise ValueError(
                    f"{ENV_PREFIX}JSON_INDENT must be an integer, got {indent_raw!r}"
                ) from None
        return cls(
            log_level=env.get(f"{ENV_PREFIX}LOG_LEVEL", defaults.log_level).upper(),
            rot13_message=env.get(f"{ENV_PREFIX}ROT13_MESSAGE", defaults.rot13_message),
            json_indent=indent,
        )
