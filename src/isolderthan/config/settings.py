"""Unified settings: CLI flags, env vars, and code defaults in one object.

Priority chain (highest to lowest):
  1. CLI flags that were actually set
  2. ``ISOLDERTHAN_*`` environment variables
  3. Code defaults

No config file is read.
"""

from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings


class IsOlderThanSettings(BaseSettings):
    """Output and logging settings for one invocation.

    Stored in ``click.Context.obj`` (via :class:`AppContext`) and frozen
    after construction.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ISOLDERTHAN_",
    }

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> IsOlderThanSettings:
        """Construct settings from a CLI invocation.

        Flags left at their default (False/None) do not override the
        environment, so ``ISOLDERTHAN_QUIET=1`` works without ``-q``.
        """
        overrides = {key: value for key, value in cli_flags.items() if value}
        return cls(**overrides)
