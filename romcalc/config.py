"""Runtime settings for the romcalc CLI.

Environment Variables:
    ROMCALC_ECHO: "1" to prefix each output line with "<expression> = "
    ROMCALC_TRACE: "1" to print each expression's postfix form to stderr
    ROMCALC_FAIL_FAST: "1" to stop a batch at the first error

Command-line flags take precedence over the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

_TRUTHY = ("1", "true", "yes", "on")


def _flag(environ: Mapping[str, str], key: str) -> bool:
    return environ.get(key, "").strip().lower() in _TRUTHY


@dataclass
class Settings:
    """Output and batch behaviour."""

    echo: bool = False
    trace: bool = False
    fail_fast: bool = False

    def override(
        self,
        echo: Optional[bool] = None,
        trace: Optional[bool] = None,
        fail_fast: Optional[bool] = None,
    ) -> Settings:
        """Return a copy with every non-None argument applied."""
        return Settings(
            echo=self.echo if echo is None else echo,
            trace=self.trace if trace is None else trace,
            fail_fast=self.fail_fast if fail_fast is None else fail_fast,
        )


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from ROMCALC_* variables (os.environ by default)."""
    env = os.environ if environ is None else environ
    return Settings(
        echo=_flag(env, "ROMCALC_ECHO"),
        trace=_flag(env, "ROMCALC_TRACE"),
        fail_fast=_flag(env, "ROMCALC_FAIL_FAST"),
    )
