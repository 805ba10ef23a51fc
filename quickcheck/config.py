"""
Run configuration for quickcheck.

Two knobs control a property check:

    - num_tests:  how many trials one run executes (default 100)
    - max_shown:  how many counterexamples the failure report lists
                  before truncating with "...and more" (default 5)

`check()` always uses DEFAULT_CONFIG unless a config is passed in.
Environment overrides are opt-in through load_config():

    QUICKCHECK_NUM_TESTS=500 QUICKCHECK_MAX_SHOWN=10 pytest ...
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping


NUM_TESTS = 100
MAX_SHOWN = 5

ENV_NUM_TESTS = "QUICKCHECK_NUM_TESTS"
ENV_MAX_SHOWN = "QUICKCHECK_MAX_SHOWN"


def _validate_count(name: str, value: int) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")
    if value <= 0:
        raise ValueError(f"{name} must be > 0, got {value}")
    return value


@dataclass(frozen=True, slots=True)
class CheckConfig:
    num_tests: int = NUM_TESTS
    max_shown: int = MAX_SHOWN

    def __post_init__(self) -> None:
        _validate_count("num_tests", self.num_tests)
        _validate_count("max_shown", self.max_shown)


DEFAULT_CONFIG = CheckConfig()


def _env_int(environ: Mapping[str, str], key: str, default: int) -> int:
    raw = environ.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from None


def load_config(environ: Mapping[str, str] | None = None) -> CheckConfig:
    """
    Build a CheckConfig from environment variables.

    Args:
        environ: Mapping to read from (defaults to os.environ).

    Returns:
        CheckConfig with any QUICKCHECK_* overrides applied.

    Raises:
        ValueError: If a variable is set but not a positive integer.
    """
    if environ is None:
        environ = os.environ
    return CheckConfig(
        num_tests=_env_int(environ, ENV_NUM_TESTS, NUM_TESTS),
        max_shown=_env_int(environ, ENV_MAX_SHOWN, MAX_SHOWN),
    )
