# quickcheck/__init__.py
"""
quickcheck public API surface.

This module exposes a small, coherent core:

    - Strategies: Arbitrary, UnsignedInts, SignedInts, SequenceOf,
                  Unsigned, register_arbitrary, arbitrary_for, sequences
    - Properties: Testable, for_all, Pass, Failure
    - Runner: check, check_silent, run, run_trials, rank_failures,
              report_lines
    - Config: CheckConfig, DEFAULT_CONFIG, load_config
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

from .arbitrary import (
    Arbitrary,
    NoArbitraryError,
    SequenceOf,
    SignedInts,
    Unsigned,
    UnsignedInts,
    arbitrary_for,
    register_arbitrary,
    sequences,
    unregister_arbitrary,
)

# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------

from .testable import (
    PASS,
    Failure,
    Outcome,
    Pass,
    Testable,
    as_testable,
    for_all,
)

# ---------------------------------------------------------------------------
# Runner / config
# ---------------------------------------------------------------------------

from .config import CheckConfig, DEFAULT_CONFIG, load_config
from .runner import (
    TRUNCATION_MARKER,
    TrialBatch,
    check,
    check_silent,
    rank_failures,
    report_lines,
    run,
    run_trials,
)


__all__ = [
    # strategies
    "Arbitrary",
    "NoArbitraryError",
    "SequenceOf",
    "SignedInts",
    "Unsigned",
    "UnsignedInts",
    "arbitrary_for",
    "register_arbitrary",
    "sequences",
    "unregister_arbitrary",

    # properties
    "PASS",
    "Failure",
    "Outcome",
    "Pass",
    "Testable",
    "as_testable",
    "for_all",

    # config
    "CheckConfig",
    "DEFAULT_CONFIG",
    "load_config",

    # runner
    "TRUNCATION_MARKER",
    "TrialBatch",
    "check",
    "check_silent",
    "rank_failures",
    "report_lines",
    "run",
    "run_trials",
]
