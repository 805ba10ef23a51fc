"""
Trial runner.

Drives a fixed number of trials against a Testable, tallies passes and
failures, and renders a short deterministic report:

    +++ OK, passed 100 tests for <description>

or

    *** Failed '<description>' on:
    <rendering>
    ...
    ...and more

There is no shrinking. When many failures were collected, the report shows
the smallest ones by size, ranked after the run. How small they are depends
on what the trials happened to sample.

Exceptions raised by a predicate abort the run immediately and propagate to
the caller; nothing is printed for that run.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Callable, Sequence, TextIO

from quickcheck.config import DEFAULT_CONFIG, CheckConfig
from quickcheck.testable import Failure, Pass, Testable, as_testable

logger = logging.getLogger(__name__)

TRUNCATION_MARKER = "...and more"


@dataclass(slots=True)
class TrialBatch:
    """Accumulators for one run. Failures stay in collection order."""

    num_tests: int
    passes: int = 0
    failures: list[Failure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.passes == self.num_tests


def run_trials(
    prop: Testable | Callable[..., bool],
    config: CheckConfig | None = None,
    rng: random.Random | None = None,
) -> TrialBatch:
    """
    Execute config.num_tests trials, strictly in sequence.

    Args:
        prop: A Testable, or an annotated predicate to adapt.
        config: Trial count and report cutoff (DEFAULT_CONFIG if omitted).
        rng: Random handle; a fresh OS-seeded random.Random() if omitted.

    Returns:
        The filled TrialBatch.
    """
    config = config or DEFAULT_CONFIG
    testable = as_testable(prop)
    if rng is None:
        rng = random.Random()

    logger.debug("running %d trials of %r", config.num_tests, testable)
    batch = TrialBatch(num_tests=config.num_tests)
    for _ in range(config.num_tests):
        outcome = testable.apply(rng)
        if isinstance(outcome, Pass):
            batch.passes += 1
        else:
            batch.failures.append(outcome)

    logger.debug(
        "%s: %d passed, %d failed", testable.name, batch.passes, len(batch.failures)
    )
    return batch


def rank_failures(failures: Sequence[Failure], limit: int) -> list[Failure]:
    """
    Return the `limit` smallest failures.

    Ordered ascending by size; equal sizes keep their collection order.
    The input sequence is not modified.
    """
    indexed = sorted(enumerate(failures), key=lambda pair: (pair[1].size, pair[0]))
    return [f for _, f in indexed[:limit]]


def report_lines(
    description: str,
    batch: TrialBatch,
    config: CheckConfig | None = None,
) -> list[str]:
    """Render the human-readable summary for one batch."""
    config = config or DEFAULT_CONFIG
    if batch.ok:
        return [f"+++ OK, passed {batch.num_tests} tests for {description}"]

    lines = [f"*** Failed '{description}' on:"]
    if len(batch.failures) < config.max_shown:
        lines.extend(f.rendering for f in batch.failures)
    else:
        lines.extend(f.rendering for f in rank_failures(batch.failures, config.max_shown))
        lines.append(TRUNCATION_MARKER)
    return lines


def run(
    description: str,
    prop: Testable | Callable[..., bool],
    silent: bool = False,
    *,
    config: CheckConfig | None = None,
    rng: random.Random | None = None,
    out: TextIO | None = None,
) -> bool:
    """
    Check a property and report the result.

    Args:
        description: What the property claims, used in the report.
        prop: A Testable, or an annotated predicate to adapt.
        silent: Suppress all printing; the verdict is unaffected.
        config: Trial count and report cutoff.
        rng: Random handle for generation.
        out: Stream for the report (sys.stdout if omitted).

    Returns:
        True if every trial passed.
    """
    config = config or DEFAULT_CONFIG
    batch = run_trials(prop, config, rng)
    if not silent:
        for line in report_lines(description, batch, config):
            print(line, file=out, flush=True)
    return batch.ok


def check(description: str, prop: Testable | Callable[..., bool], **kwargs) -> bool:
    """Verbose entry point: run and print the report."""
    return run(description, prop, False, **kwargs)


def check_silent(description: str, prop: Testable | Callable[..., bool], **kwargs) -> bool:
    """Silent entry point: run and return the verdict only."""
    return run(description, prop, True, **kwargs)
