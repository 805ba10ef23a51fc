"""
Property adapter: one invocation contract for predicates of any arity.

A Testable bundles a predicate with one strategy per argument position.
apply() generates the arguments, calls the predicate and classifies the
boolean result into an Outcome. The trial runner only ever calls apply(),
so it never needs to know how many arguments a property takes.

Ways to build one:

    @for_all(Unsigned, Unsigned)
    def prop_add_commutes(a, b):
        return a + b == b + a

    def prop_reverse_twice(v: list[Unsigned]) -> bool:
        return list(reversed(list(reversed(v)))) == v

    Testable.from_function(prop_reverse_twice)

Predicate exceptions are not caught here.
"""

from __future__ import annotations

import copy
import functools
import inspect
import random
from dataclasses import dataclass
from typing import Any, Callable, Sequence, Union, get_type_hints

from quickcheck.arbitrary import Arbitrary, arbitrary_for


# ---------------------------------------------------------------------------
# Outcomes
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Pass:
    pass


@dataclass(frozen=True, slots=True)
class Failure:
    size: int
    rendering: str


Outcome = Union[Pass, Failure]

PASS = Pass()


def render_args(args: Sequence[Any]) -> str:
    """Positional dump of the arguments, left to right, comma-separated."""
    return ", ".join(repr(a) for a in args)


def _annotated_target(fn: Callable[..., Any]) -> Callable[..., Any]:
    """The object carrying the annotations of a function, partial or callable instance."""
    if isinstance(fn, functools.partial):
        return _annotated_target(fn.func)
    if inspect.isroutine(fn) or inspect.isclass(fn):
        return fn
    return type(fn).__call__


# ---------------------------------------------------------------------------
# Testable
# ---------------------------------------------------------------------------

class Testable:
    """A predicate plus the strategies for each of its argument positions."""

    # keep pytest from collecting this as a test class
    __test__ = False

    def __init__(self, predicate: Callable[..., bool], strategies: Sequence[Arbitrary[Any]]) -> None:
        if not callable(predicate):
            raise TypeError(f"predicate must be callable, got {type(predicate).__name__}")
        strategies = tuple(strategies)
        for i, s in enumerate(strategies):
            if not isinstance(s, Arbitrary):
                raise TypeError(f"strategy {i} must be an Arbitrary, got {type(s).__name__}")
        self.predicate = predicate
        self.strategies = strategies

    @property
    def arity(self) -> int:
        return len(self.strategies)

    @property
    def name(self) -> str:
        return getattr(self.predicate, "__name__", repr(self.predicate))

    def generate_args(self, rng: random.Random) -> tuple:
        return tuple(s.generate(rng) for s in self.strategies)

    def classify(self, args: Sequence[Any], result: Any) -> Outcome:
        """
        Turn a predicate result into an Outcome.

        Raises:
            TypeError: If the predicate did not return a bool.
        """
        if not isinstance(result, bool):
            raise TypeError(
                f"property {self.name} must return bool, got {type(result).__name__}: {result!r}"
            )
        if result:
            return PASS
        size = sum(s.size(a) for s, a in zip(self.strategies, args))
        return Failure(size=size, rendering=render_args(args))

    def apply(self, rng: random.Random) -> Outcome:
        """
        Run one trial: generate, invoke, classify.

        The predicate gets a deep copy of the arguments, so sizes and the
        rendering always describe the generated input even if the code under
        test mutates it.
        """
        args = self.generate_args(rng)
        return self.classify(args, self.predicate(*copy.deepcopy(args)))

    @classmethod
    def from_function(cls, fn: Callable[..., bool]) -> "Testable":
        """
        Build a Testable from a predicate's parameter annotations.

        Raises:
            TypeError: If a parameter is unannotated, variadic or keyword-only.
            NoArbitraryError: If an annotated type has no registered strategy.
        """
        fn_name = getattr(fn, "__name__", repr(fn))
        hints = get_type_hints(_annotated_target(fn))
        strategies = []
        for param in inspect.signature(fn).parameters.values():
            if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
                raise TypeError(f"property {fn_name} cannot take *args/**kwargs")
            if param.kind is param.KEYWORD_ONLY:
                raise TypeError(f"property {fn_name} cannot take keyword-only parameter {param.name!r}")
            if param.name not in hints:
                raise TypeError(f"parameter {param.name!r} of {fn_name} needs a type annotation")
            strategies.append(arbitrary_for(hints[param.name]))
        return cls(fn, strategies)

    def __repr__(self) -> str:
        inner = ", ".join(repr(s) for s in self.strategies)
        return f"Testable({self.name}, [{inner}])"


def for_all(*types: Any) -> Callable[[Callable[..., bool]], Testable]:
    """Decorator: bind one type (or strategy) per argument position."""
    strategies = [arbitrary_for(t) for t in types]

    def decorator(fn: Callable[..., bool]) -> Testable:
        return Testable(fn, strategies)

    return decorator


def as_testable(prop: Testable | Callable[..., bool]) -> Testable:
    if isinstance(prop, Testable):
        return prop
    return Testable.from_function(prop)
