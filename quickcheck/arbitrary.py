"""
Generation strategies.

An Arbitrary[T] knows how to produce random values of T and how to report a
size for any T. The size is a non-negative integer used only to rank
counterexamples after the fact; it never steers generation.

Built-ins:

    UnsignedInts    [0, 1023]        size = value
    SignedInts      [-1023, 1023]    size = abs(value)
    SequenceOf(el)  len in [0, 99]   size = len(value)

Every strategy draws from a random.Random handle passed in by the caller.
Nothing here touches the module-level `random` state.

New types plug in without touching this module:

    @register_arbitrary(Point)
    class PointArbitrary(Arbitrary[Point]):
        def generate(self, rng):
            return Point(SignedInts().generate(rng), SignedInts().generate(rng))

        def size(self, value):
            return abs(value.x) + abs(value.y)
"""

from __future__ import annotations

import random
from typing import Any, Callable, Generic, Iterator, NewType, TypeVar, get_args, get_origin

T = TypeVar("T")

# Python has a single int type; Unsigned marks annotations that want [0, 1023].
Unsigned = NewType("Unsigned", int)

RAW_BITS = 64
INT_BOUND = 2 ** 10
MAX_LENGTH = 100


class NoArbitraryError(TypeError):
    """No generation strategy is known for a requested type."""


def _remainder(n: int, m: int) -> int:
    """Truncating remainder: the result takes the sign of n (unlike n % m)."""
    r = abs(n) % m
    return -r if n < 0 else r


def draw_unsigned(rng: random.Random) -> int:
    """Raw draw from the full unsigned 64-bit domain."""
    return rng.getrandbits(RAW_BITS)


def draw_signed(rng: random.Random) -> int:
    """Raw draw from the full signed 64-bit domain."""
    return rng.getrandbits(RAW_BITS) - (1 << (RAW_BITS - 1))


class Arbitrary(Generic[T]):
    """
    Capability of producing random T values and sizing them.

    Subclasses must implement generate() and size(). shrink() is an opt-in
    extension point; the trial runner never calls it.
    """

    def generate(self, rng: random.Random) -> T:
        raise NotImplementedError

    def size(self, value: T) -> int:
        raise NotImplementedError

    def shrink(self, value: T) -> Iterator[T]:
        """Yield candidates strictly smaller than value. Default: none."""
        return iter(())

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class UnsignedInts(Arbitrary[int]):
    def generate(self, rng: random.Random) -> int:
        return draw_unsigned(rng) % INT_BOUND

    def size(self, value: int) -> int:
        return value

    def shrink(self, value: int) -> Iterator[int]:
        seen = {value}
        for candidate in (0, value // 2, value - 1):
            if 0 <= candidate < value and candidate not in seen:
                seen.add(candidate)
                yield candidate


class SignedInts(Arbitrary[int]):
    def generate(self, rng: random.Random) -> int:
        return _remainder(draw_signed(rng), INT_BOUND)

    def size(self, value: int) -> int:
        return abs(value)

    def shrink(self, value: int) -> Iterator[int]:
        step = -1 if value < 0 else 1
        seen = {value}
        for candidate in (0, int(value / 2), value - step):
            if abs(candidate) < abs(value) and candidate not in seen:
                seen.add(candidate)
                yield candidate


class SequenceOf(Arbitrary[list]):
    """Lists of independently generated elements, sized by length only."""

    def __init__(self, element: Arbitrary[Any]) -> None:
        if not isinstance(element, Arbitrary):
            raise TypeError(f"element must be an Arbitrary, got {type(element).__name__}")
        self.element = element

    def generate(self, rng: random.Random) -> list:
        n = draw_unsigned(rng) % MAX_LENGTH
        return [self.element.generate(rng) for _ in range(n)]

    def size(self, value: list) -> int:
        return len(value)

    def shrink(self, value: list) -> Iterator[list]:
        n = len(value)
        if n == 0:
            return
        yield []
        half = n // 2
        if 0 < half < n:
            yield value[:half]
            yield value[half:]
        if n > 1:
            for i in range(n):
                yield value[:i] + value[i + 1:]

    def __repr__(self) -> str:
        return f"SequenceOf({self.element!r})"


# ---------------------------------------------------------------------------
# Type registry
# ---------------------------------------------------------------------------

_REGISTRY: dict[Any, Arbitrary[Any]] = {
    int: SignedInts(),
    Unsigned: UnsignedInts(),
}


def register_arbitrary(tp: Any, strategy: Arbitrary[Any] | None = None):
    """
    Register the strategy used for annotations of type `tp`.

    Called with a strategy instance it registers and returns it. Called
    with only `tp` it returns a class decorator that instantiates the
    decorated Arbitrary subclass (no arguments) and registers it.
    """
    if strategy is None:
        def decorator(cls: Callable[[], Arbitrary[Any]]):
            register_arbitrary(tp, cls())
            return cls
        return decorator

    if not isinstance(strategy, Arbitrary):
        raise TypeError(f"strategy must be an Arbitrary, got {type(strategy).__name__}")
    _REGISTRY[tp] = strategy
    return strategy


def unregister_arbitrary(tp: Any) -> None:
    """Remove a registration. Missing entries are ignored."""
    _REGISTRY.pop(tp, None)


def arbitrary_for(tp: Any) -> Arbitrary[Any]:
    """
    Resolve a type (or strategy) to a strategy.

    Accepts an Arbitrary instance (returned as-is), a registered type, or
    list[T] for any resolvable T.

    Raises:
        NoArbitraryError: If nothing is known for tp.
    """
    if isinstance(tp, Arbitrary):
        return tp
    try:
        strategy = _REGISTRY.get(tp)
    except TypeError:
        # unhashable annotation objects
        strategy = None
    if strategy is not None:
        return strategy

    if get_origin(tp) is list:
        args = get_args(tp)
        if len(args) == 1:
            return SequenceOf(arbitrary_for(args[0]))

    raise NoArbitraryError(f"no Arbitrary registered for {tp!r}")


def sequences(element: Any) -> SequenceOf:
    """SequenceOf for a type or strategy: sequences(Unsigned), sequences(SignedInts())."""
    return SequenceOf(arbitrary_for(element))
