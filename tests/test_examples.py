"""
End-to-end scenarios.

The defective functions below are test fixtures: they exist to show that
the report surfaces real counterexamples.
"""

import ast
import random
from dataclasses import dataclass, field

from quickcheck import (
    Arbitrary,
    CheckConfig,
    SequenceOf,
    SignedInts,
    Testable,
    TRUNCATION_MARKER,
    Unsigned,
    UnsignedInts,
    check,
    for_all,
    register_arbitrary,
    run_trials,
)


# =============================================================================
# Reverse
# =============================================================================

def reverse(v):
    return v[::-1]


def reverse_skipping_pairs(v):
    # defect: two-element lists come back unchanged
    if len(v) == 2:
        return list(v)
    return v[::-1]


def reverse_appending(v):
    # defect: appends instead of prepending
    out = []
    for e in v:
        out.append(e)
    return out


def prop_reverse_twice_is_identity(v: list[Unsigned]) -> bool:
    return reverse(reverse(v)) == v


def prop_pairs_reversed(v: list[Unsigned]) -> bool:
    return reverse_skipping_pairs(v) == list(reversed(v))


def prop_reverse_moves_first_to_last(v: list[Unsigned]) -> bool:
    if not v:
        return True
    return reverse_appending(v)[-1] == v[0]


class TestReverse:

    def test_reverse_twice_passes_every_run(self, capsys):
        for seed in range(5):
            assert check("reverse twice", prop_reverse_twice_is_identity, rng=random.Random(seed))
        out = capsys.readouterr().out.splitlines()
        assert out == ["+++ OK, passed 100 tests for reverse twice"] * 5

    def test_reverse_twice_still_holds_for_buggy_pairs(self):
        """Special-casing pairs is invisible to reverse-twice."""
        def prop(v: list[Unsigned]) -> bool:
            return reverse_skipping_pairs(reverse_skipping_pairs(v)) == v

        assert run_trials(prop, rng=random.Random(0)).ok

    def test_defective_reverse_reports_length_two_counterexample(self, capsys):
        # lengths are uniform over 0..99, so use enough trials to hit pairs
        cfg = CheckConfig(num_tests=3000)
        assert check("reverse pairs", prop_pairs_reversed, config=cfg, rng=random.Random(1)) is False

        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "*** Failed 'reverse pairs' on:"
        shown = [ast.literal_eval(line) for line in lines[1:] if line != TRUNCATION_MARKER]
        assert shown
        assert all(len(v) == 2 and v[0] != v[1] for v in shown)

    def test_appending_reverse_fails_with_small_examples(self, capsys):
        prop = Testable.from_function(prop_reverse_moves_first_to_last)
        batch = run_trials(prop, rng=random.Random(2))

        assert check("moves first to last", prop, rng=random.Random(2)) is False
        lines = capsys.readouterr().out.splitlines()
        assert lines[-1] == TRUNCATION_MARKER

        shown = [ast.literal_eval(line) for line in lines[1:-1]]
        assert [len(v) for v in shown] == sorted(f.size for f in batch.failures)[:5]


# =============================================================================
# Records
# =============================================================================

@dataclass
class Foo:
    n: int
    xs: list = field(default_factory=list)


class FooArbitrary(Arbitrary[Foo]):
    def generate(self, rng):
        return Foo(n=UnsignedInts().generate(rng), xs=SequenceOf(SignedInts()).generate(rng))

    def size(self, value):
        return len(value.xs)


def add_foos(a, b):
    return Foo(n=a.n + b.n, xs=a.xs + b.xs)


class TestRecords:

    def test_two_argument_property_through_same_runner(self, capsys):
        @for_all(FooArbitrary(), FooArbitrary())
        def prop_add_foos_commutes(a, b):
            return add_foos(a, b) == add_foos(b, a)

        assert check("add_foos is commutative", prop_add_foos_commutes, rng=random.Random(4)) is False
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "*** Failed 'add_foos is commutative' on:"
        assert all(line.startswith("Foo(") and "), Foo(" in line for line in lines[1:-1])

    def test_combined_size_is_sum_of_argument_sizes(self, rng):
        class Fixed(Arbitrary):
            def __init__(self, foo):
                self.foo = foo

            def generate(self, rng):
                return self.foo

            def size(self, value):
                return FooArbitrary().size(value)

        a = Foo(n=1, xs=[1, 2, 3])
        b = Foo(n=2, xs=[4, 5])
        prop = Testable(lambda x, y: add_foos(x, y) == add_foos(y, x), [Fixed(a), Fixed(b)])

        outcome = prop.apply(rng)
        assert outcome.size == 5
        assert outcome.rendering == f"{a!r}, {b!r}"

    def test_zero_identity_holds(self, clean_registry, rng):
        register_arbitrary(Foo, FooArbitrary())

        def prop_add_zero_foo_identity(a: Foo) -> bool:
            return add_foos(a, Foo(n=0, xs=[])) == a

        assert check("add_foos with a zero Foo is an identity", prop_add_zero_foo_identity, rng=rng)
