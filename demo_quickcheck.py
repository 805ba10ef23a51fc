#!/usr/bin/env python3
"""
demo_quickcheck.py

Tiny walkthrough of the quickcheck engine:

- A property that holds (reverse twice is identity)
- A property that fails because `buggy_reverse` forgets to reverse
- A two-argument property over a user-defined record type

The buggy functions here exist only to show what a failure report looks
like. They are not part of the library.

Run with:
    python3 demo_quickcheck.py
"""

from __future__ import annotations

from dataclasses import dataclass, field

import quickcheck
from quickcheck import Arbitrary, SequenceOf, SignedInts, Unsigned, UnsignedInts


def reverse(v: list) -> list:
    return v[::-1]


def buggy_reverse(v: list) -> list:
    # appends instead of prepending, so the order never changes
    out = []
    for e in v:
        out.append(e)
    return out


def prop_reverse_twice(v: list[Unsigned]) -> bool:
    return reverse(reverse(v)) == v


def prop_buggy_reverse_moves_first_to_last(v: list[Unsigned]) -> bool:
    if not v:
        return True
    return buggy_reverse(v)[-1] == v[0]


@dataclass
class Foo:
    n: int
    xs: list = field(default_factory=list)


class FooArbitrary(Arbitrary[Foo]):
    def generate(self, rng):
        return Foo(n=UnsignedInts().generate(rng), xs=SequenceOf(SignedInts()).generate(rng))

    def size(self, value: Foo) -> int:
        return len(value.xs)


def add_foos(a: Foo, b: Foo) -> Foo:
    return Foo(n=a.n + b.n, xs=a.xs + b.xs)


@quickcheck.for_all(FooArbitrary(), FooArbitrary())
def prop_add_foos_commutes(a, b):
    return add_foos(a, b) == add_foos(b, a)


@quickcheck.for_all(FooArbitrary())
def prop_add_zero_foo_identity(a):
    return add_foos(a, Foo(n=0, xs=[])) == a


def main() -> None:
    print("quickcheck demo\n")

    print("=== Passing property ===")
    quickcheck.check("reversing a list twice yields the same list", prop_reverse_twice)
    print()

    print("=== Failing property (buggy reverse) ===")
    quickcheck.check("reversing a list moves first to last", prop_buggy_reverse_moves_first_to_last)
    print()

    print("=== Two-argument property ===")
    quickcheck.check("add_foos is commutative", prop_add_foos_commutes)
    quickcheck.check("add_foos with a zero Foo is an identity", prop_add_zero_foo_identity)


if __name__ == "__main__":
    main()
