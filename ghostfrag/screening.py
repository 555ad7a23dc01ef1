"""Distance-based screening of n-mers built from capped fragments."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Iterable, Sequence

from ghostfrag.structures import Atom

logger = logging.getLogger(__name__)

NO_SCREENING = sys.float_info.max
"""Threshold that lets every pair through (the default)."""


@dataclass(frozen=True)
class CappedFragment:
    """The atoms of a fragment together with the caps added to it."""

    atoms: tuple[Atom, ...]
    caps: tuple[Atom, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "atoms", tuple(self.atoms))
        object.__setattr__(self, "caps", tuple(self.caps))

    @property
    def all_atoms(self) -> tuple[Atom, ...]:
        """Fragment atoms followed by cap atoms."""
        return self.atoms + self.caps


def min_distance(atoms0: Iterable[Atom], atoms1: Iterable[Atom]) -> float:
    """Smallest distance between an atom of ``atoms0`` and one of ``atoms1``.

    Returns the largest finite float when either collection is empty.
    """
    others = list(atoms1)
    return min(
        (a0.distance(a1) for a0 in atoms0 for a1 in others),
        default=NO_SCREENING,
    )


def _pair_distance(f0: CappedFragment, f1: CappedFragment) -> float:
    return min(
        min_distance(f0.atoms, f1.atoms),
        min_distance(f0.atoms, f1.caps),
        min_distance(f0.caps, f1.atoms),
        min_distance(f0.caps, f1.caps),
    )


def screen_by_minimum_distance(
    capped_fragments: Sequence[CappedFragment],
    n: int,
    threshold: float = NO_SCREENING,
) -> list[tuple[int, ...]]:
    """Build the n-mers that survive a minimum-distance cut-off.

    A pair of fragments survives when the minimum distance between their
    atoms (caps included) is no more than ``threshold``. Surviving m-mers grow
    into (m+1)-mers by joining surviving pairs that share exactly one fragment
    with them, up to ``n``-mers. N-mers contained in a larger surviving n-mer
    are dropped. Each n-mer is returned as a sorted tuple of fragment indices;
    the list is sorted.
    """
    nfrags = len(capped_fragments)
    if n < 2:
        raise ValueError(f"truncation order must be at least 2, got {n}")
    if n > nfrags:
        raise ValueError(
            f"truncation order {n} exceeds the number of fragments ({nfrags})"
        )

    good: set[frozenset[int]] = {frozenset({i}) for i in range(nfrags)}
    dimers: list[frozenset[int]] = []

    for i, f0 in enumerate(capped_fragments):
        for j in range(i):
            r = _pair_distance(f0, capped_fragments[j])
            logger.debug("Fragments %d and %d are %f apart.", i, j, r)
            if r <= threshold:
                dimer = frozenset({i, j})
                good.discard(frozenset({i}))
                good.discard(frozenset({j}))
                dimers.append(dimer)
                good.add(dimer)

    mmers = list(dimers)
    for _ in range(2, n):
        grown: dict[frozenset[int], None] = {}
        for mmer in mmers:
            for dimer in dimers:
                if len(dimer & mmer) != 1:
                    continue
                bigger = mmer | dimer
                good.discard(mmer)
                good.discard(dimer)
                good.add(bigger)
                grown[bigger] = None
        mmers = list(grown)

    return sorted(tuple(sorted(nmer)) for nmer in good)