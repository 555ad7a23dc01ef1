"""Core data structures: atoms, connectivity tables, fragments and graphs."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence


@dataclass(frozen=True)
class Atom:
    """A nucleus with a symbol, atomic number, mass and Cartesian position (Bohr)."""

    symbol: str
    atomic_number: int
    mass: float
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @property
    def position(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def distance(self, other: Atom) -> float:
        """Euclidean distance between this atom and ``other``."""
        return math.dist(self.position, other.position)


class ConnectivityTable:
    """Undirected bonds among a fixed number of atoms."""

    def __init__(self, natoms: int = 0) -> None:
        if natoms < 0:
            raise ValueError(f"number of atoms must be non-negative, got {natoms}")
        self._natoms = natoms
        self._bonds: set[tuple[int, int]] = set()

    @property
    def natoms(self) -> int:
        return self._natoms

    def _check_index(self, i: int) -> None:
        if not 0 <= i < self._natoms:
            raise IndexError(
                f"atom index {i} is out of range for {self._natoms} atoms"
            )

    def add_bond(self, i: int, j: int) -> None:
        """Record a bond between atoms ``i`` and ``j``."""
        self._check_index(i)
        self._check_index(j)
        if i == j:
            raise ValueError(f"an atom cannot be bonded to itself ({i})")
        self._bonds.add((min(i, j), max(i, j)))

    def bonds(self) -> list[tuple[int, int]]:
        """All bonds as sorted ``(low, high)`` pairs, in ascending order."""
        return sorted(self._bonds)

    def nbonds(self) -> int:
        return len(self._bonds)

    def bonded_atoms(self, i: int) -> set[int]:
        """Indices of the atoms bonded to atom ``i``."""
        self._check_index(i)
        return {b if a == i else a for a, b in self._bonds if i in (a, b)}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConnectivityTable):
            return NotImplemented
        return self._natoms == other._natoms and self._bonds == other._bonds

    def __repr__(self) -> str:
        return f"ConnectivityTable(natoms={self._natoms}, bonds={self.bonds()})"


class FragmentedNuclei:
    """A supersystem of atoms together with fragments given as index sets."""

    def __init__(
        self,
        supersystem: Sequence[Atom] = (),
        fragments: Iterable[Iterable[int]] | None = None,
    ) -> None:
        self.supersystem: tuple[Atom, ...] = tuple(supersystem)
        self._fragments: list[tuple[int, ...]] = []
        for indices in fragments or ():
            self.insert(indices)

    def insert(self, indices: Iterable[int]) -> None:
        """Add a fragment made of the atoms at ``indices``."""
        frag = tuple(sorted(set(indices)))
        for i in frag:
            if not 0 <= i < len(self.supersystem):
                raise IndexError(
                    f"atom index {i} is out of range for "
                    f"{len(self.supersystem)} atoms"
                )
        self._fragments.append(frag)

    def nuclear_indices(self, i: int) -> tuple[int, ...]:
        """Sorted atom indices making up fragment ``i``."""
        return self._fragments[i]

    def atoms(self, i: int) -> list[Atom]:
        """The atoms making up fragment ``i``."""
        return [self.supersystem[k] for k in self._fragments[i]]

    def __getitem__(self, i: int) -> tuple[int, ...]:
        return self._fragments[i]

    def __len__(self) -> int:
        return len(self._fragments)

    def __iter__(self) -> Iterator[tuple[int, ...]]:
        return iter(self._fragments)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FragmentedNuclei):
            return NotImplemented
        return (
            self.supersystem == other.supersystem
            and self._fragments == other._fragments
        )

    def __repr__(self) -> str:
        return (
            f"FragmentedNuclei(natoms={len(self.supersystem)}, "
            f"fragments={self._fragments})"
        )


@dataclass
class NuclearGraph:
    """Fragments as nodes, with edges between them as a connectivity table."""

    nodes: FragmentedNuclei = field(default_factory=FragmentedNuclei)
    edges: ConnectivityTable = field(default_factory=ConnectivityTable)

    def __post_init__(self) -> None:
        if self.edges.natoms != len(self.nodes):
            raise ValueError(
                f"edge table covers {self.edges.natoms} nodes but there are "
                f"{len(self.nodes)} nodes"
            )

    @property
    def nnodes(self) -> int:
        return len(self.nodes)