"""Molecular topology: covalent radii, connectivity, broken bonds and nuclear graphs."""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from ghostfrag.structures import (
    Atom,
    ConnectivityTable,
    FragmentedNuclei,
    NuclearGraph,
)

logger = logging.getLogger(__name__)

# Covalent radii in Bohr for Z = 1..96.
_COVALENT_RADII: tuple[float, ...] = (
    0.585815, 0.529123, 2.418849, 1.814137, 1.606267, 1.436192, 1.341706,
    1.247219, 1.077144, 1.096041, 3.136945, 2.664514, 2.286569, 2.097596,
    2.022007, 1.984212, 1.927521, 2.003110, 3.836144, 3.325918, 3.212534,
    3.023562, 2.891281, 2.626719, 2.626719, 2.494438, 2.381055, 2.343260,
    2.494438, 2.305466, 2.305466, 2.267671, 2.248774, 2.267671, 2.267671,
    2.192082, 4.157397, 3.684966, 3.590480, 3.307021, 3.099151, 2.910178,
    2.777897, 2.759000, 2.683411, 2.626719, 2.740103, 2.721206, 2.683411,
    2.626719, 2.626719, 2.607822, 2.626719, 2.645617, 4.610932, 4.062911,
    3.911733, 3.855041, 3.836144, 3.798350, 3.760555, 3.741658, 3.741658,
    3.703863, 3.666069, 3.628274, 3.628274, 3.571582, 3.590480, 3.533788,
    3.533788, 3.307021, 3.212534, 3.061356, 2.853486, 2.721206, 2.664514,
    2.570028, 2.570028, 2.494438, 2.740103, 2.759000, 2.796795, 2.645617,
    2.834589, 2.834589, 4.913288, 4.176295, 4.062911, 3.892836, 3.779452,
    3.703863, 3.590480, 3.533788, 3.401507, 3.193637,
)

DEFAULT_TAU = 0.10

Partitioner = Callable[[Sequence[Atom]], FragmentedNuclei]
ConnectivityBuilder = Callable[[Sequence[Atom]], ConnectivityTable]


def covalent_radius(z: int) -> float:
    """Covalent radius (Bohr) of the element with atomic number ``z`` (1-based)."""
    if not 1 <= z <= len(_COVALENT_RADII):
        raise ValueError(
            f"no covalent radius for atomic number {z}; "
            f"supported range is 1..{len(_COVALENT_RADII)}"
        )
    return _COVALENT_RADII[z - 1]


def connectivity_by_covalent_radii(
    atoms: Sequence[Atom], tau: float = DEFAULT_TAU
) -> ConnectivityTable:
    """Bond atoms i and j when r_ij <= (1 + tau) * (sigma_i + sigma_j)."""
    scale = tau + 1.0
    radii = [covalent_radius(atom.atomic_number) for atom in atoms]
    for i, sigma in enumerate(radii):
        logger.debug("Atom %d has covalent radius %f (a.u.).", i, sigma)

    table = ConnectivityTable(len(atoms))
    for i, (atom_i, sigma_i) in enumerate(zip(atoms, radii)):
        for j in range(i + 1, len(atoms)):
            rij = atom_i.distance(atoms[j])
            logger.debug("%d-%d distance is: %f", i, j, rij)
            if rij <= scale * (sigma_i + radii[j]):
                table.add_bond(i, j)
    return table


def broken_bonds(
    frags: FragmentedNuclei, connectivity: ConnectivityTable
) -> set[tuple[int, int]]:
    """Bonds severed by fragmenting, as ``(inside_atom, outside_atom)`` pairs."""
    logger.debug(
        "Input: %d fragments and %d bonds.", len(frags), connectivity.nbonds()
    )
    result: set[tuple[int, int]] = set()
    for members in frags:
        inside = set(members)
        for atom in members:
            result.update(
                (atom, other)
                for other in connectivity.bonded_atoms(atom)
                if other not in inside
            )
    return result


def nuclear_graph_from_connectivity(
    atoms: Sequence[Atom],
    partitioner: Partitioner,
    connectivity_builder: ConnectivityBuilder = connectivity_by_covalent_radii,
) -> NuclearGraph:
    """Partition ``atoms`` into nodes and join nodes whose atoms are bonded."""
    frags = partitioner(atoms)
    logger.debug(
        "The %d atoms of the system were converted into %d pseudoatoms.",
        len(atoms),
        len(frags),
    )

    atom_conns = connectivity_builder(atoms)
    logger.debug("System has %d bonds.", atom_conns.nbonds())

    nnodes = len(frags)
    edges = ConnectivityTable(nnodes)
    for i in range(nnodes):
        neighbours: set[int] = set()
        for atom in frags.nuclear_indices(i):
            neighbours |= atom_conns.bonded_atoms(atom)
        for j in range(i + 1, nnodes):
            if any(atom in neighbours for atom in frags.nuclear_indices(j)):
                edges.add_bond(i, j)

    return NuclearGraph(frags, edges)