# ghostfrag

Building blocks for fragment-based quantum chemistry: perceiving bonds from
covalent radii, finding the bonds broken when a molecule is cut into
fragments, collapsing fragments into a nuclear graph, and screening n-mers
by the minimum interatomic distance between fragments.

All coordinates are in Bohr. The package has no dependencies outside the
standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Overview

### `ghostfrag.structures`

- `Atom(symbol, atomic_number, mass, x=0.0, y=0.0, z=0.0)`: a frozen
  dataclass for one nucleus. `position` gives `(x, y, z)` and
  `distance(other)` the Euclidean distance to another atom.
- `ConnectivityTable(natoms=0)`: undirected bonds among `natoms` atoms.
  `add_bond(i, j)` records a bond (an `IndexError` for an index out of range,
  a `ValueError` for `i == j`); `bonds()` lists the bonds as `(low, high)`
  pairs in ascending order; `nbonds()` counts them; `bonded_atoms(i)` returns
  the set of atoms bonded to `i`. Two tables are equal when they cover the
  same number of atoms and hold the same bonds.
- `FragmentedNuclei(supersystem=(), fragments=None)`: a tuple of atoms plus a
  list of fragments, each stored as a sorted tuple of atom indices.
  `insert(indices)` adds a fragment (an `IndexError` for an index out of
  range); `nuclear_indices(i)` and `frags[i]` return fragment `i`'s indices;
  `atoms(i)` returns its atoms; `len()` and iteration work over the
  fragments.
- `NuclearGraph(nodes, edges)`: fragments as nodes and a `ConnectivityTable`
  over the nodes as edges. It raises `ValueError` if the table does not cover
  exactly as many entries as there are nodes. `nnodes` gives the node count.

### `ghostfrag.topology`

- `covalent_radius(z)`: covalent radius in Bohr of element `z` (1-based,
  1 to 96); other values raise `ValueError`.
- `connectivity_by_covalent_radii(atoms, tau=0.10)`: atoms `i` and `j` are
  bonded when `r_ij <= (1 + tau) * (sigma_i + sigma_j)`. The default is also
  available as `DEFAULT_TAU`.
- `broken_bonds(frags, connectivity)`: the set of `(inside, outside)` atom
  index pairs for every bond that leaves a fragment.
- `nuclear_graph_from_connectivity(atoms, partitioner, connectivity_builder=connectivity_by_covalent_radii)`:
  calls `partitioner(atoms)` to get a `FragmentedNuclei`, calls
  `connectivity_builder(atoms)` for the atomic bonds, and returns a
  `NuclearGraph` in which two nodes share an edge when an atom of one is
  bonded to an atom of the other.

### `ghostfrag.screening`

- `CappedFragment(atoms, caps=())`: a fragment's atoms together with its cap
  atoms; `all_atoms` gives both.
- `min_distance(atoms0, atoms1)`: the smallest distance between an atom of
  one collection and an atom of the other, or `NO_SCREENING` (the largest
  finite float) when either is empty.
- `screen_by_minimum_distance(capped_fragments, n, threshold=NO_SCREENING)`:
  a pair of fragments survives when the minimum distance between them, caps
  included, is no more than `threshold`. Surviving m-mers grow into
  (m+1)-mers by joining surviving pairs that share exactly one fragment with
  them, up to `n`-mers; n-mers absorbed into larger ones are dropped, while
  fragments with no surviving partner stay as monomers. The result is a
  sorted list of sorted tuples of fragment indices. `n` below 2 or above the
  number of fragments raises `ValueError`.

## Example

```python
from ghostfrag.structures import Atom, FragmentedNuclei
from ghostfrag.topology import broken_bonds, connectivity_by_covalent_radii

atoms = [
    Atom("O", 8, 16.0, 0.0, -0.0758, 0.0),
    Atom("H", 1, 1.0, 0.8668, 0.6014, 0.0),
    Atom("H", 1, 1.0, -0.8668, 0.6014, 0.0),
]
table = connectivity_by_covalent_radii(atoms, 0.10)
print(table.bonds())  # [(0, 1), (0, 2)]

frags = FragmentedNuclei(atoms, [{0, 1}, {2}])
print(broken_bonds(frags, table))  # {(0, 2), (2, 0)}
```

## What the package does not do

It provides no partitioner of its own (such as a heavy-atom partition):
`nuclear_graph_from_connectivity` needs one passed in. It does not place cap
atoms on fragments; `CappedFragment` only holds caps computed elsewhere. It
has no command-line program and does not read or write molecule files.