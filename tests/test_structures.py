import pytest

from ghostfrag.structures import (
    Atom,
    ConnectivityTable,
    FragmentedNuclei,
    NuclearGraph,
)

OX, OY = 0.00000000000000, -0.07579039945857
HX, HY = 0.86681456860648, 0.60144316994806


def water(n):
    atoms = []
    for i in range(n):
        z = 3.0 * i
        atoms.append(Atom("O", 8, 16.0, OX, OY, z))
        atoms.append(Atom("H", 1, 1.0, HX, HY, z))
        atoms.append(Atom("H", 1, 1.0, -HX, HY, z))
    return atoms


def water_connectivity(n):
    table = ConnectivityTable(3 * n)
    for w in range(n):
        start = 3 * w
        table.add_bond(start, start + 1)
        table.add_bond(start, start + 2)
    return table


def test_atom_distance_symmetric_and_zero_to_self():
    a = Atom("O", 8, 16.0, OX, OY, 0.0)
    b = Atom("O", 8, 16.0, OX, OY, 3.0)
    assert a.distance(b) == pytest.approx(3.0)
    assert b.distance(a) == pytest.approx(a.distance(b))
    assert a.distance(a) == 0.0


def test_atom_equality():
    assert Atom("H", 1, 1.0, HX, HY, 0.0) == Atom("H", 1, 1.0, HX, HY, 0.0)
    assert Atom("H", 1, 1.0, HX, HY, 0.0) != Atom("H", 1, 1.0, -HX, HY, 0.0)


@pytest.mark.parametrize(
    "n, bonds",
    [
        (0, []),
        (1, [(0, 1), (0, 2)]),
        (2, [(0, 1), (0, 2), (3, 4), (3, 5)]),
        (3, [(0, 1), (0, 2), (3, 4), (3, 5), (6, 7), (6, 8)]),
    ],
)
def test_water_connectivity(n, bonds):
    corr = ConnectivityTable(3 * n)
    for i, j in bonds:
        corr.add_bond(i, j)
    table = water_connectivity(n)
    assert table == corr
    assert table.bonds() == bonds
    assert table.nbonds() == len(bonds)


def test_add_bond_order_does_not_matter():
    a = ConnectivityTable(3)
    a.add_bond(2, 0)
    b = ConnectivityTable(3)
    b.add_bond(0, 2)
    assert a == b
    assert a.bonds() == [(0, 2)]


def test_add_bond_is_idempotent():
    table = ConnectivityTable(2)
    table.add_bond(0, 1)
    table.add_bond(1, 0)
    assert table.nbonds() == 1


def test_bonded_atoms():
    table = water_connectivity(2)
    assert table.bonded_atoms(0) == {1, 2}
    assert table.bonded_atoms(4) == {3}


def test_connectivity_bad_indices():
    table = ConnectivityTable(3)
    with pytest.raises(IndexError):
        table.add_bond(0, 3)
    with pytest.raises(ValueError):
        table.add_bond(1, 1)
    with pytest.raises(IndexError):
        table.bonded_atoms(5)


def test_tables_of_different_size_differ():
    assert not (ConnectivityTable(2) == ConnectivityTable(3))


def test_fragmented_nuclei_water():
    frags = FragmentedNuclei(water(3))
    for i in range(3):
        frags.insert([3 * i, 3 * i + 1, 3 * i + 2])
    assert len(frags) == 3
    assert list(frags) == [(0, 1, 2), (3, 4, 5), (6, 7, 8)]
    assert frags.nuclear_indices(1) == (3, 4, 5)
    assert frags == FragmentedNuclei(water(3), [(0, 1, 2), (3, 4, 5), (6, 7, 8)])


def test_fragment_indices_sorted():
    frags = FragmentedNuclei(water(2))
    frags.insert({3, 2, 4})
    assert frags.nuclear_indices(0) == (2, 3, 4)


def test_fragment_atoms():
    atoms = water(2)
    frags = FragmentedNuclei(atoms, [(3, 4, 5)])
    assert frags.atoms(0) == atoms[3:6]


def test_fragment_out_of_range():
    frags = FragmentedNuclei(water(1))
    with pytest.raises(IndexError):
        frags.insert([0, 3])


def test_empty_fragmented_nuclei():
    frags = FragmentedNuclei(water(0))
    assert len(frags) == 0
    assert frags == FragmentedNuclei()


def test_fragmented_nuclei_differ_by_supersystem():
    assert FragmentedNuclei(water(1), [(0,)]) != FragmentedNuclei(water(2), [(0,)])


def test_nuclear_graph():
    nodes = FragmentedNuclei(water(2), [(0, 1, 2), (3, 4, 5)])
    edges = ConnectivityTable(2)
    edges.add_bond(0, 1)
    graph = NuclearGraph(nodes, edges)
    assert graph.nnodes == 2
    assert graph.edges.bonds() == [(0, 1)]
    assert graph == NuclearGraph(nodes, edges)


def test_nuclear_graph_size_mismatch():
    nodes = FragmentedNuclei(water(1), [(0, 1, 2)])
    with pytest.raises(ValueError):
        NuclearGraph(nodes, ConnectivityTable(2))


def test_empty_nuclear_graph():
    graph = NuclearGraph()
    assert graph.nnodes == 0
    assert graph.edges.nbonds() == 0