from __future__ import annotations

from sudoku_cp.topology import build_topology, cell_index, cell_name, get_topology, verify


def _names(cells) -> set[str]:
    return {cell_name(cell) for cell in cells}


def test_topology_shape() -> None:
    topo = get_topology()
    assert len(topo.cells) == 81
    assert len(topo.unitlist) == 27
    assert all(len(unit) == 9 for unit in topo.unitlist)
    assert all(len(topo.units[cell]) == 3 for cell in topo.cells)
    assert all(len(topo.peers[cell]) == 20 for cell in topo.cells)
    assert all(cell not in topo.peers[cell] for cell in topo.cells)
    assert verify(topo) == []


def test_units_and_peers_of_c2() -> None:
    topo = get_topology()
    c2 = cell_index("C2")
    units = [_names(unit) for unit in topo.units[c2]]
    assert {"A2", "B2", "C2", "D2", "E2", "F2", "G2", "H2", "I2"} in units
    assert {"C1", "C2", "C3", "C4", "C5", "C6", "C7", "C8", "C9"} in units
    assert {"A1", "A2", "A3", "B1", "B2", "B3", "C1", "C2", "C3"} in units
    assert _names(topo.peers[c2]) == {
        "A2", "B2", "D2", "E2", "F2", "G2", "H2", "I2",
        "C1", "C3", "C4", "C5", "C6", "C7", "C8", "C9",
        "A1", "A3", "B1", "B3",
    }


def test_topology_is_built_once() -> None:
    assert get_topology() is get_topology()
    assert build_topology() == get_topology()


def test_cell_names_round_trip_corners() -> None:
    assert cell_name(0) == "A1"
    assert cell_name(80) == "I9"
    assert cell_index("E5") == 40


def test_verify_reports_broken_topology() -> None:
    topo = build_topology()
    broken = type(topo)(
        cells=topo.cells,
        unitlist=topo.unitlist[:-1],
        units=topo.units,
        peers=(topo.peers[0] | {0},) + topo.peers[1:],
    )
    problems = verify(broken)
    assert "expected 27 units, got 26" in problems
    assert "A1 has 21 peers" in problems
    assert "A1 is its own peer" in problems
