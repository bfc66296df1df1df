"""Tests for adjacency map construction."""

from graphprep.adjacency import build_adjacency


def test_empty_edges():
    """No edges gives an empty map in both modes."""
    assert build_adjacency([], directed=True) == {}
    assert build_adjacency([], directed=False) == {}


def test_directed_records_one_direction(make_edges):
    """Directed edges are only recorded source -> target."""
    edges = make_edges("A-B", "A-C", "B-C")
    adjacency = build_adjacency(edges, directed=True)

    assert adjacency == {"A": ["B", "C"], "B": ["C"]}
    assert "C" not in adjacency


def test_directed_dedupes_repeats(make_edges):
    """Repeated edges do not produce repeated neighbors."""
    edges = make_edges("A-B", "A-B", "B-A", "A-C")
    adjacency = build_adjacency(edges, directed=True)

    assert adjacency == {"A": ["B", "C"], "B": ["A"]}


def test_undirected_records_both_directions(make_edges):
    """Undirected edges are recorded both ways, deduplicated per node."""
    edges = make_edges("A-B", "B-A", "A-C")
    adjacency = build_adjacency(edges, directed=False)

    assert adjacency == {"A": ["B", "C"], "B": ["A"], "C": ["A"]}


def test_neighbor_order_is_insertion_order(make_edges):
    """Neighbors keep first-insertion order, not sorted order."""
    edges = make_edges("A-Z", "A-M", "A-B", "A-M")
    adjacency = build_adjacency(edges, directed=True)

    assert adjacency["A"] == ["Z", "M", "B"]


def test_undirected_symmetry(make_edges):
    """For every undirected edge both endpoints list each other."""
    edges = make_edges("A-B", "B-C", "C-A", "D-E", "E-E", "B-F")
    adjacency = build_adjacency(edges, directed=False)

    for edge in edges:
        assert edge.target in adjacency[edge.source]
        assert edge.source in adjacency[edge.target]


def test_directed_never_implies_reverse(make_edges):
    """A directed edge does not imply its reverse."""
    edges = make_edges("A-B", "C-D", "D-C")
    adjacency = build_adjacency(edges, directed=True)

    assert "A" not in adjacency.get("B", [])
    assert adjacency["C"] == ["D"]
    assert adjacency["D"] == ["C"]


def test_self_loop(make_edges):
    """Self-loops appear once as their own neighbor."""
    assert build_adjacency(make_edges("A-A", "A-A"), directed=False) == {"A": ["A"]}
    assert build_adjacency(make_edges("A-A"), directed=True) == {"A": ["A"]}


def test_dangling_ids_are_kept(make_edges):
    """Unknown ids are treated like any other id."""
    adjacency = build_adjacency(make_edges("A-ghost"), directed=False)

    assert adjacency == {"A": ["ghost"], "ghost": ["A"]}


def test_input_not_mutated(make_edges):
    """Building the map leaves the edge list untouched."""
    edges = make_edges("A-B", "B-C")
    snapshot = list(edges)
    build_adjacency(edges, directed=False)

    assert edges == snapshot
