"""Pytest fixtures and builders for flatfold tests."""

import pytest

from flatfold.graph import MOUNTAIN, VALLEY, CreaseGraph, Vertex


def single_vertex_graph(fold_types, angles):
    """One interior vertex whose creases all end on the paper boundary."""
    center = Vertex(name="c")
    boundary = []
    for k, (fold_type, angle) in enumerate(zip(fold_types, angles)):
        edge_point = Vertex(is_boundary=True, name=f"b{k}")
        boundary.append(edge_point)
        center.add_crease(edge_point, fold_type, angle)
    return CreaseGraph([center] + boundary)


def connect(a, b, fold_type=MOUNTAIN, angle_ab=90, angle_ba=90):
    """Add a crease a -> b and its reverse b -> a."""
    a.add_crease(b, fold_type, angle_ab)
    b.add_crease(a, fold_type, angle_ba)


def cycle_graph(length):
    """Interior vertices joined in a single cycle of the given length."""
    vertices = [Vertex(name=f"v{k}") for k in range(length)]
    for k in range(length):
        connect(vertices[k], vertices[(k + 1) % length])
    return CreaseGraph(vertices)


@pytest.fixture
def flat_vertex_graph():
    """A single flat-foldable degree-4 vertex: three mountains, one valley."""
    return single_vertex_graph(
        [MOUNTAIN, MOUNTAIN, MOUNTAIN, VALLEY], [90, 90, 90, 90]
    )


@pytest.fixture
def empty_graph():
    return CreaseGraph([])
