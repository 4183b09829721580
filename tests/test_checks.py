"""Tests for flatfold.checks: the four local flat-foldability checks."""

import pytest

from conftest import connect, cycle_graph, single_vertex_graph
from flatfold.checks import (
    check_big_little_big_lemma,
    check_kawasaki_theorem,
    check_maekawa_theorem,
    circular_neighbors,
    is_two_colorable,
    satisfies_big_little_big,
    satisfies_kawasaki,
    satisfies_maekawa,
)
from flatfold.coloring import BLUE, RED, assign_colors
from flatfold.config import Config
from flatfold.graph import MOUNTAIN as M
from flatfold.graph import VALLEY as V
from flatfold.graph import CreaseGraph, Vertex


class TestCircularNeighbors:
    def test_wraps_at_both_ends(self):
        assert circular_neighbors(4, 0) == (3, 1)
        assert circular_neighbors(4, 3) == (2, 0)

    def test_middle(self):
        assert circular_neighbors(6, 2) == (1, 3)


class TestTwoColorable:
    def test_bipartite_coloring_passes(self):
        graph = cycle_graph(4)
        assert is_two_colorable(graph, assign_colors(graph).colors)

    def test_adjacent_interior_vertices_with_same_color_fail(self):
        a, b = Vertex(), Vertex()
        connect(a, b)
        graph = CreaseGraph([a, b])
        assert not is_two_colorable(graph, {a: RED, b: RED})
        assert is_two_colorable(graph, {a: RED, b: BLUE})

    def test_boundary_neighbors_ignored(self):
        graph = single_vertex_graph([M, M, M, V], [90, 90, 90, 90])
        assert is_two_colorable(graph, {graph.vertices[0]: RED})


class TestMaekawa:
    @pytest.mark.parametrize("fold_types", [[M, M, M, V], [V, V, V, M], [M, M, M, M, V, V]])
    def test_difference_of_two_passes(self, fold_types):
        graph = single_vertex_graph(fold_types, [60] * len(fold_types))
        assert satisfies_maekawa(graph)

    @pytest.mark.parametrize("fold_types", [[M, M, M, M], [M, V, M, V], [M, M, V]])
    def test_other_differences_fail(self, fold_types):
        graph = single_vertex_graph(fold_types, [90] * len(fold_types))
        assert not satisfies_maekawa(graph)

    def test_error_record(self):
        graph = single_vertex_graph([M, M, M, M], [90, 90, 90, 90])
        error = check_maekawa_theorem(graph.vertices[0], 0)
        assert error["type"] == "Maekawa"
        assert error["vertex"] == 0
        assert error["context"] == {"mountain_count": 4, "valley_count": 0}

    def test_boundary_vertices_are_skipped(self):
        edge_point = Vertex(is_boundary=True)
        other = Vertex(is_boundary=True)
        edge_point.add_crease(other, M, 180)
        assert satisfies_maekawa(CreaseGraph([edge_point, other]))

    def test_difference_comes_from_config(self):
        graph = single_vertex_graph([M, V, M, V], [90] * 4)
        assert satisfies_maekawa(graph, Config(MAEKAWA_DIFFERENCE=0))


class TestKawasaki:
    def test_right_angles_pass(self):
        graph = single_vertex_graph([M, M, M, V], [90, 90, 90, 90])
        assert satisfies_kawasaki(graph)

    def test_unequal_alternate_sums_fail(self):
        graph = single_vertex_graph([M, M, M, V], [80, 100, 80, 100])
        assert not satisfies_kawasaki(graph)
        error = check_kawasaki_theorem(graph.vertices[0], 0)
        assert error["context"] == {"even_sum": 160, "odd_sum": 200}

    def test_odd_degree_fails_regardless_of_angles(self):
        graph = single_vertex_graph([M, M, V], [120, 120, 120])
        error = check_kawasaki_theorem(graph.vertices[0], 0)
        assert error["context"] == {"crease_count": 3}
        assert not satisfies_kawasaki(graph)

    def test_both_sums_must_be_180(self):
        # 偶数側と奇数側が等しくても180でなければ失敗する
        graph = single_vertex_graph([M, M, M, V], [100, 100, 100, 100])
        assert not satisfies_kawasaki(graph)

    def test_six_creases(self):
        graph = single_vertex_graph([M, M, M, M, V, V], [30, 50, 70, 60, 80, 70])
        assert satisfies_kawasaki(graph)


class TestBigLittleBig:
    def test_minimum_flanked_by_same_fold_type_fails(self):
        graph = single_vertex_graph([M, V, M, V], [90, 30, 90, 150])
        assert not satisfies_big_little_big(graph)
        error = check_big_little_big_lemma(graph.vertices[0], 0)
        assert error["context"]["position"] == 1
        assert error["context"]["bounding_positions"] == [0, 2]

    def test_minimum_flanked_by_mountain_and_valley_passes(self):
        graph = single_vertex_graph([M, M, V, V], [90, 30, 90, 150])
        assert satisfies_big_little_big(graph)

    def test_minimum_at_first_position_wraps_around(self):
        # position 0 の前は最後の折り線
        graph = single_vertex_graph([M, V, M, V], [30, 90, 150, 90])
        error = check_big_little_big_lemma(graph.vertices[0], 0)
        assert error["context"]["position"] == 0
        assert error["context"]["bounding_positions"] == [3, 1]

    def test_minimum_at_last_position_wraps_around(self):
        graph = single_vertex_graph([V, M, V, M], [150, 90, 90, 30])
        error = check_big_little_big_lemma(graph.vertices[0], 0)
        assert error["context"]["position"] == 3
        assert error["context"]["bounding_positions"] == [2, 0]

    def test_equal_angles_have_no_strict_minimum(self):
        graph = single_vertex_graph([M, M, M, M], [90, 90, 90, 90])
        assert satisfies_big_little_big(graph)

    def test_two_creases_are_exempt(self):
        graph = single_vertex_graph([M, M], [10, 350])
        assert check_big_little_big_lemma(graph.vertices[0], 0) is None
