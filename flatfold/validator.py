"""
Checks whether a crease pattern passes the local flat-foldability conditions.

validate() runs the checks in a fixed order and stops at the first failure:
  1. two-colorability
  2. Maekawa's theorem
  3. Kawasaki's theorem
  4. big-little-big lemma

Details regarding these laws can be found in the "Pure Origami" section:
https://en.wikipedia.org/wiki/Mathematics_of_paper_folding#Pure_origami
"""
import logging
from collections import namedtuple

from flatfold.checks import (
    check_big_little_big_lemma,
    check_kawasaki_theorem,
    check_maekawa_theorem,
    is_two_colorable,
    satisfies_big_little_big,
    satisfies_kawasaki,
    satisfies_maekawa,
)
from flatfold.coloring import CONFLICT, EMPTY_GRAPH, assign_colors
from flatfold.config import resolve_config


logger = logging.getLogger(__name__)

VALID = "Valid"
EMPTY = "EmptyGraph"
NOT_TWO_COLORABLE = "NotTwoColorable"
MAEKAWA_VIOLATION = "MaekawaViolation"
KAWASAKI_VIOLATION = "KawasakiViolation"
BIG_LITTLE_BIG_VIOLATION = "BigLittleBigViolation"

MESSAGES = {
    VALID: "Pattern satisfies the local flat-foldability conditions",
    EMPTY: "Graph has 0 elements, cannot color its vertices",
    NOT_TWO_COLORABLE: "Pattern is not two colorable",
    MAEKAWA_VIOLATION: "Pattern does not uphold Maekawa's theorem",
    KAWASAKI_VIOLATION: "Pattern does not uphold Kawasaki's theorem",
    BIG_LITTLE_BIG_VIOLATION: "A layer penetrates a fold in the pattern",
}


class ValidationResult(namedtuple('ValidationResult', ['outcome', 'message'])):
    """Outcome of validate(): one outcome name plus its fixed diagnostic message."""

    __slots__ = ()

    @property
    def valid(self):
        return self.outcome == VALID

    def to_dict(self):
        return {"valid": self.valid, "outcome": self.outcome, "message": self.message}


def _result(outcome):
    if outcome != VALID:
        logger.warning(MESSAGES[outcome])
    return ValidationResult(outcome, MESSAGES[outcome])


def validate(graph, config=None):
    """
    Check if the given crease pattern is locally flat-foldable.

    Returns a ValidationResult naming the first failed check, or VALID.
    Colors are computed per call, so repeated calls on the same graph
    always give the same result.
    """
    config = resolve_config(config)

    coloring = assign_colors(graph, config)
    if coloring.status == EMPTY_GRAPH:
        return _result(EMPTY)
    if coloring.status == CONFLICT or not is_two_colorable(graph, coloring.colors):
        return _result(NOT_TWO_COLORABLE)
    if not satisfies_maekawa(graph, config):
        return _result(MAEKAWA_VIOLATION)
    if not satisfies_kawasaki(graph, config):
        return _result(KAWASAKI_VIOLATION)
    if not satisfies_big_little_big(graph):
        return _result(BIG_LITTLE_BIG_VIOLATION)
    return _result(VALID)


def diagnose(graph, config=None):
    """
    Collect every local violation instead of stopping at the first one.

    Returns {"valid": bool, "errors": [...]}; each error is a dict with
    "type", "vertex", "message" and "context". At most
    MAX_ERRORS_TO_REPORT errors are returned.
    """
    config = resolve_config(config)
    limit = config.MAX_ERRORS_TO_REPORT

    coloring = assign_colors(graph, config)
    if coloring.status == EMPTY_GRAPH:
        return {"valid": False, "errors": [{"type": "EmptyGraph", "message": MESSAGES[EMPTY]}]}

    errors = []
    if coloring.status == CONFLICT:
        vertex, neighbor = coloring.conflict
        i, j = graph.index_of(vertex), graph.index_of(neighbor)
        errors.append({
            "type": "TwoColorability",
            "vertex": i,
            "message": f"Vertex {i} and its neighbor {j} share a color.",
            "context": {"involved_vertices": sorted([i, j])}
        })

    for i, vertex in enumerate(graph.vertices):
        if vertex.is_boundary:
            continue
        vertex_errors = [
            check_maekawa_theorem(vertex, i, config),
            check_kawasaki_theorem(vertex, i, config),
            check_big_little_big_lemma(vertex, i),
        ]
        errors.extend(e for e in vertex_errors if e is not None)
        if len(errors) >= limit:
            break

    if errors:
        logger.info("Found %d local violation(s)", len(errors))
        return {"valid": False, "errors": errors[:limit]}
    return {"valid": True, "errors": []}
