import logging
from collections import deque, namedtuple

from flatfold.config import resolve_config
from flatfold.errors import DisconnectedPatternError


logger = logging.getLogger(__name__)

RED = "r"
BLUE = "b"

COLORED = "Colored"
CONFLICT = "Conflict"
EMPTY_GRAPH = "EmptyGraph"


ColoringOutcome = namedtuple('ColoringOutcome', [
    'status',    # COLORED / CONFLICT / EMPTY_GRAPH
    'colors',    # Vertex -> "r" または "b"
    'conflict'   # 同じ色になった (頂点, 隣接頂点) の組、なければ None
])


def _opposite(color):
    return BLUE if color == RED else RED


def _color_component(seed, colors):
    """seed から BFS で色を交互に割り当てる。衝突した組を返す"""
    colors[seed] = RED
    q = deque([seed])
    while q:
        temp = q.popleft()
        for crease in temp.creases:
            examinee = crease.target
            # 紙の境界上の交点は頂点として数えない
            if examinee.is_boundary:
                continue
            if examinee not in colors:
                colors[examinee] = _opposite(colors[temp])
                q.append(examinee)
            elif colors[examinee] == colors[temp]:
                return temp, examinee
    return None


def assign_colors(graph, config=None):
    """
    内部頂点に2色を割り当てる。

    色はこの呼び出しの中だけで作られる辞書に格納され、グラフには書き戻さない。
    COMPONENT_POLICY が "each" の場合、彩色されていない内部頂点が残る限り
    次の頂点から新しい BFS を始めるので、全ての連結成分が彩色される。
    """
    config = resolve_config(config)
    colors = {}

    if len(graph.vertices) == 0:
        logger.debug("Graph has 0 elements, cannot color its vertices")
        return ColoringOutcome(EMPTY_GRAPH, colors, None)

    if config.COMPONENT_POLICY == "single":
        component_count = len(graph.interior_components())
        if component_count > 1:
            raise DisconnectedPatternError(
                f"Pattern has {component_count} disconnected interior components; "
                f"the 'single' component policy requires exactly one.",
                component_count,
            )

    seeds = 0
    for seed in graph.interior_vertices():
        if seed in colors:
            continue
        seeds += 1
        conflict = _color_component(seed, colors)
        if conflict is not None:
            # 隣接頂点と同じ色の頂点が見つかった時点で終了する
            logger.debug("Pattern is not two colorable (%r and %r share a color)", *conflict)
            return ColoringOutcome(CONFLICT, colors, conflict)

    logger.debug("Colored %d interior vertices from %d seed(s)", len(colors), seeds)
    return ColoringOutcome(COLORED, colors, None)
