"""
平坦折り畳み可能性の局所的な必要条件を検証する。

各定理には頂点単位の関数 (エラーの辞書または None を返す) と、
グラフ全体の内部頂点に対して bool を返す関数がある。
境界頂点はどの定理の対象にもならない。

https://courses.csail.mit.edu/6.849/fall10/lectures/L20_images.pdf
"""
from flatfold.config import resolve_config
from flatfold.graph import MOUNTAIN, VALLEY


def circular_neighbors(length, index):
    """環状リストの前後のインデックスを返す"""
    return (index - 1) % length, (index + 1) % length


def _interior_with_index(graph):
    for i, vertex in enumerate(graph.vertices):
        if not vertex.is_boundary:
            yield i, vertex


def is_two_colorable(graph, colors):
    """隣接する内部頂点と同じ色を持つ内部頂点がないかを検証する"""
    for vertex in graph.interior_vertices():
        for crease in vertex.creases:
            if crease.target.is_boundary:
                continue
            if colors.get(vertex) == colors.get(crease.target):
                return False
    return True


def check_maekawa_theorem(vertex, vertex_index, config=None):
    """前川の定理を検証する: |M - V| = 2"""
    config = resolve_config(config)
    m_count = sum(1 for crease in vertex.creases if crease.fold_type == MOUNTAIN)
    v_count = sum(1 for crease in vertex.creases if crease.fold_type == VALLEY)
    difference = abs(m_count - v_count)
    if difference != config.MAEKAWA_DIFFERENCE:
        return {
            "type": "Maekawa",
            "vertex": vertex_index,
            "message": (
                f"Vertex {vertex_index} fails Maekawa's theorem. "
                f"|M({m_count}) - V({v_count})| = {difference}, but should be {config.MAEKAWA_DIFFERENCE}."
            ),
            "context": {"mountain_count": m_count, "valley_count": v_count}
        }
    return None


def check_kawasaki_theorem(vertex, vertex_index, config=None):
    """川崎の定理を検証する: 交互の角度の和がそれぞれ180度になる"""
    config = resolve_config(config)
    angles = [crease.sector_angle for crease in vertex.creases]

    # 折り線の数は必ず偶数でなければならない
    if len(angles) % 2 != 0:
        return {
            "type": "Kawasaki",
            "vertex": vertex_index,
            "message": f"Vertex {vertex_index} has an odd number of creases ({len(angles)}).",
            "context": {"crease_count": len(angles)}
        }

    even_sum = sum(angles[j] for j in range(0, len(angles), 2))
    odd_sum = sum(angles[j] for j in range(1, len(angles), 2))

    # 総和は360度なので片方だけで十分だが、入力の整合性のため両方を確認する
    if even_sum != config.KAWASAKI_ANGLE or odd_sum != config.KAWASAKI_ANGLE:
        return {
            "type": "Kawasaki",
            "vertex": vertex_index,
            "message": (
                f"Vertex {vertex_index} fails Kawasaki's theorem. "
                f"Even sum: {even_sum}, Odd sum: {odd_sum}, both should be {config.KAWASAKI_ANGLE}."
            ),
            "context": {"even_sum": even_sum, "odd_sum": odd_sum}
        }
    return None


def check_big_little_big_lemma(vertex, vertex_index):
    """
    大小大の補題を検証する。

    極小の角度を挟む2本の折り線 (j-1 と j+1) は、山折りと谷折りで
    異なっていなければならない。折り線が2本以下の頂点は対象外。

    https://en.wikipedia.org/wiki/Big-little-big_lemma
    """
    creases = vertex.creases
    num_creases = len(creases)
    if num_creases <= 2:
        return None

    for j in range(num_creases):
        before, after = circular_neighbors(num_creases, j)
        angle = creases[j].sector_angle
        if angle < creases[before].sector_angle and angle < creases[after].sector_angle:
            if creases[before].fold_type == creases[after].fold_type:
                return {
                    "type": "BigLittleBig",
                    "vertex": vertex_index,
                    "message": (
                        f"Vertex {vertex_index}: the locally minimal angle at position {j} "
                        f"({angle} deg) is flanked by two '{creases[before].fold_type}' creases."
                    ),
                    "context": {
                        "position": j,
                        "bounding_positions": [before, after],
                        "fold_type": creases[before].fold_type
                    }
                }
    return None


def satisfies_maekawa(graph, config=None):
    config = resolve_config(config)
    return all(check_maekawa_theorem(v, i, config) is None for i, v in _interior_with_index(graph))


def satisfies_kawasaki(graph, config=None):
    config = resolve_config(config)
    return all(check_kawasaki_theorem(v, i, config) is None for i, v in _interior_with_index(graph))


def satisfies_big_little_big(graph):
    return all(check_big_little_big_lemma(v, i) is None for i, v in _interior_with_index(graph))
