"""
折り線パターンを無向グラフとしてモデル化する。

頂点は折り線の交点、各頂点が持つ Crease はその頂点から隣接頂点へ向かう
ハーフエッジを表す。折り線のリストは反時計回りの順に並んでいる。
"""
import logging
from collections import Counter, deque, namedtuple

from flatfold.errors import AsymmetricCreaseError, PatternFormatError


logger = logging.getLogger(__name__)

MOUNTAIN = "M"
VALLEY = "V"
FOLD_TYPES = (MOUNTAIN, VALLEY)


# 頂点から伸びるハーフエッジ
Crease = namedtuple('Crease', [
    'target',        # 接続先の Vertex
    'fold_type',     # "M" または "V"
    'sector_angle'   # この折り線と反時計回りに次の折り線が成す角度(度, 整数)
])


class Vertex:
    """折り線の交点。境界頂点は紙の縁で折り線が終わる点を表す。"""

    def __init__(self, is_boundary=False, creases=None, name=None):
        self.is_boundary = is_boundary
        self.creases = list(creases) if creases is not None else []
        self.name = name

    def add_crease(self, target, fold_type, sector_angle):
        if fold_type not in FOLD_TYPES:
            raise PatternFormatError(
                f"Fold type must be one of {FOLD_TYPES}, got {fold_type!r}"
            )
        # bool は int のサブクラスなので明示的に除外する
        if not isinstance(sector_angle, int) or isinstance(sector_angle, bool):
            raise PatternFormatError(
                f"Sector angle must be an integer number of degrees, got {sector_angle!r}"
            )
        crease = Crease(target=target, fold_type=fold_type, sector_angle=sector_angle)
        self.creases.append(crease)
        return crease

    @property
    def degree(self):
        return len(self.creases)

    def __repr__(self):
        kind = "boundary" if self.is_boundary else "interior"
        label = f" {self.name!r}" if self.name is not None else ""
        return f"Vertex({kind}{label}, creases={len(self.creases)})"


class CreaseGraph:
    """
    頂点の集合を保持する。構築後はパターンデータとして読み取り専用で扱う。
    """

    def __init__(self, vertices, check_symmetry=True):
        self.vertices = list(vertices)
        self._indices = {vertex: i for i, vertex in enumerate(self.vertices)}
        if len(self._indices) != len(self.vertices):
            raise PatternFormatError("The same vertex appears more than once in the pattern")
        if check_symmetry:
            self.check_symmetry()

    def __len__(self):
        return len(self.vertices)

    def __iter__(self):
        return iter(self.vertices)

    def index_of(self, vertex):
        return self._indices[vertex]

    def interior_vertices(self):
        return [vertex for vertex in self.vertices if not vertex.is_boundary]

    def _require_member(self, vertex, crease):
        if crease.target not in self._indices:
            raise PatternFormatError(
                f"Vertex {self._indices[vertex]} has a crease to a vertex outside the pattern"
            )

    def check_symmetry(self):
        """内部頂点同士を結ぶ折り線が、同じ折り種別の逆向きの折り線を持つかを検証する"""
        outgoing = {}
        for vertex in self.vertices:
            counts = Counter()
            for crease in vertex.creases:
                self._require_member(vertex, crease)
                # 境界頂点は折り線を持たなくてよい
                if vertex.is_boundary or crease.target.is_boundary:
                    continue
                counts[(crease.target, crease.fold_type)] += 1
            outgoing[vertex] = counts

        for vertex, counts in outgoing.items():
            for (target, fold_type), count in counts.items():
                reverse = outgoing[target][(vertex, fold_type)]
                if reverse != count:
                    i, j = self._indices[vertex], self._indices[target]
                    raise AsymmetricCreaseError(
                        f"Vertex {i} has {count} '{fold_type}' crease(s) to vertex {j}, "
                        f"but vertex {j} has {reverse} back to vertex {i}.",
                        vertex_index=i,
                        target_index=j,
                    )

    def interior_components(self):
        """内部頂点のみからなる部分グラフの連結成分を、頂点の並び順に列挙する"""
        adjacency = {vertex: [] for vertex in self.interior_vertices()}
        for vertex in adjacency:
            for crease in vertex.creases:
                self._require_member(vertex, crease)
                if crease.target.is_boundary:
                    continue
                adjacency[vertex].append(crease.target)
                adjacency[crease.target].append(vertex)

        components = []
        seen = set()
        for seed in adjacency:
            if seed in seen:
                continue
            component = []
            seen.add(seed)
            queue = deque([seed])
            while queue:
                current = queue.popleft()
                component.append(current)
                for neighbor in adjacency[current]:
                    if neighbor not in seen:
                        seen.add(neighbor)
                        queue.append(neighbor)
            components.append(component)

        logger.debug("Pattern has %d interior component(s)", len(components))
        return components
