"""
Read and write crease patterns as JSON.

The file describes the pattern topologically: each vertex lists its creases
in counter-clockwise order with the integer sector angle to the next crease.

    {
      "vertices": [
        {"id": "c", "boundary": false,
         "creases": [{"to": "n", "assignment": "M", "angle": 90}, ...]},
        {"id": "n", "boundary": true}
      ]
    }
"""
import json
import logging

from flatfold.errors import PatternFormatError
from flatfold.graph import CreaseGraph, Vertex


logger = logging.getLogger(__name__)

REQUIRED_CREASE_KEYS = ("to", "assignment", "angle")


def _check_id(value, where):
    # id は JSON の文字列または整数に限る
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise PatternFormatError(f"{where} must be a string or an integer, got {value!r}")
    return value


def pattern_from_dict(data, check_symmetry=True):
    if not isinstance(data, dict) or "vertices" not in data:
        raise PatternFormatError("Missing required key: 'vertices'")
    if not isinstance(data["vertices"], list):
        raise PatternFormatError("'vertices' must be a list")

    # 1周目: 頂点を作成する (折り線は他の頂点を参照するため後で追加する)
    vertices = {}
    ordered = []
    for i, entry in enumerate(data["vertices"]):
        if not isinstance(entry, dict) or "id" not in entry:
            raise PatternFormatError(f"Vertex entry {i} is missing required key: 'id'")
        vertex_id = _check_id(entry["id"], f"Id of vertex entry {i}")
        if vertex_id in vertices:
            raise PatternFormatError(f"Duplicate vertex id: {vertex_id!r}")
        is_boundary = entry.get("boundary", False)
        if not isinstance(is_boundary, bool):
            raise PatternFormatError(
                f"'boundary' of vertex {vertex_id!r} must be true or false, got {is_boundary!r}"
            )
        creases = entry.get("creases", [])
        if not isinstance(creases, list):
            raise PatternFormatError(f"'creases' of vertex {vertex_id!r} must be a list")
        vertex = Vertex(is_boundary=is_boundary, name=vertex_id)
        vertices[vertex_id] = vertex
        ordered.append((vertex, creases))

    # 2周目: 折り線を順番どおりに追加する
    for vertex, creases in ordered:
        for crease in creases:
            if not isinstance(crease, dict):
                raise PatternFormatError(f"Crease of vertex {vertex.name!r} must be an object")
            for key in REQUIRED_CREASE_KEYS:
                if key not in crease:
                    raise PatternFormatError(
                        f"Crease of vertex {vertex.name!r} is missing required key: '{key}'"
                    )
            target_id = _check_id(crease["to"], f"Crease target of vertex {vertex.name!r}")
            if target_id not in vertices:
                raise PatternFormatError(
                    f"Crease of vertex {vertex.name!r} points to unknown vertex {target_id!r}"
                )
            vertex.add_crease(vertices[target_id], crease["assignment"], crease["angle"])

    logger.debug("Loaded pattern with %d vertices", len(ordered))
    return CreaseGraph([vertex for vertex, _ in ordered], check_symmetry=check_symmetry)


def pattern_to_dict(graph):
    # name を持たない頂点は位置をidとして使う
    ids = {
        vertex: vertex.name if vertex.name is not None else i
        for i, vertex in enumerate(graph.vertices)
    }
    vertices = []
    for vertex in graph.vertices:
        entry = {"id": ids[vertex], "boundary": vertex.is_boundary}
        if vertex.creases:
            entry["creases"] = [
                {"to": ids[c.target], "assignment": c.fold_type, "angle": c.sector_angle}
                for c in vertex.creases
            ]
        vertices.append(entry)
    return {"vertices": vertices}


def load_pattern(file_path, check_symmetry=True):
    """JSONファイルを読み込み、CreaseGraph を返す"""
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        raise PatternFormatError(f"Cannot read pattern file {file_path}: {e}") from e
    return pattern_from_dict(data, check_symmetry=check_symmetry)


def dump_pattern(graph, file_path):
    with open(file_path, 'w', encoding='utf-8') as f:
        json.dump(pattern_to_dict(graph), f, indent=2)
