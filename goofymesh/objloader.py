"""Loading of Wavefront OBJ meshes written with full ``v/vt/vn`` faces."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterable
from dataclasses import dataclass

from goofymesh.mesh import Mesh, Vertex

logger = logging.getLogger(__name__)

_CORNER = r"\s*([+-]?\d+)/\s*([+-]?\d+)/\s*([+-]?\d+)"
_FACE = re.compile(r"f " + _CORNER + r"\s*" + _CORNER + r"\s*" + _CORNER)


class ObjFormatError(ValueError):
    """Raised when an OBJ document cannot be turned into a mesh."""


@dataclass(frozen=True)
class _Face:
    line_number: int
    text: str
    corners: tuple[tuple[int, int, int], ...]


def _floats(line: str, count: int, line_number: int) -> tuple[float, ...]:
    fields = line.split()[1:1 + count]
    if len(fields) < count:
        raise ObjFormatError(f"line {line_number}: expected {count} numbers: {line.rstrip()}")
    try:
        return tuple(float(value) for value in fields)
    except ValueError as exc:
        raise ObjFormatError(f"line {line_number}: bad number: {line.rstrip()}") from exc


def _lookup(table: list, index: int, what: str, face: _Face):
    if index <= 0 or index > len(table):
        raise ObjFormatError(
            f"line {face.line_number}: {what} index {index} out of bounds: {face.text.rstrip()}"
        )
    return table[index - 1]


def parse_obj(lines: Iterable[str]) -> Mesh:
    """Build a mesh from the lines of an OBJ document.

    Only triangles given as ``v/vt/vn`` triples are used; extra corners of a
    face are ignored and faces in any other form are skipped with a warning.
    Every face gets three fresh white vertices on texture layer 0.
    """
    positions: list[tuple[float, ...]] = []
    tex_coords: list[tuple[float, ...]] = []
    normals: list[tuple[float, ...]] = []
    faces: list[_Face] = []

    for line_number, line in enumerate(lines, start=1):
        if not line or line.startswith(("#", "\n")):
            continue
        if line.startswith("vt "):
            tex_coords.append(_floats(line, 2, line_number))
        elif line.startswith("vn "):
            normals.append(_floats(line, 3, line_number))
        elif line.startswith("v "):
            positions.append(_floats(line, 3, line_number))
        elif line.startswith("f "):
            match = _FACE.match(line)
            if match is None:
                logger.warning("Malformed face line %d: %s", line_number, line.rstrip())
                continue
            numbers = [int(group) for group in match.groups()]
            corners = tuple(
                (numbers[k], numbers[k + 1], numbers[k + 2]) for k in range(0, 9, 3)
            )
            faces.append(_Face(line_number, line, corners))

    vertices: list[Vertex] = []
    for face in faces:
        for vi, ti, ni in face.corners:
            vertices.append(
                Vertex(
                    position=_lookup(positions, vi, "vertex", face),
                    normal=_lookup(normals, ni, "normal", face),
                    tex_coords=_lookup(tex_coords, ti, "texture coordinate", face),
                )
            )

    logger.debug(
        "Parsed %d vertices, %d texture coords, %d normals, %d faces",
        len(positions), len(tex_coords), len(normals), len(faces),
    )
    return Mesh(vertices, list(range(len(vertices))))


def load_obj(path: str | os.PathLike[str]) -> Mesh:
    """Read an OBJ file from ``path`` and build a mesh from it."""
    with open(path, encoding="utf-8") as handle:
        return parse_obj(handle)