"""Vertices and triangle meshes, with in-place editing operations."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]


@dataclass(frozen=True)
class Vertex:
    """A single mesh vertex as laid out for the renderer."""

    position: Vec3 = (0.0, 0.0, 0.0)
    color: Vec3 = (1.0, 1.0, 1.0)
    normal: Vec3 = (0.0, 0.0, 0.0)
    tex_coords: Vec2 = (0.0, 0.0)
    tex_index: int = 0
    is_3d: bool = True


@dataclass
class Mesh:
    """An indexed triangle mesh."""

    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def index_count(self) -> int:
        return len(self.indices)

    def translate(self, x: float, y: float, z: float) -> None:
        """Move every vertex by (x, y, z)."""
        self.vertices = [
            replace(v, position=(v.position[0] + x, v.position[1] + y, v.position[2] + z))
            for v in self.vertices
        ]

    def scale(self, x: float, y: float, z: float) -> None:
        """Multiply every vertex position component-wise by (x, y, z)."""
        self.vertices = [
            replace(v, position=(v.position[0] * x, v.position[1] * y, v.position[2] * z))
            for v in self.vertices
        ]

    def set_texture(self, tex_index: int) -> None:
        """Make every vertex sample the given texture layer."""
        self.vertices = [replace(v, tex_index=tex_index) for v in self.vertices]

    def set_color(self, r: float, g: float, b: float) -> None:
        """Give every vertex the same colour."""
        self.vertices = [replace(v, color=(r, g, b)) for v in self.vertices]

    def rotate(self, angle: float, axis_x: float, axis_y: float, axis_z: float) -> None:
        """Rotate the mesh by ``angle`` radians about an axis through its centroid.

        Normals are rotated by the same matrix.
        """
        length = math.sqrt(axis_x * axis_x + axis_y * axis_y + axis_z * axis_z)
        if length == 0:
            raise ValueError("rotation axis must not be the zero vector")
        if not self.vertices:
            return
        ax, ay, az = axis_x / length, axis_y / length, axis_z / length

        count = len(self.vertices)
        center = tuple(sum(v.position[k] for v in self.vertices) / count for k in range(3))

        c = math.cos(angle)
        s = math.sin(angle)
        t = 1 - c
        rot = (
            (t * ax * ax + c, t * ax * ay - s * az, t * ax * az + s * ay),
            (t * ax * ay + s * az, t * ay * ay + c, t * ay * az - s * ax),
            (t * ax * az - s * ay, t * ay * az + s * ax, t * az * az + c),
        )

        def apply(vec: Vec3) -> Vec3:
            return tuple(row[0] * vec[0] + row[1] * vec[1] + row[2] * vec[2] for row in rot)

        rotated = []
        for v in self.vertices:
            local = tuple(p - cen for p, cen in zip(v.position, center))
            turned = apply(local)
            position = tuple(p + cen for p, cen in zip(turned, center))
            rotated.append(replace(v, position=position, normal=apply(v.normal)))
        self.vertices = rotated

    def copy(self) -> Mesh:
        """Return an independent copy of this mesh."""
        return Mesh(list(self.vertices), list(self.indices))

    def grow(self, extra_vertices: int, extra_indices: int) -> None:
        """Extend the mesh by default vertices and zero indices."""
        if extra_vertices < 0 or extra_indices < 0:
            raise ValueError("cannot grow a mesh by a negative amount")
        self.vertices.extend(Vertex() for _ in range(extra_vertices))
        self.indices.extend(0 for _ in range(extra_indices))

    def append(self, other: Mesh) -> Mesh:
        """Return a new mesh holding this mesh followed by ``other``.

        The indices of ``other`` are shifted past this mesh's vertices.
        """
        offset = self.vertex_count
        return Mesh(
            self.vertices + other.vertices,
            self.indices + [i + offset for i in other.indices],
        )

    def clear(self) -> None:
        """Drop all vertices and indices."""
        self.vertices.clear()
        self.indices.clear()

    def describe(self) -> str:
        """Return a human-readable dump of the mesh contents."""
        lines = [f"Mesh has {self.vertex_count} vertices and {self.index_count} indices"]
        for i, v in enumerate(self.vertices):
            lines.append(f"  Vertex {i}:")
            lines.append("    Position: ({:.6f}, {:.6f}, {:.6f})".format(*v.position))
            lines.append("    Normal:   ({:.6f}, {:.6f}, {:.6f})".format(*v.normal))
            lines.append("    Texcoord: ({:.6f}, {:.6f})".format(*v.tex_coords))
            lines.append(f"    TexIndex: ({v.tex_index})")
            lines.append(f"    is3d: {int(v.is_3d)}")
        lines.append("  Indices:")
        for start in range(0, self.index_count, 12):
            row = self.indices[start:start + 12]
            lines.append("    " + " ".join(str(i) for i in row))
        return "\n".join(lines)