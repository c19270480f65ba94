"""Builders for primitive meshes: boxes and UV spheres."""

from __future__ import annotations

import math

from goofymesh.mesh import Mesh, Vertex

_CUBE_INDICES = (
    0, 1, 2, 2, 3, 0,
    4, 5, 6, 6, 7, 4,
    8, 9, 10, 10, 11, 8,
    12, 13, 14, 14, 15, 12,
    16, 17, 18, 18, 19, 16,
    20, 21, 22, 22, 23, 20,
)


def cube_mesh(
    x: float,
    y: float,
    z: float,
    width: float,
    height: float,
    length: float,
    tex_x: float,
    tex_y: float,
) -> Mesh:
    """Build a box centred on (x, y, z) with half-extents width, height, length.

    ``tex_x`` and ``tex_y`` give how many times the texture repeats across a face.
    """
    xp, xm = x + width, x - width
    yp, ym = y + height, y - height
    zp, zm = z + length, z - length
    uv = ((0.0, tex_y), (tex_x, tex_y), (tex_x, 0.0), (0.0, 0.0))

    faces = (
        ((0.0, 0.0, 1.0), ((xp, yp, zp), (xm, yp, zp), (xm, ym, zp), (xp, ym, zp))),
        ((0.0, 0.0, -1.0), ((xm, yp, zm), (xp, yp, zm), (xp, ym, zm), (xm, ym, zm))),
        ((1.0, 0.0, 0.0), ((xp, yp, zm), (xp, yp, zp), (xp, ym, zp), (xp, ym, zm))),
        ((-1.0, 0.0, 0.0), ((xm, yp, zp), (xm, yp, zm), (xm, ym, zm), (xm, ym, zp))),
        ((0.0, -1.0, 0.0), ((xp, ym, zp), (xm, ym, zp), (xm, ym, zm), (xp, ym, zm))),
        ((0.0, 1.0, 0.0), ((xp, yp, zm), (xm, yp, zm), (xm, yp, zp), (xp, yp, zp))),
    )

    vertices = [
        Vertex(position=corner, normal=normal, tex_coords=coords)
        for normal, corners in faces
        for corner, coords in zip(corners, uv)
    ]
    return Mesh(vertices, list(_CUBE_INDICES))


def sphere_mesh(radius: float, sector_count: int, stack_count: int) -> Mesh:
    """Build a UV sphere centred on the origin.

    Stacks run from the north pole (+y) to the south pole; sectors run
    around the y axis.
    """
    if radius == 0:
        raise ValueError("sphere radius must not be zero")
    if sector_count <= 0 or stack_count <= 0:
        raise ValueError("sector and stack counts must be positive")

    inv_radius = 1.0 / radius
    sector_step = 2 * math.pi / sector_count
    stack_step = math.pi / stack_count

    vertices = []
    for i in range(stack_count + 1):
        stack_angle = math.pi / 2 - i * stack_step
        ring = radius * math.cos(stack_angle)
        y = radius * math.sin(stack_angle)
        for j in range(sector_count + 1):
            sector_angle = j * sector_step
            x = ring * math.cos(sector_angle)
            z = ring * math.sin(sector_angle)
            vertices.append(
                Vertex(
                    position=(x, y, z),
                    normal=(x * inv_radius, y * inv_radius, z * inv_radius),
                    tex_coords=(j / sector_count, i / stack_count),
                )
            )

    indices: list[int] = []
    for i in range(stack_count):
        k1 = i * (sector_count + 1)
        k2 = k1 + sector_count + 1
        for _ in range(sector_count):
            if i != 0:
                indices.extend((k1, k2, k1 + 1))
            if i != stack_count - 1:
                indices.extend((k1 + 1, k2, k2 + 1))
            k1 += 1
            k2 += 1

    return Mesh(vertices, indices)