import math

import pytest

from goofymesh.mesh import Mesh, Vertex


def _triangle() -> Mesh:
    return Mesh(
        [
            Vertex(position=(0.0, 0.0, 0.0), normal=(0.0, 0.0, 1.0)),
            Vertex(position=(1.0, 0.0, 0.0), normal=(0.0, 0.0, 1.0)),
            Vertex(position=(0.0, 2.0, 0.0), normal=(0.0, 0.0, 1.0)),
        ],
        [0, 1, 2],
    )


def _positions(mesh):
    return [v.position for v in mesh.vertices]


def _flat(points):
    return [c for p in points for c in p]


def _close(a, b, tol=1e-9):
    return all(math.isclose(x, y, abs_tol=tol) for x, y in zip(a, b))


def test_counts():
    mesh = _triangle()
    assert mesh.vertex_count == 3
    assert mesh.index_count == 3


def test_translate_round_trip():
    mesh = _triangle()
    before = _positions(mesh)
    mesh.translate(1.5, -2.0, 3.0)
    assert mesh.vertices[1].position == (2.5, -2.0, 3.0)
    mesh.translate(-1.5, 2.0, -3.0)
    for a, b in zip(_positions(mesh), before):
        assert _close(a, b)


def test_scale():
    mesh = _triangle()
    mesh.scale(2.0, 3.0, 4.0)
    assert mesh.vertices[1].position == (2.0, 0.0, 0.0)
    assert mesh.vertices[2].position == (0.0, 6.0, 0.0)


def test_set_texture_and_color():
    mesh = _triangle()
    mesh.set_texture(5)
    mesh.set_color(0.25, 0.5, 0.75)
    assert all(v.tex_index == 5 for v in mesh.vertices)
    assert all(v.color == (0.25, 0.5, 0.75) for v in mesh.vertices)


def test_rotate_full_turn_is_identity():
    mesh = _triangle()
    mesh.rotate(2 * math.pi, 0.0, 0.0, 1.0)
    expected = [0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 2.0, 0.0]
    assert _flat(_positions(mesh)) == pytest.approx(expected, abs=1e-9)


def test_rotate_keeps_centroid_and_distances():
    mesh = _triangle()
    before = _positions(mesh)
    centroid_before = [sum(p[k] for p in before) / 3 for k in range(3)]
    mesh.rotate(0.7, 1.0, 2.0, 3.0)
    after = _positions(mesh)
    centroid_after = [sum(p[k] for p in after) / 3 for k in range(3)]
    assert _close(centroid_before, centroid_after)
    for i in range(3):
        for j in range(3):
            assert math.isclose(
                math.dist(before[i], before[j]), math.dist(after[i], after[j]), abs_tol=1e-9
            )


def test_rotate_turns_normals():
    mesh = _triangle()
    mesh.rotate(math.pi, 1.0, 0.0, 0.0)
    normals = _flat(v.normal for v in mesh.vertices)
    assert normals == pytest.approx([0.0, 0.0, -1.0] * 3, abs=1e-9)


def test_rotate_axis_is_normalised():
    a = _triangle()
    b = _triangle()
    a.rotate(0.3, 0.0, 1.0, 0.0)
    b.rotate(0.3, 0.0, 10.0, 0.0)
    assert _flat(_positions(a)) != pytest.approx(_flat(_positions(_triangle())), abs=1e-9)
    assert _flat(_positions(b)) == pytest.approx(_flat(_positions(a)), abs=1e-9)


def test_rotate_zero_axis_raises():
    with pytest.raises(ValueError):
        _triangle().rotate(1.0, 0.0, 0.0, 0.0)


def test_copy_is_independent():
    mesh = _triangle()
    clone = mesh.copy()
    clone.translate(1.0, 1.0, 1.0)
    clone.indices.append(0)
    assert mesh.vertices[0].position == (0.0, 0.0, 0.0)
    assert mesh.indices == [0, 1, 2]
    assert clone.index_count == 4


def test_grow_extends_counts():
    mesh = _triangle()
    mesh.grow(2, 6)
    assert mesh.vertex_count == 5
    assert mesh.index_count == 9
    assert mesh.vertices[4] == Vertex()


def test_grow_negative_raises():
    with pytest.raises(ValueError):
        _triangle().grow(-1, 0)


def test_append_offsets_indices():
    a = _triangle()
    b = _triangle()
    combined = a.append(b)
    assert combined.vertex_count == a.vertex_count + b.vertex_count
    assert combined.indices == [0, 1, 2, 3, 4, 5]
    assert combined.vertices[3:] == b.vertices
    assert a.vertex_count == 3


def test_clear():
    mesh = _triangle()
    mesh.clear()
    assert mesh.vertex_count == 0
    assert mesh.index_count == 0


def test_describe():
    mesh = Mesh([Vertex(position=(1.0, 2.0, 3.0))], [0, 0, 0])
    text = mesh.describe()
    assert text.splitlines()[0] == "Mesh has 1 vertices and 3 indices"
    assert "    Position: (1.000000, 2.000000, 3.000000)" in text.splitlines()
    assert text.splitlines()[-1] == "    0 0 0"


def test_describe_wraps_indices_every_twelve():
    mesh = Mesh([], list(range(13)))
    rows = mesh.describe().splitlines()
    assert rows[-2].split() == [str(i) for i in range(12)]
    assert rows[-1].split() == ["12"]