# goofymesh

Triangle meshes for simple real-time renderers, kept in plain Python: build primitives, load OBJ files, edit vertices, pack several meshes into one draw batch, and release resources in groups. It has no dependencies beyond the standard library.

## Install

```
pip install goofymesh
```

## Meshes

`goofymesh.mesh.Mesh` holds a list of `Vertex` objects and a list of triangle indices. A `Vertex` is a frozen dataclass with `position`, `color` (white by default), `normal`, `tex_coords`, `tex_index` (texture layer, 0 by default) and `is_3d` (true by default). `vertex_count` and `index_count` give the list lengths.

Editing methods change the mesh in place:

- `translate(x, y, z)` moves every vertex.
- `scale(x, y, z)` multiplies every position component-wise.
- `set_color(r, g, b)` and `set_texture(tex_index)` set every vertex.
- `rotate(angle, axis_x, axis_y, axis_z)` rotates by `angle` radians about the given axis through the mesh's centroid; normals are rotated too. A zero axis raises `ValueError`.
- `grow(extra_vertices, extra_indices)` appends default vertices and zero indices; negative amounts raise `ValueError`.
- `clear()` drops all vertices and indices.

Other methods return new data:

- `copy()` returns an independent mesh.
- `append(other)` returns a new mesh with `other`'s vertices after this one's and its indices shifted past them.
- `describe()` returns a text dump of every vertex and the indices, twelve per line.

```python
from goofymesh.primitives import cube_mesh, sphere_mesh

cube = cube_mesh(0, 0, 0, 1, 1, 1, 1, 1)
cube.translate(2, 0, 0)
cube.scale(0.5, 0.5, 0.5)
cube.set_color(1.0, 0.2, 0.2)
cube.set_texture(1)
cube.rotate(1.5708, 0, 1, 0)

ball = sphere_mesh(1.0, 16, 8)
scene = cube.append(ball)
backup = scene.copy()
print(scene.describe())
```

## Primitives

`goofymesh.primitives`:

- `cube_mesh(x, y, z, width, height, length, tex_x, tex_y)` builds a box centred on `(x, y, z)` with half-extents `width`, `height`, `length`: 24 vertices (four per face, each with its face normal) and 36 indices. `tex_x` and `tex_y` set how often the texture repeats across each face.
- `sphere_mesh(radius, sector_count, stack_count)` builds a UV sphere at the origin with `(stack_count + 1) * (sector_count + 1)` vertices, running from the +y pole downwards. A zero radius or a non-positive count raises `ValueError`.

## OBJ files

`goofymesh.objloader` reads Wavefront OBJ documents whose faces are triangles written as `v/vt/vn` triples:

```python
from goofymesh.objloader import load_obj, parse_obj, ObjFormatError

mesh = load_obj("model.obj")

mesh = parse_obj([
    "v 0 0 0",
    "v 1 0 0",
    "v 0 1 0",
    "vt 0 0",
    "vn 0 0 1",
    "f 1/1/1 2/1/1 3/1/1",
])
```

Every face becomes three fresh white vertices on texture layer 0, indexed in order. Corners past the third are ignored. Face lines in any other form are skipped with a logged warning. Comments and other statements are ignored. An index that is out of range, or a `v`, `vt` or `vn` line with missing or bad numbers, raises `ObjFormatError` (a `ValueError`).

## Batching draws

`goofymesh.batch.MeshBatch(max_vertices, max_indices, max_meshes)` packs meshes into shared vertex and index storage. It rebases each mesh's indices onto the shared vertices.

- `add(mesh)` returns a `DrawCommand` with `index_offset`, `index_count`, `vertex_offset` and `vertex_count`.
- `flush()` returns the queued commands and starts a new queue. The staged `vertices` and `indices` stay readable until the next `add`.
- `release()` frees the storage. Any later `add` or `flush` raises `RuntimeError`.

`add` raises `BatchFullError` when the batch already holds `max_meshes` meshes, or when the mesh would overflow the vertex or index storage.

`TextureArray(width, height, num_layers)` keeps track of the layers of a texture array:

- `mip_levels()` gives the number of mipmap levels.
- `reserve_layer(layer_index)` claims a layer. It raises `TextureArrayFullError` when all layers are in use, and `ValueError` for an index outside the array.
- `release()` drops all layers.

```python
from goofymesh.batch import MeshBatch, TextureArray

batch = MeshBatch(max_vertices=4096, max_indices=8192, max_meshes=16)
batch.add(cube)
batch.add(ball)
for command in batch.flush():
    print(command)

textures = TextureArray(256, 256, 4)
print(textures.mip_levels())     # 9
textures.reserve_layer(0)
```

## Cleaning up

`goofymesh.trash.TrashBatch(max_size, auto_clean)` collects meshes, batches and texture arrays to release together.

- `add(kind, item)` takes a `TrashKind` (`MESH`, `BUFFER`, `TEXTURE_ARRAY`) or its integer value. When the batch is full, its capacity grows by 256.
- `clear()` releases every item. Meshes are cleared, and batches and texture arrays are released.
- `free()` does the same and sets the capacity to zero.

Up to 64 batches created with `auto_clean=True` are remembered. `terminate()` frees them all and forgets them. Further batches only log a warning and must be freed by hand.

```python
from goofymesh.trash import TrashBatch, TrashKind, terminate

trash = TrashBatch(8, auto_clean=True)
trash.add(TrashKind.MESH, scene)
trash.add(TrashKind.BUFFER, batch)
trash.clear()
terminate()
```

## What it does not do

goofymesh only prepares data. It opens no windows, talks to no graphics API, compiles no shaders and decodes no image files:

- `MeshBatch.flush` hands back draw commands for your renderer to issue; it draws nothing itself.
- `TextureArray` counts layers but stores no pixels.