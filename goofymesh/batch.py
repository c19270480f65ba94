"""Staging of meshes into shared vertex/index storage, and texture-array bookkeeping."""

from __future__ import annotations

import math
from dataclasses import dataclass

from goofymesh.mesh import Mesh, Vertex


class BatchFullError(RuntimeError):
    """Raised when a mesh does not fit in a batch."""


class TextureArrayFullError(RuntimeError):
    """Raised when every layer of a texture array is already in use."""


@dataclass(frozen=True)
class DrawCommand:
    """One mesh's slice of a batch, as handed to a multi-draw call."""

    index_offset: int
    index_count: int
    vertex_offset: int
    vertex_count: int


class MeshBatch:
    """Collects meshes into one vertex store and one index store for a single draw.

    Indices are rebased onto the shared vertex store as meshes are added.
    """

    def __init__(self, max_vertices: int, max_indices: int, max_meshes: int) -> None:
        if max_vertices < 0 or max_indices < 0 or max_meshes < 0:
            raise ValueError("batch capacities must not be negative")
        self.max_vertices = max_vertices
        self.max_indices = max_indices
        self.max_meshes = max_meshes
        self._vertices: list[Vertex] = []
        self._indices: list[int] = []
        self._commands: list[DrawCommand] = []
        self._vertex_offset = 0
        self._index_offset = 0
        self._released = False

    @property
    def mesh_count(self) -> int:
        return len(self._commands)

    @property
    def vertex_count(self) -> int:
        return self._vertex_offset

    @property
    def index_count(self) -> int:
        return self._index_offset

    @property
    def vertices(self) -> tuple[Vertex, ...]:
        return tuple(self._vertices)

    @property
    def indices(self) -> tuple[int, ...]:
        return tuple(self._indices)

    @property
    def released(self) -> bool:
        return self._released

    def _check_live(self) -> None:
        if self._released:
            raise RuntimeError("batch has been released")

    def add(self, mesh: Mesh) -> DrawCommand:
        """Queue ``mesh`` for the next flush and return its draw command."""
        self._check_live()
        if self.mesh_count >= self.max_meshes:
            raise BatchFullError(f"batch already holds {self.max_meshes} meshes")
        if self._vertex_offset + mesh.vertex_count > self.max_vertices:
            raise BatchFullError("mesh does not fit in the batch's vertex storage")
        if self._index_offset + mesh.index_count > self.max_indices:
            raise BatchFullError("mesh does not fit in the batch's index storage")

        base = self._vertex_offset
        del self._vertices[base:]
        self._vertices.extend(mesh.vertices)
        del self._indices[self._index_offset:]
        self._indices.extend(index + base for index in mesh.indices)

        command = DrawCommand(self._index_offset, mesh.index_count, base, mesh.vertex_count)
        self._commands.append(command)
        self._vertex_offset += mesh.vertex_count
        self._index_offset += mesh.index_count
        return command

    def flush(self) -> list[DrawCommand]:
        """Return the queued draw commands and start a fresh queue.

        The staged data stays readable until the next mesh is added.
        """
        self._check_live()
        commands, self._commands = self._commands, []
        self._vertex_offset = 0
        self._index_offset = 0
        return commands

    def release(self) -> None:
        """Free the batch's storage; the batch cannot be used afterwards."""
        self._vertices = []
        self._indices = []
        self._commands = []
        self._vertex_offset = 0
        self._index_offset = 0
        self._released = True


class TextureArray:
    """Layer bookkeeping for a fixed-size stack of equally sized textures."""

    def __init__(self, width: int, height: int, num_layers: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("texture size must be positive")
        if num_layers < 0:
            raise ValueError("layer count must not be negative")
        self.width = width
        self.height = height
        self.num_layers = num_layers
        self.current_layers = 0

    def mip_levels(self) -> int:
        """Number of mipmap levels down to a single texel."""
        return math.floor(math.log2(max(self.width, self.height))) + 1

    def reserve_layer(self, layer_index: int) -> int:
        """Claim one layer for a texture to be loaded into ``layer_index``."""
        if self.current_layers >= self.num_layers:
            raise TextureArrayFullError("texture array is full")
        if not 0 <= layer_index < self.num_layers:
            raise ValueError(f"layer index {layer_index} outside 0..{self.num_layers - 1}")
        self.current_layers += 1
        return layer_index

    def release(self) -> None:
        """Drop all layers; nothing more can be reserved afterwards."""
        self.current_layers = 0
        self.num_layers = 0