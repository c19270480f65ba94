"""Deferred release of meshes, batches and texture arrays.

A trash batch collects resources to be released together. Batches created
with ``auto_clean`` are remembered and released by :func:`terminate`.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable, Iterator
from typing import Any

from goofymesh.batch import MeshBatch, TextureArray
from goofymesh.mesh import Mesh

logger = logging.getLogger(__name__)

MAX_TRACKED_BATCHES = 64
GROWTH = 256


class TrashKind(enum.Enum):
    """The kind of resource held by a trash entry."""

    MESH = 0
    BUFFER = 1
    TEXTURE_ARRAY = 2


def _free_mesh(item: Mesh) -> None:
    item.clear()


def _free_buffer(item: MeshBatch) -> None:
    item.release()


def _free_texture_array(item: TextureArray) -> None:
    item.release()


_RELEASERS: dict[TrashKind, Callable[[Any], None]] = {
    TrashKind.MESH: _free_mesh,
    TrashKind.BUFFER: _free_buffer,
    TrashKind.TEXTURE_ARRAY: _free_texture_array,
}

_registry: list[TrashBatch] = []


class TrashBatch:
    """A growable list of resources that are released together."""

    def __init__(self, max_size: int, auto_clean: bool) -> None:
        if max_size < 0:
            raise ValueError("trash batch size must not be negative")
        self.max_size = max_size
        self._items: list[tuple[TrashKind, Any]] = []
        self.registered = False
        if auto_clean:
            if len(_registry) < MAX_TRACKED_BATCHES:
                _registry.append(self)
                self.registered = True
            else:
                logger.warning(
                    "Max trash batches reached (%d); this batch will not be cleaned "
                    "automatically",
                    MAX_TRACKED_BATCHES,
                )

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[tuple[TrashKind, Any]]:
        return iter(list(self._items))

    def add(self, kind: TrashKind | int, item: Any) -> None:
        """Queue ``item`` of the given kind for release.

        The capacity grows by 256 entries whenever the batch is full.
        """
        kind = TrashKind(kind)
        if len(self._items) >= self.max_size:
            logger.info(
                "Trash batch with capacity %d is full; increasing to %d items",
                self.max_size,
                self.max_size + GROWTH,
            )
            self.max_size += GROWTH
        self._items.append((kind, item))

    def clear(self) -> None:
        """Release every queued item and empty the batch."""
        items, self._items = self._items, []
        for kind, item in items:
            _RELEASERS[kind](item)

    def free(self) -> None:
        """Release every queued item and drop the batch's capacity."""
        self.clear()
        self.max_size = 0


def terminate() -> None:
    """Free every batch created with ``auto_clean`` and forget them."""
    batches = list(_registry)
    _registry.clear()
    for batch in batches:
        batch.free()
        batch.registered = False