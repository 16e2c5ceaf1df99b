"""The square of columns kept loaded around a player."""

from __future__ import annotations

import itertools
from collections.abc import Mapping
from dataclasses import dataclass, field

from .chunk import TrackedChunk
from .pos import ChunkPos, ColPos


def range_around(a: int, dist: int) -> range:
    """Every integer from ``a - dist`` to ``a + dist``, both included."""
    return range(a - dist, a + dist + 1)


@dataclass
class PlayerArea:
    """A centre column and the Chebyshev distance of each loaded column to it."""

    center: ColPos = field(default_factory=ColPos)
    col_dists: dict[ColPos, int] = field(default_factory=dict)

    @classmethod
    def around(cls, center: ColPos, render_dist: int) -> PlayerArea:
        """The square of columns within ``render_dist`` of ``center``."""
        if render_dist < 0:
            raise ValueError(f"render distance must be non-negative, got {render_dist}")
        xs = range_around(center.x, render_dist)
        zs = range_around(center.z, render_dist)
        col_dists = {
            ColPos(x, z, center.realm): max(abs(x - center.x), abs(z - center.z))
            for x, z in itertools.product(xs, zs)
        }
        return cls(center, col_dists)

    @classmethod
    def empty(cls) -> PlayerArea:
        return cls(ColPos(), {})

    def closest_change(self, chunks: Mapping[ChunkPos, TrackedChunk]) -> ChunkPos | None:
        """The changed chunk whose column is nearest the centre, if any."""
        changed = (pos for pos, chunk in list(chunks.items()) if chunk.changed)
        return min(changed, key=lambda pos: pos.column().dist(self.center), default=None)

    def pop_closest_change(
        self, chunks: Mapping[ChunkPos, TrackedChunk]
    ) -> tuple[ChunkPos, int] | None:
        """Take the nearest changed chunk, clearing its flag, with its distance."""
        pos = self.closest_change(chunks)
        if pos is None:
            return None
        chunk = chunks.get(pos)
        if chunk is None:
            return None
        chunk.changed = False
        return pos, max(abs(pos.x - self.center.x), abs(pos.z - self.center.z))