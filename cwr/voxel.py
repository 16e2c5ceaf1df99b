"""The shared store of every loaded chunk."""

from __future__ import annotations

import threading

from .block import Block
from .chunk import TrackedChunk
from .constants import CHUNK_S1
from .pos import ChunkPos, ColPos, chunked, chunks_in_col


class VoxelWorld:
    """Chunks by position, safe to share between threads."""

    def __init__(self, chunks: dict[ChunkPos, TrackedChunk] | None = None) -> None:
        self.chunks: dict[ChunkPos, TrackedChunk] = {} if chunks is None else chunks
        self._lock = threading.RLock()

    def set_yrange(
        self, col_pos: ColPos, x: int, z: int, top: int, height: int, block: Block
    ) -> None:
        """Fill a column downward from ``top``, without marking chunks changed."""
        cy, dy = chunked(top)
        with self._lock:
            while height > 0 and cy >= 0:
                chunk_pos = ChunkPos(col_pos.x, cy, col_pos.z, col_pos.realm)
                h = min(height, dy)
                chunk = self.chunks.get(chunk_pos)
                if chunk is None:
                    chunk = self.chunks[chunk_pos] = TrackedChunk()
                chunk.set_yrange(x, dy, z, h, block)
                height -= h
                cy -= 1
                dy = CHUNK_S1 - 1

    def mark_change_col(self, col_pos: ColPos) -> None:
        """Mark every loaded chunk of a column as changed."""
        for chunk_pos in chunks_in_col(col_pos):
            self.mark_change_single(chunk_pos)

    def mark_change_single(self, chunk_pos: ChunkPos) -> None:
        with self._lock:
            chunk = self.chunks.get(chunk_pos)
            if chunk is not None:
                chunk.changed = True