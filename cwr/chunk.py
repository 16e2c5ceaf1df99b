"""Voxel chunks: palette-indexed blocks in a padded cube."""

from __future__ import annotations

import itertools
import math
from collections.abc import Sequence

from .block import Block, Blocks, Face
from .constants import CHUNK_S1, CHUNKP_S1, CHUNKP_S2, CHUNKP_S3
from .packed import PackedUints
from .palette import Palette

_MASK16 = 0xFFFF


def linearize(x: int, y: int, z: int) -> int:
    """Index of a cell in the padded cube."""
    return z + x * CHUNKP_S1 + y * CHUNKP_S2


def pad_linearize(x: int, y: int, z: int) -> int:
    """Index of an inner chunk cell in the padded cube."""
    return z + 1 + (x + 1) * CHUNKP_S1 + (y + 1) * CHUNKP_S2


def face_visible(
    origin: tuple[int, int, int], coord: tuple[int, int, int], face: Face
) -> bool:
    """Whether a face of the chunk at ``coord`` can be seen from ``origin``."""
    rx, ry, rz = (c - o for c, o in zip(coord, origin))
    if face is Face.LEFT:
        return rx >= 0
    if face is Face.DOWN:
        return ry >= 0
    if face is Face.BACK:
        return rz >= 0
    if face is Face.RIGHT:
        return rx <= 0
    if face is Face.UP:
        return ry <= 0
    return rz <= 0


def choose_lod_level(chunk_dist: int) -> float:
    """Level of detail for a chunk at the given distance in chunks."""
    if chunk_dist < 16:
        return 1.0
    if chunk_dist < 32:
        return 2.0
    if chunk_dist < 64:
        return 6.2
    return 12.4


class Chunk:
    """A cube of blocks, stored as palette indices with one cell of padding."""

    def __init__(self) -> None:
        self.palette: Palette[Block] = Palette()
        for block in Blocks.list():
            self.palette.index(block)
        self.data = PackedUints(CHUNKP_S3)

    @classmethod
    def from_blocks(cls, values: Sequence[Block]) -> Chunk:
        """Build a chunk whose padded cells hold ``values`` in order."""
        chunk = cls.__new__(cls)
        chunk.palette = Palette()
        chunk.data = PackedUints.from_values(chunk.palette.index(v) for v in values)
        return chunk

    def get(self, x: int, y: int, z: int) -> Block:
        return self.palette[self.data.get(pad_linearize(x, y, z))]

    def set(self, x: int, y: int, z: int, block: Block) -> None:
        self.data.set(pad_linearize(x, y, z), self.palette.index(block))

    def set_yrange(self, x: int, top: int, z: int, height: int, block: Block) -> None:
        """Fill the cells from ``top - height`` up to ``top``, both included."""
        if height > top:
            raise ValueError(f"height {height} reaches below the chunk from {top}")
        value = self.palette.index(block)
        self.data.set_range_step(
            pad_linearize(x, top - height, z),
            pad_linearize(x, top, z) + 1,
            CHUNKP_S2,
            value,
        )

    def column(self, x: int, z: int, lod: int) -> list[Block]:
        """Every ``lod``-th block of the row of cells starting at ``(x, 0, z)``."""
        start = pad_linearize(x, 0, z)
        return [self.palette[self.data.get(i)] for i in range(start, start + CHUNK_S1, lod)]

    def top(self, x: int, z: int) -> tuple[Block, int]:
        """Highest non-air block of a column and its height, or air at 0."""
        for y in reversed(range(CHUNK_S1)):
            index = self.data.get(pad_linearize(x, y, z))
            if index > 0:
                return self.palette[index], y
        return self.palette[0], 0

    def voxel_data_lod(self, lod: float) -> list[int]:
        """Palette indices of the padded cube, downsampled by ``lod``."""
        voxels = [v & _MASK16 for v in self.data.unpack()]
        if lod == 1.0:
            return voxels
        result = [0] * CHUNKP_S3
        cells = range(CHUNK_S1)
        for x, y, z in itertools.product(cells, cells, cells):
            target = pad_linearize(
                math.floor(x / lod), math.floor(y / lod), math.floor(z / lod)
            )
            if result[target] == 0:
                result[target] = voxels[pad_linearize(x, y, z)]
        return result


class TrackedChunk(Chunk):
    """A chunk that remembers whether it changed since it was last meshed."""

    def __init__(self) -> None:
        super().__init__()
        self.changed = False