"""Block, column and chunk coordinates and the conversions between them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from .constants import CHUNK_S1I, Y_CHUNKS

_MASK64 = (1 << 64) - 1
_K = 0x517CC1B727220A95


class Realm(Enum):
    """The world layer a position belongs to."""

    OVERWORLD = "overworld"


def _rotl64(value: int, shift: int) -> int:
    value &= _MASK64
    return ((value << shift) | (value >> (64 - shift))) & _MASK64


def _mix(seed: int, coords: tuple[int, ...]) -> int:
    h = seed & _MASK64
    for coord in coords:
        h = ((_rotl64(h, 5) ^ (coord & _MASK64)) * _K) & _MASK64
    return h


def _prng(coords: tuple[int, ...], seed: int) -> int:
    return _mix(_mix(seed, coords), coords)


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def chunked(x: int) -> tuple[int, int]:
    """Split a block coordinate into a chunk coordinate and an offset in it."""
    r = x % CHUNK_S1I
    return (x - r) // CHUNK_S1I, r


def unchunked(cx: int, dx: int) -> int:
    """Join a chunk coordinate and an offset into a block coordinate."""
    return cx * CHUNK_S1I + dx


def chunk_pos(x: float, y: float, z: float) -> tuple[int, int, int]:
    """Chunk coordinates containing the world-space point ``(x, y, z)``."""
    size = float(CHUNK_S1I)
    return math.floor(x / size), math.floor(y / size), math.floor(z / size)


@dataclass(frozen=True)
class ColPos:
    """A column of chunks, addressed in chunk units."""

    x: int = 0
    z: int = 0
    realm: Realm = Realm.OVERWORLD

    def dist(self, other: ColPos) -> int:
        return max(abs(self.x - other.x), abs(self.z - other.z))

    def prng(self, seed: int) -> int:
        return _prng((self.x, self.z), seed)

    @classmethod
    def from_block_pos(cls, block_pos: BlockPos | BlockPos2d) -> ColPos:
        """Column of a block position, dividing towards zero."""
        return cls(
            _trunc_div(block_pos.x, CHUNK_S1I),
            _trunc_div(block_pos.z, CHUNK_S1I),
            block_pos.realm,
        )

    @classmethod
    def from_world(
        cls, x: float, y: float, z: float, realm: Realm = Realm.OVERWORLD
    ) -> ColPos:
        return cls.from_block_pos(BlockPos.from_world(x, y, z, realm))


@dataclass(frozen=True)
class BlockPos2d:
    """A horizontal block position."""

    x: int = 0
    z: int = 0
    realm: Realm = Realm.OVERWORLD

    def dist(self, other: BlockPos2d) -> int:
        return max(abs(self.x - other.x), abs(self.z - other.z))

    def prng(self, seed: int) -> int:
        return _prng((self.x, self.z), seed)

    @classmethod
    def from_world(cls, x: float, z: float, realm: Realm = Realm.OVERWORLD) -> BlockPos2d:
        return cls(math.floor(x), math.floor(z), realm)

    @classmethod
    def from_col(cls, col_pos: ColPos, dx: int, dz: int) -> BlockPos2d:
        return cls(unchunked(col_pos.x, dx), unchunked(col_pos.z, dz), col_pos.realm)

    def to_col(self) -> tuple[ColPos, tuple[int, int]]:
        cx, dx = chunked(self.x)
        cz, dz = chunked(self.z)
        return ColPos(cx, cz, self.realm), (dx, dz)


@dataclass(frozen=True)
class BlockPos:
    """A block position in world space."""

    x: int = 0
    y: int = 0
    z: int = 0
    realm: Realm = Realm.OVERWORLD

    def dist(self, other: BlockPos) -> int:
        return max(abs(self.x - other.x), abs(self.y - other.y), abs(self.z - other.z))

    def prng(self, seed: int) -> int:
        return _prng((self.x, self.y, self.z), seed)

    @classmethod
    def from_world(
        cls, x: float, y: float, z: float, realm: Realm = Realm.OVERWORLD
    ) -> BlockPos:
        return cls(math.floor(x), math.floor(y), math.floor(z), realm)

    @classmethod
    def from_chunk(cls, chunk_pos: ChunkPos, dx: int, dy: int, dz: int) -> BlockPos:
        return cls(
            unchunked(chunk_pos.x, dx),
            unchunked(chunk_pos.y, dy),
            unchunked(chunk_pos.z, dz),
            chunk_pos.realm,
        )

    def to_chunk(self) -> tuple[ChunkPos, tuple[int, int, int]]:
        cx, dx = chunked(self.x)
        cy, dy = chunked(self.y)
        cz, dz = chunked(self.z)
        return ChunkPos(cx, cy, cz, self.realm), (dx, dy, dz)

    @classmethod
    def from_col(cls, col_pos: ColPos, dx: int, y: int, dz: int) -> BlockPos:
        return cls(unchunked(col_pos.x, dx), y, unchunked(col_pos.z, dz), col_pos.realm)

    def to_col(self) -> tuple[ColPos, tuple[int, int, int]]:
        cx, dx = chunked(self.x)
        cz, dz = chunked(self.z)
        return ColPos(cx, cz, self.realm), (dx, self.y, dz)

    def offset(self, dx: int, dy: int, dz: int) -> BlockPos:
        return BlockPos(self.x + dx, self.y + dy, self.z + dz, self.realm)

    def shifted(self, x: float, y: float, z: float) -> BlockPos:
        """Move by a world-space vector, flooring each component."""
        return self.offset(math.floor(x), math.floor(y), math.floor(z))

    def to_vec(self) -> tuple[float, float, float]:
        return float(self.x), float(self.y), float(self.z)


@dataclass(frozen=True)
class ChunkPos:
    """A chunk position, addressed in chunk units."""

    x: int = 0
    y: int = 0
    z: int = 0
    realm: Realm = Realm.OVERWORLD

    def dist(self, other: ChunkPos) -> int:
        return max(abs(self.x - other.x), abs(self.y - other.y), abs(self.z - other.z))

    def prng(self, seed: int) -> int:
        return _prng((self.x, self.y, self.z), seed)

    @classmethod
    def from_block_pos(cls, block_pos: BlockPos) -> ChunkPos:
        """Chunk of a block position, dividing towards zero."""
        return cls(
            _trunc_div(block_pos.x, CHUNK_S1I),
            _trunc_div(block_pos.y, CHUNK_S1I),
            _trunc_div(block_pos.z, CHUNK_S1I),
            block_pos.realm,
        )

    def column(self) -> ColPos:
        return ColPos(self.x, self.z, self.realm)


def chunks_in_col(col_pos: ColPos) -> list[ChunkPos]:
    """Every chunk position of a column, from the bottom up."""
    return [ChunkPos(col_pos.x, y, col_pos.z, col_pos.realm) for y in range(Y_CHUNKS)]