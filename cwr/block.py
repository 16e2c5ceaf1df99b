"""Block kinds and the packed vertex layout of block faces."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .pos import BlockPos

_MASK32 = 0xFFFFFFFF


class BlockFamily(Enum):
    AIR = "air"
    DIRT = "dirt"
    STONE = "stone"
    DEEPSLATE = "deepslate"
    SNOW = "snow"
    SAND = "sand"
    MUSHROOM = "mushroom"
    ICE = "ice"


# 9-bit colours: 3 bits each of red, green and blue.
_COLORS = {
    BlockFamily.DEEPSLATE: 0b110_110_110,
    BlockFamily.STONE: 0b100_100_100,
    BlockFamily.DIRT: 0b010_101_001,
    BlockFamily.AIR: 0b000_000_000,
    BlockFamily.SNOW: 0b111_111_111,
    BlockFamily.SAND: 0b101_111_111,
    BlockFamily.MUSHROOM: 0b111_111_111,
    BlockFamily.ICE: 0b110_101_011,
}


@dataclass(frozen=True)
class Block:
    family: BlockFamily = BlockFamily.AIR

    def is_traversable(self) -> bool:
        return self.family is BlockFamily.AIR

    def is_opaque(self) -> bool:
        return self.family is not BlockFamily.AIR

    def color(self) -> int:
        return _COLORS[self.family]


class Blocks:
    """Constructors for the known blocks."""

    @staticmethod
    def dirt() -> Block:
        return Block(BlockFamily.DIRT)

    @staticmethod
    def stone() -> Block:
        return Block(BlockFamily.STONE)

    @staticmethod
    def deepslate() -> Block:
        return Block(BlockFamily.DEEPSLATE)

    @staticmethod
    def air() -> Block:
        return Block(BlockFamily.AIR)

    @staticmethod
    def snow() -> Block:
        return Block(BlockFamily.SNOW)

    @staticmethod
    def sand() -> Block:
        return Block(BlockFamily.SAND)

    @staticmethod
    def mushroom() -> Block:
        return Block(BlockFamily.MUSHROOM)

    @staticmethod
    def ice() -> Block:
        return Block(BlockFamily.ICE)

    @staticmethod
    def list() -> list[Block]:
        """The blocks every new chunk palette starts with, air first."""
        return [
            Blocks.air(),
            Blocks.dirt(),
            Blocks.stone(),
            Blocks.deepslate(),
            Blocks.snow(),
            Blocks.sand(),
        ]


class BlockRayCastHit:
    """A block hit by a ray; hits compare equal by position alone."""

    def __init__(self, pos: BlockPos, normal: tuple[float, float, float]) -> None:
        self.pos = pos
        self.normal = normal

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BlockRayCastHit):
            return NotImplemented
        return self.pos == other.pos

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BlockRayCastHit(pos={self.pos!r}, normal={self.normal!r})"


def packed_xyz(x: int, y: int, z: int) -> int:
    """Pack three 6-bit coordinates as ``zzzzzz_yyyyyy_xxxxxx``."""
    return ((z << 12) | (y << 6) | x) & _MASK32


def vertex_info(xyz: int, u: int, v: int) -> int:
    """Add 6-bit texture coordinates above a packed position."""
    return ((v << 24) | (u << 18) | xyz) & _MASK32


class Face(Enum):
    LEFT = "left"
    DOWN = "down"
    BACK = "back"
    RIGHT = "right"
    UP = "up"
    FRONT = "front"

    @classmethod
    def from_index(cls, value: int) -> Face:
        """Face for a mesher face index in ``0..6``."""
        if not 0 <= value < 6:
            raise ValueError(f"face index must be below 6, got {value}")
        return _FACE_ORDER[value]

    def vertices_packed(self, xyz: int, w: int, h: int, lod: int) -> tuple[int, int, int, int]:
        """The four packed vertices of a ``w`` by ``h`` quad on this face."""
        xyz = xyz * lod
        w_ = w * lod
        h_ = h * lod
        if self is Face.LEFT:
            verts = (
                vertex_info(xyz, h, w),
                vertex_info(xyz + packed_xyz(0, 0, h_), 0, w),
                vertex_info(xyz + packed_xyz(0, w_, 0), h, 0),
                vertex_info(xyz + packed_xyz(0, w_, h_), 0, 0),
            )
        elif self is Face.DOWN:
            verts = (
                vertex_info(xyz - packed_xyz(w_, 0, 0) + packed_xyz(0, 0, h_), w, h),
                vertex_info(xyz - packed_xyz(w_, 0, 0), w, 0),
                vertex_info(xyz + packed_xyz(0, 0, h_), 0, h),
                vertex_info(xyz, 0, 0),
            )
        elif self is Face.BACK:
            verts = (
                vertex_info(xyz, w, h),
                vertex_info(xyz + packed_xyz(0, h_, 0), w, 0),
                vertex_info(xyz + packed_xyz(w_, 0, 0), 0, h),
                vertex_info(xyz + packed_xyz(w_, h_, 0), 0, 0),
            )
        elif self is Face.RIGHT:
            verts = (
                vertex_info(xyz, 0, 0),
                vertex_info(xyz + packed_xyz(0, 0, h_), h, 0),
                vertex_info(xyz - packed_xyz(0, w_, 0), 0, w),
                vertex_info(xyz + packed_xyz(0, 0, h_) - packed_xyz(0, w_, 0), h, w),
            )
        elif self is Face.UP:
            verts = (
                vertex_info(xyz + packed_xyz(w_, 0, h_), w, h),
                vertex_info(xyz + packed_xyz(w_, 0, 0), w, 0),
                vertex_info(xyz + packed_xyz(0, 0, h_), 0, h),
                vertex_info(xyz, 0, 0),
            )
        else:
            verts = (
                vertex_info(xyz - packed_xyz(w_, 0, 0) + packed_xyz(0, h_, 0), 0, 0),
                vertex_info(xyz - packed_xyz(w_, 0, 0), 0, h),
                vertex_info(xyz + packed_xyz(0, h_, 0), w, 0),
                vertex_info(xyz, w, h),
            )
        return tuple(v & _MASK32 for v in verts)  # type: ignore[return-value]


_FACE_ORDER = (Face.UP, Face.DOWN, Face.RIGHT, Face.LEFT, Face.FRONT, Face.BACK)