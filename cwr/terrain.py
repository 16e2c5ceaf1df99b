"""Biome selection from noise values and filling of terrain columns."""

from __future__ import annotations

from enum import Enum, auto

from .block import Block, Blocks
from .constants import CHUNK_S1I, MAX_GEN_HEIGHT
from .pos import ColPos
from .voxel import VoxelWorld


class Relief(Enum):
    VALLEY = 0.0
    LOW = 0.2
    MEDIUM = 0.5
    ESCARPED = 0.8
    MOUNTAIN = 1.0

    @property
    def depth(self) -> float:
        return self.value


class Continental(Enum):
    CHAMPS_DE_CHAMPIGNONS = auto()
    OCEAN_PROFOND = auto()
    OCEAN = auto()
    LITTORAL = auto()
    PEU_A_INTERIEUR_DES_TERRES = auto()
    A_INTERIEUR_DES_TERRES = auto()
    LOIN_A_INTERIEUR_DES_TERRES = auto()


class Biome(Enum):
    MUSHROOM_FIELDS = auto()
    DEEP_FROZEN_OCEAN = auto()
    DEEP_OCEAN = auto()
    FROZEN_OCEAN = auto()
    COLD_OCEAN = auto()
    OCEAN = auto()
    LUKEWARM_OCEAN = auto()
    WARM_OCEAN = auto()
    DEEP_DARK = auto()
    LUSH_CAVES = auto()
    DRIPSTONE_CAVES = auto()
    FROZEN_RIVER = auto()
    RIVER = auto()
    STONY_SHORE = auto()
    BADLANDS = auto()
    BEACH = auto()
    SNOWY_BEACH = auto()
    DESERT = auto()
    WOODED_BADLANDS = auto()
    SNOWY_SLOPES = auto()
    PLATEAU = auto()
    JAGGED_PEAKS = auto()
    STONY_PEAKS = auto()
    PLAINS = auto()


def pos_to_range(pos: ColPos) -> tuple[range, range]:
    """Block ranges of a column: the z range first, then the x range."""
    z = pos.z * CHUNK_S1I
    x = pos.x * CHUNK_S1I
    return range(z, z + CHUNK_S1I), range(x, x + CHUNK_S1I)


def _level(value: float, bounds: tuple[float, ...]) -> int:
    # Values below the first bound fall through to the top level.
    for level, (low, high) in enumerate(zip(bounds, bounds[1:])):
        if low <= value < high:
            return level
    return len(bounds) - 1


_TEMPERATURE_BOUNDS = (-1.0, -0.45, -0.15, 0.2, 0.55)
_HUMIDITY_BOUNDS = (-1.0, -0.35, -0.1, 0.1, 0.3)
_CONTINENTAL_BOUNDS = (-1.2, -1.05, -0.455, -0.19, -0.11, 0.03, 0.3)
_EROSION_BOUNDS = (-1.0, -0.78, -0.375, -0.2225, 0.05, 0.45, 0.55)
_RELIEF_BOUNDS = (-1.0, -0.85, -0.6, 0.2, 0.7)


def temperature_level(tn: float) -> int:
    return _level(tn, _TEMPERATURE_BOUNDS)


def humidity_level(hn: float) -> int:
    return _level(hn, _HUMIDITY_BOUNDS)


def continental_level(cn: float) -> Continental:
    return list(Continental)[_level(cn, _CONTINENTAL_BOUNDS)]


def erosion_level(en: float) -> int:
    return _level(en, _EROSION_BOUNDS)


def relief_type(pv: float) -> Relief:
    return list(Relief)[_level(pv, _RELIEF_BOUNDS)]


_OCEANS = (
    Biome.FROZEN_OCEAN,
    Biome.COLD_OCEAN,
    Biome.OCEAN,
    Biome.LUKEWARM_OCEAN,
    Biome.WARM_OCEAN,
)


def _littoral_biome(relief: Relief, temperature: int, humidity: int, erosion: int) -> Biome:
    if relief is Relief.VALLEY:
        return Biome.FROZEN_RIVER if temperature == 0 else Biome.RIVER
    if erosion == 4:
        if temperature == 0:
            return Biome.SNOWY_BEACH
        return Biome.BEACH if temperature <= 3 else Biome.DESERT
    if erosion == 5:
        if humidity <= 2:
            return Biome.BADLANDS
        return Biome.WOODED_BADLANDS if humidity <= 4 else Biome.BEACH
    if relief is Relief.LOW:
        if erosion <= 1:
            return Biome.STONY_SHORE if temperature <= 3 else Biome.BADLANDS
        return Biome.BEACH
    if erosion == 1:
        return Biome.SNOWY_SLOPES if temperature == 0 else Biome.PLATEAU
    if relief is Relief.MEDIUM:
        if erosion == 0:
            return Biome.SNOWY_SLOPES if temperature <= 2 else Biome.PLATEAU
        return Biome.PLATEAU
    if relief is Relief.ESCARPED:
        if erosion == 0:
            return Biome.SNOWY_SLOPES if temperature <= 2 else Biome.JAGGED_PEAKS
        return Biome.PLATEAU
    if erosion == 0:
        return Biome.JAGGED_PEAKS if temperature <= 2 else Biome.STONY_PEAKS
    if erosion in (2, 3):
        return Biome.PLATEAU
    return Biome.PLAINS


def get_biome(tn: float, hn: float, cn: float, en: float, pv: float) -> Biome:
    """Biome for temperature, humidity, continental, erosion and relief noise."""
    temperature = temperature_level(tn)
    humidity = humidity_level(hn)
    continental = continental_level(cn)
    erosion = erosion_level(en)
    relief = relief_type(pv)
    depth = relief.depth

    if continental is Continental.CHAMPS_DE_CHAMPIGNONS:
        return Biome.MUSHROOM_FIELDS
    if continental is Continental.OCEAN_PROFOND:
        return Biome.DEEP_FROZEN_OCEAN if temperature <= 1 else Biome.DEEP_OCEAN
    if continental is Continental.OCEAN:
        return _OCEANS[temperature]
    if continental is not Continental.LITTORAL:
        return Biome.PLAINS
    if depth == 1.1 and erosion < 4:
        return Biome.DEEP_DARK
    if 0.2 <= depth <= 0.9:
        if continental is Continental.LOIN_A_INTERIEUR_DES_TERRES and humidity >= 7:
            return Biome.LUSH_CAVES
        return Biome.DRIPSTONE_CAVES
    return _littoral_biome(relief, temperature, humidity, erosion)


_BIOME_BLOCKS = {
    Biome.MUSHROOM_FIELDS: Blocks.mushroom(),
    Biome.DEEP_FROZEN_OCEAN: Blocks.ice(),
    Biome.DEEP_OCEAN: Blocks.dirt(),
    Biome.FROZEN_OCEAN: Blocks.ice(),
    Biome.COLD_OCEAN: Blocks.ice(),
    Biome.OCEAN: Blocks.dirt(),
    Biome.LUKEWARM_OCEAN: Blocks.dirt(),
    Biome.WARM_OCEAN: Blocks.dirt(),
    Biome.DEEP_DARK: Blocks.dirt(),
    Biome.LUSH_CAVES: Blocks.dirt(),
    Biome.DRIPSTONE_CAVES: Blocks.dirt(),
    Biome.FROZEN_RIVER: Blocks.ice(),
    Biome.RIVER: Blocks.dirt(),
    Biome.STONY_SHORE: Blocks.sand(),
    Biome.BADLANDS: Blocks.dirt(),
    Biome.BEACH: Blocks.sand(),
    Biome.SNOWY_BEACH: Blocks.sand(),
    Biome.DESERT: Blocks.sand(),
    Biome.WOODED_BADLANDS: Blocks.dirt(),
    Biome.SNOWY_SLOPES: Blocks.sand(),
    Biome.PLATEAU: Blocks.dirt(),
    Biome.JAGGED_PEAKS: Blocks.dirt(),
    Biome.STONY_PEAKS: Blocks.dirt(),
    Biome.PLAINS: Blocks.dirt(),
}


def biome_block(biome: Biome) -> Block:
    """The surface block of a biome."""
    return _BIOME_BLOCKS[biome]


def terrain_height(
    temperature: float,
    humidity: float,
    weird: float,
    erosion: float,
    continental: float,
    pv: float,
) -> float:
    """Surface height as a fraction of the generation height, from raw noise."""

    def unit(n: float) -> float:
        return (n + 1.0) * 0.5

    w, c, p = unit(weird), unit(continental), unit(pv)
    return (unit(temperature) + unit(humidity) + w * w + unit(erosion) + c * c + p * p) / 6.0


def fill_column(
    world: VoxelWorld, col: ColPos, dx: int, dz: int, height: float, block: Block
) -> None:
    """Lay the surface block, stone and deepslate down one column of the world."""
    y = int(height * MAX_GEN_HEIGHT)
    world.set_yrange(col, dx, dz, y, 4, block)
    world.set_yrange(col, dx, dz, y - 4, 2, Blocks.stone())
    world.set_yrange(col, dx, dz, y - 6, MAX_GEN_HEIGHT, Blocks.deepslate())