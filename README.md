# cwr

The data core of a voxel world: chunks of blocks stored as palette indices
in a bit-packed array, block/chunk/column coordinates, packed vertex words
for block faces, the square of columns kept loaded around a player, a
distance-ordered queue of columns to generate, and a biome-driven filler
that lays blocks down a column.

It has no dependencies outside the standard library.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Modules

- `cwr.palette.Palette` – gives each distinct value an index in order of
  first appearance (`index`), and looks values up by index (`palette[i]`).
  Supports `len`, iteration and `in`.
- `cwr.rotations` – `vec2_to_degrees(x, y)`,
  `combine_direction_with_rotation_to_degrees` and
  `combine_direction_with_rotation_to_eulers`, which turn a normalised 2D
  direction plus a previous rotation into a heading in degrees or a unit
  vector `(x, y)`.
- `cwr.constants` – chunk and world sizes. `CHUNK_S1` is 62; padded chunks
  (`CHUNKP_S1`) are 64 wide. `MAX_HEIGHT` is 496, `MAX_GEN_HEIGHT` 400 and
  `Y_CHUNKS` the number of chunks in a column.
- `cwr.pos` – frozen dataclasses `BlockPos`, `BlockPos2d`, `ChunkPos` and
  `ColPos`, each carrying a `Realm` (only `Realm.OVERWORLD` exists).
  - `chunked(x)` splits a block coordinate into `(chunk, offset)` using
    floor division, so `chunked(-1) == (-1, 61)`; `unchunked` joins them.
  - `BlockPos.to_chunk()` / `BlockPos.from_chunk(...)` and
    `to_col()` / `from_col(...)` convert with that split.
  - `ChunkPos.from_block_pos` and `ColPos.from_block_pos` divide towards
    zero instead.
  - `dist` is the Chebyshev distance; `prng(seed)` is a deterministic
    64-bit hash of the position.
  - `chunk_pos(x, y, z)` gives the chunk coordinates of a world-space point;
    `chunks_in_col(col)` lists the `Y_CHUNKS` chunks of a column, bottom up.
- `cwr.block` – `Block`, `BlockFamily` and the `Blocks` constructors
  (`air`, `dirt`, `stone`, `deepslate`, `snow`, `sand`, `mushroom`, `ice`).
  `Block.color()` returns a 9-bit RGB value (3 bits each). `Face` names the
  six faces; `Face.from_index(i)` maps indices `0..5` to up, down, right,
  left, front, back and raises `ValueError` otherwise;
  `Face.vertices_packed(xyz, w, h, lod)` returns the four 32-bit vertex
  words of a `w` by `h` quad. `packed_xyz` and `vertex_info` are the
  packing helpers. `BlockRayCastHit` holds a position and a normal and
  compares equal by position.
- `cwr.packed.PackedUints` – an array of non-negative integers stored at 4
  bits per entry and widened to 8, 16 or 32 bits when a larger value is
  stored. `get`, `set`, `set_range`, `set_range_step`, `bits()`, `unpack()`.
  Negative values raise `ValueError`; out-of-range indices raise
  `IndexError`.
- `cwr.chunk` – `Chunk` (a 64³ padded cube of palette indices whose palette
  starts with air, dirt, stone, deepslate, snow and sand) with `get`, `set`,
  `set_yrange`, `column`, `top` and `voxel_data_lod`; `Chunk.from_blocks`
  builds one from a sequence of blocks. `TrackedChunk` adds a `changed`
  flag. Also `linearize`, `pad_linearize`, `face_visible` and
  `choose_lod_level` (1.0 under 16 chunks, 2.0 under 32, 6.2 under 64,
  12.4 beyond).
- `cwr.voxel.VoxelWorld` – a lock-guarded dict of `ChunkPos` to
  `TrackedChunk`. `set_yrange` fills a column downward across chunks,
  creating them as needed, without marking them changed;
  `mark_change_col` and `mark_change_single` set the `changed` flag on
  chunks that exist.
- `cwr.area.PlayerArea` – a centre column and the distance of every column
  within a render distance (`PlayerArea.around(center, render_dist)`).
  `pop_closest_change(chunks)` takes the changed chunk nearest the centre,
  clears its flag and returns it with its distance.
- `cwr.load_orders.LoadOrders` – tracks which players need which columns.
  `on_load_area_change(player_id, old_area, new_area)` queues newly needed
  columns by distance and moves columns no one needs any more either out of
  the queue or into `to_unload`. `pop_next()` returns the nearest pending
  column and its distance, or `None`; `to_generate` is a snapshot, farthest
  first.
- `cwr.terrain` – level functions (`temperature_level`, `humidity_level`,
  `continental_level`, `erosion_level`, `relief_type`) that bucket noise
  values, `get_biome(tn, hn, cn, en, pv)` that picks a `Biome` from them,
  `biome_block(biome)`, `terrain_height(...)` that combines six raw noise
  values into a fraction of the generation height, `pos_to_range(col)`, and
  `fill_column(world, col, dx, dz, height, block)`, which lays four cells of
  the surface block, two of stone and deepslate below down to the bottom.

## Example

    from cwr.block import Blocks
    from cwr.pos import ColPos
    from cwr.terrain import biome_block, fill_column, get_biome, terrain_height
    from cwr.voxel import VoxelWorld

    world = VoxelWorld()
    col = ColPos(0, 0)

    biome = get_biome(0.0, 0.0, -0.15, 0.0, -0.9)
    height = terrain_height(0.1, -0.2, 0.3, 0.0, 0.4, -0.1)
    fill_column(world, col, 3, 5, height, biome_block(biome))
    world.mark_change_col(col)

## What it does not do

The package holds and manipulates world data only. It does not produce
noise itself: the terrain functions take noise values as input. It does not
build meshes from chunks beyond packing the vertices of a given quad, and it
has no renderer, window, input handling, game loop or command-line program.
Worlds live in memory; nothing is saved to disk.