"""Which columns to generate and unload as players' areas move."""

from __future__ import annotations

import bisect
import threading

from .area import PlayerArea
from .pos import ColPos


class LoadOrders:
    """Pending generation orders, nearest last, and columns to unload."""

    def __init__(self) -> None:
        self._player_cols: dict[ColPos, set[int]] = {}
        # Kept sorted by descending distance so the nearest column pops first.
        self._to_generate: list[tuple[ColPos, int]] = []
        self.to_unload: list[ColPos] = []
        self._lock = threading.Lock()

    @property
    def to_generate(self) -> list[tuple[ColPos, int]]:
        """A snapshot of the pending orders, farthest first."""
        with self._lock:
            return list(self._to_generate)

    def _insertion_index(self, dist: int) -> int:
        return bisect.bisect_left(self._to_generate, -dist, key=lambda order: -order[1])

    def _unload_col(self, col_pos: ColPos) -> None:
        self._player_cols.pop(col_pos, None)
        for i, (pos, _) in enumerate(self._to_generate):
            if pos == col_pos:
                # The column was still waiting to be generated.
                del self._to_generate[i]
                return
        self.to_unload.append(col_pos)

    def _add_gen_order(self, col_pos: ColPos, dist: int) -> None:
        self._to_generate.insert(self._insertion_index(dist), (col_pos, dist))

    def _update_gen_order(self, col_pos: ColPos, dist: int) -> None:
        old_i = next(
            (i for i, (pos, _) in enumerate(self._to_generate) if pos == col_pos), None
        )
        if old_i is None:
            return
        new_i = self._insertion_index(dist)
        if old_i != new_i:
            order = self._to_generate.pop(old_i)
            self._to_generate.insert(new_i, order)

    def on_load_area_change(
        self, player_id: int, old_load_area: PlayerArea, new_load_area: PlayerArea
    ) -> None:
        """Record that a player's area moved from one square to another."""
        with self._lock:
            for col_pos in old_load_area.col_dists:
                if col_pos in new_load_area.col_dists:
                    continue
                players = self._player_cols.get(col_pos)
                if players is not None:
                    players.discard(player_id)
                    if not players:
                        self._unload_col(col_pos)
            for col_pos, dist in new_load_area.col_dists.items():
                if col_pos in old_load_area.col_dists:
                    continue
                players = self._player_cols.setdefault(col_pos, set())
                is_new = not players
                players.add(player_id)
                if is_new:
                    self._add_gen_order(col_pos, dist)
                else:
                    self._update_gen_order(col_pos, dist)

    def pop_next(self) -> tuple[ColPos, int] | None:
        """Take the nearest pending column and its distance, if any."""
        with self._lock:
            return self._to_generate.pop() if self._to_generate else None