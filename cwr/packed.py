"""A growable array of unsigned integers stored at the narrowest fitting width."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

_WIDTH_MASKS = {4: 0xF, 8: 0xFF, 16: 0xFFFF, 32: 0xFFFFFFFF}


def _width_for(value: int) -> int:
    """Storage width, in bits, for a value; small values share 4-bit cells."""
    bits = max(value, 2).bit_length() - 1
    if bits < 4:
        return 4
    if bits < 8:
        return 8
    if bits < 16:
        return 16
    return 32


def _check_value(value: int) -> None:
    if value < 0:
        raise ValueError(f"packed values must be non-negative, got {value}")


def _storage_len(length: int, bits: int) -> int:
    # 4-bit cells come in pairs, so the storage rounds up to an even count.
    return length + (length % 2) if bits == 4 else length


class PackedUints:
    """Unsigned integers at 4, 8, 16 or 32 bits, widened on demand."""

    def __init__(self, length: int, value: int = 0) -> None:
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        _check_value(value)
        self._length = length
        self._bits = _width_for(value)
        stored = value & _WIDTH_MASKS[self._bits]
        self._values = [stored] * _storage_len(length, self._bits)

    @classmethod
    def from_values(cls, values: Iterable[int]) -> PackedUints:
        """Pack the given values at the width their largest one needs."""
        values = list(values)
        for value in values:
            _check_value(value)
        packed = cls(0)
        packed._length = len(values)
        packed._bits = _width_for(max(values, default=2))
        mask = _WIDTH_MASKS[packed._bits]
        stored = [value & mask for value in values]
        stored.extend([0] * (_storage_len(len(values), packed._bits) - len(values)))
        packed._values = stored
        return packed

    def bits(self) -> int:
        """Current storage width in bits."""
        return self._bits

    @property
    def mask(self) -> int:
        return _WIDTH_MASKS[self._bits]

    def _check_index(self, i: int) -> None:
        if not 0 <= i < len(self._values):
            raise IndexError(f"index {i} out of range for {len(self._values)} cells")

    def _upscale_if_needed(self, value: int) -> None:
        _check_value(value)
        if value & self.mask == value:
            return
        self._bits = _width_for(value)
        self._values = self._values[: self._length]

    def get(self, i: int) -> int:
        self._check_index(i)
        return self._values[i]

    def set(self, i: int, value: int) -> None:
        self._upscale_if_needed(value)
        self._check_index(i)
        self._values[i] = value & self.mask

    def set_range(self, start: int, end: int, value: int) -> None:
        """Set every cell in ``start..end`` (end excluded) to ``value``."""
        self.set_range_step(start, end, 1, value)

    def set_range_step(self, start: int, end: int, step: int, value: int) -> None:
        """Set every ``step``-th cell in ``start..end`` (end excluded) to ``value``."""
        if step <= 0:
            raise ValueError(f"step must be positive, got {step}")
        self._upscale_if_needed(value)
        stored = value & self.mask
        for i in range(start, end, step):
            self._check_index(i)
            self._values[i] = stored

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._values))

    def __len__(self) -> int:
        return self._length

    def unpack(self) -> list[int]:
        """All stored cells as a plain list, padding cells included."""
        return list(self._values)

    def __repr__(self) -> str:
        return f"PackedUints(length={self._length}, bits={self._bits})"