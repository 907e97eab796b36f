from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..core.exceptions import IndexOutOfBoundsError, InvalidArgumentError


@dataclass(frozen=True)
class Position:
    """Immutable (row, col) coordinate, usable as a dict key."""
    row: int
    col: int

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


class SparseMatrix:
    """
    🗺️ Fixed-size grid that stores only the cells holding a value 🗺️

    ┌───────────────────────────────┐     ┌──────────────────────┐
    │ .  .  .  .  .                 │     │ (0,3) → "treadmill"  │
    │ .  .  .  X  .   5 x 5 grid    │ ==> │ (1,3) → "bench"      │
    │ .  .  .  .  .   2 cells set   │     └──────────────────────┘
    └───────────────────────────────┘

    An unset cell reads as None ("unset"), never as a default value.
    Setting a cell to None removes it from the backing map.
    """

    def __init__(self, rows: int, cols: int):
        if rows <= 0 or cols <= 0:
            raise InvalidArgumentError(
                f"Matrix dimensions must be positive, got {rows}x{cols}")
        self._rows = rows
        self._cols = cols
        self._cells: Dict[Position, Any] = {}

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise IndexOutOfBoundsError(
                f"Invalid position ({row},{col}) for {self._rows}x{self._cols} matrix")

    def set(self, row: int, col: int, value: Any) -> None:
        """Store value at (row, col); None clears the cell."""
        self._check_bounds(row, col)
        position = Position(row, col)

        if value is None:
            self._cells.pop(position, None)
        else:
            self._cells[position] = value

    def get(self, row: int, col: int) -> Optional[Any]:
        self._check_bounds(row, col)
        return self._cells.get(Position(row, col))

    def has_value(self, row: int, col: int) -> bool:
        self._check_bounds(row, col)
        return Position(row, col) in self._cells

    def get_non_zero_elements(self) -> Dict[str, Any]:
        """Every set cell keyed by its "(row,col)" label."""
        return {str(position): value for position, value in self._cells.items()}

    def get_non_zero_count(self) -> int:
        return len(self._cells)

    def get_sparsity(self) -> float:
        """Fraction of cells holding a value (non_zero_count / total_cells)."""
        return len(self._cells) / (self._rows * self._cols)

    def clear(self) -> None:
        self._cells.clear()

    def get_rows(self) -> int:
        return self._rows

    def get_cols(self) -> int:
        return self._cols

    def __repr__(self) -> str:
        lines = [f"SparseMatrix[{self._rows}x{self._cols}, NonZero={len(self._cells)}, "
                 f"Sparsity={self.get_sparsity() * 100:.2f}%]"]
        for position, value in self._cells.items():
            lines.append(f"  {position} = {value!r}")
        return "\n".join(lines)
