"""Поле симуляции: прямоугольная сетка клеток, по одному обитателю на клетку."""

from typing import Iterator, List, NamedTuple, Optional, Protocol
import numpy as np


class Location(NamedTuple):
    """Клетка поля: (строка, столбец)."""
    row: int
    col: int


class Occupant(Protocol):
    """Всё, что может занимать клетку: животное или растение."""

    kind: str
    alive: bool
    location: Optional[Location]

    def act(self, newborn: list) -> None: ...
    def set_dead(self) -> None: ...


class CellOccupiedError(ValueError):
    """Попытка занять клетку, где уже стоит другой живой обитатель."""


# Порядок обхода соседей: построчно по блоку 3×3 без центра.
_NEIGHBOURHOOD = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1)
                  if (dr, dc) != (0, 0)]


class Field:
    """
    Двумерная сетка depth×width.
    Каждая клетка хранит ссылку на обитателя или None.
    Два поля (животные и растения) живут независимо в одних координатах.
    """

    def __init__(self, depth: int, width: int):
        self.depth = depth
        self.width = width
        self._cells: list[list[Optional[Occupant]]] = [
            [None for _ in range(width)] for _ in range(depth)
        ]

    # ── Доступ к клеткам ───────────────────────────────────────────────────

    def in_bounds(self, location: Location) -> bool:
        return 0 <= location.row < self.depth and 0 <= location.col < self.width

    def _check(self, location: Location) -> None:
        if not self.in_bounds(location):
            raise IndexError(f"{location} outside {self.depth}x{self.width} field")

    def get_object_at(self, location: Location) -> Optional[Occupant]:
        self._check(location)
        return self._cells[location.row][location.col]

    def place(self, occupant: Occupant, location: Location) -> None:
        """Занять клетку. Старую клетку обитателя вызывающий очищает сам."""
        self._check(location)
        current = self._cells[location.row][location.col]
        if current is not None and current is not occupant and current.alive:
            raise CellOccupiedError(f"{location} already holds {current!r}")
        self._cells[location.row][location.col] = occupant

    def clear(self, location: Location) -> None:
        self._check(location)
        self._cells[location.row][location.col] = None

    def clear_all(self) -> None:
        for row in self._cells:
            for c in range(self.width):
                row[c] = None

    # ── Соседи ─────────────────────────────────────────────────────────────

    def adjacent_locations(self, location: Location) -> List[Location]:
        """До 8 соседних клеток, без заворота через край."""
        result = []
        for dr, dc in _NEIGHBOURHOOD:
            r, c = location.row + dr, location.col + dc
            if 0 <= r < self.depth and 0 <= c < self.width:
                result.append(Location(r, c))
        return result

    def free_adjacent_locations(self, location: Location) -> List[Location]:
        """Свободные соседи в том же порядке: из них берут клетки для потомства."""
        return [loc for loc in self.adjacent_locations(location)
                if self._cells[loc.row][loc.col] is None]

    def free_adjacent_location(self, location: Location) -> Optional[Location]:
        free = self.free_adjacent_locations(location)
        return free[0] if free else None

    # ── Обход ──────────────────────────────────────────────────────────────

    def locations(self) -> Iterator[Location]:
        for r in range(self.depth):
            for c in range(self.width):
                yield Location(r, c)

    def occupants(self) -> Iterator[Occupant]:
        for row in self._cells:
            for obj in row:
                if obj is not None:
                    yield obj

    def snapshot(self, codes: dict) -> np.ndarray:
        """
        Матрица кодов для отрисовки: codes[ключ обитателя] -> int, пусто = 0.
        Ключ: `kind` обитателя (название вида).
        """
        grid = np.zeros((self.depth, self.width), dtype=np.int16)
        for r, row in enumerate(self._cells):
            for c, obj in enumerate(row):
                if obj is not None:
                    grid[r, c] = codes.get(obj.kind, -1)
        return grid

    def __repr__(self) -> str:
        return f"Field({self.depth}x{self.width})"
