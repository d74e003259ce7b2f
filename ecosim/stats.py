"""Наблюдатели: подсчёт популяций, проверка жизнеспособности, история по шагам."""

from collections import Counter
from typing import List, Optional, Protocol
import numpy as np

from ecosim.field import Field
from ecosim.species import SEEDING_ORDER


class Observer(Protocol):
    """Получает снимок поля после каждого шага. Обратная связь: только is_viable."""

    def report(self, step: int, field: Field) -> None: ...
    def is_viable(self, field: Field) -> bool: ...


class FieldStats:
    """Подсчёт обитателей поля по видам."""

    def counts(self, field: Field) -> Counter:
        return Counter(obj.kind for obj in field.occupants())

    def is_viable(self, field: Field) -> bool:
        """Жизнеспособно, пока на поле больше одного вида."""
        return sum(1 for n in self.counts(field).values() if n > 0) > 1

    def population_details(self, field: Field) -> str:
        counts = self.counts(field)
        return "  ".join(f"{kind}: {counts[kind]}" for kind in sorted(counts))


class PopulationHistory:
    """Записывает численность каждого вида на каждом шаге."""

    def __init__(self, kinds: Optional[List[str]] = None):
        self.kinds = list(kinds) if kinds is not None else list(SEEDING_ORDER)
        self.stats = FieldStats()
        self.steps: List[int] = []
        self.rows: List[List[int]] = []

    def report(self, step: int, field: Field) -> None:
        counts = self.stats.counts(field)
        self.steps.append(step)
        self.rows.append([counts.get(k, 0) for k in self.kinds])

    def is_viable(self, field: Field) -> bool:
        return self.stats.is_viable(field)

    def clear(self) -> None:
        self.steps.clear()
        self.rows.clear()

    def as_array(self) -> np.ndarray:
        """Матрица шаги×виды."""
        if not self.rows:
            return np.zeros((0, len(self.kinds)), dtype=np.int64)
        return np.array(self.rows, dtype=np.int64)

    def series(self, kind: str) -> np.ndarray:
        return self.as_array()[:, self.kinds.index(kind)]

    def to_records(self) -> List[dict]:
        return [{"step": s, **dict(zip(self.kinds, row))}
                for s, row in zip(self.steps, self.rows)]

    def __len__(self) -> int:
        return len(self.steps)


class ConsoleView:
    """Печатает строку состояния каждые `every` шагов."""

    def __init__(self, every: int = 1):
        self.every = max(1, every)
        self.stats = FieldStats()

    def report(self, step: int, field: Field) -> None:
        if step % self.every == 0:
            print(f"Step: {step:5d}  {self.stats.population_details(field)}")

    def is_viable(self, field: Field) -> bool:
        return self.stats.is_viable(field)
