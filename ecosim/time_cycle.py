"""Смена дня и ночи: ночью никто не действует."""

from enum import Enum, auto


class TimeOfDay(Enum):
    DAY   = auto()  # все растения и животные действуют
    NIGHT = auto()  # все спят: шаг проходит, но состояние не меняется


class Clock:
    """Счётчик шагов симуляции. На чётных шагах ночь."""

    def __init__(self):
        self.step = 0

    def reset(self) -> None:
        self.step = 0

    def tick(self) -> TimeOfDay:
        """Следующий шаг. Возвращает время суток нового шага."""
        self.step += 1
        return self.time

    @property
    def time(self) -> TimeOfDay:
        return TimeOfDay.NIGHT if self.step % 2 == 0 else TimeOfDay.DAY

    @property
    def is_night(self) -> bool:
        return self.time == TimeOfDay.NIGHT

    def __repr__(self) -> str:
        return f"[{self.step}|{self.time.name}]"
