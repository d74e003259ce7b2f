"""Дискретная модель экосистемы хищник-жертва на прямоугольной сетке."""

from ecosim.config import SimulationConfig
from ecosim.field import CellOccupiedError, Field, Location
from ecosim.world import Simulator

__all__ = ["CellOccupiedError", "Field", "Location", "SimulationConfig", "Simulator"]
