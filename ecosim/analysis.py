"""Графики численности популяций по истории прогона."""

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from ecosim.stats import PopulationHistory
from ecosim.visualizer import SPECIES_COLORS


def plot_history(history: PopulationHistory, path: str = "populations.png",
                 title: str = "Численность популяций") -> str:
    data = history.as_array()
    fig, ax = plt.subplots(figsize=(10, 5))

    for i, kind in enumerate(history.kinds):
        color = tuple(c / 255 for c in SPECIES_COLORS.get(kind, (128, 128, 128)))
        ax.plot(history.steps, data[:, i], '-', label=kind, color=color)

    ax.set_xlabel("Шаг")
    ax.set_ylabel("Особей")
    ax.set_title(title)
    ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()
    plt.savefig(path, dpi=150)
    plt.close(fig)
    print(f"Сохранено: {path}")
    return path
