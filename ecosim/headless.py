"""
Прогон без визуала.
    python -m ecosim --headless --steps 500
    python -m ecosim --headless --seed 7 --out history.json --plot
"""

import json
from typing import Optional

from tqdm import tqdm

from ecosim.config import SimulationConfig
from ecosim.stats import PopulationHistory
from ecosim.world import Simulator


def simulate(config: Optional[SimulationConfig] = None, steps: int = 500,
             out: Optional[str] = None, report_every: int = 100,
             progress: bool = True) -> PopulationHistory:
    config = config or SimulationConfig()
    history = PopulationHistory(kinds=[k for k in config.species])
    sim = Simulator(config, observer=history)

    bar = tqdm(range(1, steps + 1), desc="[steps]", disable=not progress)
    for n in bar:
        if not history.is_viable(sim.field):
            tqdm.write(f"Step {sim.step_count:5d} | simulation is no longer viable")
            break
        sim.step()
        if report_every and n % report_every == 0:
            s = sim.stats()
            tqdm.write(f"Step {sim.step_count:5d} | "
                       + " | ".join(f"{k}:{v}" for k, v in s.items()))
    bar.close()

    if out:
        with open(out, "w") as f:
            json.dump(history.to_records(), f)
        print(f"History saved: {out}")
    return history
