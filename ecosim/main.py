"""Точка входа. Запуск: python -m ecosim [--depth 80] [--width 120] [--steps 500] [--headless]"""

import argparse

from ecosim.config import SimulationConfig
from ecosim.world import LONG_RUN_STEPS


def main(argv=None):
    p = argparse.ArgumentParser(description="Grid predator-prey ecosystem simulation")
    p.add_argument("--depth",    type=int,   default=80,   help="Высота поля")
    p.add_argument("--width",    type=int,   default=120,  help="Ширина поля")
    p.add_argument("--steps",    type=int,   default=500,  help="Количество шагов")
    p.add_argument("--long",     action="store_true",      help=f"Длинный прогон ({LONG_RUN_STEPS} шагов)")
    p.add_argument("--seed",     type=int,   default=None, help="Seed генератора")
    p.add_argument("--delay",    type=float, default=0.05, help="Задержка между шагами (сек)")
    p.add_argument("--cell",     type=int,   default=5,    help="Размер клетки в пикселях")
    p.add_argument("--headless", action="store_true",      help="Без окна, с прогресс-баром")
    p.add_argument("--out",      type=str,   default=None, help="JSON с историей численности")
    p.add_argument("--plot",     action="store_true",      help="Сохранить график populations.png")
    args = p.parse_args(argv)

    config = SimulationConfig(depth=args.depth, width=args.width, seed=args.seed)
    steps = LONG_RUN_STEPS if args.long else args.steps

    if args.headless:
        from ecosim.headless import simulate
        history = simulate(config, steps=steps, out=args.out)
        if args.plot:
            from ecosim.analysis import plot_history
            plot_history(history)
    else:
        from ecosim.visualizer import run
        run(config, steps=steps, delay=args.delay, cell=args.cell)


if __name__ == "__main__":
    main()
