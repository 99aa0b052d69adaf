"""Command-line tools for headless Arcade Snake runs."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arcade-snake",
        description="Arcade Snake headless simulation and benchmarking.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON game config (flags below override it).",
    )
    common.add_argument("--grid-size", type=int, default=None)
    common.add_argument("--initial-speed", type=int, default=None)
    common.add_argument("--min-speed", type=int, default=None)
    common.add_argument("--speed-decrement", type=int, default=None)
    common.add_argument("--seed", type=int, default=None)
    common.add_argument("--max-ticks", type=int, default=1_000)

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", parents=[common],
        help="Play one game with random inputs.",
    )
    sim_p.add_argument(
        "--frames", action="store_true",
        help="Print the board after every tick.",
    )

    # --- benchmark ---
    bench_p = sub.add_parser(
        "benchmark", parents=[common],
        help="Measure simulation throughput.",
    )
    bench_p.add_argument("--num-games", type=int, default=100)

    # --- init-config ---
    init_p = sub.add_parser(
        "init-config", help="Write the default game config as JSON.",
    )
    init_p.add_argument("output", help="Destination path.")

    return parser


def _load_config(args: argparse.Namespace):
    from arcade_snake.config import GameConfig

    config = GameConfig.load(args.config) if args.config else GameConfig()

    flag_map = {
        "grid_size": "grid_size",
        "initial_speed": "initial_speed_ms",
        "min_speed": "min_speed_ms",
        "speed_decrement": "speed_decrement_ms",
        "seed": "seed",
    }
    overrides = {
        cfg_name: getattr(args, cli_name)
        for cli_name, cfg_name in flag_map.items()
        if getattr(args, cli_name, None) is not None
    }
    if "grid_size" in overrides and not args.config:
        # Keep the default start centred on a resized board.
        centre = overrides["grid_size"] // 2
        overrides.update(start_x=centre, start_y=centre)
    return replace(config, **overrides) if overrides else config


def _run_simulate(args: argparse.Namespace) -> int:
    import numpy as np

    from arcade_snake.benchmark import simulate_game
    from arcade_snake.engine import GameEngine
    from arcade_snake.render import render_text

    config = _load_config(args)
    engine = GameEngine(config)
    rng = np.random.default_rng(config.seed)

    def show(snapshot) -> None:
        print(render_text(snapshot))  # noqa: T201
        print()  # noqa: T201

    final = simulate_game(
        engine, rng,
        max_ticks=args.max_ticks,
        on_frame=show if args.frames else None,
    )
    if not args.frames:
        print(render_text(final))  # noqa: T201
    return 0


def _run_benchmark(args: argparse.Namespace) -> int:
    from arcade_snake.benchmark import benchmark_throughput

    config = _load_config(args)
    result = benchmark_throughput(
        num_games=args.num_games,
        max_ticks=args.max_ticks,
        config=config,
        seed=config.seed if config.seed is not None else 42,
    )
    print(result.summary())  # noqa: T201
    return 0


def _run_init_config(args: argparse.Namespace) -> int:
    from arcade_snake.config import GameConfig

    GameConfig().save(args.output)
    print(f"Wrote default config to {args.output}")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``arcade-snake`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "benchmark": _run_benchmark,
        "init-config": _run_init_config,
    }
    try:
        return handlers[args.command](args)
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
