"""Command line tools for running headless games."""

from __future__ import annotations

import argparse
import json
import logging
import sys

logger = logging.getLogger(__name__)

_KEYS = ("up", "down", "left", "right")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snake-engine",
        description="Headless snake game simulation and config tools.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log per-tick engine detail.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Play a game with random key presses.",
    )
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument("--ticks", type=int, default=500)
    sim_p.add_argument(
        "--turn-every", type=int, default=4,
        help="Press a random direction key every N ticks (0 disables).",
    )
    sim_p.add_argument(
        "--locale", type=str, default=None,
        help="Two-letter language for status text (default: system).",
    )
    sim_p.add_argument(
        "--json", action="store_true",
        help="Print the final snapshot as JSON.",
    )

    # --- config ---
    cfg_p = sub.add_parser("config", help="Show or write a game config.")
    cfg_p.add_argument("--config", type=str, default=None)
    cfg_p.add_argument(
        "--output", type=str, default=None,
        help="Write the config to this path instead of printing it.",
    )

    return parser


def _load_config(path: str | None):
    from snake_engine.config import GameConfig

    return GameConfig.load(path) if path else GameConfig()


def _run_simulate(args: argparse.Namespace) -> int:
    import numpy as np

    from snake_engine.controls import KeyboardController
    from snake_engine.engine import GameEngine
    from snake_engine.localization import status_text
    from snake_engine.scheduler import ManualScheduler

    if args.ticks < 0 or args.turn_every < 0:
        logger.error("--ticks and --turn-every must be >= 0.")
        return 2

    config = _load_config(args.config)
    scheduler = ManualScheduler()
    engine = GameEngine(config, scheduler=scheduler, seed=args.seed)
    controller = KeyboardController(engine)
    key_rng = np.random.default_rng(
        None if args.seed is None else args.seed + 1,
    )

    for n in range(args.ticks):
        if args.turn_every and n % args.turn_every == 0:
            controller.handle_key(_KEYS[int(key_rng.integers(len(_KEYS)))])
        if not scheduler.fire():
            break

    snapshot = engine.snapshot()
    logger.info(
        "Simulated %d ticks (%.0f ms of game time).",
        scheduler.ticks, scheduler.elapsed_ms,
    )
    if args.json:
        print(json.dumps(snapshot.to_dict(), separators=(",", ":")))  # noqa: T201
    else:
        for text in status_text(snapshot, args.locale).values():
            print(text)  # noqa: T201
    return 0


def _run_config(args: argparse.Namespace) -> int:
    config = _load_config(args.config)
    if args.output:
        config.save(args.output)
        print(f"Wrote config to {args.output}")  # noqa: T201
    else:
        print(json.dumps(config.to_dict(), indent=2))  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snake-engine`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "config": _run_config,
    }
    try:
        return handlers[args.command](args)
    except (OSError, ValueError) as exc:
        logger.error("%s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
