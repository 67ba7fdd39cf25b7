"""Command-line demo and benchmark runner."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from gridsnake.grid import GameMode

logger = logging.getLogger(__name__)

_MODES = [m.value for m in GameMode]


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"{value} must be at least 1.")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridsnake",
        description="Grid snake simulation: autopilot demos and benchmarks.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- demo ---
    demo_p = sub.add_parser("demo", help="Play one game on autopilot.")
    demo_p.add_argument("--mode", choices=_MODES, default="walls")
    demo_p.add_argument("--seed", type=int, default=None)
    demo_p.add_argument("--max-ticks", type=_positive_int, default=10_000)
    demo_p.add_argument("--player", type=str, default="autopilot")
    demo_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON game config file.",
    )
    demo_p.add_argument(
        "--realtime", action="store_true",
        help="Tick on the game timer instead of as fast as possible.",
    )

    # --- benchmark ---
    bench_p = sub.add_parser(
        "benchmark", help="Measure autopilot throughput and scores.",
    )
    bench_p.add_argument("--num-games", type=_positive_int, default=100)
    bench_p.add_argument("--mode", choices=_MODES, default="walls")
    bench_p.add_argument("--grid-size", type=int, default=20)
    bench_p.add_argument("--max-steps", type=_positive_int, default=10_000)
    bench_p.add_argument("--seed", type=int, default=42)

    return parser


def _run_demo(args: argparse.Namespace) -> int:
    from gridsnake.autopilot import greedy_direction
    from gridsnake.config import GameConfig
    from gridsnake.engine import GameEngine
    from gridsnake.leaderboard import InMemoryLeaderboard
    from gridsnake.session import Command, CommandKind, GameSession
    from gridsnake.state import GameStatus

    config = GameConfig.load(args.config) if args.config else GameConfig()
    engine = GameEngine(config, seed=args.seed)
    leaderboard = InMemoryLeaderboard()
    session = GameSession(
        engine,
        GameMode(args.mode),
        autopilot=greedy_direction,
        leaderboard=leaderboard,
        player=args.player,
    )
    session.submit(Command(CommandKind.START))

    if args.realtime:
        asyncio.run(session.run(max_ticks=args.max_ticks))
    else:
        while session.state.status is GameStatus.PLAYING and (
            session.ticks < args.max_ticks
        ):
            session.step()

    state = session.state
    print(  # noqa: T201
        f"Demo: {state.status.value} after {session.ticks} ticks | "
        f"score {state.score}, length {state.length}, speed {state.speed}ms"
    )
    return 0


def _run_benchmark(args: argparse.Namespace) -> int:
    from gridsnake.benchmark import benchmark_autopilot

    result = benchmark_autopilot(
        num_games=args.num_games,
        mode=GameMode(args.mode),
        grid_size=args.grid_size,
        max_steps=args.max_steps,
        seed=args.seed,
    )
    print(result.summary())  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``gridsnake`` CLI."""
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
        "demo": _run_demo,
        "benchmark": _run_benchmark,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
