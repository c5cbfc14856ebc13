import argparse
import json
import logging
import random
import time
from dataclasses import replace
from typing import Any, Dict, Optional

from config import GameConfig, load_config
from domain.constants import BOUNDARY_POLICIES
from domain.engine import SnakeEngine
from players import RandomPlayer, ScriptedPlayer, get_player_class, AVAILABLE_VARIANTS
from players.base import Player
from services.tick_driver import TickDriver

logger = logging.getLogger(__name__)


def build_player(variant: Optional[str], rng: random.Random, moves=None) -> Player:
    """
    Instantiate a player from the variant registry.
    The random player draws from the given rng so a seeded run is repeatable.
    """
    player_class = get_player_class(variant)
    if player_class is ScriptedPlayer:
        return ScriptedPlayer(moves or [])
    if issubclass(player_class, RandomPlayer):
        return player_class(rng=rng)
    return player_class()


# -------------------------------
# Simulation Function
# -------------------------------

def run_simulation(
    config: GameConfig,
    player: Optional[Player] = None,
    max_ticks: int = 1000,
    realtime: bool = False,
    show_board: bool = False,
    engine: Optional[SnakeEngine] = None,
) -> Dict[str, Any]:
    """
    Runs a single headless game.

    Args:
        config: board and pacing settings
        player: decides the moves; None keeps the snake going straight
        max_ticks: hard stop so a careful player cannot loop forever
        realtime: sleep tick_ms between ticks instead of running flat out
        show_board: print the board after every tick
        engine: an already-built engine (mainly for tests); built from config otherwise

    Returns:
        A dictionary summarizing the round (score, ticks, length, over, won, death_reason).
    """
    if engine is None:
        engine = SnakeEngine(
            cols=config.cols,
            rows=config.rows,
            obstacle_count=config.obstacle_count,
            boundary=config.boundary,
            rng=random.Random(config.seed),
        )

    driver = TickDriver(engine, player=player, tick_ms=config.tick_ms)

    if show_board:
        print("\n" + engine.get_current_state().print_board() + "\n")

    while driver.running and engine.ticks < max_ticks:
        if realtime:
            time.sleep(config.tick_ms / 1000.0)
        driver.tick()
        if show_board:
            print("\n" + engine.get_current_state().print_board() + "\n")

    if not driver.finished:
        logger.info("Stopped after %d ticks (limit %d)", engine.ticks, max_ticks)

    return {
        "score": engine.score,
        "ticks": engine.ticks,
        "length": len(engine.snake),
        "over": engine.over,
        "won": engine.won,
        "death_reason": engine.death_reason,
    }


# -------------------------------
# Example Usage (Main Entry Point)
# -------------------------------

def main(argv=None):
    # Reported after parse_args() so --help works with a broken environment.
    config_error = None
    try:
        config = load_config()
    except ValueError as e:
        config_error = e
        config = GameConfig()

    parser = argparse.ArgumentParser(
        description="Run a headless Snake game driven by a built-in player."
    )
    parser.add_argument("--cols", type=int, default=config.cols,
                        help="Board width in cells")
    parser.add_argument("--rows", type=int, default=config.rows,
                        help="Board height in cells")
    parser.add_argument("--obstacles", type=int, default=config.obstacle_count,
                        help="Number of obstacles (default: one per 50 cells)")
    parser.add_argument("--boundary", choices=sorted(BOUNDARY_POLICIES), default=config.boundary,
                        help="What happens at the board edge")
    parser.add_argument("--player", choices=AVAILABLE_VARIANTS, default=None,
                        help="Which built-in player steers the snake")
    parser.add_argument("--moves", type=str, nargs='*', default=None,
                        help="Moves for the scripted player (e.g. UP UP LEFT)")
    parser.add_argument("--seed", type=int, default=config.seed,
                        help="Seed for food, obstacles and the random player")
    parser.add_argument("--max-ticks", type=int, default=1000,
                        help="Stop after this many ticks")
    parser.add_argument("--tick-ms", type=int, default=config.tick_ms,
                        help="Tick length in milliseconds (used with --realtime)")
    parser.add_argument("--realtime", action="store_true",
                        help="Pace ticks in real time")
    parser.add_argument("--show-board", action="store_true",
                        help="Print the board after each tick")

    args = parser.parse_args(argv)
    if config_error is not None:
        parser.error(f"invalid configuration: {config_error}")

    logging.basicConfig(
        level=config.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    run_config = replace(
        config,
        cols=args.cols,
        rows=args.rows,
        obstacle_count=args.obstacles,
        boundary=args.boundary,
        tick_ms=args.tick_ms,
        seed=args.seed,
    )

    try:
        variant = args.player or ("scripted" if args.moves else None)
        player = build_player(variant, random.Random(args.seed), args.moves)
        result = run_simulation(
            run_config,
            player=player,
            max_ticks=args.max_ticks,
            realtime=args.realtime,
            show_board=args.show_board,
        )
    except ValueError as e:
        parser.error(str(e))

    print("\nSimulation Result Summary:")
    print(json.dumps(result, indent=2))
    return result


if __name__ == "__main__":
    main()
