#!/usr/bin/env python3
"""
termsnake - Play Snake in the terminal.

Usage:
    python scripts/play.py                        # Defaults from config.yaml
    python scripts/play.py --difficulty hard      # Faster ticks
    python scripts/play.py --width 30 --height 15 --ascii
    python scripts/play.py --no-records           # Don't read or save the record

Controls:
    Arrow Keys or WASD: Move the snake
    P / Space: Pause and resume
    Q / ESC: End the session
    R: Restart after game over
    E: Exit after game over
"""
import sys
import argparse
import logging
from pathlib import Path
from typing import Any, Dict, Optional

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from termsnake.game import SnakeGame
from termsnake.game.errors import GameError
from termsnake.persistence import FileRecordStore
from termsnake.utils.config_loader import Config, load_config
from termsnake.utils.logging_setup import configure_logging
from termsnake.visualization import GameRunner, KeyboardInput, TerminalRenderer

logger = logging.getLogger("termsnake.play")


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="termsnake - Snake in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/play.py --difficulty expert
  python scripts/play.py --width 30 --height 15
  python scripts/play.py --ascii --seed 42
"""
    )

    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a YAML config file (default: config.yaml)"
    )
    parser.add_argument(
        "--width",
        type=int,
        default=None,
        help="Board width in cells"
    )
    parser.add_argument(
        "--height",
        type=int,
        default=None,
        help="Board height in cells"
    )
    parser.add_argument(
        "-d", "--difficulty",
        type=str,
        choices=["easy", "normal", "hard", "expert"],
        default=None,
        help="Base game speed"
    )
    parser.add_argument(
        "--ascii",
        action="store_true",
        help="Draw with ASCII tiles instead of emoji"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for food and obstacle placement"
    )
    parser.add_argument(
        "--record-file",
        type=str,
        default=None,
        help="Where the high score is kept"
    )
    parser.add_argument(
        "--no-records",
        action="store_true",
        help="Neither read nor save the high score"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (DEBUG, INFO, WARNING, ...)"
    )

    return parser.parse_args(argv)


def build_overrides(args) -> Dict[str, Any]:
    """Turn command line flags into nested config overrides."""
    overrides: Dict[str, Dict[str, Any]] = {
        'game': {},
        'display': {},
        'records': {},
        'logging': {},
    }

    if args.width is not None:
        overrides['game']['width'] = args.width
    if args.height is not None:
        overrides['game']['height'] = args.height
    if args.difficulty is not None:
        overrides['game']['difficulty'] = args.difficulty
    if args.seed is not None:
        overrides['game']['seed'] = args.seed
    if args.ascii:
        overrides['display']['use_emoji'] = False
    if args.record_file is not None:
        overrides['records']['path'] = args.record_file
    if args.no_records:
        overrides['records']['enabled'] = False
    if args.log_level is not None:
        overrides['logging']['level'] = args.log_level

    return {section: values for section, values in overrides.items() if values}


def create_game(config: Config) -> SnakeGame:
    record_store: Optional[FileRecordStore] = None
    if config.records.enabled:
        record_store = FileRecordStore(config.records.path)
    return SnakeGame(config.game, record_store=record_store)


def main(argv=None) -> int:
    """Main entry point for terminal play."""
    args = parse_args(argv)

    try:
        config = load_config(args.config, overrides=build_overrides(args))
        configure_logging(config.logging)
        game = create_game(config)
    except (GameError, ValueError, OSError) as e:
        print(f"[termsnake] {e}", file=sys.stderr)
        return 2

    if not sys.stdin.isatty():
        print("[termsnake] Needs an interactive terminal", file=sys.stderr)
        return 2

    renderer = TerminalRenderer(
        use_emoji=config.display.use_emoji,
        show_help=config.display.show_help,
    )

    with KeyboardInput() as keyboard:
        runner = GameRunner(
            game,
            renderer,
            keyboard,
            refresh_per_second=config.display.refresh_per_second,
            use_emoji=config.display.use_emoji,
        )
        try:
            score = runner.run()
        except KeyboardInterrupt:
            logger.info("Interrupted")
            score = game.get_score()

    print(f"Final score: {score}  Record: {game.get_record_score()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
