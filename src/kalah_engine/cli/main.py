"""
Main CLI for the Kalah engine.
"""

import argparse
import logging
import sys

from ..core import (
    GameMode,
    IllegalMoveError,
    apply_move,
    create_starting_state,
    generate_legal_moves,
    is_terminal,
    get_game_result,
    render,
)
from ..utils.rich_display import BoardDisplay, setup_rich_logging


def setup_logging(level: str = "INFO") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _configure(args) -> None:
    if args.plain:
        setup_logging(args.log_level)
    else:
        setup_rich_logging(args.log_level)


def _show(args, state, title=None) -> None:
    if args.plain:
        if title:
            print(title)
        print(render(state))
        result = get_game_result(state)
        if result is not None:
            print(result)
    else:
        BoardDisplay().show(state, title=title)


def _report(args, logger, level, message) -> None:
    """Send a move warning or error to the log (plain) or the rich console."""
    if args.plain:
        logger.log(level, message)
    elif level >= logging.ERROR:
        BoardDisplay().log_error(message)
    else:
        BoardDisplay().log_warning(message)


def _play_moves(args, state, moves, logger, on_move=None):
    """
    Apply moves in order and return the final state.

    Moves after the end of the game are reported and skipped. An illegal
    move is reported and exits with status 2.

    Args:
        args: Parsed command-line arguments
        state: Position to start from
        moves: Pit indices to play
        logger: Logger for progress messages
        on_move: Called with (title, state) after each applied move
    """
    for number, move in enumerate(moves, start=1):
        if is_terminal(state):
            _report(args, logger, logging.WARNING, f"Move {number} (pit {move}) ignored: game is over")
            continue

        player = "White" if state.mode is GameMode.WHITE_TO_MOVE else "Black"
        try:
            state = apply_move(state, move)
        except IllegalMoveError as e:
            _report(args, logger, logging.ERROR, f"Move {number} by {player} rejected: {e}")
            sys.exit(2)

        logger.debug(f"Move {number}: {player} sowed pit {move}")
        if on_move is not None:
            on_move(f"Move {number}: {player} plays pit {move}", state)

    return state


def show_command(args):
    """Print the starting board."""
    _configure(args)
    state = create_starting_state(args.num_seeds)
    _show(args, state, title="Starting position")


def replay_command(args):
    """Replay a sequence of moves from the starting position."""
    _configure(args)
    logger = logging.getLogger(__name__)

    state = create_starting_state(args.num_seeds)
    logger.info(f"Replaying {len(args.moves)} moves, {args.num_seeds} stones per pit")

    _show(args, state, title="Starting position")
    state = _play_moves(
        args, state, args.moves, logger,
        on_move=lambda title, board: _show(args, board, title=title),
    )

    logger.info(f"Final stones on board: {state.total_stones}")


def moves_command(args):
    """List legal moves after a sequence of moves."""
    _configure(args)
    logger = logging.getLogger(__name__)

    state = create_starting_state(args.num_seeds)
    state = _play_moves(args, state, args.moves, logger)

    legal = generate_legal_moves(state)
    if legal:
        print(" ".join(str(move) for move in legal))
    else:
        logger.info("No legal moves: game is over")


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Kalah rules engine")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    parser.add_argument(
        "--plain", action="store_true", help="Plain text output instead of rich panels"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Show command
    show_parser = subparsers.add_parser("show", help="Print the starting board")
    show_parser.add_argument(
        "--num-seeds", type=int, default=4, help="Initial stones per pit"
    )
    show_parser.set_defaults(func=show_command)

    # Replay command
    replay_parser = subparsers.add_parser("replay", help="Replay moves from the start")
    replay_parser.add_argument(
        "--num-seeds", type=int, default=4, help="Initial stones per pit"
    )
    replay_parser.add_argument(
        "moves", type=int, nargs="+", help="Pit indices (0-5) of the player to move"
    )
    replay_parser.set_defaults(func=replay_command)

    # Moves command
    moves_parser = subparsers.add_parser("moves", help="List legal moves after a sequence")
    moves_parser.add_argument(
        "--num-seeds", type=int, default=4, help="Initial stones per pit"
    )
    moves_parser.add_argument(
        "moves", type=int, nargs="*", help="Pit indices played so far"
    )
    moves_parser.set_defaults(func=moves_command)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    args.func(args)


if __name__ == "__main__":
    main()
