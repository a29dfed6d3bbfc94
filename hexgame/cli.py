"""
Command-line interface for playing Hex in a terminal.

Two players take turns typing moves in letter + number notation ("a1",
"d5"). Bad input is reported and the same player is asked again.
"""

import argparse
import logging
import sys
from typing import Optional, TextIO

from hexgame.config import DEFAULT_BOARD_SIZE, LOG_FORMAT, MIN_BOARD_SIZE
from hexgame.display import display_hex_board
from hexgame.errors import HexError
from hexgame.game import Game
from hexgame.serialization import load_from_file, save_to_file

logger = logging.getLogger(__name__)

QUIT_COMMANDS = ('q', 'quit', 'exit')


def setup_logging(verbose: bool = False):
    """Configure logging for the CLI."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
    )


def board_size(value: str) -> int:
    size = int(value)
    if size < MIN_BOARD_SIZE:
        raise argparse.ArgumentTypeError(f"board size must be at least {MIN_BOARD_SIZE}")
    return size


def parse_arguments(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description="Play Hex in the terminal")
    parser.add_argument('--board-size', type=board_size, default=DEFAULT_BOARD_SIZE,
                        help=f'Board size (default: {DEFAULT_BOARD_SIZE})')
    parser.add_argument('--load', type=str, default=None, help='Resume a game saved as JSON')
    parser.add_argument('--save', type=str, default=None, help='Write the game to this JSON file when the session ends')
    parser.add_argument('--no-color', action='store_true', help='Disable ANSI colors')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')
    return parser.parse_args(argv)


def play_session(game: Game, input_stream: TextIO, output: TextIO, color: bool = False) -> Game:
    """
    Run the interactive loop until the game ends, the user quits or input runs out.

    Args:
        game: Game to continue (mutated in place)
        input_stream: Where moves are read from, one per line
        output: Where prompts and boards are written
        color: Use ANSI colors for stones

    Returns:
        The same game object
    """
    display_hex_board(game.board, file=output, color=color)
    while not game.game_over:
        print(f"{game.current_player}: Please enter the coordinates for your next move: ", end="", file=output)
        output.flush()
        line = input_stream.readline()
        if not line:
            print("\nEnd of input. Exiting game.", file=output)
            break
        text = line.strip().lower()
        if text in QUIT_COMMANDS:
            print("Quitting game by user request.", file=output)
            break
        try:
            coords = game.play_notation(text)
        except HexError as e:
            logger.info(f"Rejected move {text!r}: {e}")
            print(f"Error: {e}", file=output)
            continue
        display_hex_board(game.board, file=output, color=color)
        logger.debug(f"Played {coords}")

    if game.game_over:
        print(f"Game over - {game.winner} wins!", file=output)
    return game


def main(argv=None) -> int:
    """Main CLI entry point."""
    args = parse_arguments(argv)
    setup_logging(args.verbose)

    if args.load:
        try:
            game = load_from_file(args.load)
        except (OSError, HexError) as e:
            print(f"Error loading {args.load}: {e}", file=sys.stderr)
            return 1
        logger.info(f"Loaded {game.size}x{game.size} game from {args.load}")
    else:
        game = Game(args.board_size)

    try:
        play_session(game, sys.stdin, sys.stdout, color=not args.no_color and sys.stdout.isatty())
    except KeyboardInterrupt:
        print("\nKeyboard interrupt detected. Exiting game.")

    if args.save:
        save_to_file(game, args.save)
        logger.info(f"Saved game to {args.save}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
