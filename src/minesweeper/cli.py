"""
Command-line Minesweeper.

Usage:
    minesweeper [--preset {easy,medium,hard}] [--rows R --cols C --mines M]
                [--seed N]

Without a preset or a full set of dimensions, the board size is asked
for interactively.
"""
import argparse
import random
from typing import Callable, Optional, Sequence, Tuple

from .board import Board, BoardConfig, GameState, PRESETS
from .errors import ConfigurationError, OutOfBoundsError
from .renderer import render_board


InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def print_welcome(output: OutputFn = print) -> None:
    """Print the greeting and the suggested difficulty levels."""
    output("Hello! Welcome to Minesweeper!\n")
    output("Suggested levels of difficulty:\n")
    output("Easy (9x9 grid, 10 mines)")
    output("Medium (16x16 grid, 40 mines)")
    output("Hard (16x30 grid, 99 mines)\n")
    output("Insert your preferences below:\n")


def prompt_int(prompt: str, input_fn: InputFn = input,
               output: OutputFn = print) -> int:
    """Ask until the answer parses as an integer."""
    while True:
        answer = input_fn(prompt)
        try:
            return int(answer.strip())
        except ValueError:
            output(f"'{answer.strip()}' is not a whole number.")


def prompt_config(input_fn: InputFn = input,
                  output: OutputFn = print) -> BoardConfig:
    """Ask for rows, columns and mines until they form a valid board."""
    while True:
        rows = prompt_int("Enter number of rows: ", input_fn, output)
        cols = prompt_int("Enter number of columns: ", input_fn, output)
        mines = prompt_int("Enter number of mines: ", input_fn, output)
        try:
            return BoardConfig(width=cols, height=rows, num_mines=mines)
        except ConfigurationError as exc:
            output(f"Invalid board: {exc}")


def parse_move(text: str) -> Tuple[int, int]:
    """
    Parse "row col" into a coordinate pair.

    Raises:
        ValueError: If the text is not exactly two integers.
    """
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        raise ValueError("Enter a row and a column separated by a space.")
    return int(parts[0]), int(parts[1])


def run_game(board: Board, input_fn: InputFn = input,
             output: OutputFn = print) -> GameState:
    """
    Play one game on the given board.

    Returns:
        Final game state. PLAYING means input ran out first.
    """
    output(render_board(board.get_observation()))

    while not board.is_game_over():
        try:
            line = input_fn("Enter row and column to reveal: ")
        except EOFError:
            break

        try:
            row, col = parse_move(line)
            board.reveal(row, col)
        except OutOfBoundsError as exc:
            output(str(exc))
            continue
        except ValueError as exc:
            output(f"Invalid move: {exc}")
            continue

        output(render_board(board.get_observation()))

        if board.is_game_won():
            output("Congratulations! You won the game!")
            return GameState.WON

        if board.is_game_over():
            output("You Lost! Game over.")
            return GameState.LOST

    return board.game_state


def config_from_args(args: argparse.Namespace) -> Optional[BoardConfig]:
    """Build a config from flags, or None when the user must be asked."""
    if args.preset:
        return PRESETS[args.preset]
    if None in (args.rows, args.cols, args.mines):
        return None
    return BoardConfig(width=args.cols, height=args.rows, num_mines=args.mines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play Minesweeper in the terminal"
    )
    parser.add_argument(
        "--preset", choices=sorted(PRESETS), help="Use a suggested board size"
    )
    parser.add_argument("--rows", type=int, help="Number of rows")
    parser.add_argument("--cols", type=int, help="Number of columns")
    parser.add_argument("--mines", type=int, help="Number of mines")
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Parse arguments and play one game."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = config_from_args(args)
    except ConfigurationError as exc:
        parser.error(str(exc))

    if config is None:
        print_welcome()
        try:
            config = prompt_config(input, print)
        except EOFError:
            return

    board = Board(config, random.Random(args.seed))
    run_game(board, input, print)


if __name__ == "__main__":
    main()
