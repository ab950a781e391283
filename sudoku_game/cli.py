"""Command-line interface for generating and playing Sudoku."""

import argparse
import json
import logging
import sys
from typing import Callable, Iterable, Optional

from tqdm import tqdm

from .core.board import BLANK, BOX_SIZE, SIZE
from .core.cell import board_from_cells
from .generator import Difficulty, GenerationError, SudokuGenerator
from .session import MAX_MISTAKES, GameSession, highlight_grid, remaining_digits

log = logging.getLogger(__name__)

DIFFICULTY_CHOICES = [d.value for d in Difficulty]

MOVES = {
    "w": (-1, 0),
    "s": (1, 0),
    "a": (0, -1),
    "d": (0, 1),
}

PLAY_HELP = """\
Commands:
  <row> <col>     select a cell (1-9 each)
  1-9             place a digit in the selected cell
  x | del         clear the selected cell
  w a s d         move the selection
  new [level]     start a new game (easy, medium, hard, expert)
  help            show this text
  quit            leave"""


def main(argv: Optional[list] = None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Sudoku puzzle generator and text-mode game",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate 5 medium puzzles
  python -m sudoku_game.cli generate --count 5 --difficulty medium

  # Generate every difficulty into a JSON file
  python -m sudoku_game.cli generate -d all -o puzzles.json

  # Play an easy game
  python -m sudoku_game.cli play --difficulty easy
        """
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate command
    gen_parser = subparsers.add_parser("generate", help="Generate Sudoku puzzles")
    gen_parser.add_argument(
        "--count", "-n", type=int, default=5,
        help="Number of puzzles per difficulty (default: 5)"
    )
    gen_parser.add_argument(
        "--difficulty", "-d",
        choices=DIFFICULTY_CHOICES + ["all"],
        default="easy",
        help="Difficulty level (default: easy)"
    )
    gen_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Output file for puzzles and solutions (JSON format)"
    )
    gen_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )

    # Play command
    play_parser = subparsers.add_parser("play", help="Play a game in the terminal")
    play_parser.add_argument(
        "--difficulty", "-d",
        choices=DIFFICULTY_CHOICES,
        default="easy",
        help="Difficulty level (default: easy)"
    )
    play_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    try:
        if args.command == "generate":
            cmd_generate(args)
        elif args.command == "play":
            cmd_play(args)
    except GenerationError as e:
        log.error("Error generating puzzle: %s", e)
        sys.exit(1)


def cmd_generate(args):
    """Handle the generate command."""
    generator = SudokuGenerator(seed=args.seed)

    if args.difficulty == "all":
        difficulties = list(Difficulty)
    else:
        difficulties = [Difficulty(args.difficulty)]

    all_puzzles = []

    for difficulty in tqdm(difficulties, desc="Difficulties", disable=len(difficulties) == 1):
        tqdm.write(f"\nGenerating {args.count} {difficulty.value} puzzles...")
        games = generator.generate_batch(args.count, difficulty)

        for i, (cells, solution) in enumerate(games, 1):
            puzzle = board_from_cells(cells)
            all_puzzles.append({
                "difficulty": difficulty.value,
                "index": i,
                "puzzle": puzzle.to_string(),
                "solution": solution.to_string(),
                "clues": puzzle.count_filled(),
            })

            tqdm.write(f"\n--- {difficulty.label} Puzzle {i} ({puzzle.count_filled()} clues) ---")
            tqdm.write(str(puzzle))

    if args.output:
        with open(args.output, "w") as f:
            json.dump(all_puzzles, f, indent=2)
        print(f"\nAll puzzles saved to {args.output}")

    print(f"\nTotal puzzles generated: {len(all_puzzles)}")


def cmd_play(args):
    """Handle the play command."""
    session = GameSession(Difficulty(args.difficulty), SudokuGenerator(seed=args.seed))
    print(PLAY_HELP)
    play(session, _read_lines())


def _read_lines() -> Iterable[str]:
    while True:
        try:
            yield input("> ")
        except EOFError:
            return


def play(session: GameSession, lines: Iterable[str],
         out: Callable[[str], None] = print) -> GameSession:
    """
    Drive a session from text commands until the input runs out or `quit`.

    Args:
        session: The game to play.
        lines: Command lines, one per move.
        out: Where rendered output goes.

    Returns:
        The session, in whatever state the commands left it.
    """
    out(render(session))
    for line in lines:
        words = line.strip().lower().split()
        if not words:
            continue
        command = words[0]

        if command in ("quit", "q", "exit"):
            break
        elif command == "help":
            out(PLAY_HELP)
            continue
        elif command == "new":
            try:
                difficulty = Difficulty.from_name(words[1]) if len(words) > 1 else None
            except ValueError as e:
                out(str(e))
                continue
            session.new_game(difficulty)
        elif command in ("x", "del", "delete"):
            session.clear_cell()
        elif command in MOVES and len(words) == 1:
            move_selection(session, *MOVES[command])
        elif len(words) == 2 and all(w.isdigit() for w in words):
            row, col = int(words[0]) - 1, int(words[1]) - 1
            if 0 <= row < SIZE and 0 <= col < SIZE:
                session.select_cell(row, col)
            else:
                out(f"Rows and columns run from 1 to {SIZE}")
                continue
        elif len(words) == 1 and command.isdigit() and 1 <= int(command) <= SIZE:
            session.place_digit(int(command))
        else:
            out(f"Unknown command: {line.strip()!r} (type 'help')")
            continue

        out(render(session))
    return session


def move_selection(session: GameSession, d_row: int, d_col: int) -> None:
    """Step the selection, stopping at the board edge. Needs a selection."""
    if session.selected is None:
        return
    row, col = session.selected
    row = min(SIZE - 1, max(0, row + d_row))
    col = min(SIZE - 1, max(0, col + d_col))
    session.select_cell(row, col)


def render(session: GameSession) -> str:
    """
    Draw the board with selection markers and the status lines.

    [5] selected, *5* same digit as the selection, 5! wrong digit,
    ':' an empty cell in the selection's row, column or box.
    """
    snapshot = session.snapshot()
    highlights = highlight_grid(snapshot)

    lines = []
    horizontal_sep = '+' + ('-' * (BOX_SIZE * 3) + '+') * BOX_SIZE
    lines.append("    " + "".join(
        f" {c + 1} " + ("|" if (c + 1) % BOX_SIZE == 0 and c + 1 < SIZE else "")
        for c in range(SIZE)))
    for r in range(SIZE):
        if r % BOX_SIZE == 0:
            lines.append("   " + horizontal_sep)
        row_str = f" {r + 1} |"
        for c in range(SIZE):
            row_str += _render_cell(snapshot.cell(r, c), highlights[r][c])
            if (c + 1) % BOX_SIZE == 0:
                row_str += '|'
        lines.append(row_str)
    lines.append("   " + horizontal_sep)

    remaining = remaining_digits(snapshot)
    lines.append("Left: " + " ".join(
        f"{d}:{n}" if n else f"{d}:-" for d, n in remaining.items()))
    lines.append(f"{session.difficulty.label} | Mistakes: {session.mistakes}/{MAX_MISTAKES}")
    if session.is_won:
        lines.append("Puzzle solved! Type 'new' to play again.")
    elif session.is_game_over:
        lines.append("Game over: too many mistakes. Type 'new' to play again.")
    return "\n".join(lines)


def _render_cell(cell, highlight) -> str:
    if cell.value == BLANK:
        text = ":" if highlight.related else "."
    else:
        text = str(cell.value)

    if highlight.selected:
        return f"[{text}]"
    if cell.is_error:
        return f" {text}!"
    if highlight.same_value:
        return f"*{text}*"
    return f" {text} "


if __name__ == "__main__":
    main()
