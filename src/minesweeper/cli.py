"""
Minesweeper - interactive text game.

Usage:
    python main.py [--width W] [--height H] [--bombs B] [--seed S]
                   [--show-solution] [--verbose]

Actions at the prompt (coordinates are 1-based, x is the column):
    open X Y
    flag X Y
    finish
    quit
"""
import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Callable, List, Optional

from .engine import FlagOutcome, GameEngine, GameState, RevealOutcome
from .errors import ActionError, ConfigError
from .generator import BoardConfig
from .render import render_board, render_solution

logger = logging.getLogger(__name__)

VALID_ACTIONS = ("open", "flag", "finish")
QUIT_WORDS = ("quit", "QUIT")
START_WORDS = ("START", "start")

START_PROMPT = "To start a game, type 'START' "
ACTION_PROMPT = "Next action (action x-axis y-axis): "

MSG_ALREADY_PLAYED = "This tile has already been played"
MSG_LOST = "You have hit a bomb! The game will now end."
MSG_WON = "All bombs were identified. You win!"
MSG_NOT_DONE = "Not done yet! Keep trying."
MSG_BYE = "\nBYE BYE !!!"


# ============================================================================
# Input Parsing
# ============================================================================

@dataclass(frozen=True)
class Action:
    """
    A parsed player action.

    Attributes:
        kind: One of "open", "flag" or "finish".
        x: 0-based column (0 for finish).
        y: 0-based row (0 for finish).
    """

    kind: str
    x: int = 0
    y: int = 0


def _parse_coordinate(token: str) -> int:
    try:
        return int(token) - 1
    except ValueError:
        raise ActionError(f"Coordinate {token!r} is not a number") from None


def parse_action(line: str, width: int, height: int) -> Action:
    """
    Parse one line of player input.

    Args:
        line: Raw input such as "open 3 4".
        width: Board width used for the bounds check.
        height: Board height used for the bounds check.

    Returns:
        Action with coordinates translated to 0-based indices.

    Raises:
        ActionError: Missing tokens, coordinates out of range or an
            unknown action keyword.
    """
    tokens = line.split()
    if tokens and tokens[0] == "finish":
        return Action("finish")

    if len(tokens) < 3:
        raise ActionError("3 input values are expected")

    action, x_token, y_token = tokens[:3]
    x = _parse_coordinate(x_token)
    y = _parse_coordinate(y_token)

    if not 0 <= x < width:
        raise ActionError("X input is out of bounds")
    if not 0 <= y < height:
        raise ActionError("Y input is out of bounds")
    if action not in VALID_ACTIONS:
        raise ActionError(
            'Invalid action provided. Only "open" and "flag" are allowed.'
        )

    return Action(action, x, y)


# ============================================================================
# Prompt Loop
# ============================================================================

def handle_action(
    engine: GameEngine, action: Action, output: Callable[[str], None] = print
) -> None:
    """
    Apply an action to the engine and report the outcome.

    Raises:
        ActionError: The action kind is not open, flag or finish.
    """
    if action.kind == "open":
        outcome = engine.reveal(action.x, action.y)
        if outcome == RevealOutcome.ALREADY_PLAYED:
            output(MSG_ALREADY_PLAYED)
        elif outcome == RevealOutcome.LOST:
            output(render_board(engine))
            output(MSG_LOST)
    elif action.kind == "flag":
        if engine.flag(action.x, action.y) == FlagOutcome.ALREADY_PLAYED:
            output(MSG_ALREADY_PLAYED)
    elif action.kind == "finish":
        output(MSG_WON if engine.finish() else MSG_NOT_DONE)
    else:
        raise ActionError(f"Unknown action {action.kind!r}")


def _read(prompt: str, read: Callable[[str], str]) -> Optional[str]:
    try:
        return read(prompt)
    except EOFError:
        return None


def play(
    engine: GameEngine,
    read: Optional[Callable[[str], str]] = None,
    output: Callable[[str], None] = print,
    show_solution: bool = False,
) -> GameState:
    """
    Run the interactive loop until the game ends.

    Args:
        engine: Game to play.
        read: Prompt function returning one line of input (default: input).
        output: Function receiving each block of text to display.
        show_solution: Print the uncovered minefield before the first move.

    Returns:
        The engine's final state.
    """
    read = read or input
    answer = _read(START_PROMPT, read)
    if answer is None or answer.strip() not in START_WORDS:
        engine.quit()
        output(MSG_BYE)
        return engine.game_state

    if show_solution:
        output(render_solution(engine))

    while engine.is_playing:
        output(render_board(engine))
        line = _read(ACTION_PROMPT, read)
        if line is None or line.strip() in QUIT_WORDS:
            engine.quit()
            break

        try:
            action = parse_action(line, engine.width, engine.height)
        except ActionError as exc:
            logger.debug("Rejected input %r: %s", line, exc)
            output(str(exc))
            continue

        handle_action(engine, action, output)

    output(MSG_BYE)
    return engine.game_state


# ============================================================================
# Entry Point
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser."""
    defaults = BoardConfig()
    parser = argparse.ArgumentParser(description="Minesweeper - text game")
    parser.add_argument(
        "--width", type=int, default=defaults.width, help="Number of columns"
    )
    parser.add_argument(
        "--height", type=int, default=defaults.height, help="Number of rows"
    )
    parser.add_argument(
        "--bombs", type=int, default=defaults.num_mines,
        help="Number of bombs (at most half the cells)",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for bomb placement"
    )
    parser.add_argument(
        "--show-solution", action="store_true",
        help="Print the minefield before the first move",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and play one game."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        engine = GameEngine.create(args.width, args.height, args.bombs, args.seed)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    play(engine, show_solution=args.show_solution)
    return 0

