import logging
from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple

logger = logging.getLogger(__name__)

BOARD_SIZE = 3                         # fixed 3x3 grid
CELL_COUNT = BOARD_SIZE * BOARD_SIZE
PLAYER_X = 'X'                         # always moves first
PLAYER_O = 'O'

# rows, cols, diags; order matters, first match wins
WINNING_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)

EMPTY_BOARD = (None,) * CELL_COUNT


class WinResult(NamedTuple):
    player: str
    line: Tuple[int, int, int]


class GameStatus(NamedTuple):
    """
    derived status: kind is 'winner', 'draw' or 'next'
    """
    kind: str
    player: Optional[str] = None


@dataclass(frozen=True)
class Move:
    """
    one history entry: board snapshot + where the mark went
    """
    squares: Tuple[Optional[str], ...]
    location: str = ''                 # '(col, row)', empty for game start


@dataclass(frozen=True)
class MoveEntry:
    move: int
    description: str
    is_current: bool


def calculate_winner(squares):
    """
    scan the 8 fixed lines for 3 in a row
    returns WinResult or None
    """
    for a, b, c in WINNING_LINES:
        if squares[a] and squares[a] == squares[b] == squares[c]:
            return WinResult(squares[a], (a, b, c))
    return None


def is_board_full(squares):
    return all(squares)


def format_location(index):
    # 1-based (col, row)
    row, col = divmod(index, BOARD_SIZE)
    return f"({col + 1}, {row + 1})"


def describe_move(move, location):
    if move == 0:
        return "Go to game start"
    return f"Go to move #{move} {location}"


class GameLogic:
    """
    tic-tac-toe rules, move history and time travel
    """
    def __init__(self):
        """
        init history with the empty board
        """
        self._history = [Move(EMPTY_BOARD)]  # never empty
        self._current_move = 0                # index into history
        self.is_ascending = True              # move list order, display only

    @property
    def history(self):
        return tuple(self._history)

    @property
    def current_move(self):
        return self._current_move

    @property
    def current_squares(self):
        return self._history[self._current_move].squares

    @property
    def x_is_next(self):
        return self._current_move % 2 == 0

    @property
    def next_player(self):
        return PLAYER_X if self.x_is_next else PLAYER_O

    @property
    def game_over(self):
        squares = self.current_squares
        return calculate_winner(squares) is not None or is_board_full(squares)

    def is_cell_empty(self, row, col):
        """
        true if coords valid and cell blank
        """
        if 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE:
            return self.current_squares[row * BOARD_SIZE + col] is None
        return False

    def play(self, index):
        """
        place next player's mark at index (0-8)
        returns: 'win', 'draw', 'continue', or 'invalid'
        """
        if not isinstance(index, int) or not 0 <= index < CELL_COUNT:
            logger.debug("ignored play at %r: out of range", index)
            return "invalid"
        squares = self.current_squares
        if self.game_over:
            logger.debug("ignored play at %d: game is over", index)
            return "invalid"
        if squares[index] is not None:
            logger.debug("ignored play at %d: cell taken", index)
            return "invalid"

        player = self.next_player
        next_squares = squares[:index] + (player,) + squares[index + 1:]
        location = format_location(index)
        # drop the future we jumped away from
        del self._history[self._current_move + 1:]
        self._history.append(Move(next_squares, location))
        self._current_move = len(self._history) - 1
        logger.info("move #%d: %s at %s", self._current_move, player, location)

        if calculate_winner(next_squares):
            return "win"
        if is_board_full(next_squares):
            return "draw"
        return "continue"

    def make_move(self, row, col):
        """
        grid coords version of play()
        """
        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            logger.debug("ignored move at (%r, %r): out of range", row, col)
            return "invalid"
        return self.play(row * BOARD_SIZE + col)

    def jump_to(self, move):
        """
        show an earlier (or later) snapshot; history is kept
        """
        if not isinstance(move, int) or not 0 <= move < len(self._history):
            logger.debug("ignored jump to %r: no such move", move)
            return False
        self._current_move = move
        logger.debug("jumped to move #%d", move)
        return True

    def toggle_sort(self):
        self.is_ascending = not self.is_ascending

    def status(self):
        squares = self.current_squares
        win = calculate_winner(squares)
        if win:
            return GameStatus("winner", win.player)
        if is_board_full(squares):
            return GameStatus("draw")
        return GameStatus("next", self.next_player)

    def status_text(self):
        status = self.status()
        if status.kind == "winner":
            return f"Winner: {status.player}"
        if status.kind == "draw":
            return "Draw"
        return f"Next player: {status.player}"

    def winning_line(self):
        win = calculate_winner(self.current_squares)
        return win.line if win else ()

    def move_list(self):
        """
        history as display entries, in sort order
        builds a new list every call, history itself is never reordered
        """
        entries = [
            MoveEntry(i, describe_move(i, step.location), i == self._current_move)
            for i, step in enumerate(self._history)
        ]
        return entries if self.is_ascending else entries[::-1]

    def reset_game(self):
        """
        back to a fresh board; sort order is a view setting and stays
        """
        self._history = [Move(EMPTY_BOARD)]
        self._current_move = 0
        logger.info("new game")
