"""tttmatch package.

Tic-tac-toe against a heuristic computer player: board and win detection,
the move heuristic, and the first-to-five match loop, plus a terminal CLI.

Convenience imports are exposed for common workflows.
"""

from .errors import InvalidBoard, InvalidMove, TicTacToeError
from .game_basics import WINNING_LINES, Board, is_draw, parse_board, serialize_board, winning_marker
from .match import TARGET_SCORE, MatchState, ScoreTracker, play_match, play_round
from .players import HeuristicStrategy, InteractiveStrategy, Player, Side
from .tactics import choose_move, select_move

__all__ = [
    "Board",
    "WINNING_LINES",
    "winning_marker",
    "is_draw",
    "parse_board",
    "serialize_board",
    "select_move",
    "choose_move",
    "Player",
    "Side",
    "InteractiveStrategy",
    "HeuristicStrategy",
    "MatchState",
    "ScoreTracker",
    "play_round",
    "play_match",
    "TARGET_SCORE",
    "InvalidMove",
    "InvalidBoard",
    "TicTacToeError",
]
