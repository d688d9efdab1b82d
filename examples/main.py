"""
main.py — Play a game with the rules engine
============================================

Sets up logging, builds two players and plays a game to the end.

    python main.py

Environment (or .env):
    TTT_LOG_LEVEL=DEBUG      # show every placement and the board
    TTT_FIRST_PLAYER=X       # force who starts
"""

from ttt_engine import Game, LoggingOutput, ManualPlayer, Move, Player, setup_logging
from ttt_engine.board import WINNING_LINES


class BlockingPlayer(Player):
    """Fills the gap in any line two-thirds held by one symbol, else takes the centre."""

    def __init__(self, name, fallback):
        super().__init__(name)
        self.fallback = fallback

    def make_move(self, board):
        empty = set(board.get_empty_cells())
        for line in WINNING_LINES:
            cells = [board.get_cell(r, c) for r, c in line]
            taken = [cell for cell in cells if cell is not None]
            if len(taken) == 2 and taken[0].symbol == taken[1].symbol:
                for pos in line:
                    if pos in empty:
                        return Move(pos[0], pos[1], self)
        if (1, 1) in empty:
            return Move(1, 1, self)
        return self.fallback.make_move(board)


setup_logging()

random_player = ManualPlayer("Randy")
blocker = BlockingPlayer("Blocky", fallback=ManualPlayer("Blocky-fallback"))

game = Game.from_settings(random_player, blocker, LoggingOutput())
final_state = game.play()
print(game.board)
print(f"Result: {final_state.value}")
