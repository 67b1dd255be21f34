"""
The ChessEngine is the entrypoint into the chess rules for the game session.
It is responsible for orchestrating everything required to play a turn: validating, executing and recording the move,
and evaluating the end of the game for the opponent.

Simplifications: no castling, en passant only from the last move, promotion always to a queen.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional

from src.core.shared_types import Status
from src.games.chess.board import Board
from src.games.chess.moves import (
    Move,
    apply_move,
    build_move,
    is_pseudo_legal,
    is_square_attacked,
    simulate_move,
)
from src.games.chess.pieces import Color
from src.games.chess.square import Square

logger = logging.getLogger("arcade.chess")


@dataclass
class ChessEngine:
    board: Board = field(default_factory=Board.standard)
    current_player: Color = Color.WHITE
    move_history: list[Move] = field(default_factory=list)
    status: Status = Status.IN_PROGRESS
    winner: Optional[Color] = None

    @property
    def last_move(self) -> Optional[Move]:
        return self.move_history[-1] if self.move_history else None

    @property
    def is_over(self) -> bool:
        return self.status != Status.IN_PROGRESS

    # --- RULES ---
    def is_valid_move(self, from_square: Square, to_square: Square) -> bool:
        """Pseudo-legal move of the side to move (own piece, movement rule). Does not look at checks."""
        return is_pseudo_legal(
            self.board, from_square, to_square, self.current_player, self.last_move
        )

    def is_legal_move(self, from_square: Square, to_square: Square) -> bool:
        if not self.is_valid_move(from_square, to_square):
            return False
        move = build_move(self.board, from_square, to_square, self.last_move)
        return not self._leaves_king_in_check(move)

    def is_in_check(self, color: Color) -> bool:
        return self._king_attacked(self.board, color)

    def legal_moves(self, color: Optional[Color] = None) -> list[Move]:
        return list(self._iter_legal_moves(color or self.current_player))

    def is_checkmate(self, color: Optional[Color] = None) -> bool:
        """In check, and every move still leaves the king in check"""
        color = color or self.current_player
        return self.is_in_check(color) and not self._has_legal_move(color)

    def is_stalemate(self, color: Optional[Color] = None) -> bool:
        """Not in check, but no legal move either"""
        color = color or self.current_player
        return not self.is_in_check(color) and not self._has_legal_move(color)

    # --- PLAYING ---
    def make_move(self, from_square: Square, to_square: Square) -> bool:
        """
        Attempt to make a move for the side to move
        -----

        1. reject the move if the game is over, if it is not valid or if it leaves your own king in check
        2. update the board (removing the en passant pawn, promoting to a queen)
        3. update the history of moves
        4. check for checkmate / stalemate of the opponent
        5. switch turns

        Returns False (and leaves everything untouched) for a rejected move.
        """
        if self.is_over or not self.is_legal_move(from_square, to_square):
            return False

        move = build_move(self.board, from_square, to_square, self.last_move)
        apply_move(self.board, move)
        self.move_history.append(move)

        opponent = self.current_player.opponent
        if self.is_checkmate(opponent):
            self.status = Status.CHECKMATE
            self.winner = self.current_player
            logger.info(f"Checkmate after {len(self.move_history)} moves, {self.winner.name.lower()} wins")
        elif self.is_stalemate(opponent):
            self.status = Status.STALEMATE
            logger.info(f"Stalemate after {len(self.move_history)} moves")

        self.current_player = opponent
        return True

    # -- PRIVATE HELPERS ---
    def _king_attacked(self, board: Board, color: Color) -> bool:
        king_square = board.locate_king(color)
        if king_square is None:
            return False
        return is_square_attacked(board, king_square, color.opponent)

    def _leaves_king_in_check(self, move: Move) -> bool:
        """Play the move on a copy of the board and look at the mover's king there."""
        new_board = simulate_move(self.board, move)
        return self._king_attacked(new_board, move.piece.color)

    def _iter_legal_moves(self, color: Color) -> Iterator[Move]:
        last_move = self.last_move
        targets = self.board.all_squares()
        for from_square in self.board.locate_color(color):
            for to_square in targets:
                if not is_pseudo_legal(self.board, from_square, to_square, color, last_move):
                    continue
                move = build_move(self.board, from_square, to_square, last_move)
                if not self._leaves_king_in_check(move):
                    yield move

    def _has_legal_move(self, color: Color) -> bool:
        return next(self._iter_legal_moves(color), None) is not None
