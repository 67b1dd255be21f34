"""
Geometry / movement rules of the pieces

Key idea: Use strategy pattern to define, per piece type, a predicate "can this piece go from A to B on this board?".

These rules are pseudo-legal: whether the move leaves your own king in check is decided later by the engine.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from src.games.chess.board import Board
from src.games.chess.pieces import Color, Piece, PieceType
from src.games.chess.square import BOARD_DIMENSIONS, Square


@dataclass(frozen=True)
class Move:
    """A move as it was played. Appended to the history and never changed afterwards."""

    from_square: Square
    to_square: Square
    piece: Piece
    captured: Optional[Piece] = None
    promotion: Optional[PieceType] = None
    is_en_passant: bool = False

    def to_uci(self) -> str:
        """ex. 'e2e4', or 'e7e8q' for a pawn promoting to a queen"""
        promotion = "q" if self.promotion == PieceType.QUEEN else ""
        return f"{self.from_square.to_algebraic()}{self.to_square.to_algebraic()}{promotion}"


# --- HELPERS ---
def pawn_direction(color: Color) -> int:
    """White moves UP the board, black moves DOWN"""
    return 1 if color == Color.WHITE else -1


def pawn_start_rank(color: Color) -> int:
    return 2 if color == Color.WHITE else BOARD_DIMENSIONS[1] - 1


def promotion_rank(color: Color) -> int:
    return BOARD_DIMENSIONS[1] if color == Color.WHITE else 1


def is_en_passant(
    board: Board, from_square: Square, to_square: Square, last_move: Optional[Move]
) -> bool:
    """
    Simplified en passant
    ----

    Only looks at the previous move: it must have been an opponent pawn jumping two squares and landing right next to
    our pawn, on the file we are moving to. No en passant target square is tracked.
    """
    piece = board.piece(from_square)
    if piece is None or piece.type != PieceType.PAWN or last_move is None:
        return False
    if last_move.piece.type != PieceType.PAWN or last_move.piece.color == piece.color:
        return False
    if abs(last_move.from_square.rank - last_move.to_square.rank) != 2:
        return False
    return (
        last_move.to_square.rank == from_square.rank
        and last_move.to_square.file == to_square.file
        and last_move.from_square.file == to_square.file
        and board.piece(to_square) is None
    )


# --- MOVEMENT RULES ---
def pawn_can_move(
    board: Board, from_square: Square, to_square: Square, last_move: Optional[Move]
) -> bool:
    """
    A pawn:
    - moves a single square forward onto an empty square.
    - can move by two in its first move (so when on its starting rank), both squares must be empty
    - takes diagonally (one square forward), including the simplified en passant
    """
    piece = board.piece(from_square)
    assert piece is not None
    direction = pawn_direction(piece.color)
    rank_diff = to_square.rank - from_square.rank
    file_diff = abs(to_square.file - from_square.file)

    if file_diff == 0:
        if rank_diff == direction:
            return board.piece(to_square) is None
        if from_square.rank == pawn_start_rank(piece.color) and rank_diff == 2 * direction:
            return (
                board.piece(from_square.offset(0, direction)) is None
                and board.piece(to_square) is None
            )
        return False

    if file_diff == 1 and rank_diff == direction:
        return board.piece(to_square) is not None or is_en_passant(
            board, from_square, to_square, last_move
        )
    return False


def rook_can_move(
    board: Board, from_square: Square, to_square: Square, last_move: Optional[Move]
) -> bool:
    """Rooks move either horizontally or vertically"""
    on_line = from_square.file == to_square.file or from_square.rank == to_square.rank
    return on_line and board.is_path_clear(from_square, to_square)


def bishop_can_move(
    board: Board, from_square: Square, to_square: Square, last_move: Optional[Move]
) -> bool:
    """Bishops move diagonally: |delta_rank| = |delta_file|"""
    on_diagonal = abs(to_square.file - from_square.file) == abs(
        to_square.rank - from_square.rank
    )
    return on_diagonal and board.is_path_clear(from_square, to_square)


def queen_can_move(
    board: Board, from_square: Square, to_square: Square, last_move: Optional[Move]
) -> bool:
    """The Queen combines the rook moves and the bishop moves"""
    return rook_can_move(board, from_square, to_square, last_move) or bishop_can_move(
        board, from_square, to_square, last_move
    )


def knight_can_move(
    board: Board, from_square: Square, to_square: Square, last_move: Optional[Move]
) -> bool:
    """Knights always move such that one delta is 2 and the other is 1"""
    deltas = {abs(to_square.file - from_square.file), abs(to_square.rank - from_square.rank)}
    return deltas == {1, 2}


def king_can_move(
    board: Board, from_square: Square, to_square: Square, last_move: Optional[Move]
) -> bool:
    """The king can move by a single square at the time. No castling."""
    return (
        abs(to_square.file - from_square.file) <= 1
        and abs(to_square.rank - from_square.rank) <= 1
    )


# -- STRATEGY PATTERN: MOVEMENT RULES ---
MovementRuleFn = Callable[[Board, Square, Square, Optional[Move]], bool]
MOVEMENT_RULES: dict[PieceType, MovementRuleFn] = {
    PieceType.PAWN: pawn_can_move,
    PieceType.KNIGHT: knight_can_move,
    PieceType.BISHOP: bishop_can_move,
    PieceType.ROOK: rook_can_move,
    PieceType.QUEEN: queen_can_move,
    PieceType.KING: king_can_move,
}


def is_pseudo_legal(
    board: Board,
    from_square: Square,
    to_square: Square,
    color: Color,
    last_move: Optional[Move] = None,
) -> bool:
    """
    Pseudo-legal move for the player with the `color` pieces
    ----

    * there must be a piece of your own on the starting square
    * you cannot capture your own piece (or stay on the same square)
    * the piece-specific movement rule must allow it
    """
    if not (from_square.is_within_bounds() and to_square.is_within_bounds()):
        return False
    if from_square == to_square:
        return False

    piece = board.piece(from_square)
    if piece is None or piece.color != color:
        return False
    target = board.piece(to_square)
    if target is not None and target.color == color:
        return False

    movement_rule = MOVEMENT_RULES[piece.type]
    return movement_rule(board, from_square, to_square, last_move)


# --- ATTACKS ---
def attacks_square(board: Board, from_square: Square, target: Square) -> bool:
    """
    Could the piece on `from_square` capture on `target`?
    ----

    NOTE: Pawn moves are not symmetric: a pawn only attacks diagonally forward, never straight ahead.
    """
    piece = board.piece(from_square)
    if piece is None or from_square == target:
        return False
    if piece.type == PieceType.PAWN:
        return (
            abs(target.file - from_square.file) == 1
            and target.rank - from_square.rank == pawn_direction(piece.color)
        )
    return MOVEMENT_RULES[piece.type](board, from_square, target, None)


def is_square_attacked(board: Board, square: Square, by_color: Color) -> bool:
    return any(
        attacks_square(board, attacker, square) for attacker in board.locate_color(by_color)
    )


# --- EXECUTING MOVES ---
def build_move(
    board: Board, from_square: Square, to_square: Square, last_move: Optional[Move]
) -> Move:
    """Record everything about the move before it changes the board (captured piece, en passant, promotion)"""
    piece = board.piece(from_square)
    assert piece is not None
    en_passant = is_en_passant(board, from_square, to_square, last_move)
    captured = (
        board.piece(Square(to_square.file, from_square.rank))
        if en_passant
        else board.piece(to_square)
    )
    promotion = (
        PieceType.QUEEN
        if piece.type == PieceType.PAWN and to_square.rank == promotion_rank(piece.color)
        else None
    )
    return Move(from_square, to_square, piece, captured, promotion, en_passant)


def apply_move(board: Board, move: Move) -> None:
    """Update the position on the board (in place). Promotion is always to a queen."""
    board.place(move.from_square, None)
    if move.is_en_passant:
        # the captured pawn stands beside the starting square, not on the target square
        board.place(Square(move.to_square.file, move.from_square.rank), None)
    landing_piece = move.piece.promoted(move.promotion) if move.promotion else move.piece
    board.place(move.to_square, landing_piece)


def simulate_move(board: Board, move: Move) -> Board:
    """Play the move on a copy of the board, leaving `board` as it was."""
    new_board = board.copy()
    apply_move(new_board, move)
    return new_board
