"""RulesEngine backed by python-chess."""

from __future__ import annotations

import logging

import chess

from schack.core.coords import GRID_SIZE, SquareLabel
from schack.core.enums import GameStatus, PieceKind, Side
from schack.core.piece import Piece
from schack.engine.interfaces import BoardSnapshot, RulesEngine

_LOGGER = logging.getLogger(__name__)

_KINDS: dict[chess.PieceType, PieceKind] = {
    chess.PAWN: PieceKind.PAWN,
    chess.KNIGHT: PieceKind.KNIGHT,
    chess.BISHOP: PieceKind.BISHOP,
    chess.ROOK: PieceKind.ROOK,
    chess.QUEEN: PieceKind.QUEEN,
    chess.KING: PieceKind.KING,
}


def _side(color: chess.Color) -> Side:
    return Side.WHITE if color == chess.WHITE else Side.BLACK


def _to_chess_square(label: SquareLabel) -> chess.Square:
    return chess.parse_square(label.lower())


def _to_label(square: chess.Square) -> SquareLabel:
    return chess.square_name(square).upper()


class PythonChessEngine(RulesEngine):
    """Adapter exposing a :class:`chess.Board` through :class:`RulesEngine`.

    Promotions are always to a queen: the click interaction has no piece
    picker, so a pawn reaching the last rank becomes a queen.
    """

    def __init__(self, fen: str | None = None) -> None:
        self._board = chess.Board() if fen is None else chess.Board(fen)

    # ── RulesEngine ──────────────────────────────────────────────────────

    def current_side_to_move(self) -> Side:
        return _side(self._board.turn)

    def legal_destinations(self, from_label: SquareLabel) -> frozenset[SquareLabel]:
        origin = _to_chess_square(from_label)
        return frozenset(
            _to_label(move.to_square)
            for move in self._board.legal_moves
            if move.from_square == origin
        )

    def submit_move(
        self, from_label: SquareLabel, to_label: SquareLabel
    ) -> GameStatus | None:
        move = self._find_legal_move(
            _to_chess_square(from_label), _to_chess_square(to_label)
        )
        if move is None:
            return None
        self._board.push(move)
        _LOGGER.debug("Played %s, position %s", move.uci(), self._board.fen())
        return self.game_status()

    def board_snapshot(self) -> BoardSnapshot:
        rows: BoardSnapshot = []
        for row in range(GRID_SIZE):
            rank = GRID_SIZE - 1 - row
            cells: list[Piece | None] = []
            for file in range(GRID_SIZE):
                piece = self._board.piece_at(chess.square(file, rank))
                cells.append(
                    None
                    if piece is None
                    else Piece(_side(piece.color), _KINDS[piece.piece_type])
                )
            rows.append(cells)
        return rows

    def game_status(self) -> GameStatus:
        board = self._board
        if board.is_checkmate():
            return GameStatus.CHECKMATE
        if board.is_stalemate():
            return GameStatus.STALEMATE
        if board.outcome() is not None:
            return GameStatus.DRAW
        if board.is_check():
            return GameStatus.CHECK
        return GameStatus.IN_PROGRESS

    def reset(self, fen: str | None = None) -> None:
        self._board = chess.Board() if fen is None else chess.Board(fen)

    # ── Extras ───────────────────────────────────────────────────────────

    def fen(self) -> str:
        """FEN of the current position."""
        return self._board.fen()

    def _find_legal_move(
        self, from_sq: chess.Square, to_sq: chess.Square
    ) -> chess.Move | None:
        candidates = [
            m
            for m in self._board.legal_moves
            if m.from_square == from_sq and m.to_square == to_sq
        ]
        if not candidates:
            return None
        for move in candidates:
            if move.promotion in (None, chess.QUEEN):
                return move
        return candidates[0]
