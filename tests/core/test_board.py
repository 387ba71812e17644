"""Tests for Board."""

import pytest

from chessrules.core.board import Board, PlacedPiece
from chessrules.core.enums import Color, PieceKind
from chessrules.core.exceptions import InvariantViolation
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.types import Location, parse_location

E1 = parse_location("e1")
E8 = parse_location("e8")
E2 = parse_location("e2")
E4 = parse_location("e4")


class TestBoardInitial:
    def test_piece_count(self) -> None:
        board = Board.initial()
        assert len(board) == 32
        assert len(board.all_pieces(Color.WHITE)) == 16
        assert len(board.all_pieces(Color.BLACK)) == 16

    def test_king_positions(self) -> None:
        board = Board.initial()
        assert board.king_of(Color.WHITE).location == E1
        assert board.king_of(Color.BLACK).location == E8

    def test_exactly_one_king_per_color(self) -> None:
        board = Board.initial()
        for color in Color:
            kings = [p for p in board.all_pieces(color) if p.kind == PieceKind.KING]
            assert len(kings) == 1

    def test_back_ranks(self) -> None:
        board = Board.initial()
        expected = [
            PieceKind.ROOK, PieceKind.KNIGHT, PieceKind.BISHOP, PieceKind.QUEEN,
            PieceKind.KING, PieceKind.BISHOP, PieceKind.KNIGHT, PieceKind.ROOK,
        ]
        for x, kind in enumerate(expected):
            black = board.piece_at(Location(x, 0))
            white = board.piece_at(Location(x, 7))
            assert black is not None and (black.kind, black.color) == (kind, Color.BLACK)
            assert white is not None and (white.kind, white.color) == (kind, Color.WHITE)

    def test_pawn_rows(self) -> None:
        board = Board.initial()
        for x in range(8):
            black = board.piece_at(Location(x, 1))
            white = board.piece_at(Location(x, 6))
            assert black is not None and black.kind == PieceKind.PAWN
            assert black.color == Color.BLACK
            assert white is not None and white.kind == PieceKind.PAWN
            assert white.color == Color.WHITE

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for y in range(2, 6):
            for x in range(8):
                assert board.piece_at(Location(x, y)) is None


class TestBoardInvariants:
    def test_add_duplicate_location_raises(self) -> None:
        board = Board.initial()
        with pytest.raises(InvariantViolation, match="already occupied"):
            board.add(Piece(PieceKind.QUEEN, Color.WHITE, E1))

    def test_add_off_board_raises(self) -> None:
        board = Board()
        with pytest.raises(InvariantViolation, match="off the board"):
            board.add(Piece(PieceKind.ROOK, Color.WHITE, Location(8, 0)))

    def test_king_missing_raises(self) -> None:
        board = Board()
        with pytest.raises(InvariantViolation, match="No WHITE king"):
            board.king_of(Color.WHITE)

    def test_invariant_violation_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Board().king_of(Color.BLACK)


class TestBoardOperations:
    def test_add_and_lookup(self) -> None:
        board = Board()
        piece = Piece(PieceKind.PAWN, Color.WHITE, E4)
        board.add(piece)
        assert board.piece_at(E4) is piece
        assert board.is_empty(E2)

    def test_remove_by_location(self) -> None:
        board = Board.initial()
        assert board.remove(E2)
        assert board.piece_at(E2) is None
        assert len(board) == 31
        assert not board.remove(E4)

    def test_remove_by_piece(self) -> None:
        board = Board.initial()
        king = board.king_of(Color.BLACK)
        assert board.remove(king)
        assert not board.remove(king)
        assert board.piece_at(E8) is None

    def test_all_pieces_insertion_order(self) -> None:
        board = Board()
        first = Piece(PieceKind.ROOK, Color.WHITE, Location(7, 7))
        second = Piece(PieceKind.KING, Color.WHITE, Location(0, 0))
        board.add(first)
        board.add(second)
        assert board.all_pieces(Color.WHITE) == [first, second]

    def test_apply_moves_piece(self) -> None:
        board = Board.initial()
        pawn = board.piece_at(E2)
        assert pawn is not None
        captured = board.apply(Move(pawn, E2, E4))
        assert captured is None
        assert board.piece_at(E4) is pawn
        assert pawn.location == E4
        assert board.piece_at(E2) is None
        assert len(board) == 32

    def test_apply_captures_occupant(self) -> None:
        board = Board()
        rook = Piece(PieceKind.ROOK, Color.WHITE, Location(0, 7))
        victim = Piece(PieceKind.KNIGHT, Color.BLACK, Location(0, 2))
        board.add(rook)
        board.add(victim)
        captured = board.apply(Move(rook, rook.location, victim.location))
        assert captured is victim
        assert len(board) == 1
        assert board.piece_at(Location(0, 2)) is rook

    def test_copy_independence(self) -> None:
        board = Board.initial()
        clone = board.copy()
        assert clone == board
        pawn = clone.piece_at(E2)
        assert pawn is not None and pawn is not board.piece_at(E2)
        clone.apply(Move(pawn, E2, E4))
        assert clone != board
        assert board.piece_at(E2) is not None
        assert board.piece_at(E4) is None

    def test_clear(self) -> None:
        board = Board.initial()
        board.clear()
        assert len(board) == 0


class TestBoardSnapshots:
    def test_snapshot_sorted_row_by_row(self) -> None:
        snap = Board.initial().snapshot()
        assert len(snap) == 32
        assert snap[0] == PlacedPiece(Location(0, 0), PieceKind.ROOK, Color.BLACK)
        assert snap[-1] == PlacedPiece(Location(7, 7), PieceKind.ROOK, Color.WHITE)
        keys = [(pp.location.y, pp.location.x) for pp in snap]
        assert keys == sorted(keys)

    def test_rows(self) -> None:
        rows = Board.initial().rows()
        assert rows[0] == "RNBQKBNR"
        assert rows[1] == "PPPPPPPP"
        assert rows[4] == "........"
        assert rows[7] == "rnbqkbnr"

    def test_repr_not_empty(self) -> None:
        text = repr(Board.initial())
        assert "K" in text
        assert "a b c d e f g h" in text
        assert text.splitlines()[0].startswith("8 ")
