"""
Unit Tests for Evaluation Module

Tests for piece-square table evaluation, focusing on:
    - Each piece kind reading its own table
    - Colour symmetry under both table layouts
    - No material term beyond the tables
    - Terminal position scoring (checkmate, stalemate)
"""

import chess
import pytest

from chess_bot.board import swap_colors
from chess_bot.evaluation import MATE_SCORE, PIECE_TABLES, Evaluator, PositionalEvaluator

POSITIONS = [
    chess.STARTING_FEN,
    "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1",
    "r1bqkbnr/pppp1ppp/2n5/4p3/4P3/5N2/PPPP1PPP/RNBQKB1R w KQkq - 2 3",
    "r3k2r/pp1n1ppp/2pbpn2/q2p4/3P1B2/2NBPN2/PPPQ1PPP/R3K2R w KQkq - 0 1",
    "8/5k2/3p4/1p1Pp2p/pP2Pp1P/P4P1K/8/8 b - - 99 50",
]


class TestPositionalEvaluator:
    """Tests for PositionalEvaluator."""

    @pytest.fixture
    def evaluator(self):
        """Create a PositionalEvaluator instance."""
        return PositionalEvaluator()

    def test_starting_position_is_zero(self, evaluator):
        """With mirrored tables the symmetric start position balances exactly."""
        assert evaluator.evaluate(chess.Board()) == 0

    def test_returns_int(self, evaluator):
        score = evaluator.evaluate(chess.Board(POSITIONS[2]))
        assert type(score) is int

    @pytest.mark.parametrize("piece_type", chess.PIECE_TYPES)
    def test_each_piece_uses_its_own_table(self, evaluator, piece_type):
        """
        A lone piece on d4 scores its own table's d4 weight.

        d4 is row 4, column 3 of a table. A black piece on d5 reads the
        mirrored square, which is the same table cell.
        """
        table = PIECE_TABLES[piece_type]

        white = chess.Board(fen=None)
        white.set_piece_at(chess.D4, chess.Piece(piece_type, chess.WHITE))
        assert evaluator.evaluate(white) == table[4, 3]

        black = chess.Board(fen=None)
        black.set_piece_at(chess.D5, chess.Piece(piece_type, chess.BLACK))
        assert evaluator.evaluate(black) == -table[4, 3]

    def test_white_knight_and_rook_not_swapped(self, evaluator):
        """A white knight scores from the knight table, a white rook from the rook table."""
        board = chess.Board(fen=None)
        board.set_piece_at(chess.B1, chess.Piece(chess.KNIGHT, chess.WHITE))
        assert evaluator.evaluate(board) == -40

        board = chess.Board(fen=None)
        board.set_piece_at(chess.D1, chess.Piece(chess.ROOK, chess.WHITE))
        assert evaluator.evaluate(board) == 5

    def test_tables_are_not_transposed(self, evaluator):
        """A white pawn on a7 scores the rank 7 bonus, not the a-file value."""
        board = chess.Board(fen=None)
        board.set_piece_at(chess.A7, chess.Piece(chess.PAWN, chess.WHITE))
        assert evaluator.evaluate(board) == 50

    @pytest.mark.parametrize("fen", POSITIONS)
    def test_matches_square_by_square_sum(self, evaluator, fen):
        """The vectorised evaluation equals a plain loop over the occupied squares."""
        board = chess.Board(fen)
        expected = 0
        for square, piece in board.piece_map().items():
            weight = evaluator.square_weight(piece, square)
            expected += weight if piece.color == chess.WHITE else -weight

        assert evaluator.evaluate(board) == expected

    @pytest.mark.parametrize("fen", POSITIONS)
    def test_mirror_symmetry(self, evaluator, fen):
        """Mirroring the board vertically and swapping colours negates the score."""
        board = chess.Board(fen)
        assert evaluator.evaluate(board) == -evaluator.evaluate(board.mirror())

    def test_in_place_colour_swap_is_not_symmetric_with_mirrored_tables(self, evaluator):
        """
        Swapping sides without moving pieces does not negate the score when
        Black reads flipped tables: a pawn on e2 is worth -20 to White but
        the e7 weight (50) to Black.
        """
        board = chess.Board(fen=None)
        board.set_piece_at(chess.E2, chess.Piece(chess.PAWN, chess.WHITE))

        assert evaluator.evaluate(board) == -20
        assert evaluator.evaluate(swap_colors(board)) == -50

    def test_knight_centre_beats_rim(self, evaluator):
        """Knights on the rim are dim."""
        board_edge = chess.Board("7k/pppppppp/8/8/8/8/PPPPPPPP/N6K w - - 0 1")
        board_center = chess.Board("7k/pppppppp/8/8/4N3/8/PPPPPPPP/7K w - - 0 1")

        score_edge = evaluator.evaluate(board_edge)
        score_center = evaluator.evaluate(board_center)

        assert score_center > score_edge, (
            f"Central knight ({score_center}) should be worth more than edge knight ({score_edge})"
        )

    def test_no_material_term(self, evaluator):
        """Removing a white pawn from a2 only removes its table weight (5)."""
        board = chess.Board()
        without_pawn = chess.Board()
        without_pawn.remove_piece_at(chess.A2)

        assert evaluator.evaluate(board) - evaluator.evaluate(without_pawn) == 5

    def test_does_not_modify_board(self, evaluator):
        board = chess.Board(POSITIONS[3])
        fen = board.fen()
        evaluator.evaluate(board)
        assert board.fen() == fen

    def test_consistency(self, evaluator):
        """Evaluator is deterministic."""
        board = chess.Board(POSITIONS[1])
        scores = [evaluator.evaluate(board) for _ in range(5)]
        assert len(set(scores)) == 1, f"Evaluator is not deterministic: {scores}"


class TestUnmirroredTables:
    """Tests for the layout where Black reads White's tables unflipped."""

    @pytest.fixture
    def evaluator(self):
        return PositionalEvaluator(mirror_black=False)

    @pytest.mark.parametrize("fen", POSITIONS)
    def test_in_place_colour_swap_symmetry(self, evaluator, fen):
        """Swapping every piece's side without moving it negates the score."""
        board = chess.Board(fen)
        assert evaluator.evaluate(board) == -evaluator.evaluate(swap_colors(board))

    def test_black_pawns_read_white_rows(self, evaluator):
        """A black pawn on e7 reads the rank 7 row of the pawn table."""
        board = chess.Board(fen=None)
        board.set_piece_at(chess.E7, chess.Piece(chess.PAWN, chess.BLACK))
        assert evaluator.evaluate(board) == -50

    def test_start_position_is_not_balanced(self, evaluator):
        assert evaluator.evaluate(chess.Board()) != 0


class TestTerminalEvaluation:
    """Tests for Evaluator.evaluate_terminal()."""

    @pytest.fixture
    def evaluator(self):
        return PositionalEvaluator()

    def test_checkmate_white_mated(self, evaluator):
        # Fool's mate
        board = chess.Board("rnbqkbnr/pppp1ppp/8/4p3/6P1/5P2/PPPPP2P/RNBQKBNR b KQkq - 0 2")
        board.push_san("Qh4#")

        assert evaluator.evaluate_terminal(board) == -MATE_SCORE
        assert evaluator.evaluate_terminal(board, ply_from_root=3) == -(MATE_SCORE - 3)

    def test_checkmate_black_mated(self, evaluator):
        board = chess.Board("R5k1/5ppp/8/8/8/8/8/7K b - - 1 1")
        assert board.is_checkmate()
        assert evaluator.evaluate_terminal(board) == MATE_SCORE

    def test_stalemate_is_zero(self, evaluator):
        board = chess.Board("k7/2Q5/1K6/8/8/8/8/8 b - - 0 1")
        assert board.is_stalemate()
        assert evaluator.evaluate_terminal(board) == 0

    def test_ongoing_game_is_not_terminal(self, evaluator):
        assert evaluator.evaluate_terminal(chess.Board()) is None


class TestEvaluatorInterface:
    """Tests for Evaluator abstract interface."""

    def test_evaluator_is_abstract(self):
        with pytest.raises(TypeError):
            Evaluator()

    def test_is_draw_helper(self):
        evaluator = PositionalEvaluator()

        assert evaluator.is_draw(chess.Board("k7/8/1K6/8/8/8/8/8 b - - 0 1"))
        assert evaluator.is_draw(chess.Board("8/8/8/8/8/7k/8/K7 w - - 0 1"))
        assert not evaluator.is_draw(chess.Board())

    def test_claimable_draw_is_not_a_draw(self):
        board = chess.Board("8/8/8/8/8/7k/8/K6R w - - 100 80")
        assert board.is_fifty_moves()
        assert not PositionalEvaluator().is_draw(board)
