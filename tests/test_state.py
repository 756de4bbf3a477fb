"""
Unit Tests for Position State and Player Input

Tests for GameState and the two-selection input boundary:
    - Applying legal moves, rejecting illegal ones without side effects
    - Render change detection and FEN round trip
    - Square validation and promotion inference
"""

import chess
import pytest

from chess_bot.board import board_to_grid, parse_placement
from chess_bot.errors import IllegalMove, MalformedSquareReference
from chess_bot.state import (
    GameState,
    InputGesture,
    PlayerInput,
    infer_promotion,
    parse_square,
    square_from_coordinates,
)

WHITE_PROMOTES = "7k/4P3/8/8/8/8/8/K7 w - - 0 1"
BLACK_PROMOTES = "k7/8/8/8/8/8/4p3/7K b - - 0 1"


class TestGameState:
    """Tests for GameState."""

    def test_starts_from_standard_position(self):
        state = GameState()
        assert state.fen() == chess.STARTING_FEN
        assert state.side_to_move() == chess.WHITE

    def test_from_fen(self):
        state = GameState.from_fen(WHITE_PROMOTES)
        assert state.fen() == WHITE_PROMOTES

    def test_from_invalid_fen(self):
        with pytest.raises(ValueError):
            GameState.from_fen("not a fen")

    def test_apply_legal_move(self):
        state = GameState()
        state.apply(chess.Move.from_uci("e2e4"))

        assert state.board.piece_at(chess.E4) == chess.Piece(chess.PAWN, chess.WHITE)
        assert state.side_to_move() == chess.BLACK

    def test_apply_illegal_move_leaves_board(self):
        state = GameState()
        fen = state.fen()

        with pytest.raises(IllegalMove) as excinfo:
            state.apply(chess.Move.from_uci("e2e5"))

        assert state.fen() == fen
        assert excinfo.value.move == chess.Move.from_uci("e2e5")

    def test_render_update_only_on_change(self):
        state = GameState()

        assert state.take_render_update() == state.placement()
        assert state.take_render_update() is None

        state.apply(chess.Move.from_uci("d2d4"))
        assert state.take_render_update() == "rnbqkbnr/pppppppp/8/8/3P4/8/PPP1PPPP/RNBQKBNR"
        assert state.take_render_update() is None

    def test_fen_round_trip_after_moves(self):
        """The placement handed to the renderer rebuilds the in-memory layout."""
        state = GameState()
        for uci in ["e2e4", "d7d5", "e4d5", "g8f6", "f1b5", "c7c6", "d5c6", "d8d2"]:
            state.apply(chess.Move.from_uci(uci))
            assert parse_placement(state.placement()) == board_to_grid(state.board)

    def test_game_over_and_result(self):
        state = GameState.from_fen("rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3")
        assert state.is_game_over()
        assert state.result() == "0-1"


class TestSquareReferences:
    """Tests for square validation."""

    def test_coordinates_to_square(self):
        assert square_from_coordinates(5, 4) == chess.E4
        assert square_from_coordinates(1, 1) == chess.A1
        assert square_from_coordinates(8, 8) == chess.H8

    @pytest.mark.parametrize("file, rank", [(0, 1), (9, 1), (1, 0), (1, 9), (-3, 4)])
    def test_coordinates_off_board(self, file, rank):
        with pytest.raises(MalformedSquareReference):
            square_from_coordinates(file, rank)

    def test_parse_square(self):
        assert parse_square("e4") == chess.E4
        assert parse_square(" H8 ") == chess.H8

    @pytest.mark.parametrize("text", ["", "z9", "e9", "e", "e44"])
    def test_parse_square_malformed(self, text):
        with pytest.raises(MalformedSquareReference):
            parse_square(text)

    def test_malformed_reference_is_value_error(self):
        with pytest.raises(ValueError):
            parse_square("i1")


class TestPromotion:
    """Tests for promotion handling."""

    def test_far_rank_without_promotion_is_illegal(self):
        board = chess.Board(WHITE_PROMOTES)
        assert not board.is_legal(chess.Move(chess.E7, chess.E8))
        assert board.is_legal(chess.Move(chess.E7, chess.E8, promotion=chess.QUEEN))

    def test_infer_white_promotion(self):
        board = chess.Board(WHITE_PROMOTES)
        assert infer_promotion(board, chess.E7, chess.E8) == chess.QUEEN

    def test_infer_black_promotion(self):
        board = chess.Board(BLACK_PROMOTES)
        assert infer_promotion(board, chess.E2, chess.E1) == chess.QUEEN

    def test_no_promotion_for_other_moves(self):
        board = chess.Board()
        assert infer_promotion(board, chess.E2, chess.E4) is None
        assert infer_promotion(board, chess.G1, chess.F3) is None
        assert infer_promotion(board, chess.E4, chess.E5) is None

    def test_no_promotion_for_side_not_to_move(self):
        board = chess.Board(WHITE_PROMOTES)
        board.turn = chess.BLACK
        assert infer_promotion(board, chess.E7, chess.E8) is None


class TestPlayerInput:
    """Tests for two-selection move entry."""

    @pytest.fixture
    def player(self):
        return PlayerInput()

    def test_first_selection_records_origin(self, player):
        state = GameState()

        assert player.select(state, chess.E2) is None
        assert player.gesture == InputGesture(pending_origin_square=chess.E2, awaiting_destination=True)
        assert state.board.move_stack == []

    def test_second_selection_applies_move(self, player):
        state = GameState()

        player.select(state, chess.E2)
        move = player.select(state, chess.E4)

        assert move == chess.Move.from_uci("e2e4")
        assert state.board.peek() == move
        assert player.gesture == InputGesture()

    def test_illegal_move_is_discarded(self, player):
        state = GameState()
        fen = state.fen()

        player.select(state, chess.E2)
        assert player.select(state, chess.E5) is None

        assert state.fen() == fen
        assert not player.gesture.awaiting_destination
        assert player.gesture.pending_origin_square is None

    def test_wrong_side_is_discarded(self, player):
        state = GameState()

        player.select_name(state, "e7")
        assert player.select_name(state, "e5") is None
        assert state.board.move_stack == []

    def test_promotion_is_inferred(self, player):
        state = GameState.from_fen(WHITE_PROMOTES)

        player.select_name(state, "e7")
        move = player.select_name(state, "e8")

        assert move.promotion == chess.QUEEN
        assert state.board.piece_at(chess.E8) == chess.Piece(chess.QUEEN, chess.WHITE)

    def test_black_promotion_is_inferred(self, player):
        state = GameState.from_fen(BLACK_PROMOTES)

        player.select_name(state, "e2")
        move = player.select_name(state, "e1")

        assert move == chess.Move(chess.E2, chess.E1, promotion=chess.QUEEN)

    def test_malformed_name_keeps_gesture(self, player):
        state = GameState()
        player.select_name(state, "e2")

        with pytest.raises(MalformedSquareReference):
            player.select_name(state, "x0")

        assert player.gesture.pending_origin_square == chess.E2
        assert player.select_name(state, "e4") == chess.Move.from_uci("e2e4")
