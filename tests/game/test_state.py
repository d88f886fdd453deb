"""Tests for the pure phase transition functions and GameState."""

import pytest

from statechess.core.enums import Color
from statechess.core.move import Move
from statechess.core.types import E2, E4
from statechess.game.interfaces import CommandKind, GamePhase, Verdict
from statechess.game.state import (
    GameState,
    MoveRecord,
    PhaseState,
    accepts,
    advance,
    transition,
)

WHITE_TO_MOVE = PhaseState.normal_play(Color.WHITE)
WHITE_IN_CHECK = PhaseState.check(Color.WHITE)


class TestAutoTransitions:
    def test_setup_advances_to_white(self) -> None:
        assert advance(PhaseState.setup()) == PhaseState.normal_play(Color.WHITE)

    def test_checkmate_advances_to_game_over(self) -> None:
        nxt = advance(PhaseState.checkmate(Color.BLACK))
        assert nxt == PhaseState.game_over("checkmate by black")

    @pytest.mark.parametrize(
        "state",
        [WHITE_TO_MOVE, WHITE_IN_CHECK, PhaseState.game_over("resigned by white")],
    )
    def test_stable_phases_do_not_advance(self, state: PhaseState) -> None:
        assert advance(state) is None


class TestMoveTransitions:
    @pytest.mark.parametrize("start", [WHITE_TO_MOVE, WHITE_IN_CHECK])
    def test_normal_hands_turn_over(self, start: PhaseState) -> None:
        assert transition(start, CommandKind.MOVE, Verdict.NORMAL) == PhaseState.normal_play(
            Color.BLACK
        )

    @pytest.mark.parametrize("start", [WHITE_TO_MOVE, WHITE_IN_CHECK])
    def test_check_puts_opponent_in_check(self, start: PhaseState) -> None:
        assert transition(start, CommandKind.MOVE, Verdict.CHECK) == PhaseState.check(Color.BLACK)

    @pytest.mark.parametrize("start", [WHITE_TO_MOVE, WHITE_IN_CHECK])
    def test_checkmate_names_mover_as_winner(self, start: PhaseState) -> None:
        assert transition(start, CommandKind.MOVE, Verdict.CHECKMATE) == PhaseState.checkmate(
            Color.WHITE
        )

    @pytest.mark.parametrize("start", [WHITE_TO_MOVE, WHITE_IN_CHECK])
    def test_missing_verdict_changes_nothing(self, start: PhaseState) -> None:
        assert transition(start, CommandKind.MOVE) is start

    def test_black_mover(self) -> None:
        start = PhaseState.normal_play(Color.BLACK)
        assert transition(start, CommandKind.MOVE, Verdict.NORMAL) == WHITE_TO_MOVE


class TestOtherCommands:
    @pytest.mark.parametrize("start", [WHITE_TO_MOVE, WHITE_IN_CHECK])
    def test_resign(self, start: PhaseState) -> None:
        assert transition(start, CommandKind.RESIGN) == PhaseState.game_over("resigned by white")

    def test_check_request_confirms_check(self) -> None:
        assert transition(WHITE_TO_MOVE, CommandKind.CHECK, Verdict.CHECK) == WHITE_IN_CHECK

    def test_check_request_finds_checkmate(self) -> None:
        nxt = transition(WHITE_TO_MOVE, CommandKind.CHECK, Verdict.CHECKMATE)
        assert nxt == PhaseState.checkmate(Color.BLACK)

    def test_check_request_without_check(self) -> None:
        assert transition(WHITE_TO_MOVE, CommandKind.CHECK, Verdict.NORMAL) is WHITE_TO_MOVE

    def test_reset_from_game_over(self) -> None:
        over = PhaseState.game_over("checkmate by white")
        assert transition(over, CommandKind.RESET) == PhaseState.setup()


class TestRejectedCommands:
    @pytest.mark.parametrize(
        ("state", "command"),
        [
            (PhaseState.setup(), CommandKind.MOVE),
            (WHITE_TO_MOVE, CommandKind.RESET),
            (WHITE_IN_CHECK, CommandKind.RESET),
            (WHITE_IN_CHECK, CommandKind.CHECK),
            (PhaseState.checkmate(Color.WHITE), CommandKind.RESIGN),
            (PhaseState.game_over("resigned by black"), CommandKind.MOVE),
            (PhaseState.game_over("resigned by black"), CommandKind.RESIGN),
            (WHITE_TO_MOVE, CommandKind.SHOW),
        ],
    )
    def test_unchanged(self, state: PhaseState, command: CommandKind) -> None:
        assert not accepts(state, command)
        assert transition(state, command, Verdict.NORMAL) is state

    def test_accept_table(self) -> None:
        assert accepts(WHITE_TO_MOVE, CommandKind.MOVE)
        assert accepts(WHITE_TO_MOVE, CommandKind.CHECK)
        assert accepts(WHITE_IN_CHECK, CommandKind.RESIGN)
        assert accepts(PhaseState.game_over("x"), CommandKind.RESET)


class TestPhaseStateDisplay:
    def test_str(self) -> None:
        assert str(PhaseState.setup()) == "Setup"
        assert str(WHITE_TO_MOVE) == "NormalPlay(white)"
        assert str(PhaseState.check(Color.BLACK)) == "Check(black)"
        assert str(PhaseState.game_over("resigned by white")) == "GameOver(resigned by white)"


class TestGameState:
    def test_defaults(self) -> None:
        gs = GameState()
        assert gs.phase.phase == GamePhase.SETUP
        assert gs.side_to_move == Color.WHITE
        assert gs.ply_count == 0
        assert not gs.is_game_over

    def test_history_counters(self) -> None:
        gs = GameState()
        gs.move_history.append(MoveRecord(Move(E2, E4), Color.WHITE, "P"))
        assert gs.ply_count == 1
        assert not gs.move_history[-1].was_check
        gs.move_history.append(MoveRecord(Move(E2, E4), Color.BLACK, "p", "P", Verdict.CHECK))
        assert gs.ply_count == 2
        assert gs.move_history[-1].was_check
