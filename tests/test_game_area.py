"""Tests for the game area command router and outcome ledger."""

import pytest

from tictactoe_sim.engine.action_result import CommandResultType
from tictactoe_sim.engine.commands import GameMoveCommand, JoinGameCommand, LeaveGameCommand
from tictactoe_sim.engine.errors import (
    BOARD_POSITION_NOT_EMPTY_MESSAGE,
    GAME_FULL_MESSAGE,
    GAME_ID_MISSMATCH_MESSAGE,
    GAME_NOT_IN_PROGRESS_MESSAGE,
    INVALID_COMMAND_MESSAGE,
    INVALID_MOVE_MESSAGE,
    MOVE_NOT_YOUR_TURN_MESSAGE,
    InvalidParametersError,
)
from tictactoe_sim.engine.event_system import AreaEventType
from tictactoe_sim.engine.game_area import TicTacToeGameArea
from tictactoe_sim.models.game.game_state import GameResult, GameStatus, Move
from tests.helpers import create_test_player


class GameAreaTestBase:
    """Area with an event recorder and two players at hand."""

    def setup_method(self):
        self.area = TicTacToeGameArea("area-1")
        self.events = []
        self.area.event_manager.subscribe(self.events.append)
        self.alice = create_test_player("alice")
        self.bob = create_test_player("bob")

    def start_game(self) -> str:
        game_id = self.area.handle_command(JoinGameCommand(), self.alice)['game_id']
        self.area.handle_command(JoinGameCommand(), self.bob)
        return game_id

    def move(self, player, game_id, row, col):
        return self.area.handle_command(GameMoveCommand(game_id, Move(row, col)), player)

    def play(self, game_id, cells):
        players = (self.alice, self.bob)
        for i, (row, col) in enumerate(cells):
            self.move(players[i % 2], game_id, row, col)


class TestJoinCommand(GameAreaTestBase):

    def test_join_creates_game_and_returns_its_id(self):
        response = self.area.handle_command(JoinGameCommand(), self.alice)

        assert self.area.game is not None
        assert response == {'game_id': self.area.game.id}
        assert self.area.game.state.x == self.alice.id
        assert self.area.is_active
        assert len(self.events) == 1
        assert self.events[0].event_type is AreaEventType.AREA_CHANGED

    def test_second_join_uses_same_game(self):
        first = self.area.handle_command(JoinGameCommand(), self.alice)
        second = self.area.handle_command(JoinGameCommand(), self.bob)

        assert first == second
        assert self.area.game.state.status is GameStatus.IN_PROGRESS
        assert len(self.events) == 2

    def test_third_join_fails_without_notifying(self):
        self.start_game()

        with pytest.raises(InvalidParametersError, match=GAME_FULL_MESSAGE):
            self.area.handle_command(JoinGameCommand(), create_test_player())
        assert len(self.events) == 2

    def test_join_after_game_over_starts_new_game(self):
        old_id = self.start_game()
        self.area.handle_command(LeaveGameCommand(old_id), self.alice)

        response = self.area.handle_command(JoinGameCommand(), self.alice)

        assert response['game_id'] != old_id
        assert self.area.game.state.status is GameStatus.WAITING_TO_START
        assert self.area.game.state.x == self.alice.id
        assert len(self.area.history) == 1


class TestLeaveCommand(GameAreaTestBase):

    def test_leave_without_game(self):
        with pytest.raises(InvalidParametersError, match=GAME_NOT_IN_PROGRESS_MESSAGE):
            self.area.handle_command(LeaveGameCommand("nope"), self.alice)
        assert self.events == []

    def test_leave_with_wrong_game_id(self):
        self.start_game()

        with pytest.raises(InvalidParametersError, match=GAME_ID_MISSMATCH_MESSAGE):
            self.area.handle_command(LeaveGameCommand("wrong-id"), self.alice)
        assert self.area.game.state.status is GameStatus.IN_PROGRESS

    def test_forfeit_records_outcome(self):
        game_id = self.start_game()

        assert self.area.handle_command(LeaveGameCommand(game_id), self.alice) is None

        assert self.area.game.state.status is GameStatus.OVER
        assert self.area.history == (GameResult(game_id, {'bob': 1, 'alice': 0}),)
        assert not self.area.is_active
        assert len(self.events) == 3

    def test_leave_before_start_records_nothing(self):
        game_id = self.area.handle_command(JoinGameCommand(), self.alice)['game_id']
        self.area.handle_command(LeaveGameCommand(game_id), self.alice)

        assert self.area.history == ()
        assert self.area.game.state.status is GameStatus.WAITING_TO_START

    def test_leaving_finished_game_does_not_record_again(self):
        game_id = self.start_game()
        self.play(game_id, [(0, 0), (1, 1), (0, 1), (2, 2), (0, 2)])
        assert len(self.area.history) == 1

        self.area.handle_command(LeaveGameCommand(game_id), self.bob)
        self.area.handle_command(LeaveGameCommand(game_id), self.alice)

        assert len(self.area.history) == 1
        assert self.area.game.state.winner == self.alice.id


class TestMoveCommand(GameAreaTestBase):

    def test_move_without_game(self):
        with pytest.raises(InvalidParametersError, match=GAME_NOT_IN_PROGRESS_MESSAGE):
            self.move(self.alice, "nope", 0, 0)

    def test_move_with_wrong_game_id(self):
        self.start_game()

        with pytest.raises(InvalidParametersError, match=GAME_ID_MISSMATCH_MESSAGE):
            self.move(self.alice, "wrong-id", 0, 0)
        assert self.area.game.state.moves == ()

    def test_valid_move_notifies_and_returns_nothing(self):
        game_id = self.start_game()

        assert self.move(self.alice, game_id, 1, 1) is None
        assert len(self.area.game.state.moves) == 1
        assert len(self.events) == 3
        assert self.area.history == ()

    def test_engine_rejections_propagate_unchanged(self):
        game_id = self.start_game()

        with pytest.raises(InvalidParametersError, match=MOVE_NOT_YOUR_TURN_MESSAGE):
            self.move(self.bob, game_id, 0, 0)
        self.move(self.alice, game_id, 0, 0)
        with pytest.raises(InvalidParametersError, match=BOARD_POSITION_NOT_EMPTY_MESSAGE):
            self.move(self.bob, game_id, 0, 0)
        assert len(self.events) == 3

    def test_win_records_outcome(self):
        game_id = self.start_game()
        self.play(game_id, [(0, 0), (1, 1), (0, 1), (2, 2), (0, 2)])

        assert self.area.game.state.winner == self.alice.id
        assert self.area.history == (GameResult(game_id, {'alice': 1, 'bob': 0}),)

    def test_tie_records_zero_for_both(self):
        game_id = self.start_game()
        self.play(game_id, [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (1, 2), (2, 1), (2, 0), (2, 2)])

        assert self.area.game.state.winner is None
        assert self.area.history == (GameResult(game_id, {'alice': 0, 'bob': 0}),)

    def test_history_accumulates_across_games(self):
        first = self.start_game()
        self.area.handle_command(LeaveGameCommand(first), self.bob)
        second = self.start_game()
        self.area.handle_command(LeaveGameCommand(second), self.alice)

        assert [result.game_id for result in self.area.history] == [first, second]
        assert self.area.history[1].scores == {'bob': 1, 'alice': 0}


class TestUnsupportedCommand(GameAreaTestBase):

    def test_unknown_command_is_rejected(self):
        with pytest.raises(InvalidParametersError, match=INVALID_COMMAND_MESSAGE):
            self.area.handle_command(object(), self.alice)
        assert self.events == []


class TestDispatch(GameAreaTestBase):
    """Tests for dispatching raw command payloads."""

    def test_join_payload(self):
        result = self.area.dispatch({'type': 'JoinGame'}, self.alice)

        assert result.success
        assert result.result_type is CommandResultType.GAME_JOINED
        assert result.data == {'game_id': self.area.game.id}

    def test_move_and_leave_payloads(self):
        game_id = self.start_game()

        moved = self.area.dispatch({'type': 'GameMove', 'gameID': game_id,
                                    'move': {'row': 2, 'col': 0}}, self.alice)
        left = self.area.dispatch({'type': 'LeaveGame', 'gameID': game_id}, self.bob)

        assert moved.success and moved.result_type is CommandResultType.MOVE_APPLIED
        assert left.success and left.result_type is CommandResultType.GAME_LEFT
        assert self.area.history[0].scores == {'alice': 1, 'bob': 0}

    def test_rejections_become_failure_results(self):
        game_id = self.start_game()

        result = self.area.dispatch({'type': 'GameMove', 'gameID': game_id,
                                     'move': {'row': 0, 'col': 0}}, self.bob)

        assert not result.success
        assert result.command_type == 'GameMove'
        assert result.result_type is CommandResultType.COMMAND_FAILED
        assert result.error_message == MOVE_NOT_YOUR_TURN_MESSAGE

    def test_unknown_payload_type(self):
        result = self.area.dispatch({'type': 'ViewingArea'}, self.alice)

        assert result.error_message == INVALID_COMMAND_MESSAGE

    def test_malformed_move_payload(self):
        game_id = self.start_game()

        result = self.area.dispatch({'type': 'GameMove', 'gameID': game_id,
                                     'move': {'row': 5, 'col': 0}}, self.alice)

        assert result.error_message == INVALID_MOVE_MESSAGE
        assert self.area.game.state.moves == ()


class TestAreaModel(GameAreaTestBase):

    def test_model_before_any_game(self):
        model = self.area.to_model()

        assert model == {'id': 'area-1', 'type': 'TicTacToeArea', 'game': None,
                         'history': [], 'occupants': []}

    def test_observers_receive_current_model(self):
        game_id = self.start_game()
        self.move(self.alice, game_id, 0, 0)

        model = self.events[-1].data['model']
        assert model['game']['id'] == game_id
        assert model['game']['state']['moves'] == [{'row': 0, 'col': 0, 'gamePiece': 'X'}]
        assert [occupant['userName'] for occupant in model['occupants']] == ['alice', 'bob']
        assert self.events[-1].area_id == 'area-1'
