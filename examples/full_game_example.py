"""Complete game example playing a Tic-Tac-Toe game to completion through a game area.

This example shows:
- Two players joining an area with raw command payloads
- Random decision making among the legal moves
- Observers receiving area snapshots after every command
- The outcome ledger after the game ends
"""

import sys
import os
import random
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from tictactoe_sim.engine.event_system import AreaEvent
from tictactoe_sim.engine.game_area import TicTacToeGameArea
from tictactoe_sim.models.game.game_state import GameStatus
from tictactoe_sim.models.game.player import Player


def print_area_change(event: AreaEvent):
    """Print a one-line summary of each area snapshot."""
    game = event.data['model']['game']
    if game is None:
        return
    state = game['state']
    print(f"📣 {event.area_id}: {state['status']} after {len(state['moves'])} moves")


def simulate_random_game():
    """Play one game with random legal moves."""
    area = TicTacToeGameArea("example-area")
    area.event_manager.subscribe(print_area_change)

    ashley = Player("Ashley")
    tace = Player("Tace")
    game_id = area.dispatch({'type': 'JoinGame'}, ashley).data['game_id']
    area.dispatch({'type': 'JoinGame'}, tace)

    players = {area.game.state.x: ashley, area.game.state.o: tace}
    while area.game.state.status is GameStatus.IN_PROGRESS:
        move = random.choice(area.game.legal_moves())
        mover = players[area.game.state.participant_for(move.mark)]
        result = area.dispatch({
            'type': 'GameMove',
            'gameID': game_id,
            'move': {'row': move.row, 'col': move.col},
        }, mover)
        if not result.success:
            print(f"❌ {mover} rejected: {result.error_message}")
            break

    print()
    print(area.game.state)
    print()

    # Final results
    print("=" * 50)
    winner = area.game.state.winner
    if winner is None:
        print("🤝 The game ended in a tie")
    else:
        print(f"🏆 {players[winner]} wins!")
    for result in area.history:
        print(f"📊 Ledger: {result.scores}")


if __name__ == "__main__":
    simulate_random_game()
