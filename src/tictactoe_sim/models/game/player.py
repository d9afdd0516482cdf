"""Player model for the Tic-Tac-Toe game area."""

import uuid
from dataclasses import dataclass, field


def _new_player_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Player:
    """A participant in the surrounding virtual space.

    Games only ever store the player's ``id``; the ``user_name`` is what
    outcome records are keyed by.
    """
    user_name: str
    id: str = field(default_factory=_new_player_id)

    def __post_init__(self) -> None:
        """Validate player data after creation."""
        if not self.user_name:
            raise ValueError("Player user name cannot be empty")
        if not self.id:
            raise ValueError("Player id cannot be empty")

    def __str__(self) -> str:
        return self.user_name
