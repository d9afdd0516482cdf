"""Command result envelope for structured game area responses."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class CommandResultType(Enum):
    """Types of command results."""
    GAME_JOINED = "game_joined"
    GAME_LEFT = "game_left"
    MOVE_APPLIED = "move_applied"

    # Errors
    COMMAND_FAILED = "command_failed"


@dataclass
class CommandResult:
    """Structured result from handling a game area command."""
    success: bool
    command_type: str
    result_type: CommandResultType
    data: Dict[str, Any] = field(default_factory=dict)
    error_message: Optional[str] = None

    @classmethod
    def success_result(cls, command_type: str, result_type: CommandResultType, **data) -> 'CommandResult':
        """Create a successful command result."""
        return cls(
            success=True,
            command_type=command_type,
            result_type=result_type,
            data=data
        )

    @classmethod
    def failure_result(cls, command_type: str, error_message: str) -> 'CommandResult':
        """Create a failed command result."""
        return cls(
            success=False,
            command_type=command_type,
            result_type=CommandResultType.COMMAND_FAILED,
            error_message=error_message
        )
