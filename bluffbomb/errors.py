"""Exception hierarchy for the game engine."""


class BluffBombError(Exception):
    """Base exception for all engine errors."""


class EngineInvariantError(BluffBombError):
    """Raised when the round state machine reaches a state it should never reach."""


class InvalidMoveError(BluffBombError):
    """Raised when a move provider returns a move outside its contract."""

    def __init__(self, player_name: str, detail: str) -> None:
        self.player_name = player_name
        self.detail = detail
        super().__init__(f"Invalid move from {player_name}: {detail}")
