"""Typed domain exceptions for the party engine.

All engine-level failures use subclasses of PartyEngineError rather than
raw ValueError, so the session orchestration layer can catch one base
type and decide whether to abort session start or the current round.
"""


class PartyEngineError(Exception):
    """Base exception for party engine failures."""


class ConfigurationError(PartyEngineError):
    """Engine input data cannot support the requested operation.

    Raised for an empty diagnosis queue, an unknown free-play round, a
    missing points table for the participant count, a session with no
    joined players, or malformed catalog/points-table data. Not retried.
    """


class InvalidSessionStateError(PartyEngineError):
    """Raised when a session operation is called in the wrong phase.

    Attributes:
        operation: Name of the operation that was attempted (e.g. "complete_round").
        state: Session phase value at the time of the call.

    """

    def __init__(self, *, operation: str, state: str) -> None:
        self.operation = operation
        self.state = state
        super().__init__(f"cannot {operation} while session is {state}")


class InvalidRoundResultError(PartyEngineError):
    """Round scores cannot be ranked (e.g. the same player appears twice)."""
