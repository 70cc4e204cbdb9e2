"""
Engine Errors - The rules engine's error taxonomy.

Every rule violation is a local, recoverable condition reported to the
immediate caller. Each error carries a stable error_code so the session
and API layers can surface it without string matching.

Grouped by the component that raises them:
- Hand: InvalidIndex, NilCard, NotDiscardable, NotPlayable, NilTarget
- Space: SpaceFull, NilCar, CarNotFound
- Car: InvalidGear, InsufficientEngine, TooManyGearShifts
- Player: NoBasicCardAvailable
- Board: TurnOrderEmpty
- Session: NotYourTurn, PlayerNotFound, RaceOver
"""


class EngineError(Exception):
    """Base class for all rule violations raised by the engine."""
    error_code = "ENGINE_ERROR"


# Hand

class InvalidIndexError(EngineError):
    error_code = "INVALID_INDEX"


class NilCardError(EngineError):
    error_code = "NIL_CARD"


class NotDiscardableError(EngineError):
    error_code = "NOT_DISCARDABLE"


class NotPlayableError(EngineError):
    error_code = "NOT_PLAYABLE"


class NilTargetError(EngineError):
    error_code = "NIL_TARGET"


# Space

class SpaceFullError(EngineError):
    error_code = "SPACE_FULL"


class NilCarError(EngineError):
    error_code = "NIL_CAR"


class CarNotFoundError(EngineError):
    error_code = "CAR_NOT_FOUND"


# Car

class InvalidGearError(EngineError):
    error_code = "INVALID_GEAR"


class InsufficientEngineError(EngineError):
    error_code = "INSUFFICIENT_ENGINE"


class TooManyGearShiftsError(EngineError):
    error_code = "TOO_MANY_GEAR_SHIFTS"


# Player

class NoBasicCardAvailableError(EngineError):
    """Stress resolution found no basic card in the deck or discard pile."""
    error_code = "NO_BASIC_CARD_AVAILABLE"


# Board

class TurnOrderEmptyError(EngineError):
    error_code = "TURN_ORDER_EMPTY"


# Session

class NotYourTurnError(EngineError):
    error_code = "NOT_YOUR_TURN"


class PlayerNotFoundError(EngineError):
    error_code = "PLAYER_NOT_FOUND"


class RaceOverError(EngineError):
    error_code = "RACE_OVER"
