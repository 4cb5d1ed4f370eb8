"""
String enum definitions for party game concepts.
"""

from enum import Enum


class Category(str, Enum):
    """Skill axis a minigame round is tagged with."""

    REFLEX = "reflex"
    MASH = "mash"
    HOLD = "hold"


# fixed order used for queue building and classification
CATEGORIES: tuple[Category, ...] = (Category.REFLEX, Category.MASH, Category.HOLD)


class SessionMode(str, Enum):
    """How a session was started from the lobby."""

    DIAGNOSIS = "diagnosis"  # multi-round structured sequence
    FREE_PLAY = "free_play"  # single selected round


class SessionPhase(str, Enum):
    """Phase of a session state machine."""

    NOT_STARTED = "not_started"
    ROUND_IN_PROGRESS = "round_in_progress"
    COMPLETED = "completed"


class LobbyStatus(str, Enum):
    """Lobby participation status of a roster player."""

    IDLE = "idle"
    JOINED = "joined"
    READY = "ready"


class AnimalType(str, Enum):
    """Classification label derived from accumulated category totals."""

    LION = "lion"
    WOLF = "wolf"
    CHEETAH = "cheetah"
    GORILLA = "gorilla"
    RABBIT = "rabbit"
    BEAR = "bear"
    ELEPHANT = "elephant"
    PANDA = "panda"
    DOG = "dog"
    CAT = "cat"
    MONKEY = "monkey"
    SQUIRREL = "squirrel"
    PENGUIN = "penguin"
    TURTLE = "turtle"
    CHICK = "chick"
