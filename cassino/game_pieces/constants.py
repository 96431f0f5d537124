from enum import Enum

# Face ranks and their numeric values
FACE_VALUES: dict[str, int] = {
    "A": 1,
    "J": 11,
    "Q": 12,
    "K": 13,
}


class EntityType(str, Enum):
    LOOSE_CARD = "loose_card"
    BUILD = "build"
    TEMPORARY_STACK = "temporary_stack"


class StackMode(str, Enum):
    SET = "set"
    SUM = "sum"
