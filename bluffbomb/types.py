"""Type definitions for game configuration and data structures."""

from typing import Literal, NotRequired, TypedDict


class PlayerConfig(TypedDict):
    """Configuration for a single seat."""

    name: str
    is_human: NotRequired[bool]


QuestionMode = Literal["voluntary", "forced"]
"""How a questioning came about."""
