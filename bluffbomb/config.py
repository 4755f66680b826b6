"""Game settings loaded from the environment and the command line."""

import os

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, field_validator, model_validator

from .types import PlayerConfig

DEFAULT_HUMAN_NAME = "Human"
DEFAULT_BOT_NAMES = ["Bot1", "Bot2", "Bot3"]

ENV_PREFIX = "BLUFFBOMB_"


class GameSettings(BaseModel):
    """Settings for one game session."""

    seed: int | None = Field(default=None, description="Seed for the shared random source")
    human_name: str = Field(default=DEFAULT_HUMAN_NAME, min_length=1)
    bot_names: list[str] = Field(default_factory=lambda: list(DEFAULT_BOT_NAMES))
    spectate: bool = Field(default=False, description="Let the bot policy play the human seat")
    delay: float = Field(default=0.0, ge=0.0, description="Pause between rendered turns in seconds")

    @field_validator("bot_names")
    @classmethod
    def _three_bots(cls, names: list[str]) -> list[str]:
        names = [n.strip() for n in names]
        if len(names) != 3:
            raise ValueError(f"Exactly three bot names are required, got {len(names)}")
        if any(not n for n in names):
            raise ValueError("Bot names cannot be empty")
        return names

    @model_validator(mode="after")
    def _unique_names(self) -> "GameSettings":
        names = [self.human_name.lower()] + [n.lower() for n in self.bot_names]
        if len(set(names)) != len(names):
            raise ValueError("Player names must be unique")
        return self

    @classmethod
    def from_env(cls, **overrides) -> "GameSettings":
        """Build settings from BLUFFBOMB_* environment variables (and .env).

        Keyword overrides that are not None win over the environment.
        """
        load_dotenv(find_dotenv(usecwd=True))
        values: dict = {}

        seed = os.getenv(f"{ENV_PREFIX}SEED")
        if seed:
            values["seed"] = seed
        human = os.getenv(f"{ENV_PREFIX}HUMAN_NAME")
        if human:
            values["human_name"] = human
        bots = os.getenv(f"{ENV_PREFIX}BOT_NAMES")
        if bots:
            values["bot_names"] = bots.split(",")
        spectate = os.getenv(f"{ENV_PREFIX}SPECTATE")
        if spectate:
            values["spectate"] = spectate.strip().lower() in ("1", "true", "yes", "on")
        delay = os.getenv(f"{ENV_PREFIX}DELAY")
        if delay:
            values["delay"] = delay

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def player_configs(self) -> list[PlayerConfig]:
        """Seat list in registry order: the human first, then the bots."""
        seats: list[PlayerConfig] = [{"name": self.human_name, "is_human": not self.spectate}]
        seats.extend({"name": name, "is_human": False} for name in self.bot_names)
        return seats
