import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

FIRST_MOVER_CHOICES = ("either", "player_1", "player_2")


@dataclass(slots=True)
class Config:
    # Who may make the opening move: "either", "player_1" or "player_2"
    FIRST_MOVER: str = os.getenv("UR_FIRST_MOVER", "either")

    def __post_init__(self):
        if self.FIRST_MOVER not in FIRST_MOVER_CHOICES:
            raise ValueError(
                f"FIRST_MOVER must be one of {', '.join(FIRST_MOVER_CHOICES)}"
            )


config = Config()
