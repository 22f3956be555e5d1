"""
╔══════════════════════════════════════════════════════════════════════════════╗
║                           GAME CONFIGURATION                                  ║
║                                                                               ║
║  Puzzle bounds and prompt retry budgets. Values are validated on              ║
║  construction and the model is frozen afterwards.                             ║
╚══════════════════════════════════════════════════════════════════════════════╝
"""

from pydantic import BaseModel, ConfigDict, Field


class TowerConfig(BaseModel):
    """
    Settings for one run of the puzzle.

    Derived values:
        - move_limit: int    # Moves allowed before the game gives up (2 ** max_disks)
    """

    model_config = ConfigDict(frozen=True)

    # ══════════════════════════════════════════════════════════════════════════
    #  PUZZLE BOUNDS
    # ══════════════════════════════════════════════════════════════════════════

    max_disks: int = Field(
        default=7,
        ge=3,
        description="Largest puzzle the player may ask for. Below 3 the disk-numbering instructions go negative."
    )

    # ══════════════════════════════════════════════════════════════════════════
    #  RETRY BUDGETS
    # ══════════════════════════════════════════════════════════════════════════

    size_tries: int = Field(
        default=3,
        ge=1,
        description="Invalid answers to the puzzle size question before giving up"
    )

    disk_tries: int = Field(
        default=3,
        ge=1,
        description="Malformed disk codes accepted in a row before giving up"
    )

    needle_tries: int = Field(
        default=2,
        ge=1,
        description="Invalid destination needles accepted in a row before giving up"
    )

    @property
    def move_limit(self) -> int:
        return 2 ** self.max_disks
