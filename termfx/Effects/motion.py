# motion.py
# Description: Directions and loop modes for directional and repeating effects
#
# Imports
from enum import Enum
#
#######################################################################################################################
#
# Classes:


class Motion(Enum):
    """Direction in which a sweep or slide travels across its area."""
    LEFT_TO_RIGHT = "left_to_right"
    RIGHT_TO_LEFT = "right_to_left"
    UP_TO_DOWN = "up_to_down"
    DOWN_TO_UP = "down_to_up"

    def flipped(self) -> "Motion":
        """The opposite direction."""
        return _OPPOSITES[self]

    def flips_timer(self) -> bool:
        """
        Whether effects moving this way run on a mirrored timer.

        The sliding window math is written for one direction per axis; the
        other direction reuses it by running time backward.
        """
        return self in (Motion.RIGHT_TO_LEFT, Motion.DOWN_TO_UP)

    def is_horizontal(self) -> bool:
        return self in (Motion.LEFT_TO_RIGHT, Motion.RIGHT_TO_LEFT)


_OPPOSITES = {
    Motion.LEFT_TO_RIGHT: Motion.RIGHT_TO_LEFT,
    Motion.RIGHT_TO_LEFT: Motion.LEFT_TO_RIGHT,
    Motion.UP_TO_DOWN: Motion.DOWN_TO_UP,
    Motion.DOWN_TO_UP: Motion.UP_TO_DOWN,
}


class ExpandDirection(Enum):
    """Axis along which an expand effect grows from the center."""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class LoopMode(Enum):
    """What an effect does when its timer runs out."""
    ONCE = "once"
    # Restart from the beginning; never completes
    LOOP = "loop"
    # Play backward, then forward again; never completes
    PING_PONG = "ping_pong"

#
# End of motion.py
#######################################################################################################################
