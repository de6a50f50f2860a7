"""
Input protocol - defines the keyboard-state query the round is driven by
"""

from typing import Protocol

from brick_breaker.core.entities import InputIntent

LEFT = "left"
RIGHT = "right"


class InputSource(Protocol):
    """
    Protocol for anything that can answer "is this key currently down".

    Keys are logical names ("left", "right"), the backend maps them to its
    own physical key codes.
    """

    def is_key_down(self, logical_key: str) -> bool:
        """
        Check whether a logical key is held during this frame.

        Args:
            logical_key: "left" or "right"

        Returns:
            True while the key is held down
        """
        ...


def intent_from_input(source: InputSource) -> InputIntent:
    """Maps the held keys to a paddle intent, left winning when both are held"""
    if source.is_key_down(LEFT):
        return InputIntent.MOVE_LEFT
    if source.is_key_down(RIGHT):
        return InputIntent.MOVE_RIGHT
    return InputIntent.NONE
