"""
Input Frame - Snapshot of the player's controls for one frame.

Uses Pydantic for validation and immutability.
"""
from pydantic import BaseModel, ConfigDict, field_validator


class InputFrame(BaseModel):
    """Immutable per-frame control state from any source.

    Directional controls are level-triggered (held this frame); confirm is
    edge-triggered (pressed since the previous frame).

    Attributes:
        move_left: Left control currently held
        move_right: Right control currently held
        confirm: Confirm control pressed this frame
        timestamp: Time the snapshot was taken (seconds, monotonic clock)
    """
    move_left: bool = False
    move_right: bool = False
    confirm: bool = False
    timestamp: float = 0.0

    model_config = ConfigDict(frozen=True)

    @field_validator('timestamp')
    @classmethod
    def validate_timestamp(cls, v: float) -> float:
        """Validate timestamp is non-negative."""
        if v < 0:
            raise ValueError(f'Timestamp must be non-negative, got {v}')
        return v

    @property
    def horizontal(self) -> int:
        """Requested horizontal direction: -1, 0 or +1.

        Both or neither directions held means no movement.
        """
        if self.move_left == self.move_right:
            return 0
        return -1 if self.move_left else 1

    def __str__(self) -> str:
        """String representation for debugging."""
        return (f"InputFrame(left={self.move_left}, right={self.move_right}, "
                f"confirm={self.confirm}, t={self.timestamp:.3f})")
