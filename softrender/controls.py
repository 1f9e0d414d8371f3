"""Keyboard state and the per-frame camera movement it drives."""

from __future__ import annotations

from typing import Callable

from .matrix import Mat4, Vec3
from .quat import Quat

MOVE_SPEED = 0.1
ROTATE_SPEED = 0.05  # radians
HOME_POSITION = Vec3(0.0, 0.0, 6.0)

_Y_AXIS = Vec3(0.0, 1.0, 0.0)

_Action = Callable[[Vec3, Quat], "tuple[Vec3, Quat]"]


def _move(direction: Callable[[Quat], Vec3], sign: float) -> _Action:
    def action(pos: Vec3, rot: Quat) -> tuple[Vec3, Quat]:
        return pos.add_scaled(direction(rot), sign * MOVE_SPEED), rot

    return action


def _yaw(angle: float) -> _Action:
    def action(pos: Vec3, rot: Quat) -> tuple[Vec3, Quat]:
        return pos, Quat.from_axis_angle(_Y_AXIS, angle) * rot

    return action


def _pitch(angle: float) -> _Action:
    def action(pos: Vec3, rot: Quat) -> tuple[Vec3, Quat]:
        return pos, Quat.from_axis_angle(rot.right(), angle) * rot

    return action


def _reset(pos: Vec3, rot: Quat) -> tuple[Vec3, Quat]:
    return HOME_POSITION, Quat()


def _quit(pos: Vec3, rot: Quat) -> tuple[Vec3, Quat]:
    raise SystemExit(0)


# Applied in key-code order, so the order of this table matters.
_ACTIONS: dict[str, _Action] = {
    "escape": _quit,
    "space": _reset,
    "a": _move(Quat.right, -1.0),
    "d": _move(Quat.right, 1.0),
    "e": _move(Quat.up, -1.0),
    "i": _pitch(-ROTATE_SPEED),
    "j": _yaw(ROTATE_SPEED),
    "k": _pitch(ROTATE_SPEED),
    "l": _yaw(-ROTATE_SPEED),
    "q": _move(Quat.up, 1.0),
    "s": _move(Quat.forward, -1.0),
    "w": _move(Quat.forward, 1.0),
}


class Controls:
    """Tracks held keys by name and turns them into camera motion."""

    def __init__(self) -> None:
        self._pressed: set[str] = set()

    def keydown(self, key: str) -> None:
        self._pressed.add(key.lower())

    def keyup(self, key: str) -> None:
        self._pressed.discard(key.lower())

    def is_pressed(self, key: str) -> bool:
        return key.lower() in self._pressed

    def tick(self, pos: Vec3, rot: Quat) -> tuple[Vec3, Quat]:
        """Apply one frame of movement for every held key.

        Returns the new position and rotation. Holding escape raises
        ``SystemExit``.
        """
        for key, action in _ACTIONS.items():
            if key in self._pressed:
                pos, rot = action(pos, rot)
        return pos, rot


def clamp_movement(transform: Mat4) -> Mat4:
    """Clamp the translation part of a per-tick transform to ``MOVE_SPEED``."""
    values = list(transform.values)
    values[12:15] = [max(-MOVE_SPEED, min(MOVE_SPEED, v)) for v in values[12:15]]
    return Mat4(tuple(values))