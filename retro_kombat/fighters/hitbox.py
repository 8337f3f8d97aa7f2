"""
Hitbox System
=============
Collision detection untuk combat.
- Hitbox: area serangan di depan attacker (aktif satu tick per serangan)
- Hurtbox: rectangle fighter itu sendiri
Semua rectangle berbentuk (x, y, width, height) dalam world coordinates,
y bertambah ke bawah.
"""

from dataclasses import dataclass
from typing import Tuple

from ..config import ATTACK_REACH, Facing

Rect = Tuple[float, float, float, float]


def check_collision(r1: Rect, r2: Rect) -> bool:
    """AABB overlap, edges yang hanya bersentuhan tidak dihitung"""
    return (r1[0] < r2[0] + r2[2] and
            r1[0] + r1[2] > r2[0] and
            r1[1] < r2[1] + r2[3] and
            r1[1] + r1[3] > r2[1])


@dataclass(frozen=True)
class Hitbox:
    """
    Area serangan melee.
    Menempel di sisi depan attacker sesuai facing, setinggi attacker.
    """
    reach: float = ATTACK_REACH

    def get_rect(self, x: float, y: float, width: float, height: float,
                 facing: Facing) -> Rect:
        """Rectangle untuk attacker pada (x, y) dengan ukuran width x height"""
        if facing is Facing.RIGHT:
            hit_x = x + width
        else:
            hit_x = x - self.reach
        return (hit_x, y, self.reach, height)


MELEE_HITBOX = Hitbox()


def attack_hitbox(fighter) -> Rect:
    """Hitbox melee untuk fighter saat ini"""
    return MELEE_HITBOX.get_rect(
        fighter.x, fighter.y, fighter.width, fighter.height, fighter.facing
    )
