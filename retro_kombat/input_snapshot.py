"""
Input Snapshot
==============
Per-tick set of held logical actions for each player.
Produced by the input layer, read-only for the simulation.
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, Union

from .config import Action


@dataclass(frozen=True)
class PlayerInput:
    """Actions held by one player this tick"""
    held: FrozenSet[Action] = frozenset()

    @classmethod
    def of(cls, *actions: Union[Action, str]) -> 'PlayerInput':
        """Build from Action members or their names ('attack', 'moveLeft', ...)"""
        return cls(frozenset(_to_action(a) for a in actions))

    def is_held(self, action: Action) -> bool:
        return action in self.held


NO_INPUT = PlayerInput()


@dataclass(frozen=True)
class InputSnapshot:
    """
    Held actions for every player slot.
    Missing slots read as no input.
    """
    players: Dict[int, PlayerInput] = field(default_factory=dict)

    @classmethod
    def from_actions(cls, actions: Dict[int, Iterable[Union[Action, str]]]) -> 'InputSnapshot':
        return cls({
            player_id: PlayerInput.of(*held)
            for player_id, held in actions.items()
        })

    def for_player(self, player_id: int) -> PlayerInput:
        return self.players.get(player_id, NO_INPUT)


EMPTY_SNAPSHOT = InputSnapshot()


def _to_action(value: Union[Action, str]) -> Action:
    if isinstance(value, Action):
        return value
    try:
        return Action(value)
    except ValueError:
        pass
    if isinstance(value, str) and value.upper() in Action.__members__:
        return Action[value.upper()]
    raise ValueError(f"Unknown input action: {value!r}")
