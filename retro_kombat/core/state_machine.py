"""
Game phase state machine
menu -> playing <-> paused, playing -> gameOver -> playing | menu
"""

import logging
from typing import Callable, Dict, Iterable, List, Optional

from ..config import GamePhase

logger = logging.getLogger(__name__)

TRANSITIONS: Dict[GamePhase, Iterable[GamePhase]] = {
    GamePhase.MENU: (GamePhase.PLAYING,),
    # PLAYING -> PLAYING adalah restart round
    GamePhase.PLAYING: (GamePhase.PAUSED, GamePhase.GAME_OVER, GamePhase.PLAYING),
    GamePhase.PAUSED: (GamePhase.PLAYING, GamePhase.MENU),
    GamePhase.GAME_OVER: (GamePhase.PLAYING, GamePhase.MENU),
}

PhaseHook = Callable[[], None]


class StateMachine:
    """
    Pemegang phase global. Hook on_enter jalan setelah phase berganti,
    sesuai urutan register.
    """

    def __init__(self, initial: GamePhase = GamePhase.MENU):
        self.current_state: GamePhase = initial
        self.previous_state: Optional[GamePhase] = None
        self._on_enter: Dict[GamePhase, List[PhaseHook]] = {}

    def register_handlers(self, state: GamePhase, enter: PhaseHook):
        self._on_enter.setdefault(state, []).append(enter)

    def can_transition(self, new_state: GamePhase) -> bool:
        return new_state in TRANSITIONS.get(self.current_state, ())

    def transition_to(self, new_state: GamePhase):
        """Pindah phase. RuntimeError kalau edge tidak ada di TRANSITIONS."""
        old_state = self.current_state
        if not self.can_transition(new_state):
            raise RuntimeError(
                f"Illegal phase transition {old_state.value} -> {new_state.value}"
            )

        self.previous_state, self.current_state = old_state, new_state
        logger.info("Phase %s -> %s", old_state.value, new_state.value)
        for hook in self._on_enter.get(new_state, ()):
            hook()
