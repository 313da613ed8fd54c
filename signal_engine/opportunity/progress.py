"""Completion tracking for next actions, kept outside the immutable card."""

from typing import Dict, Iterable, List


class ActionProgress:
    """Side table of action id -> completed flag.

    Owned by the presentation layer; an OpportunityCard is never mutated.
    """

    def __init__(self, completed_ids: Iterable[str] = ()):
        self._completed: Dict[str, bool] = {action_id: True for action_id in completed_ids}

    def toggle(self, action_id: str) -> bool:
        """Flip the flag for ``action_id`` and return the new state."""
        state = not self._completed.get(action_id, False)
        self._completed[action_id] = state
        return state

    def set_completed(self, action_id: str, completed: bool = True) -> None:
        self._completed[action_id] = completed

    def is_completed(self, action_id: str) -> bool:
        return self._completed.get(action_id, False)

    def completed_ids(self) -> List[str]:
        return [action_id for action_id, done in self._completed.items() if done]

    def __len__(self) -> int:
        return len(self.completed_ids())
