from __future__ import annotations

from enum import Enum


class RequestState(str, Enum):
    IDLE = "idle"
    HANDLING = "handling"
    RESPONDED = "responded"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in {RequestState.RESPONDED, RequestState.FAILED}


def is_valid_transition(current: RequestState, new: RequestState) -> bool:
    if current is RequestState.IDLE:
        return new is RequestState.HANDLING
    if current is RequestState.HANDLING:
        return new.is_terminal
    return False
