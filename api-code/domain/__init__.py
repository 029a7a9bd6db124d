from .errors import REMEDIATION_MESSAGE, ChatErrorKind, ChatProxyError
from .request_states import RequestState, is_valid_transition

__all__ = [
    "REMEDIATION_MESSAGE",
    "ChatErrorKind",
    "ChatProxyError",
    "RequestState",
    "is_valid_transition",
]
