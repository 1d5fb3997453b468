from .did_document import DidDocument
from .web_schemas import (
    CreateRequest,
    CreateState,
    DeactivateRequest,
    DeactivateState,
    DidState,
    UpdateRequest,
    UpdateState,
)

__all__ = [
    "DidDocument",
    "CreateRequest",
    "CreateState",
    "DeactivateRequest",
    "DeactivateState",
    "DidState",
    "UpdateRequest",
    "UpdateState",
]
