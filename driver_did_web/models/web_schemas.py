"""Pydantic models for registrar requests and states."""

from typing import Any, Dict, Union

from pydantic import Field

from .base import CustomBaseModel
from .did_document import DidDocument

STATE_FINISHED = "finished"


class CreateRequest(CustomBaseModel):
    """CreateRequest model."""

    didDocument: Union[DidDocument, None] = Field(None)
    options: Dict[str, Any] = Field(default_factory=dict)
    secret: Dict[str, Any] = Field(default_factory=dict)


class UpdateRequest(CustomBaseModel):
    """UpdateRequest model."""

    didDocument: Union[DidDocument, None] = Field(None)
    options: Dict[str, Any] = Field(default_factory=dict)
    secret: Dict[str, Any] = Field(default_factory=dict)


class DeactivateRequest(CustomBaseModel):
    """DeactivateRequest model."""

    identifier: Union[str, None] = Field(None)
    options: Dict[str, Any] = Field(default_factory=dict)
    secret: Dict[str, Any] = Field(default_factory=dict)


class DidState(CustomBaseModel):
    """DidState model."""

    state: str = Field(STATE_FINISHED)
    did: Union[str, None] = Field(None)
    didDocument: Union[Dict[str, Any], None] = Field(None)


class RegistrarState(CustomBaseModel):
    """Registrar response envelope."""

    jobId: Union[str, None] = Field(None)
    didState: DidState = Field(default_factory=DidState)
    didRegistrationMetadata: Dict[str, Any] = Field(default_factory=lambda: {"method": "web"})
    didDocumentMetadata: Dict[str, Any] = Field(default_factory=dict)

    @property
    def state(self) -> str:
        """Return the registration state."""
        return self.didState.state

    @property
    def did_document(self) -> Union[Dict[str, Any], None]:
        """Return the document carried by the state."""
        return self.didState.didDocument


class CreateState(RegistrarState):
    """CreateState model."""

    @property
    def id(self) -> Union[str, None]:
        """Return the created DID."""
        return self.didState.did


class UpdateState(RegistrarState):
    """UpdateState model."""


class DeactivateState(RegistrarState):
    """DeactivateState model."""
