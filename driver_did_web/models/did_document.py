"""DID Document model."""

from typing import Any, Dict, Union

from pydantic import ConfigDict, Field

from .base import CustomBaseModel


class DidDocument(CustomBaseModel):
    """DID Document model.

    The document is treated as an opaque JSON object. Only ``id`` is read by
    the driver; every other member, ``@context`` included, is carried through
    untouched under its own name, nulls included.
    """

    model_config = ConfigDict(
        populate_by_name=False,
        extra="allow",
        json_schema_extra={
            "examples": [
                {
                    "@context": ["https://www.w3.org/ns/did/v1"],
                    "id": "did:web:example.com:user:alice",
                }
            ]
        },
    )

    id: Union[str, None] = Field(None)

    def model_dump(self, **kwargs) -> Dict[str, Any]:
        """Dump only the members the document was built with."""
        kwargs.setdefault("exclude_unset", True)
        kwargs.setdefault("exclude_none", False)
        return super().model_dump(**kwargs)

    def with_id(self, did: str) -> "DidDocument":
        """Return a copy of this document carrying the given id."""
        return self.model_copy(update={"id": did}, deep=True)
