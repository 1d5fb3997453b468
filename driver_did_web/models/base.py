"""Base model shared by every driver model."""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class CustomBaseModel(BaseModel):
    """Base model which dumps by alias and drops unset members."""

    model_config = ConfigDict(populate_by_name=True)

    def model_dump(self, **kwargs) -> Dict[str, Any]:
        """Dump the model using JSON member names."""
        kwargs.setdefault("by_alias", True)
        kwargs.setdefault("exclude_none", True)
        return super().model_dump(**kwargs)
