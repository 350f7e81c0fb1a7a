"""Shared schema building blocks."""

from __future__ import annotations

from typing import Annotated, Any, Dict, Literal

from pydantic import BaseModel, Field, model_validator

# Identity-like strings (names, codes, numbers, keys) must not be blank
NonEmptyStr = Annotated[str, Field(min_length=1)]


class PatchModel(BaseModel):
    """Partial update payload.

    Every field is optional; only the fields the caller actually sent are
    applied. Sending an explicit ``null`` is rejected.
    """

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        nulls = sorted(name for name in self.model_fields_set if getattr(self, name) is None)
        if nulls:
            raise ValueError(f"Fields cannot be null: {', '.join(nulls)}")
        return self

    def changes(self) -> Dict[str, Any]:
        """The sent fields only."""
        return self.model_dump(exclude_unset=True)


class InsertResult(BaseModel):
    """What the store reports after an insert."""

    id: int
    affected_rows: int = 1


class SuccessResponse(BaseModel):
    """Fixed acknowledgement returned by update/delete/toggle procedures."""

    success: Literal[True] = True


class IdInput(BaseModel):
    id: int
