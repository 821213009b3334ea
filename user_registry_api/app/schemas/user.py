"""
Pydantic models for user records.

A record carries a name, an age, an optional gender and a marriage
flag.  The JSON key for the flag is ``isMarried``; Python code uses
``is_married``.  Types are strict: ``"21"`` is not an age and
``"true"`` is not a boolean.  Ages must be finite.  Unknown keys in a
payload are dropped.
"""

from typing import Optional, Union

from pydantic import BaseModel, Field, StrictBool, StrictInt, StrictStr, confloat, model_validator

# NaN and the infinities are not ages.
Age = Union[StrictInt, confloat(strict=True, allow_inf_nan=False)]


class UserBase(BaseModel):
    name: StrictStr = Field(..., min_length=3, examples=["Anshul"])
    age: Age = Field(..., examples=[21])
    gender: Optional[StrictStr] = Field(None, examples=["male"])
    is_married: StrictBool = Field(..., alias="isMarried", examples=[False])

    model_config = {
        "populate_by_name": True,
        "extra": "ignore",
    }


class UserCreate(UserBase):
    """Schema for creating a user.

    ``name``, ``age`` and ``isMarried`` are required; ``gender`` may be
    omitted.  The name must be at least three characters long.
    """


class UserRead(UserBase):
    """Schema for a stored user, as returned by the API."""


class UserUpdate(BaseModel):
    """Schema for updating an existing user.

    All fields are optional; only provided values are merged into the
    stored record.  ``gender`` may be set to ``null`` to clear it, the
    other fields may not.
    """

    name: Optional[StrictStr] = Field(None, min_length=3)
    age: Optional[Age] = None
    gender: Optional[StrictStr] = None
    is_married: Optional[StrictBool] = Field(None, alias="isMarried")

    model_config = {
        "populate_by_name": True,
        "extra": "ignore",
    }

    @model_validator(mode="after")
    def reject_null_required_fields(self) -> "UserUpdate":
        for field in ("name", "age", "is_married"):
            if field in self.model_fields_set and getattr(self, field) is None:
                alias = type(self).model_fields[field].alias or field
                raise ValueError(f"{alias} may not be null")
        return self

    def changes(self) -> dict:
        """Return the fields the client actually sent, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)
