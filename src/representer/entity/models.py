"""Pydantic models for entity declaration files."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator


class ExposureDeclaration(BaseModel):
    """One ``expose`` call as written in a declaration file."""
    attributes: list[str] = Field(min_length=1)
    as_: str | None = Field(default=None, alias="as")
    if_: dict[str, Any] | None = Field(default=None, alias="if")
    unless: dict[str, Any] | None = None
    using: str | None = None

    model_config = {"populate_by_name": True, "extra": "forbid"}

    @field_validator("attributes", mode="before")
    @classmethod
    def _single_attribute(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value

    def to_options(self) -> dict[str, Any]:
        """Exposure options, minus ``using`` which is resolved by name."""
        options: dict[str, Any] = {}
        if self.as_ is not None:
            options["as"] = self.as_
        if self.if_ is not None:
            options["if"] = self.if_
        if self.unless is not None:
            options["unless"] = self.unless
        return options


class EntityDeclaration(BaseModel):
    """An entity type and its exposures, in declaration order."""
    exposures: list[ExposureDeclaration] = Field(default_factory=list)

    model_config = {"extra": "forbid"}
