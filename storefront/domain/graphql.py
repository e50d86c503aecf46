from typing import Any

from pydantic import BaseModel, Field, field_validator


class GraphQLRequest(BaseModel):
    """A single query or mutation sent to the Storefront API."""

    query: str
    variables: dict[str, Any] | None = None

    @field_validator("query")
    @classmethod
    def _query_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("query must not be empty")
        return value

    def to_payload(self) -> dict:
        """Return the JSON body, leaving ``variables`` out when unset."""
        return self.model_dump(mode="json", exclude_none=True)


class GraphQLErrorLocation(BaseModel):
    line: int
    column: int


class GraphQLError(BaseModel):
    """One entry of the top-level ``errors`` list."""

    message: str
    locations: list[GraphQLErrorLocation] = Field(default_factory=list)
    path: list[str | int] = Field(default_factory=list)
    extensions: dict[str, Any] = Field(default_factory=dict)


class GraphQLResponse(BaseModel):
    """Parsed response envelope: ``{data, errors?, extensions?}``."""

    data: dict[str, Any] | None = None
    errors: list[GraphQLError] = Field(default_factory=list)
    extensions: dict[str, Any] = Field(default_factory=dict)

    @field_validator("errors", mode="before")
    @classmethod
    def _null_errors_to_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def error_messages(self, separator: str = ", ") -> str:
        return separator.join(error.message for error in self.errors)
