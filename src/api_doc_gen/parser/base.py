"""Raw document models mirroring the OpenAPI / Swagger wire format.

Only the subset needed for documentation is modeled. Unknown fields
are ignored; missing required fields fail validation.
"""

from datetime import date, time

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _scalar_as_text(value):
    """YAML resolves unquoted 1.0, 2024-01-01 or true to non-string scalars."""
    if isinstance(value, (date, time)):
        return value.isoformat()
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return value


class Schema(BaseModel):
    """Schema reference attached to a parameter or response."""

    model_config = ConfigDict(populate_by_name=True)

    schema_type: str | None = Field(default=None, alias="type")
    ref: str | None = Field(default=None, alias="$ref")


class RawParameter(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    location: str = Field(alias="in")
    description: str | None = None
    required: bool | None = None  # unspecified is kept distinct from False
    schema_: Schema | None = Field(default=None, alias="schema")


class RawResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    description: str | None = None
    schema_: Schema | None = Field(default=None, alias="schema")


class Operation(BaseModel):
    """A single operation under one method slot of a path."""

    model_config = ConfigDict(populate_by_name=True)

    tags: list[str] | None = None
    summary: str | None = None
    description: str | None = None
    operation_id: str | None = Field(default=None, alias="operationId")
    parameters: list[RawParameter] | None = None
    responses: dict[str, RawResponse]
    deprecated: bool | None = None
    security: list[dict] | None = None

    @field_validator("responses", mode="before")
    @classmethod
    def _stringify_status_codes(cls, value):
        # YAML loads bare status codes (200:) as integers
        if isinstance(value, dict):
            return {str(code): resp if resp is not None else {} for code, resp in value.items()}
        return value


class PathItem(BaseModel):
    """The eight method slots of one path entry."""

    get: Operation | None = None
    put: Operation | None = None
    post: Operation | None = None
    delete: Operation | None = None
    options: Operation | None = None
    head: Operation | None = None
    patch: Operation | None = None
    trace: Operation | None = None


class Info(BaseModel):
    title: str
    version: str
    description: str | None = None

    @field_validator("title", "version", mode="before")
    @classmethod
    def _as_text(cls, value):
        return _scalar_as_text(value)


class Tag(BaseModel):
    name: str
    description: str | None = None


class RawDocument(BaseModel):
    """Top-level API description as loaded from disk."""

    swagger: str | None = None
    openapi: str | None = None
    info: Info
    tags: list[Tag] | None = None
    paths: dict[str, PathItem]
    security: list[dict] | None = None

    @field_validator("swagger", "openapi", mode="before")
    @classmethod
    def _marker_as_text(cls, value):
        return _scalar_as_text(value)

    @model_validator(mode="after")
    def _require_version_marker(self):
        if self.swagger is None and self.openapi is None:
            raise ValueError("document has neither a 'swagger' nor an 'openapi' version marker")
        return self
