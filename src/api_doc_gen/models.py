"""Canonical documentation model.

The builder turns a raw document into these models; the pipeline and
every renderer consume them and nothing else.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator

UNTAGGED = "Untagged"


class HttpMethod(str, Enum):
    """The eight HTTP verbs, in the order sections and slots are visited."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    OPTIONS = "OPTIONS"
    HEAD = "HEAD"
    TRACE = "TRACE"

    @classmethod
    def parse(cls, value: str) -> "HttpMethod":
        try:
            return cls(value.strip().upper())
        except ValueError:
            raise ValueError(f"unknown HTTP method: {value!r}") from None


class Parameter(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    location: str  # path / query / header / body / formData / cookie
    required: bool | None = None
    description: str | None = None
    schema_type: str | None = None


class Response(BaseModel):
    model_config = ConfigDict(frozen=True)

    description: str | None = None
    schema_type: str | None = None


class Service(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str | None = None


class Endpoint(BaseModel):
    """One (path, method) operation with its documentation metadata."""

    model_config = ConfigDict(frozen=True)

    path: str
    method: HttpMethod
    services: list[str]
    tags: list[str] = []
    summary: str | None = None
    description: str | None = None
    operation_id: str | None = None
    parameters: list[Parameter] = []
    responses: dict[str, Response] = {}
    deprecated: bool = False
    security: list[str] = []

    @field_validator("method", mode="before")
    @classmethod
    def _canonical_method(cls, value):
        if isinstance(value, str) and not isinstance(value, HttpMethod):
            return HttpMethod.parse(value)
        return value

    @field_validator("services")
    @classmethod
    def _never_serviceless(cls, value: list[str]) -> list[str]:
        return value or [UNTAGGED]


class Documentation(BaseModel):
    """The whole API: metadata, services and endpoints in build order."""

    model_config = ConfigDict(frozen=True)

    title: str
    version: str
    description: str | None = None
    services: list[Service] = []
    endpoints: list[Endpoint] = []

    def service(self, name: str) -> Service | None:
        for service in self.services:
            if service.name == name:
                return service
        return None
