"""Run configuration for documentation generation."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator

from api_doc_gen.models import HttpMethod


class GroupBy(str, Enum):
    SERVICE = "service"
    METHOD = "method"
    PATH = "path"
    TAG = "tag"
    FLAT = "flat"


class DetailLevel(str, Enum):
    SUMMARY = "summary"
    BASIC = "basic"
    STANDARD = "standard"
    FULL = "full"


class OutputFormat(str, Enum):
    MARKDOWN = "markdown"
    HTML = "html"
    DOCUSAURUS = "docusaurus"


class SortMethod(str, Enum):
    ALPHABETICAL = "alpha"
    PATH_LENGTH = "path-length"
    NONE = "none"


def _split_csv(value):
    if value is None:
        return None
    if isinstance(value, str):
        value = value.split(",")
    items = [(v.value if isinstance(v, Enum) else str(v)).strip() for v in value]
    return [item for item in items if item] or None


class DocConfig(BaseModel):
    """Read-only settings for one generation run."""

    model_config = ConfigDict(frozen=True)

    group_by: GroupBy = GroupBy.SERVICE
    service_filter: list[str] | None = None
    path_filter: str | None = None
    method_filter: list[HttpMethod] | None = None
    exclude_deprecated: bool = False
    required_only: bool = False
    detail_level: DetailLevel = DetailLevel.SUMMARY
    include_schemas: bool = False
    include_examples: bool = False
    include_auth: bool = False
    include_toc: bool = True
    output_format: OutputFormat = OutputFormat.MARKDOWN
    sort_method: SortMethod = SortMethod.ALPHABETICAL

    @field_validator("service_filter", mode="before")
    @classmethod
    def _split_services(cls, value):
        return _split_csv(value)

    @field_validator("method_filter", mode="before")
    @classmethod
    def _parse_methods(cls, value):
        items = _split_csv(value)
        if items is None:
            return None
        return [HttpMethod.parse(item) for item in items]

    @field_validator("path_filter", mode="before")
    @classmethod
    def _empty_path_is_none(cls, value):
        return value or None


def resolve_group_by(flat: bool = False, method: bool = False, group_by: GroupBy | str | None = None) -> GroupBy:
    """Pick the grouping mode: --flat beats --method beats --group-by beats the default."""
    if flat:
        return GroupBy.FLAT
    if method:
        return GroupBy.METHOD
    if group_by:
        return GroupBy(group_by)
    return GroupBy.SERVICE


def build_config(
    *,
    flat: bool = False,
    method: bool = False,
    group_by: GroupBy | str | None = None,
    no_toc: bool = False,
    **options,
) -> DocConfig:
    """Build a DocConfig from command-line style switches."""
    return DocConfig(
        group_by=resolve_group_by(flat=flat, method=method, group_by=group_by),
        include_toc=not no_toc,
        **options,
    )
