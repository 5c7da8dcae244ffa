"""Render pipeline: filter, group and sort a Documentation into sections.

The body and the table of contents come out of the same computation, so
every TOC link has a section in the body and every section is listed.
"""

import logging
from enum import Enum

from pydantic import BaseModel, ConfigDict

from api_doc_gen.config import DetailLevel, DocConfig, GroupBy
from api_doc_gen.models import Documentation, Endpoint
from api_doc_gen.pipeline.anchors import AnchorRegistry, compact_title, short_title
from api_doc_gen.pipeline.filters import EndpointFilter
from api_doc_gen.pipeline.grouping import GroupingStrategy, get_strategy
from api_doc_gen.pipeline.sorting import sort_endpoints

logger = logging.getLogger(__name__)


class SectionContent(str, Enum):
    FULL = "full"  # one block per endpoint
    COMPACT = "compact"  # a bare list of endpoint titles


class SectionEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    endpoint: Endpoint
    title: str
    anchor: str | None = None


class Section(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    title: str
    anchor: str
    description: str | None = None
    entries: list[SectionEntry] = []
    empty_note: str | None = None


class TocEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    anchor: str
    children: list["TocEntry"] = []


class RenderPlan(BaseModel):
    """Format-independent layout of one document."""

    model_config = ConfigDict(frozen=True)

    title: str
    version: str
    description: str | None = None
    content: SectionContent
    toc_heading: str
    sections: list[Section]
    toc: list[TocEntry]


def build_plan(doc: Documentation, config: DocConfig) -> RenderPlan:
    """Lay out the document the renderers will emit."""
    if config.detail_level == DetailLevel.SUMMARY:
        # Summary is a service listing with titles only.
        strategy = get_strategy(GroupBy.SERVICE)
        content = SectionContent.COMPACT
    else:
        strategy = get_strategy(config.group_by)
        content = SectionContent.FULL

    # Headings rendered ahead of the sections take their anchors first.
    reserved = (doc.title, strategy.toc_heading) if config.include_toc else (doc.title,)
    sections = plan_sections(doc, config, strategy, content, AnchorRegistry(reserved))
    logger.debug(
        "Planned %d sections (%s grouping, %s content)",
        len(sections),
        type(strategy).__name__,
        content.value,
    )

    return RenderPlan(
        title=doc.title,
        version=doc.version,
        description=doc.description,
        content=content,
        toc_heading=strategy.toc_heading,
        sections=sections,
        toc=build_toc(sections, content),
    )


def plan_sections(
    doc: Documentation,
    config: DocConfig,
    strategy: GroupingStrategy,
    content: SectionContent = SectionContent.FULL,
    anchors: AnchorRegistry | None = None,
) -> list[Section]:
    """The shared filter -> group -> sort computation.

    Anchors are claimed in document order, so repeated titles get numbered
    anchors that match between the body and the table of contents.
    """
    anchors = anchors or AnchorRegistry()
    endpoint_filter = EndpointFilter(config, check_services=not strategy.filters_sections)
    endpoints = endpoint_filter.apply(doc.endpoints)

    keys = strategy.section_keys(doc, endpoints, config)
    buckets: dict[str, list[Endpoint]] = {key: [] for key in keys}
    for endpoint in endpoints:
        for key in dict.fromkeys(strategy.keys_for(endpoint)):
            if key in buckets:
                buckets[key].append(endpoint)

    sections = []
    for key in keys:
        members = sort_endpoints(buckets[key], config.sort_method)
        if not members and not strategy.keep_empty:
            continue

        title = strategy.heading(key)
        anchor = anchors.claim(title)
        sections.append(
            Section(
                key=key,
                title=title,
                anchor=anchor,
                description=strategy.description(doc, key),
                entries=[_entry(endpoint, key, content, anchors) for endpoint in members],
                empty_note=None if members else strategy.empty_note,
            )
        )
    return sections


def build_toc(sections: list[Section], content: SectionContent) -> list[TocEntry]:
    toc = []
    for section in sections:
        children = []
        if content == SectionContent.FULL:
            children = [TocEntry(title=e.title, anchor=e.anchor) for e in section.entries]
        toc.append(TocEntry(title=section.title, anchor=section.anchor, children=children))
    return toc


def _entry(endpoint: Endpoint, key: str, content: SectionContent, anchors: AnchorRegistry) -> SectionEntry:
    if content == SectionContent.COMPACT:
        return SectionEntry(endpoint=endpoint, title=compact_title(endpoint, key))
    title = short_title(endpoint)
    return SectionEntry(endpoint=endpoint, title=title, anchor=anchors.claim(title))
