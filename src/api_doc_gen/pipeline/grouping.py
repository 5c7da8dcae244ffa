"""Grouping strategies: how endpoints are assigned to named sections."""

from abc import ABC, abstractmethod

from api_doc_gen.config import DocConfig, GroupBy
from api_doc_gen.models import UNTAGGED, Documentation, Endpoint, HttpMethod


class GroupingStrategy(ABC):
    """Assigns endpoints to section keys and orders the sections."""

    toc_heading = "Contents"
    # Keep sections that end up with no endpoints.
    keep_empty = False
    empty_note: str | None = None
    # The service filter selects sections rather than endpoints.
    filters_sections = False

    @abstractmethod
    def section_keys(self, doc: Documentation, endpoints: list[Endpoint], config: DocConfig) -> list[str]:
        """Ordered section keys, given the endpoints that passed filtering."""

    @abstractmethod
    def keys_for(self, endpoint: Endpoint) -> list[str]:
        """Section keys an endpoint belongs to."""

    def heading(self, key: str) -> str:
        return key

    def description(self, doc: Documentation, key: str) -> str | None:
        return None


class ServiceGrouping(GroupingStrategy):
    toc_heading = "Services"
    keep_empty = True
    empty_note = "No endpoints found for this service."
    filters_sections = True

    def section_keys(self, doc, endpoints, config):
        wanted = set(config.service_filter) if config.service_filter else None
        keys = [s.name for s in doc.services if wanted is None or s.name in wanted]

        if UNTAGGED not in keys and (wanted is None or UNTAGGED in wanted):
            if any(UNTAGGED in e.services for e in endpoints):
                keys.append(UNTAGGED)
        return keys

    def keys_for(self, endpoint):
        return endpoint.services

    def description(self, doc, key):
        service = doc.service(key)
        return service.description if service else None


class MethodGrouping(GroupingStrategy):
    toc_heading = "HTTP Methods"

    def section_keys(self, doc, endpoints, config):
        present = {e.method for e in endpoints}
        return [m.value for m in HttpMethod if m in present]

    def keys_for(self, endpoint):
        return [endpoint.method.value]


class PathGrouping(GroupingStrategy):
    toc_heading = "Paths"

    def section_keys(self, doc, endpoints, config):
        return list(dict.fromkeys(e.path for e in endpoints))

    def keys_for(self, endpoint):
        return [endpoint.path]


class TagGrouping(GroupingStrategy):
    toc_heading = "Tags"

    def section_keys(self, doc, endpoints, config):
        keys: dict[str, None] = {}
        for endpoint in endpoints:
            keys.update(dict.fromkeys(self.keys_for(endpoint)))
        return list(keys)

    def keys_for(self, endpoint):
        return endpoint.tags or [UNTAGGED]


class FlatGrouping(GroupingStrategy):
    """Everything in one section."""

    section = "Endpoints"

    def section_keys(self, doc, endpoints, config):
        return [self.section] if endpoints else []

    def keys_for(self, endpoint):
        return [self.section]


STRATEGIES: dict[GroupBy, type[GroupingStrategy]] = {
    GroupBy.SERVICE: ServiceGrouping,
    GroupBy.METHOD: MethodGrouping,
    GroupBy.PATH: PathGrouping,
    GroupBy.TAG: TagGrouping,
    GroupBy.FLAT: FlatGrouping,
}


def get_strategy(group_by: GroupBy) -> GroupingStrategy:
    return STRATEGIES[group_by]()
