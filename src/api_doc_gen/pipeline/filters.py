"""Endpoint filtering applied before grouping."""

from api_doc_gen.config import DocConfig
from api_doc_gen.models import Endpoint


class EndpointFilter:
    """Predicate deciding whether an endpoint is documented.

    ``check_services`` controls the service filter. Groupings that list
    services as sections apply it to the sections instead and pass False
    here; every other grouping tests endpoint membership directly.
    """

    def __init__(self, config: DocConfig, check_services: bool = True):
        self.exclude_deprecated = config.exclude_deprecated
        self.path_filter = config.path_filter
        self.methods = set(config.method_filter) if config.method_filter else None
        self.services = set(config.service_filter) if check_services and config.service_filter else None

    def __call__(self, endpoint: Endpoint) -> bool:
        if self.exclude_deprecated and endpoint.deprecated:
            return False
        if self.path_filter is not None and self.path_filter not in endpoint.path:
            return False
        if self.methods is not None and endpoint.method not in self.methods:
            return False
        if self.services is not None and not any(s in self.services for s in endpoint.services):
            return False
        return True

    def apply(self, endpoints: list[Endpoint]) -> list[Endpoint]:
        return [e for e in endpoints if self(e)]
