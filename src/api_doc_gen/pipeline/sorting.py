"""Ordering of endpoints within a section."""

from api_doc_gen.config import SortMethod
from api_doc_gen.models import Endpoint


def _by_operation_id(endpoint: Endpoint) -> str:
    return endpoint.operation_id or ""


def _by_path_length(endpoint: Endpoint) -> int:
    return len(endpoint.path)


SORT_KEYS = {
    SortMethod.ALPHABETICAL: _by_operation_id,
    SortMethod.PATH_LENGTH: _by_path_length,
    SortMethod.NONE: None,
}


def sort_endpoints(endpoints: list[Endpoint], method: SortMethod) -> list[Endpoint]:
    """Return endpoints ordered by the configured method (stable)."""
    key = SORT_KEYS[method]
    if key is None:
        return list(endpoints)
    return sorted(endpoints, key=key)
