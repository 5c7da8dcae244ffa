"""Model builder: raw document to canonical Documentation."""

import logging
from pathlib import Path

from api_doc_gen.models import (
    UNTAGGED,
    Documentation,
    Endpoint,
    HttpMethod,
    Parameter,
    Response,
    Service,
)
from api_doc_gen.parser.base import Operation, PathItem, RawDocument, Schema
from api_doc_gen.parser.loader import load_spec

logger = logging.getLogger(__name__)


def parse_openapi(file_path: Path) -> Documentation:
    """Load an OpenAPI/Swagger file and build its Documentation."""
    return build_documentation(load_spec(file_path))


def build_documentation(raw: RawDocument) -> Documentation:
    services = _extract_services(raw)
    endpoints = _extract_endpoints(raw, services)
    logger.debug("Built %d services and %d endpoints", len(services), len(endpoints))

    return Documentation(
        title=raw.info.title,
        version=raw.info.version,
        description=raw.info.description,
        services=services,
        endpoints=endpoints,
    )


def iter_operations(path_item: PathItem):
    """Yield (method, operation) for every present slot, in HttpMethod order."""
    for method in HttpMethod:
        operation = getattr(path_item, method.value.lower())
        if operation is not None:
            yield method, operation


def _extract_services(raw: RawDocument) -> list[Service]:
    if raw.tags:
        services: list[Service] = []
        seen: set[str] = set()
        for tag in raw.tags:
            if tag.name in seen:
                continue
            seen.add(tag.name)
            services.append(Service(name=tag.name, description=tag.description))
        return services

    # No declared tags: infer one service per distinct operation tag.
    names: set[str] = set()
    for path_item in raw.paths.values():
        for _, operation in iter_operations(path_item):
            names.update(operation.tags or [])

    logger.debug("No tags declared, inferred %d services from operations", len(names))
    return [Service(name=name) for name in sorted(names)]


def _extract_endpoints(raw: RawDocument, services: list[Service]) -> list[Endpoint]:
    known = {s.name for s in services}
    endpoints = []

    for path, path_item in raw.paths.items():
        for method, operation in iter_operations(path_item):
            endpoints.append(_build_endpoint(raw, path, method, operation, known))

    return endpoints


def _build_endpoint(
    raw: RawDocument,
    path: str,
    method: HttpMethod,
    operation: Operation,
    known: set[str],
) -> Endpoint:
    tags = operation.tags or []
    services = [t for t in dict.fromkeys(tags) if t in known] or [UNTAGGED]

    return Endpoint(
        path=path,
        method=method,
        services=services,
        tags=tags,
        summary=operation.summary,
        description=operation.description,
        operation_id=operation.operation_id,
        parameters=[
            Parameter(
                name=p.name,
                location=p.location,
                required=p.required,
                description=p.description,
                schema_type=_schema_label(p.schema_),
            )
            for p in operation.parameters or []
        ],
        responses={
            code: Response(description=r.description, schema_type=_schema_label(r.schema_))
            for code, r in operation.responses.items()
        },
        deprecated=bool(operation.deprecated),
        security=_security_schemes(operation.security if operation.security is not None else raw.security),
    )


def _schema_label(schema: Schema | None) -> str | None:
    if schema is None:
        return None
    if schema.ref:
        return schema.ref.rsplit("/", 1)[-1]
    return schema.schema_type


def _security_schemes(requirements: list[dict] | None) -> list[str]:
    names: list[str] = []
    for requirement in requirements or []:
        for name in requirement:
            if name not in names:
                names.append(name)
    return names
