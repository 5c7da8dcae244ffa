"""OpenAPI / Swagger document loader.

Reads JSON or YAML API descriptions into the raw document model.
"""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from api_doc_gen.errors import SpecLoadError
from .base import RawDocument

logger = logging.getLogger(__name__)


def load_spec(file_path: Path) -> RawDocument:
    """Load and validate an OpenAPI/Swagger file.

    JSON is parsed through the YAML loader, which accepts it as a subset.
    Raises SpecLoadError for unreadable files, syntax errors and documents
    missing required fields.
    """
    try:
        text = Path(file_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SpecLoadError(f"cannot read {file_path}: {e}") from e

    return load_spec_text(text, source=str(file_path))


def load_spec_text(text: str, source: str = "<string>") -> RawDocument:
    """Parse and validate an API description held in memory."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SpecLoadError(f"{source} is not valid JSON or YAML: {e}") from e

    if not isinstance(data, dict):
        raise SpecLoadError(f"{source} does not contain an API description object")

    try:
        doc = RawDocument.model_validate(data)
    except ValidationError as e:
        raise SpecLoadError(f"{source} is not a valid API description: {_summarize(e)}") from e

    logger.debug("Loaded %s: %d paths", source, len(doc.paths))
    return doc


def _summarize(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(p) for p in item["loc"]) or "<root>"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)
