"""Titles and link anchors for sections and endpoints."""

from api_doc_gen.models import Endpoint


def to_anchor(text: str) -> str:
    """Convert a heading title into a Markdown link anchor."""
    lowered = text.lower().replace(" ", "-")
    return "".join(c for c in lowered if (c.isascii() and c.isalnum()) or c == "-")


def short_title(endpoint: Endpoint) -> str:
    """Shorter title for an endpoint heading or TOC entry.

    Operation id if present; else the first summary word when it looks like
    an identifier (has an uppercase letter), otherwise the whole summary;
    else "METHOD /path".
    """
    if endpoint.operation_id:
        return endpoint.operation_id

    if endpoint.summary and endpoint.summary.strip():
        first_word = endpoint.summary.split()[0]
        if any(c.isupper() for c in first_word):
            return first_word
        return endpoint.summary

    return f"{endpoint.method.value} {endpoint.path}"


def compact_title(endpoint: Endpoint, section_key: str) -> str:
    """Short title with a leading "<Service>_" dropped from the operation id."""
    prefix = f"{section_key}_"
    operation_id = endpoint.operation_id
    if operation_id and operation_id.startswith(prefix) and len(operation_id) > len(prefix):
        return operation_id[len(prefix):]
    return short_title(endpoint)


class AnchorRegistry:
    """Hands out anchors unique within one document.

    Repeats are numbered the way GitHub numbers duplicate headings
    (``x``, ``x-1``, ``x-2``); titles with no usable characters become
    ``section``.
    """

    def __init__(self, reserved: tuple[str, ...] = ()):
        self._counts: dict[str, int] = {}
        self._used: set[str] = set()
        for title in reserved:
            self.claim(title)

    def claim(self, title: str) -> str:
        base = to_anchor(title) or "section"
        count = self._counts.get(base, 0)
        anchor = f"{base}-{count}" if count else base
        while anchor in self._used:
            count += 1
            anchor = f"{base}-{count}"
        self._counts[base] = count + 1
        self._used.add(anchor)
        return anchor
