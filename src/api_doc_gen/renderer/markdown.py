"""Markdown renderer."""

from api_doc_gen.config import DetailLevel, DocConfig
from api_doc_gen.models import Endpoint
from api_doc_gen.pipeline.plan import RenderPlan, Section, SectionContent, SectionEntry

from .base import Renderer

DEPRECATED_BANNER = "> **Deprecated**: This endpoint is deprecated."
SCHEMAS_PLACEHOLDER = "<!-- Schemas would be included here -->"
EXAMPLES_PLACEHOLDER = "<!-- Examples would be included here -->"


def visible_parameters(endpoint: Endpoint, config: DocConfig):
    """Parameters to list; only an explicit ``required: false`` is dropped by required_only."""
    if not config.required_only:
        return list(endpoint.parameters)
    return [p for p in endpoint.parameters if p.required is not False]


def required_label(required: bool | None) -> str:
    return "Yes" if required else "No"


def endpoint_description(endpoint: Endpoint) -> str | None:
    return endpoint.description or endpoint.summary or None


def schema_rows(endpoint: Endpoint) -> list[tuple[str, str]]:
    rows = []
    for p in endpoint.parameters:
        if p.schema_type:
            rows.append((f"{p.name} ({p.location})", p.schema_type))
    for code, r in endpoint.responses.items():
        if r.schema_type:
            rows.append((code, r.schema_type))
    return rows


def _cell(text: str | None) -> str:
    if not text:
        return "-"
    return " ".join(text.split()).replace("|", "\\|")


def _code(text: str) -> str:
    # GFM splits table rows on pipes even inside code spans
    return text.replace("|", "\\|")


class MarkdownRenderer(Renderer):
    """Renders a plan as GitHub-flavored Markdown."""

    schemas_placeholder = SCHEMAS_PLACEHOLDER
    examples_placeholder = EXAMPLES_PLACEHOLDER

    def render(self, plan: RenderPlan, config: DocConfig) -> str:
        self.config = config
        self.blocks: list[str] = []

        self.write_preamble(plan)
        self.blocks.append(self.heading(1, plan.title))
        if plan.description:
            self.blocks.append(self.escape(plan.description))
        self.blocks.append(f"API Version: {self.escape(plan.version)}")

        if config.include_toc and plan.toc:
            self.write_toc(plan)

        for section in plan.sections:
            self.write_section(section, plan.content)

        return "\n\n".join(self.blocks) + "\n"

    def write_preamble(self, plan: RenderPlan) -> None:
        pass

    def escape(self, text: str) -> str:
        """Prepare prose for the output dialect; plain Markdown needs nothing."""
        return text

    def heading(self, level: int, text: str, anchor: str | None = None) -> str:
        return f"{'#' * level} {self.escape(text)}"

    def write_toc(self, plan: RenderPlan) -> None:
        self.blocks.append(self.heading(2, plan.toc_heading))
        lines = []
        for entry in plan.toc:
            lines.append(f"- [{self.escape(entry.title)}](#{entry.anchor})")
            for child in entry.children:
                lines.append(f"  * [{self.escape(child.title)}](#{child.anchor})")
        self.blocks.append("\n".join(lines))

    def write_section(self, section: Section, content: SectionContent) -> None:
        self.blocks.append(self.heading(2, section.title, section.anchor))
        if section.description:
            self.blocks.append(self.escape(section.description))

        if not section.entries:
            if section.empty_note:
                self.blocks.append(self.escape(section.empty_note))
            return

        if content == SectionContent.COMPACT:
            self.blocks.append("\n".join(f"- {self.escape(e.title)}" for e in section.entries))
            return

        for entry in section.entries:
            self.write_endpoint(entry)

    def write_endpoint(self, entry: SectionEntry) -> None:
        endpoint = entry.endpoint
        config = self.config

        self.blocks.append(self.heading(3, entry.title, entry.anchor))
        self.blocks.append(f"**Operation:** {endpoint.method.value} {self.escape(endpoint.path)}")

        description = endpoint_description(endpoint)
        if description:
            self.blocks.append(f"**Description:** {self.escape(description)}")
        if endpoint.deprecated:
            self.blocks.append(DEPRECATED_BANNER)
        if endpoint.operation_id:
            self.blocks.append(f"**Operation ID:** `{endpoint.operation_id}`")

        if config.detail_level == DetailLevel.BASIC:
            return

        if config.include_auth:
            schemes = ", ".join(f"`{s}`" for s in endpoint.security) or "None"
            self.blocks.append(f"**Authentication:** {schemes}")

        params = visible_parameters(endpoint, config)
        if params:
            rows = [
                "| Name | In | Required | Description |",
                "|------|----|---------:|-------------|",
            ]
            for p in params:
                rows.append(
                    f"| `{_code(p.name)}` | {self.escape(_cell(p.location))} "
                    f"| {required_label(p.required)} | {self.escape(_cell(p.description))} |"
                )
            self.blocks.append(self.heading(4, "Parameters"))
            self.blocks.append("\n".join(rows))

        rows = ["| Code | Description |", "|------|-------------|"]
        for code, response in endpoint.responses.items():
            rows.append(f"| {self.escape(_cell(code))} | {self.escape(_cell(response.description))} |")
        self.blocks.append(self.heading(4, "Responses"))
        self.blocks.append("\n".join(rows))

        if config.detail_level == DetailLevel.FULL:
            if config.include_schemas:
                self.write_schemas(endpoint)
            if config.include_examples:
                self.blocks.append(self.examples_placeholder)

    def write_schemas(self, endpoint: Endpoint) -> None:
        rows = schema_rows(endpoint)
        if not rows:
            self.blocks.append(self.schemas_placeholder)
            return
        lines = ["| Item | Schema |", "|------|--------|"]
        lines += [f"| {self.escape(_cell(item))} | `{_code(schema)}` |" for item, schema in rows]
        self.blocks.append(self.heading(4, "Schemas"))
        self.blocks.append("\n".join(lines))
