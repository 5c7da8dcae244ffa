"""Standalone HTML renderer."""

from html import escape

from api_doc_gen.config import DetailLevel, DocConfig
from api_doc_gen.pipeline.plan import RenderPlan, Section, SectionContent, SectionEntry

from .base import Renderer
from .markdown import (
    EXAMPLES_PLACEHOLDER,
    SCHEMAS_PLACEHOLDER,
    endpoint_description,
    required_label,
    schema_rows,
    visible_parameters,
)


def _table(headers: list[str], rows: list[list[str]]) -> str:
    head = "".join(f"<th>{escape(h)}</th>" for h in headers)
    body = "\n".join("<tr>" + "".join(f"<td>{cell}</td>" for cell in row) + "</tr>" for row in rows)
    return f"<table>\n<thead><tr>{head}</tr></thead>\n<tbody>\n{body}\n</tbody>\n</table>"


class HtmlRenderer(Renderer):
    """Renders a plan as a single HTML5 page; ids match the plan anchors."""

    def render(self, plan: RenderPlan, config: DocConfig) -> str:
        self.config = config
        parts = [
            "<!DOCTYPE html>",
            "<html>",
            "<head>",
            '<meta charset="utf-8">',
            f"<title>{escape(plan.title)}</title>",
            "</head>",
            "<body>",
            f"<h1>{escape(plan.title)}</h1>",
        ]
        if plan.description:
            parts.append(f"<p>{escape(plan.description)}</p>")
        parts.append(f"<p>API Version: {escape(plan.version)}</p>")

        if config.include_toc and plan.toc:
            parts.append(self.render_toc(plan))

        for section in plan.sections:
            parts.extend(self.render_section(section, plan.content))

        parts += ["</body>", "</html>"]
        return "\n".join(parts) + "\n"

    def render_toc(self, plan: RenderPlan) -> str:
        lines = ["<nav>", f"<h2>{escape(plan.toc_heading)}</h2>", "<ul>"]
        for entry in plan.toc:
            link = f'<a href="#{entry.anchor}">{escape(entry.title)}</a>'
            if entry.children:
                children = "".join(
                    f'<li><a href="#{c.anchor}">{escape(c.title)}</a></li>' for c in entry.children
                )
                lines.append(f"<li>{link}<ul>{children}</ul></li>")
            else:
                lines.append(f"<li>{link}</li>")
        lines += ["</ul>", "</nav>"]
        return "\n".join(lines)

    def render_section(self, section: Section, content: SectionContent) -> list[str]:
        parts = [f'<section id="{section.anchor}">', f"<h2>{escape(section.title)}</h2>"]
        if section.description:
            parts.append(f"<p>{escape(section.description)}</p>")

        if not section.entries:
            if section.empty_note:
                parts.append(f"<p>{escape(section.empty_note)}</p>")
        elif content == SectionContent.COMPACT:
            items = "".join(f"<li>{escape(e.title)}</li>" for e in section.entries)
            parts.append(f"<ul>{items}</ul>")
        else:
            for entry in section.entries:
                parts.extend(self.render_endpoint(entry))

        parts.append("</section>")
        return parts

    def render_endpoint(self, entry: SectionEntry) -> list[str]:
        endpoint = entry.endpoint
        config = self.config
        parts = [
            f'<h3 id="{entry.anchor}">{escape(entry.title)}</h3>',
            f"<p><strong>Operation:</strong> {endpoint.method.value} {escape(endpoint.path)}</p>",
        ]

        description = endpoint_description(endpoint)
        if description:
            parts.append(f"<p><strong>Description:</strong> {escape(description)}</p>")
        if endpoint.deprecated:
            parts.append("<blockquote><strong>Deprecated</strong>: This endpoint is deprecated.</blockquote>")
        if endpoint.operation_id:
            parts.append(f"<p><strong>Operation ID:</strong> <code>{escape(endpoint.operation_id)}</code></p>")

        if config.detail_level == DetailLevel.BASIC:
            return parts

        if config.include_auth:
            schemes = ", ".join(f"<code>{escape(s)}</code>" for s in endpoint.security) or "None"
            parts.append(f"<p><strong>Authentication:</strong> {schemes}</p>")

        params = visible_parameters(endpoint, config)
        if params:
            parts.append("<h4>Parameters</h4>")
            parts.append(
                _table(
                    ["Name", "In", "Required", "Description"],
                    [
                        [
                            f"<code>{escape(p.name)}</code>",
                            escape(p.location),
                            required_label(p.required),
                            escape(p.description or "-"),
                        ]
                        for p in params
                    ],
                )
            )

        parts.append("<h4>Responses</h4>")
        parts.append(
            _table(
                ["Code", "Description"],
                [[escape(code), escape(r.description or "-")] for code, r in endpoint.responses.items()],
            )
        )

        if config.detail_level == DetailLevel.FULL:
            if config.include_schemas:
                rows = schema_rows(endpoint)
                if rows:
                    parts.append("<h4>Schemas</h4>")
                    parts.append(
                        _table(["Item", "Schema"], [[escape(i), f"<code>{escape(s)}</code>"] for i, s in rows])
                    )
                else:
                    parts.append(SCHEMAS_PLACEHOLDER)
            if config.include_examples:
                parts.append(EXAMPLES_PLACEHOLDER)
        return parts
