"""Docusaurus renderer: MDX-safe Markdown with front matter and heading ids."""

import yaml

from api_doc_gen.pipeline.plan import RenderPlan

from .markdown import MarkdownRenderer

# MDX reads braces as JSX expressions and "<" as the start of a tag.
_MDX_ESCAPES = str.maketrans({"{": "\\{", "}": "\\}", "<": "&lt;"})


class DocusaurusRenderer(MarkdownRenderer):
    schemas_placeholder = "{/* Schemas would be included here */}"
    examples_placeholder = "{/* Examples would be included here */}"

    def write_preamble(self, plan: RenderPlan) -> None:
        front_matter = {"title": plan.title, "sidebar_label": plan.title}
        if plan.description:
            front_matter["description"] = " ".join(plan.description.split())
        body = yaml.safe_dump(front_matter, sort_keys=False, allow_unicode=True).strip()
        self.blocks.append(f"---\n{body}\n---")

    def escape(self, text: str) -> str:
        return text.translate(_MDX_ESCAPES)

    def heading(self, level: int, text: str, anchor: str | None = None) -> str:
        if anchor:
            return f"{'#' * level} {self.escape(text)} {{#{anchor}}}"
        return super().heading(level, text, anchor)
