"""Renderer contract shared by every output format."""

from abc import ABC, abstractmethod

from api_doc_gen.config import DocConfig, OutputFormat
from api_doc_gen.errors import RenderError
from api_doc_gen.pipeline.plan import RenderPlan


class Renderer(ABC):
    """Turns a RenderPlan into a finished document."""

    @abstractmethod
    def render(self, plan: RenderPlan, config: DocConfig) -> str:
        """Return the whole document as text."""
        ...


def get_renderer(fmt: OutputFormat) -> Renderer:
    # Backends import Renderer from this module.
    from api_doc_gen.renderer.docusaurus import DocusaurusRenderer
    from api_doc_gen.renderer.html import HtmlRenderer
    from api_doc_gen.renderer.markdown import MarkdownRenderer

    renderers: dict[OutputFormat, type[Renderer]] = {
        OutputFormat.MARKDOWN: MarkdownRenderer,
        OutputFormat.HTML: HtmlRenderer,
        OutputFormat.DOCUSAURUS: DocusaurusRenderer,
    }
    try:
        renderer_cls = renderers[OutputFormat(fmt)]
    except (ValueError, KeyError):
        raise RenderError(f"unsupported output format: {fmt!r}") from None
    return renderer_cls()
