"""Documentation generation: pipeline plus renderer."""

from api_doc_gen.config import DocConfig
from api_doc_gen.models import Documentation
from api_doc_gen.pipeline.plan import build_plan
from api_doc_gen.renderer.base import get_renderer


def generate_docs(doc: Documentation, config: DocConfig | None = None) -> str:
    """Render a Documentation into the configured output format."""
    config = config or DocConfig()
    plan = build_plan(doc, config)
    return get_renderer(config.output_format).render(plan, config)
