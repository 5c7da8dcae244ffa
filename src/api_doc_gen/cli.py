"""CLI entry point for api-doc-gen."""

import logging
from pathlib import Path

import click
from pydantic import ValidationError

from api_doc_gen.builder import parse_openapi
from api_doc_gen.config import DetailLevel, DocConfig, GroupBy, OutputFormat, SortMethod, build_config
from api_doc_gen.errors import ApiDocError, OutputError
from api_doc_gen.generate import generate_docs

logger = logging.getLogger(__name__)


def _choices(enum_cls) -> click.Choice:
    return click.Choice([m.value for m in enum_cls])


def _write_output(text: str, output: Path | None) -> None:
    if output is None:
        click.echo(text, nl=False)
        return
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text, encoding="utf-8")
    except OSError as e:
        raise OutputError(f"cannot write {output}: {e}") from e


@click.command()
@click.argument("doc_path", type=click.Path(path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None, help="Output file path (default: stdout).")
@click.option("--method", is_flag=True, help="Group endpoints by HTTP method instead of by service.")
@click.option("--group-by", default=None, type=click.Choice(["service", "method", "path", "tag"]), help="Grouping method for endpoints.")
@click.option("--flat", is_flag=True, help="Generate a flat list without hierarchical structure.")
@click.option("--service-filter", default=None, help="Include only these services (comma-separated).")
@click.option("--path-filter", default=None, help="Include only paths containing this text.")
@click.option("--method-filter", default=None, help="Include only these HTTP methods (comma-separated).")
@click.option("--exclude-deprecated", is_flag=True, help="Hide deprecated endpoints.")
@click.option("--required-only", is_flag=True, help="Only show required parameters.")
@click.option("--detail", default=DetailLevel.SUMMARY.value, type=_choices(DetailLevel), help="Amount of information per endpoint.")
@click.option("--include-schemas", is_flag=True, help="Include request/response schemas (full detail).")
@click.option("--include-examples", is_flag=True, help="Include request/response examples (full detail).")
@click.option("--include-auth", is_flag=True, help="Show authentication requirements.")
@click.option("--no-toc", is_flag=True, help="Skip the table of contents.")
@click.option("--format", "fmt", default=OutputFormat.MARKDOWN.value, type=_choices(OutputFormat), help="Output format.")
@click.option("--sort", default=SortMethod.ALPHABETICAL.value, type=_choices(SortMethod), help="Sorting method within sections.")
@click.option("-v", "--verbose", is_flag=True, help="Log debug details to stderr.")
def main(
    doc_path: Path,
    output: Path | None,
    method: bool,
    group_by: str | None,
    flat: bool,
    service_filter: str | None,
    path_filter: str | None,
    method_filter: str | None,
    exclude_deprecated: bool,
    required_only: bool,
    detail: str,
    include_schemas: bool,
    include_examples: bool,
    include_auth: bool,
    no_toc: bool,
    fmt: str,
    sort: str,
    verbose: bool,
):
    """Generate API documentation from an OpenAPI/Swagger document."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = build_config(
            flat=flat,
            method=method,
            group_by=GroupBy(group_by) if group_by else None,
            no_toc=no_toc,
            service_filter=service_filter,
            path_filter=path_filter,
            method_filter=method_filter,
            exclude_deprecated=exclude_deprecated,
            required_only=required_only,
            detail_level=detail,
            include_schemas=include_schemas,
            include_examples=include_examples,
            include_auth=include_auth,
            output_format=fmt,
            sort_method=sort,
        )
    except ValidationError as e:
        raise click.BadParameter(str(e)) from e

    try:
        run(doc_path, output, config)
    except ApiDocError as e:
        logger.debug("Run aborted", exc_info=True)
        raise click.ClickException(str(e)) from e


def run(doc_path: Path, output: Path | None, config: DocConfig) -> None:
    """Load, render and write one document. The output is written only once fully rendered."""
    click.echo(f"Parsing {doc_path}...", err=True)
    doc = parse_openapi(doc_path)
    click.echo(f"Found {len(doc.services)} services and {len(doc.endpoints)} endpoints.", err=True)

    text = generate_docs(doc, config)
    _write_output(text, output)

    if output is not None:
        click.echo(f"Documentation written to {output}", err=True)
