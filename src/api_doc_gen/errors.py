"""Exceptions raised by the documentation pipeline.

Every failure aborts the whole run. The ``stage`` attribute tells the
caller where it happened.
"""


class ApiDocError(Exception):
    """Base class for all api-doc-gen failures."""

    stage = "generating"

    def __str__(self) -> str:
        return f"{self.stage} failed: {super().__str__()}"


class SpecLoadError(ApiDocError):
    """The input document could not be read, parsed or validated."""

    stage = "loading"


class RenderError(ApiDocError):
    """A renderer could not produce the document."""

    stage = "rendering"


class OutputError(ApiDocError):
    """The output destination could not be created or written."""

    stage = "writing"
