"""
JSON Output Renderer.

Every command run with `--json` prints exactly one envelope on stdout:

    {"meta": {...}, "status": "success" | "error", "data": ..., "error": ...}

`capture()` swallows anything written to stdout while the command body runs
so stray output can never corrupt the envelope.
"""

import contextlib
import io
import logging
from typing import Any, Iterator, Optional

import click
from pydantic import BaseModel

from .. import __version__
from ..core.exceptions import TfscopeError

logger = logging.getLogger(__name__)


class ErrorDetail(BaseModel):
    code: str
    message: str


class Meta(BaseModel):
    command: str
    version: str = __version__


class Envelope(BaseModel):
    meta: Meta
    status: str
    data: Optional[Any] = None
    error: Optional[ErrorDetail] = None


class JsonRenderer:
    """Renders command results in the standard JSON envelope."""

    def __init__(self, command: str):
        self.command = command

    @contextlib.contextmanager
    def capture(self) -> Iterator[io.StringIO]:
        buffer = io.StringIO()
        with contextlib.redirect_stdout(buffer):
            yield buffer
        if buffer.getvalue():
            logger.debug(f"Suppressed {len(buffer.getvalue())} chars of stdout in JSON mode")

    def render_success(self, data: Any) -> None:
        if isinstance(data, BaseModel):
            data = data.model_dump(mode="json")
        envelope = Envelope(meta=Meta(command=self.command), status="success", data=data)
        click.echo(envelope.model_dump_json(indent=2))

    def render_error(self, error: Exception) -> None:
        code = error.code if isinstance(error, TfscopeError) else "INTERNAL_ERROR"
        envelope = Envelope(
            meta=Meta(command=self.command),
            status="error",
            error=ErrorDetail(code=code, message=str(error)),
        )
        click.echo(envelope.model_dump_json(indent=2))
