"""Render hook turning written DOT snapshots into images.

:class:`GraphvizRenderer` is handed to :class:`~listlab.interactive.SnapshotWriter`
as an optional side effect. It delegates to :func:`graphviz.render`, which
invokes the ``dot`` executable and writes ``<snapshot>.<format>`` next to the
source file. Graphviz failures are normalised into :class:`RenderError` so the
caller can downgrade them to warnings.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

import graphviz

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = "jpg"
DEFAULT_ENGINE = "dot"

RenderFunc = Callable[[str, str, str], str]


class RenderError(RuntimeError):
    """Raised when a DOT snapshot cannot be rendered into an image."""


class GraphvizRenderer:
    """Callable render hook backed by the Graphviz ``dot`` layout tool."""

    def __init__(
        self,
        fmt: str = DEFAULT_FORMAT,
        engine: str = DEFAULT_ENGINE,
        *,
        render_func: RenderFunc | None = None,
    ) -> None:
        if not fmt:
            raise ValueError("Render format must be a non-empty string")
        self.fmt = fmt
        self.engine = engine
        self._render_func: RenderFunc = render_func or graphviz.render

    def __call__(self, dot_path: Path) -> Path:
        try:
            rendered = self._render_func(self.engine, self.fmt, str(dot_path))
        except graphviz.ExecutableNotFound as exc:
            raise RenderError(
                "Graphviz executable not found. Install Graphviz to enable rendering."
            ) from exc
        except (graphviz.CalledProcessError, OSError) as exc:
            raise RenderError(f"Graphviz failed to render {dot_path}: {exc}") from exc
        logger.info("Rendered %s", rendered)
        return Path(rendered)
