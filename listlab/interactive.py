"""Read-evaluate-emit loop driving a pluggable command backend.

The loop knows nothing about linked lists. It tokenises each input line,
forwards the command to a :class:`Management` capability and, when the
capability accepts it, asks for a fresh graph snapshot and hands it to a
:class:`SnapshotWriter`. Rejected or empty lines only affect the current
iteration; ``exit`` or end of input terminates the loop.
"""

from __future__ import annotations

import logging
from pathlib import Path
import sys
from typing import Callable, Optional, Protocol, Sequence, TextIO, runtime_checkable

from .render import RenderError

logger = logging.getLogger(__name__)

__all__ = [
    "EXIT_COMMAND",
    "HELP_COMMAND",
    "ArgLackError",
    "ExitRequested",
    "HandlerError",
    "Interactor",
    "Management",
    "NoCommandError",
    "SnapshotWriter",
    "fetch",
    "interactive",
    "to_words",
]

EXIT_COMMAND = "exit"
HELP_COMMAND = "help"
GRAPH_SUFFIX = ".gv"


@runtime_checkable
class Management(Protocol):
    """Capability consumed by :class:`Interactor`."""

    def assign_job(self, cmd: str, args: Sequence[str]) -> bool:
        """Apply *cmd* with *args*; return ``False`` when it is not recognised."""

    def gen_graph(self) -> str:
        """Return a graph description of the current state."""


class HandlerError(Exception):
    """Base class for outcomes that stop a single dispatch."""


class ArgLackError(HandlerError):
    """The input line contained no tokens."""


class NoCommandError(HandlerError):
    """The capability did not recognise or could not apply the command."""

    def __init__(self, cmd: str, args: Sequence[str]) -> None:
        super().__init__(f"Command rejected: {' '.join([cmd, *args])}")
        self.cmd = cmd
        self.arguments = tuple(args)


class ExitRequested(HandlerError):
    """The user asked to leave the loop."""


class Interactor:
    """Route tokenised commands to a :class:`Management` backend."""

    def __init__(self, manager: Management) -> None:
        self.manager = manager

    def handle_cmd(self, words: Sequence[str]) -> None:
        """Dispatch *words*; raise a :class:`HandlerError` when nothing was applied."""

        if not words:
            raise ArgLackError("No command given")
        cmd, *args = words
        if cmd == EXIT_COMMAND:
            raise ExitRequested()
        logger.debug("Dispatching %r with args %r", cmd, args)
        if self.manager.assign_job(cmd, args):
            return
        self.manager.assign_job(HELP_COMMAND, [])
        raise NoCommandError(cmd, args)

    def gen_graph(self) -> str:
        return self.manager.gen_graph()


def to_words(line: str) -> list[str]:
    """Split *line* on single spaces, trimming tokens and dropping empty ones."""

    words = (word.strip() for word in line.split(" "))
    return [word for word in words if word]


def fetch(source: TextIO) -> Optional[str]:
    """Return the next line from *source* or ``None`` at end of input."""

    line = source.readline()
    if not line:
        return None
    return line


class SnapshotWriter:
    """Emit graph snapshots to a stream or to numbered files in a directory.

    With a *directory* configured every snapshot lands in
    ``<directory>/<directory name><n>.gv`` where ``n`` starts at zero and
    increments per snapshot. The optional *render_hook* receives each written
    path; failures it raises as ``RenderError`` are logged and otherwise
    ignored so a missing layout tool never stops the session.
    """

    def __init__(
        self,
        directory: Path | None = None,
        *,
        stream: TextIO | None = None,
        render_hook: Callable[[Path], Path] | None = None,
    ) -> None:
        self.directory = directory
        self.stream = stream
        self.render_hook = render_hook
        self.count = 0

    def create_dir(self) -> None:
        if self.directory is not None:
            self.directory.mkdir(parents=True, exist_ok=True)

    def next_path(self) -> Path:
        if self.directory is None:
            raise ValueError("No output directory configured")
        return self.directory / f"{self.directory.name}{self.count}{GRAPH_SUFFIX}"

    def write_graph(self, graph: str) -> Path | None:
        """Persist *graph* and return the file path, or ``None`` for streams."""

        if self.directory is None:
            stream = self.stream or sys.stdout
            stream.write(graph)
            stream.flush()
            self.count += 1
            return None

        path = self.next_path()
        path.write_text(graph, encoding="utf-8")
        self.count += 1
        logger.debug("Wrote snapshot to %s", path)
        if self.render_hook is not None:
            try:
                self.render_hook(path)
            except RenderError as exc:
                logger.warning("Render failed for %s: %s", path, exc)
        return path


def interactive(
    inter: Interactor,
    source: TextIO,
    writer: SnapshotWriter,
    *,
    prompt: str = "> ",
    prompt_stream: TextIO | None = None,
) -> int:
    """Run the command loop until ``exit`` or end of input.

    Returns the number of snapshots emitted.
    """

    writer.create_dir()
    emitted = 0
    while True:
        if prompt_stream is not None:
            prompt_stream.write(prompt)
            prompt_stream.flush()
        line = fetch(source)
        if line is None:
            logger.debug("End of input reached")
            break
        try:
            inter.handle_cmd(to_words(line))
        except ExitRequested:
            logger.debug("Exit requested")
            break
        except ArgLackError:
            logger.debug("Ignoring empty line")
            continue
        except NoCommandError as exc:
            logger.info("%s", exc)
            continue
        writer.write_graph(inter.gen_graph())
        emitted += 1
    return emitted
