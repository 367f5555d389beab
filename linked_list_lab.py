"""Command line entry point for the interactive linked list lab.

Commands are read one per line from standard input or from a script file
(``--input``). Every accepted command produces a DOT snapshot of the list,
printed to standard output or written as ``<dir>/<dir><n>.gv`` when
``--output`` names a directory. ``--render`` additionally runs Graphviz on each
written file; render failures are logged as warnings and the session carries
on.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys
from typing import Sequence, TextIO

from listlab.config import (
    LOG_LEVELS,
    ConfigError,
    ShellConfig,
    load_config,
    merge_cli_overrides,
)
from listlab.interactive import Interactor, SnapshotWriter, interactive
from listlab.manager import LinkedListManager
from listlab.render import GraphvizRenderer

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Manipulate a singly-linked list and export Graphviz snapshots.",
    )
    parser.add_argument("-i", "--input", type=Path, help="Input script (defaults to stdin)")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Directory for numbered .gv snapshots (defaults to stdout)",
    )
    parser.add_argument(
        "--render",
        action="store_true",
        default=None,
        help="Render every written snapshot with Graphviz",
    )
    parser.add_argument("--format", dest="render_format", help="Image format for --render")
    parser.add_argument("--config", type=Path, help="JSON or YAML configuration file")
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        help="Configure logging verbosity",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Shortcut for --log-level DEBUG",
    )
    return parser


def _resolve_config(args: argparse.Namespace) -> ShellConfig:
    config = load_config(args.config)
    return merge_cli_overrides(
        config,
        input=args.input,
        output=args.output,
        render=args.render,
        render_format=args.render_format,
        log_level="DEBUG" if args.verbose else args.log_level,
    )


def run(config: ShellConfig, source: TextIO, *, prompt_stream: TextIO | None = None) -> int:
    """Run one session described by *config* reading commands from *source*."""

    render_hook = GraphvizRenderer(config.render_format) if config.render else None
    if render_hook is not None and config.output is None:
        logger.warning("--render has no effect without an output directory")
    writer = SnapshotWriter(config.output, render_hook=render_hook)
    inter = Interactor(LinkedListManager())
    return interactive(inter, source, writer, prompt=config.prompt, prompt_stream=prompt_stream)


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        config = _resolve_config(args)
    except (ConfigError, OSError) as exc:
        logging.basicConfig(level=logging.WARNING)
        logger.error("Failed to load configuration: %s", exc)
        return 1
    logging.basicConfig(level=getattr(logging, config.log_level, logging.WARNING))

    try:
        if config.input is not None:
            with config.input.open(encoding="utf-8") as source:
                emitted = run(config, source)
        else:
            prompt_stream = sys.stdout if sys.stdin.isatty() else None
            emitted = run(config, sys.stdin, prompt_stream=prompt_stream)
    except OSError as exc:
        logger.error("Session aborted: %s", exc)
        return 1
    logger.info("Emitted %s snapshots", emitted)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
