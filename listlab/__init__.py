"""Interactive singly-linked list lab with Graphviz snapshots."""

from .config import ConfigError, ShellConfig, load_config, merge_cli_overrides
from .graph import DOT_PREAMBLE, duplicate_values, generate_graph
from .interactive import (
    ArgLackError,
    ExitRequested,
    HandlerError,
    Interactor,
    Management,
    NoCommandError,
    SnapshotWriter,
    fetch,
    interactive,
    to_words,
)
from .linked_list import EmptyListError, LinkedList, ListNode, ValueNotFoundError
from .manager import LinkedListManager
from .render import GraphvizRenderer, RenderError

__all__ = [
    "ArgLackError",
    "ConfigError",
    "DOT_PREAMBLE",
    "EmptyListError",
    "ExitRequested",
    "GraphvizRenderer",
    "HandlerError",
    "Interactor",
    "LinkedList",
    "LinkedListManager",
    "ListNode",
    "Management",
    "NoCommandError",
    "RenderError",
    "ShellConfig",
    "SnapshotWriter",
    "ValueNotFoundError",
    "duplicate_values",
    "fetch",
    "generate_graph",
    "interactive",
    "load_config",
    "merge_cli_overrides",
    "to_words",
]
