"""Graphviz DOT snapshots of a :class:`~listlab.linked_list.LinkedList`.

The serializer walks the chain once and emits a deterministic DOT document:
a fixed preamble, a plaintext node annotating the list length, then one
``record`` node per element followed by an edge from its ``next`` slot to the
successor. Two calls against an unchanged list are byte-identical.

Node identifiers are derived from the stored value (``"node<value>"``), so two
nodes holding the same value share an identifier and Graphviz merges them.
The collision is reported through the module logger rather than hidden.
"""

from __future__ import annotations

from collections import Counter
import logging
from typing import List

from .linked_list import LinkedList, ListNode

logger = logging.getLogger(__name__)

__all__ = [
    "DOT_PREAMBLE",
    "duplicate_values",
    "generate_graph",
    "node_id",
]

_INDENT = "    "

DOT_PREAMBLE = (
    "digraph LinkedList {",
    f"{_INDENT}rankdir=LR;",
    f"{_INDENT}node [shape=record];",
    f"{_INDENT}edge [tailclip=false, arrowtail=dot, dir=both];",
)


def node_id(node: ListNode) -> str:
    """Return the quoted DOT identifier for *node*."""

    return f'"node{node.value}"'


def duplicate_values(linked_list: LinkedList) -> List[int]:
    """Return values stored more than once, in first-seen order."""

    counts = Counter(linked_list)
    return [value for value, count in counts.items() if count > 1]


def generate_graph(linked_list: LinkedList) -> str:
    """Render *linked_list* as a DOT digraph."""

    collisions = duplicate_values(linked_list)
    if collisions:
        logger.warning(
            "Duplicate values %s share a graph identifier; their nodes will merge",
            collisions,
        )

    lines = list(DOT_PREAMBLE)
    lines.append(
        f'{_INDENT}len [label="len: {linked_list.len()}", shape=plaintext];'
    )
    for node in linked_list.nodes():
        lines.append(f'{_INDENT}{node_id(node)} [label="{{ {node.value} | <next> }}"];')
        if node.next is not None:
            lines.append(f"{_INDENT}{node_id(node)}:next:c -> {node_id(node.next)};")
    lines.append("}")
    return "\n".join(lines) + "\n"
