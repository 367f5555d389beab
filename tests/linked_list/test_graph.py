from __future__ import annotations

import logging

import pytest

from listlab.graph import DOT_PREAMBLE, duplicate_values, generate_graph
from listlab.linked_list import LinkedList

PREAMBLE = "\n".join(DOT_PREAMBLE)


def test_empty_list_emits_preamble_and_zero_length() -> None:
    expected = PREAMBLE + '\n    len [label="len: 0", shape=plaintext];\n}\n'
    assert generate_graph(LinkedList()) == expected


def test_single_node_has_no_edges() -> None:
    graph = generate_graph(LinkedList([1]))
    assert graph == (
        PREAMBLE
        + "\n"
        + '    len [label="len: 1", shape=plaintext];\n'
        + '    "node1" [label="{ 1 | <next> }"];\n'
        + "}\n"
    )
    assert "->" not in graph


def test_three_nodes_in_order_with_edges() -> None:
    graph = generate_graph(LinkedList([0, 1, 2]))
    assert graph.splitlines() == [
        "digraph LinkedList {",
        "    rankdir=LR;",
        "    node [shape=record];",
        "    edge [tailclip=false, arrowtail=dot, dir=both];",
        '    len [label="len: 3", shape=plaintext];',
        '    "node0" [label="{ 0 | <next> }"];',
        '    "node0":next:c -> "node1";',
        '    "node1" [label="{ 1 | <next> }"];',
        '    "node1":next:c -> "node2";',
        '    "node2" [label="{ 2 | <next> }"];',
        "}",
    ]


def test_output_is_stable_across_calls() -> None:
    linked = LinkedList([5, -4, 3])
    assert generate_graph(linked) == generate_graph(linked)


def test_negative_values_use_quoted_identifiers() -> None:
    graph = generate_graph(LinkedList([-1, 2]))
    assert '"node-1":next:c -> "node2";' in graph


def test_duplicate_values_are_flagged(caplog: pytest.LogCaptureFixture) -> None:
    linked = LinkedList([3, 1, 3, 1, 2])
    assert duplicate_values(linked) == [3, 1]
    with caplog.at_level(logging.WARNING, logger="listlab.graph"):
        generate_graph(linked)
    assert "share a graph identifier" in caplog.text


def test_unique_values_do_not_warn(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="listlab.graph"):
        generate_graph(LinkedList([1, 2, 3]))
    assert caplog.records == []
