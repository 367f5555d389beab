from __future__ import annotations

import pytest

from listlab.graph import generate_graph
from listlab.interactive import Interactor, Management, NoCommandError
from listlab.linked_list import LinkedList
from listlab.manager import COMMANDS, LinkedListManager


@pytest.fixture()
def echoed() -> list[str]:
    return []


@pytest.fixture()
def manager(echoed: list[str]) -> LinkedListManager:
    return LinkedListManager(echo=echoed.append)


def test_manager_satisfies_protocol(manager: LinkedListManager) -> None:
    assert isinstance(manager, Management)


def test_insert_commands(manager: LinkedListManager) -> None:
    assert manager.assign_job("it", ["2"])
    assert manager.assign_job("ih", ["1"])
    assert manager.assign_job("it", ["-3"])
    assert manager.list.list() == [1, 2, -3]


def test_remove_command(manager: LinkedListManager) -> None:
    manager.assign_job("it", ["1"])
    manager.assign_job("it", ["2"])
    assert manager.assign_job("rm", ["1"])
    assert manager.list.list() == [2]


def test_remove_missing_value_is_rejected(manager: LinkedListManager) -> None:
    manager.assign_job("it", ["1"])
    assert not manager.assign_job("rm", ["5"])
    assert manager.list.list() == [1]


@pytest.mark.parametrize(
    "cmd, args",
    [
        ("it", ["abc"]),
        ("ih", ["1.5"]),
        ("rm", ["x"]),
        ("it", []),
        ("it", ["1", "2"]),
        ("ls", ["extra"]),
        ("it", ["1_000"]),
        ("it", ["٣"]),
        ("ih", ["+"]),
    ],
)
def test_malformed_arguments_do_not_mutate(
    manager: LinkedListManager, cmd: str, args: list[str]
) -> None:
    manager.assign_job("it", ["7"])
    assert not manager.assign_job(cmd, args)
    assert manager.list.list() == [7]


def test_unknown_command(manager: LinkedListManager) -> None:
    assert not manager.assign_job("push", ["1"])


def test_query_commands_echo(manager: LinkedListManager, echoed: list[str]) -> None:
    for value in ("1", "2", "3", "4"):
        manager.assign_job("it", [value])
    assert manager.assign_job("ls", [])
    assert manager.assign_job("len", [])
    assert manager.assign_job("mid", [])
    assert echoed == ["[1, 2, 3, 4]", "Len: 4", "Mid: 3"]


def test_mid_on_empty_list_is_rejected(
    manager: LinkedListManager, echoed: list[str]
) -> None:
    assert not manager.assign_job("mid", [])
    assert echoed == []


def test_help_lists_every_command(manager: LinkedListManager, echoed: list[str]) -> None:
    assert manager.assign_job("help", [])
    assert echoed[0] == "COMMAND:"
    for cmd in COMMANDS:
        assert any(line.strip().startswith(cmd) for line in echoed[1:])
    assert echoed[-1].strip().startswith("exit")


def test_gen_graph_reflects_list(manager: LinkedListManager) -> None:
    manager.assign_job("it", ["0"])
    manager.assign_job("it", ["1"])
    assert manager.gen_graph() == generate_graph(LinkedList([0, 1]))


def test_uses_supplied_list() -> None:
    linked = LinkedList([9])
    manager = LinkedListManager(linked, echo=lambda _: None)
    manager.assign_job("it", ["10"])
    assert linked.list() == [9, 10]


def test_interactor_shows_help_on_rejection(echoed: list[str]) -> None:
    manager = LinkedListManager(echo=echoed.append)
    with pytest.raises(NoCommandError):
        Interactor(manager).handle_cmd(["rm", "4"])
    assert echoed[0] == "COMMAND:"
