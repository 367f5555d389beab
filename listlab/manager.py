"""Command backend exposing a :class:`LinkedList` to the interactive loop."""

from __future__ import annotations

import logging
import re
from typing import Callable, Dict, Optional, Sequence

from .graph import generate_graph
from .linked_list import EmptyListError, LinkedList, ValueNotFoundError

logger = logging.getLogger(__name__)

__all__ = ["COMMANDS", "LinkedListManager"]

COMMANDS: Dict[str, str] = {
    "it": "it [int]    insert at tail",
    "ih": "ih [int]    insert at head",
    "rm": "rm [int]    remove first occurrence",
    "ls": "ls          print values head to tail",
    "len": "len         print the element count",
    "mid": "mid         print the midpoint value",
    "help": "help        show this table",
}

_INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")


def _parse_single_int(args: Sequence[str]) -> Optional[int]:
    if len(args) != 1:
        return None
    if _INTEGER_TOKEN.fullmatch(args[0]) is None:
        return None
    return int(args[0], 10)


class LinkedListManager:
    """Apply ``it``/``ih``/``rm`` and query commands to an owned list."""

    def __init__(
        self,
        linked_list: LinkedList | None = None,
        *,
        echo: Callable[[str], None] = print,
    ) -> None:
        self.list = linked_list if linked_list is not None else LinkedList()
        self._echo = echo
        self._handlers: Dict[str, Callable[[Sequence[str]], bool]] = {
            "it": self._insert_tail,
            "ih": self._insert_head,
            "rm": self._remove,
            "ls": self._show_values,
            "len": self._show_len,
            "mid": self._show_mid,
            "help": self._help,
        }

    def assign_job(self, cmd: str, args: Sequence[str]) -> bool:
        handler = self._handlers.get(cmd)
        if handler is None:
            return False
        return handler(args)

    def gen_graph(self) -> str:
        return generate_graph(self.list)

    def _insert_tail(self, args: Sequence[str]) -> bool:
        value = _parse_single_int(args)
        if value is None:
            return False
        self.list.insert_tail(value)
        return True

    def _insert_head(self, args: Sequence[str]) -> bool:
        value = _parse_single_int(args)
        if value is None:
            return False
        self.list.insert_head(value)
        return True

    def _remove(self, args: Sequence[str]) -> bool:
        value = _parse_single_int(args)
        if value is None:
            return False
        try:
            self.list.remove(value)
        except ValueNotFoundError as exc:
            logger.info("%s", exc)
            return False
        return True

    def _show_values(self, args: Sequence[str]) -> bool:
        if args:
            return False
        self._echo(str(self.list.list()))
        return True

    def _show_len(self, args: Sequence[str]) -> bool:
        if args:
            return False
        self._echo(f"Len: {self.list.len()}")
        return True

    def _show_mid(self, args: Sequence[str]) -> bool:
        if args:
            return False
        try:
            mid = self.list.find_mid()
        except EmptyListError as exc:
            logger.info("%s", exc)
            return False
        self._echo(f"Mid: {mid}")
        return True

    def _help(self, args: Sequence[str]) -> bool:
        self._echo("COMMAND:")
        for line in COMMANDS.values():
            self._echo(f"\t{line}")
        self._echo("\texit        leave the session")
        return True
