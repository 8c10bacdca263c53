"""Singly linked list of nodes carrying arbitrary content."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """One list cell: a payload and a link to the next cell."""

    content: Any
    next: Optional[Node] = None


def lst_new(content: Any) -> Node:
    """Return a new unlinked node holding ``content``."""
    return Node(content)


def iter_nodes(head: Optional[Node]) -> Iterator[Node]:
    """Yield every node of the list starting at ``head``."""
    node = head
    while node is not None:
        yield node
        node = node.next


def lst_add_front(head: Optional[Node], node: Optional[Node]) -> Optional[Node]:
    """Put ``node`` before ``head`` and return the new head.

    A missing ``node`` leaves the list unchanged.
    """
    if node is None:
        return head
    if head is None:
        return node
    node.next = head
    return node


def lst_last(head: Optional[Node]) -> Optional[Node]:
    """Return the final node of the list, or None for an empty list."""
    last = None
    for last in iter_nodes(head):
        pass
    return last


def lst_add_back(head: Optional[Node], node: Optional[Node]) -> Optional[Node]:
    """Append ``node`` after the last node and return the head."""
    last = lst_last(head)
    if last is None:
        return node
    last.next = node
    return head


def lst_size(head: Optional[Node]) -> int:
    """Return the number of nodes in the list."""
    return sum(1 for _ in iter_nodes(head))


def lst_delone(node: Optional[Node], delete: Optional[Callable[[Any], Any]]) -> None:
    """Release one node's content through ``delete``; the following nodes are untouched."""
    if node is not None and delete is not None:
        delete(node.content)


def lst_clear(head: Optional[Node], delete: Optional[Callable[[Any], Any]]) -> None:
    """Release every node's content through ``delete`` and unlink all nodes."""
    node = head
    while node is not None:
        following = node.next
        lst_delone(node, delete)
        node.next = None
        node = following


def lst_iter(head: Optional[Node], f: Callable[[Any], Any]) -> None:
    """Call ``f`` on the content of each node in order."""
    for node in iter_nodes(head):
        f(node.content)