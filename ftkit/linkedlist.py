"""A singly linked list of nodes that carry arbitrary content.

Callbacks that release content are passed in where content is dropped,
so the list can own resources such as open files or buffers.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Callable, Optional

__all__ = ["Node", "LinkedList"]

Deleter = Optional[Callable[[Any], Any]]


class Node:
    """One list cell: a piece of content and a link to the following node."""

    __slots__ = ("content", "next")

    def __init__(self, content: Any = None, next: Optional[Node] = None) -> None:
        self.content = content
        self.next = next

    def __repr__(self) -> str:
        return f"Node({self.content!r})"

    def delete(self, delete: Deleter) -> None:
        """Release the content with ``delete`` and drop it.

        The link to the next node is left untouched. Nothing happens when
        ``delete`` is None.
        """
        if delete is None:
            return
        delete(self.content)
        self.content = None


class LinkedList:
    """A chain of ``Node`` objects starting at ``head``.

    Iterating over the list yields the contents in order.
    """

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        tail: Optional[Node] = None
        for item in items:
            node = Node(item)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def nodes(self) -> Iterator[Node]:
        """Yield the nodes from head to tail."""
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, node: Optional[Node]) -> None:
        """Make ``node`` the new head; its previous link is replaced."""
        if node is None:
            return
        node.next = self.head
        self.head = node

    def add_back(self, node: Optional[Node]) -> None:
        """Attach ``node``, and anything already linked after it, at the end."""
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node

    def last(self) -> Optional[Node]:
        """The final node, or None for an empty list."""
        tail = None
        for tail in self.nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self.nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self.nodes():
            yield node.content

    def clear(self, delete: Deleter) -> None:
        """Release every node's content with ``delete`` and empty the list."""
        node = self.head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.content = None
            node.next = None
            node = following
        self.head = None

    def for_each(self, f: Callable[[Any], Any]) -> None:
        """Call ``f`` on each content in order."""
        for content in self:
            f(content)

    def map(self, f: Optional[Callable[[Any], Any]], delete: Deleter) -> LinkedList:
        """Return a new list holding ``f(content)`` for every content.

        When ``f`` or ``delete`` is None the result is empty. If ``f``
        returns None or raises, every content produced so far is released
        with ``delete`` and the error is raised (``ValueError`` for None).
        """
        result = LinkedList()
        if f is None or delete is None:
            return result
        tail: Optional[Node] = None
        try:
            for content in self:
                new_content = f(content)
                if new_content is None:
                    raise ValueError("mapping function produced no content")
                node = Node(new_content)
                if tail is None:
                    result.head = node
                else:
                    tail.next = node
                tail = node
        except BaseException:
            result.clear(delete)
            raise
        return result