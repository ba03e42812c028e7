from typing import Any, Callable, Iterator, List, Optional, Tuple

from hashtable.logger.log_types import LogEvent
from hashtable.logger.logger import log_table_event

DEFAULT_CAPACITY = 16
LOAD_FACTOR = 0.75
PRIME = 31


class _NotFound:
    __slots__ = ()

    def __repr__(self) -> str:
        return "NOT_FOUND"

    def __bool__(self) -> bool:
        return False


NOT_FOUND = _NotFound()


def hash_key(key: str) -> int:
    """Polynomial string hash: h = h * 31 + ord(c), left to right from 0."""
    h = 0
    for c in key:
        h = PRIME * h + ord(c)
    return h


class _Node:
    __slots__ = ("key", "value", "next")

    def __init__(self, key: str, value: Any):
        self.key = key
        self.value = value
        self.next: Optional[_Node] = None


class HashTable:
    """
    String-keyed map built on an array of singly linked chains.

    Capacity starts at 16 and doubles whenever adding a new key would push
    length / capacity past 0.75. Iteration order follows slot index, then
    chain order, so it changes across a resize.
    """

    def __init__(self, hash_function: Optional[Callable[[str], int]] = None) -> None:
        self._hash = hash_function or hash_key
        self._length = 0
        self._capacity = DEFAULT_CAPACITY
        self._load_factor = LOAD_FACTOR
        self._slots: List[Optional[_Node]] = [None] * self._capacity

    @property
    def length(self) -> int:
        return self._length

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def load_factor(self) -> float:
        return self._load_factor

    def _slot_index(self, key: str) -> int:
        # capacity changes on resize, so never cache this
        return self._hash(key) % self._capacity

    def _locate(self, key: str) -> Tuple[Optional[_Node], Optional[_Node]]:
        """Return (node, predecessor) for key; node is None when absent."""
        parent = None
        node = self._slots[self._slot_index(key)]
        while node is not None and node.key != key:
            parent = node
            node = node.next
        return node, parent

    def _resize(self) -> None:
        pairs = self.entries()
        old_capacity = self._capacity

        self._length = 0
        self._capacity *= 2
        self._slots = [None] * self._capacity
        for key, value in pairs:
            self.set(key, value)

        log_table_event(
            LogEvent.TABLE_RESIZED,
            old_capacity=old_capacity,
            new_capacity=self._capacity,
            length=self._length,
        )

    def get(self, key: str, default: Any = NOT_FOUND) -> Any:
        node, _ = self._locate(key)
        if node is None:
            return default
        return node.value

    def has(self, key: str) -> bool:
        node, _ = self._locate(key)
        return node is not None

    def set(self, key: str, value: Any) -> None:
        node, parent = self._locate(key)
        if node is not None:
            node.value = value
            return

        if (self._length + 1) / self._capacity > self._load_factor:
            self._resize()
            # the old predecessor belongs to the discarded array
            _, parent = self._locate(key)

        new_node = _Node(key, value)
        if parent is None:
            self._slots[self._slot_index(key)] = new_node
        else:
            # a failed lookup walks to the end, so parent is the chain tail
            parent.next = new_node
        self._length += 1

    def remove(self, key: str) -> None:
        node, parent = self._locate(key)
        if node is None:
            return

        if parent is None:
            self._slots[self._slot_index(key)] = node.next
        else:
            parent.next = node.next
        node.next = None
        self._length -= 1

    def entries(self) -> List[Tuple[str, Any]]:
        pairs = []
        for head in self._slots:
            node = head
            while node is not None:
                pairs.append((node.key, node.value))
                node = node.next
        return pairs

    def keys(self) -> List[str]:
        return [key for key, _ in self.entries()]

    def values(self) -> List[Any]:
        return [value for _, value in self.entries()]

    def clear(self) -> None:
        discarded = self._length
        self._length = 0
        self._capacity = DEFAULT_CAPACITY
        self._slots = [None] * self._capacity
        log_table_event(LogEvent.TABLE_CLEARED, discarded=discarded)

    def __len__(self) -> int:
        return self._length

    def __contains__(self, key: str) -> bool:
        return self.has(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __getitem__(self, key: str) -> Any:
        value = self.get(key)
        if value is NOT_FOUND:
            raise KeyError(key)
        return value

    def __setitem__(self, key: str, value: Any) -> None:
        self.set(key, value)

    def __delitem__(self, key: str) -> None:
        self.remove(key)

    def __repr__(self) -> str:
        return f"HashTable(length={self._length}, capacity={self._capacity})"
