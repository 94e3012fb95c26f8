"""This module represents the implementation of a keyed Trie structure that
maps string keys to arbitrary values.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Generic, Optional, TypeVar, cast

T = TypeVar("T")

# Label of the root node, never expected inside a real key
ROOT_KEY_CHAR = "\0"

# Stored in nodes no key ends at, so that None stays a storable value
_NO_VALUE: Any = object()

logger = logging.getLogger(__name__)


class TrieNode(Generic[T]):
    """Represent a node in the trie structure."""

    def __init__(self, key_char: str, value: Any = _NO_VALUE) -> None:
        """Initialize a new Trie node.

        Args:
            key_char (str): The character this node represents.
            value (T): The value associated with the key that ends at
            this node. Omit it for nodes no key ends at.

        """
        self.key_char = key_char
        self.value = value
        # A dictionary to store child nodes (character: TrieNode)
        self.children: dict[str, TrieNode[T]] = {}

    def has_child(self, key_char: str) -> bool:
        """Check whether a child is stored under the given character."""
        return key_char in self.children

    def has_children(self) -> bool:
        """Check whether this node has any child at all."""
        return bool(self.children)

    def get_key_char(self) -> str:
        """Return the character this node represents."""
        return self.key_char

    def insert_child_node(
        self,
        key_char: str,
        child: "TrieNode[T]",
    ) -> Optional["TrieNode[T]"]:
        """Insert a child node under the given character.

        An existing child is never overwritten, and the child's own label
        must match the character it is stored under.

        Args:
            key_char (str): The character to store the child under.
            child (TrieNode[T]): The node to be inserted.

        Returns:
            Optional[TrieNode[T]]: The inserted child, or None if a child
            already exists under `key_char` or the labels don't match.

        """
        if self.has_child(key_char):
            logger.debug(
                "Rejected child '%s': a child already exists under it",
                key_char,
            )
            return None

        if child.get_key_char() != key_char:
            logger.debug(
                "Rejected child labelled '%s' under mismatched key '%s'",
                child.get_key_char(),
                key_char,
            )
            return None

        self.children[key_char] = child
        return child

    def get_child_node(self, key_char: str) -> Optional["TrieNode[T]"]:
        """Return the child stored under the given character, if any."""
        return self.children.get(key_char)

    def remove_child_node(self, key_char: str) -> Optional["TrieNode[T]"]:
        """Detach the child stored under the given character.

        Args:
            key_char (str): The character of the child to remove.

        Returns:
            Optional[TrieNode[T]]: The detached child with its whole subtree
            intact, or None if there was no such child.

        """
        return self.children.pop(key_char, None)

    def set_key_char(self, key_char: str) -> None:
        """Overwrite the label of this node.

        The parent's children map is not re-keyed, so relabelling a node
        that is already stored under a parent leaves the parent's key and
        the node's label out of sync. Keeping them consistent is up to the
        caller (remove the node, relabel it, insert it again).
        """
        self.key_char = key_char

    def get_children(self) -> Mapping[str, "TrieNode[T]"]:
        """Return a read-only view of the children map."""
        return MappingProxyType(self.children)

    def has_value(self) -> bool:
        """Check whether a key ends at this node."""
        return self.value is not _NO_VALUE

    def get_value(self) -> Optional[T]:
        """Return the value of this node, None if no key ends here."""
        if self.value is _NO_VALUE:
            return None
        return cast("T", self.value)

    def set_value(self, value: T) -> None:
        """Set the value of this node, overwriting any existing one."""
        self.value = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TrieNode):
            return NotImplemented
        return (
            self.key_char == other.key_char
            and self.value == other.value
            and self.children == other.children
        )

    def __repr__(self) -> str:
        return (
            f"TrieNode(key_char={self.key_char!r}, "
            f"value={self.get_value()!r}, "
            f"children={list(self.children)!r})"
        )


class Trie(Generic[T]):
    """Represents the keyed trie data structure."""

    def __init__(self) -> None:
        """Initialize the root node of the Trie."""
        self.root: TrieNode[T] = TrieNode(ROOT_KEY_CHAR)

    def insert(self, key: str, value: T) -> bool:
        """Insert a new key with its value into the Trie structure.

        Intermediate nodes are created on demand while walking the key and
        are kept even when the insert is rejected.

        Args:
            key (str): The key to be inserted, must not be empty.
            value (T): The value to associate with the key.

        Returns:
            bool: True if the key was inserted, False if the key is empty
            or already has a value.

        """
        if not key:
            logger.debug("Rejected insert of the empty key")
            return False

        node = self.root
        for char in key[:-1]:
            child = node.get_child_node(char)
            # If the character is not already a child, add an empty node
            if child is None:
                child = TrieNode(char)
                node.insert_child_node(char, child)
            # Move to the child node
            node = child

        last_char = key[-1]
        last_node = node.get_child_node(last_char)
        if last_node is None:
            node.insert_child_node(last_char, TrieNode(last_char, value))
            return True

        # The node exists already, only fill it if no key ends here yet
        if last_node.has_value():
            logger.debug("Rejected insert of duplicate key '%s'", key)
            return False

        last_node.set_value(value)
        return True

    def get_value(self, key: str) -> Optional[T]:
        """Look up the value associated with a given key.

        Args:
            key (str): The key to search for in the Trie structure.

        Returns:
            Optional[T]: The value of the key, or None if the key is empty,
            was never inserted, or is only a prefix of inserted keys.

        """
        if not key:
            return None

        node = self.root
        for char in key:
            child = node.get_child_node(char)
            # If the character is not found, the key does not exist
            if child is None:
                return None
            node = child

        return node.get_value()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Trie):
            return NotImplemented
        return self.root == other.root

    def __repr__(self) -> str:
        return f"Trie(root={self.root!r})"
