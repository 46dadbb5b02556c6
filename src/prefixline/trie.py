"""
A prefix tree (trie) holding the prompt history.

Each node stores the complete string spelled by the path from the root, so traversal
produces whole entries without rebuilding paths. A node without children marks the
end of an entry.
"""

from __future__ import annotations

from typing import Iterable, Iterator

import rich.repr


class Node:
    """A node in a [PrefixTree][prefixline.trie.PrefixTree]."""

    def __init__(self, key: str, value: str) -> None:
        self.key = key
        """The last character of `value`."""
        self.value = value
        """The string found when walking from the root to this node."""
        self.children: dict[str, Node] = {}
        """Child nodes, keyed by their character."""

    def __rich_repr__(self) -> rich.repr.Result:
        yield self.value
        yield "children", len(self.children), 0

    @property
    def is_leaf(self) -> bool:
        """Is this node the end of an entry?"""
        return not self.children

    def insert(self, word: str) -> None:
        """Insert a word under this node.

        Nodes that already exist are left unchanged.

        Args:
            word: Characters to add below this node.
        """
        node = self
        for character in word:
            if (child := node.children.get(character)) is None:
                child = node.children[character] = Node(
                    character, f"{node.value}{character}"
                )
            node = child

    def find(self, word: str) -> Node | None:
        """Find the node reached by following `word` from this node.

        Args:
            word: Characters to follow.

        Returns:
            The node containing the last character of `word`, this node if `word` is
                empty, or `None` if the path doesn't exist.
        """
        node = self
        for character in word:
            if (node := node.children.get(character)) is None:
                return None
        return node

    def delete(self, word: str) -> None:
        """Delete a word under this node.

        Only the tail of the word which is not shared with another entry is removed.
        Removal works bottom up: a node is unlinked once it has no children left.

        Args:
            word: Characters to remove below this node.
        """
        path: list[tuple[Node, str]] = []
        node = self
        for character in word:
            if (child := node.children.get(character)) is None:
                break
            path.append((node, character))
            if child.is_leaf:
                break
            node = child

        for parent, character in reversed(path):
            if not parent.children[character].is_leaf:
                break
            del parent.children[character]

    def count(self) -> int:
        """Count the nodes below this node.

        Returns:
            Number of descendants.
        """
        total = 0
        stack = list(self.children.values())
        while stack:
            node = stack.pop()
            total += 1
            stack.extend(node.children.values())
        return total


class WordIterator(Iterator[str]):
    """Iterates depth first over the entries below a set of nodes.

    A fresh iterator is created for every traversal; once exhausted it stays exhausted.
    The order of siblings is not defined.
    """

    def __init__(self, nodes: Iterable[Node]) -> None:
        self._stack: list[Node] = list(nodes)

    def __iter__(self) -> WordIterator:
        return self

    def __next__(self) -> str:
        stack = self._stack
        while stack:
            node = stack.pop()
            stack.extend(node.children.values())
            # Only leaves are complete entries, inner nodes are skipped
            if node.is_leaf:
                return node.value
        raise StopIteration


@rich.repr.auto
class PrefixTree:
    """Stores strings with shared prefixes, and finds strings by prefix.

    ```python
    tree = PrefixTree()
    tree.insert("hello world")
    tree.insert("hello sir")
    for word in tree.words_with_prefix("hello"):
        print(word)
    ```
    """

    def __init__(self, words: Iterable[str] | None = None) -> None:
        # The key and value of the root are placeholders, never read
        self.root = Node("", "")
        if words is not None:
            for word in words:
                self.insert(word)

    def __rich_repr__(self) -> rich.repr.Result:
        yield "nodes", self.node_count

    def __iter__(self) -> Iterator[str]:
        return self.words()

    def __bool__(self) -> bool:
        return bool(self.root.children)

    @property
    def node_count(self) -> int:
        """The number of nodes in the tree, not counting the root."""
        return self.root.count()

    def insert(self, word: str) -> None:
        """Insert a word into the tree.

        Inserting an empty string, or a word already present, does nothing.

        Args:
            word: Word to insert.
        """
        self.root.insert(word)

    def find(self, word: str) -> Node | None:
        """Find the node for the last character of `word`.

        A result doesn't mean `word` was inserted, only that some entry starts with it.

        Args:
            word: Word or prefix to find.

        Returns:
            A node, the root if `word` is empty, or `None` if not found.
        """
        return self.root.find(word)

    def delete(self, word: str) -> None:
        """Delete a word from the tree.

        Parts of the word which are a prefix of another entry are kept.

        Args:
            word: Word to delete.
        """
        self.root.delete(word)

    def delete_after_prefix(self, prefix: str, word: str) -> None:
        """Delete `word` below the node at `prefix`, leaving the prefix intact.

        Args:
            prefix: Prefix to locate.
            word: Remainder of the entry to delete.
        """
        if (head := self.root.find(prefix)) is not None:
            head.delete(word)

    def words(self) -> WordIterator:
        """Iterate over every entry in the tree.

        Returns:
            An iterator of strings.
        """
        return WordIterator(self.root.children.values())

    def words_with_prefix(self, prefix: str) -> WordIterator:
        """Iterate over the entries below `prefix`.

        Args:
            prefix: Prefix of entries.

        Returns:
            An iterator of strings, which is empty if `prefix` isn't in the tree.
        """
        if (head := self.root.find(prefix)) is None:
            return WordIterator(())
        return WordIterator(head.children.values())
