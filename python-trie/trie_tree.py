import logging
import string
from typing import Optional

logger = logging.getLogger(__name__)

ALPHABET = string.ascii_lowercase
ALPHABET_SIZE = len(ALPHABET)


def normalize(word: str) -> str:
    """Trim surrounding whitespace and fold to lowercase."""
    return word.strip().lower()


def slot_index(ch: str) -> Optional[int]:
    """
    Map a lowercase Latin letter to its child slot.

    Args:
        ch (str): A single character.

    Returns:
        Optional[int]: 0 for "a" through 25 for "z", or None for any
        other character (digits, punctuation, accented or non-Latin
        letters).
    """
    if len(ch) == 1 and ch in ALPHABET:
        return ord(ch) - ord(ALPHABET[0])
    return None


def _slots(key: str) -> Optional[list[int]]:
    # None as soon as one character falls outside a-z
    slots = []
    for ch in key:
        idx = slot_index(ch)
        if idx is None:
            return None
        slots.append(idx)
    return slots


class TrieNode:
    """
    A single node in the trie.

    Attributes:
        symbol (str):
            The character this node stands for. Empty for the root.
        children (list[Optional[TrieNode]]):
            One slot per letter of the alphabet, in alphabetical order.
            Absent children are None.
        is_end (bool):
            True if the path from the root to this node spells a stored word.
    """
    __slots__ = ("symbol", "children", "is_end")

    def __init__(self, symbol: str = ""):
        self.symbol = symbol
        self.children: list[Optional["TrieNode"]] = [None] * ALPHABET_SIZE
        self.is_end = False

    def child_count(self) -> int:
        return sum(1 for child in self.children if child is not None)

    def has_children(self) -> bool:
        return any(child is not None for child in self.children)

    def iter_children(self):
        """Yield the present children in alphabetical order."""
        for child in self.children:
            if child is not None:
                yield child

    def __repr__(self) -> str:
        return f"TrieNode({self.symbol!r}, is_end={self.is_end})"


class Trie:
    """
    A prefix tree over lowercase Latin words.

    Every public operation trims and lowercases its input first. Words
    containing anything other than the letters a-z are never stored and
    never found. Deleting a word prunes every node no other stored word
    depends on.
    """

    def __init__(self):
        """Initialize an empty trie."""
        self.root = TrieNode()
        self._size = 0

    # -------------------------------------------------------------
    # Core Operations
    # -------------------------------------------------------------

    def insert(self, word: str) -> "Trie":
        """
        Insert a word into the trie.

        Words containing a non-letter character are silently ignored.

        Args:
            word (str): The word to insert.

        Returns:
            Trie: This trie, so calls can be chained.
        """
        key = normalize(word)
        slots = _slots(key)
        if not slots:
            logger.debug("rejected insert of %r", word)
            return self

        node = self.root
        for ch, idx in zip(key, slots):
            if node.children[idx] is None:
                node.children[idx] = TrieNode(ch)
            node = node.children[idx]

        if not node.is_end:
            node.is_end = True
            self._size += 1
        return self

    def search(self, word: str) -> bool:
        """
        Determine whether a word exists in the trie.

        A word that only exists as the prefix of a longer stored word is
        not found.

        Args:
            word (str): The word to search for.

        Returns:
            bool: True if the word was inserted, False otherwise.
        """
        node = self._find(normalize(word))
        return node is not None and node.is_end

    def search_words(self, needle: str) -> list[str]:
        """
        Retrieve all stored words that begin with a given prefix.

        Args:
            needle (str): The prefix to match.

        Returns:
            list[str]: Matching words in lexicographic order, including
            the needle itself when it is stored. Empty if nothing matches.
        """
        key = normalize(needle)
        node = self._find(key)
        if node is None:
            return []

        result = [key] if node.is_end else []
        result.extend(self._walk(node, key))
        return result

    def longest_prefix(self) -> str:
        """
        Compute the prefix shared by every stored word.

        The walk follows single-child nodes from the root and stops at the
        first branching point, at a leaf, or at the first node that is
        itself a stored word.

        Returns:
            str: The common prefix, or "" for an empty trie.
        """
        prefix = []
        node = self.root
        while node.child_count() == 1:
            node = next(node.iter_children())
            prefix.append(node.symbol)
            if node.is_end:
                break
        return "".join(prefix)

    def delete(self, word: str) -> str:
        """
        Delete a word from the trie and prune the nodes it no longer needs.

        Args:
            word (str): The word to delete.

        Returns:
            str: The trailing characters whose nodes were physically
            removed. Empty when the word was absent, or when it is a
            prefix of another stored word and only lost its end marker.
        """
        key = normalize(word)
        slots = _slots(key)
        if not slots:
            return ""

        # (parent, slot) for every edge on the word's path
        path = []
        node = self.root
        for idx in slots:
            child = node.children[idx]
            if child is None:
                return ""
            path.append((node, idx))
            node = child

        if not node.is_end:
            return ""
        node.is_end = False
        self._size -= 1

        # unwind leaf-to-root, detaching nodes no stored word still uses
        removed = []
        for parent, idx in reversed(path):
            child = parent.children[idx]
            if child.is_end or child.has_children():
                break
            removed.append(child.symbol)
            parent.children[idx] = None

        deleted = "".join(reversed(removed))
        logger.debug("deleted %r, removed suffix %r", key, deleted)
        return deleted

    # -------------------------------------------------------------
    # Additional Functionalities
    # -------------------------------------------------------------

    def starts_with(self, prefix: str) -> bool:
        """
        Check if any stored word begins with the given prefix.

        Args:
            prefix (str): The prefix to test.

        Returns:
            bool: True if the prefix path exists in the trie.
        """
        return self._find(normalize(prefix)) is not None

    def node_count(self) -> int:
        """Count the nodes below the root."""
        count = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            for child in node.iter_children():
                count += 1
                stack.append(child)
        return count

    def _find(self, key: str) -> Optional[TrieNode]:
        slots = _slots(key)
        if slots is None:
            return None

        node = self.root
        for idx in slots:
            node = node.children[idx]
            if node is None:
                return None
        return node

    @staticmethod
    def _walk(node: TrieNode, prefix: str):
        """
        Yield the stored words strictly below `node` in lexicographic order.

        Uses an explicit stack so arbitrarily long words do not hit the
        recursion limit. Children are pushed in reverse slot order so the
        alphabetically first child is popped first.

        Args:
            node (TrieNode): The node to start from (not itself emitted).
            prefix (str): The word spelled by the path to `node`.

        Yields:
            str: Next stored word below `node`.
        """
        stack = [(child, prefix + child.symbol) for child in reversed(list(node.iter_children()))]
        while stack:
            current, word = stack.pop()
            if current.is_end:
                yield word
            for child in reversed(list(current.iter_children())):
                stack.append((child, word + child.symbol))

    def __contains__(self, word: str) -> bool:
        return self.search(word)

    def __len__(self) -> int:
        return self._size

    def __iter__(self):
        """
        Iterate over all words stored in the trie.

        Yields:
            str: Next word, in lexicographic order.
        """
        yield from self._walk(self.root, "")

    def __repr__(self) -> str:
        return f"Trie(words={self._size})"
