from typing import Optional

from ..classes import StructureTree, TokenValue
from ..syntax import Tokenizer


class TreeBuilder:
    """
    Insert tokenized lines into a StructureTree, one line at a time.
    """

    def __init__(self, tree: StructureTree, tokenizer: Optional[Tokenizer] = None) -> None:
        self.tree = tree
        self.tokenizer = tokenizer if tokenizer is not None else Tokenizer()
        self.line_count = 0

    def insert(self, line: str) -> Optional[int]:
        """
        Add one preprocessed line to the tree and return the id of the node
        the line terminates at. An empty line is ignored.
        """
        if not line:
            return None

        level = self.tree.root
        words = self.tokenizer.tokenize(line)
        next_word = next(words, None)
        while next_word is not None:
            # One word of lookahead is needed to detect reconverging branches
            word, next_word = next_word, next(words, None)
            level = self.add_to_level(level, word, next_word)

        self.tree[level].terminal_count += 1
        self.line_count += 1
        return level

    def add_to_level(
        self, level: int, word: TokenValue, next_word: Optional[TokenValue]
    ) -> int:
        for child_id in self.tree.children(level):
            existing = self.tree[child_id].find_value(word.text)
            if existing is not None:
                existing.occurs += 1
                return child_id

        candidate = self.find_reconverging(level, next_word)
        if candidate is not None:
            self.tree[candidate].add_value(word)
            return candidate

        return self.tree.add_child(level, word)

    def find_reconverging(
        self, level: int, next_word: Optional[TokenValue]
    ) -> Optional[int]:
        """
        Find a child of `level` whose continuation is the next word, so the
        current word can become an alternative value of that child. At the
        end of the line, a childless node other lines already end at qualifies.
        """
        for child_id in self.tree.children(level):
            child = self.tree[child_id]
            if next_word is None:
                if child.child is None and child.terminal_count > 0:
                    return child_id
            elif child.child is not None:
                grandchild = self.tree[child.child]
                if (
                    grandchild.sibling is None
                    and len(grandchild.values) == 1
                    and grandchild.first.text == next_word.text
                ):
                    return child_id
        return None
