import logging
from typing import List, Tuple

from tqdm import tqdm

from ..classes import StructureTree, TokenValue
from ..syntax import detect_syntax
from ..utils.logging import get_logger

# Openers whose matching closer delimits a field, e.g. msg="..."
TERMINATORS = {
    '"': '"',
    "'": "'",
    "[": "]",
    "(": ")",
    "<": ">",
}

# key=value and key:value separators end a prefix
SEPARATORS = "=:"


def find_matching_term(word: str, len_suffix: int, term: str) -> int:
    """
    Length of the suffix starting at the `term` closest to the end of
    `word`, searching only the last `len_suffix` characters. 0 if none.
    """
    for i in range(len_suffix):
        if word[len(word) - i - 1] == term:
            return i + 1
    return 0


def adjust_boundaries(word: str, len_prefix: int, len_suffix: int) -> Tuple[int, int]:
    """
    Move prefix and suffix boundaries onto field delimiters of `word`.

    The candidate prefix is scanned from its end. The first opener with a
    matching closer inside the suffix window fixes both boundaries and stops
    the scan. A `=` or `:` moves the prefix end right behind it, and the
    scan goes on, so the leftmost separator wins.
    """
    for j in range(len_prefix - 1, -1, -1):
        char = word[j]
        if char in TERMINATORS:
            new_suffix = find_matching_term(word, len_suffix, TERMINATORS[char])
            if new_suffix:
                return j + 1, new_suffix
        elif char in SEPARATORS:
            len_prefix = j + 1
    return len_prefix, len_suffix


def common_affixes(words: List[str]) -> Tuple[int, int]:
    """
    Lengths of the prefix and suffix shared by all `words`, measured against
    the first word and adjusted to field delimiters.

    Prefix and suffix are computed independently and may overlap, e.g.
    ["end", "eend"] gives (1, 3).
    """
    base = words[0]
    len_prefix = len_suffix = len(base)
    for word in words[1:]:
        if len_prefix > 0:
            j = 0
            while j < len_prefix and j < len(word) and word[j] == base[j]:
                j += 1
            len_prefix = j
        if len_suffix > 0:
            j_max = min(len(word), len_suffix)
            j = 0
            while j < j_max and word[-j - 1] == base[-j - 1]:
                j += 1
            len_suffix = j
    return adjust_boundaries(base, len_prefix, len_suffix)


class TreeRefiner:
    """
    Generalize a fully built tree: collapse non-branching chains, split
    common prefixes and suffixes off node values, and merge duplicate values.
    """

    def __init__(self, tree: StructureTree, separator=" ", report_progress=False) -> None:
        self.tree = tree
        self.separator = separator
        self.report_progress = report_progress
        self.stats = {"collapsed": 0, "disjoined": 0, "squashed": 0}

    def refine(self) -> int:
        """Run one pass over the tree, returns the number of changes made."""
        self.stats = {"collapsed": 0, "disjoined": 0, "squashed": 0}
        with tqdm(
            desc="Refining tree",
            unit=" nodes",
            disable=not self.report_progress,
        ) as bar:
            for node_id, _ in self.tree.walk():
                self.squash_chain(node_id)
                self.check_prefixes(node_id)
                self.stats["squashed"] += self.squash_duplicates(node_id)
                bar.update()

        get_logger().info(
            "Refined tree: %s chains collapsed, %s nodes disjoined, %s duplicates squashed",
            self.stats["collapsed"],
            self.stats["disjoined"],
            self.stats["squashed"],
        )
        return sum(self.stats.values())

    def can_collapse(self, node_id: int) -> bool:
        node = self.tree[node_id]
        if node.child is None or not self.tree.is_only_child(node_id):
            return False
        child = self.tree[node.child]
        return (
            len(node.values) == 1
            and len(child.values) == 1
            and child.sibling is None
            and node.terminal_count == 0
            # do not combine syntaxes
            and not node.first.is_placeholder()
            and not child.first.is_placeholder()
            and not node.first.is_subword
            and not child.first.is_subword
        )

    def squash_chain(self, node_id: int) -> None:
        while self.can_collapse(node_id):
            node = self.tree[node_id]
            get_logger().debug(
                "squashing: %s%s%s",
                node.first.text,
                self.separator,
                self.tree[node.child].first.text,
            )
            self.tree.collapse_child(node_id, self.separator)
            self.stats["collapsed"] += 1

    def check_prefixes(self, node_id: int) -> None:
        node = self.tree[node_id]
        if (
            len(node.values) == 1
            or any(v.is_subword or v.is_special for v in node.values)
        ):
            return

        len_prefix, len_suffix = common_affixes([v.text for v in node.values])
        if len_prefix or len_suffix:
            self._report_split(node.values, len_prefix, len_suffix)
            self.disjoin(node_id, len_prefix, len_suffix)
            self.stats["disjoined"] += 1

    def disjoin(self, node_id: int, len_prefix: int, len_suffix: int) -> int:
        """
        Split the common prefix and suffix off the values of a node. The node
        keeps the prefix, a new child holds the remaining values, and a new
        node below that holds the suffix. Returns the id of the node holding
        the remaining values.
        """
        node = self.tree[node_id]
        values = node.values
        base = node.first.text
        total = sum(v.occurs for v in values)
        terminal_count = node.terminal_count

        values_id = node_id
        if len_prefix > 0:
            node.values = [
                TokenValue(base[:len_prefix], occurs=total, is_subword=True)
            ]
            values_id = self.tree.insert_below(node_id, values)
            for value in values:
                value.text = value.text[len_prefix:]

        last_id = values_id
        if len_suffix > 0:
            last_id = self.tree.insert_below(
                values_id,
                TokenValue(base[len(base) - len_suffix :], occurs=total, is_subword=True),
            )
            for value in values:
                # Overlapping affixes can consume the whole value
                value.text = value.text[: max(len(value.text) - len_suffix, 0)]

        # Lines ending at this word now end after its last piece
        node.terminal_count = 0
        self.tree[last_id].terminal_count = terminal_count

        for value in values:
            value.is_subword = True
            detect_syntax(value)
        self.stats["squashed"] += self.squash_duplicates(values_id)
        return values_id

    def squash_duplicates(self, node_id: int) -> int:
        """Sort values by text and merge equal ones, returns the number merged."""
        node = self.tree[node_id]
        if len(node.values) == 1:
            return 0

        node.values.sort(key=lambda v: v.text)
        squashed = []
        for value in node.values:
            if squashed and squashed[-1].text == value.text:
                squashed[-1].occurs += value.occurs
            else:
                squashed.append(value)

        merged = len(node.values) - len(squashed)
        node.values = squashed
        return merged

    def _report_split(self, values, len_prefix, len_suffix):
        logger = get_logger()
        if not logger.isEnabledFor(logging.DEBUG):
            return
        logger.debug("prefix %s, suffix %s", len_prefix, len_suffix)
        for value in values[:5]:
            text = value.text
            start_suffix = max(len(text) - len_suffix, len_prefix)
            logger.debug(
                '"%s" "%s" "%s"',
                text[:len_prefix],
                text[len_prefix:start_suffix],
                text[start_suffix:],
            )
