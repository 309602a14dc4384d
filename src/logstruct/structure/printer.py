import sys
from typing import Iterator

from tqdm import tqdm

from ..classes import StructureTree

INDENT = "   "


class TreePrinter:
    """
    Human readable dump of a StructureTree. Each node prints its first value
    on an `l` line, then one `v` line per alternative value, then its
    children, then its next sibling.
    """

    def __init__(self, tree: StructureTree, report_progress=False) -> None:
        self.tree = tree
        self.report_progress = report_progress

    @staticmethod
    def indent(depth: int, indicator: str) -> str:
        return f"{depth:2d}{indicator}:{INDENT * depth}"

    def lines(self) -> Iterator[str]:
        for node_id, depth in tqdm(
            self.tree.walk(),
            desc="Printing tree",
            unit=" nodes",
            disable=not self.report_progress,
        ):
            node = self.tree[node_id]
            line = self.indent(depth, "l") + str(node.first)
            if node.terminal_count:
                line += f" [nterm {node.terminal_count}]"
            yield line
            for value in node.values[1:]:
                yield self.indent(depth, "v") + str(value)

    def format(self) -> str:
        return "\n".join(self.lines()) + "\n"

    def print(self, file=None) -> None:
        out = file if file is not None else sys.stdout
        for line in self.lines():
            out.write(line + "\n")
