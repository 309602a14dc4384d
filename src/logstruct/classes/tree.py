from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from .word import TokenValue

ROOT_TEXT = "[ROOT]"


@dataclass
class TreeNode:
    """
    One position in the structure tree.

    Links are node ids into the owning StructureTree: `child` is the first
    node of the list of alternative next positions, `sibling` the next entry
    in the list this node belongs to.
    """

    id: int
    values: List[TokenValue] = field(default_factory=list)
    terminal_count: int = 0
    parent: Optional[int] = None
    sibling: Optional[int] = None
    child: Optional[int] = None

    def find_value(self, text: str) -> Optional[TokenValue]:
        for value in self.values:
            if value.text == text:
                return value
        return None

    def add_value(self, value: TokenValue) -> TokenValue:
        self.values.append(value)
        return value

    @property
    def first(self) -> TokenValue:
        return self.values[0]

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "values": [v.to_dict() for v in self.values],
            "terminal_count": self.terminal_count,
            "parent": self.parent,
            "sibling": self.sibling,
            "child": self.child,
        }


class StructureTree:
    """
    Trie of observed token sequences, stored as an arena of nodes addressed
    by integer ids. Deleted nodes leave a tombstone whose id is reused.
    """

    def __init__(self):
        self.nodes: List[Optional[TreeNode]] = []
        self.free: List[int] = []
        self.root = self.new_node(TokenValue(ROOT_TEXT))

    def __getitem__(self, node_id) -> TreeNode:
        if not isinstance(node_id, int):
            raise ValueError("Invalid key type")
        if node_id < 0 or node_id >= len(self.nodes):
            raise KeyError(f"Node {node_id} not found in tree")
        node = self.nodes[node_id]
        if node is None:
            raise KeyError(f"Node {node_id} was deleted")
        return node

    def __contains__(self, node_id) -> bool:
        return (
            isinstance(node_id, int)
            and 0 <= node_id < len(self.nodes)
            and self.nodes[node_id] is not None
        )

    def __len__(self) -> int:
        return len(self.nodes) - len(self.free)

    def new_node(self, value, parent: Optional[int] = None) -> int:
        values = list(value) if isinstance(value, list) else [value]
        if self.free:
            node_id = self.free.pop()
        else:
            node_id = len(self.nodes)
            self.nodes.append(None)
        self.nodes[node_id] = TreeNode(node_id, values, parent=parent)
        return node_id

    def delete_node(self, node_id: int) -> None:
        if node_id not in self:
            raise KeyError(f"Node {node_id} not found in tree")
        self.nodes[node_id] = None
        self.free.append(node_id)

    def children(self, node_id: int) -> Iterator[int]:
        child = self[node_id].child
        while child is not None:
            # Read the link first so callers may relink the yielded node
            next_child = self[child].sibling
            yield child
            child = next_child

    def add_child(self, parent_id: int, value: TokenValue) -> int:
        """Append a new node holding `value` at the end of the child list."""
        new_id = self.new_node(value, parent=parent_id)
        parent = self[parent_id]
        if parent.child is None:
            parent.child = new_id
        else:
            last = parent.child
            while self[last].sibling is not None:
                last = self[last].sibling
            self[last].sibling = new_id
        return new_id

    def insert_below(self, node_id: int, values) -> int:
        """
        Insert a new node as the only child of `node_id`. The new node adopts
        the former child list of `node_id`.
        """
        node = self[node_id]
        new_id = self.new_node(values, parent=node_id)
        self[new_id].child = node.child
        node.child = new_id
        for child in self.children(new_id):
            self[child].parent = new_id
        return new_id

    def collapse_child(self, node_id: int, separator: str = " ") -> None:
        """Merge the single child of `node_id` into it and delete the child."""
        node = self[node_id]
        child = self[node.child]
        node.first.text = f"{node.first.text}{separator}{child.first.text}"
        node.terminal_count = child.terminal_count
        node.child = child.child
        for grandchild in self.children(node_id):
            self[grandchild].parent = node_id
        self.delete_node(child.id)

    def is_only_child(self, node_id: int) -> bool:
        node = self[node_id]
        if node.parent is None:
            return False
        return node.sibling is None and self[node.parent].child == node_id

    def walk(self, node_id: Optional[int] = None) -> Iterator[Tuple[int, int]]:
        """
        Depth-first walk yielding (node id, depth): a node, then its whole
        child subtree, then its next sibling. Links are read after the node
        has been yielded, so the caller may restructure below it.
        """
        start = self.root if node_id is None else node_id
        stack = [(start, 0)]
        while stack:
            current, depth = stack.pop()
            yield current, depth
            node = self[current]
            if node.sibling is not None and current != start:
                stack.append((node.sibling, depth))
            if node.child is not None:
                stack.append((node.child, depth + 1))

    def lineage(self, node_id: int) -> List[int]:
        """Ids from the first node below the root down to `node_id`."""
        lineage = []
        current = self[node_id]
        while current.parent is not None:
            lineage.append(current.id)
            current = self[current.parent]
        return lineage[::-1]

    def terminal_total(self) -> int:
        return sum(node.terminal_count for node in self.nodes if node)

    def as_json(self) -> dict:
        return {
            "root": self.root,
            "size": len(self.nodes),
            "nodes": [node.to_dict() for node in self.nodes if node],
        }

    @classmethod
    def load_from_json(cls, json_tree: dict) -> StructureTree:
        try:
            entries = json_tree["nodes"]
            size = json_tree.get(
                "size", max(entry["id"] for entry in entries) + 1
            )
            tree = cls.__new__(cls)
            tree.nodes = [None] * size
            for entry in entries:
                tree.nodes[entry["id"]] = TreeNode(
                    entry["id"],
                    [TokenValue.from_dict(v) for v in entry["values"]],
                    terminal_count=entry["terminal_count"],
                    parent=entry["parent"],
                    sibling=entry["sibling"],
                    child=entry["child"],
                )
            tree.free = [i for i in range(size) if tree.nodes[i] is None]
            tree.root = json_tree["root"]
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Malformed structure tree: {e}") from e

        if tree.root not in tree or any(
            not node.values for node in tree.nodes if node
        ):
            raise ValueError("Malformed structure tree: bad root or empty node")
        return tree
