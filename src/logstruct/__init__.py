from .classes import StructureTree, TokenValue, TreeNode
from .structure import StructureAnalyzer, TreeBuilder, TreePrinter, TreeRefiner

__all__ = [
    "StructureTree",
    "TokenValue",
    "TreeNode",
    "StructureAnalyzer",
    "TreeBuilder",
    "TreePrinter",
    "TreeRefiner",
]
