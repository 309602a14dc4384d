from .module import MAX_LINE, Module
from .tree import ROOT_TEXT, StructureTree, TreeNode
from .word import PLACEHOLDER_MARK, TokenValue, placeholder

__all__ = [
    "MAX_LINE",
    "Module",
    "PLACEHOLDER_MARK",
    "ROOT_TEXT",
    "StructureTree",
    "TokenValue",
    "TreeNode",
    "placeholder",
]
