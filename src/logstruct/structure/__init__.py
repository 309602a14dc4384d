from .builder import TreeBuilder
from .printer import TreePrinter
from .refiner import TreeRefiner, adjust_boundaries, common_affixes
from .run import StructureAnalyzer

__all__ = [
    "StructureAnalyzer",
    "TreeBuilder",
    "TreePrinter",
    "TreeRefiner",
    "adjust_boundaries",
    "common_affixes",
]
