"""Shared fixtures for logstruct tests."""

import pytest

from logstruct.classes import StructureTree
from logstruct.structure import TreeBuilder, TreeRefiner
from logstruct.syntax import preprocess_line


@pytest.fixture
def tree():
    return StructureTree()


@pytest.fixture
def build():
    """Build a tree from raw lines, optionally refining it."""

    def _build(lines, refine=False):
        tree = StructureTree()
        builder = TreeBuilder(tree)
        for line in lines:
            builder.insert(preprocess_line(line))
        if refine:
            TreeRefiner(tree).refine()
        return tree

    return _build
