import json
import os

import dill
from tqdm import tqdm

from ..classes import Module, StructureTree
from ..syntax import preprocess_line
from ..utils.logging import get_logger
from .builder import TreeBuilder
from .printer import TreePrinter
from .refiner import TreeRefiner


class StructureAnalyzer(Module):
    """
    Mine the structure of a log file: build the tree from every line, refine
    it once, then print it.
    """

    def __init__(
        self,
        report_progress=False,
        print_raw=False,
        output=None,
        separator=" ",
        **kwargs,
    ) -> None:
        super().__init__("Structure Analyzer")
        self.report_progress = report_progress
        self.print_raw = print_raw
        self.output = output

        self.tree = StructureTree()
        self.builder = TreeBuilder(self.tree)
        self.refiner = TreeRefiner(
            self.tree, separator=separator, report_progress=report_progress
        )
        self.printer = TreePrinter(self.tree, report_progress=report_progress)

    def add_line(self, line: str):
        return self.builder.insert(preprocess_line(line))

    def parse(self, log_file) -> int:
        for line in tqdm(
            self.load_lines(log_file),
            desc="Reading log file",
            unit=" lines",
            disable=not self.report_progress,
        ):
            self.add_line(line)

        get_logger().info(
            "Read %s lines, tree has %s nodes",
            self.builder.line_count,
            len(self.tree),
        )
        return self.builder.line_count

    def save(self, path=None):
        path = path if path is not None else self.output
        if not path:
            return None
        if os.path.isdir(path):
            path = os.path.join(path, "tree.json")
        if path.endswith(".dill"):
            with open(path, "wb") as f:
                dill.dump(self.tree, f)
        else:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(self.tree.as_json(), f, indent=2)
        get_logger().info("Tree saved to %s", path)
        return path

    @staticmethod
    def load_tree(path) -> StructureTree:
        if path.endswith(".dill"):
            with open(path, "rb") as f:
                return dill.load(f)
        with open(path, "r", encoding="utf-8") as f:
            return StructureTree.load_from_json(json.load(f))

    def process(self, log_file, out=None, **kwargs) -> StructureTree:
        self.parse(log_file)
        if self.print_raw:
            self.printer.print(out)
        self.refiner.refine()
        self.printer.print(out)
        self.save()
        return self.tree
