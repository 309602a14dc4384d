import sys
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator

from ..utils.logging import get_logger

# Size of the line buffer; one byte is reserved for the terminator
MAX_LINE = 32 * 1024


class Module(ABC):

    def __init__(self, name, **kwargs) -> None:
        self.name = name

    def __call__(self, log_file, **kwargs):
        kwargs["log_file"] = log_file
        return self.process(**kwargs)

    @staticmethod
    @contextmanager
    def open_log(log_file):
        if log_file in (None, "-"):
            yield sys.stdin.buffer
        else:
            with open(log_file, "rb") as f:
                yield f

    @staticmethod
    def split_lines(stream, max_line=MAX_LINE) -> Iterator[str]:
        """
        Yield the lines of a byte stream. Lines longer than the buffer are
        truncated and the rest of the line is dropped. Empty lines are skipped.
        """
        limit = max_line - 1
        for line_idx, raw in enumerate(stream):
            if raw.endswith(b"\n"):
                raw = raw[:-1]
            if len(raw) > limit:
                get_logger().warning(
                    "Line %s is longer than %s bytes, truncating",
                    line_idx + 1,
                    limit,
                )
                raw = raw[:limit]
            if not raw:
                continue
            yield raw.decode("utf-8", errors="replace")

    @staticmethod
    def load_lines(log_file, max_line=MAX_LINE) -> Iterator[str]:
        with Module.open_log(log_file) as f:
            yield from Module.split_lines(f, max_line)

    @abstractmethod
    def process(self, log_file, **kwargs):
        pass
