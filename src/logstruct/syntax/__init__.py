from .preprocess import DATE_RFC3164, DATE_RFC5424, preprocess_line
from .tokenizer import (
    DURATION,
    IPV4,
    POSINT,
    TIME_24HR,
    Tokenizer,
    WordStack,
    WordStackOverflow,
    detect_syntax,
)

__all__ = [
    "DATE_RFC3164",
    "DATE_RFC5424",
    "DURATION",
    "IPV4",
    "POSINT",
    "TIME_24HR",
    "Tokenizer",
    "WordStack",
    "WordStackOverflow",
    "detect_syntax",
    "preprocess_line",
]
