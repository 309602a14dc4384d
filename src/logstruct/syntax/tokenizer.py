from __future__ import annotations

from typing import Iterator, List, Optional

import regex as re

from ..classes.word import PLACEHOLDER_MARK, TokenValue, placeholder
from . import recognizers
from .preprocess import DATE_RFC3164, DATE_RFC5424

# Words that must be consumed before reading further input
SIZE_WORDSTACK = 8

POSINT = placeholder("posint")
TIME_24HR = placeholder("time-24hr")
DURATION = placeholder("duration")
IPV4 = placeholder("ipv4")

# Placeholders this package produces; other %words% stay ordinary text
PLACEHOLDERS = {POSINT, TIME_24HR, DURATION, IPV4, DATE_RFC3164, DATE_RFC5424}

# Order matters: a time also matches duration, so the narrower shape goes first
SYNTAXES = [
    (recognizers.posint, POSINT),
    (recognizers.time_24hr, TIME_24HR),
    (recognizers.duration, DURATION),
    (recognizers.ipv4, IPV4),
]

_whitespace = re.compile(r"[ \t\n\v\f\r]+")


class WordStackOverflow(RuntimeError):
    pass


class WordStack:
    """Bounded LIFO of words produced ahead of the input position."""

    def __init__(self, size=SIZE_WORDSTACK) -> None:
        self.size = size
        self.words: List[TokenValue] = []

    def push(self, word: TokenValue) -> None:
        if len(self.words) >= self.size:
            raise WordStackOverflow(
                f"Word stack too small ({self.size} pending words)"
            )
        self.words.append(word)

    def pop(self) -> Optional[TokenValue]:
        return self.words.pop() if self.words else None

    def clear(self) -> None:
        self.words.clear()

    def __len__(self):
        return len(self.words)


def detect_syntax(word: TokenValue, stack: Optional[WordStack] = None) -> TokenValue:
    """
    Replace the word text with a placeholder if a known syntax consumes it
    entirely. When a stack is given, composite shapes are detected too: for
    `a.b.c.d/nn` the word becomes the address and the `/` and prefix length
    are pushed so they are read next.
    """
    text = word.text
    for recognizer, name in SYNTAXES:
        consumed = recognizer(text)
        if consumed and consumed == len(text):
            word.text = name
            word.is_special = True
            return word

    consumed = recognizers.ipv4(text)
    if (
        stack is not None
        and consumed
        and consumed < len(text)
        and text[consumed] == "/"
    ):
        start = consumed + 1
        prefix_len = recognizers.posint(text, start)
        if prefix_len and prefix_len == len(text) - start:
            word.text = IPV4
            word.is_subword = True
            word.is_special = True
            stack.push(TokenValue(POSINT, is_subword=True, is_special=True))
            stack.push(TokenValue("/", is_subword=True))
    return word


class Tokenizer:
    """
    Split a preprocessed line into TokenValues. Words already in placeholder
    form are passed through untouched.
    """

    def __init__(self, stack: Optional[WordStack] = None) -> None:
        self.stack = stack if stack is not None else WordStack()

    def tokenize(self, line: str) -> Iterator[TokenValue]:
        self.stack.clear()
        for word in _whitespace.split(line):
            if not word:
                continue
            if word.startswith(PLACEHOLDER_MARK):
                yield TokenValue(word, is_special=word in PLACEHOLDERS)
            else:
                yield detect_syntax(TokenValue(word), self.stack)
            pending = self.stack.pop()
            while pending is not None:
                yield pending
                pending = self.stack.pop()

    def __call__(self, line: str) -> List[TokenValue]:
        return list(self.tokenize(line))
