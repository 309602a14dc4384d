"""Tests for word splitting and syntax detection."""

import pytest

from logstruct.classes import TokenValue
from logstruct.syntax import (
    DURATION,
    IPV4,
    POSINT,
    TIME_24HR,
    Tokenizer,
    WordStack,
    WordStackOverflow,
    detect_syntax,
    preprocess_line,
)


class TestDetectSyntax:
    def test_posint(self):
        word = detect_syntax(TokenValue("42"))
        assert word.text == POSINT
        assert word.is_special
        assert not word.is_subword

    def test_time_before_duration(self):
        assert detect_syntax(TokenValue("12:30:00")).text == TIME_24HR

    def test_duration(self):
        assert detect_syntax(TokenValue("1:30:00")).text == DURATION
        assert detect_syntax(TokenValue("25:00:00")).text == DURATION

    def test_ipv4(self):
        assert detect_syntax(TokenValue("192.168.0.1")).text == IPV4

    def test_partial_match_rejected(self):
        word = detect_syntax(TokenValue("42abc"))
        assert word.text == "42abc"
        assert not word.is_special

    def test_composite_needs_stack(self):
        word = detect_syntax(TokenValue("10.0.0.0/8"))
        assert word.text == "10.0.0.0/8"
        assert not word.is_special

    def test_composite_pushes_followers(self):
        stack = WordStack()
        word = detect_syntax(TokenValue("10.0.0.0/8"), stack)
        assert word.text == IPV4
        assert word.is_subword and word.is_special
        assert len(stack) == 2
        slash = stack.pop()
        assert (slash.text, slash.is_subword, slash.is_special) == ("/", True, False)
        length = stack.pop()
        assert (length.text, length.is_subword, length.is_special) == (POSINT, True, True)

    def test_composite_without_prefix_length(self):
        stack = WordStack()
        word = detect_syntax(TokenValue("1.2.3.4/"), stack)
        assert word.text == "1.2.3.4/"
        assert len(stack) == 0


class TestWordStack:
    def test_lifo(self):
        stack = WordStack()
        stack.push(TokenValue("a"))
        stack.push(TokenValue("b"))
        assert stack.pop().text == "b"
        assert stack.pop().text == "a"
        assert stack.pop() is None

    def test_overflow(self):
        stack = WordStack()
        for i in range(8):
            stack.push(TokenValue(str(i)))
        with pytest.raises(WordStackOverflow):
            stack.push(TokenValue("8"))


class TestTokenizer:
    def setup_method(self):
        self.tokenizer = Tokenizer()

    def test_whitespace(self):
        words = self.tokenizer("  a\tb \r\n")
        assert [w.text for w in words] == ["a", "b"]

    def test_blank_line(self):
        assert self.tokenizer("   ") == []

    def test_composite_order(self):
        words = self.tokenizer("route 10.0.0.0/8 via 1.2.3.4")
        assert [w.text for w in words] == ["route", IPV4, "/", POSINT, "via", IPV4]
        assert [w.is_subword for w in words] == [False, True, True, True, False, False]
        assert not self.tokenizer.stack

    def test_placeholder_passthrough(self):
        words = self.tokenizer(preprocess_line("Oct 11 22:14:15 %weird% 7"))
        assert [w.text for w in words] == ["%date-rfc3164%", "%weird%", POSINT]
        assert [w.is_special for w in words] == [True, False, True]
