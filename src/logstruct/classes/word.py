from __future__ import annotations

from dataclasses import dataclass

# Placeholder values produced by syntax detection look like %name%
PLACEHOLDER_MARK = "%"


def placeholder(name: str) -> str:
    return f"{PLACEHOLDER_MARK}{name}{PLACEHOLDER_MARK}"


@dataclass
class TokenValue:
    """
    One observed value at a tree position.

    `text` is either the literal word (or part of a word, for subwords) or a
    placeholder such as %ipv4% when syntax detection recognized the word.
    """

    text: str
    occurs: int = 1
    is_subword: bool = False
    is_special: bool = False

    def is_placeholder(self) -> bool:
        return self.text.startswith(PLACEHOLDER_MARK)

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "occurs": self.occurs,
            "subword": self.is_subword,
            "special": self.is_special,
        }

    @classmethod
    def from_dict(cls, data: dict) -> TokenValue:
        return cls(
            text=data["text"],
            occurs=data.get("occurs", 1),
            is_subword=data.get("subword", False),
            is_special=data.get("special", False),
        )

    def __str__(self):
        rtn = self.text
        if self.is_subword:
            rtn += " {subword}"
        if self.occurs > 1:
            rtn += f" {{{self.occurs}}}"
        return rtn
