"""Tagged tokens produced by the substitution passes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class TokenKind(str, Enum):
    COMPOUND = "compound"
    CONSONANT = "consonant"
    VOWEL = "vowel"
    MODIFIER = "modifier"


@dataclass(frozen=True)
class Token:
    """One substituted unit: the source glyphs and the code they became.

    ``attached`` is set when the glyph was consumed together with the
    modifier that follows it.
    """

    kind: TokenKind
    text: str
    code: str
    attached: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "text": self.text,
            "code": self.code,
            "attached": self.attached,
        }
