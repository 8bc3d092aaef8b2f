from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional


class TokenType(Enum):
    NUMBER = auto()
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    END = auto()


@dataclass(frozen=True)
class Token:
    kind: TokenType
    text: Optional[str] = None
    # Offset of the lexeme in the source; END sits at len(source).
    position: int = field(default=0, compare=False)

    def __repr__(self):
        return f"Token({self.kind.name}, {self.text!r})"
