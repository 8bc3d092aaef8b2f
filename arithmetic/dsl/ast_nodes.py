from dataclasses import dataclass
from typing import Union

from .tokens import Token


@dataclass(frozen=True)
class Literal:
    token: Token


@dataclass(frozen=True)
class BinaryOp:
    left: "Expression"
    right: "Expression"
    op: Token


Expression = Union[Literal, BinaryOp]
