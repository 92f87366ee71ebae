import enum
from dataclasses import dataclass

from arith.utils import PrintableEnum


class BinaryOperator(PrintableEnum):
    ADD = enum.auto()
    SUB = enum.auto()
    MUL = enum.auto()
    DIV = enum.auto()


OPERATOR_SYMBOLS = {
    BinaryOperator.ADD: "+",
    BinaryOperator.SUB: "-",
    BinaryOperator.MUL: "*",
    BinaryOperator.DIV: "/",
}


@dataclass(frozen=True)
class Literal:
    value: float


@dataclass(frozen=True)
class Identifier:
    name: str


@dataclass(frozen=True)
class BinaryOp:
    operator: BinaryOperator
    left: "Node"
    right: "Node"


@dataclass(frozen=True)
class Assignment:
    name: str
    value: "Node"


Node = Literal | Identifier | BinaryOp | Assignment


def to_source(node: Node) -> str:
    """Fully parenthesized rendering of a tree, e.g. ((8.0 - 4.0) - 2.0)

    Walks the tree with an explicit stack, so deep left-leaning chains are fine.
    """
    parts: list[str] = []
    pending: list[Node | str] = [node]
    while pending:
        item = pending.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, Literal):
            parts.append(repr(item.value))
        elif isinstance(item, Identifier):
            parts.append(item.name)
        elif isinstance(item, BinaryOp):
            pending.extend([")", item.right, f" {OPERATOR_SYMBOLS[item.operator]} ", item.left, "("])
        elif isinstance(item, Assignment):
            pending.extend([item.value, f"{item.name} = "])
        else:
            raise TypeError(f"Unexpected node type: {item!r}")
    return "".join(parts)
