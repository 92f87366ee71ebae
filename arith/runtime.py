import logging
import operator
from dataclasses import dataclass
from typing import Callable

from arith.nodes import Assignment, BinaryOp, BinaryOperator, Identifier, Literal, Node
from arith.utils import CalcError

logger = logging.getLogger(__name__)


@dataclass
class EvalError(CalcError):
    errmsg: str

    def __str__(self) -> str:
        return f"[Runtime error] {self.errmsg}"


class UndefinedVariableError(EvalError):
    pass


class DivisionByZeroError(EvalError):
    pass


class Environment:
    """Variable bindings of one session"""

    def __init__(self) -> None:
        self._variables: dict[str, float] = dict()

    def lookup(self, name: str) -> float:
        if name not in self._variables:
            raise UndefinedVariableError(f"Reference to undefined variable {name!r}")
        return self._variables[name]

    def assign(self, name: str, value: float) -> None:
        self._variables[name] = value

    def snapshot(self) -> dict[str, float]:
        return dict(self._variables)

    def __contains__(self, name: object) -> bool:
        return name in self._variables

    def __len__(self) -> int:
        return len(self._variables)

    def __repr__(self) -> str:
        return f"Environment({self._variables!r})"


BinaryOperationImpl = Callable[[float, float], float]


def _divide(a: float, b: float) -> float:
    if b == 0:
        raise DivisionByZeroError("Division by zero")
    return a / b


binary_operation_impls: dict[BinaryOperator, BinaryOperationImpl] = {
    BinaryOperator.ADD: operator.add,
    BinaryOperator.SUB: operator.sub,
    BinaryOperator.MUL: operator.mul,
    BinaryOperator.DIV: _divide,
}


@dataclass(frozen=True)
class _Combine:
    operator: BinaryOperator


@dataclass(frozen=True)
class _Bind:
    name: str


def evaluate(node: Node, env: Environment) -> float:
    """Post-order walk of the tree; the left operand is always evaluated before the right one"""
    operands: list[float] = []
    pending: list[Node | _Combine | _Bind] = [node]
    while pending:
        item = pending.pop()
        if isinstance(item, Literal):
            operands.append(item.value)
        elif isinstance(item, Identifier):
            operands.append(env.lookup(item.name))
        elif isinstance(item, BinaryOp):
            pending.extend([_Combine(item.operator), item.right, item.left])
        elif isinstance(item, Assignment):
            pending.extend([_Bind(item.name), item.value])
        elif isinstance(item, _Combine):
            right = operands.pop()
            left = operands.pop()
            operands.append(binary_operation_impls[item.operator](left, right))
        elif isinstance(item, _Bind):
            env.assign(item.name, operands[-1])
            logger.debug("Assigned %s = %r", item.name, operands[-1])
        else:
            raise TypeError(f"Unexpected node type: {item!r}")

    if len(operands) != 1:
        raise RuntimeError(f"Evaluation left {len(operands)} values on the operand stack")
    return operands[0]
