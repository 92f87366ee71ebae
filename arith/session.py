import logging
from dataclasses import dataclass, field
from typing import Optional

from arith.nodes import Node
from arith.parser import parse
from arith.runtime import Environment, evaluate
from arith.tokenizer import Token, tokenize
from arith.utils import CalcError

logger = logging.getLogger(__name__)


@dataclass
class Outcome:
    """Result of running one line: either a value or the error that stopped it"""

    code: str
    tokens: Optional[list[Token]] = None
    tree: Optional[Node] = None
    value: Optional[float] = None
    error: Optional[CalcError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class Session:
    environment: Environment = field(default_factory=Environment)

    def execute(self, code: str) -> Outcome:
        outcome = Outcome(code=code)
        try:
            outcome.tokens = tokenize(code)
            outcome.tree = parse(outcome.tokens, code)
            outcome.value = evaluate(outcome.tree, self.environment)
        except CalcError as e:
            logger.info("Failed to evaluate %r: %s", code, e.__class__.__name__)
            outcome.error = e
        return outcome
