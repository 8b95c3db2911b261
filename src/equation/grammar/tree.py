"""Parse tree produced by the recognizer."""
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

from equation.grammar.rules import Rule


class ParseNode(BaseModel):
    """
    One recognized construct: its rule tag, the source text it spans and its children.

    Nodes are immutable and form a strict tree. A node is created once by the recognizer
    and only ever read afterwards.
    """

    model_config = ConfigDict(frozen=True)

    rule: Rule = Field(..., description="Grammar rule the node was recognized as")
    text: str = Field(..., description="Matched source substring")
    start: int = Field(..., ge=0, description="Offset of the first matched character")
    end: int = Field(..., ge=0, description="Offset one past the last matched character")
    children: Tuple["ParseNode", ...] = Field(default=(), description="Ordered child nodes")

    @property
    def rules(self) -> Tuple[Rule, ...]:
        """Tags of the direct children, in order."""
        return tuple(child.rule for child in self.children)
