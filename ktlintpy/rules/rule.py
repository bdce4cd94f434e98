"""Rule and rule set contracts."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Final, Protocol, TypeAlias

from ktlintpy.cst import SyntaxElement

EmitFn: TypeAlias = Callable[[int, str, bool], None]
"""`emit(offset, message, can_be_autocorrected)`; offset is in normalized-text coordinates."""

STANDARD_RULE_SET_ID: Final[str] = "standard"
"""Rules of this set are reported under their bare id."""


class Rule(Protocol):
    """Visits one tree element at a time and reports violations through `emit`.

    When `autocorrect` is true the rule may rewrite the tree in place, and must
    leave it consistent after a single application.
    """

    @property
    def id(self) -> str: ...

    def visit(self, node: SyntaxElement, autocorrect: bool, emit: EmitFn) -> None: ...


@dataclass(frozen=True, slots=True)
class RuleSet:
    """Named, ordered collection of rules."""

    id: str
    rules: tuple[Rule, ...] = ()

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)
