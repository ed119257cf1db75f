"""Running a set of rules over a parsed Protocol Buffer file."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, Protocol


class _HasApply(Protocol):
    def apply(self, proto: Any) -> list[Any]: ...


class Linter:
    """Applies rules to a proto and gathers their failures."""

    def run(
        self,
        gen_proto: Callable[[Any], Any],
        has_applies: Iterable[_HasApply],
    ) -> list[Any]:
        """Apply each rule in turn.

        Before each rule, ``gen_proto`` is handed the previous proto (None at first)
        and returns the proto the rule is applied to. Errors propagate.
        """
        failures: list[Any] = []
        proto = None
        for has_apply in has_applies:
            proto = gen_proto(proto)
            failures.extend(has_apply.apply(proto))
        return failures


class RuleList(list):
    """A list of rules, each with an ``id`` and an ``is_official`` flag."""

    def default(self) -> RuleList:
        """Return the official rules."""
        return RuleList(rule for rule in self if rule.is_official)

    def ids(self) -> list[str]:
        """Return the ids of the rules, in order."""
        return [rule.id for rule in self]