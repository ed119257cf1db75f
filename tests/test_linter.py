from dataclasses import dataclass

import pytest

from protolinter.linter import Linter, RuleList


@dataclass
class FakeRule:
    id: str
    is_official: bool = True
    failures: tuple = ()

    def apply(self, proto):
        return [(self.id, proto, f) for f in self.failures]


def test_run_collects_failures_in_order():
    seen = []

    def gen(prev):
        seen.append(prev)
        return len(seen)

    rules = [FakeRule("A", failures=("x", "y")), FakeRule("B", failures=("z",))]
    got = Linter().run(gen, rules)
    assert got == [("A", 1, "x"), ("A", 1, "y"), ("B", 2, "z")]
    assert seen == [None, 1]


def test_run_without_rules():
    assert Linter().run(lambda p: p, []) == []


def test_run_propagates_gen_error():
    def gen(prev):
        raise ValueError("parse")

    with pytest.raises(ValueError, match="parse"):
        Linter().run(gen, [FakeRule("A")])


def test_default_and_ids():
    rules = RuleList([FakeRule("A"), FakeRule("B", is_official=False), FakeRule("C")])
    assert rules.default().ids() == ["A", "C"]
    assert rules.ids() == ["A", "B", "C"]
    assert isinstance(rules.default(), RuleList)