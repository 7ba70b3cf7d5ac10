"""Tests for the principle → guideline → criterion tree."""

from __future__ import annotations

from a11yctl.domain.wcag_tree import WcagTree


def _assert_consistent(tree: WcagTree) -> None:
    assert tree.total_violations == sum(p.total for p in tree.principles.values())
    for principle in tree.principles.values():
        assert principle.total == sum(g.total for g in principle.guidelines.values())
        for guideline in principle.guidelines.values():
            assert guideline.total == sum(guideline.criteria.values())


class TestWcagTree:
    def test_empty(self) -> None:
        tree = WcagTree()
        assert tree.to_dict() == {"totalViolations": 0, "tree": {}}
        assert tree.rows() == []

    def test_add_creates_nodes_lazily(self) -> None:
        tree = WcagTree()
        tree.add("Perceivable", "1.4.3", 2)
        assert tree.to_dict() == {
            "totalViolations": 2,
            "tree": {
                "Perceivable": {
                    "total": 2,
                    "guidelines": {"1.4": {"total": 2, "criteria": {"1.4.3": 2}}},
                }
            },
        }

    def test_totals_consistent_after_every_add(self) -> None:
        tree = WcagTree()
        for principle, criterion, count in [
            ("Robust", "4.1.2", 3),
            ("Perceivable", "1.1.1", 1),
            ("Perceivable", "1.4.3", 2),
            ("Perceivable", "1.1.1", 5),
            ("Operable", "2.4.4", 1),
        ]:
            tree.add(principle, criterion, count)
            _assert_consistent(tree)
        assert tree.total_violations == 12

    def test_insertion_order_preserved(self) -> None:
        tree = WcagTree()
        tree.add("Robust", "4.1.2", 1)
        tree.add("Perceivable", "1.4.3", 1)
        tree.add("Perceivable", "1.1.1", 1)
        tree.add("Perceivable", "1.4.1", 1)
        assert tree.rows() == [
            ("Robust", "4.1", "4.1.2", 1),
            ("Perceivable", "1.4", "1.4.3", 1),
            ("Perceivable", "1.4", "1.4.1", 1),
            ("Perceivable", "1.1", "1.1.1", 1),
        ]
        assert list(tree.to_dict()["tree"]) == ["Robust", "Perceivable"]
