"""Principle → guideline → criterion violation tree.

INVARIANT: after every ``add()``, ``principle.total`` equals the sum of its
guideline totals, ``guideline.total`` equals the sum of its criterion
counts, and ``total_violations`` equals the sum of principle totals.
Totals are maintained incrementally and never recomputed on read.

Children are held in dicts, so iteration follows the order in which each
key was first added. Exports depend on that order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from a11yctl.domain.findings import Count, guideline_id_for


@dataclass
class GuidelineNode:
    total: Count = 0
    criteria: dict[str, Count] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"total": self.total, "criteria": dict(self.criteria)}


@dataclass
class PrincipleNode:
    total: Count = 0
    guidelines: dict[str, GuidelineNode] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "guidelines": {gid: node.to_dict() for gid, node in self.guidelines.items()},
        }


@dataclass
class WcagTree:
    """Mutable accumulator behind ``violations_by_wcag_tree``."""

    total_violations: Count = 0
    principles: dict[str, PrincipleNode] = field(default_factory=dict)

    def add(self, principle: str, criterion_id: str, count: Count) -> None:
        """Fold *count* occurrences of *criterion_id* into every level at once."""
        principle_node = self.principles.setdefault(principle, PrincipleNode())
        guideline_node = principle_node.guidelines.setdefault(
            guideline_id_for(criterion_id), GuidelineNode()
        )
        guideline_node.criteria[criterion_id] = guideline_node.criteria.get(criterion_id, 0) + count
        guideline_node.total += count
        principle_node.total += count
        self.total_violations += count

    def rows(self) -> list[tuple[str, str, str, Count]]:
        """Flatten to ``(principle, guideline, criterion, occurrences)`` in insertion order."""
        return [
            (principle, guideline_id, criterion_id, occurrences)
            for principle, principle_node in self.principles.items()
            for guideline_id, guideline_node in principle_node.guidelines.items()
            for criterion_id, occurrences in guideline_node.criteria.items()
        ]

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the ``{totalViolations, tree}`` report shape."""
        return {
            "totalViolations": self.total_violations,
            "tree": {name: node.to_dict() for name, node in self.principles.items()},
        }
