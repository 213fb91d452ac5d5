"""Compile reporting dataclasses."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class ComponentPassReport:
    """Rewrite counts for one component pass."""

    tag: str
    view: str
    rewrites: Dict[str, int] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return sum(self.rewrites.values())

    def to_dict(self) -> Dict[str, Any]:
        return {"tag": self.tag, "view": self.view, "rewrites": dict(self.rewrites), "total": self.total}


@dataclass
class CompileReport:
    """Report from a compile call.

    One entry per component pass, in the order the passes ran.
    """

    prefix: str = ""
    passes: List[ComponentPassReport] = field(default_factory=list)

    @property
    def total_rewrites(self) -> int:
        return sum(p.total for p in self.passes)

    def rewrites_for(self, tag: str) -> Dict[str, int]:
        """Summed rewrite counts for every pass of ``tag``."""
        totals: Dict[str, int] = {}
        for p in self.passes:
            if p.tag != tag:
                continue
            for kind, count in p.rewrites.items():
                totals[kind] = totals.get(kind, 0) + count
        return totals

    def to_dict(self) -> Dict[str, Any]:
        return {
            "prefix": self.prefix,
            "total_rewrites": self.total_rewrites,
            "passes": [p.to_dict() for p in self.passes],
        }


__all__ = ["CompileReport", "ComponentPassReport"]
