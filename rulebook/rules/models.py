"""Rule data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from rulebook.constants import UNKNOWN_RANK


class Priority(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANKS[self]

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def rank_of(cls, value: Optional[str]) -> int:
        """Rank for a raw frontmatter value; case-sensitive, unknown sorts last."""
        try:
            return cls(value).rank
        except ValueError:
            return UNKNOWN_RANK


class Category(str, Enum):
    SSR_HYDRATION = "ssr-hydration"
    DATA_FETCHING = "data-fetching"
    REACTIVITY = "reactivity"
    COMPONENT_DESIGN = "component-design"
    PERFORMANCE = "performance"
    STATE_MANAGEMENT = "state-management"
    BUNDLE_OPTIMIZATION = "bundle-optimization"
    NUXT_SPECIFIC = "nuxt-specific"

    @property
    def rank(self) -> int:
        return _CATEGORY_RANKS[self]

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]

    @property
    def impact(self) -> Priority:
        return _CATEGORY_IMPACT[self]

    @classmethod
    def rank_of(cls, value: Optional[str]) -> int:
        try:
            return cls(value).rank
        except ValueError:
            return UNKNOWN_RANK

    @classmethod
    def ordered(cls) -> list[Category]:
        return sorted(cls, key=lambda item: item.rank)


_PRIORITY_RANKS = {
    Priority.CRITICAL: 1,
    Priority.HIGH: 2,
    Priority.MEDIUM: 3,
    Priority.LOW: 4,
}

_CATEGORY_RANKS = {
    Category.SSR_HYDRATION: 1,
    Category.DATA_FETCHING: 2,
    Category.REACTIVITY: 3,
    Category.COMPONENT_DESIGN: 4,
    Category.PERFORMANCE: 5,
    Category.STATE_MANAGEMENT: 6,
    Category.BUNDLE_OPTIMIZATION: 7,
    Category.NUXT_SPECIFIC: 8,
}

_CATEGORY_LABELS = {
    Category.SSR_HYDRATION: "SSR & Hydration",
    Category.DATA_FETCHING: "Data Fetching",
    Category.REACTIVITY: "Reactivity",
    Category.COMPONENT_DESIGN: "Component Design",
    Category.PERFORMANCE: "Performance",
    Category.STATE_MANAGEMENT: "State Management",
    Category.BUNDLE_OPTIMIZATION: "Bundle Optimization",
    Category.NUXT_SPECIFIC: "Nuxt Specific",
}

_CATEGORY_IMPACT = {
    Category.SSR_HYDRATION: Priority.CRITICAL,
    Category.DATA_FETCHING: Priority.CRITICAL,
    Category.REACTIVITY: Priority.HIGH,
    Category.COMPONENT_DESIGN: Priority.HIGH,
    Category.PERFORMANCE: Priority.MEDIUM,
    Category.STATE_MANAGEMENT: Priority.MEDIUM,
    Category.BUNDLE_OPTIMIZATION: Priority.LOW,
    Category.NUXT_SPECIFIC: Priority.LOW,
}


@dataclass(frozen=True)
class RuleMetadata:
    id: Optional[str] = None
    title: Optional[str] = None
    priority: Optional[str] = None
    category: Optional[str] = None
    tags: Optional[tuple[str, ...]] = None
    extra: dict[str, str] = field(default_factory=dict)

    def fields(self) -> dict[str, object]:
        """Present fields only, known keys first, then extras in source order."""
        present: dict[str, object] = {}
        for key in ("id", "title", "priority", "category", "tags"):
            value = getattr(self, key)
            if value is not None:
                present[key] = value
        present.update(self.extra)
        return present


@dataclass(frozen=True)
class Rule:
    metadata: RuleMetadata
    content: str
    source_path: Optional[Path] = None

    @property
    def category_rank(self) -> int:
        return Category.rank_of(self.metadata.category)

    @property
    def priority_rank(self) -> int:
        return Priority.rank_of(self.metadata.priority)
