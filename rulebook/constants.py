from typing import Final


AGENTS_FILENAME: Final[str] = "AGENTS.md"
RULES_DIRNAME: Final[str] = "rules"
RULE_FILE_SUFFIX: Final[str] = ".md"

FRONTMATTER_DELIMITER: Final[str] = "---"
HORIZONTAL_RULE: Final[str] = "---"
TAGS_KEY: Final[str] = "tags"

UNKNOWN_RANK: Final[int] = 99

DOCUMENT_TITLE: Final[str] = "Vue3 & Nuxt4 Best Practices"
DOCUMENT_DESCRIPTION: Final[tuple[str, ...]] = (
    "{count} performance optimization rules for Vue3 and Nuxt4 applications.",
    "Designed for AI coding agents to automatically apply best practices.",
)

STATIC_RULE_COUNT: Final[int] = 57
STATIC_SUMMARY_ROWS: Final[tuple[tuple[str, str, int], ...]] = (
    ("Critical", "SSR & Hydration", 8),
    ("Critical", "Data Fetching", 7),
    ("High", "Reactivity", 8),
    ("High", "Component Design", 7),
    ("Medium", "Performance", 8),
    ("Medium", "State Management", 6),
    ("Low", "Bundle Optimization", 7),
    ("Low", "Nuxt Specific", 6),
)
