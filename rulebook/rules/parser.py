"""Parse and serialize rules with `key: value` frontmatter."""

from __future__ import annotations

import re
from dataclasses import replace
from pathlib import Path
from typing import Optional

from rulebook.constants import FRONTMATTER_DELIMITER, TAGS_KEY
from rulebook.errors import RuleReadError
from rulebook.rules.models import Rule, RuleMetadata

_FRONTMATTER_RE = re.compile(r"^---\n(.*?)\n---\n(.*)$", re.DOTALL)
_KNOWN_KEYS = ("id", "title", "priority", "category")


def parse_tags(value: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in value.replace("[", "").replace("]", "").split(","))


def parse_frontmatter(text: str) -> tuple[RuleMetadata, str]:
    """Split `text` into metadata and body.

    Parsing is best-effort: text without a leading block comes back whole
    with empty metadata, and lines that do not look like `key: value` are
    skipped.
    """
    match = _FRONTMATTER_RE.match(text)
    if not match:
        return RuleMetadata(), text

    known: dict[str, str] = {}
    extra: dict[str, str] = {}
    tags: Optional[tuple[str, ...]] = None

    for line in match.group(1).split("\n"):
        key, sep, value = line.partition(":")
        key = key.strip()
        value = value.strip()
        if not sep or not key or not value:
            continue
        if key == TAGS_KEY:
            tags = parse_tags(value)
        elif key in _KNOWN_KEYS:
            known[key] = value
        else:
            extra[key] = value

    metadata = RuleMetadata(tags=tags, extra=extra, **known)
    return metadata, match.group(2)


def parse_rule(path: Path, default_category: Optional[str] = None) -> Rule:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise RuleReadError(path, str(exc)) from exc

    metadata, body = parse_frontmatter(text)
    if metadata.category is None and default_category:
        metadata = replace(metadata, category=default_category)
    return Rule(metadata=metadata, content=body.strip(), source_path=path)


def serialize_frontmatter(metadata: RuleMetadata) -> str:
    fields = metadata.fields()
    if not fields:
        return ""

    parts: list[str] = [FRONTMATTER_DELIMITER]
    for key, value in fields.items():
        if key == TAGS_KEY:
            value = f"[{', '.join(value)}]"  # type: ignore[arg-type]
        parts.append(f"{key}: {value}")
    parts.append(FRONTMATTER_DELIMITER)
    return "\n".join(parts) + "\n"


def serialize_rule(rule: Rule) -> str:
    return serialize_frontmatter(rule.metadata) + rule.content
