"""Build configuration: constants, optional YAML file, command-line overrides."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

import yaml
from jsonschema import Draft202012Validator

from rulebook.constants import (
    AGENTS_FILENAME,
    DOCUMENT_DESCRIPTION,
    DOCUMENT_TITLE,
    RULES_DIRNAME,
)
from rulebook.errors import (
    InvalidConfigSchemaError,
    InvalidYamlFormatError,
    MissingConfigFileError,
)
from rulebook.rules.assembler import DocumentSettings, SummaryMode

CONFIG_SCHEMA = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "rules_dir": {"type": "string", "minLength": 1},
        "output": {"type": "string", "minLength": 1},
        "title": {"type": "string", "minLength": 1},
        "description": {
            "anyOf": [
                {"type": "string"},
                {"type": "array", "items": {"type": "string"}},
            ]
        },
        "summary": {"enum": [mode.value for mode in SummaryMode]},
    },
    "additionalProperties": False,
}


@dataclass(frozen=True)
class BuildConfig:
    rules_dir: Path = field(default_factory=lambda: Path(".") / RULES_DIRNAME)
    output_path: Path = field(default_factory=lambda: Path(".") / AGENTS_FILENAME)
    title: str = DOCUMENT_TITLE
    description: tuple[str, ...] = DOCUMENT_DESCRIPTION
    summary: SummaryMode = SummaryMode.STATIC

    def document_settings(self) -> DocumentSettings:
        return DocumentSettings(
            title=self.title,
            description=self.description,
            summary=self.summary,
        )

    def with_overrides(
        self,
        rules_dir: Optional[Path] = None,
        output_path: Optional[Path] = None,
        summary: Optional[str] = None,
    ) -> BuildConfig:
        updated = self
        if rules_dir is not None:
            updated = replace(updated, rules_dir=rules_dir)
        if output_path is not None:
            updated = replace(updated, output_path=output_path)
        if summary is not None:
            updated = replace(updated, summary=SummaryMode(summary.lower()))
        return updated


def _schema_error_message(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


@lru_cache(maxsize=1)
def _config_validator() -> Draft202012Validator:
    return Draft202012Validator(CONFIG_SCHEMA)


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.is_file():
        raise MissingConfigFileError(path)
    try:
        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (yaml.YAMLError, OSError, UnicodeDecodeError) as exc:
        raise InvalidYamlFormatError(path, str(exc)) from exc
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise InvalidConfigSchemaError(path, "must be a YAML mapping")
    return payload


def load_config(path: Path) -> BuildConfig:
    """Load a YAML config file.

    Keys: `rules_dir`, `output`, `title`, `description` (string or list of
    blurb lines, `{count}` is substituted) and `summary`
    (`static`/`computed`). Relative paths resolve against the directory
    holding the config file.
    """
    payload = _read_yaml(path)
    error = next(iter(_config_validator().iter_errors(payload)), None)
    if error is not None:
        raise InvalidConfigSchemaError(path, _schema_error_message(error))

    base_dir = path.parent
    description = payload.get("description", DOCUMENT_DESCRIPTION)
    if isinstance(description, str):
        description = (description,)

    return BuildConfig(
        rules_dir=base_dir / payload.get("rules_dir", RULES_DIRNAME),
        output_path=base_dir / payload.get("output", AGENTS_FILENAME),
        title=payload.get("title", DOCUMENT_TITLE),
        description=tuple(description),
        summary=SummaryMode(payload.get("summary", SummaryMode.STATIC.value)),
    )


def resolve_config(config_path: Optional[Path] = None) -> BuildConfig:
    if config_path is None:
        return BuildConfig()
    return load_config(config_path)
