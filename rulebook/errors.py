from pathlib import Path
from typing import Optional


class RulebookError(Exception):
    """Base user-facing application error."""


class RulebookFileError(RulebookError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class MissingRulesDirError(RulebookFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Missing rules directory")


class RuleReadError(RulebookFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Cannot read rule file ({detail})")


class OutputWriteError(RulebookFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Cannot write output ({detail})")


class MissingConfigFileError(RulebookFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Missing config file")


class InvalidYamlFormatError(RulebookFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid YAML format ({detail})")


class InvalidConfigSchemaError(RulebookFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid config schema ({detail})")


class MissingRuleFieldError(RulebookError):
    def __init__(self, field: str, path: Optional[Path]) -> None:
        self.field = field
        self.path = path
        location = str(path) if path is not None else "<unknown>"
        super().__init__(f"Rule is missing required field '{field}': {location}")
