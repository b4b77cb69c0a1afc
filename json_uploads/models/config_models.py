from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path

"""Config dataclass for the JSON uploads workbench.

Separate from the loader in json_uploads/config/loader.py, which is only
responsible for reading and validating the YAML file.
"""

__all__ = [
    "DEFAULT_CONTENT_TYPES",
    "AppConfig",
]

DEFAULT_CONTENT_TYPES: tuple[str, ...] = ("application/json",)


@dataclass(frozen=True)
class AppConfig:
    """Root configuration object.

    Every field has a default, so ``AppConfig()`` is a complete configuration
    when no YAML file is present.
    """
    output_directory: Path = Path("./exports")  # Where exported artifacts are written
    accepted_content_types: tuple[str, ...] = field(default=DEFAULT_CONTENT_TYPES)
    max_concurrent_reads: int = 8  # Upper bound on in-flight file reads
    lock_rows_while_editing: bool = True  # Reject delete / row export while a row is edited

    def with_output_directory(self, directory: Path | str | None) -> AppConfig:
        """Return a copy with ``output_directory`` overridden (CLI flag)."""
        if directory is None:
            return self
        return replace(self, output_directory=Path(directory))
