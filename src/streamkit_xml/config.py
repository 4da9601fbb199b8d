"""Configuration model for the streamkit-xml reader.

Provides ``ReaderConfig`` with all tunable parameters and sensible
defaults.  Supports loading overrides from YAML or JSON files via the
``from_file()`` classmethod.
"""

from __future__ import annotations

import json
import pathlib
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field


class ReaderConfig(BaseModel):
    """All tunable parameters with sensible defaults for stream extraction."""

    model_config = ConfigDict(extra="forbid")

    # --- Identity ---
    parser_version: str = "streamkit_xml:1.0.0"

    # --- Drive Loop ---
    buffer_size: int = Field(
        default=1024,
        gt=0,
        description="Number of bytes read from the source per tokenizer feed.",
    )

    # --- Tokenizer defaults ---
    buffer_text: bool = Field(
        default=True,
        description="Coalesce adjacent character data before it is delivered.",
    )
    encoding: str | None = Field(
        default=None,
        description="Override the document encoding handed to the tokenizer.",
    )

    # --- Output ---
    lower_case: bool = Field(
        default=False,
        description="Lowercase tag and attribute names in emitted markup.",
    )
    include_ancestors: bool = Field(
        default=False,
        description="Wrap each match in its buffered collect-region ancestors.",
    )

    # --- Logging / PII Safety ---
    log_sample_data: bool = False

    @classmethod
    def from_file(cls, path: str) -> ReaderConfig:
        """Load overrides from a ``.json``, ``.yaml`` or ``.yml`` file.

        Keys absent from the file keep their defaults; unknown keys raise
        a ``ValidationError``.
        """
        data = _load_mapping(pathlib.Path(path))
        return cls.model_validate(data)


def _load_mapping(file_path: pathlib.Path) -> dict[str, Any]:
    if not file_path.exists():
        raise FileNotFoundError(f"Config file not found: {file_path}")

    suffix = file_path.suffix.lower()
    with open(file_path) as fh:
        if suffix in (".yaml", ".yml"):
            data = yaml.safe_load(fh)
        elif suffix == ".json":
            data = json.load(fh)
        else:
            raise ValueError(
                f"Unsupported config file extension '{suffix}'. "
                "Use .yaml, .yml, or .json."
            )

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(
            f"Config file must contain a mapping of options, got {type(data).__name__}"
        )
    return data
