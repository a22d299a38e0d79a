"""Load drugdb configuration from TOML (drugdb.toml).

Config file is looked up in order:
  1. Path in DRUGDB_CONFIG env var (if set)
  2. drugdb.toml in the repository root (next to the drugdb package)
  3. drugdb.toml in the current working directory

If no usable file is found, built-in defaults are used. Example file:

    data_file = "20191031_FDASMDrugs_2546.txt"

    [loader]
    encoding = "utf-8"
    skip_header = true
    on_error = "raise"      # or "skip"
    on_duplicate = "skip"   # or "raise"

    [display]
    line_width = 120
    sample_index = 5
    lookup_name = "Abacavir"
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError

from drugdb.logging import setup_logging

DEFAULT_DATA_FILE = "20191031_FDASMDrugs_2546.txt"
DEFAULT_LINE_WIDTH = 120


class LoaderConfig(BaseModel, frozen=True):
    """How the loader reads and validates the dataset."""

    encoding: str = "utf-8"
    skip_header: bool = Field(default=True, description="Discard the first line of the file.")
    on_error: Literal["raise", "skip"] = Field(
        default="raise",
        description="Abort the load on a malformed line, or log and skip it.",
    )
    on_duplicate: Literal["raise", "skip"] = Field(
        default="skip",
        description="Abort on a repeated DrugBank ID, or keep the first record and skip later ones.",
    )


class DisplayConfig(BaseModel, frozen=True):
    """Settings for the show command."""

    line_width: int = Field(default=DEFAULT_LINE_WIDTH, ge=1)
    sample_index: int = Field(default=5, ge=0)
    lookup_name: str = "Abacavir"


class DrugDbConfig(BaseModel, frozen=True):
    data_file: Path = Path(DEFAULT_DATA_FILE)
    loader: LoaderConfig = Field(default_factory=LoaderConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)


def _default_config_paths() -> list[Path]:
    """Return paths to check for drugdb.toml (first usable wins)."""
    paths: list[Path] = []
    if os.environ.get("DRUGDB_CONFIG"):
        paths.append(Path(os.environ["DRUGDB_CONFIG"]))
    # .../drugdb/config.py -> repository root
    paths.append(Path(__file__).resolve().parent.parent / "drugdb.toml")
    paths.append(Path.cwd() / "drugdb.toml")
    return paths


def _read_toml(path: Path) -> dict[str, Any] | None:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError):
        return None


def load_config(paths: list[Path] | None = None) -> DrugDbConfig:
    """Load drugdb config from the first readable, valid TOML file.

    Args:
        paths: Candidate files to try. Defaults to the standard lookup order.

    Returns:
        The parsed `DrugDbConfig`, or the defaults if no file is usable.
        Unknown keys are ignored. A file that fails validation is skipped
        with a warning naming the file and the offending values.
    """
    for path in paths if paths is not None else _default_config_paths():
        if not path.is_file():
            continue
        data = _read_toml(path)
        if data is None:
            continue
        try:
            return DrugDbConfig.model_validate(data)
        except ValidationError as e:
            logger = setup_logging()
            logger.warning(f"Ignoring invalid config file {path}: {e}")
            continue
    return DrugDbConfig()
