"""Exceptions raised while loading a drug dataset.

Every failure the loader reports derives from `DrugLoadError`, so callers
can catch the whole family in one place. A reference to a drug that is not
part of the loaded dataset is not a failure and has no exception here.
"""

from pathlib import Path


class DrugLoadError(Exception):
    """Base class for all loader failures."""


class SourceUnavailableError(DrugLoadError):
    """The input file is missing or cannot be read."""

    def __init__(self, path: str | Path, reason: str = "cannot be opened"):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Drug dataset {self.path} {reason}")


class MalformedRecordError(DrugLoadError, ValueError):
    """A record line does not have the expected shape.

    Attributes:
        line_number: 1-based line number in the source, header included.
        field: Name of the offending field, or "record" when the whole line
            could not be split.
        message: Human-readable description of the problem.
    """

    def __init__(self, line_number: int, field: str, message: str):
        self.line_number = line_number
        self.field = field
        self.message = message
        super().__init__(f"line {line_number}, field {field}: {message}")


class DuplicateDrugError(DrugLoadError):
    """A second record carries a DrugBank ID that is already loaded."""

    def __init__(self, drug_id: str, line_number: int | None = None):
        self.drug_id = drug_id
        self.line_number = line_number
        where = f" (line {line_number})" if line_number is not None else ""
        super().__init__(f"Duplicate DrugBank ID {drug_id!r}{where}")
