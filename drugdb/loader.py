"""Two-pass loader for the flat-file drug dataset.

This module provides the `DrugLoader` class, which turns raw dataset lines
into a fully cross-linked drug collection:

**Pass 1 - Record parsing:**
    1. Skip the header line (configurable)
    2. Parse each remaining line into a `Drug` with `DrugRecordParser`
    3. Store it, keeping the first record of any repeated DrugBank ID

**Pass 2 - Interaction resolution:**
    1. Build a DrugBank ID index over every stored drug
    2. Link each pending interaction to the loaded drug it names
    3. Replace each stored drug with its resolved copy

Pass 2 starts only after every line has been parsed, so a record may refer
to drugs that appear later in the file.

Failure policy:
    - A missing or unreadable file raises `SourceUnavailableError`. The
      loader never reports an empty collection for a source it could not read.
    - A malformed line raises `MalformedRecordError` (``on_error="raise"``,
      the default) or is logged, recorded in `LoadResult.errors` and skipped
      (``on_error="skip"``). When a load aborts, the storage keeps the drugs
      parsed before the bad line, unresolved.
    - A repeated DrugBank ID is skipped with a warning
      (``on_duplicate="skip"``, the default) or raises `DuplicateDrugError`.
      Fields of two records are never merged.
    - Interactions naming a drug outside the dataset are dropped and counted
      in `LoadResult.interactions_dangling`.

Example usage:
    ```python
    loader = DrugLoader()
    result = loader.load_file("20191031_FDASMDrugs_2546.txt")
    drug = loader.storage.find_by_name("Abacavir")
    print(drug.render(120))
    ```
"""

from pathlib import Path
from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field

from drugdb.config import LoaderConfig
from drugdb.errors import DuplicateDrugError, MalformedRecordError, SourceUnavailableError
from drugdb.logging import setup_logging
from drugdb.parser import DrugRecordParser
from drugdb.resolve import InteractionResolver
from drugdb.storage.interfaces import DrugStorageInterface
from drugdb.storage.memory import InMemoryDrugStorage


class LoadResult(BaseModel):
    """Statistics of one completed load.

    Attributes:
        source: Path of the loaded file, or a label for in-memory lines.
        drugs_loaded: Number of drugs in storage after the load.
        lines_read: Number of record lines seen (header and blank lines excluded).
        lines_skipped: Malformed lines skipped under ``on_error="skip"``.
        duplicates_skipped: Records dropped because their ID was already loaded.
        interactions_resolved: Interactions linked to a loaded drug.
        interactions_dangling: Interactions dropped because the other drug
            is not in the dataset.
        errors: Messages for every skipped malformed line.
    """

    model_config = {"frozen": True}

    source: str
    drugs_loaded: int
    lines_read: int
    lines_skipped: int = 0
    duplicates_skipped: int = 0
    interactions_resolved: int = 0
    interactions_dangling: int = 0
    errors: tuple[str, ...] = ()


class DrugLoader(BaseModel):
    """Loads a drug dataset into storage and resolves drug-drug interactions.

    Attributes:
        parser: Converts one raw line into a `Drug`.
        resolver: Links pending interactions once every drug is parsed.
        storage: Collection that owns the loaded drugs. It is cleared at the
            start of each load.
        config: Encoding, header and error policies.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    parser: DrugRecordParser = Field(default_factory=DrugRecordParser)
    resolver: InteractionResolver = Field(default_factory=InteractionResolver)
    storage: DrugStorageInterface = Field(default_factory=InMemoryDrugStorage)
    config: LoaderConfig = Field(default_factory=LoaderConfig)

    def load_file(self, path: str | Path) -> LoadResult:
        """Loads a dataset file.

        Args:
            path: Path to the flat-file dataset.

        Returns:
            A `LoadResult` describing the load.

        Raises:
            SourceUnavailableError: If the file cannot be opened or decoded.
            MalformedRecordError: On a malformed line with ``on_error="raise"``.
            DuplicateDrugError: On a repeated ID with ``on_duplicate="raise"``.
        """
        path = Path(path)
        try:
            f = open(path, encoding=self.config.encoding)
        except OSError as e:
            raise SourceUnavailableError(path, f"cannot be opened: {e.strerror or e}") from e
        with f:
            try:
                return self.load_lines(f, source=str(path))
            except UnicodeDecodeError as e:
                raise SourceUnavailableError(path, f"is not valid {self.config.encoding}: {e.reason}") from e
            except OSError as e:
                raise SourceUnavailableError(path, f"could not be read: {e}") from e

    def load_lines(self, lines: Iterable[str], source: str = "<lines>") -> LoadResult:
        """Loads a dataset from an iterable of raw lines.

        Args:
            lines: Raw lines, header first when ``skip_header`` is set.
            source: Label used in logs and in the result.

        Returns:
            A `LoadResult` describing the load.
        """
        logger = setup_logging()
        logger.info(f"Loading drugs from {source}")
        self.storage.clear()

        lines_read, errors, duplicates = self._parse_pass(lines)
        logger.info(
            f"Parsed {self.storage.count()} drugs from {lines_read} lines; "
            "now building the drug-drug interactions"
        )

        resolution = self.resolver.resolve(self.storage.list_all())
        for drug in resolution.drugs:
            self.storage.update(drug)

        result = LoadResult(
            source=source,
            drugs_loaded=self.storage.count(),
            lines_read=lines_read,
            lines_skipped=len(errors),
            duplicates_skipped=duplicates,
            interactions_resolved=resolution.resolved,
            interactions_dangling=resolution.dangling,
            errors=tuple(errors),
        )
        logger.info(result)
        return result

    def _parse_pass(self, lines: Iterable[str]) -> tuple[int, list[str], int]:
        """Pass 1: parse and store every record line.

        Returns:
            (record lines read, messages of skipped lines, duplicates skipped)
        """
        logger = setup_logging()
        lines_read = 0
        errors: list[str] = []
        duplicates = 0

        for line_number, line in enumerate(lines, start=1):
            if line_number == 1 and self.config.skip_header:
                continue
            if not line.strip():
                continue
            lines_read += 1

            try:
                drug = self.parser.parse(line, line_number)
            except MalformedRecordError as e:
                if self.config.on_error == "raise":
                    raise
                logger.warning(f"Skipping malformed record: {e}")
                errors.append(str(e))
                continue

            try:
                self.storage.add(drug)
            except DuplicateDrugError as e:
                if self.config.on_duplicate == "raise":
                    raise DuplicateDrugError(drug.drug_id, line_number) from e
                logger.warning(f"Skipping duplicate DrugBank ID {drug.drug_id!r} on line {line_number}")
                duplicates += 1

        return lines_read, errors, duplicates


def load_drugs(path: str | Path, config: LoaderConfig | None = None) -> InMemoryDrugStorage:
    """Load a dataset file into a new `InMemoryDrugStorage`.

    Raises the same errors as `DrugLoader.load_file`.
    """
    storage = InMemoryDrugStorage()
    loader = DrugLoader(storage=storage, config=config or LoaderConfig())
    loader.load_file(path)
    return storage
