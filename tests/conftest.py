"""Test fixtures and helpers for the drug loader.

This module provides:
- `make_record_line`, which builds a raw dataset line in the ``>,<``
  delimited export format, so tests can describe records field by field
- `make_test_drug`, a factory for `Drug` instances with sensible defaults
- Pytest fixtures for the parser, resolver, in-memory storage and loader
"""

import pytest

from drugdb.config import LoaderConfig
from drugdb.entity import Drug
from drugdb.loader import DrugLoader
from drugdb.parser import DrugRecordParser
from drugdb.resolve import InteractionResolver
from drugdb.storage.memory import InMemoryDrugStorage

HEADER_LINE = (
    "<DrugBank ID>,<Accession Numbers>,<Common name>,<Synonyms>,<Description>,<Type>,"
    "<Chemical Formula>,<UNII>,<CAS number>,<PubChem Compound>,<PubChem Substance>,"
    "<Toxicity>,<Food Interactions>,<Drug Interactions>,<SMILES>"
)


def make_record_line(
    drug_id: str,
    name: str = "Testdrug",
    synonyms: str = "Not Available",
    description: str = "A drug used in tests.",
    formula: str = "C2H6O",
    unii: str = "3K9958V90M",
    cas_number: str = "64-17-5",
    pubchem_compound_id: str = "702",
    pubchem_substance_id: str = "46507592",
    toxicity: str = "Not Available",
    food_interactions: str = "Not Available",
    drug_interactions: str = "Not Available",
    structure: str = "CCO",
) -> str:
    """Build one raw dataset line with a trailing newline.

    Multi-value fields are passed already joined (``;;`` and ``@@``), exactly
    as they appear in the export. Fields 1 and 5 are filled with filler text.
    """
    fields = [
        drug_id,
        "BTD00001",
        name,
        synonyms,
        description,
        "small molecule",
        formula,
        unii,
        cas_number,
        pubchem_compound_id,
        pubchem_substance_id,
        toxicity,
        food_interactions,
        drug_interactions,
        structure,
    ]
    return "<" + ">,<".join(fields) + ">\n"


def interaction_entry(other_id: str, other_name: str, description: str) -> str:
    """Build one ``id@@name@@description`` drug interaction entry."""
    return "@@".join((other_id, other_name, description))


def make_test_drug(
    drug_id: str,
    name: str | None = None,
    pending_interactions: dict[str, str] | None = None,
    interactions: dict[str, str] | None = None,
    **fields,
) -> Drug:
    """Factory function to create Drug instances with sensible defaults.

    Args:
        drug_id: DrugBank ID (required).
        name: Display name (default: "Drug <drug_id>").
        pending_interactions: Raw interactions keyed by DrugBank ID.
        interactions: Resolved interactions keyed by DrugBank ID.
        **fields: Any other `Drug` field.
    """
    return Drug(
        drug_id=drug_id,
        name=name if name is not None else f"Drug {drug_id}",
        pending_interactions=pending_interactions or {},
        interactions=interactions or {},
        **fields,
    )


@pytest.fixture
def parser() -> DrugRecordParser:
    """Provide a record parser."""
    return DrugRecordParser()


@pytest.fixture
def resolver() -> InteractionResolver:
    """Provide an interaction resolver."""
    return InteractionResolver()


@pytest.fixture
def drug_storage() -> InMemoryDrugStorage:
    """Provide a fresh in-memory drug storage."""
    return InMemoryDrugStorage()


@pytest.fixture
def loader(drug_storage: InMemoryDrugStorage) -> DrugLoader:
    """Provide a loader with default policies backed by `drug_storage`."""
    return DrugLoader(storage=drug_storage)


@pytest.fixture
def skipping_loader(drug_storage: InMemoryDrugStorage) -> DrugLoader:
    """Provide a loader that skips malformed lines instead of aborting."""
    return DrugLoader(storage=drug_storage, config=LoaderConfig(on_error="skip"))
