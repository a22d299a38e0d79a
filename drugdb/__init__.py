"""drugdb - load and cross-link the FDA small-molecule drug dataset.

Records are parsed into `Drug` entities in a first pass, then their
drug-drug interactions are resolved against the full loaded collection in
a second pass:

    from drugdb import DrugLoader

    loader = DrugLoader()
    loader.load_file("20191031_FDASMDrugs_2546.txt")
    abacavir = loader.storage.find_by_name("Abacavir")
"""

from drugdb.config import DisplayConfig, DrugDbConfig, LoaderConfig, load_config
from drugdb.entity import Drug
from drugdb.errors import (
    DrugLoadError,
    DuplicateDrugError,
    MalformedRecordError,
    SourceUnavailableError,
)
from drugdb.loader import DrugLoader, LoadResult, load_drugs
from drugdb.parser import DrugRecordParser
from drugdb.resolve import InteractionResolver, ResolutionResult, build_index
from drugdb.storage import DrugStorageInterface, InMemoryDrugStorage
from drugdb.text import wrap_text

__all__ = [
    "Drug",
    "DrugRecordParser",
    "InteractionResolver",
    "ResolutionResult",
    "build_index",
    "DrugLoader",
    "LoadResult",
    "load_drugs",
    "DrugStorageInterface",
    "InMemoryDrugStorage",
    "DrugDbConfig",
    "LoaderConfig",
    "DisplayConfig",
    "load_config",
    "DrugLoadError",
    "SourceUnavailableError",
    "MalformedRecordError",
    "DuplicateDrugError",
    "wrap_text",
]

__version__ = "0.1.0"
