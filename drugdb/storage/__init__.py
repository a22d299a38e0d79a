"""Storage interfaces and implementations for loaded drugs."""

from drugdb.storage.interfaces import DrugStorageInterface
from drugdb.storage.memory import InMemoryDrugStorage

__all__ = [
    "DrugStorageInterface",
    "InMemoryDrugStorage",
]
