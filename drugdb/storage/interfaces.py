"""Storage interface definitions for loaded drugs."""

from abc import ABC, abstractmethod
from typing import Iterator

from drugdb.entity import Drug


class DrugStorageInterface(ABC):
    """Abstract interface for the collection that owns a loaded dataset.

    Drugs keep their load order, so they can be addressed both by DrugBank
    ID and by position.
    """

    @abstractmethod
    def add(self, drug: Drug) -> str:
        """Store a drug and return its ID.

        Raises:
            DuplicateDrugError: If a drug with the same ID is already stored.
        """

    @abstractmethod
    def update(self, drug: Drug) -> bool:
        """Replace the stored drug with the same ID, keeping its position.

        Returns True if the drug was found and replaced, False otherwise.
        """

    @abstractmethod
    def get(self, drug_id: str) -> Drug | None:
        """Retrieve a drug by DrugBank ID, or None if not found."""

    @abstractmethod
    def get_by_index(self, index: int) -> Drug:
        """Retrieve a drug by its position in load order.

        Raises:
            IndexError: If the index is out of range.
        """

    @abstractmethod
    def find_by_name(self, name: str) -> Drug | None:
        """Return the first drug whose name equals ``name`` exactly, or None."""

    @abstractmethod
    def list_all(self) -> list[Drug]:
        """Return every stored drug in load order."""

    @abstractmethod
    def interactions_of(self, drug: Drug) -> list[tuple[Drug, str]]:
        """Return the resolved interactions of ``drug`` as (other drug, description) pairs."""

    @abstractmethod
    def interaction_between(self, drug: Drug, target: Drug) -> str | None:
        """Return the description of the interaction from ``drug`` to ``target``, or None."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored drugs."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every stored drug."""

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[Drug]:
        return iter(self.list_all())

    def __contains__(self, drug_id: object) -> bool:
        return isinstance(drug_id, str) and self.get(drug_id) is not None
