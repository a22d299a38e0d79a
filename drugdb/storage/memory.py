"""In-memory drug storage.

The whole dataset is kept in a list (load order) plus a dict index keyed by
DrugBank ID. ID lookups are O(1); name lookups scan the list.

Thread safety: not thread-safe. Loading is single-threaded and the
collection is read-mostly afterwards.
"""

from drugdb.entity import Drug
from drugdb.errors import DuplicateDrugError
from drugdb.storage.interfaces import DrugStorageInterface


class InMemoryDrugStorage(DrugStorageInterface):
    """In-memory drug storage keeping load order.

    Example:
        ```python
        storage = InMemoryDrugStorage()
        storage.add(drug)
        aspirin = storage.find_by_name("Aspirin")
        for other, description in storage.interactions_of(aspirin):
            print(other.name, description)
        ```
    """

    def __init__(self) -> None:
        """Initialize an empty drug storage."""
        self._drugs: list[Drug] = []
        self._positions: dict[str, int] = {}

    def add(self, drug: Drug) -> str:
        """Appends a drug to the storage.

        Args:
            drug: The `Drug` to add.

        Returns:
            The DrugBank ID of the added drug.

        Raises:
            DuplicateDrugError: If a drug with the same ID is already stored.
                The stored drug is left untouched.
        """
        if drug.drug_id in self._positions:
            raise DuplicateDrugError(drug.drug_id)
        self._positions[drug.drug_id] = len(self._drugs)
        self._drugs.append(drug)
        return drug.drug_id

    def update(self, drug: Drug) -> bool:
        """Replaces the stored drug that has the same ID.

        Args:
            drug: The updated `Drug`.

        Returns:
            True if a drug with that ID existed and was replaced.
        """
        position = self._positions.get(drug.drug_id)
        if position is None:
            return False
        self._drugs[position] = drug
        return True

    def get(self, drug_id: str) -> Drug | None:
        position = self._positions.get(drug_id)
        return None if position is None else self._drugs[position]

    def get_by_index(self, index: int) -> Drug:
        return self._drugs[index]

    def find_by_name(self, name: str) -> Drug | None:
        """Finds a drug by exact, case-sensitive name.

        This performs an O(n) scan in load order and returns the first match.
        """
        for drug in self._drugs:
            if drug.name == name:
                return drug
        return None

    def list_all(self) -> list[Drug]:
        return list(self._drugs)

    def interactions_of(self, drug: Drug) -> list[tuple[Drug, str]]:
        """Returns the resolved interactions of a drug with the linked drugs.

        Args:
            drug: A drug from this storage (or a copy with the same ID).

        Returns:
            (other drug, description) pairs in the order of the drug's
            resolved map. IDs not present in this storage are left out.
        """
        pairs: list[tuple[Drug, str]] = []
        for other_id, description in drug.interactions.items():
            other = self.get(other_id)
            if other is not None:
                pairs.append((other, description))
        return pairs

    def interaction_between(self, drug: Drug, target: Drug) -> str | None:
        if target.drug_id not in self._positions:
            return None
        return drug.interaction_with(target)

    def count(self) -> int:
        return len(self._drugs)

    def clear(self) -> None:
        """Removes every stored drug."""
        self._drugs.clear()
        self._positions.clear()
