"""Drug-drug interaction resolution (pass 2 of loading).

After every record has been parsed, each drug's ``pending_interactions``
still refers to other drugs by DrugBank ID. Resolution builds an ID index
over the full collection once and keeps the references whose ID is in it:

    index = build_index(drugs)                  # O(n)
    for drug in drugs:                          # O(m) over all references
        interactions = {id: desc for id, desc in drug.pending_interactions.items()
                        if id in index}

References to drugs outside the loaded dataset are dropped without error,
since datasets are often subsets of DrugBank.
"""

from typing import Iterable, Sequence

from pydantic import BaseModel

from drugdb.entity import Drug
from drugdb.logging import setup_logging


class ResolutionResult(BaseModel):
    """Outcome of one resolution pass.

    Attributes:
        drugs: Resolved copies of the input drugs, in input order.
        resolved: Number of references linked to a loaded drug.
        dangling: Number of references dropped because no loaded drug has
            that ID.
    """

    model_config = {"frozen": True}

    drugs: tuple[Drug, ...]
    resolved: int
    dangling: int


def build_index(drugs: Iterable[Drug]) -> dict[str, Drug]:
    """Index drugs by DrugBank ID. The first drug with a given ID wins."""
    index: dict[str, Drug] = {}
    for drug in drugs:
        index.setdefault(drug.drug_id, drug)
    return index


class InteractionResolver:
    """Converts pending ID-keyed interactions into resolved ones."""

    def resolve_one(self, drug: Drug, index: dict[str, Drug]) -> tuple[Drug, int]:
        """Resolve a single drug against ``index``.

        The resolved map is rebuilt from ``pending_interactions`` every time,
        so resolving an already resolved drug gives the same result.

        Returns:
            The updated drug and the number of dangling references.
        """
        interactions: dict[str, str] = {}
        dangling = 0
        for other_id, description in drug.pending_interactions.items():
            if other_id in index:
                interactions[other_id] = description
            else:
                dangling += 1
        return drug.model_copy(update={"interactions": interactions}), dangling

    def resolve(self, drugs: Sequence[Drug]) -> ResolutionResult:
        """Run the resolution pass over the full collection.

        Args:
            drugs: Every drug of the load, parsed and deduplicated.

        Returns:
            A `ResolutionResult` with the resolved drugs and reference counts.
        """
        logger = setup_logging()
        index = build_index(drugs)
        resolved_drugs: list[Drug] = []
        resolved = 0
        dangling = 0
        for drug in drugs:
            updated, missing = self.resolve_one(drug, index)
            if missing:
                logger.debug(
                    f"{drug.drug_id}: {missing} interaction(s) refer to drugs outside the dataset"
                )
            resolved_drugs.append(updated)
            resolved += updated.interaction_count
            dangling += missing
        return ResolutionResult(drugs=tuple(resolved_drugs), resolved=resolved, dangling=dangling)
