"""Drug entity model.

A `Drug` holds one record of the FDA small-molecule drug dataset. Drug-drug
interactions live in two maps:

- ``pending_interactions`` is filled by the record parser and maps the
  DrugBank ID of another drug, loaded or not, to a short description.
- ``interactions`` is filled by the resolution pass and only keeps the IDs
  that belong to a drug of the same loaded dataset.

Drugs are frozen. The resolution pass produces an updated copy with
``model_copy`` instead of mutating a drug in place.
"""

from pydantic import BaseModel, Field, field_validator

from drugdb.text import wrap


class Drug(BaseModel):
    """An FDA-approved small-molecule drug."""

    model_config = {"frozen": True}

    drug_id: str = Field(description="DrugBank ID, unique within a loaded dataset.")
    name: str = Field(default="", description="Common name of the drug.")
    synonyms: tuple[str, ...] = Field(
        default=(),
        description="Other names of the drug, in source order.",
    )
    description: str = Field(default="", description="Short paragraph describing the drug.")
    formula: str = Field(default="", description="Chemical formula.")
    unii: str = Field(default="", description="FDA Unique Ingredient Identifier.")
    cas_number: str = Field(default="", description="CAS registry number.")
    pubchem_compound_id: str = Field(default="", description="PubChem Compound ID.")
    pubchem_substance_id: str = Field(default="", description="PubChem Substance ID.")
    toxicity: str = Field(default="", description="Toxicity information.")
    food_interactions: tuple[str, ...] = Field(
        default=(),
        description="Descriptions of known drug-food interactions.",
    )
    pending_interactions: dict[str, str] = Field(
        default_factory=dict,
        description="Raw drug-drug interactions: DrugBank ID -> description.",
    )
    interactions: dict[str, str] = Field(
        default_factory=dict,
        description="Resolved drug-drug interactions, keyed by the ID of a loaded drug.",
    )
    structure: str = Field(default="", description="SMILES structure of the drug.")

    @field_validator("drug_id")
    @classmethod
    def drug_id_must_be_nonempty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("drug_id must be a non-empty string")
        return value

    @property
    def interaction_count(self) -> int:
        """Number of resolved drug-drug interactions."""
        return len(self.interactions)

    @property
    def food_interaction_count(self) -> int:
        """Number of drug-food interaction descriptions."""
        return len(self.food_interactions)

    def interaction_with(self, other: "Drug") -> str | None:
        """Return the resolved interaction description with ``other``, if any."""
        return self.interactions.get(other.drug_id)

    def render(self, max_line_width: int = 120) -> str:
        """Render the drug as a human-readable text block.

        Long free-text fields (name, synonyms, description, toxicity) are
        word-wrapped to ``max_line_width``. Interactions are reported as
        counts only.

        Args:
            max_line_width: Maximum characters per wrapped line.

        Returns:
            A multi-line string. The same drug and width always give the
            same text.
        """
        synonym_text = "[" + ", ".join(self.synonyms) + "]"
        lines = [
            f"DrugBank ID: {self.drug_id}",
            f"Drug Name: {wrap(self.name, max_line_width)}",
            "Synonyms: ",
            wrap(synonym_text, max_line_width),
            f"Chemical Formula: {self.formula}",
            "Structure: ",
            self.structure,
            f"UNII: {self.unii}",
            f"CAS Number: {self.cas_number}",
            f"PubChem Compound: {self.pubchem_compound_id}",
            f"PubChem Substance: {self.pubchem_substance_id}",
            "Description: ",
            wrap(self.description, max_line_width),
            "Toxicity: ",
            wrap(self.toxicity, max_line_width),
            f"Food Interactions: there is/are {self.food_interaction_count} "
            "description(s) about food interactions.",
            f"Drug Interactions: there is/are {self.interaction_count} known drug-drug interaction(s).",
        ]
        return "\n".join(lines)
