"""Record parser for the flat-file drug dataset (pass 1 of loading).

Each record line looks like::

    <DB00001>,<...>,<Name>,<syn1;;syn2>,...,<DB00002@@Other@@desc;;...>,<SMILES>

Fields are joined by ``>,<``. The first field carries one stray leading
character and the last one a stray trailing character, left over from the
bracket quoting of the export.

Field positions after splitting:

    0  DrugBank ID            8  CAS number
    1  (unused)               9  PubChem compound ID
    2  name                  10  PubChem substance ID
    3  synonyms (;;)         11  toxicity
    4  description           12  food interactions (;;)
    5  (unused)              13  drug interactions (;; then @@)
    6  formula               14  SMILES structure
    7  UNII

Drug-drug interactions are kept as raw DrugBank IDs in
``Drug.pending_interactions``; linking them to loaded drugs is the job of
`drugdb.resolve`.
"""

from drugdb.entity import Drug
from drugdb.errors import MalformedRecordError

FIELD_DELIMITER = ">,<"
LIST_SEPARATOR = ";;"
ENTRY_SEPARATOR = "@@"
NOT_AVAILABLE = "Not Available"
EXPECTED_FIELD_COUNT = 15

ID_FIELD = 0
NAME_FIELD = 2
SYNONYMS_FIELD = 3
DESCRIPTION_FIELD = 4
FORMULA_FIELD = 6
UNII_FIELD = 7
CAS_FIELD = 8
PUBCHEM_COMPOUND_FIELD = 9
PUBCHEM_SUBSTANCE_FIELD = 10
TOXICITY_FIELD = 11
FOOD_INTERACTIONS_FIELD = 12
DRUG_INTERACTIONS_FIELD = 13
STRUCTURE_FIELD = 14


def has_data(raw: str) -> bool:
    """Return False for the "Not Available" sentinel and the empty string."""
    return raw not in (NOT_AVAILABLE, "")


def split_list(raw: str) -> tuple[str, ...]:
    """Split a ``;;``-separated field, treating the sentinel as no data."""
    if not has_data(raw):
        return ()
    return tuple(raw.split(LIST_SEPARATOR))


class DrugRecordParser:
    """Turns one raw dataset line into a `Drug` with unresolved interactions."""

    def parse(self, line: str, line_number: int) -> Drug:
        """Parse a record line.

        Args:
            line: The raw line, with or without its trailing newline.
            line_number: 1-based position of the line in the source, used
                in error reports.

        Returns:
            A `Drug` whose ``interactions`` map is empty and whose
            ``pending_interactions`` holds every interaction entry.

        Raises:
            MalformedRecordError: If the line does not split into the
                expected number of fields, the DrugBank ID is empty, or an
                interaction entry does not have exactly three parts.
        """
        fields = line.rstrip("\r\n").split(FIELD_DELIMITER)
        if len(fields) != EXPECTED_FIELD_COUNT:
            raise MalformedRecordError(
                line_number,
                "record",
                f"expected {EXPECTED_FIELD_COUNT} fields separated by {FIELD_DELIMITER!r}, got {len(fields)}",
            )

        drug_id = fields[ID_FIELD][1:]
        if not drug_id.strip():
            raise MalformedRecordError(line_number, "drug_id", "DrugBank ID is empty")

        return Drug(
            drug_id=drug_id,
            name=fields[NAME_FIELD],
            synonyms=split_list(fields[SYNONYMS_FIELD]),
            description=fields[DESCRIPTION_FIELD],
            formula=fields[FORMULA_FIELD],
            unii=fields[UNII_FIELD],
            cas_number=fields[CAS_FIELD],
            pubchem_compound_id=fields[PUBCHEM_COMPOUND_FIELD],
            pubchem_substance_id=fields[PUBCHEM_SUBSTANCE_FIELD],
            toxicity=fields[TOXICITY_FIELD],
            food_interactions=split_list(fields[FOOD_INTERACTIONS_FIELD]),
            pending_interactions=self._parse_interactions(fields[DRUG_INTERACTIONS_FIELD], line_number),
            structure=fields[STRUCTURE_FIELD][:-1],
        )

    def _parse_interactions(self, raw: str, line_number: int) -> dict[str, str]:
        """Map ``id@@name@@description`` entries to {id: description}.

        The name of the other drug is dropped. A repeated ID keeps the last
        description.
        """
        pending: dict[str, str] = {}
        for entry in split_list(raw):
            parts = entry.split(ENTRY_SEPARATOR)
            if len(parts) != 3:
                raise MalformedRecordError(
                    line_number,
                    "drug_interactions",
                    f"interaction entry {entry!r} has {len(parts)} parts, expected 3",
                )
            other_id, _other_name, description = parts
            pending[other_id] = description
        return pending
