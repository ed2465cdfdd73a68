"""Table schema and result data structures."""

from collections.abc import Sequence

import pandera.polars as pa
import polars
from pydantic import BaseModel, Field


# Species database columns
class Column:
    """Species database columns (naming conventions and properties)."""

    MCM = "MCMname"
    SMILES = "SMILES"
    INCHI = "InChI"
    GECKO = "GECKO-A"
    MASS = "M"


NAME_COLUMNS = (Column.MCM, Column.SMILES, Column.INCHI, Column.GECKO)


def database_schema(required: Sequence[str] = (Column.MCM,)) -> pa.DataFrameSchema:
    """Get the schema for a species database table.

    Columns not listed here are allowed and kept as strings.

    :param required: Columns that must be present
    :return: The schema
    """
    dtype_dct = {c: polars.String for c in NAME_COLUMNS}
    dtype_dct[Column.MASS] = polars.Float64
    dtype_dct.update({c: polars.String for c in required if c not in dtype_dct})
    cols = {
        c: pa.Column(dt, nullable=True, required=c in required)
        for c, dt in dtype_dct.items()
    }
    return pa.DataFrameSchema(cols, strict=False, ordered=False)


# Conflict categories
class Category:
    """Comparison categories, used to label conflict reports."""

    RO2_SUM = "RO2sum"
    FAC_SPECIES = "FACspecies"
    FAC_RO2 = "FACRO2"
    VERSION_SPECIES = "species"
    VERSION_RO2 = "RO2"


class Conflicts(BaseModel):
    """Names that differ between a reference list and a candidate list."""

    category: str
    version: str
    reference: str = Field(..., description="Label of the trusted source")
    candidate: str = Field(..., description="Label of the source being checked")
    missing: list[str] = Field(
        default_factory=list, description="In the reference, absent from the candidate"
    )
    extra: list[str] = Field(
        default_factory=list, description="In the candidate, absent from the reference"
    )

    @property
    def has_missing(self) -> bool:
        return bool(self.missing)

    @property
    def has_extra(self) -> bool:
        return bool(self.extra)

    def count(self) -> int:
        """Count the conflicting entries in both directions.

        :return: The count
        """
        return len(self.missing) + len(self.extra)

    def is_empty(self) -> bool:
        """Determine whether there are any conflicts.

        :return: `True` if there are none, `False` if there are some
        """
        return not (self.has_missing or self.has_extra)


class FacsimileCheck(BaseModel):
    """Species and RO2 lists of a FACSIMILE file, checked against a KPP file."""

    species: list[str]
    ro2: list[str]
    species_differ: bool
    ro2_differ: bool


class VersionResult(BaseModel):
    """Everything extracted and compared for one mechanism version."""

    version: str
    species: list[str] = Field(default_factory=list)
    ro2_mechanism: list[str] = Field(
        default_factory=list, description="RO2 identified from GECKO-A names"
    )
    ro2_summation: list[str] = Field(
        default_factory=list, description="RO2 declared in the KPP summation"
    )
    untranslated: list[str] = Field(default_factory=list)
    facsimile: FacsimileCheck | None = None
    conflicts: list[Conflicts] = Field(default_factory=list)
    error: str | None = None

    def ok(self) -> bool:
        """Determine whether the version pipeline ran to completion.

        :return: `True` if it did, `False` if it was aborted
        """
        return self.error is None

    def conflict_count(self) -> int:
        """Count the conflicting entries over all comparisons.

        :return: The count
        """
        return sum(c.count() for c in self.conflicts)
