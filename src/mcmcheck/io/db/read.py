"""Functions for reading species database files.

A species database is a table with one column per naming convention. Fields are
separated by '&' and every line, including the header, ends in '&':

    MCMname&SMILES&InChI&GECKO-A&M&
    CH3O2&CO[O]&InChI=1S/CH3O2/c1-3-2/h1H3&CH3(OO.)&47.03&

Names in curly brackets ('{NO}') mark a species that has no name in that convention
and are ignored in lookups.
"""

import logging
from collections.abc import Sequence

import polars
from pandera.errors import SchemaError, SchemaErrors

from ... import schema
from ...config import Markers
from ...error import FormatError
from ...schema import Column
from ...util import df_, io_
from ...util.io_ import TextInput, TextOutput

logger = logging.getLogger(__name__)


def database(
    inp: TextInput,
    separator: str = Markers().separator,
    required: Sequence[str] = (Column.MCM,),
    out: TextOutput = None,
) -> polars.DataFrame:
    """Read a species database into a table.

    Row order follows the file, which is the order lookups search in.

    :param inp: A species database, as a file path or string
    :param separator: The field separator
    :param required: Columns that must be present
    :param out: Optionally, write the table to this file path as CSV
    :return: The table, with placeholders and empty fields as nulls
    :raises OSError: If the file cannot be read
    :raises FormatError: If a row doesn't match the header
    """
    src = io_.source_label(inp)
    lines = [line for line in io_.read_lines(inp) if line.strip()]
    if not lines:
        raise FormatError(src, "Species database is empty")

    header, *rows = (split_line(line, separator) for line in lines)
    if len(set(header)) != len(header):
        raise FormatError(src, f"Duplicate column names in header: {header}")

    for num, row in enumerate(rows, start=2):
        if len(row) != len(header):
            raise FormatError(
                src,
                f"Line {num} has {len(row)} fields, but the header has {len(header)}",
            )

    data = {c: [r[i] for r in rows] for i, c in enumerate(header)}
    db_df = polars.DataFrame(data, schema={c: polars.String for c in header})
    db_df = without_placeholders(db_df)
    if Column.MASS in db_df:
        db_df = db_df.with_columns(
            polars.col(Column.MASS).cast(polars.Float64, strict=False)
        )

    try:
        db_df = schema.database_schema(required=required).validate(db_df)
    except (SchemaError, SchemaErrors) as err:
        raise FormatError(src, f"Species database failed validation: {err}") from err

    logger.info(f"Read {df_.count(db_df)} species from {src}")
    df_.to_csv(db_df, out)
    return db_df


def split_line(line: str, separator: str = Markers().separator) -> list[str]:
    """Split a database line into fields.

    The empty field after the trailing separator is dropped.

    :param line: The line
    :param separator: The field separator
    :return: The fields, with surrounding whitespace removed
    """
    fields = [f.strip() for f in line.rstrip().split(separator)]
    if fields and fields[-1] == "":
        fields.pop()
    return fields


def without_placeholders(db_df: polars.DataFrame) -> polars.DataFrame:
    """Replace placeholder ('{...}') and empty entries by nulls.

    :param db_df: A species database table with string columns
    :return: The table
    """
    str_cols = [c for c, t in db_df.schema.items() if t == polars.String]
    return db_df.with_columns(
        polars.when(
            (polars.col(c).str.starts_with("{") & polars.col(c).str.ends_with("}"))
            | (polars.col(c) == "")
        )
        .then(polars.lit(None, dtype=polars.String))
        .otherwise(polars.col(c))
        .alias(c)
        for c in str_cols
    )


def names(db_df: polars.DataFrame, col: str = Column.MCM) -> list[str]:
    """Get the names of one naming convention, leaving out placeholders.

    :param db_df: A species database table
    :param col: The naming convention column
    :return: The names, in table order
    """
    if col not in db_df:
        raise KeyError(f"No column {col!r} in species database: {db_df.columns}")
    return db_df.get_column(col).drop_nulls().to_list()
