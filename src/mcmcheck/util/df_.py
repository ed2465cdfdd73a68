"""DataFrame utilities."""

from pathlib import Path

import polars


def count(df: polars.DataFrame) -> int:
    """Count the number of rows in a DataFrame.

    :param df: The DataFrame
    :return: The number of rows
    """
    return df.select(polars.len()).item()


def matching_values(
    df: polars.DataFrame, val: object, col_in: str, col_out: str
) -> list[object]:
    """Get values of one column for all rows where another column matches a value.

    Rows are returned in table order. Null values in `col_in` never match.

    :param df: The DataFrame
    :param val: The value to match
    :param col_in: The column to match against
    :param col_out: The column to get values from
    :return: The matching values
    """
    assert col_in in df, f"{col_in} not in {df.columns}"
    assert col_out in df, f"{col_out} not in {df.columns}"
    return df.filter(polars.col(col_in) == val).get_column(col_out).to_list()


def lookup_dict(
    df: polars.DataFrame, in_: str, out_: str, first: bool = True
) -> dict[object, object]:
    """Form a lookup dictionary mapping one column onto another in a DataFrame.

    Rows with a null key are left out. When a key occurs more than once, either the
    first or the last row wins.

    :param df: The DataFrame
    :param in_: The input column
    :param out_: The output column
    :param first: Resolve duplicate keys by the first row? Otherwise, use the last
    :return: The dictionary mapping input values to output values
    """
    assert in_ in df, f"{in_} not in {df.columns}"
    assert out_ in df, f"{out_} not in {df.columns}"

    df = df.filter(polars.col(in_).is_not_null()).select(in_, out_)
    rows = df.rows()
    if first:
        rows = reversed(rows)
    return dict(rows)


def to_csv(df: polars.DataFrame, path: str | Path | None) -> None:
    """Write a DataFrame to a CSV file.

    If `path` is `None`, this function does nothing.

    :param df: The DataFrame
    :param path: The path to the CSV file
    """
    if path is not None:
        path: Path = Path(path)
        df.write_csv(path)
