"""Translation of species names between naming conventions, and RO2 classification."""

import logging
from collections.abc import Sequence

import polars
from tqdm.auto import tqdm

from .config import MatchPolicy
from .schema import Column
from .util import df_

logger = logging.getLogger(__name__)

DUMMY = "DUMMY"
RO2_MARKER = "(OO.)"
RO2_FALSE_MARKER = ".(OO.)"


def translate(
    name: str,
    from_: str,
    to_: str,
    db_df: polars.DataFrame,
    policy: MatchPolicy | str = MatchPolicy.FIRST,
) -> str | None:
    """Translate a species name from one naming convention to another.

    An empty name translates to 'DUMMY'. When the name occurs in several rows, the
    first-match policy takes the first of them; any other policy takes the last.

    :param name: The species name
    :param from_: The naming convention (column) of `name`
    :param to_: The naming convention (column) to translate to
    :param db_df: A species database table
    :param policy: How to resolve names that occur in more than one row
    :return: The translated name, or `None` if there is no translation
    """
    if name == "":
        return DUMMY

    vals = df_.matching_values(db_df, name, col_in=from_, col_out=to_)
    if not vals:
        logger.debug(f"{name} not found in {from_!r} column; translation skipped")
        return None

    return vals[0] if policy == MatchPolicy.FIRST else vals[-1]


def translate_all(
    names: Sequence[str],
    from_: str,
    to_: str,
    db_df: polars.DataFrame,
    policy: MatchPolicy | str = MatchPolicy.FIRST,
    bar: bool = False,
) -> list[str | None]:
    """Translate a list of species names.

    Names without a translation map to `None` and are reported together in a single
    warning.

    :param names: The species names
    :param from_: The naming convention (column) of `names`
    :param to_: The naming convention (column) to translate to
    :param db_df: A species database table
    :param policy: How to resolve names that occur in more than one row
    :param bar: Include a progress bar?
    :return: The translated names
    """
    lookup = df_.lookup_dict(db_df, from_, to_, first=policy == MatchPolicy.FIRST)

    name_iter = tqdm(names, total=len(names)) if bar else names
    trans_names = [DUMMY if n == "" else lookup.get(n) for n in name_iter]

    miss_names = missing(names, from_, db_df)
    if miss_names:
        logger.warning(
            f"{len(miss_names)} species not found in {from_!r} column, translation "
            f"skipped (add them to the species database): {', '.join(miss_names)}"
        )
    return trans_names


def missing(names: Sequence[str], from_: str, db_df: polars.DataFrame) -> list[str]:
    """Get the names that are not in the species database.

    Names that are in the database but have a placeholder in the target convention
    are not included.

    :param names: The species names
    :param from_: The naming convention (column) of `names`
    :param db_df: A species database table
    :return: The names that cannot be looked up
    """
    known = set(db_df.get_column(from_).drop_nulls().to_list())
    return [n for n in names if n != "" and n not in known]


# RO2
def is_ro2_notation(gecko_name: str | None) -> bool:
    """Determine whether a GECKO-A name describes a peroxy radical.

    The name must contain '(OO.)', but not '.(OO.)', where the peroxy group is
    attached to another radical site.

    :param gecko_name: A GECKO-A name, or `None` for a failed translation
    :return: `True` if it does, `False` if it doesn't
    """
    if gecko_name is None:
        return False
    return RO2_MARKER in gecko_name and RO2_FALSE_MARKER not in gecko_name


def is_ro2(
    name: str,
    db_df: polars.DataFrame,
    policy: MatchPolicy | str = MatchPolicy.FIRST,
    mcm_col: str = Column.MCM,
    gecko_col: str = Column.GECKO,
) -> bool:
    """Determine whether a species is an RO2, based on its GECKO-A name.

    Species without a GECKO-A translation are not RO2.

    :param name: An MCM species name
    :param db_df: A species database table
    :param policy: How to resolve names that occur in more than one row
    :param mcm_col: The MCM naming convention column
    :param gecko_col: The GECKO-A naming convention column
    :return: `True` if it is, `False` if it isn't
    """
    return is_ro2_notation(translate(name, mcm_col, gecko_col, db_df, policy=policy))


def ro2_species(
    names: Sequence[str],
    db_df: polars.DataFrame,
    policy: MatchPolicy | str = MatchPolicy.FIRST,
    mcm_col: str = Column.MCM,
    gecko_col: str = Column.GECKO,
    bar: bool = False,
) -> list[str]:
    """Select the RO2 species from a list of MCM names.

    :param names: MCM species names
    :param db_df: A species database table
    :param policy: How to resolve names that occur in more than one row
    :param mcm_col: The MCM naming convention column
    :param gecko_col: The GECKO-A naming convention column
    :param bar: Include a progress bar?
    :return: The RO2 names, in input order
    """
    gecko_names = translate_all(
        names, mcm_col, gecko_col, db_df, policy=policy, bar=bar
    )
    return [
        n for n, g in zip(names, gecko_names, strict=True) if is_ro2_notation(g)
    ]
