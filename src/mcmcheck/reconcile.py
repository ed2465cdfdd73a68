"""Comparison of name lists from different sources."""

import logging
from collections.abc import Collection, Sequence

import more_itertools as mit

from .schema import Conflicts

logger = logging.getLogger(__name__)


def conflicts(
    ref_names: Collection[str], names: Sequence[str], label: str | None = None
) -> list[str]:
    """Get the names that are absent from a reference.

    Membership is exact and case-sensitive. Each conflicting name is logged.

    :param ref_names: The reference names
    :param names: The names to check
    :param label: Optionally, describe the conflict in the log (e.g. 'missing in X')
    :return: The names not in the reference, in input order, without repeats
    """
    ref_names = set(ref_names)
    conf_names = [n for n in mit.unique_everseen(names) if n not in ref_names]
    for name in conf_names:
        logger.warning(f"{name} {label}" if label else f"Conflict: {name}")
    return conf_names


def compare(
    ref_names: Sequence[str],
    names: Sequence[str],
    category: str,
    version: str,
    ref_label: str,
    label: str,
) -> Conflicts:
    """Compare a list of names against a reference in both directions.

    :param ref_names: The reference names
    :param names: The names to check
    :param category: The comparison category
    :param version: The mechanism version
    :param ref_label: Description of the reference source
    :param label: Description of the checked source
    :return: The conflicts
    """
    missing = conflicts(names, ref_names, label=f"missing in {label}")
    extra = conflicts(ref_names, names, label=f"should not be in {label}")
    conf = Conflicts(
        category=category,
        version=version,
        reference=ref_label,
        candidate=label,
        missing=missing,
        extra=extra,
    )
    logger.info(
        f"{version} {category}: {len(missing)} missing in {label}, "
        f"{len(extra)} should not be in {label}"
    )
    return conf
