"""Functions for reading KPP-formatted MCM files."""

import logging
import re

import more_itertools as mit

from ...config import ExtractionMode, Markers
from ...error import FormatError
from ...util import io_
from ...util.io_ import TextInput

logger = logging.getLogger(__name__)

MARKERS = Markers()


def ignore_regex(ignore: str = MARKERS.ignore) -> re.Pattern:
    """Get the regular expression for the '= IGNORE ;' end of a declaration.

    Matching is case-sensitive.

    :param ignore: The ignore keyword
    :return: The regular expression
    """
    return re.compile(rf"=\s*{re.escape(ignore)}\s*;")


# species
def species(
    inp: TextInput,
    mode: ExtractionMode = ExtractionMode.BOUNDED,
    markers: Markers = MARKERS,
) -> list[str]:
    """Get the names of all species declared in a KPP file.

    :param inp: A KPP file, as a file path or string
    :param mode: Whether to read the '#DEFVAR' block or scan the whole file
    :param markers: Sentinel tokens
    :return: The species names, in file order
    :raises FormatError: In bounded mode, if the block markers are missing
    """
    mode = ExtractionMode(mode)
    if mode == ExtractionMode.BOUNDED:
        return species_in_block(inp, markers=markers)
    return species_by_scan(inp, markers=markers)


def species_in_block(inp: TextInput, markers: Markers = MARKERS) -> list[str]:
    """Get the names of the species declared in the '#DEFVAR' block.

    The block runs from the line after '#DEFVAR' to the last line containing
    'IGNORE'. Every line in it is taken to be one declaration.

    :param inp: A KPP file, as a file path or string
    :param markers: Sentinel tokens
    :return: The species names, in file order
    """
    src = io_.source_label(inp)
    lines = io_.read_lines(inp)
    start = mit.first(mit.locate(lines, lambda s: markers.defvar in s), None)
    if start is None:
        raise FormatError(src, f"No {markers.defvar!r} line found")

    end = mit.last(mit.locate(lines, lambda s: markers.ignore in s), None)
    if end is None or end <= start:
        raise FormatError(
            src, f"No {markers.ignore!r} declaration after {markers.defvar!r}"
        )

    regex = ignore_regex(markers.ignore)
    names = [regex.sub("", line).strip() for line in lines[start + 1 : end + 1]]
    logger.debug(f"Read {len(names)} species declarations from {src}")
    return names


def species_by_scan(inp: TextInput, markers: Markers = MARKERS) -> list[str]:
    """Get the names of the species declared anywhere in a KPP file.

    Any line containing 'IGNORE' counts as a declaration; lines that are empty once
    the '= IGNORE ;' part is removed are dropped.

    :param inp: A KPP file, as a file path or string
    :param markers: Sentinel tokens
    :return: The species names, in file order
    """
    regex = ignore_regex(markers.ignore)
    names = [
        regex.sub("", line).strip()
        for line in io_.read_lines(inp)
        if markers.ignore in line
    ]
    return [n for n in names if n]


# RO2
def ro2_summation(inp: TextInput, markers: Markers = MARKERS) -> list[str]:
    """Get the names of the RO2 species in the summation of a KPP file.

    The summation is written as concentration references spread over
    continuation lines:

        RO2 = &
        C(ind_CH3O2) + C(ind_C2H5O2) + &
        C(ind_IC3H7O2)

    :param inp: A KPP file, as a file path or string
    :param markers: Sentinel tokens
    :return: The RO2 names, in file order
    """
    src = io_.source_label(inp)
    lines = [
        line.replace(markers.continuation, "")
        for line in io_.read_lines(inp)
        if markers.concentration in line
    ]
    if not lines:
        logger.warning(f"No RO2 summation ({markers.concentration!r} terms) in {src}")

    names = []
    for term in (t for line in lines for t in line.split("+")):
        name = term.replace(markers.concentration_prefix, "").replace(")", "").strip()
        if name:
            names.append(name)
    return names
