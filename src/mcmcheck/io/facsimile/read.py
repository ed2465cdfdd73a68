"""Functions for reading FACSIMILE-formatted MCM files.

Only the two lists needed for cross-checking are read: the species declared in the
'VARIABLE' block and the members of the 'RO2 = ... ;' summation.
"""

import logging
import re
from collections.abc import Sequence

import more_itertools as mit
import pyparsing as pp

from ...config import Markers
from ...error import FormatError
from ...schema import FacsimileCheck
from ...util import io_
from ...util.io_ import TextInput

logger = logging.getLogger(__name__)

MARKERS = Markers()

# Names are any runs of non-whitespace, including non-ASCII characters
SPACE = pp.Suppress(pp.Regex(r"\s+"))
NAME = pp.Regex(r"\S+")
NAMES = pp.Optional(SPACE) + pp.ZeroOrMore(NAME + pp.Optional(SPACE))
NAMES.leave_whitespace()


def check(
    inp: TextInput,
    spc_names: Sequence[str],
    ro2_names: Sequence[str],
    markers: Markers = MARKERS,
) -> FacsimileCheck:
    """Read species and RO2 from a FACSIMILE file and compare them to other lists.

    The lists are compared as sorted sequences and a warning is issued for each
    mismatch.

    :param inp: A FACSIMILE file, as a file path or string
    :param spc_names: Species names to compare against (e.g. from a KPP file)
    :param ro2_names: RO2 names to compare against (e.g. from a KPP file)
    :param markers: Sentinel tokens
    :return: The FACSIMILE lists and whether each differs from its counterpart
    """
    src = io_.source_label(inp)
    lines = io_.read_lines(inp)
    fac_spc_names = species(lines, markers=markers, src=src)
    fac_ro2_names = ro2(lines, markers=markers, src=src)

    spc_differ = sorted(fac_spc_names) != sorted(spc_names)
    ro2_differ = sorted(fac_ro2_names) != sorted(ro2_names)
    if spc_differ:
        logger.warning(f"Species in {src} differ from the mechanism species")
    if ro2_differ:
        logger.warning(f"RO2 in {src} differ from the mechanism RO2 summation")

    return FacsimileCheck(
        species=fac_spc_names,
        ro2=fac_ro2_names,
        species_differ=spc_differ,
        ro2_differ=ro2_differ,
    )


def species(
    inp: TextInput, markers: Markers = MARKERS, src: str | None = None
) -> list[str]:
    """Get the species in the 'VARIABLE' block.

    The block starts with a line beginning with 'VARIABLE' and ends at the next ';'.
    Names are separated by whitespace and may run over several lines.

    :param inp: A FACSIMILE file, as a file path or string
    :param markers: Sentinel tokens
    :param src: Label for the input in messages
    :return: The species names, in file order
    """
    src = io_.source_label(inp) if src is None else src
    lines = io_.read_lines(inp)
    regex = variable_regex(markers.variable)
    start = mit.first(mit.locate(lines, lambda s: regex.search(s) is not None), None)
    if start is None:
        raise FormatError(src, f"No {markers.variable!r} block found")

    block_lines = block(lines, start, markers.terminator, src=src)
    block_lines[0] = regex.sub("", block_lines[0], count=1)
    try:
        return NAMES.parse_string("\n".join(block_lines), parse_all=True).as_list()
    except pp.ParseException as err:
        msg = f"Unreadable {markers.variable!r} block: {err}"
        raise FormatError(src, msg) from err


def variable_regex(variable: str = MARKERS.variable) -> re.Pattern:
    """Get the regular expression for the keyword starting the species block.

    The keyword must be the first word on its line, so comments mentioning it are
    skipped.

    :param variable: The keyword
    :return: The regular expression
    """
    return re.compile(rf"^\s*{re.escape(variable)}\b")


def ro2(
    inp: TextInput, markers: Markers = MARKERS, src: str | None = None
) -> list[str]:
    """Get the RO2 species in the 'RO2 = ... ;' summation.

    :param inp: A FACSIMILE file, as a file path or string
    :param markers: Sentinel tokens
    :param src: Label for the input in messages
    :return: The RO2 names, in file order
    """
    src = io_.source_label(inp) if src is None else src
    lines = io_.read_lines(inp)
    regex = re.compile(markers.ro2_assignment)
    start = mit.first(mit.locate(lines, lambda s: regex.search(s) is not None), None)
    if start is None:
        raise FormatError(src, f"No RO2 summation matching {regex.pattern!r} found")

    block_lines = block(lines, start, markers.terminator, src=src)
    block_lines[0] = regex.sub("", block_lines[0], count=1)
    terms = (t.strip() for line in block_lines for t in line.split("+"))
    return [t for t in terms if t]


def block(lines: Sequence[str], start: int, terminator: str, src: str) -> list[str]:
    """Get the lines from a start line up to the next terminator.

    The terminator and anything after it are removed from the last line.

    :param lines: The lines of the file
    :param start: Index of the first line in the block
    :param terminator: The character ending the block
    :param src: Label for the input in messages
    :return: The block lines
    """
    end = mit.first(
        (i for i in range(start, len(lines)) if terminator in lines[i]), None
    )
    if end is None:
        raise FormatError(
            src, f"No {terminator!r} after block start on line {start + 1}"
        )

    block_lines = list(lines[start : end + 1])
    block_lines[-1] = block_lines[-1].split(terminator, 1)[0]
    return block_lines
