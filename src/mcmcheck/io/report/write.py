"""Functions for writing conflict reports."""

from collections.abc import Sequence
from pathlib import Path

from ...schema import Conflicts, VersionResult
from ...util import io_


def conflicts(conf: Conflicts, out: str | Path | None = None) -> str:
    """Write a conflict report.

    :param conf: The conflicts
    :param out: Optionally, write the output to this file path
    :return: The report
    """
    lines = []
    if conf.has_missing:
        lines.append(f"# missing in {conf.candidate}")
        lines.extend(f"{n} missing in {conf.candidate}" for n in conf.missing)
    if conf.has_extra:
        if lines:
            lines.append("")
        lines.append(f"# should not be in {conf.candidate}")
        lines.extend(f"{n} should not be in {conf.candidate}" for n in conf.extra)

    report_str = "\n".join(lines) + "\n" if lines else ""
    io_.write_text(report_str, out)
    return report_str


def file_name(conf: Conflicts) -> str:
    """Get the report file name for a set of conflicts.

    :param conf: The conflicts
    :return: The file name
    """
    return f"{conf.category}_{conf.version}.txt"


def version(result: VersionResult, folder: str | Path) -> list[Path]:
    """Write one report file per comparison category for a mechanism version.

    :param result: The version result
    :param folder: The report folder
    :return: The paths written
    """
    paths = []
    for conf in result.conflicts:
        path = Path(folder) / file_name(conf)
        conflicts(conf, out=path)
        paths.append(path)
    return paths


def summary(results: Sequence[VersionResult], out: str | Path | None = None) -> str:
    """Write a summary table of conflict counts over all versions.

    :param results: The version results
    :param out: Optionally, write the output to this file path
    :return: The summary
    """
    rows = [("version", "category", "missing", "extra")]
    for result in results:
        if not result.ok():
            rows.append((result.version, "FAILED", "-", "-"))
            continue
        for conf in result.conflicts:
            rows.append(
                (
                    result.version,
                    conf.category,
                    str(len(conf.missing)),
                    str(len(conf.extra)),
                )
            )

    widths = [max(len(r[i]) for r in rows) for i in range(len(rows[0]))]
    lines = ["  ".join(v.ljust(w) for v, w in zip(r, widths)).rstrip() for r in rows]
    for result in results:
        if not result.ok():
            lines.append(f"{result.version}: {result.error}")

    summary_str = "\n".join(lines) + "\n"
    io_.write_text(summary_str, out)
    return summary_str
