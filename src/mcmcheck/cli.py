"""Command line interface."""

import argparse
import logging
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from . import run
from .config import DEFAULT_VERSIONS, Settings, default_settings

LOG = logging.getLogger(__name__)


def parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    ap = argparse.ArgumentParser(
        prog="mcmcheck",
        description=(
            "Cross-check species and RO2 lists of MCM versions between the species "
            "database, KPP files and FACSIMILE files."
        ),
    )
    ap.add_argument(
        "-c", "--config", help="YAML settings file (overrides the folder options)"
    )
    ap.add_argument(
        "versions",
        nargs="*",
        help=f"Versions to check (default: {' '.join(DEFAULT_VERSIONS)})",
    )
    ap.add_argument("--db-folder", default="DB", help="Species database folder")
    ap.add_argument("--kpp-folder", default="KPPfiles", help="KPP file folder")
    ap.add_argument("--fac-folder", default="FACSIMILEfiles", help="FACSIMILE folder")
    ap.add_argument(
        "--no-fac", action="store_true", help="Skip the FACSIMILE comparison"
    )
    ap.add_argument("-o", "--report-folder", default="report", help="Report folder")
    ap.add_argument(
        "--compare-versions",
        action="store_true",
        help="Also compare each version with the first one",
    )
    ap.add_argument("-j", "--jobs", type=int, help="Versions in parallel")
    ap.add_argument("--bar", action="store_true", help="Show progress bars")
    verbosity = ap.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Debug output")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Warnings only")
    return ap


def settings(args: argparse.Namespace) -> Settings:
    """Build the run settings from command line arguments.

    :param args: Parsed arguments
    :return: The settings
    """
    if args.config is not None:
        settings_ = Settings.from_yaml(args.config)
    else:
        settings_ = default_settings(
            db_folder=args.db_folder,
            kpp_folder=args.kpp_folder,
            fac_folder=None if args.no_fac else args.fac_folder,
            report_folder=args.report_folder,
        )

    if args.versions:
        settings_ = settings_.select(args.versions)

    update = {}
    if args.jobs is not None:
        if args.jobs < 1:
            raise ValueError(f"Number of jobs must be at least 1: {args.jobs}")
        update["jobs"] = args.jobs
    if args.compare_versions:
        update["compare_versions"] = True
    return settings_.model_copy(update=update)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the checks.

    :param argv: Command line arguments, defaults to `sys.argv[1:]`
    :return: Exit status; 1 if any version could not be checked
    """
    args = parser().parse_args(argv)
    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        settings_ = settings(args)
    except (FileNotFoundError, ValidationError, ValueError) as err:
        LOG.error(f"Bad configuration: {err}")
        return 2

    results = run.from_settings(settings_, bar=args.bar)
    for result in results:
        if result.ok():
            print(f"{result.version}: {result.conflict_count()} conflicts")
        else:
            print(f"{result.version}: FAILED ({result.error})")
    return 0 if all(r.ok() for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())
