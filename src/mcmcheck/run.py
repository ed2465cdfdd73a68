"""Checking of whole mechanism versions.

Each version is checked independently:

    1. read the species database
    2. read the species declared in the KPP file
    3. identify RO2 from their GECKO-A names
    4. read the RO2 summation in the KPP file
    5. compare the identified RO2 to the summation
    6. read the species and RO2 in the FACSIMILE file, if there is one
    7. compare them to the KPP lists, where they differ

A version that fails to read is reported and skipped; the others still run.
"""

import concurrent.futures
import logging
import threading
from collections.abc import Sequence
from pathlib import Path

import polars

from . import reconcile, translate
from .config import Settings, VersionConfig
from .error import FormatError
from .io.db import read as db_read
from .io.facsimile import read as fac_read
from .io.kpp import read as kpp_read
from .io.report import write as report_write
from .schema import Category, Conflicts, VersionResult

logger = logging.getLogger(__name__)


class DatabaseCache:
    """Species databases read so far, by file and separator."""

    def __init__(self):
        self._db_dct: dict[tuple[Path, str], polars.DataFrame] = {}
        self._lock = threading.Lock()

    def get(self, cfg: VersionConfig) -> polars.DataFrame:
        """Get the species database for a version, reading it if needed.

        :param cfg: The version configuration
        :return: The species database table
        """
        key = (Path(cfg.db_file).resolve(), cfg.markers.separator)
        with self._lock:
            if key not in self._db_dct:
                self._db_dct[key] = db_read.database(
                    cfg.db_file,
                    separator=cfg.markers.separator,
                    required=(cfg.mcm_column, cfg.gecko_column),
                )
            return self._db_dct[key]

    def __len__(self) -> int:
        return len(self._db_dct)


def version(
    cfg: VersionConfig, db_df: polars.DataFrame | None = None, bar: bool = False
) -> VersionResult:
    """Check one mechanism version.

    :param cfg: The version configuration
    :param db_df: Optionally, a species database table to use instead of reading one
    :param bar: Include a progress bar for the translation?
    :return: The lists extracted and the conflicts found
    :raises OSError: If a file cannot be read
    :raises FormatError: If a file lacks the expected structure
    """
    logger.info(f"Checking MCM {cfg.version}")
    if db_df is None:
        db_df = DatabaseCache().get(cfg)

    kpp_label = f"KPP {cfg.kpp_file.name}"
    spc_names = kpp_read.species(
        cfg.kpp_file, mode=cfg.extraction, markers=cfg.markers
    )
    logger.info(f"{cfg.version}: {len(spc_names)} species in {kpp_label}")

    gecko_names = translate.translate_all(
        spc_names,
        cfg.mcm_column,
        cfg.gecko_column,
        db_df,
        policy=cfg.match_policy,
        bar=bar,
    )
    ro2_names = [
        n
        for n, g in zip(spc_names, gecko_names, strict=True)
        if translate.is_ro2_notation(g)
    ]
    logger.info(f"{cfg.version}: {len(ro2_names)} RO2 identified from GECKO-A names")

    sum_names = kpp_read.ro2_summation(cfg.kpp_file, markers=cfg.markers)
    logger.info(f"{cfg.version}: {len(sum_names)} RO2 in the summation")

    confs = [
        reconcile.compare(
            ro2_names,
            sum_names,
            category=Category.RO2_SUM,
            version=cfg.version,
            ref_label="mechanism",
            label="RO2 summation",
        )
    ]

    fac_check = None
    if cfg.fac_file is not None:
        fac_label = f"FACSIMILE {cfg.fac_file.name}"
        fac_check = fac_read.check(
            cfg.fac_file, spc_names, sum_names, markers=cfg.markers
        )
        if fac_check.species_differ:
            confs.append(
                reconcile.compare(
                    spc_names,
                    fac_check.species,
                    category=Category.FAC_SPECIES,
                    version=cfg.version,
                    ref_label=kpp_label,
                    label=fac_label,
                )
            )
        if fac_check.ro2_differ:
            confs.append(
                reconcile.compare(
                    sum_names,
                    fac_check.ro2,
                    category=Category.FAC_RO2,
                    version=cfg.version,
                    ref_label=kpp_label,
                    label=f"{fac_label} RO2",
                )
            )

    return VersionResult(
        version=cfg.version,
        species=spc_names,
        ro2_mechanism=ro2_names,
        ro2_summation=sum_names,
        untranslated=translate.missing(spc_names, cfg.mcm_column, db_df),
        facsimile=fac_check,
        conflicts=confs,
    )


def safe_version(
    cfg: VersionConfig, cache: DatabaseCache | None = None, bar: bool = False
) -> VersionResult:
    """Check one mechanism version, recording read failures instead of raising.

    :param cfg: The version configuration
    :param cache: Optionally, a cache of species databases shared between versions
    :param bar: Include a progress bar for the translation?
    :return: The version result; its `error` is set if the check was aborted
    """
    cache = DatabaseCache() if cache is None else cache
    try:
        return version(cfg, db_df=cache.get(cfg), bar=bar)
    except (OSError, FormatError) as err:
        logger.error(f"MCM {cfg.version} aborted: {err}")
        return VersionResult(version=cfg.version, error=str(err))


def all_versions(
    cfgs: Sequence[VersionConfig], jobs: int = 1, bar: bool = False
) -> list[VersionResult]:
    """Check several mechanism versions.

    Versions sharing a species database read it only once. With more than one job,
    versions are checked in parallel threads; results keep the configuration order.

    :param cfgs: The version configurations
    :param jobs: The number of versions to check at the same time
    :param bar: Include progress bars for the translation?
    :return: The version results
    """
    cache = DatabaseCache()
    if jobs <= 1:
        return [safe_version(cfg, cache=cache, bar=bar) for cfg in cfgs]

    with concurrent.futures.ThreadPoolExecutor(max_workers=jobs) as executor:
        futures = [executor.submit(safe_version, cfg, cache, bar) for cfg in cfgs]
        return [f.result() for f in futures]


def compare_versions(result1: VersionResult, result2: VersionResult) -> list[Conflicts]:
    """Compare the species and RO2 of two mechanism versions.

    The first version is the reference.

    :param result1: The reference version result
    :param result2: The other version result
    :return: The conflicts for species and for RO2 summations
    """
    assert result1.ok() and result2.ok(), f"Failed: {result1.version} {result2.version}"
    label = f"{result1.version}_vs_{result2.version}"
    return [
        reconcile.compare(
            result1.species,
            result2.species,
            category=Category.VERSION_SPECIES,
            version=label,
            ref_label=f"MCM {result1.version}",
            label=f"MCM {result2.version}",
        ),
        reconcile.compare(
            result1.ro2_summation,
            result2.ro2_summation,
            category=Category.VERSION_RO2,
            version=label,
            ref_label=f"MCM {result1.version} RO2 summation",
            label=f"MCM {result2.version} RO2 summation",
        ),
    ]


def from_settings(settings: Settings, bar: bool = False) -> list[VersionResult]:
    """Check all versions in the settings and write the reports.

    :param settings: The settings
    :param bar: Include progress bars for the translation?
    :return: The version results
    """
    results = all_versions(settings.versions, jobs=settings.jobs, bar=bar)
    folder = Path(settings.report_folder)
    for result in results:
        if result.ok():
            paths = report_write.version(result, folder)
            logger.info(f"{result.version}: {len(paths)} report files in {folder}")

    if settings.compare_versions:
        ok_results = [r for r in results if r.ok()]
        for other in ok_results[1:]:
            for conf in compare_versions(ok_results[0], other):
                report_write.conflicts(conf, out=folder / report_write.file_name(conf))

    if settings.summary_file is not None:
        report_write.summary(results, out=folder / settings.summary_file)

    total = sum(r.conflict_count() for r in results)
    logger.info(f"{total} conflicts over {len(results)} versions")
    return results
