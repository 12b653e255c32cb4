# -*- coding: utf-8 -*-
#
# This file is part of PO Workbench.
# Copyright (C) 2025 PO Workbench contributors.
#
# PO Workbench is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.
"""Translation statistics for loaded catalogs."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..errors import NoCatalogsLoadedError
from .io import write_json_file
from .models import Catalog, CatalogEntry
from .search import FUZZY, OBSOLETE, TRANSLATED, entry_status
from .store import CatalogStore, PathLike


@dataclass
class CatalogStats:
    """Counts of entries per translation status."""

    total: int = 0
    translated: int = 0
    untranslated: int = 0
    fuzzy: int = 0
    obsolete: int = 0

    @classmethod
    def from_entries(cls, entries: Iterable[CatalogEntry]) -> CatalogStats:
        """Classify entries in a single pass."""
        stats = cls()
        for entry in entries:
            stats.total += 1
            status = entry_status(entry)
            if status == OBSOLETE:
                stats.obsolete += 1
            elif status == FUZZY:
                stats.fuzzy += 1
            elif status == TRANSLATED:
                stats.translated += 1
            else:
                stats.untranslated += 1
        return stats

    @property
    def active(self) -> int:
        """Number of non-obsolete entries."""
        return self.total - self.obsolete

    @property
    def completion(self) -> float:
        """Percentage of active entries that are translated."""
        if not self.active:
            return 100.0
        return round(100.0 * self.translated / self.active, 2)

    def to_dict(self) -> dict:
        """Convert to a dictionary for JSON."""
        return {
            "total": self.total,
            "translated": self.translated,
            "untranslated": self.untranslated,
            "fuzzy": self.fuzzy,
            "obsolete": self.obsolete,
        }


@dataclass
class FileStats:
    """Statistics for one catalog file."""

    path: Path
    language: Optional[str]
    stats: CatalogStats


@dataclass
class StatsReport:
    """Statistics across every loaded catalog."""

    summary: CatalogStats = field(default_factory=CatalogStats)
    files: list[FileStats] = field(default_factory=list)


def catalog_stats(store: CatalogStore, path: Optional[PathLike] = None) -> CatalogStats:
    """Compute statistics for one catalog or for all loaded catalogs.

    :param store: Store holding the catalogs
    :param path: Optional catalog path; all catalogs when omitted
    :return: Counts per status
    :raises CatalogNotLoadedError: If ``path`` is not loaded
    :raises NoCatalogsLoadedError: If no path is given and the store is empty
    """
    if path is not None:
        return CatalogStats.from_entries(store.get(path).entries)

    if not len(store):
        raise NoCatalogsLoadedError()

    return CatalogStats.from_entries(
        entry for catalog in store.catalogs() for entry in catalog.entries
    )


def _file_stats(catalog: Catalog) -> FileStats:
    return FileStats(
        path=catalog.path,
        language=catalog.headers.get("Language") or None,
        stats=CatalogStats.from_entries(catalog.entries),
    )


def stats_report(
    store: CatalogStore, paths: Optional[Iterable[PathLike]] = None
) -> StatsReport:
    """Build a report with a summary and one breakdown per file.

    :param store: Store holding the catalogs
    :param paths: Optional catalog paths; all loaded catalogs when omitted
    :raises CatalogNotLoadedError: If one of the paths is not loaded
    :raises NoCatalogsLoadedError: If the report would cover no catalog
    """
    if paths is None:
        catalogs = list(store.catalogs())
    else:
        by_path: dict[Path, Catalog] = {}
        for path in paths:
            catalog = store.get(path)
            by_path[catalog.path] = catalog
        catalogs = list(by_path.values())
    if not catalogs:
        raise NoCatalogsLoadedError()

    return StatsReport(
        summary=CatalogStats.from_entries(
            entry for catalog in catalogs for entry in catalog.entries
        ),
        files=[_file_stats(catalog) for catalog in catalogs],
    )


def _file_stats_to_dict(file_stats: FileStats) -> dict:
    """Convert FileStats to dictionary for JSON."""
    return {
        "file": str(file_stats.path),
        "language": file_stats.language,
        "counts": file_stats.stats.to_dict(),
        "completion": file_stats.stats.completion,
    }


def write_stats_report(report: StatsReport, output_dir: Path) -> Path:
    """Write the statistics report to ``stats-report.json``.

    :param report: Output from stats_report()
    :param output_dir: Where to save the report
    :return: Path of the written report
    """
    report_dict = {
        "summary": {
            **report.summary.to_dict(),
            "totalFiles": len(report.files),
            "completion": report.summary.completion,
        },
        "files": [_file_stats_to_dict(file_stats) for file_stats in report.files],
    }

    report_path = output_dir / "stats-report.json"
    write_json_file(report_path, report_dict)
    return report_path
