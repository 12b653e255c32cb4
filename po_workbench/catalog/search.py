# -*- coding: utf-8 -*-
#
# This file is part of PO Workbench.
# Copyright (C) 2025 PO Workbench contributors.
#
# PO Workbench is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.
"""Search and filter entries of loaded catalogs."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..errors import InvalidPatternError, NoCatalogsLoadedError
from .models import Catalog, CatalogEntry
from .store import CatalogStore, PathLike

OBSOLETE = "obsolete"
FUZZY = "fuzzy"
TRANSLATED = "translated"
UNTRANSLATED = "untranslated"

TARGETS = ("msgid", "msgstr", "both")


def entry_status(entry: CatalogEntry) -> str:
    """Classify an entry as obsolete, fuzzy, translated or untranslated."""
    if entry.obsolete:
        return OBSOLETE
    if entry.fuzzy:
        return FUZZY
    if entry.primary_msgstr.strip():
        return TRANSLATED
    return UNTRANSLATED


@dataclass
class SearchCriteria:
    """What to look for and which entries qualify."""

    query: str = ""
    target: str = "both"
    case_sensitive: bool = False
    regex: bool = False
    include_translated: bool = True
    include_untranslated: bool = True
    include_fuzzy: bool = True
    limit: Optional[int] = None
    path: Optional[PathLike] = None

    def compile(self) -> re.Pattern:
        """Compile the query into a pattern.

        :raises InvalidPatternError: If a regex query does not compile
        """
        source = self.query if self.regex else re.escape(self.query)
        flags = 0 if self.case_sensitive else re.IGNORECASE
        try:
            return re.compile(source, flags)
        except re.error as error:
            raise InvalidPatternError(self.query, str(error)) from error

    def accepts(self, status: str) -> bool:
        """Check if entries of this status pass the inclusion toggles."""
        if status == FUZZY:
            return self.include_fuzzy
        if status == TRANSLATED:
            return self.include_translated
        if status == UNTRANSLATED:
            return self.include_untranslated
        return False


@dataclass
class SearchResult:
    """An entry matched by a search and the file it came from."""

    entry: CatalogEntry
    path: Path


def _check_limit(limit: Optional[int]) -> None:
    if limit is not None and limit < 0:
        raise ValueError(f"Result limit must not be negative, got {limit}")


def _scoped_catalogs(store: CatalogStore, path: Optional[PathLike]) -> list[Catalog]:
    if path is not None:
        return [store.get(path)]
    return list(store.catalogs())


def _matches(pattern: re.Pattern, entry: CatalogEntry, target: str) -> bool:
    if target in ("msgid", "both") and pattern.search(entry.msgid):
        return True
    if target in ("msgstr", "both") and pattern.search(entry.primary_msgstr):
        return True
    return False


def search(store: CatalogStore, criteria: SearchCriteria) -> list[SearchResult]:
    """Find entries matching the criteria in one or all catalogs.

    Results follow catalog order, then entry order. The limit applies to
    the whole result list.

    :raises InvalidPatternError: If the query is an invalid regex
    :raises ValueError: If the target is unknown or the limit is negative
    :raises CatalogNotLoadedError: If ``criteria.path`` is not loaded
    """
    if criteria.target not in TARGETS:
        raise ValueError(
            f"Unknown search target {criteria.target!r}, expected one of {TARGETS}"
        )
    _check_limit(criteria.limit)
    pattern = criteria.compile()

    results: list[SearchResult] = []
    for catalog in _scoped_catalogs(store, criteria.path):
        for entry in catalog.entries:
            if not criteria.accepts(entry_status(entry)):
                continue
            if _matches(pattern, entry, criteria.target):
                results.append(SearchResult(entry=entry, path=catalog.path))

    if criteria.limit is not None:
        results = results[: criteria.limit]
    return results


def _require_catalogs(store: CatalogStore) -> None:
    if not len(store):
        raise NoCatalogsLoadedError()


def untranslated_entries(
    store: CatalogStore, path: Optional[PathLike] = None, limit: Optional[int] = None
) -> list[SearchResult]:
    """List entries without a translation."""
    _require_catalogs(store)
    return search(
        store,
        SearchCriteria(
            include_translated=False,
            include_fuzzy=False,
            limit=limit,
            path=path,
        ),
    )


def fuzzy_entries(
    store: CatalogStore, path: Optional[PathLike] = None, limit: Optional[int] = None
) -> list[SearchResult]:
    """List entries flagged as fuzzy."""
    _require_catalogs(store)
    return search(
        store,
        SearchCriteria(
            include_translated=False,
            include_untranslated=False,
            limit=limit,
            path=path,
        ),
    )


def _split_reference(reference: str) -> tuple[str, Optional[int]]:
    """Split ``path:line`` into its parts; the line may be missing."""
    source, sep, line = reference.rpartition(":")
    if not sep:
        return reference, None
    try:
        return source, int(line)
    except ValueError:
        return reference, None


def _references_source(
    references: Iterable[str],
    source_path: str,
    start_line: Optional[int],
    end_line: Optional[int],
) -> bool:
    ranged = start_line is not None or end_line is not None
    for reference in references:
        source, line = _split_reference(reference)
        if source != source_path:
            continue
        if not ranged:
            return True
        if line is None:
            continue
        if (start_line is None or line >= start_line) and (
            end_line is None or line <= end_line
        ):
            return True
    return False


def entries_for_source(
    store: CatalogStore,
    source_path: str,
    start_line: Optional[int] = None,
    end_line: Optional[int] = None,
    limit: Optional[int] = None,
) -> list[SearchResult]:
    """List entries whose references point at a source file.

    :param source_path: Source file as written in ``#:`` references
    :param start_line: Optional first line of the range (inclusive)
    :param end_line: Optional last line of the range (inclusive)
    :param limit: Optional cap on the number of results
    """
    _require_catalogs(store)
    _check_limit(limit)
    results = [
        result
        for result in search(store, SearchCriteria())
        if _references_source(
            result.entry.references, source_path, start_line, end_line
        )
    ]
    if limit is not None:
        results = results[:limit]
    return results
