# -*- coding: utf-8 -*-
#
# This file is part of PO Workbench.
# Copyright (C) 2025 PO Workbench contributors.
#
# PO Workbench is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Translation service: the operations exposed to callers."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from contextlib import ExitStack
from pathlib import Path
from typing import Callable, Optional, Union

from .catalog import (
    BatchResult,
    Catalog,
    CatalogEntry,
    CatalogStats,
    CatalogStore,
    SearchCriteria,
    SearchResult,
    UpdateRequest,
    apply_updates,
    canonical_path,
    catalog_stats,
    entries_for_source,
    fuzzy_entries,
    search,
    untranslated_entries,
    update_translation,
    write_catalog,
)
from .catalog.models import Translation
from .catalog.store import PathLike

logger = logging.getLogger(__name__)

PostSave = Callable[[Path], Optional[str]]


class TranslationService:
    """Load, query, edit and save PO catalogs.

    Each method takes flat arguments and either returns its result or
    raises a :class:`~po_workbench.errors.POWorkbenchError` naming the
    offending path, key or pattern.
    """

    def __init__(
        self,
        store: Optional[CatalogStore] = None,
        post_save: Optional[PostSave] = None,
        default_limit: Optional[int] = None,
    ):
        """Constructor.

        :param store: Catalog store, a new empty one by default
        :param post_save: Best-effort hook run after a catalog was written
        :param default_limit: Result cap for listings called without limit
        """
        self.store = store if store is not None else CatalogStore()
        self.post_save = post_save
        self.default_limit = default_limit

    def _limit(self, limit: Optional[int]) -> Optional[int]:
        return self.default_limit if limit is None else limit

    def load_po_file(self, file_path: PathLike) -> Catalog:
        """Load a PO file, replacing a previous load of the same file."""
        return self.store.load(file_path)

    def get_loaded_files(self) -> list[Path]:
        """Paths of all loaded PO files."""
        return self.store.loaded_paths()

    def is_file_loaded(self, file_path: PathLike) -> bool:
        """Check if a PO file is loaded."""
        return self.store.is_loaded(file_path)

    def search_translations(
        self,
        query: str,
        target: str = "both",
        case_sensitive: bool = False,
        regex: bool = False,
        include_translated: bool = True,
        include_untranslated: bool = True,
        include_fuzzy: bool = True,
        limit: Optional[int] = None,
        file_path: Optional[PathLike] = None,
    ) -> list[SearchResult]:
        """Search entries of one or all loaded files."""
        criteria = SearchCriteria(
            query=query,
            target=target,
            case_sensitive=case_sensitive,
            regex=regex,
            include_translated=include_translated,
            include_untranslated=include_untranslated,
            include_fuzzy=include_fuzzy,
            limit=self._limit(limit),
            path=file_path,
        )
        return search(self.store, criteria)

    def get_untranslated_strings(
        self, file_path: Optional[PathLike] = None, limit: Optional[int] = None
    ) -> list[SearchResult]:
        """Entries without translation."""
        return untranslated_entries(self.store, file_path, self._limit(limit))

    def get_fuzzy_translations(
        self, file_path: Optional[PathLike] = None, limit: Optional[int] = None
    ) -> list[SearchResult]:
        """Entries flagged as fuzzy."""
        return fuzzy_entries(self.store, file_path, self._limit(limit))

    def get_file_translations(
        self,
        source_path: str,
        start_line: Optional[int] = None,
        end_line: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> list[SearchResult]:
        """Entries referencing a source file, optionally within a line range."""
        return entries_for_source(
            self.store, source_path, start_line, end_line, self._limit(limit)
        )

    def get_translation_stats(self, file_path: Optional[PathLike] = None) -> CatalogStats:
        """Statistics of one file or of every loaded file."""
        return catalog_stats(self.store, file_path)

    def save(self, file_path: PathLike) -> bool:
        """Write pending edits of a loaded file to disk.

        The post-save hook runs after a write that changed the file. Its
        failures are logged and never raised.

        :return: Whether the file content changed
        :raises CatalogNotLoadedError: If the file is not loaded
        :raises CatalogPersistenceError: If writing fails
        """
        catalog = self.store.get(file_path)
        changed = write_catalog(catalog)
        if changed and self.post_save is not None:
            try:
                warning = self.post_save(catalog.path)
            except Exception:
                logger.exception("Post-save hook failed for %s", catalog.path)
                return changed
            if warning:
                logger.warning(warning)
        return changed

    def update_translation(
        self,
        file_path: PathLike,
        msgid: str,
        msgstr: Translation,
        msgctxt: Optional[str] = None,
    ) -> CatalogEntry:
        """Edit one translation and write it to disk.

        :raises CatalogNotLoadedError: If the file is not loaded
        :raises TranslationNotFoundError: If no entry has the key
        :raises CatalogPersistenceError: If writing fails; the edit stays in
            memory and a later :meth:`save` retries it
        """
        with self.store.lock(file_path):
            entry = update_translation(self.store, file_path, msgid, msgstr, msgctxt)
            self.save(file_path)
        return entry

    def update_multiple_translations(
        self, translations: Iterable[Union[UpdateRequest, Mapping]]
    ) -> BatchResult:
        """Edit many translations, then write each touched file once."""
        requests = [
            item if isinstance(item, UpdateRequest) else UpdateRequest.from_dict(item)
            for item in translations
        ]
        paths = sorted({canonical_path(request.path) for request in requests})

        with ExitStack() as stack:
            for path in paths:
                stack.enter_context(self.store.lock(path))
            result = apply_updates(self.store, requests, self.save)

        if result.failed:
            logger.warning(
                "Translation update issues:\n%s", "\n".join(result.errors)
            )
        return result
