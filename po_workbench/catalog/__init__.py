# -*- coding: utf-8 -*-
#
# This file is part of PO Workbench.
# Copyright (C) 2025 PO Workbench contributors.
#
# PO Workbench is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Translation catalog engine.

Load gettext PO files into memory, search and count their entries, edit
translations and write the edits back without touching the rest of the file.

LOADING  --------
Catalogs live in a :class:`CatalogStore`, keyed by their resolved path:

.. code-block:: python

    from po_workbench.catalog import CatalogStore

    store = CatalogStore()
    catalog = store.load("translations/de/LC_MESSAGES/messages.po")
    store.is_loaded("./translations/de/../de/LC_MESSAGES/messages.po")  # True

SEARCH  ------
Match text against source strings, translations or both, filtered by
status:

.. code-block:: python

    from po_workbench.catalog import SearchCriteria, search

    results = search(store, SearchCriteria(query="upload", target="msgid"))
    for result in results:
        print(result.path, result.entry.msgid)

STATISTICS  ------
Count entries per status for one file or every loaded file:

.. code-block:: python

    from po_workbench.catalog import catalog_stats
    stats = catalog_stats(store)
    # CatalogStats(total=..., translated=..., untranslated=..., fuzzy=..., obsolete=...)

The status of an entry is one of:
- **Obsolete**: ``#~`` entries, never counted as anything else
- **Fuzzy**: translations marked with ``#, fuzzy`` that need review
- **Translated**: a non-blank ``msgstr``
- **Untranslated**: everything else

UPDATE  ------
Edit a translation in memory, then write it back:

.. code-block:: python

    from po_workbench.catalog import update_translation, write_catalog

    update_translation(store, catalog.path, "Save", "Speichern", msgctxt="button")
    write_catalog(catalog)

Editing always clears the fuzzy flag. :func:`apply_updates` edits many
entries and writes each touched file once.

"""

from __future__ import annotations

from .convert import entry_to_dict, result_to_dict
from .models import Catalog, CatalogEntry, make_key
from .parser import parse_catalog
from .search import (
    SearchCriteria,
    SearchResult,
    entries_for_source,
    entry_status,
    fuzzy_entries,
    search,
    untranslated_entries,
)
from .stats import CatalogStats, catalog_stats, stats_report, write_stats_report
from .store import CatalogStore, canonical_path
from .update import (
    BatchResult,
    UpdateOutcome,
    UpdateRequest,
    apply_updates,
    update_translation,
)
from .writer import patch_catalog_text, write_catalog

__all__ = [
    "BatchResult",
    "Catalog",
    "CatalogEntry",
    "CatalogStats",
    "CatalogStore",
    "SearchCriteria",
    "SearchResult",
    "UpdateOutcome",
    "UpdateRequest",
    "apply_updates",
    "canonical_path",
    "catalog_stats",
    "entries_for_source",
    "entry_status",
    "entry_to_dict",
    "fuzzy_entries",
    "make_key",
    "parse_catalog",
    "patch_catalog_text",
    "result_to_dict",
    "search",
    "stats_report",
    "untranslated_entries",
    "update_translation",
    "write_catalog",
    "write_stats_report",
]
