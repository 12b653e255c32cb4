# -*- coding: utf-8 -*-
#
# This file is part of PO Workbench.
# Copyright (C) 2025 PO Workbench contributors.
#
# PO Workbench is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.
"""Edit translations of loaded catalogs."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, Union

from ..errors import POWorkbenchError, TranslationNotFoundError
from .models import FUZZY, CatalogEntry, Translation
from .store import CatalogStore, PathLike, canonical_path

logger = logging.getLogger(__name__)

Persist = Callable[[Path], None]


@dataclass
class UpdateRequest:
    """A single translation edit."""

    path: PathLike
    msgid: str
    msgstr: Translation
    msgctxt: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping) -> UpdateRequest:
        """Build a request from a flat ``filePath``/``msgid``/``msgstr`` record."""
        return cls(
            path=data["filePath"],
            msgid=data["msgid"],
            msgstr=data["msgstr"],
            msgctxt=data.get("msgctxt"),
        )


@dataclass
class UpdateOutcome:
    """What happened to one request of a batch."""

    request: UpdateRequest
    success: bool = False
    error: Optional[str] = None


@dataclass
class BatchResult:
    """Outcomes of a batch update, in request order."""

    outcomes: list[UpdateOutcome] = field(default_factory=list)
    saved_paths: list[Path] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        """Number of requests edited in memory and written to disk."""
        return sum(1 for outcome in self.outcomes if outcome.success)

    @property
    def failed(self) -> int:
        """Number of requests that did not reach the disk."""
        return len(self.outcomes) - self.succeeded

    @property
    def errors(self) -> list[str]:
        """Error messages of failed requests."""
        return [outcome.error for outcome in self.outcomes if outcome.error]


def update_translation(
    store: CatalogStore,
    path: PathLike,
    msgid: str,
    msgstr: Translation,
    msgctxt: Optional[str] = None,
) -> CatalogEntry:
    """Replace the translation of one entry in memory.

    The entry is matched on the exact ``(msgid, msgctxt)`` key, so a missing
    context never matches an empty one. The fuzzy flag is always removed.
    Nothing is written to disk.

    :raises CatalogNotLoadedError: If the path is not loaded
    :raises TranslationNotFoundError: If no entry has the key
    """
    catalog = store.get(path)
    entry = catalog.find(msgid, msgctxt)
    if entry is None:
        raise TranslationNotFoundError(path, msgid, msgctxt)

    entry.msgstr = list(msgstr) if isinstance(msgstr, (list, tuple)) else msgstr
    entry.remove_flag(FUZZY)
    catalog.pending.add(entry.key)
    return entry


def apply_updates(
    store: CatalogStore,
    requests: Iterable[Union[UpdateRequest, Mapping]],
    persist: Persist,
) -> BatchResult:
    """Apply many edits, then write every touched catalog once.

    Every in-memory edit happens before the first write. A request only
    counts as successful when its catalog was also written; when writing a
    catalog fails, all requests that edited it are marked as failed.

    :param store: Store holding the catalogs
    :param requests: Update requests or flat request records
    :param persist: Called once per touched catalog path
    :return: Per-request outcomes
    """
    result = BatchResult()
    touched: dict[Path, list[UpdateOutcome]] = {}

    for request in requests:
        if not isinstance(request, UpdateRequest):
            request = UpdateRequest.from_dict(request)
        outcome = UpdateOutcome(request=request)
        result.outcomes.append(outcome)
        try:
            update_translation(
                store, request.path, request.msgid, request.msgstr, request.msgctxt
            )
        except POWorkbenchError as error:
            outcome.error = f"Failed to update {request.msgid!r}: {error}"
            logger.warning(outcome.error)
            continue
        outcome.success = True
        touched.setdefault(canonical_path(request.path), []).append(outcome)

    for path, outcomes in touched.items():
        try:
            persist(path)
        except POWorkbenchError as error:
            logger.warning("Failed to save file %s: %s", path, error)
            for outcome in outcomes:
                outcome.success = False
                outcome.error = f"Failed to save file {path}: {error}"
            continue
        result.saved_paths.append(path)

    return result
