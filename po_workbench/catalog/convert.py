# -*- coding: utf-8 -*-
#
# This file is part of PO Workbench.
# Copyright (C) 2025 PO Workbench contributors.
#
# PO Workbench is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.
"""Conversion helpers for JSON output."""

from __future__ import annotations

from .models import CatalogEntry
from .search import SearchResult, entry_status


def entry_to_dict(entry: CatalogEntry) -> dict:
    """Convert an entry to a JSON friendly dictionary.

    Optional fields are only present when set, flags are sorted.

    :param entry: The entry to convert
    :return: Dictionary like {"msgid": "Save", "msgstr": "Speichern", ...}
    """
    result: dict = {"msgid": entry.msgid}
    if entry.msgctxt is not None:
        result["msgctxt"] = entry.msgctxt
    if entry.msgid_plural is not None:
        result["msgid_plural"] = entry.msgid_plural
    result["msgstr"] = (
        list(entry.msgstr) if isinstance(entry.msgstr, list) else entry.msgstr
    )
    result["status"] = entry_status(entry)
    if entry.flags:
        result["flags"] = sorted(entry.flags)
    if entry.comments:
        result["comments"] = list(entry.comments)
    if entry.references:
        result["references"] = list(entry.references)
    if entry.obsolete:
        result["obsolete"] = True
    return result


def result_to_dict(result: SearchResult) -> dict:
    """Convert a search result to a dictionary with its file."""
    return {"file": str(result.path), **entry_to_dict(result.entry)}
