# -*- coding: utf-8 -*-
#
# This file is part of PO Workbench.
# Copyright (C) 2025 PO Workbench contributors.
#
# PO Workbench is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.
"""In-memory catalog model."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

# gettext joins msgctxt and msgid with EOT in compiled catalogs
CONTEXT_SEPARATOR = "\x04"

FUZZY = "fuzzy"

Translation = Union[str, list[str]]


def make_key(msgid: str, msgctxt: Optional[str] = None) -> str:
    """Build the composite lookup key of an entry.

    An absent context and an empty context give different keys.
    """
    if msgctxt is None:
        return msgid
    return f"{msgctxt}{CONTEXT_SEPARATOR}{msgid}"


@dataclass
class CatalogEntry:
    """One translatable unit of a catalog."""

    msgid: str
    msgstr: Translation = ""
    msgctxt: Optional[str] = None
    msgid_plural: Optional[str] = None
    comments: list[str] = field(default_factory=list)
    translator_comments: list[str] = field(default_factory=list)
    flags: set[str] = field(default_factory=set)
    references: list[str] = field(default_factory=list)
    obsolete: bool = False

    @property
    def key(self) -> str:
        """Composite key of the entry."""
        return make_key(self.msgid, self.msgctxt)

    @property
    def is_plural(self) -> bool:
        """Whether the entry has a plural source string."""
        return self.msgid_plural is not None

    @property
    def primary_msgstr(self) -> str:
        """Singular translation, or the first plural form."""
        if isinstance(self.msgstr, list):
            return self.msgstr[0] if self.msgstr else ""
        return self.msgstr or ""

    def has_flag(self, flag: str) -> bool:
        """Check whether the entry carries a flag."""
        return flag in self.flags

    def add_flag(self, flag: str) -> None:
        """Add a flag to the entry."""
        self.flags.add(flag)

    def remove_flag(self, flag: str) -> None:
        """Remove a flag from the entry if present."""
        self.flags.discard(flag)

    @property
    def fuzzy(self) -> bool:
        """Whether the translation still needs review."""
        return self.has_flag(FUZZY)


@dataclass
class Catalog:
    """One loaded PO file."""

    path: Path
    headers: dict[str, str] = field(default_factory=dict)
    entries: list[CatalogEntry] = field(default_factory=list)
    last_modified: Optional[datetime] = None
    encoding: str = "utf-8"
    pending: set[str] = field(default_factory=set)

    def find(self, msgid: str, msgctxt: Optional[str] = None) -> Optional[CatalogEntry]:
        """Return the non-obsolete entry with exactly this key, or None."""
        key = make_key(msgid, msgctxt)
        for entry in self.entries:
            if not entry.obsolete and entry.key == key:
                return entry
        return None

    def active_entries(self) -> dict[str, CatalogEntry]:
        """Map composite keys to non-obsolete entries."""
        return {entry.key: entry for entry in self.entries if not entry.obsolete}

    def __len__(self) -> int:
        return len(self.entries)
