# -*- coding: utf-8 -*-
#
# This file is part of PO Workbench.
# Copyright (C) 2025 PO Workbench contributors.
#
# PO Workbench is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.
"""Write edited translations back into PO files.

The on-disk text is the layout source: only the ``msgstr`` lines (and the
``#,`` flag line) of entries edited in memory are rewritten. Comments,
header block, wrapping, blank lines and ordering of everything else stay
byte-for-byte the same, which a full re-serialisation through polib would
not guarantee.

.. code-block:: python

    from po_workbench.catalog import CatalogStore, update_translation, write_catalog

    store = CatalogStore()
    catalog = store.load("translations/de/LC_MESSAGES/messages.po")
    update_translation(store, catalog.path, "Save", "Speichern")
    write_catalog(catalog)
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Optional

from polib import escape, unescape

from ..errors import CatalogPersistenceError
from .io import read_text, write_text
from .models import Catalog, CatalogEntry, make_key

logger = logging.getLogger(__name__)

KEYWORD_LINE = re.compile(
    r'^(?P<keyword>msgctxt|msgid_plural|msgid|msgstr)(?:\[(?P<index>\d+)\])?'
    r'\s+"(?P<value>.*)"\s*$'
)
CONTINUATION_LINE = re.compile(r'^\s*"(?P<value>.*)"\s*$')


class State(Enum):
    """States of the line patcher."""

    SEEKING_ENTRY = "seeking-entry"
    INSIDE_TARGET_MSGSTR = "inside-target-msgstr"


def split_lines(text: str) -> list[str]:
    """Split text on ``\\n`` only, keeping line endings."""
    lines = text.split("\n")
    result = [line + "\n" for line in lines[:-1]]
    if lines[-1]:
        result.append(lines[-1])
    return result


def _split_ending(line: str) -> tuple[str, str]:
    body = line.rstrip("\r\n")
    return body, line[len(body):]


def _parse_flags(body: str) -> list[str]:
    return [flag.strip() for flag in body[2:].split(",") if flag.strip()]


class CatalogPatcher:
    """Project the pending edits of a catalog onto its original lines."""

    def __init__(self, catalog: Catalog, eol: str = "\n"):
        active = catalog.active_entries()
        self.targets: dict[str, CatalogEntry] = {
            key: active[key] for key in catalog.pending if key in active
        }
        self.eol = eol
        self.output: list[Optional[str]] = []
        self.patched: set[str] = set()
        self.state = State.SEEKING_ENTRY
        self._drop_indexed = False
        self._run_end: Optional[int] = None
        self._run_ending = ""
        self._reset_entry()

    def _reset_entry(self) -> None:
        self.msgid_parts: Optional[list[str]] = None
        self.msgctxt_parts: Optional[list[str]] = None
        self.field: Optional[str] = None
        self.flags_indexes: list[int] = []
        self.seen_msgstr = False
        self.entry_patched = False

    @property
    def key(self) -> Optional[str]:
        """Composite key of the entry being scanned."""
        if self.msgid_parts is None:
            return None
        msgctxt = None
        if self.msgctxt_parts is not None:
            msgctxt = unescape("".join(self.msgctxt_parts))
        return make_key(unescape("".join(self.msgid_parts)), msgctxt)

    def feed(self, line: str) -> None:
        """Process one line of the original text."""
        body, ending = _split_ending(line)

        if self.state is State.INSIDE_TARGET_MSGSTR:
            match = KEYWORD_LINE.match(body)
            indexed = (
                match is not None
                and match.group("keyword") == "msgstr"
                and match.group("index") is not None
            )
            if CONTINUATION_LINE.match(body) or (self._drop_indexed and indexed):
                self._run_ending = ending
                return
            self._close_run()

        self._scan(line, body, ending)

    def finish(self) -> str:
        """Join the patched lines."""
        if self.state is State.INSIDE_TARGET_MSGSTR:
            self._close_run()
        return "".join(line for line in self.output if line is not None)

    def _scan(self, line: str, body: str, ending: str) -> None:
        stripped = body.strip()

        if not stripped:
            self._reset_entry()
            self.output.append(line)
            return

        if stripped.startswith("#"):
            if self.seen_msgstr:
                self._reset_entry()
            if stripped.startswith("#,"):
                self.flags_indexes.append(len(self.output))
            self.field = None
            self.output.append(line)
            return

        match = KEYWORD_LINE.match(body)
        if match:
            keyword = match.group("keyword")
            value = match.group("value")
            if keyword in ("msgctxt", "msgid") and self.seen_msgstr:
                self._reset_entry()
            if keyword == "msgctxt":
                self.msgctxt_parts = [value]
            elif keyword == "msgid":
                self.msgid_parts = [value]
            elif keyword == "msgstr":
                self.seen_msgstr = True
                index = match.group("index")
                if self._is_target(index):
                    self._patch(index is not None, ending)
                    return
            self.field = keyword
            self.output.append(line)
            return

        continuation = CONTINUATION_LINE.match(body)
        if continuation:
            if self.field == "msgid" and self.msgid_parts is not None:
                self.msgid_parts.append(continuation.group("value"))
            elif self.field == "msgctxt" and self.msgctxt_parts is not None:
                self.msgctxt_parts.append(continuation.group("value"))
        self.output.append(line)

    def _is_target(self, index: Optional[str]) -> bool:
        if self.entry_patched or index not in (None, "0"):
            return False
        return self.key in self.targets

    def _emit(self, text: str) -> None:
        self.output.append(text + self.eol)

    def _patch(self, indexed: bool, ending: str) -> None:
        key = self.key
        entry = self.targets[key]
        msgstr = entry.msgstr

        if indexed and isinstance(msgstr, list):
            for index, form in enumerate(msgstr or [""]):
                self._emit(f'msgstr[{index}] "{escape(form)}"')
            self._drop_indexed = True
        elif indexed:
            self._emit(f'msgstr[0] "{escape(msgstr)}"')
            self._drop_indexed = False
        else:
            self._emit(f'msgstr "{escape(entry.primary_msgstr)}"')
            self._drop_indexed = False

        self._run_end = len(self.output) - 1
        self._run_ending = ending
        self.state = State.INSIDE_TARGET_MSGSTR
        self.field = "msgstr"
        self.entry_patched = True
        self.patched.add(key)
        self._rewrite_flags(entry)

    def _close_run(self) -> None:
        last = self.output[self._run_end]
        self.output[self._run_end] = last[: -len(self.eol)] + self._run_ending
        self._run_end = None
        self.state = State.SEEKING_ENTRY

    def _rewrite_flags(self, entry: CatalogEntry) -> None:
        if not self.flags_indexes:
            return
        seen = [
            flag
            for index in self.flags_indexes
            for flag in _parse_flags(self.output[index].strip())
        ]
        added = sorted(entry.flags.difference(seen))
        last = self.flags_indexes[-1]
        for index in self.flags_indexes:
            body, ending = _split_ending(self.output[index])
            original = _parse_flags(body.strip())
            flags = [flag for flag in original if entry.has_flag(flag)]
            if index == last:
                flags.extend(added)
            if flags == original:
                continue
            if flags:
                self.output[index] = "#, " + ", ".join(flags) + ending
            else:
                self.output[index] = None


def patch_catalog_text(text: str, catalog: Catalog) -> str:
    """Rewrite the translations of pending entries inside the PO text.

    :param text: Original file content
    :param catalog: Catalog whose pending entries hold the new values
    :return: Patched file content
    """
    eol = "\r\n" if "\r\n" in text else "\n"
    patcher = CatalogPatcher(catalog, eol=eol)
    for line in split_lines(text):
        patcher.feed(line)
    result = patcher.finish()

    for key in sorted(set(patcher.targets) - patcher.patched):
        logger.warning(
            "Entry %r of %s has no msgstr line on disk, not written",
            key,
            catalog.path,
        )
    return result


def write_catalog(catalog: Catalog) -> bool:
    """Write the pending edits of a catalog to its file.

    The in-memory catalog is left untouched when reading or writing fails,
    so the call can be retried.

    :return: Whether the file content changed
    :raises CatalogPersistenceError: On any I/O error
    """
    try:
        original = read_text(catalog.path, catalog.encoding)
    except (OSError, UnicodeError) as error:
        raise CatalogPersistenceError(catalog.path, str(error)) from error

    patched = patch_catalog_text(original, catalog)
    changed = patched != original
    if changed:
        try:
            write_text(catalog.path, patched, catalog.encoding)
        except (OSError, UnicodeError) as error:
            raise CatalogPersistenceError(catalog.path, str(error)) from error
        logger.debug("Wrote %d edited entries to %s", len(catalog.pending), catalog.path)

    catalog.pending.clear()
    return changed
