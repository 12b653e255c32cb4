# -*- coding: utf-8 -*-
#
# This file is part of PO Workbench.
# Copyright (C) 2025 PO Workbench contributors.
#
# PO Workbench is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.
"""Read PO files into catalogs."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

import polib
from polib import POEntry

from ..errors import CatalogNotFoundError, CatalogParseError
from .models import Catalog, CatalogEntry

logger = logging.getLogger(__name__)


def _split_comment(comment: str) -> list[str]:
    """Split a polib comment block into its lines."""
    if not comment:
        return []
    return comment.split("\n")


def _format_occurrence(source: str, line: str) -> str:
    """Render a polib occurrence as ``path:line``."""
    return f"{source}:{line}" if line else source


def entry_from_polib(po_entry: POEntry) -> CatalogEntry:
    """Convert a polib entry into a catalog entry.

    Plural forms are ordered by their index, flags become a set.
    """
    if po_entry.msgstr_plural:
        msgstr = [
            po_entry.msgstr_plural[index]
            for index in sorted(po_entry.msgstr_plural, key=int)
        ]
    else:
        msgstr = po_entry.msgstr or ""

    return CatalogEntry(
        msgid=po_entry.msgid,
        msgstr=msgstr,
        msgctxt=po_entry.msgctxt,
        msgid_plural=po_entry.msgid_plural or None,
        comments=_split_comment(po_entry.comment),
        translator_comments=_split_comment(po_entry.tcomment),
        flags=set(po_entry.flags),
        references=[
            _format_occurrence(source, line) for source, line in po_entry.occurrences
        ],
        obsolete=bool(po_entry.obsolete),
    )


def parse_catalog(path: Union[str, Path], encoding: Optional[str] = None) -> Catalog:
    """Read a PO file and build its catalog.

    :param path: Path to the PO file
    :param encoding: Force this encoding instead of the header charset
    :return: Catalog with headers and entries in file order
    :raises CatalogNotFoundError: If the file does not exist
    :raises CatalogParseError: If the file cannot be read or parsed
    """
    po_path = Path(path).resolve()
    if not po_path.is_file():
        raise CatalogNotFoundError(path)

    try:
        options = {"encoding": encoding} if encoding else {}
        po_file = polib.pofile(str(po_path), **options)
        modified = datetime.fromtimestamp(po_path.stat().st_mtime)
    except (OSError, ValueError, UnicodeDecodeError) as error:
        raise CatalogParseError(path, str(error)) from error

    catalog = Catalog(
        path=po_path,
        headers=dict(po_file.metadata),
        entries=[entry_from_polib(po_entry) for po_entry in po_file],
        last_modified=modified,
        encoding=po_file.encoding or "utf-8",
    )
    logger.debug("Parsed %s: %d entries", po_path, len(catalog.entries))
    return catalog
