# -*- coding: utf-8 -*-
#
# This file is part of PO Workbench.
# Copyright (C) 2025 PO Workbench contributors.
#
# PO Workbench is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Test cases for loading catalogs into the store."""

import os

import pytest

from po_workbench.catalog import parse_catalog
from po_workbench.errors import (
    CatalogNotFoundError,
    CatalogNotLoadedError,
    CatalogParseError,
)


def test_parse_catalog_entries(sample_po):
    """Test that parsing keeps entry order and normalises fields."""
    catalog = parse_catalog(sample_po)

    assert catalog.path == sample_po.resolve()
    assert catalog.headers["Language"] == "de"
    assert catalog.last_modified is not None
    assert [entry.msgid for entry in catalog.entries] == [
        "Hello",
        "Bye",
        "Open",
        "Open",
        "%d file",
        "A long message that is wrapped over lines",
        "Hello %(name)s",
        "Removed",
    ]

    hello = catalog.entries[0]
    assert hello.comments == ["Greeting on the start page"]
    assert hello.references == ["app/views.py:12"]
    assert hello.flags == set()
    assert hello.msgctxt is None

    plural = catalog.entries[4]
    assert plural.msgid_plural == "%d files"
    assert plural.msgstr == ["%d Datei", "%d Dateien"]
    assert plural.is_plural

    assert catalog.entries[6].flags == {"fuzzy", "python-format"}
    assert catalog.entries[7].obsolete


def test_parse_catalog_context(sample_po):
    """Test that an absent context differs from a set one."""
    catalog = parse_catalog(sample_po)

    menu = catalog.find("Open", "menu")
    plain = catalog.find("Open")

    assert menu is not None and menu.msgstr == "Öffnen"
    assert plain is not None and plain.msgstr == ""
    assert catalog.find("Open", "") is None
    assert menu.key != plain.key


def test_parse_catalog_empty_context(tmp_path):
    """Test that an empty msgctxt is kept as an empty string."""
    po_path = tmp_path / "ctx.po"
    po_path.write_text(
        'msgctxt ""\nmsgid "Open"\nmsgstr "A"\n\nmsgid "Open"\nmsgstr "B"\n',
        encoding="utf-8",
    )
    catalog = parse_catalog(po_path)

    assert catalog.find("Open", "").msgstr == "A"
    assert catalog.find("Open").msgstr == "B"


def test_parse_catalog_missing_file(tmp_path):
    """Test that a missing file is reported as not found."""
    with pytest.raises(CatalogNotFoundError) as excinfo:
        parse_catalog(tmp_path / "missing.po")
    assert "missing.po" in str(excinfo.value)


def test_parse_catalog_syntax_error(tmp_path):
    """Test that malformed catalogs raise a parse error naming the file."""
    po_path = tmp_path / "broken.po"
    po_path.write_text('msgid "a"\nmsgstr "b"\nthis is not po\n', encoding="utf-8")

    with pytest.raises(CatalogParseError) as excinfo:
        parse_catalog(po_path)
    assert "broken.po" in str(excinfo.value)


def test_store_canonical_paths(store, sample_po, monkeypatch):
    """Test that path variants of one file share a store entry."""
    store.load(sample_po)
    monkeypatch.chdir(sample_po.parent)

    assert store.is_loaded("messages.po")
    assert store.is_loaded(sample_po.parent / ".." / "LC_MESSAGES" / "messages.po")
    assert "messages.po" in store

    link = sample_po.parent / "link.po"
    os.symlink(sample_po, link)
    assert store.is_loaded(link)

    store.load("messages.po")
    assert store.loaded_paths() == [sample_po.resolve()]


def test_store_reload_replaces_catalog(store, sample_po):
    """Test that loading a path again replaces the catalog."""
    first = store.load(sample_po)
    first.entries[0].msgstr = "changed in memory"

    second = store.load(sample_po)

    assert second is not first
    assert store.get(sample_po) is second
    assert second.entries[0].msgstr == ""
    assert len(store) == 1


def test_store_failed_load_keeps_previous(store, sample_po):
    """Test that a failed reload registers nothing new."""
    loaded = store.load(sample_po)
    sample_po.write_text("garbage line\n", encoding="utf-8")

    with pytest.raises(CatalogParseError):
        store.load(sample_po)
    assert store.get(sample_po) is loaded


def test_store_get_not_loaded(store, sample_po):
    """Test lookups of unknown paths."""
    assert not store.is_loaded(sample_po)
    with pytest.raises(CatalogNotLoadedError):
        store.get(sample_po)


def test_store_lock_per_path(store, sample_po, greetings_po):
    """Test that each canonical path gets one lock."""
    assert store.lock(sample_po) is store.lock(str(sample_po))
    assert store.lock(sample_po) is not store.lock(greetings_po)
