# -*- coding: utf-8 -*-
#
# This file is part of PO Workbench.
# Copyright (C) 2025 PO Workbench contributors.
#
# PO Workbench is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Test cases for editing translations in memory."""

import pytest

from po_workbench.catalog import UpdateRequest, apply_updates, update_translation
from po_workbench.errors import (
    CatalogNotLoadedError,
    CatalogPersistenceError,
    TranslationNotFoundError,
)


def test_update_translation_removes_fuzzy_flag(store, sample_po):
    """Test that editing a fuzzy entry clears the flag."""
    catalog = store.load(sample_po)

    entry = update_translation(store, sample_po, "Hello %(name)s", "Servus %(name)s")

    assert entry.msgstr == "Servus %(name)s"
    assert not entry.has_flag("fuzzy")
    assert entry.flags == {"python-format"}
    assert entry.key in catalog.pending


def test_update_translation_without_fuzzy_flag(store, sample_po):
    """Test that entries without flags stay without flags."""
    store.load(sample_po)

    entry = update_translation(store, sample_po, "Hello", "Hallo")

    assert entry.msgstr == "Hallo"
    assert entry.flags == set()


def test_update_translation_context_disambiguation(store, sample_po):
    """Test that the same msgid with and without context update independently."""
    catalog = store.load(sample_po)

    update_translation(store, sample_po, "Open", "Aufmachen")
    assert catalog.find("Open").msgstr == "Aufmachen"
    assert catalog.find("Open", "menu").msgstr == "Öffnen"

    update_translation(store, sample_po, "Open", "Datei öffnen", msgctxt="menu")
    assert catalog.find("Open", "menu").msgstr == "Datei öffnen"
    assert catalog.find("Open").msgstr == "Aufmachen"


def test_update_translation_keeps_caller_shape(store, sample_po):
    """Test that plural translations are stored as given."""
    catalog = store.load(sample_po)

    update_translation(store, sample_po, "%d file", ["%d Akte", "%d Akten"])

    assert catalog.find("%d file").msgstr == ["%d Akte", "%d Akten"]


def test_update_translation_not_found(store, sample_po):
    """Test that unknown keys fail without touching the catalog."""
    catalog = store.load(sample_po)
    before = [(entry.msgstr, set(entry.flags)) for entry in catalog.entries]

    with pytest.raises(TranslationNotFoundError) as excinfo:
        update_translation(store, sample_po, "Open", "x", msgctxt="toolbar")
    assert "toolbar" in str(excinfo.value)

    with pytest.raises(TranslationNotFoundError):
        update_translation(store, sample_po, "Removed", "x")

    assert [(entry.msgstr, set(entry.flags)) for entry in catalog.entries] == before
    assert not catalog.pending


def test_update_translation_not_loaded(store, sample_po):
    """Test that updates need a loaded catalog."""
    with pytest.raises(CatalogNotLoadedError):
        update_translation(store, sample_po, "Hello", "Hallo")


def test_apply_updates_persists_each_path_once(store, sample_po, greetings_po):
    """Test that every touched file is written once, after all edits."""
    store.load(sample_po)
    store.load(greetings_po)
    persisted = []

    def persist(path):
        catalog = store.get(path)
        persisted.append((path, sorted(catalog.pending)))

    result = apply_updates(
        store,
        [
            UpdateRequest(sample_po, "Hello", "Hallo"),
            {"filePath": str(greetings_po), "msgid": "Goodbye", "msgstr": "Tschüss"},
            UpdateRequest(sample_po, "Bye", "Tschau"),
        ],
        persist,
    )

    assert result.succeeded == 3
    assert result.failed == 0
    assert persisted == [
        (sample_po.resolve(), ["Bye", "Hello"]),
        (greetings_po.resolve(), ["Goodbye"]),
    ]
    assert result.saved_paths == [sample_po.resolve(), greetings_po.resolve()]


def test_apply_updates_isolates_failures(store, sample_po):
    """Test that one bad request does not block the others."""
    catalog = store.load(sample_po)

    result = apply_updates(
        store,
        [
            UpdateRequest(sample_po, "Missing", "x"),
            UpdateRequest(sample_po, "Hello", "Hallo"),
            UpdateRequest(sample_po.parent / "other.po", "Hello", "x"),
        ],
        lambda path: None,
    )

    assert [outcome.success for outcome in result.outcomes] == [False, True, False]
    assert result.succeeded == 1
    assert result.failed == 2
    assert "Missing" in result.errors[0]
    assert catalog.find("Hello").msgstr == "Hallo"


def test_apply_updates_downgrades_on_persistence_failure(
    store, sample_po, greetings_po
):
    """Test that edits of a file that could not be written count as failed."""
    store.load(sample_po)
    store.load(greetings_po)

    def persist(path):
        if path == sample_po.resolve():
            raise CatalogPersistenceError(path, "disk full")

    result = apply_updates(
        store,
        [
            UpdateRequest(sample_po, "Hello", "Hallo"),
            UpdateRequest(greetings_po, "Goodbye", "Tschüss"),
            UpdateRequest(sample_po, "Bye", "Tschau"),
        ],
        persist,
    )

    assert [outcome.success for outcome in result.outcomes] == [False, True, False]
    assert result.succeeded == 1
    assert result.failed == 2
    assert all("disk full" in error for error in result.errors)
    assert result.saved_paths == [greetings_po.resolve()]
