# -*- coding: utf-8 -*-
#
# This file is part of PO Workbench.
# Copyright (C) 2025 PO Workbench contributors.
#
# PO Workbench is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Pytest configuration."""

import pytest

from po_workbench.catalog import CatalogStore
from po_workbench.factory import create_app

SAMPLE_PO = """\
# German translations for demo.
# Copyright (C) 2025 Demo
#
msgid ""
msgstr ""
"Project-Id-Version: demo 1.0\\n"
"Language: de\\n"
"MIME-Version: 1.0\\n"
"Content-Type: text/plain; charset=utf-8\\n"
"Content-Transfer-Encoding: 8bit\\n"
"Plural-Forms: nplurals=2; plural=(n != 1);\\n"

#. Greeting on the start page
#: app/views.py:12
msgid "Hello"
msgstr ""

#: app/views.py:40
#, fuzzy
msgid "Bye"
msgstr "Au revoir"

#: app/menu.py:5
msgctxt "menu"
msgid "Open"
msgstr "Öffnen"

#: app/views.py:20
msgid "Open"
msgstr ""

#: app/views.py:55
msgid "%d file"
msgid_plural "%d files"
msgstr[0] "%d Datei"
msgstr[1] "%d Dateien"

#: app/views.py:80
msgid ""
"A long message that is "
"wrapped over lines"
msgstr ""
"Eine lange Nachricht, die "
"umgebrochen ist"

#: app/forms.py:3
#, fuzzy, python-format
msgid "Hello %(name)s"
msgstr "Hallo %(name)s"

#~ msgid "Removed"
#~ msgstr "Entfernt"
"""

GREETINGS_PO = """\
msgid ""
msgstr ""
"Content-Type: text/plain; charset=utf-8\\n"

msgid "Hello World"
msgstr "Hallo Welt"

msgid "Goodbye"
msgstr ""
"""


@pytest.fixture
def sample_po(tmp_path):
    """Write the sample catalog and return its path."""
    po_dir = tmp_path / "translations" / "de" / "LC_MESSAGES"
    po_dir.mkdir(parents=True)
    po_path = po_dir / "messages.po"
    po_path.write_text(SAMPLE_PO, encoding="utf-8")
    return po_path


@pytest.fixture
def greetings_po(tmp_path):
    """Write a small second catalog and return its path."""
    po_path = tmp_path / "greetings.po"
    po_path.write_text(GREETINGS_PO, encoding="utf-8")
    return po_path


@pytest.fixture
def store():
    """Empty catalog store."""
    return CatalogStore()


@pytest.fixture
def app():
    """Application with the extension installed."""
    return create_app({"TESTING": True})


@pytest.fixture
def sample_text():
    """Content of the sample catalog."""
    return SAMPLE_PO
