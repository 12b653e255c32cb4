# -*- coding: utf-8 -*-
#
# This file is part of PO Workbench.
# Copyright (C) 2025 PO Workbench contributors.
#
# PO Workbench is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Configuration for PO Workbench."""

PO_WORKBENCH_SEARCH_LIMIT = None
"""Default maximum number of results of the listing commands (None: no limit)."""

PO_WORKBENCH_ENCODING = None
"""Encoding used to read catalogs instead of the charset of their header."""

PO_WORKBENCH_POST_SAVE_COMMAND = None
"""Command run after a catalog was written, e.g.

.. code-block:: python

    PO_WORKBENCH_POST_SAVE_COMMAND = [
        "msgmerge", "--quiet", "--update", "--backup=none", "{po}", "{pot}"
    ]

``{po}`` is replaced by the catalog path and ``{pot}`` by the template path.
The command only runs when the template exists; failures are logged and never
fail the save.
"""

PO_WORKBENCH_POST_SAVE_TEMPLATE = None
"""Template (.pot) used by the post-save command.

When unset, ``<name>.pot`` next to the catalog or in the translations root
(``<root>/<locale>/LC_MESSAGES/<name>.po``) is used.
"""
