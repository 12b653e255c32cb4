# -*- coding: utf-8 -*-
#
# This file is part of PO Workbench.
# Copyright (C) 2025 PO Workbench contributors.
#
# PO Workbench is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Application factory for running the commands outside a host application.

.. code-block:: console

   $ FLASK_APP=po_workbench.factory:create_app flask catalog stats messages.po

Settings are read from ``FLASK_``-prefixed environment variables, e.g.
``FLASK_PO_WORKBENCH_SEARCH_LIMIT=20``.
"""

from flask import Flask

from .ext import POWorkbench


def create_app(config=None):
    """Create a minimal application with the extension installed."""
    app = Flask("po_workbench")
    app.config.from_prefixed_env()
    if config:
        app.config.update(config)
    POWorkbench(app)
    return app
