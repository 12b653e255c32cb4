# -*- coding: utf-8 -*-
#
# This file is part of PO Workbench.
# Copyright (C) 2025 PO Workbench contributors.
#
# PO Workbench is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Flask extension for PO Workbench."""

from functools import partial

from . import config
from .catalog import CatalogStore
from .service import TranslationService
from .utils import run_post_save_command


class POWorkbench(object):
    """PO Workbench extension."""

    def __init__(self, app=None):
        """Extension initialization."""
        if app:
            self.init_app(app)

    def init_app(self, app):
        """Flask application initialization."""
        self.init_config(app)
        app.extensions["po-workbench"] = self.create_service(app)

    def create_service(self, app):
        """Build the translation service from the application config."""
        post_save = None
        command = app.config["PO_WORKBENCH_POST_SAVE_COMMAND"]
        if command:
            post_save = partial(
                run_post_save_command,
                command=command,
                template=app.config["PO_WORKBENCH_POST_SAVE_TEMPLATE"],
            )

        return TranslationService(
            store=CatalogStore(encoding=app.config["PO_WORKBENCH_ENCODING"]),
            post_save=post_save,
            default_limit=app.config["PO_WORKBENCH_SEARCH_LIMIT"],
        )

    def init_config(self, app):
        """Initialize configuration."""
        for k in dir(config):
            if k.startswith("PO_WORKBENCH_"):
                app.config.setdefault(k, getattr(config, k))
