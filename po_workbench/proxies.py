# -*- coding: utf-8 -*-
#
# This file is part of PO Workbench.
# Copyright (C) 2025 PO Workbench contributors.
#
# PO Workbench is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Proxies for PO Workbench."""

from flask import current_app
from werkzeug.local import LocalProxy

current_workbench = LocalProxy(lambda: current_app.extensions["po-workbench"])
"""Translation service of the current application."""
