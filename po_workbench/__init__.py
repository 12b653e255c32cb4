# -*- coding: utf-8 -*-
#
# This file is part of PO Workbench.
# Copyright (C) 2025 PO Workbench contributors.
#
# PO Workbench is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Search, edit and save gettext PO catalogs without reformatting them."""

from .ext import POWorkbench
from .proxies import current_workbench
from .service import TranslationService

__version__ = "1.0.0"

__all__ = ("__version__", "POWorkbench", "TranslationService", "current_workbench")
