# -*- coding: utf-8 -*-
#
# This file is part of PO Workbench.
# Copyright (C) 2025 PO Workbench contributors.
#
# PO Workbench is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Errors raised by the catalog engine."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class POWorkbenchError(Exception):
    """Base class for all catalog engine errors."""


class CatalogNotFoundError(POWorkbenchError):
    """The catalog file does not exist on disk."""

    def __init__(self, path: Union[str, Path]):
        self.path = path
        super().__init__(f"PO file {path} not found")


class CatalogNotLoadedError(POWorkbenchError):
    """The catalog is not held by the store."""

    def __init__(self, path: Union[str, Path]):
        self.path = path
        super().__init__(f"PO file {path} is not loaded")


class CatalogParseError(POWorkbenchError):
    """The catalog file could not be read or parsed."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load PO file {path}: {reason}")


class InvalidPatternError(POWorkbenchError):
    """The search pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid search pattern {pattern!r}: {reason}")


class TranslationNotFoundError(POWorkbenchError):
    """No entry matches the (msgid, msgctxt) key."""

    def __init__(
        self, path: Union[str, Path], msgid: str, msgctxt: Optional[str] = None
    ):
        self.path = path
        self.msgid = msgid
        self.msgctxt = msgctxt
        key = repr(msgid) if msgctxt is None else f"{msgid!r} (context {msgctxt!r})"
        super().__init__(f"Entry {key} not found in {path}")


class CatalogPersistenceError(POWorkbenchError):
    """Writing a catalog back to disk failed."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save PO file {path}: {reason}")


class NoCatalogsLoadedError(POWorkbenchError):
    """A global operation was requested on an empty store."""

    def __init__(self):
        super().__init__("No files loaded. Load a PO file first.")
