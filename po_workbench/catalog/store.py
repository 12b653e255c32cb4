# -*- coding: utf-8 -*-
#
# This file is part of PO Workbench.
# Copyright (C) 2025 PO Workbench contributors.
#
# PO Workbench is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.
"""Registry of loaded catalogs."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from threading import Lock
from typing import Optional, Union

from ..errors import CatalogNotLoadedError
from .models import Catalog
from .parser import parse_catalog

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def canonical_path(path: PathLike) -> Path:
    """Absolute, symlink-resolved form of a path used as store key."""
    return Path(path).expanduser().resolve()


class CatalogStore:
    """Owns every loaded catalog, keyed by canonical path.

    Relative paths, paths with ``..`` and symlinks to the same file all map
    to one store entry.
    """

    def __init__(self, encoding: Optional[str] = None):
        """Constructor.

        :param encoding: Force this encoding when parsing catalogs
        """
        self.encoding = encoding
        self._catalogs: dict[Path, Catalog] = {}
        self._locks: dict[Path, Lock] = {}
        self._locks_guard = Lock()

    def load(self, path: PathLike) -> Catalog:
        """Parse a PO file and register it, replacing any previous catalog.

        Nothing is registered when parsing fails.
        """
        catalog = parse_catalog(path, encoding=self.encoding)
        self._catalogs[catalog.path] = catalog
        logger.debug("Loaded %s (%d entries)", catalog.path, len(catalog))
        return catalog

    def get(self, path: PathLike) -> Catalog:
        """Return the loaded catalog for a path.

        :raises CatalogNotLoadedError: If the path was never loaded
        """
        try:
            return self._catalogs[canonical_path(path)]
        except KeyError:
            raise CatalogNotLoadedError(path) from None

    def is_loaded(self, path: PathLike) -> bool:
        """Check if a path has a loaded catalog."""
        return canonical_path(path) in self._catalogs

    def loaded_paths(self) -> list[Path]:
        """Paths of every loaded catalog."""
        return list(self._catalogs)

    def catalogs(self) -> Iterator[Catalog]:
        """Iterate over loaded catalogs."""
        yield from self._catalogs.values()

    def lock(self, path: PathLike) -> Lock:
        """Lock serialising edits and writes of one catalog."""
        key = canonical_path(path)
        with self._locks_guard:
            return self._locks.setdefault(key, Lock())

    def __len__(self) -> int:
        return len(self._catalogs)

    def __contains__(self, path: PathLike) -> bool:
        return self.is_loaded(path)
