# -*- coding: utf-8 -*-
#
# This file is part of PO Workbench.
# Copyright (C) 2025 PO Workbench contributors.
#
# PO Workbench is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.
"""File helpers."""

from __future__ import annotations

import os
from json import dump, load
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any


def write_json_file(path: Path, data: Any) -> None:
    """Write data as indented UTF-8 JSON, creating parent folders."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as fp:
        dump(data, fp, indent=2, ensure_ascii=False)


def read_json_file(path: Path) -> Any:
    """Read a UTF-8 JSON file."""
    with path.open("r", encoding="utf-8") as fp:
        return load(fp)


def read_text(path: Path, encoding: str) -> str:
    """Read a text file without newline translation."""
    with path.open("r", encoding=encoding, newline="") as fp:
        return fp.read()


def write_text(path: Path, text: str, encoding: str) -> None:
    """Replace a text file atomically, without newline translation.

    The text is encoded before anything touches the disk and written to a
    temporary file next to the target, so a failure leaves the original
    file unchanged.
    """
    data = text.encode(encoding)
    with NamedTemporaryFile(
        "wb", dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False
    ) as fp:
        tmp_path = Path(fp.name)
        try:
            fp.write(data)
        except OSError:
            fp.close()
            tmp_path.unlink()
            raise
    try:
        if path.exists():
            os.chmod(tmp_path, path.stat().st_mode & 0o7777)
        os.replace(tmp_path, path)
    except OSError:
        tmp_path.unlink()
        raise
