# -*- coding: utf-8 -*-
#
# This file is part of PO Workbench.
# Copyright (C) 2025 PO Workbench contributors.
#
# PO Workbench is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""PO Workbench utils."""

import logging
from pathlib import Path
from subprocess import run
from typing import Optional, Sequence

logger = logging.getLogger(__name__)


def ensure_directory(_, __, value):
    """Make sure the directory of a Click Path option exists."""
    if value:
        value.mkdir(parents=True, exist_ok=True)
    return value


def find_template(po_path: Path, template: Optional[Path] = None) -> Optional[Path]:
    """Find the .pot template belonging to a catalog.

    :param po_path: Path to the PO file
    :param template: Explicit template path, used when given
    :return: Existing template path or None
    """
    if template is not None:
        template = Path(template)
        return template if template.is_file() else None

    candidates = [po_path.with_suffix(".pot")]
    if len(po_path.parents) > 2:
        # <root>/<locale>/LC_MESSAGES/<name>.po -> <root>/<name>.pot
        candidates.append(po_path.parents[2] / f"{po_path.stem}.pot")

    return next((path for path in candidates if path.is_file()), None)


def run_post_save_command(
    po_path: Path,
    command: Sequence[str],
    template: Optional[Path] = None,
) -> Optional[str]:
    """Run an external normalisation tool on a freshly written catalog.

    The tool is skipped when no template exists.

    :param po_path: Path to the written PO file
    :param command: Command with ``{po}`` and ``{pot}`` placeholders
    :param template: Optional explicit template path
    :return: Warning message if the tool could not run or failed, None otherwise
    """
    pot_path = find_template(po_path, template)
    if pot_path is None:
        logger.debug("No template for %s, skipping post-save command", po_path)
        return None

    try:
        args = [part.format(po=str(po_path), pot=str(pot_path)) for part in command]
    except (KeyError, IndexError, ValueError) as e:
        return f"Warning: Invalid post-save command {list(command)!r}: {e!r}"

    try:
        result = run(args, capture_output=True, text=True)
    except OSError as e:
        return f"Warning: Failed to run {args[0]}: {e}"

    if result.returncode != 0:
        return f"Warning: Failed to normalize {po_path}: {result.stderr}"
    return None
