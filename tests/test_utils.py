# -*- coding: utf-8 -*-
#
# This file is part of PO Workbench.
# Copyright (C) 2025 PO Workbench contributors.
#
# PO Workbench is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Test cases for the helper functions."""

import sys

from po_workbench.utils import find_template, run_post_save_command


def test_find_template_in_translations_root(sample_po):
    """Test the <root>/<locale>/LC_MESSAGES layout."""
    root = sample_po.parents[2]
    pot = root / "messages.pot"
    pot.write_text('msgid ""\nmsgstr ""\n', encoding="utf-8")

    assert find_template(sample_po) == pot


def test_find_template_next_to_catalog(greetings_po):
    """Test a template next to the catalog."""
    pot = greetings_po.with_suffix(".pot")
    pot.write_text('msgid ""\nmsgstr ""\n', encoding="utf-8")

    assert find_template(greetings_po) == pot


def test_find_template_explicit(greetings_po, tmp_path):
    """Test that an explicit template must exist."""
    pot = tmp_path / "custom.pot"

    assert find_template(greetings_po, pot) is None
    pot.write_text('msgid ""\nmsgstr ""\n', encoding="utf-8")
    assert find_template(greetings_po, pot) == pot


def test_run_post_save_command_without_template(greetings_po):
    """Test that the command is skipped when there is no template."""
    assert run_post_save_command(greetings_po, ["does-not-exist", "{po}"]) is None


def test_run_post_save_command_success(greetings_po, tmp_path):
    """Test that placeholders are filled in."""
    pot = greetings_po.with_suffix(".pot")
    pot.write_text('msgid ""\nmsgstr ""\n', encoding="utf-8")
    marker = tmp_path / "args.txt"
    script = (
        "import sys; "
        f"open({str(marker)!r}, 'w').write(sys.argv[1] + '|' + sys.argv[2])"
    )

    warning = run_post_save_command(
        greetings_po, [sys.executable, "-c", script, "{po}", "{pot}"]
    )

    assert warning is None
    assert marker.read_text() == f"{greetings_po}|{pot}"


def test_run_post_save_command_missing_binary(greetings_po, tmp_path):
    """Test that a missing tool gives a warning instead of an exception."""
    pot = tmp_path / "custom.pot"
    pot.write_text('msgid ""\nmsgstr ""\n', encoding="utf-8")

    warning = run_post_save_command(
        greetings_po, ["po-workbench-missing-tool", "{po}"], template=pot
    )

    assert warning.startswith("Warning: Failed to run po-workbench-missing-tool")


def test_run_post_save_command_failure(greetings_po, tmp_path):
    """Test that a non-zero exit status gives a warning."""
    pot = tmp_path / "custom.pot"
    pot.write_text('msgid ""\nmsgstr ""\n', encoding="utf-8")
    script = "import sys; sys.stderr.write('broken'); sys.exit(3)"

    warning = run_post_save_command(
        greetings_po, [sys.executable, "-c", script], template=pot
    )

    assert warning == f"Warning: Failed to normalize {greetings_po}: broken"


def test_run_post_save_command_unknown_placeholder(greetings_po, tmp_path):
    """Test that a bad placeholder gives a warning instead of an exception."""
    pot = tmp_path / "custom.pot"
    pot.write_text('msgid ""\nmsgstr ""\n', encoding="utf-8")

    warning = run_post_save_command(
        greetings_po, ["echo", "{po}", "{template}"], template=pot
    )

    assert warning.startswith("Warning: Invalid post-save command")
    assert "template" in warning
