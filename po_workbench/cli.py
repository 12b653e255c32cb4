# -*- coding: utf-8 -*-
#
# This file is part of PO Workbench.
# Copyright (C) 2025 PO Workbench contributors.
#
# PO Workbench is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""CLI for PO Workbench."""

from json import JSONDecodeError, dumps
from pathlib import Path
from typing import Optional

import rich_click as click
from flask.cli import with_appcontext
from rich_click import Choice, IntRange
from rich_click import Path as ClickPath
from rich_click import argument, group, option, secho

from .catalog import result_to_dict, write_stats_report
from .catalog.io import read_json_file
from .catalog.stats import stats_report
from .errors import POWorkbenchError
from .proxies import current_workbench
from .utils import ensure_directory

click.rich_click.USE_RICH_MARKUP = True
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
click.rich_click.USE_MARKDOWN = False

po_files_argument = argument(
    "po_files",
    nargs=-1,
    required=True,
    type=ClickPath(exists=True, dir_okay=False, file_okay=True, path_type=Path),
)
json_option = option(
    "--json", "as_json", is_flag=True, help="Print results as JSON instead of text."
)
limit_option = option(
    "--limit",
    "-n",
    type=IntRange(min=0),
    default=None,
    help="Maximum number of results.",
)


def load_po_files(po_files) -> bool:
    """Load the given PO files, reporting the first failure."""
    for po_file in po_files:
        try:
            current_workbench.load_po_file(po_file)
        except POWorkbenchError as error:
            secho(f"Error: {error}", fg="red")
            return False
    return True


def print_results(results, as_json: bool, label: str) -> None:
    """Print search results as text lines or JSON."""
    if as_json:
        secho(dumps([result_to_dict(r) for r in results], indent=2, ensure_ascii=False))
        return

    secho(f"Found {len(results)} {label}", fg="green")
    for result in results:
        entry = result.entry
        context = f" [{entry.msgctxt}]" if entry.msgctxt is not None else ""
        secho(f"{result.path}: {entry.msgid!r}{context} -> {entry.primary_msgstr!r}")


@group()
@with_appcontext
def catalog():
    """PO catalog commands."""


@catalog.command("stats")
@po_files_argument
@json_option
@option(
    "--output-directory",
    "-o",
    type=ClickPath(
        exists=False, file_okay=False, dir_okay=True, writable=True, path_type=Path
    ),
    callback=ensure_directory,
    default=None,
    help="Directory for the JSON statistics report.",
)
def cmd_stats(po_files, as_json: bool, output_directory: Optional[Path]):
    """Count translated, untranslated, fuzzy and obsolete entries.

    Examples:
        flask catalog stats translations/de/LC_MESSAGES/messages.po
        flask catalog stats translations/*/LC_MESSAGES/messages.po -o ./reports
    """
    if not load_po_files(po_files):
        return

    report = stats_report(current_workbench.store, po_files)
    if output_directory:
        report_path = write_stats_report(report, output_directory)
        secho(f"Statistics report written: {report_path}", fg="green")

    if as_json:
        secho(dumps(report.summary.to_dict(), indent=2))
        return

    for file_stats in report.files:
        counts = file_stats.stats
        secho(
            f"{file_stats.path}: total={counts.total}, "
            f"translated={counts.translated}, "
            f"untranslated={counts.untranslated}, "
            f"fuzzy={counts.fuzzy}, "
            f"obsolete={counts.obsolete} "
            f"({counts.completion}%)",
        )
    summary = report.summary
    secho(
        f"Summary: files={len(report.files)}, total={summary.total}, "
        f"translated={summary.translated}, untranslated={summary.untranslated}, "
        f"fuzzy={summary.fuzzy}, obsolete={summary.obsolete}",
        fg="green",
    )


@catalog.command("search")
@po_files_argument
@option("--query", "-q", required=True, help="Text (or regex with --regex) to find.")
@option(
    "--target",
    "-t",
    type=Choice(["msgid", "msgstr", "both"]),
    default="both",
    show_default=True,
    help="Match against source strings, translations or both.",
)
@option("--case-sensitive", is_flag=True, help="Match case exactly.")
@option("--regex", is_flag=True, help="Treat the query as a regular expression.")
@option("--translated/--no-translated", default=True, help="Include translated entries.")
@option(
    "--untranslated/--no-untranslated",
    default=True,
    help="Include untranslated entries.",
)
@option("--fuzzy/--no-fuzzy", default=True, help="Include fuzzy entries.")
@limit_option
@json_option
def cmd_search(
    po_files,
    query: str,
    target: str,
    limit: Optional[int],
    *,
    case_sensitive: bool,
    regex: bool,
    translated: bool,
    untranslated: bool,
    fuzzy: bool,
    as_json: bool,
):
    """Search entries of PO files.

    Examples:
        flask catalog search messages.po -q upload
        flask catalog search messages.po -q "^Save" --regex -t msgid --no-translated
    """
    if not load_po_files(po_files):
        return

    try:
        results = current_workbench.search_translations(
            query,
            target=target,
            case_sensitive=case_sensitive,
            regex=regex,
            include_translated=translated,
            include_untranslated=untranslated,
            include_fuzzy=fuzzy,
            limit=limit,
        )
    except POWorkbenchError as error:
        secho(f"Error: {error}", fg="red")
        return

    print_results(results, as_json, "matching entries")


@catalog.command("untranslated")
@po_files_argument
@limit_option
@json_option
def cmd_untranslated(po_files, limit: Optional[int], as_json: bool):
    """List entries without translation."""
    if not load_po_files(po_files):
        return

    results = current_workbench.get_untranslated_strings(limit=limit)
    print_results(results, as_json, "untranslated strings")


@catalog.command("fuzzy")
@po_files_argument
@limit_option
@json_option
def cmd_fuzzy(po_files, limit: Optional[int], as_json: bool):
    """List fuzzy translations that need review."""
    if not load_po_files(po_files):
        return

    results = current_workbench.get_fuzzy_translations(limit=limit)
    print_results(results, as_json, "fuzzy translations")


@catalog.command("references")
@po_files_argument
@option(
    "--source",
    "-s",
    required=True,
    help="Source file as written in '#:' references, e.g. 'app/views.py'.",
)
@option("--start-line", type=int, default=None, help="First source line (inclusive).")
@option("--end-line", type=int, default=None, help="Last source line (inclusive).")
@limit_option
@json_option
def cmd_references(
    po_files,
    source: str,
    start_line: Optional[int],
    end_line: Optional[int],
    limit: Optional[int],
    as_json: bool,
):
    """List entries extracted from a source file.

    Examples:
        flask catalog references messages.po -s app/views.py
        flask catalog references messages.po -s app/views.py --start-line 10 --end-line 80
    """
    if not load_po_files(po_files):
        return

    results = current_workbench.get_file_translations(
        source, start_line=start_line, end_line=end_line, limit=limit
    )
    print_results(results, as_json, f"entries referencing {source}")


@catalog.command("update")
@argument(
    "po_file",
    type=ClickPath(exists=True, dir_okay=False, file_okay=True, path_type=Path),
)
@option("--msgid", required=True, help="Original text of the entry.")
@option(
    "--msgstr",
    required=True,
    multiple=True,
    help="New translation. Repeat once per plural form.",
)
@option("--msgctxt", default=None, help="Context of the entry, if it has one.")
@option(
    "--plural", is_flag=True, help="Store a single --msgstr as a plural translation."
)
def cmd_update(po_file: Path, msgid: str, msgstr, msgctxt: Optional[str], plural: bool):
    """Update one translation and save the PO file.

    The fuzzy flag of the entry is removed.

    Examples:
        flask catalog update messages.po --msgid "Save" --msgstr "Speichern"
        flask catalog update messages.po --msgid "%d file" --msgstr "%d Datei" --msgstr "%d Dateien"
    """
    if not load_po_files([po_file]):
        return

    translation = list(msgstr) if plural or len(msgstr) > 1 else msgstr[0]
    try:
        current_workbench.update_translation(po_file, msgid, translation, msgctxt)
    except POWorkbenchError as error:
        secho(f"Error: {error}", fg="red")
        return

    secho(f"Updated '{msgid}' in {po_file}", fg="green")


@catalog.command("update-batch")
@argument(
    "input_file",
    type=ClickPath(exists=True, dir_okay=False, file_okay=True, path_type=Path),
)
def cmd_update_batch(input_file: Path):
    """Apply many translation updates from a JSON file.

    The file holds a list of objects with ``filePath``, ``msgid``, ``msgstr``
    and optionally ``msgctxt``. Every PO file is saved once.

    Example:
        flask catalog update-batch updates.json
    """
    try:
        translations = read_json_file(input_file)
    except (JSONDecodeError, OSError) as error:
        secho(f"Error reading {input_file}: {error}", fg="red")
        return

    if not isinstance(translations, list) or not all(
        isinstance(item, dict) for item in translations
    ):
        secho(f"Error: {input_file} must contain a list of update objects", fg="red")
        return

    for path in dict.fromkeys(item.get("filePath") for item in translations):
        if not path:
            continue
        try:
            current_workbench.load_po_file(path)
        except POWorkbenchError as error:
            secho(f"Warning: {error}", fg="yellow")

    try:
        result = current_workbench.update_multiple_translations(translations)
    except KeyError as error:
        secho(f"Error: update is missing field {error}", fg="red")
        return

    for message in result.errors:
        secho(f"  {message}", fg="yellow")
    secho(
        f"Updated {result.succeeded} translations successfully, {result.failed} failed",
        fg="green" if not result.failed else "red",
    )
