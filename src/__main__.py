#!/usr/bin/env python3
"""
devsite_export - web.dev to DevSite markdown exporter

Reads a web.dev content tree, renders every page with the export flag set,
rewrites the result into the DevSite markdown dialect and writes one
document per page, sorted into case-studies/, blog/ and articles/ folders.
A redirect table mapping every old URL to its new location is written
alongside.

As an aside, this codebase leverages the ChRIS "plugin" concept/pattern as
general purpose python app development framework.

Usage:
    devsite_export inputdir/ outputdir/

Examples:
    # Export every page
    devsite_export content/ export/

    # Export two pages with a custom authors table and includes
    devsite_export content/ export/ --authorsFile authors.yml \\
        --includesDir content/_includes --pageUrl /blog/foo/ --pageUrl /bar/

    # Verbose output, fail when any page could not be exported
    devsite_export content/ export/ --strict -vv
"""

import asyncio
import sys
from pathlib import Path
from typing import Dict, List
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from .config import appsettings
from .lib import (
    AuthorsTable,
    ContentTree,
    ExportError,
    ExportSession,
    FileWriter,
    JinjaRenderer,
    PageExporter,
    __version__,
    LOG,
    state_connectToLogger,
)
from .lib.log import LOG_warning
from .models import ProgramState, pipeline


DISPLAY_TITLE = r"""
     _                _ _                                    _
  __| | _____   _____(_) |_ ___        _____  ___ __   ___ _ __| |_
 / _` |/ _ \ \ / / __| | __/ _ \_____ / _ \ \/ / '_ \ / _ \ '__| __|
| (_| |  __/\ V /\__ \ | ||  __/_____|  __/>  <| |_) | (_) | |  | |_
 \__,_|\___| \_/ |___/_|\__\___|      \___/_/\_\ .__/ \___/|_|   \__|
                                               |_|
  web.dev → DevSite markdown exporter
"""

# Define CLI arguments
parser = ArgumentParser(
    description="devsite_export - rewrite web.dev pages as DevSite markdown",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--authorsFile",
    default=None,
    type=str,
    help=f"Authors table (YAML). Defaults to inputdir/{appsettings.authors_file}",
)

parser.add_argument(
    "--includesDir",
    default=None,
    type=str,
    help="Directory that template includes/imports resolve against",
)

parser.add_argument(
    "--pageUrl",
    action="append",
    default=None,
    type=str,
    help="URL of a page to export (repeatable). Defaults to every page",
)

parser.add_argument(
    "--strict",
    action="store_true",
    default=False,
    help="Exit with an error status when any page could not be exported",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv, -vvv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate environment and resolve all file paths.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - authorsSourceFile: Resolved path to the authors table
            - includesInputdir: Resolved includes directory, if any
            - envOK: True if environment is valid

    Exits:
        1 if the content directory, authors table or includes directory is missing
    """

    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(DISPLAY_TITLE, level=2)

    LOG("Checking environment...", level=2)

    if not state.inputdir.is_dir():
        print(f"Error: Input directory not found: {state.inputdir}", file=sys.stderr)
        sys.exit(1)

    authors_file = Path(state.authorsFile or appsettings.authors_file)
    if not authors_file.is_absolute():
        authors_file = state.inputdir / authors_file

    if not authors_file.exists():
        print(f"Error: Authors file not found: {authors_file}", file=sys.stderr)
        print("Specify with --authorsFile", file=sys.stderr)
        sys.exit(1)

    state.authorsSourceFile = authors_file
    LOG(f"Authors file: {authors_file}", level=2)

    if state.includesDir:
        state.includesInputdir = Path(state.includesDir)
        if not state.includesInputdir.is_dir():
            print(f"Error: Includes directory not found: {state.includesInputdir}", file=sys.stderr)
            sys.exit(1)
        LOG(f"Includes directory: {state.includesInputdir}", level=2)

    state.outputdir.mkdir(parents=True, exist_ok=True)
    LOG(f"Output directory: {state.outputdir}", level=2)

    state.envOK = True
    return state


def pages_load(inputstate: ProgramState) -> ProgramState:
    """
    Collect the URLs of the pages to export.

    Returns:
        ProgramState with added field:
            - contentTree: Page lookup over the content directory
            - pageUrls: URLs selected via --pageUrl, or every page in the tree
    """

    state = inputstate.copy()

    LOG("Reading content tree...", level=1)
    state.contentTree = ContentTree(state.inputdir)
    state.pageUrls = list(state.pageUrl) if state.pageUrl else state.contentTree.url_list()
    LOG(f"Selected {len(state.pageUrls)} page(s)", level=2)
    return state


async def pages_exportAll(exporter: PageExporter, urls: List[str], failed: Dict[str, str]) -> Dict[str, int]:
    """Export pages one after another, collecting per-page failures"""
    counts = {"exported": 0, "skipped": 0, "renderFailed": 0}
    for url in urls:
        try:
            result = await exporter.page_export(url)
        except ExportError as e:
            LOG_warning(f"Export of {url} aborted: {e}")
            failed[url] = str(e)
            continue

        if result.skipped:
            counts["skipped"] += 1
            continue
        counts["exported"] += 1
        if not result.rendered:
            counts["renderFailed"] += 1
    return counts


def pages_export(inputstate: ProgramState) -> ProgramState:
    """
    Export every selected page into the output directory.

    Returns:
        ProgramState with added fields:
            - session: ExportSession holding the URL map of this build
            - exportResults: Counts of exported/skipped/render-failed pages
            - failedPages: URL → error for pages whose export aborted

    Exits:
        1 if the authors table cannot be loaded
    """

    state = inputstate.copy()

    LOG("Exporting pages...", level=1)

    try:
        authors = AuthorsTable.table_loadFromFile(state.authorsSourceFile)
    except ExportError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    state.session = ExportSession()
    state.failedPages = {}
    exporter = PageExporter(
        pages=state.contentTree,
        authors=authors,
        renderer=JinjaRenderer(state.includesInputdir),
        writer=FileWriter(state.outputdir),
        session=state.session,
    )

    state.exportResults = asyncio.run(pages_exportAll(exporter, state.pageUrls, state.failedPages))
    LOG(f"Exported {state.exportResults['exported']} page(s)", level=2)
    return state


def redirects_write(inputstate: ProgramState) -> ProgramState:
    """
    Write the old → new URL redirect table.

    Returns:
        ProgramState with added field:
            - redirectsFile: Path of the redirect table
    """

    state = inputstate.copy()

    state.redirectsFile = state.outputdir / appsettings.redirects_file
    state.redirectsFile.write_text(state.session.redirects_dump(), encoding="utf-8")
    LOG(f"Wrote {len(state.session)} redirect(s) to {state.redirectsFile}", level=2)
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display export results to the user.

    Returns:
        ProgramState unchanged (terminal pipeline stage)

    Exits:
        1 if exportResults is None, or --strict and any page failed
    """
    state: ProgramState = inputstate.copy()
    if state.exportResults is None:
        print("Error: Export failed", file=sys.stderr)
        sys.exit(1)

    LOG("\n✓ Export finished", level=1)
    LOG(f"  Exported:      {state.exportResults['exported']}", level=1)
    LOG(f"  Skipped:       {state.exportResults['skipped']}", level=1)
    LOG(f"  Render failed: {state.exportResults['renderFailed']}", level=1)
    LOG(f"  Aborted:       {len(state.failedPages)}", level=1)
    LOG(f"  Redirects:     {state.redirectsFile}", level=1)

    for url, error in state.failedPages.items():
        print(f"Error: {url}: {error}", file=sys.stderr)

    if state.strict and state.failedPages:
        sys.exit(1)
    return state


@chris_plugin(
    parser=parser,
    title="devsite_export - web.dev to DevSite markdown exporter",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - export a web.dev content tree to DevSite markdown.

    Orchestrates the full export pipeline:
        1. env_check: Validate paths and environment
        2. pages_load: Select the pages to export
        3. pages_export: Render, rewrite and write every page
        4. redirects_write: Write the redirect table
        5. results_report: Display results to user

    Args:
        options: CLI arguments from argparse
        inputdir: Directory containing the web.dev content tree
        outputdir: Directory where DevSite documents will be written

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    pipeline(state, env_check, pages_load, pages_export, redirects_write, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
