#!/usr/bin/env python3
"""
atomcss - Atomic CSS compiler

Compiles a YAML document of style definitions into two stylesheets (one
per writing direction) plus a JSON manifest mapping each style name to its
generated identifiers.

As with other ChRIS "plugin" style apps, the command takes an input and an
output directory and processes one file from the input directory.

Input document:
    keyframes:
      fadeIn:
        from: {opacity: 0}
        to: {opacity: 1}
    styles:
      button:
        backgroundColor: {default: white, ":hover": "#eee"}
        paddingInline: 12

Usage:
    atomcss inputdir/ outputdir/ --inputFile styles.yaml

Examples:
    # Physical left/right output with an RTL stylesheet
    atomcss . out/ --inputFile styles.yaml --styleResolution physical

    # Reject unknown properties and ill-typed values
    atomcss . out/ --inputFile styles.yaml --strict -vv
"""

import sys
import json
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

import yaml
from chris_plugin import chris_plugin

from . import __version__
from .config import AppSettings, appsettings
from .lib import Compiler, StyleCompileError, document_compile, LOG, state_connectToLogger
from .models import ProgramState, pipeline


DISPLAY_TITLE = r"""
        _
   __ _| |_ ___  _ __ ___   ___ ___ ___
  / _` | __/ _ \| '_ ` _ \ / __/ __/ __|
 | (_| | || (_) | | | | | | (__\__ \__ \
  \__,_|\__\___/|_| |_| |_|\___|___/___/

  Atomic CSS compiler
"""

# Define CLI arguments
parser = ArgumentParser(
    description="atomcss - compile style definitions to atomic CSS",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--inputFile", required=True, type=str, help="Input style document (.yaml) relative to inputdir"
)

parser.add_argument(
    "--outputSubdir",
    default=".",
    type=str,
    help="Subdirectory within outputdir for the generated stylesheets",
)

parser.add_argument(
    "--styleResolution",
    default=None,
    choices=["logical", "physical"],
    help="Emit CSS logical properties, or physical left/right with an RTL stylesheet "
    "(unset: ATOMCSS_STYLE_RESOLUTION, else logical)",
)

parser.add_argument(
    "--strict",
    action="store_true",
    default=None,
    help="Reject unknown properties and values outside a property's domain "
    "(unset: ATOMCSS_STRICT_VALUES / ATOMCSS_STRICT_PROPERTIES)",
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

    Returns:
        ProgramState with added fields:
            - inputSourceFile: Resolved path to the style document
            - cssOutputdir: Created output directory path
            - envOK: True if environment is valid

    Exits:
        1 if the input file is not found
    """

    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(DISPLAY_TITLE, level=2)

    LOG("Checking environment...", level=2)

    input_file = state.inputdir / state.inputFile

    if not input_file.exists():
        print(f"Error: Input file not found: {input_file}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    state.inputSourceFile = input_file
    LOG(f"Input file: {input_file}", level=2)

    state.cssOutputdir = state.outputdir / state.outputSubdir
    state.cssOutputdir.mkdir(parents=True, exist_ok=True)
    LOG(f"Output directory: {state.cssOutputdir}", level=2)

    state.envOK = True
    return state


def source_parse(inputstate: ProgramState) -> ProgramState:
    """
    Read and load the YAML style document.

    Returns:
        ProgramState with added field:
            - parsedSource: dict with optional "keyframes" and "styles"

    Exits:
        1 if the file cannot be read or is not a YAML mapping
    """

    state = inputstate.copy()

    LOG("Reading style document...", level=1)

    try:
        source = state.inputSourceFile.read_text(encoding="utf-8")
        LOG(f"Read {len(source)} characters from {state.inputSourceFile.name}", level=2)
    except OSError as e:
        print(f"Error reading input file: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        document = yaml.safe_load(source)
    except yaml.YAMLError as e:
        print(f"Parse error: {e}", file=sys.stderr)
        sys.exit(1)

    if document is None:
        document = {}
    if not isinstance(document, dict):
        print("Parse error: style document must be a mapping", file=sys.stderr)
        sys.exit(1)

    state.parsedSource = document
    LOG(f"Loaded {len(document.get('keyframes') or {})} keyframes, "
        f"{len(document.get('styles') or {})} style namespaces", level=2)
    return state


def css_compile(inputstate: ProgramState) -> ProgramState:
    """
    Compile the loaded document and write the stylesheets.

    Returns:
        ProgramState with added field:
            - compileResult: dict with status, ltr_file, rtl_file,
              manifest_file and rule_count

    Exits:
        1 if parsedSource is missing or any rule fails to compile
    """

    state = inputstate.copy()

    LOG("Compiling style definitions...", level=1)

    if state.parsedSource is None:
        print("Error: No parsed source available", file=sys.stderr)
        sys.exit(1)

    settings = AppSettings(**state.settings_overrides())

    try:
        result = document_compile(state.parsedSource, Compiler(settings))
    except StyleCompileError as e:
        print(f"Compilation error: {e}", file=sys.stderr)
        sys.exit(1)

    stem = state.inputSourceFile.stem
    ltr_file = state.cssOutputdir / f"{stem}.css"
    rtl_file = state.cssOutputdir / f"{stem}.rtl.css"
    manifest_file = state.cssOutputdir / f"{stem}.json"

    ltr_file.write_text(result["ltr"] + "\n", encoding="utf-8")
    rtl_file.write_text(result["rtl"] + "\n", encoding="utf-8")
    manifest_file.write_text(json.dumps(result["manifest"], indent=2) + "\n", encoding="utf-8")
    LOG(f"Wrote {ltr_file}, {rtl_file}, {manifest_file}", level=2)

    state.compileResult = {
        "status": True,
        "ltr_file": str(ltr_file),
        "rtl_file": str(rtl_file),
        "manifest_file": str(manifest_file),
        "rule_count": result["rule_count"],
    }
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display compilation results to the user.

    Exits:
        1 if compileResult is None
    """
    state: ProgramState = inputstate.copy()
    if not state.compileResult:
        print("Error: Compilation failed", file=sys.stderr)
        sys.exit(1)

    LOG("\n✓ Compilation successful!", level=1)
    LOG(f"  Rules: {state.compileResult['rule_count']}", level=1)
    LOG(f"  LTR:   {state.compileResult['ltr_file']}", level=1)
    LOG(f"  RTL:   {state.compileResult['rtl_file']}", level=1)
    LOG(f"  Map:   {state.compileResult['manifest_file']}", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="atomcss - Atomic CSS compiler",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - compile a style document to atomic CSS.

    Orchestrates the pipeline:
        1. env_check: Validate paths and environment
        2. source_parse: Load the YAML document
        3. css_compile: Compile rules and write stylesheets
        4. results_report: Display results to user
    """

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    if appsettings.debug_mode:
        state.verbosity = max(state.verbosity, 3)

    state_connectToLogger(state)

    pipeline(state, env_check, source_parse, css_compile, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
