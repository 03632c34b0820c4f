"""Command Line Interface for the nodal graph console.

This module provides a CLI for editing a graph through the graph console. It
supports applying a script of operations from JSON and an interactive,
line-oriented shell.

The CLI supports the following commands:
    - script: Apply a JSON script of console operations, then print the graph
    - shell: Read console commands line by line from standard input

JSON input can be provided either as a direct string or as a file path prefixed with '@'.

Script format:
    {"weighted": false,
     "operations": [{"op": "insert_node", "value": "A"},
                    {"op": "insert_edge", "tail": "A", "head": "B", "directed": true}]}

Shell commands:
    node add VALUE | node rm VALUE
    edge add TAIL HEAD [--directed] [--weight W]
    edge rm TAIL HEAD [--weight W]
    dump | snapshot | help | quit

Example Usage:
    python -m nodal cli script @ops.json
    python -m nodal cli --weighted shell
"""

import argparse
import json
import os
import shlex
import sys
from typing import Any, Dict, List, Optional, TextIO

from .config import LOG_LEVELS, ConsoleConfig
from .console import GraphConsole, OperationOutcome, OutcomeStatus
from .core.exceptions import ConfigurationError, ValidationError
from .utils.validation import ScriptSchemaValidator

SHELL_HELP = """Commands:
  node add VALUE
  node rm VALUE
  edge add TAIL HEAD [--directed] [--weight W]
  edge rm TAIL HEAD [--weight W]
  dump
  snapshot
  help
  quit"""


def parse_json_input(json_str: str) -> Any:
    """Parse JSON input from either a string or file.

    Args:
        json_str (str): Either a JSON string or a file path prefixed with '@'.
                       Relative paths are resolved against the current directory.

    Returns:
        Parsed JSON data.

    Raises:
        ValueError: If the JSON is invalid or the specified file is not found.
    """
    if json_str.startswith("@"):
        file_path = json_str[1:]
        if not os.path.isabs(file_path):
            file_path = os.path.join(os.getcwd(), file_path)

        if not os.path.exists(file_path):
            raise ValueError(f"File not found: {file_path}")

        with open(file_path, "r") as f:
            try:
                return json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in {file_path}: {e}")

    try:
        return json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON input: {e}")


def print_outcome(outcome: OperationOutcome, out: TextIO) -> None:
    """Print an outcome; snapshots are printed as JSON."""
    if outcome.status is OutcomeStatus.SHOWN and isinstance(outcome.subject, dict):
        print(json.dumps(outcome.subject, indent=2), file=out)
    else:
        print(outcome.message, file=out)


def load_script(json_str: str) -> Dict[str, Any]:
    """Parse and validate a script document.

    Raises:
        ValidationError: If the document is not valid JSON or fails the schema
    """
    try:
        document = parse_json_input(json_str)
    except ValueError as e:
        raise ValidationError(str(e))

    result = ScriptSchemaValidator().validate_script(document)
    if not result.is_valid:
        raise ValidationError("; ".join(result.errors))
    return document


def run_script(config: ConsoleConfig, json_str: str, out: TextIO) -> int:
    """Apply every operation of a script and print the resulting graph.

    Returns:
        int: Exit status
    """
    try:
        document = load_script(json_str)
    except ValidationError as e:
        print(str(e), file=sys.stderr)
        return 1

    if "weighted" in document:
        config.weighted = document["weighted"]

    console = GraphConsole(config)
    for operation in document["operations"]:
        print_outcome(console.apply(operation), out)

    print(console.dump(), file=out)
    return 0


def _parse_edge_arguments(tokens: List[str]) -> Dict[str, Any]:
    """Parse ``TAIL HEAD [--directed] [--weight W]`` shell tokens.

    Raises:
        ValueError: If the tokens do not follow that form
    """
    positional: List[str] = []
    options: Dict[str, Any] = {"directed": False, "weight": None}
    iterator = iter(tokens)
    for token in iterator:
        if token == "--directed":
            options["directed"] = True
        elif token == "--weight":
            options["weight"] = next(iterator, None)
            if options["weight"] is None:
                raise ValueError("--weight needs a value")
        else:
            positional.append(token)

    if len(positional) != 2:
        raise ValueError("expected TAIL and HEAD")
    return {"tail": positional[0], "head": positional[1], **options}


def execute_shell_line(console: GraphConsole, line: str, out: TextIO) -> bool:
    """Execute one shell line.

    Returns:
        bool: False when the session should end, True otherwise
    """
    try:
        tokens = shlex.split(line)
    except ValueError as e:
        print(f"Error: {e}", file=out)
        return True

    if not tokens:
        return True

    command, args = tokens[0].lower(), tokens[1:]
    if command in ("quit", "exit"):
        return False
    if command == "help":
        print(SHELL_HELP, file=out)
        return True
    if command == "dump":
        print(console.dump(), file=out)
        return True
    if command == "snapshot":
        print(json.dumps(console.snapshot(), indent=2), file=out)
        return True

    action = args[0].lower() if args else ""
    if command == "node" and action in ("add", "rm") and len(args) == 2:
        if action == "add":
            print_outcome(console.insert_node(args[1]), out)
        else:
            print_outcome(console.remove_node(args[1]), out)
        return True

    if command == "edge" and action in ("add", "rm"):
        try:
            fields = _parse_edge_arguments(args[1:])
        except ValueError as e:
            print(f"Error: {e}", file=out)
            return True
        if action == "add":
            print_outcome(console.insert_edge(**fields), out)
        else:
            print_outcome(console.remove_edge(**fields), out)
        return True

    print(f"Unknown command: {line.strip()}. Type 'help' for the list of commands.", file=out)
    return True


def run_shell(config: ConsoleConfig, stream: TextIO, out: TextIO) -> int:
    """Run an interactive session until end of input or ``quit``."""
    console = GraphConsole(config)
    interactive = stream.isatty()
    while True:
        if interactive:
            print("nodal> ", end="", file=out, flush=True)
        line = stream.readline()
        if not line:
            break
        if not execute_shell_line(console, line, out):
            break
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(description="Graph console CLI")
    parser.add_argument("--weighted", action="store_true", help="Edit a weighted graph")
    parser.add_argument(
        "--check-integrity",
        action="store_true",
        help="Validate graph consistency after every change",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    script = subparsers.add_parser("script", help="Apply a JSON script of operations")
    script.add_argument("data", help="JSON string or @filename containing the script")

    subparsers.add_parser("shell", help="Interactive line-oriented session")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI application.

    Returns:
        int: Exit status
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = ConsoleConfig(
            weighted=args.weighted,
            check_integrity=args.check_integrity,
            log_level=args.log_level,
        )
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1
    config.configure_logging()

    if args.command == "script":
        return run_script(config, args.data, sys.stdout)
    return run_shell(config, sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())
