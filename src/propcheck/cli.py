"""Command Line Interface for the Propcheck validation framework.

This module provides a CLI for validating JSON documents against rule
configuration documents (see propcheck.validation.loader for the format).

The CLI supports the following commands:
    - validate: Validate a JSON object, or each object of a JSON array
    - schema: Print the JSON schema of rule configuration documents

JSON input can be provided either as a direct string or as a file path prefixed with '@'.
Relative file paths are resolved against the current directory.

Exit status is 0 when every object is valid, 1 when at least one object is
invalid and 2 when the rules or data cannot be loaded.

Example Usage:
    python -m propcheck cli validate @rules.json @person.json
    python -m propcheck cli validate --json @rules.json '{"name": ""}'
    python -m propcheck cli schema
"""

import argparse
import json
import logging
import os
from typing import Any, List, Optional

from propcheck.core.exceptions import ConfigurationError
from propcheck.validation import RULES_SCHEMA, RuleLoader, ValidationEngine, ValidationReporter

logger = logging.getLogger(__name__)

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def parse_json_input(json_str: str) -> Any:
    """Parse JSON input from either a string or file.

    Args:
        json_str (str): Either a JSON string or a file path prefixed with '@'.

    Returns:
        Any: Parsed JSON data.

    Raises:
        ValueError: If the JSON is invalid or the specified file is not found or
            cannot be read.
    """
    if json_str.startswith("@"):
        file_path = json_str[1:]
        if not os.path.isabs(file_path):
            file_path = os.path.join(os.getcwd(), file_path)

        if not os.path.exists(file_path):
            raise ValueError(f"File not found: {file_path}")

        try:
            with open(file_path, "r") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {file_path}: {e}")
        except OSError as e:
            raise ValueError(f"Cannot read {file_path}: {e}")

    try:
        return json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON input: {e}")


def configure_logging(verbose: bool) -> None:
    """Configure root logging for CLI use."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def run_validate(rules_input: str, data_input: str, as_json: bool) -> int:
    """Validate data against rules and print the report.

    Args:
        rules_input (str): Rule configuration as JSON string or @filename.
        data_input (str): Object or array of objects as JSON string or @filename.
        as_json (bool): Print JSON reports instead of text.

    Returns:
        int: Process exit status.
    """
    try:
        rules = RuleLoader().load(parse_json_input(rules_input))
        data = parse_json_input(data_input)
    except (ValueError, ConfigurationError) as e:
        logger.error(f"Cannot load input: {e}")
        print(f"Error: {e}")
        return EXIT_ERROR

    objects = data if isinstance(data, list) else [data]
    engine = ValidationEngine()
    results = [engine.validate(obj, rules) for obj in objects]

    if as_json:
        reports: List[Any] = [ValidationReporter.to_dict(result) for result in results]
        print(json.dumps(reports if isinstance(data, list) else reports[0], indent=2))
    else:
        for index, result in enumerate(results):
            if isinstance(data, list):
                print(f"Object {index}:")
            print(ValidationReporter.format_result(result))

    return EXIT_VALID if all(result.is_valid() for result in results) else EXIT_INVALID


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(description="Property validation CLI")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    validate = subparsers.add_parser("validate", help="Validate JSON data against rules")
    validate.add_argument("rules", help="JSON string or @filename containing the rule configuration")
    validate.add_argument("data", help="JSON string or @filename containing an object or array")
    validate.add_argument("--json", action="store_true", help="Print the report as JSON")

    subparsers.add_parser("schema", help="Print the rule configuration JSON schema")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI application.

    Args:
        argv: Arguments to parse, defaults to sys.argv[1:].

    Returns:
        int: Process exit status.
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if not args.command:
        parser.print_help()
        return EXIT_ERROR

    if args.command == "schema":
        print(json.dumps(RULES_SCHEMA, indent=2))
        return EXIT_VALID

    return run_validate(args.rules, args.data, args.json)
