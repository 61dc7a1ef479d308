"""
Command line entry point for epcis-doc
"""
import argparse
import json
import logging
import sys
from typing import Any, List, Optional

from epcis_doc.config.settings import settings
from epcis_doc.errors import EPCISError, EPCISValidationError
from epcis_doc.models.document import EPCISDocument
from epcis_doc.schema.validator import default_validator
from epcis_doc.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def load_document(path: str) -> Any:
    """Read a JSON document from a file, '-' reads stdin"""
    if path == '-':
        return json.load(sys.stdin)
    with open(path, encoding='utf-8') as handle:
        return json.load(handle)


def validate_file(path: str, collect: bool = False) -> int:
    """Validate a document file and print the outcome"""
    document = load_document(path)
    validator = default_validator()

    if collect:
        result = validator.validate(document)
        print(json.dumps({
            'summary': result.summary(),
            'errors': [error.model_dump() for error in result.errors],
        }, indent=2))
        return EXIT_OK if result.success else EXIT_INVALID

    try:
        validator.assert_valid(document)
    except EPCISValidationError as e:
        print(str(e))
        return EXIT_INVALID
    print(f"{path}: valid")
    return EXIT_OK


def normalize_file(path: str) -> int:
    """Rebuild a document through the entity model and print it"""
    document = EPCISDocument.from_dict(load_document(path))
    print(document.to_json(indent=2))
    return EXIT_OK


def show_settings() -> int:
    """Print the effective document defaults"""
    defaults = settings.document_defaults()

    print("\n" + "=" * 60)
    print("epcis-doc settings")
    print("=" * 60)
    for key, value in defaults.model_dump().items():
        print(f"  {key}: {value}")
    print(f"  log_level: {settings.LOG_LEVEL}")
    print(f"  log_file: {settings.LOG_FILE}")
    print("=" * 60)
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="epcis-doc", description="EPCIS 2.0 JSON document tools")
    parser.add_argument(
        "command",
        choices=["validate", "normalize", "settings"],
        help="Command to execute"
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="EPCIS JSON document, '-' for stdin"
    )
    parser.add_argument(
        "--collect",
        action="store_true",
        help="Report every violation as JSON instead of failing with an error message"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=settings.LOG_LEVEL.upper(),
        help="Logging level"
    )
    parser.add_argument(
        "--log-file",
        default=settings.LOG_FILE,
        help="Log file path"
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        default=settings.LOG_JSON,
        help="Write log records as JSON"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI interface"""
    parser = build_parser()
    # Options may sit between the command and the file
    args = parser.parse_intermixed_args(argv)

    # Setup logging
    setup_logging(level=args.log_level, log_file=args.log_file, json_format=args.log_json)

    if args.command == "settings":
        return show_settings()

    if not args.file:
        print(f"Error: a document file is required for the {args.command} command", file=sys.stderr)
        return EXIT_ERROR

    try:
        if args.command == "validate":
            return validate_file(args.file, collect=args.collect)
        return normalize_file(args.file)
    except (OSError, ValueError) as e:
        # json.JSONDecodeError and pydantic.ValidationError are ValueErrors
        logger.error(f"Unable to read {args.file}: {str(e)}")
        print(f"Error: {str(e)}", file=sys.stderr)
        return EXIT_ERROR
    except EPCISError as e:
        logger.error(f"Unable to process {args.file}: {str(e)}")
        print(f"Error: {str(e)}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
