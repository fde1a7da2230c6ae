"""CLI for converting job records between the API and wizard shapes."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

from pydantic import ValidationError

from core.config import load_settings
from core.schema_mapper import from_api, to_api
from core.step_validator import validate_all
from models.job_posting import JobPostingForm
from utils.logging_context import configure_logging, log_context
from wizard.steps import get_step, step_for_field

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert job postings between API records and wizard forms")
    parser.add_argument("path", help="Path to a JSON file, or '-' to read stdin")
    parser.add_argument(
        "--from",
        dest="source",
        choices=("record", "form"),
        default="record",
        help="Shape of the input document (default: record)",
    )
    parser.add_argument(
        "--to",
        dest="target",
        choices=("form", "payload"),
        default="form",
        help="Shape to print (default: form)",
    )
    parser.add_argument(
        "--status",
        choices=("draft", "open"),
        default="draft",
        help="Wizard status used when emitting a payload",
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Check the publish gate and exit with status 1 when it fails",
    )
    return parser


def _read_document(path: str) -> object:
    if path == "-":
        return json.load(sys.stdin)
    file_path = Path(path)
    if not file_path.exists():
        raise SystemExit(f"File not found: {file_path}")
    with file_path.open("r", encoding="utf-8") as fh:
        return json.load(fh)


def _load_form(document: object, source: str) -> JobPostingForm:
    if not isinstance(document, dict):
        raise SystemExit("Expected a JSON object at the top level.")
    if source == "form":
        try:
            return JobPostingForm.model_validate(document)
        except ValidationError as exc:
            raise SystemExit(f"Invalid form document: {exc}") from exc
    record = document.get("data") if isinstance(document.get("data"), dict) else document
    return from_api(record)


def _report_validation(form: JobPostingForm) -> bool:
    summary = validate_all(form)
    if summary.is_valid:
        print("Ready to publish.", file=sys.stderr)
        return True
    step = get_step(summary.first_failing_step)  # type: ignore[arg-type]
    print(f"Blocked at step {step.index + 1} ({step.label}):", file=sys.stderr)
    for field_name, message in summary.errors.items():
        owner = step_for_field(field_name)
        where = owner.key if owner else field_name
        print(f"  - {where}.{field_name}: {message}", file=sys.stderr)
    return False


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments and print the converted document as JSON.

    Example::

        python -m cli.convert_job job.json --to payload --status open --validate
    """

    args = _build_parser().parse_args(argv)
    settings = load_settings()
    configure_logging(level=logging.DEBUG if settings.debug_logs else logging.INFO)

    with log_context(operation="convert_job"):
        form = _load_form(_read_document(args.path), args.source)
        if args.target == "payload":
            output: dict = to_api(form, args.status)
        else:
            output = form.model_dump(mode="json")
        logger.debug("Converted %s to %s", args.source, args.target)

    print(json.dumps(output, indent=2, ensure_ascii=False))
    if args.validate and not _report_validation(form):
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
