"""Batch metadata extraction over a directory of documents.

Usage:
    python -m docmeta.main
    python -m docmeta.main ./decks
    python -m docmeta.main ./decks --output results.jsonl
    python -m docmeta.main ./decks --extension pdf --extension pptx --max-documents 5
"""

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from docmeta.config.settings import Settings
from docmeta.logging.logger import Log
from docmeta.processor.processor import build_processor
from docmeta.worker.file_discovery import discover_files
from docmeta.worker.job_runner import JobRunner
from docmeta.worker.result_writer import ResultWriter
from docmeta.worker.worker import Worker


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return number


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="docmeta",
        description="Extract title, agency, year and topics from a directory of documents.",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        type=Path,
        default=None,
        help="Directory with source documents (default: DOCUMENTS_DIR setting).",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="JSON lines output file (default: OUTPUT_PATH setting, else stdout).",
    )
    parser.add_argument(
        "--extension",
        action="append",
        default=None,
        help="Only process files with this extension; may be repeated.",
    )
    parser.add_argument(
        "--max-documents",
        type=_non_negative_int,
        default=None,
        help="Stop after this many documents.",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: settings -> discover files -> build pipeline -> run batch -> write results."""
    args = _parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level, stream=sys.stderr)

    directory = args.directory or Path(settings.documents_dir)
    paths = discover_files(directory, args.extension)
    Log.info(f"Found {len(paths)} documents in {directory}")

    processor = build_processor(settings)
    worker = Worker(JobRunner(processor), settings)
    results = worker.run(paths, max_documents=args.max_documents)

    writer = ResultWriter()
    output = args.output or (Path(settings.output_path) if settings.output_path else None)
    if output is None:
        writer.write(results, sys.stdout)
    else:
        written = writer.write_file(results, output)
        Log.info(f"Wrote {written} results to {output}")

    return 0 if all(r.succeeded for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())
