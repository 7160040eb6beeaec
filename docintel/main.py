import argparse
import asyncio
import json
import sys
from pathlib import Path

from docintel.config.settings import Settings
from docintel.config.validation import (
    configuration_summary,
    is_file_size_valid,
    is_file_supported,
    validate_settings,
)
from docintel.logging.logger import Log
from docintel.ocr.file_loader import load_document_file
from docintel.processing.batch import process_documents, processing_stats
from docintel.processing.processor import DocumentProcessor, build_processor
from docintel.processing.serializers import result_to_payload, stats_to_payload


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docintel",
        description="Extract, analyze and safety-check transit documents.",
    )
    parser.add_argument("files", nargs="+", type=Path, help="Documents to process")
    parser.add_argument(
        "-l", "--language", choices=["en", "ml"], default="en",
        help="Language of the generated summaries",
    )
    parser.add_argument("-b", "--batch-size", type=int, help="Documents processed concurrently")
    parser.add_argument("-o", "--output", type=Path, help="Write the JSON report here instead of stdout")
    parser.add_argument("--health", action="store_true", help="Check analysis providers before processing")
    return parser


async def run(args: argparse.Namespace, settings: Settings, processor: DocumentProcessor) -> dict[str, object]:
    if args.health:
        Log.info("Provider health", **(await processor.health_check()))

    files = [load_document_file(path) for path in args.files]
    results = await process_documents(
        processor,
        files,
        language=args.language,
        batch_size=args.batch_size or settings.processing_batch_size,
    )
    return {
        "results": [result_to_payload(result) for result in results],
        "stats": stats_to_payload(processing_stats(results)),
    }


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> build processor -> process files -> print report."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)
    Log.debug("Configuration loaded", **configuration_summary(settings))
    for problem in validate_settings(settings):
        Log.warning("Configuration problem", detail=problem)

    missing = [str(path) for path in args.files if not path.is_file()]
    if missing:
        Log.error("Input files not found", files=", ".join(missing))
        return 2
    for path in args.files:
        if not is_file_supported(path.name, settings):
            Log.warning("Unsupported file type; it will be reported as failed", file=path.name)
        elif not is_file_size_valid(path.stat().st_size, settings):
            Log.warning("File exceeds the size limit; it will be reported as failed", file=path.name)

    processor = build_processor(settings)

    async def _run() -> dict[str, object]:
        try:
            return await run(args, settings, processor)
        finally:
            await processor.aclose()

    report = asyncio.run(_run())
    rendered = json.dumps(report, indent=2, ensure_ascii=False)
    if args.output:
        args.output.write_text(rendered + "\n", encoding="utf-8")
        Log.info("Report written", path=args.output)
    else:
        sys.stdout.write(rendered + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
