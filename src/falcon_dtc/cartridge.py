"""Load, save and check cartridge files from the command line."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .document import DOCUMENT_TYPES, Document, detect_document_type
from .section import DecodeFault, FaultSink

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _document_class(kind: str, text: str) -> type[Document]:
    if kind == "auto":
        kind = detect_document_type(text)
    return DOCUMENT_TYPES[kind]


def load_document(
    path: Path, kind: str = "auto", *, report: FaultSink | None = None
) -> tuple[Document, bool]:
    """Read ``path`` and decode it; returns the document and the overall result."""

    text = Path(path).read_text(encoding="utf-8")
    document_cls = _document_class(kind, text)
    logger.debug("Decoding %s as %s", path, document_cls.__name__)
    return document_cls.from_text(text, report=report)


def save_document(document: Document, path: Path, force: bool = False) -> Path:
    path = Path(path)
    if path.exists() and not force:
        raise FileExistsError(f"{path} already exists; use --force to overwrite")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(document.encode(), encoding="utf-8")
    return path


class FaultCollector:
    """Sink that logs each fault and keeps it for the summary."""

    def __init__(self) -> None:
        self.faults: list[DecodeFault] = []

    def __call__(self, fault: DecodeFault) -> None:
        logger.error("%s: %s", fault.section, fault.error)
        logger.debug("Section text:\n%s", fault.text)
        self.faults.append(fault)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="falcon_dtc")
    parser.add_argument(
        "--verbose", action="store_true", help="Log section text on failures"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    type_choices = ["auto", *DOCUMENT_TYPES]

    check = subparsers.add_parser("check", help="Decode a file and report faults")
    check.add_argument("path", type=Path, help="Cartridge or mission file")
    check.add_argument("--type", choices=type_choices, default="auto")

    normalize = subparsers.add_parser(
        "normalize", help="Decode a file and write it back in canonical form"
    )
    normalize.add_argument("path", type=Path, help="Cartridge or mission file")
    normalize.add_argument("--out", required=True, type=Path, help="Output file")
    normalize.add_argument("--type", choices=type_choices, default="auto")
    normalize.add_argument(
        "--force", action="store_true", help="Overwrite the output file"
    )
    normalize.add_argument(
        "--allow-errors",
        action="store_true",
        help="Write the output even when some sections failed to decode",
    )

    defaults = subparsers.add_parser(
        "defaults", help="Write a freshly constructed document"
    )
    defaults.add_argument("--type", choices=list(DOCUMENT_TYPES), default="dtc")
    defaults.add_argument("--out", type=Path, help="Output file (default: stdout)")
    defaults.add_argument(
        "--force", action="store_true", help="Overwrite the output file"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
    )

    if args.command == "check":
        collector = FaultCollector()
        document, ok = load_document(args.path, args.type, report=collector)
        status = "ok" if ok else f"{len(collector.faults)} section(s) failed"
        print(f"{args.path}: {type(document).__name__} {status}")
        for fault in collector.faults:
            print(f"  {fault.section}: {fault.error}")
        return 0 if ok else 1

    if args.command == "normalize":
        document, ok = load_document(args.path, args.type)
        if not ok and not args.allow_errors:
            logger.error("%s did not decode cleanly; nothing written", args.path)
            return 1
        try:
            save_document(document, args.out, force=args.force)
        except FileExistsError as exc:
            logger.error("%s", exc)
            return 1
        print(f"Wrote {args.out}")
        return 0 if ok else 1

    if args.command == "defaults":
        document = DOCUMENT_TYPES[args.type]()
        if args.out is None:
            sys.stdout.write(document.encode())
            return 0
        try:
            save_document(document, args.out, force=args.force)
        except FileExistsError as exc:
            logger.error("%s", exc)
            return 1
        return 0

    parser.error(f"Unknown command {args.command}")
    return 1


__all__ = [
    "load_document",
    "save_document",
    "FaultCollector",
    "build_arg_parser",
    "main",
]
