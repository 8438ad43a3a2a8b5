"""CLI entry point for pdfpages."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from pdfpages import __version__, composer, logger
from pdfpages.exceptions import PackageError, PdfIOError
from pdfpages.logging import configure_logging
from pdfpages.settings import get_settings
from pdfpages.typing.enums import PageRotation, RemoveBlankOption
from pdfpages.typing.models import FilterOptions

if TYPE_CHECKING:
    from collections.abc import Callable

    from pdfpages.settings import Settings
    from pdfpages.typing.models import FileAttributes


def _rotation_from_cli(value: str) -> PageRotation:
    """Convert `--angle` CLI value into a page rotation.

    Args:
        value (str): CLI value (`90`, `180` or `270`).

    Raises:
        argparse.ArgumentTypeError: If value is not supported.

    Returns:
        PageRotation: Selected rotation.
    """
    try:
        return PageRotation.from_str(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("--angle must be one of: 90, 180, 270") from exc  # noqa: TRY003


def _positive_int(value: str) -> int:
    """Parse a strictly positive integer CLI value.

    Raises:
        argparse.ArgumentTypeError: If value is not an integer above zero.
    """
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got '{value}'") from exc  # noqa: TRY003
    if parsed <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer")  # noqa: TRY003
    return parsed


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser.

    Returns:
        argparse.ArgumentParser: The configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="pdfpages")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command")

    info_parser = subparsers.add_parser("info", help="Print page count, size and document information")
    info_parser.add_argument("--input", required=True, type=Path, dest="input_path")

    text_parser = subparsers.add_parser("text", help="Extract text from selected pages")
    text_parser.add_argument("--input", required=True, type=Path, dest="input_path")
    text_parser.add_argument("--page-range", default=None, dest="page_range")
    text_parser.add_argument("--output", type=Path, default=None, dest="output_path")

    filter_parser = subparsers.add_parser("filter", help="Keep selected pages and/or drop blank pages")
    filter_parser.add_argument("--input", required=True, type=Path, dest="input_path")
    filter_parser.add_argument("--output", type=Path, default=None, dest="output_path")
    filter_group = filter_parser.add_mutually_exclusive_group(required=True)
    filter_group.add_argument("--page-range", default=None, dest="page_range")
    filter_group.add_argument("--remove-blank", action="store_true", dest="remove_blank")

    rotate_parser = subparsers.add_parser("rotate", help="Set the rotation of selected pages")
    rotate_parser.add_argument("--input", required=True, type=Path, dest="input_path")
    rotate_parser.add_argument("--output", type=Path, default=None, dest="output_path")
    rotate_parser.add_argument("--page-range", default=None, dest="page_range")
    angle_group = rotate_parser.add_mutually_exclusive_group(required=True)
    angle_group.add_argument("--angle", type=_rotation_from_cli, default=None, dest="angle")
    angle_group.add_argument("--degrees", type=int, default=None, dest="degrees")

    split_parser = subparsers.add_parser("split", help="Split into documents of N consecutive pages")
    split_parser.add_argument("--input", required=True, type=Path, dest="input_path")
    split_parser.add_argument("--page-increment", type=_positive_int, default=1, dest="page_increment")
    split_parser.add_argument("--output-dir", type=Path, default=None, dest="output_dir")

    merge_parser = subparsers.add_parser("merge", help="Merge two or more PDF files")
    merge_parser.add_argument("--inputs", required=True, nargs="+", type=Path, dest="input_paths")
    merge_parser.add_argument("--output", type=Path, default=None, dest="output_path")

    return parser


def read_input(path: Path) -> bytes:
    """Read a whole input file into memory.

    Args:
        path (Path): File to read.

    Raises:
        PdfIOError: If the file cannot be read.

    Returns:
        bytes: File content.
    """
    try:
        return path.read_bytes()
    except OSError as exc:
        raise PdfIOError(message=f"Failed to read input file: {path}") from exc


def _write_output(path: Path, content: bytes) -> Path:
    """Write an output document, creating parent directories.

    Raises:
        PdfIOError: If the file cannot be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
    except OSError as exc:
        raise PdfIOError(message=f"Failed to write output file: {path}") from exc
    return path


def _default_output(args: argparse.Namespace, settings: Settings, suffix: str) -> Path:
    """Resolve the output path, defaulting to the results directory."""
    if args.output_path is not None:
        return args.output_path
    return Path(settings.results_dir) / f"{args.input_path.stem}_{args.command}{suffix}"


def _emit_attributes(attributes: FileAttributes) -> None:
    """Print attributes as JSON on stdout."""
    sys.stdout.write(attributes.model_dump_json() + "\n")


def _run_info(args: argparse.Namespace, settings: Settings) -> None:
    _ = settings
    result = composer.get_info(read_input(args.input_path))
    _emit_attributes(result.attributes)


def _run_text(args: argparse.Namespace, settings: Settings) -> None:
    result = composer.extract_text(read_input(args.input_path), args.page_range)
    output_path = _write_output(_default_output(args, settings, ".txt"), result.text.encode("utf-8"))
    logger.info("Text written", extra={"output_path": str(output_path)})
    _emit_attributes(result.attributes)


def _run_filter(args: argparse.Namespace, settings: Settings) -> None:
    options = FilterOptions(
        remove_blank_pages=RemoveBlankOption.YES if args.remove_blank else None,
        page_range=args.page_range,
    )
    result = composer.filter_pages(read_input(args.input_path), options)
    output_path = _write_output(_default_output(args, settings, ".pdf"), result.content)
    logger.info("Filtered PDF written", extra={"output_path": str(output_path)})
    _emit_attributes(result.attributes)


def _run_rotate(args: argparse.Namespace, settings: Settings) -> None:
    data = read_input(args.input_path)
    if args.angle is not None:
        result = composer.rotate_pages(data, args.angle, args.page_range)
    else:
        result = composer.rotate_pages_by_degrees(data, args.degrees, args.page_range)
    output_path = _write_output(_default_output(args, settings, ".pdf"), result.content)
    logger.info("Rotated PDF written", extra={"output_path": str(output_path)})
    _emit_attributes(result.attributes)


def _run_split(args: argparse.Namespace, settings: Settings) -> None:
    result = composer.split_pages(read_input(args.input_path), args.page_increment)
    output_dir = args.output_dir or Path(settings.results_dir)
    for index, part in enumerate(result.parts, start=1):
        _write_output(output_dir / f"{args.input_path.stem}_part_{index:03d}.pdf", part)
    logger.info("Split PDF written", extra={"output_dir": str(output_dir), "parts": len(result.parts)})
    _emit_attributes(result.attributes)


def _run_merge(args: argparse.Namespace, settings: Settings) -> None:
    inputs = [read_input(path) for path in args.input_paths]
    result = composer.merge_pdfs(inputs)
    output_path = args.output_path or Path(settings.results_dir) / "merged.pdf"
    _write_output(output_path, result.content)
    logger.info("Merged PDF written", extra={"output_path": str(output_path)})
    _emit_attributes(result.attributes)


_HANDLERS: dict[str, Callable[[argparse.Namespace, Settings], None]] = {
    "info": _run_info,
    "text": _run_text,
    "filter": _run_filter,
    "rotate": _run_rotate,
    "split": _run_split,
    "merge": _run_merge,
}


def main(argv: list[str] | None = None) -> int:
    """Run the CLI.

    Args:
        argv (list[str] | None): Arguments to parse; defaults to `sys.argv`.

    Returns:
        int: Exit code (0 for success, 1 for error).
    """
    settings = get_settings()
    configure_logging(settings=settings)

    parser = build_parser()
    args = parser.parse_args(argv)

    handler = _HANDLERS.get(args.command)
    if handler is None:
        parser.print_help()
        return 0

    try:
        handler(args, settings)
    except PackageError:
        logger.exception("Command failed", extra={"command": args.command})
        return 1
    except KeyboardInterrupt:
        logger.info("Command aborted by user")
        return 130
    except Exception:
        logger.exception("Unexpected error", extra={"command": args.command})
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
