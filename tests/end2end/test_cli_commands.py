from __future__ import annotations

import json
import sys
from subprocess import run as subprocess_run  # noqa: S404
from typing import TYPE_CHECKING

from pdf_helpers import build_pdf, page_count, page_texts

if TYPE_CHECKING:
    from pathlib import Path


def _run_cli(tmp_path: Path, *args: str):
    return subprocess_run(  # noqa: S603
        [sys.executable, "-m", "pdfpages.cli", *args],
        capture_output=True,
        text=True,
        check=False,
        cwd=tmp_path,
    )


def test_info_prints_attributes_as_json(tmp_path: Path) -> None:
    input_path = tmp_path / "doc.pdf"
    input_path.write_bytes(build_pdf(["one", "two"], metadata={"title": "Doc"}))

    result = _run_cli(tmp_path, "info", "--input", str(input_path))

    assert result.returncode == 0
    payload = json.loads(result.stdout.strip().splitlines()[-1])
    assert payload["number_of_pages"] == 2
    assert payload["title"] == "Doc"


def test_split_then_merge_round_trips_pages(tmp_path: Path) -> None:
    input_path = tmp_path / "doc.pdf"
    input_path.write_bytes(build_pdf(["one", "two", "three"]))

    split = _run_cli(tmp_path, "split", "--input", str(input_path), "--page-increment", "2")
    parts = sorted((tmp_path / "results").glob("doc_part_*.pdf"))

    assert split.returncode == 0
    assert [page_count(part.read_bytes()) for part in parts] == [2, 1]

    output_path = tmp_path / "merged.pdf"
    merge = _run_cli(tmp_path, "merge", "--inputs", *map(str, parts), "--output", str(output_path))

    assert merge.returncode == 0
    assert page_texts(output_path.read_bytes()) == ["one", "two", "three"]


def test_invalid_page_range_exits_with_error(tmp_path: Path) -> None:
    input_path = tmp_path / "doc.pdf"
    input_path.write_bytes(build_pdf(["one"]))

    result = _run_cli(tmp_path, "filter", "--input", str(input_path), "--page-range", "3-1")

    assert result.returncode == 1
    assert not (tmp_path / "results").exists()
