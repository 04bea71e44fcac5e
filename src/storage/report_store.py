"""Flat-text analysis reports compatible with files written by earlier releases.

Layout::

    Текст:

    <raw text>


    Результаты анализа:

    Количество предложений: N
    ...
"""
from __future__ import annotations

from pathlib import Path
from typing import Dict

from common.errors import FileReadError, FileWriteError, ReportFormatError
from common.models import AnalysisResult, ExportPayload
from common.text import RESULT_LABELS, RESULTS_HEADER, TEXT_HEADER, format_count_line

_TEXT_PREFIX = f"{TEXT_HEADER}\n\n"
_RESULTS_SEPARATOR = f"\n\n\n{RESULTS_HEADER}\n\n"


def render_report(payload: ExportPayload) -> str:
    counts = payload.result.to_dict()
    lines = [format_count_line(label, counts[name]) for name, label in RESULT_LABELS]
    return _TEXT_PREFIX + payload.text + _RESULTS_SEPARATOR + "".join(line + "\n" for line in lines)


def write_report(payload: ExportPayload, path: Path, *, encoding: str = "utf-8") -> Path:
    """Serialize ``payload`` to ``path``, overwriting any existing file."""

    try:
        # Encode up front so an unencodable text never truncates an existing report.
        data = render_report(payload).encode(encoding)
    except (UnicodeEncodeError, LookupError) as exc:
        raise FileWriteError(path, str(exc)) from exc
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        # Binary write keeps the text section byte-for-byte on every platform.
        path.write_bytes(data)
    except OSError as exc:
        raise FileWriteError(path, str(exc)) from exc
    return path


def parse_report(content: str) -> ExportPayload:
    if not content.startswith(_TEXT_PREFIX):
        raise ReportFormatError(f"Report must start with '{TEXT_HEADER}'")
    body = content[len(_TEXT_PREFIX):]
    text, separator, results = body.rpartition(_RESULTS_SEPARATOR)
    if not separator:
        raise ReportFormatError(f"Report has no '{RESULTS_HEADER}' section")

    lines = [line for line in results.split("\n") if line.strip()]
    if len(lines) != len(RESULT_LABELS):
        raise ReportFormatError(
            f"Expected {len(RESULT_LABELS)} result lines, found {len(lines)}"
        )

    counts: Dict[str, int] = {}
    for line, (name, label) in zip(lines, RESULT_LABELS):
        prefix = f"{label}: "
        if not line.startswith(prefix):
            raise ReportFormatError(f"Expected '{label}' line, got '{line}'")
        try:
            counts[name] = int(line[len(prefix):])
        except ValueError as exc:
            raise ReportFormatError(f"'{label}' value is not an integer: '{line}'") from exc

    try:
        result = AnalysisResult(**counts)
    except ValueError as exc:
        raise ReportFormatError(f"Inconsistent counts: {exc}") from exc
    return ExportPayload(text=text, result=result)


def read_report(path: Path, *, encoding: str = "utf-8") -> ExportPayload:
    try:
        with path.open("r", encoding=encoding, newline="") as handle:
            content = handle.read()
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        raise FileReadError(path, str(exc)) from exc
    try:
        return parse_report(content)
    except ReportFormatError as exc:
        raise ReportFormatError(str(exc.args[0]), source=path) from exc
