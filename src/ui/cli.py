"""CLI shell covering Analyze → Save report → Re-read report, plus the desktop launcher."""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterable, List

from common.config import load_app_config
from common.errors import BackendError, EmptyInputError, NothingToExportError
from common.models import AnalysisResult, AppConfig
from common.progress import SessionEventLogger
from common.text import RESULT_LABELS, format_count_line
from core.session import TextSession
from storage import load_text_file, read_report, resolve_save_path, write_report

SUPPORTED_EXTENSIONS = {".txt"}
CONFIG_HELP = "Path to configuration JSON (defaults to config/defaults.json)"


def collect_input_files(targets: Iterable[Path]) -> List[Path]:
    files: List[Path] = []
    for target in targets:
        if target.is_dir():
            files.extend(
                sorted(
                    p
                    for p in target.rglob("*")
                    if p.is_file() and p.suffix.lower() in SUPPORTED_EXTENSIONS
                )
            )
        elif target.is_file():
            files.append(target)
    deduped = []
    seen = set()
    for path in files:
        if path in seen:
            continue
        seen.add(path)
        deduped.append(path)
    return deduped


def render_result(result: AnalysisResult) -> List[str]:
    counts = result.to_dict()
    return [format_count_line(label, counts[name]) for name, label in RESULT_LABELS]


def command_analyze(args: argparse.Namespace) -> None:
    files = collect_input_files(Path(p) for p in args.inputs)
    if not files:
        raise SystemExit("No input files found. Provide .txt files or directories containing them.")
    if args.output and len(files) > 1:
        raise SystemExit("--output can only be used with a single input file")

    config = _load_config(args)
    settings = config.global_settings
    logger = SessionEventLogger(Path(settings.event_log) if settings.event_log else None)
    print(f"[analyze] {len(files)} file(s), encoding={settings.encoding} policy={settings.error_policy}")

    for path in files:
        session = TextSession(
            clear_result_on_load=config.session.clear_result_on_load,
            on_transition=logger.on_transition,
        )
        session.load(load_text_file(path, encoding=settings.encoding, error_policy=settings.error_policy))
        try:
            result = session.analyze()
        except EmptyInputError:
            print(f"[analyze] {path}: empty, skipped")
            logger.emit("analyze_rejected", path=str(path), reason="empty")
            continue
        logger.emit("analyze", path=str(path), **result.to_dict())
        print(f"[analyze] {path}")
        for line in render_result(result):
            print(f"  {line}")

        if args.output:
            try:
                payload = session.export()
            except NothingToExportError as exc:
                print(f"[save] skipped: {exc.reason}")
                continue
            target = resolve_save_path(Path(args.output))
            if target.exists() and not args.force:
                raise SystemExit(f"'{target}' already exists. Pass --force to overwrite.")
            write_report(payload, target, encoding=settings.encoding)
            logger.emit("save", path=str(target))
            print(f"[save] report written to {target}")


def command_report(args: argparse.Namespace) -> None:
    config = _load_config(args)
    path = Path(args.report)
    payload = read_report(path, encoding=config.global_settings.encoding)
    print(f"[report] {path} text_chars={len(payload.text)}")
    for line in render_result(payload.result):
        print(f"  {line}")


def command_gui(args: argparse.Namespace) -> None:
    config = _load_config(args)
    from ui.textstats_gui import run_gui

    print(
        f"[gui] starting (idle timeout {config.watchdog.idle_timeout_ms} ms, "
        f"watchdog {'on' if config.watchdog.enabled else 'off'})"
    )
    raise SystemExit(run_gui(config))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textstats", description="Sentence and word statistics for plain text"
    )
    parser.add_argument("--config", help=CONFIG_HELP)
    # Accepted after the subcommand too; SUPPRESS keeps a top-level value intact.
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", default=argparse.SUPPRESS, help=CONFIG_HELP)
    subparsers = parser.add_subparsers(dest="command")

    analyze = subparsers.add_parser(
        "analyze", parents=[common], help="Count sentences and words in text files"
    )
    analyze.add_argument("inputs", nargs="+", help="Files or directories to process")
    analyze.add_argument(
        "--output",
        help="Write an analysis report (single input only); '.txt' is appended when missing",
    )
    analyze.add_argument(
        "--force",
        action="store_true",
        help="Overwrite an existing report file",
    )
    analyze.add_argument(
        "--event-log",
        help="JSONL file for structured session events (overrides config)",
    )
    analyze.set_defaults(func=command_analyze)

    report = subparsers.add_parser("report", parents=[common], help="Re-read a saved analysis report")
    report.add_argument("report", help="Report file written by 'analyze --output' or the GUI")
    report.set_defaults(func=command_report)

    gui = subparsers.add_parser("gui", parents=[common], help="Launch the desktop application")
    gui.add_argument(
        "--idle-timeout",
        type=int,
        help="Close the application after this many milliseconds without input",
    )
    gui.add_argument(
        "--no-watchdog",
        action="store_true",
        help="Disable the inactivity auto-close",
    )
    gui.set_defaults(func=command_gui)

    return parser


def _load_config(args: argparse.Namespace) -> AppConfig:
    overrides: dict = {"global": {}, "watchdog": {}}
    if getattr(args, "event_log", None):
        overrides["global"]["event_log"] = args.event_log
    if getattr(args, "idle_timeout", None) is not None:
        overrides["watchdog"]["idle_timeout_ms"] = args.idle_timeout
    if getattr(args, "no_watchdog", False):
        overrides["watchdog"]["enabled"] = False
    config_path = Path(args.config) if args.config else None
    return load_app_config(config_path=config_path, overrides=overrides)


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return
    try:
        args.func(args)
    except BackendError as exc:
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()
