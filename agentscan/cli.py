"""CLI entrypoints for agentscan commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .logging import configure_logging
from .models import CATEGORY_LABELS, VerificationResult
from .orchestrator import AnalyzeOutcome, Orchestrator


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS if suppress_default else False,
        help="Increase log verbosity for troubleshooting.",
    )


def _add_path_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the project root (defaults to current directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="agentscan",
        description="Analyze a codebase and keep AI agent configuration in sync with it.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Write .agents/ANALYSIS.md and .agents/PROJECT-CONTEXT.md.",
    )
    _add_verbose_option(analyze_parser, suppress_default=True)
    _add_path_argument(analyze_parser)
    analyze_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Preview PROJECT-CONTEXT.md without writing files.",
    )

    report_parser = subparsers.add_parser(
        "report",
        help="Print the full analysis report without writing files.",
    )
    _add_verbose_option(report_parser, suppress_default=True)
    _add_path_argument(report_parser)

    verify_parser = subparsers.add_parser(
        "verify",
        help="Check .agents-project.json and agent files against the codebase.",
    )
    _add_verbose_option(verify_parser, suppress_default=True)
    _add_path_argument(verify_parser)

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP service.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for agentscan commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), quiet=args.command == "report")

    orchestrator = Orchestrator()

    if args.command == "analyze":
        try:
            outcome = orchestrator.run_analyze(args.path, dry_run=bool(args.dry_run))
        except (FileNotFoundError, NotADirectoryError) as exc:
            parser.exit(1, f"{exc}\n")
        except Exception as exc:  # pragma: no cover - defensive guard
            parser.exit(1, f"agentscan analyze failed: {exc}\nRun with --verbose for more details.\n")
        _print_analyze(outcome)
    elif args.command == "report":
        try:
            report = orchestrator.run_report(args.path)
        except (FileNotFoundError, NotADirectoryError) as exc:
            parser.exit(1, f"{exc}\n")
        print(report, end="")
    elif args.command == "verify":
        try:
            result = orchestrator.run_verify(args.path)
        except (FileNotFoundError, NotADirectoryError) as exc:
            parser.exit(1, f"{exc}\n")
        _print_verification(result)
        if not result.passed:
            parser.exit(1)
    elif args.command == "serve":  # pragma: no cover - integration path
        from .service import run_service

        run_service(host=args.host, port=args.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _print_analyze(outcome: AnalyzeOutcome) -> None:
    profile = outcome.profile
    print(f"Scanned {profile.scan.total_files} files in {profile.scan.total_dirs} directories")
    print("File distribution:")
    for label in CATEGORY_LABELS:
        paths = profile.categories.get(label, ())
        if paths and label != "other":
            print(f"  {label}: {len(paths)} files")

    for generated in outcome.files:
        if outcome.dry_run:
            verb = "Would update" if generated.action == "update" else "Would create"
        else:
            verb = "Updated" if generated.action == "update" else "Created"
        print(f"{verb} {_relativize(generated.path)}")

    if outcome.dry_run:
        context = outcome.files[-1]
        print(f"\n{context.relative_path} preview:")
        print("-" * 50)
        print(context.content, end="")
        print("-" * 50)


def _print_verification(result: VerificationResult) -> None:
    if result.successes:
        print("Passed:")
        for line in result.successes:
            print(f"  ✓ {line}")
    if result.warnings:
        print("Warnings:")
        for line in result.warnings:
            print(f"  ⚠ {line}")
    if result.issues:
        print("Issues:")
        for line in result.issues:
            print(f"  ✗ {line}")
    if result.passed:
        print("Configuration verified!")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
