"""Command-line runner: validate or execute the reporting-lines pipeline."""

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from reportlines import org
from reportlines.config import MISSING_INPUT_POLICIES, OUTPUT_FORMATS, load_pipeline_config
from reportlines.org.errors import CycleDetectedError, InputAbsentError, MalformedInputRecordError
from reportlines.org.export import infer_format

console = Console()


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reportlines",
        description="Rebuild the org tree from a people export and rank employees by recursive reports",
    )
    parser.add_argument("--input", type=str, help="People export to read (default: people.csv)")
    parser.add_argument("--output", type=str, help="Where to write the ranked table (default: sorted.csv)")
    parser.add_argument("--format", choices=OUTPUT_FORMATS, help="Output format (default: from suffix, else csv)")
    parser.add_argument(
        "--missing-input",
        choices=MISSING_INPUT_POLICIES,
        help="What to do when the input file does not exist",
    )
    parser.add_argument("--top", type=int, help="Rows to show in the console report")
    parser.add_argument("--validate", action="store_true", help="Only validate the input, don't run")
    parser.add_argument("--quiet", action="store_true", help="Skip the console report")
    parser.add_argument("--log-level", type=str, help="Logging level (default: INFO)")
    return parser


def _validate(config) -> int:
    table = Table(title="Validation Results")
    table.add_column("Input")
    table.add_column("Valid")
    table.add_column("Details")

    exit_code = 0
    match org.validate(config):
        case {"status": "ok", "row_count": rows}:
            table.add_row(str(config.input_path), "[green]✓[/green]", f"{rows} employees")
        case {"status": "skipped", "reason": reason}:
            table.add_row(str(config.input_path), "[yellow]-[/yellow]", f"Skipped: {reason}")
        case {"status": "error", "message": msg}:
            table.add_row(str(config.input_path), "[red]✗[/red]", msg)
            exit_code = 1
        case _:
            table.add_row(str(config.input_path), "[red]✗[/red]", "Unknown validation result")
            exit_code = 1

    console.print(table)
    return exit_code


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    output_format = args.format
    if output_format is None and args.output:
        output_format = infer_format(args.output, default=None)

    try:
        config = load_pipeline_config({
            "input_path": args.input,
            "output_path": args.output,
            "output_format": output_format,
            "missing_input": args.missing_input,
            "report_limit": args.top,
            "log_level": args.log_level,
        })
    except ValueError as exc:
        console.print(f"[red]Invalid configuration: {exc}[/red]")
        return 1

    configure_logging(config.log_level)

    if args.validate:
        return _validate(config)

    console.print(f"[bold]Resolving reporting lines from {config.input_path}...[/bold]")
    try:
        summary = org.run(config, show_report=not args.quiet)
    except CycleDetectedError as exc:
        console.print(f"[red]Detected a cycle between employees: {exc.chain}[/red]")
        console.print("[red]Cannot continue due to the cycle identified; no output written.[/red]")
        return 1
    except MalformedInputRecordError as exc:
        console.print(f"[red]Malformed input in {config.input_path}:[/red]")
        for err in exc.errors:
            console.print(f"  [red]- {err}[/red]")
        return 1
    except InputAbsentError as exc:
        console.print(f"[red]{exc}[/red]")
        return 1

    console.print(
        f"[green]Done:[/green] {summary.employees} employees, {summary.roots} root(s), "
        f"{summary.repaired_roots} repaired -> {summary.output_path}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
