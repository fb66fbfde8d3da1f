"""Console report of the ranked org hierarchy."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from reportlines.org.hierarchy import OrgForest
from reportlines.org.models import Employee

console = Console()


def _format_reports(ids: list[int], limit: int = 8) -> str:
    if len(ids) <= limit:
        return ", ".join(str(i) for i in ids)
    shown = ", ".join(str(i) for i in ids[:limit])
    return f"{shown}, … (+{len(ids) - limit})"


def build_ranking_table(forest: OrgForest, ranked: list[Employee], limit: int | None = None) -> Table:
    """One row per employee: recursive (R) and direct (D) counts, manager and reports."""
    table = Table(title="Employees by recursive reports")
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("R", justify="right", style="bold")
    table.add_column("D", justify="right")
    table.add_column("Manager", justify="right")
    table.add_column("Title")
    table.add_column("Reports")

    rows = ranked if limit is None else ranked[:limit]
    for employee in rows:
        reports = forest.node(employee.id).direct_reports
        table.add_row(
            str(employee.id),
            str(employee.recursive_reports),
            str(len(reports)),
            "-" if employee.manager_id is None else str(employee.manager_id),
            escape(employee.job_title),
            _format_reports(reports),
        )
    return table


def summarize(forest: OrgForest) -> dict[str, int]:
    return {
        "employees": len(forest),
        "roots": len(forest.roots),
        "repaired_roots": len(forest.unresolved),
        "largest_org": max((n.employee.recursive_reports for n in forest.nodes), default=0),
    }


def render_ranking(
    forest: OrgForest,
    ranked: list[Employee],
    limit: int | None = None,
    out: Console | None = None,
) -> None:
    out = out or console
    stats = summarize(forest)
    out.print(build_ranking_table(forest, ranked, limit))
    out.print(
        f"  {stats['employees']} employees, {stats['roots']} root(s) "
        f"({stats['repaired_roots']} repaired), largest org {stats['largest_org']}"
    )
    if limit is not None and limit < len(ranked):
        out.print(f"  [dim]Showing top {limit} of {len(ranked)}[/dim]")
