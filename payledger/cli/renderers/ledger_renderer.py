"""Rich renderer for ledger snapshots.

Transforms the plain-data output of ledger_snapshot() into tables.
"""

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box


def render_ledger(console: Console, data: dict) -> None:
    """Render a ledger snapshot as Rich tables.

    Args:
        console: Rich Console instance
        data: SDK output from ledger_snapshot()
    """
    _render_employees(console, data.get("employees", []))

    if data.get("union_members"):
        _render_union_members(console, data["union_members"])

    _render_paychecks(console, data.get("paychecks", {}))

    if "run" in data:
        _render_run(console, data["run"])


def _render_employees(console: Console, employees: list) -> None:
    table = Table(title="Employees", box=box.ROUNDED)
    table.add_column("ID", justify="right")
    table.add_column("Name")
    table.add_column("Address")
    table.add_column("Classification")
    table.add_column("Schedule")
    table.add_column("Method")
    table.add_column("Affiliation")

    for emp in employees:
        table.add_row(
            str(emp["emp_id"]),
            emp["name"],
            emp["address"],
            _format_classification(emp["classification"]),
            emp["schedule"]["kind"],
            _format_method(emp["method"]),
            _format_affiliation(emp["affiliation"]),
        )

    if not employees:
        table.add_row("[dim]-[/dim]", "[dim]no employees[/dim]", "", "", "", "", "")

    console.print(table)


def _format_classification(info: dict) -> str:
    kind = info["kind"]
    if kind == "salaried":
        return f"salaried {_fmt(info['salary'])}"
    elif kind == "hourly":
        cards = len(info.get("timecards", []))
        return f"hourly {_fmt(info['hourly_rate'])}/h [dim]({cards} timecard(s))[/dim]"
    elif kind == "commissioned":
        receipts = len(info.get("sales_receipts", []))
        return (
            f"commissioned {_fmt(info['salary'])} + {info['commission_rate']:.2%} "
            f"[dim]({receipts} receipt(s))[/dim]"
        )
    return kind


def _format_method(info: dict) -> str:
    kind = info["kind"]
    if kind == "mail":
        return f"mail to {info['address']}"
    elif kind == "direct":
        return f"direct {info['account']} at {info['bank']}"
    return kind


def _format_affiliation(info: dict) -> str:
    if info["kind"] == "union":
        return f"[cyan]union #{info['member_id']}[/cyan] dues {_fmt(info['dues'])}"
    return "[dim]none[/dim]"


def _render_union_members(console: Console, members: dict) -> None:
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("member", style="dim")
    table.add_column("employee")
    for member_id, emp_id in members.items():
        table.add_row(f"member {member_id}", f"emp {emp_id}")
    console.print(Panel(table, title="Union Index", border_style="dim"))


def _render_paychecks(console: Console, paychecks: dict) -> None:
    table = Table(title="Paychecks", box=box.ROUNDED)
    table.add_column("Employee", justify="right")
    table.add_column("Period")
    table.add_column("Gross", justify="right")
    table.add_column("Deductions", justify="right")
    table.add_column("Net", justify="right")

    for emp_id, checks in paychecks.items():
        for pc in checks:
            period = pc["period"]
            table.add_row(
                emp_id,
                f"{period['start']}..{period['end']}",
                _fmt(pc["gross_pay"]),
                _fmt(pc["deductions"]),
                f"[bold green]{_fmt(pc['net_pay'])}[/bold green]",
            )

    if not paychecks:
        table.add_row("[dim]-[/dim]", "[dim]no paychecks[/dim]", "", "", "")

    console.print(table)


def _render_run(console: Console, run: dict) -> None:
    summary = f"{run['executed']} transaction(s), {run['failed']} failed"
    if not run["errors"]:
        console.print(Panel(f"[green]{summary}[/green]", title="Run", border_style="green"))
        return

    lines = [summary, ""]
    for err in run["errors"]:
        lines.append(f"[yellow]#{err['transaction']}[/yellow] {err['error']}: {err['message']}")
    console.print(Panel("\n".join(lines), title="Run", border_style="yellow"))


def _fmt(amount: float | None) -> str:
    """Format currency amount."""
    if amount is None:
        return "-"
    return f"${amount:,.2f}"
