"""Command line entry point for the payoff calculator."""

from __future__ import annotations

import json
from datetime import date

import click

from .config import BaseConfig
from .exceptions import InsufficientBudgetError
from .logging_config import setup_logging
from .models.debt import Debt
from .services.baseline import simulate_minimum_only
from .services.debts import simulate
from .services.exchange import schedule_to_csv
from .services.reports import compare_plans, debt_completions, format_duration


def _parse_debt(value: str) -> Debt:
    parts = value.rsplit(":", 3)
    if len(parts) != 4:
        raise click.BadParameter(f"expected NAME:BALANCE:RATE:MINIMUM, got {value!r}")
    name, balance, rate, minimum = parts
    try:
        return Debt(
            name=name,
            balance=float(balance),
            interest_rate=float(rate),
            minimum_payment=float(minimum),
        )
    except ValueError as exc:
        # pydantic's ValidationError is a ValueError subclass
        raise click.BadParameter(str(exc)) from exc


def _debts_callback(ctx, param, values: tuple[str, ...]) -> list[Debt]:
    return [_parse_debt(value) for value in values]


debt_option = click.option(
    "--debt",
    "debts",
    multiple=True,
    required=True,
    callback=_debts_callback,
    help="Debt as NAME:BALANCE:RATE:MINIMUM (repeatable).",
)


@click.group()
@click.option("--verbose", is_flag=True, default=False, help="Write logs to the data directory.")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Plan debt payoff with the snowball method."""

    config = BaseConfig()
    if verbose:
        setup_logging(config)
    ctx.obj = config


@main.command("simulate")
@debt_option
@click.option("--budget", type=float, required=True, help="Total monthly budget.")
@click.option("--start", "start", type=click.DateTime(formats=["%Y-%m-%d"]), default=None)
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the full result as JSON.")
@click.option("--csv", "as_csv", is_flag=True, default=False, help="Print the schedule as CSV.")
@click.pass_obj
def simulate_command(
    config: BaseConfig, debts: list[Debt], budget: float, start, as_json: bool, as_csv: bool
) -> None:
    """Simulate the snowball plan and compare it with paying minimums only."""

    settings = config.simulation_settings()
    start_date: date | None = start.date() if start else None
    try:
        result = simulate(debts, budget, start_date=start_date, settings=settings)
    except InsufficientBudgetError as exc:
        raise click.ClickException(
            f"Budget must be at least {exc.minimum_total:.2f} to cover minimum payments."
        ) from exc

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return
    if as_csv:
        click.echo(schedule_to_csv(result.payment_plan), nl=False)
        return

    baseline = simulate_minimum_only(debts, settings=settings)
    comparison = compare_plans(result, baseline)

    duration = format_duration(
        result.total_months, unfinished=result.reached_ceiling, ceiling=settings.max_months
    )
    click.echo(f"Debt-free in {duration} ({result.debt_free_date.isoformat()})")
    click.echo(f"Total paid: {result.total_paid:,.2f}")
    click.echo(f"Total interest: {result.total_interest:,.2f}")
    for completion in debt_completions(result.payment_plan):
        click.echo(f"  {completion.debt_name} paid off in month {completion.month} ({completion.date.isoformat()})")
    baseline_duration = format_duration(
        baseline.total_months, unfinished=not baseline.converges, ceiling=settings.max_months
    )
    click.echo(f"Minimum payments only: {baseline_duration}")
    click.echo(f"Interest saved: {comparison.interest_saved:,.2f}")
    click.echo(f"Months saved: {comparison.time_saved}")
    if result.reached_ceiling:
        click.echo("Warning: plan did not finish within the simulation ceiling.")


@main.command("baseline")
@debt_option
@click.pass_obj
def baseline_command(config: BaseConfig, debts: list[Debt]) -> None:
    """Show the cost of paying only the minimum on every debt."""

    settings = config.simulation_settings()
    result = simulate_minimum_only(debts, settings=settings)
    for item in result.debts:
        status = "" if item.converges else " (never paid off)"
        duration = format_duration(item.months, unfinished=not item.converges, ceiling=settings.max_months)
        click.echo(
            f"{item.name}: {duration}, "
            f"interest {item.interest_paid:,.2f}{status}"
        )
    total = format_duration(result.total_months, unfinished=not result.converges, ceiling=settings.max_months)
    click.echo(f"Total: {total}")
    click.echo(f"Total interest: {result.total_interest:,.2f}")
    click.echo(f"Total paid: {result.total_paid:,.2f}")


if __name__ == "__main__":  # pragma: no cover
    main()
