"""Command line entry points for DebtSage."""

from __future__ import annotations

import json
from contextlib import contextmanager
from datetime import date
from decimal import Decimal, InvalidOperation
from pathlib import Path

import click

from .config import BaseConfig
from .logging_config import setup_logging
from .models.projection import to_jsonable
from .models.strategy import Strategy
from .periods import parse_period_key, period_key
from .services.comparison import compare_strategies
from .services.debts import project_payoff, project_single_debt
from .services.export_csv import export_schedule_csv
from .services.import_csv import read_debts_csv, read_lump_sums_csv
from .services.summary import summarize_debts


class DecimalType(click.ParamType):
    name = "decimal"

    def convert(self, value, param, ctx):
        try:
            amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
        except InvalidOperation:
            self.fail(f"{value!r} is not a valid amount", param, ctx)
        if not amount.is_finite():
            self.fail(f"{value!r} is not a finite amount", param, ctx)
        return amount


class PeriodType(click.ParamType):
    name = "YYYY-MM"

    def convert(self, value, param, ctx):
        try:
            return period_key(parse_period_key(value))
        except (TypeError, ValueError) as exc:
            self.fail(str(exc), param, ctx)


DECIMAL = DecimalType()
PERIOD = PeriodType()

debts_argument = click.argument(
    "debts_csv", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
extra_option = click.option(
    "--extra", type=DECIMAL, default=Decimal(0), show_default=True,
    help="Extra amount paid every month on top of minimums",
)
lump_sums_option = click.option(
    "--lump-sums", "lump_sums_csv", type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None, help="CSV of one-time payments (amount, month, description)",
)
start_option = click.option(
    "--start", type=PERIOD, default=None, help="First simulated month; defaults to this month",
)


def _emit(payload: dict) -> None:
    click.echo(json.dumps(payload, indent=2))


def _start_period(start: str | None) -> str:
    return start or period_key(date.today())


@contextmanager
def _user_errors():
    """Report invalid input as a CLI error instead of a traceback."""

    try:
        yield
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc


def _load(debts_csv: Path, lump_sums_csv: Path | None):
    with _user_errors():
        debts = read_debts_csv(debts_csv)
        lump_sums = read_lump_sums_csv(lump_sums_csv) if lump_sums_csv else []
    return debts, lump_sums


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Project debt payoff schedules from CSV files."""

    config = BaseConfig()
    setup_logging(config)
    ctx.obj = config


@cli.command("project")
@debts_argument
@click.option(
    "--strategy", type=click.Choice([s.value for s in Strategy], case_sensitive=False),
    default=Strategy.SNOWBALL.value, show_default=True,
)
@extra_option
@lump_sums_option
@start_option
@click.option("--schedule/--no-schedule", default=False, help="Include the full schedule")
@click.option(
    "--export", "export_path", type=click.Path(dir_okay=False, path_type=Path), default=None,
    help="Write the schedule to this CSV file",
)
@click.pass_obj
def project_command(
    config, debts_csv, strategy, extra, lump_sums_csv, start, schedule, export_path
):
    """Simulate one strategy and print totals as JSON."""

    debts, lump_sums = _load(debts_csv, lump_sums_csv)
    if extra < 0:
        raise click.BadParameter("must not be negative", param_hint="--extra")
    with _user_errors():
        result = project_payoff(
            debts, strategy, extra, _start_period(start), lump_sums, max_periods=config.MAX_PERIODS
        )
    if export_path is not None:
        export_schedule_csv(result=result, output_path=export_path)

    payload = result.as_dict()
    if not schedule:
        payload.pop("schedule")
    _emit(payload)


@cli.command("compare")
@debts_argument
@extra_option
@lump_sums_option
@start_option
@click.pass_obj
def compare_command(config, debts_csv, extra, lump_sums_csv, start):
    """Compare snowball and avalanche and print a recommendation."""

    debts, lump_sums = _load(debts_csv, lump_sums_csv)
    if extra < 0:
        raise click.BadParameter("must not be negative", param_hint="--extra")
    with _user_errors():
        comparison = compare_strategies(
            debts,
            extra,
            _start_period(start),
            lump_sums,
            threshold=config.RECOMMENDATION_THRESHOLD,
            max_periods=config.MAX_PERIODS,
        )
    payload = {
        "comparisons": [
            {k: v for k, v in result.as_dict().items() if k != "schedule"}
            for result in comparison.comparisons
        ],
        "recommendation": to_jsonable(comparison.recommendation),
    }
    _emit(payload)


@cli.command("payoff")
@debts_argument
@click.option("--debt-id", required=True, help="Id of the debt to project")
@click.option(
    "--payment", type=DECIMAL, default=None, help="Payment per interval; defaults to the minimum",
)
@start_option
@click.pass_obj
def payoff_command(config, debts_csv, debt_id, payment, start):
    """Project payoff of a single debt at a fixed payment."""

    debts, _ = _load(debts_csv, None)
    debt = next((d for d in debts if str(d.id) == debt_id), None)
    if debt is None:
        raise click.BadParameter(f"no debt with id {debt_id!r}", param_hint="--debt-id")
    with _user_errors():
        projection = project_single_debt(
            debt, _start_period(start), payment, max_periods=config.MAX_PERIODS
        )
    payload = projection.as_dict()
    payload.pop("schedule")
    _emit(payload)


@cli.command("summary")
@debts_argument
def summary_command(debts_csv):
    """Print portfolio totals and progress."""

    debts, _ = _load(debts_csv, None)
    _emit(to_jsonable(summarize_debts(debts)))


__all__ = ["cli"]
