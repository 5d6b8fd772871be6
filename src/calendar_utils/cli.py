"""Command-line interface."""

import logging
import sys
from datetime import date, datetime
from pathlib import Path

import click

from .config import Config
from .formatting import format_pattern, kst_today_string, safe_format_date
from .models import KST, PLACEHOLDER, WEEKDAY_STYLES, system_clock
from .week_utils import default_open_month, is_date_selectable, korean_week_label, week_dates
from .weekdays import convert_weekday_format, date_to_weekday_name, nearest_weekday

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)

DATE_TYPE = click.DateTime(formats=["%Y-%m-%d"])


def _to_day(value: datetime | None) -> date | None:
    return value.date() if value is not None else None


def _config(ctx: click.Context) -> Config:
    return ctx.obj["config"]


@click.group()
@click.option(
    "--env-file",
    type=click.Path(exists=True, path_type=Path),
    help="Path to .env file",
)
@click.option("--debug/--no-debug", default=False, help="Enable debug logging")
@click.pass_context
def main(ctx, env_file: Path | None, debug: bool):
    """Weekday, week-of-month and date formatting helpers."""
    if debug:
        logging.getLogger().setLevel(logging.DEBUG)

    ctx.ensure_object(dict)
    try:
        ctx.obj["config"] = Config.load(env_file)
    except ValueError as e:
        raise click.ClickException(str(e)) from e


@main.command()
@click.argument("target", type=DATE_TYPE)
@click.option("--style", type=click.Choice(WEEKDAY_STYLES), help="Output style (default: from config)")
@click.pass_context
def weekday(ctx, target: datetime, style: str | None):
    """Print the weekday name of TARGET (YYYY-MM-DD)."""
    click.echo(date_to_weekday_name(target.date(), style or _config(ctx).weekday_style))


@main.command()
@click.argument("text")
@click.option("--to", "target_style", type=click.Choice(WEEKDAY_STYLES), required=True, help="Target style")
def convert(text: str, target_style: str):
    """Convert weekday name TEXT to another style."""
    result = convert_weekday_format(text, target_style)
    if result is None:
        raise click.ClickException(f"Unknown weekday: {text}")
    click.echo(result)


@main.command(name="next")
@click.argument("text")
@click.option("--date", "base", type=DATE_TYPE, help="Base date (default: today)")
@click.option("--backward", is_flag=True, help="Search the previous occurrence instead")
@click.pass_context
def next_weekday(ctx, text: str, base: datetime | None, backward: bool):
    """Print the nearest date falling on weekday TEXT."""
    base_day = _to_day(base) or system_clock().astimezone(KST).date()
    result = nearest_weekday(text, base_day, search_forward=not backward)
    if result is None:
        raise click.ClickException(f"Unknown weekday: {text}")
    config = _config(ctx)
    click.echo(f"{format_pattern(result, config.date_format)} ({date_to_weekday_name(result, config.weekday_style)})")


@main.command()
@click.argument("target", type=DATE_TYPE)
@click.option("--monday", is_flag=True, help="Start the week on Monday")
@click.pass_context
def week(ctx, target: datetime, monday: bool):
    """Print the week label and the days of the week containing TARGET."""
    config = _config(ctx)
    day = target.date()
    click.echo(korean_week_label(day))
    for item in week_dates(day, start_from_sunday=not monday):
        marker = "*" if item == day else " "
        click.echo(
            f"{marker} {format_pattern(item, config.date_format)} "
            f"({date_to_weekday_name(item, config.weekday_style)})"
        )


@main.command(name="format")
@click.argument("value")
@click.option("--pattern", help="Format pattern (default: from config)")
@click.pass_context
def format_value(ctx, value: str, pattern: str | None):
    """Format VALUE (date string, epoch seconds or milliseconds)."""
    config = _config(ctx)
    result = safe_format_date(value, pattern or config.date_format)
    if result == PLACEHOLDER:
        logger.debug(f"Could not format value: {value}")
        result = config.placeholder
    click.echo(result)


@main.command(name="kst-today")
def kst_today():
    """Print today's date in Korea Standard Time."""
    click.echo(kst_today_string())


@main.command()
@click.argument("target", type=DATE_TYPE)
@click.option("--start", help="Range start (YYYY-MM-DD, default: today)")
@click.option("--end", help="Range end (YYYY-MM-DD, default: today)")
@click.option("--today", "today", type=DATE_TYPE, help="Reference date (default: today)")
@click.pass_context
def selectable(ctx, target: datetime, start: str | None, end: str | None, today: datetime | None):
    """Check whether TARGET can be picked within a date range."""
    config = _config(ctx)
    reference = _to_day(today)
    try:
        allowed = is_date_selectable(target.date(), start, end, reference)
        open_month = default_open_month(start, end, reference)
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Selectable: {'yes' if allowed else 'no'}")
    click.echo(f"Open month: {format_pattern(open_month, config.date_format)}")
    logger.debug(f"Range: start={start or '-'} end={end or '-'} today={reference or 'now'}")


if __name__ == "__main__":
    main()
