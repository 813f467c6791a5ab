"""CLI for replaying watch feeds and querying window statistics."""

import json
import logging

import click


@click.group()
@click.option("--debug", is_flag=True, help="Log session and bucket activity.")
def main(debug: bool) -> None:
    """wearstats: wearable activity aggregation and N-day statistics."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _replay(file: str):
    from wearstats.feed import load_feed, replay_feed
    from wearstats.workout import SessionConflictError

    # FeedError and out-of-order days are ValueErrors
    try:
        return replay_feed(load_feed(file))
    except (ValueError, SessionConflictError) as e:
        raise click.ClickException(str(e))


@main.command()
@click.argument("file", type=click.Path(exists=True))
@click.option("--output", "-o", default=None, help="Write summaries and day buckets as JSON.")
@click.option("--verbose", "-v", is_flag=True, help="Also print the day buckets.")
def replay(file: str, output: str | None, verbose: bool) -> None:
    """Replay a .jsonl watch feed and print each workout summary."""
    from wearstats.buckets import MetricKind

    result = _replay(file)
    wearer = result.wearer

    for summary in result.summaries:
        click.echo(f"  {summary!r}")
    click.echo(f"\n{len(result.summaries)} workout(s) replayed.")

    buckets = {
        kind.value: [b.to_dict() for b in wearer.data_summary(kind)]
        for kind in MetricKind
    }
    if verbose:
        for kind, rows in buckets.items():
            click.echo(f"\n{kind}:")
            for row in rows:
                click.echo(f"  {row}")

    if output:
        report = {
            "workouts": [s.to_dict() for s in result.summaries],
            "buckets": buckets,
            "heartRate": wearer.heart_rate_streams().to_dict(),
        }
        with open(output, "w") as f:
            json.dump(report, f, indent=2)
        click.echo(f"Output written to {output}")


@main.command()
@click.argument("file", type=click.Path(exists=True))
@click.option("--days", "-d", default=2, show_default=True, help="Window length in days.")
@click.option("--workout-type", "-w", default=None, help="Only report calories for this workout type.")
def stats(file: str, days: int, workout_type: str | None) -> None:
    """Replay a feed and print N-day window statistics."""
    wearer = _replay(file).wearer

    try:
        min_steps = wearer.min_or_max_steps(days, "min")
        max_steps = wearer.min_or_max_steps(days, "max")
        avg_steps = wearer.average_steps(days)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--days")

    types = [workout_type] if workout_type else wearer.workout_types()

    click.echo(f"\n{'=' * 60}")
    click.echo(f"  {days}-day window statistics")
    click.echo(f"{'=' * 60}")
    click.echo(f"  Steps min:        {min_steps:.0f}")
    click.echo(f"  Steps max:        {max_steps:.0f}")
    click.echo(f"  Steps avg:        {avg_steps:.1f}")
    click.echo(f"  Resting HR avg:   {wearer.average_resting_heart_rate(days):.1f} bpm")
    for t in types:
        cal = wearer.average_calories_per_workout(days, t)
        click.echo(f"  Calories/{t + ':':<9}{cal:.1f}")
    click.echo(f"{'=' * 60}")


if __name__ == "__main__":
    main()
