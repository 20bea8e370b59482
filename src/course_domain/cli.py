"""CLI entry point for course-domain."""

from __future__ import annotations

from typing import Any

import click

from .core.errors import CourseDomainError


@click.group()
def main() -> None:
    """Always-valid Course domain toolkit."""


@main.command()
@click.option("--config", default="configs/default.toml", help="Config file path")
@click.option("--creator", default="admin@example.com", help="Principal creating the course")
@click.option("--updater", default="SYSTEM", help="Principal applying the changes")
def demo(config: str, creator: str, updater: str) -> None:
    """Create a course and apply every behavior method, printing each state."""
    from .main import bootstrap, run_demo

    try:
        bootstrap(config_path=config)
        stages = run_demo(creator=creator, updater=updater)
    except CourseDomainError as exc:
        raise click.ClickException(str(exc)) from exc

    for stage, course in stages:
        _print_course_state(stage, course)


@main.command()
@click.option("--config", default="configs/default.toml", help="Config file path")
def roles(config: str) -> None:
    """List the role principals registered at bootstrap."""
    from .domain import registered_roles
    from .main import bootstrap

    try:
        bootstrap(config_path=config)
    except CourseDomainError as exc:
        raise click.ClickException(str(exc)) from exc

    for role in sorted(registered_roles()):
        click.echo(role)


def _print_course_state(stage: str, course: dict[str, Any]) -> None:
    """Print a formatted course snapshot."""
    audit = course["audit"]
    period = course["enrollment_period"]

    click.echo(f"\n{'=' * 60}")
    click.echo(f"[{stage}]")
    click.echo(f"{'=' * 60}")
    click.echo(f"  ID:               {course['id']}")
    click.echo(f"  Name:             {course['name']}")
    click.echo(f"  Enrollment Limit: {course['enrollment_limit']}")
    click.echo(f"  Period:           {period['start']} to {period['end']}")
    click.echo("  Audit:")
    click.echo(f"    Version:        {audit['version']}")
    click.echo(f"    Created:        {audit['created_by']} at {audit['created_at']}")
    click.echo(f"    Updated:        {audit['updated_by']} at {audit['updated_at']}")


if __name__ == "__main__":
    main()
