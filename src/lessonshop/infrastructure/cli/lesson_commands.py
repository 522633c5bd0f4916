"""CLI commands for the Lesson aggregate."""

from __future__ import annotations

import json
from typing import Any

import click

from lessonshop.application.dto import LessonDTO
from lessonshop.application.list_lessons import ListLessonsHandler
from lessonshop.application.search_lessons import SearchLessonsHandler
from lessonshop.application.update_lesson import UpdateLessonHandler
from lessonshop.domain.exceptions import DomainException
from lessonshop.infrastructure.bootstrap import lesson_repository


def _display_lessons(lessons: list[LessonDTO]) -> None:
    if not lessons:
        click.echo("No lessons found.")
        return

    click.echo(f"{'ID':<26} {'Subject':<14} {'Location':<14} {'Price':>8} {'Spaces':>7}")
    click.echo("-" * 73)
    for lesson in lessons:
        click.echo(
            f"{lesson.id:<26} {lesson.subject:<14} {lesson.location:<14} "
            f"{lesson.price:>8.2f} {lesson.spaces:>7}"
        )


def _parse_assignments(pairs: tuple[str, ...]) -> dict[str, Any]:
    """Parse ('spaces=4', 'subject=Maths') into a patch mapping.

    Values that parse as JSON keep their JSON type (4 -> int,
    12.5 -> float); anything else is taken as a plain string.
    """
    patch: dict[str, Any] = {}
    for pair in pairs:
        if "=" not in pair:
            raise click.BadParameter(
                f"Invalid assignment '{pair}'. Expected 'field=value'."
            )
        name, raw = pair.split("=", 1)
        try:
            value = json.loads(raw)
        except ValueError:
            value = raw
        patch[name.strip()] = value
    return patch


@click.command("list")
def lesson_list() -> None:
    """List all lessons in the catalog."""
    handler = ListLessonsHandler(lesson_repo=lesson_repository())

    try:
        lessons = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_lessons(lessons)


@click.command("search")
@click.argument("term")
def lesson_search(term: str) -> None:
    """Search lessons by subject, location, instructor, description or schedule."""
    handler = SearchLessonsHandler(lesson_repo=lesson_repository())

    try:
        lessons = handler.handle(term)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_lessons(lessons)


@click.command("update")
@click.option("--id", "lesson_id", required=True, help="Lesson ID.")
@click.option(
    "--set",
    "assignments",
    required=True,
    multiple=True,
    help="Field assignment as 'field=value'; repeatable.",
)
def lesson_update(lesson_id: str, assignments: tuple[str, ...]) -> None:
    """Update attributes of a lesson (e.g. --set spaces=4)."""
    patch = _parse_assignments(assignments)
    handler = UpdateLessonHandler(lesson_repo=lesson_repository())

    try:
        result = handler.handle(lesson_id, patch)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    state = "updated" if result.modified else "unchanged"
    click.echo(f"Lesson {lesson_id} {state}.")
