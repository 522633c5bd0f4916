import click

from lessonshop.infrastructure.cli.lesson_commands import (
    lesson_list,
    lesson_search,
    lesson_update,
)
from lessonshop.infrastructure.cli.order_commands import order_place
from lessonshop.infrastructure.cli.server_commands import seed, serve


@click.group()
def cli() -> None:
    """Lesson Shop — catalog and ordering service"""


@cli.group()
def lesson() -> None:
    """Browse and manage lessons."""


@cli.group()
def order() -> None:
    """Place orders."""


# Register subcommands
cli.add_command(serve)
cli.add_command(seed)
lesson.add_command(lesson_list)
lesson.add_command(lesson_search)
lesson.add_command(lesson_update)
order.add_command(order_place)
