"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from lessonshop.application.dto import OrderItemSpec
from lessonshop.application.place_order import PlaceOrderHandler
from lessonshop.domain.exceptions import DomainException
from lessonshop.infrastructure.bootstrap import lesson_repository, order_repository


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse 'LESSON_ID:2,LESSON_ID:1' into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'LessonId:Quantity'."
            )
        lesson_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for lesson '{lesson_id}'."
            )
        specs.append(OrderItemSpec(lesson_id=lesson_id.strip(), quantity=qty))
    return specs


@click.command("place")
@click.option("--name", required=True, help="Customer name.")
@click.option("--phone", required=True, help="Customer phone number.")
@click.option("--items", required=True, help="Items as 'LessonId:Qty,LessonId:Qty'.")
def order_place(name: str, phone: str, items: str) -> None:
    """Place an order, reserving spaces on each lesson."""
    specs = _parse_items(items)

    handler = PlaceOrderHandler(
        order_repo=order_repository(),
        lesson_repo=lesson_repository(),
    )

    try:
        dto = handler.handle(name=name, phone=phone, item_specs=specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.id} placed  ({dto.item_count} item(s), total {dto.total_price})")
