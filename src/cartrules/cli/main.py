"""
CLI: price an item, replay the demo cart, list rules, serve the HTTP API.
Rule order defaults to CARTRULES_RULES (see Config.from_env).
"""
import sys
from typing import List, Optional

import typer

from cartrules.core.config import Config
from cartrules.core.logging import setup_logging
from cartrules.errors import PricingError
from cartrules.pricing.dispatcher import DiscountDispatcher
from cartrules.pricing.domain import CartItem, format_price
from cartrules.pricing.registry import RULES, rules_from_names

app = typer.Typer(help="cartrules CLI: cart discount rules, first applicable rule wins.")

_DEMO_CART = [
    ("Normal item", CartItem("Laptop", 1000, is_vip=False)),
    ("VIP item", CartItem("Smartphone", 800, is_vip=True)),
]


def _dispatcher(rule: Optional[List[str]], config: Config) -> DiscountDispatcher:
    return DiscountDispatcher(rules_from_names(rule if rule else config.rules))


def _fail(error: PricingError) -> None:
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(1)


@app.callback()
def main_callback(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override CARTRULES_LOG_LEVEL"),
) -> None:
    try:
        config = Config.from_env()
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)
    if log_level:
        config.log_level = log_level
    try:
        setup_logging(config.log_level, json_format=config.log_json, stream=sys.stderr)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)
    ctx.obj = config


@app.command()
def price(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Item name"),
    amount: str = typer.Argument(..., metavar="PRICE", help="Item price (decimal)"),
    vip: bool = typer.Option(False, "--vip", help="Item is VIP"),
    rule: Optional[List[str]] = typer.Option(None, "--rule", "-r", help="Rule name, repeat for order (default: configured)"),
) -> None:
    """Print the final price of one item."""
    config: Config = ctx.obj
    try:
        dispatcher = _dispatcher(rule, config)
        item = CartItem(name, amount, is_vip=vip)
    except PricingError as e:
        _fail(e)
    matched = dispatcher.match(item)
    applied = matched.name if matched is not None else "none"
    typer.echo(f"{item.name}: ${format_price(dispatcher.final_price(item))} (rule: {applied})")


@app.command()
def demo(
    ctx: typer.Context,
    rule: Optional[List[str]] = typer.Option(None, "--rule", "-r", help="Rule name, repeat for order"),
) -> None:
    """Price the sample cart: a normal Laptop and a VIP Smartphone."""
    try:
        dispatcher = _dispatcher(rule, ctx.obj)
    except PricingError as e:
        _fail(e)
    for label, item in _DEMO_CART:
        typer.echo(f"{label} final price: ${format_price(dispatcher.final_price(item))}")


@app.command("rules")
def list_rules(ctx: typer.Context) -> None:
    """List the configured rule order and all registered rules."""
    config: Config = ctx.obj
    try:
        order = [r.name for r in rules_from_names(config.rules)]
    except PricingError as e:
        _fail(e)
    typer.echo(f"Order: {', '.join(order) if order else '(none)'}")
    typer.echo(f"Available: {', '.join(sorted(RULES))}")


@app.command()
def serve(
    ctx: typer.Context,
    host: Optional[str] = typer.Option(None, "--host", help="Bind host (default: CARTRULES_HOST)"),
    port: Optional[int] = typer.Option(None, "--port", help="Bind port (default: CARTRULES_PORT)"),
) -> None:
    """Run the HTTP API (uvicorn)."""
    from cartrules.service import create_app

    try:
        application = create_app(ctx.obj)
    except PricingError as e:
        _fail(e)
    application.run(host=host, port=port)


def main() -> None:
    """Entry point for the cartrules console command."""
    app()


if __name__ == "__main__":
    main()
