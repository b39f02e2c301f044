# techlab/cli.py
import asyncio
import logging
import shlex
import sys
from typing import Any, Callable, Dict, List, Optional, Sequence

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.pretty import Pretty
from rich.progress import Progress, SpinnerColumn, TextColumn

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from .commands import (
    Command,
    CreateProduct,
    DeleteProduct,
    GetProduct,
    ListProducts,
    METHODS,
    RESOURCE,
    ShowHelp,
    UsageError,
    parse_command,
)
from .config import Settings
from .logging_config import setup_logging
from sdk.techlab import ApiError, ProductsClient

log = logging.getLogger("techlab.cli")

# Custom prompt style for prompt_toolkit
custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'prompt': 'bold #00aaaa',
})

HELP_TEXT = """\
[bold]TECHLAB PRODUCTS MANAGER[/bold]

Available commands:

 Get all products:
   techlab-products GET products

 Get one product:
   techlab-products GET products/<productId>
   Example: techlab-products GET products/15

 Create a new product:
   techlab-products POST products <title> <price> <category>
   Example: techlab-products POST products T-Shirt-Rex 300 shirts

 Delete a product:
   techlab-products DELETE products/<productId>
   Example: techlab-products DELETE products/7

Use any command to get started!"""


# ---------------------------
# Display helpers
# ---------------------------
def _text(value: Any) -> str:
    return escape(str(value))


def _rating(product: Dict[str, Any]) -> str:
    rating = product.get("rating") or {}
    return f"{_text(rating.get('rate', 'N/A'))} ({_text(rating.get('count', 0))} reviews)"


def show_help(console: Console):
    console.print(HELP_TEXT)


def show_products(console: Console, products: List[Dict[str, Any]]):
    console.print(f"Total products found: {len(products)}\n")
    for p in products:
        console.print(f"[bold]ID:[/bold] {_text(p.get('id'))}")
        console.print(f"[bold]Title:[/bold] {_text(p.get('title'))}", soft_wrap=True)
        console.print(f"[bold]Price:[/bold] ${_text(p.get('price'))}")
        console.print(f"[bold]Category:[/bold] {_text(p.get('category'))}")
        console.print(f"[bold]Rating:[/bold] {_rating(p)}")
        console.rule(characters="─", style="dim")


def show_product(console: Console, product: Dict[str, Any]):
    console.print("[green]Product found:[/green]\n")
    console.print(f"[bold]ID:[/bold] {_text(product.get('id'))}")
    console.print(f"[bold]Title:[/bold] {_text(product.get('title'))}", soft_wrap=True)
    console.print(f"[bold]Price:[/bold] ${_text(product.get('price'))}")
    console.print(f"[bold]Category:[/bold] {_text(product.get('category'))}")
    console.print(f"[bold]Description:[/bold] {_text(product.get('description'))}", soft_wrap=True)
    console.print(f"[bold]Image:[/bold] {_text(product.get('image'))}", soft_wrap=True)
    console.print(f"[bold]Rating:[/bold] {_rating(product)}")


def show_created(console: Console, result: Dict[str, Any], sent: Dict[str, Any], price_text: str):
    # the API may echo back only the id, so fall back to what was sent
    console.print("[green]Product created successfully:[/green]\n")
    console.print(f"[bold]ID:[/bold] {_text(result.get('id'))}")
    console.print(f"[bold]Title:[/bold] {_text(result.get('title') or sent['title'])}", soft_wrap=True)
    console.print(f"[bold]Price:[/bold] ${_text(result.get('price') or price_text)}")
    console.print(f"[bold]Category:[/bold] {_text(result.get('category') or sent['category'])}")
    console.print(
        f"[bold]Description:[/bold] {_text(result.get('description') or sent['description'])}",
        soft_wrap=True,
    )


def show_deleted(console: Console, product_id: str, result: Any):
    console.print("[green]Product deleted successfully:[/green]")
    console.print(f"[bold]Deleted ID:[/bold] {product_id}")
    console.print("[bold]Server response:[/bold]")
    console.print(Pretty(result))


def show_error(console: Console, message: str):
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


# ---------------------------
# API wrapper
# ---------------------------
async def try_api(console: Console, description: str, fn: Callable, *args):
    """
    Awaits fn(*args) behind a transient spinner. Errors propagate to the caller.
    """
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
        disable=not console.is_terminal,
    ) as progress:
        progress.add_task(description=description, total=None)
        return await fn(*args)


# ---------------------------
# Dispatch
# ---------------------------
async def execute(command: Command, client: ProductsClient, console: Console) -> int:
    """Runs one command and returns the exit code for it."""
    if isinstance(command, ShowHelp):
        show_help(console)
        return 0

    if isinstance(command, UsageError):
        show_error(console, command.reason)
        if command.usage:
            console.print(command.usage)
        if command.show_help:
            show_help(console)
        return 0

    try:
        if isinstance(command, ListProducts):
            console.print("Fetching all products...\n")
            products = await try_api(console, "Fetching products...", client.list_products)
            show_products(console, products)

        elif isinstance(command, GetProduct):
            console.print(f"Looking up product with ID: {command.product_id}...\n")
            product = await try_api(
                console, f"Fetching product {command.product_id}...", client.get_product, command.product_id
            )
            show_product(console, product)

        elif isinstance(command, CreateProduct):
            console.print("Creating new product...\n")
            sent = client.new_product_payload(command.title, command.price, command.category)
            result = await try_api(
                console, "Creating product...",
                client.create_product, command.title, command.price, command.category,
            )
            show_created(console, result or {}, sent, command.price_text)

        elif isinstance(command, DeleteProduct):
            console.print(f"Deleting product with ID: {command.product_id}...\n")
            result = await try_api(
                console, f"Deleting product {command.product_id}...", client.delete_product, command.product_id
            )
            show_deleted(console, command.product_id, result)

        else:
            raise TypeError(f"unhandled command: {command!r}")

    except ApiError as e:
        show_error(console, f"Request failed: {e}")
        return 1
    except Exception as e:
        log.debug("unexpected error", exc_info=True)
        show_error(console, f"Unexpected error: {e}")
        return 1

    return 0


def _load_settings(console: Console) -> Optional[Settings]:
    try:
        return Settings.from_env()
    except ValidationError as e:
        show_error(console, f"Invalid configuration: {e}")
        return None


def main(
    argv: Optional[Sequence[str]] = None,
    client: Optional[ProductsClient] = None,
    console: Optional[Console] = None,
) -> int:
    console = console or Console()
    if argv is None:
        argv = sys.argv[1:]

    if client is None:
        settings = _load_settings(console)
        if settings is None:
            return 1
        setup_logging(settings.log_level)
        client = ProductsClient(base_url=settings.base_url, timeout=settings.timeout)

    console.print("[dim]Starting TechLab Products Manager...[/dim]\n")
    return asyncio.run(execute(parse_command(argv), client, console))


# ---------------------------
# Interactive shell
# ---------------------------
def _read_line() -> str:
    completer = WordCompleter(list(METHODS) + [RESOURCE, f"{RESOURCE}/", "help", "exit", "quit"], ignore_case=True)
    return prompt([('class:prompt', 'products> ')], completer=completer, style=custom_style)


def shell(
    client: Optional[ProductsClient] = None,
    console: Optional[Console] = None,
    read_line: Callable[[], str] = _read_line,
) -> int:
    console = console or Console()

    if client is None:
        settings = _load_settings(console)
        if settings is None:
            return 1
        setup_logging(settings.log_level)
        client = ProductsClient(base_url=settings.base_url, timeout=settings.timeout)

    console.print(f"[bold blue]TechLab Products shell[/bold blue] [dim]({client.base_url})[/dim]")
    console.print("[dim]Type 'help' for commands, 'exit' to quit.[/dim]\n")

    while True:
        try:
            line = read_line().strip()
        except (EOFError, KeyboardInterrupt):
            break
        if not line:
            continue
        if line.lower() in ("exit", "quit"):
            break
        if line.lower() == "help":
            show_help(console)
            continue

        try:
            args = shlex.split(line)
        except ValueError as e:
            show_error(console, str(e))
            continue

        asyncio.run(execute(parse_command(args), client, console))
        console.print()

    console.print("[bold green]Bye![/bold green]")
    return 0


if __name__ == "__main__":
    sys.exit(main())
