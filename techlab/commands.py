# techlab/commands.py
"""
Turns a positional invocation (METHOD resource [params...]) into one typed command.

All validation happens here, before anything touches the network.
"""
import math
from dataclasses import dataclass
from typing import Optional, Sequence, Union

RESOURCE = "products"
METHODS = ("GET", "POST", "DELETE")

POST_USAGE = "Usage: techlab-products POST products <title> <price> <category>"
DELETE_USAGE = "Usage: techlab-products DELETE products/<productId>"


@dataclass(frozen=True)
class ListProducts:
    pass


@dataclass(frozen=True)
class GetProduct:
    product_id: str


@dataclass(frozen=True)
class CreateProduct:
    title: str
    price: float
    category: str
    price_text: str


@dataclass(frozen=True)
class DeleteProduct:
    product_id: str


@dataclass(frozen=True)
class ShowHelp:
    pass


@dataclass(frozen=True)
class UsageError:
    reason: str
    usage: Optional[str] = None
    show_help: bool = False


Command = Union[ListProducts, GetProduct, CreateProduct, DeleteProduct, ShowHelp, UsageError]


# ---------------------------
# Validators
# ---------------------------
def _finite_number(raw: str) -> Optional[float]:
    if "_" in raw or not raw.isascii():
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def parse_product_id(segment: str) -> Optional[str]:
    """
    Returns the segment unchanged when it reads as a finite number, None otherwise.

    Numbers the API has no product for (-3, 1.5) still go out and come back as 404s.
    """
    if not segment or _finite_number(segment) is None:
        return None
    return segment


def parse_price(raw: str) -> Optional[float]:
    price = _finite_number(raw)
    if price is None or price <= 0:
        return None
    return price


def _id_from_resource(resource: str) -> Union[str, UsageError]:
    # products/<id>[/anything]: the id is the segment between the first and second "/"
    segment = resource.split("/")[1]
    product_id = parse_product_id(segment)
    if product_id is None:
        return UsageError("Invalid product ID")
    return product_id


# ---------------------------
# Parser
# ---------------------------
def parse_command(args: Sequence[str]) -> Command:
    if len(args) < 2 or not args[0] or not args[1]:
        return ShowHelp()

    method, resource, params = args[0], args[1], list(args[2:])

    if not resource.startswith(RESOURCE):
        return UsageError(f'Only the "{RESOURCE}" resource is supported', show_help=True)

    method = method.upper()

    if method == "GET":
        if "/" not in resource:
            return ListProducts()
        product_id = _id_from_resource(resource)
        if isinstance(product_id, UsageError):
            return product_id
        return GetProduct(product_id)

    if method == "POST":
        if len(params) < 3:
            return UsageError("Missing parameters to create the product", usage=POST_USAGE)
        title, raw_price, category = params[:3]
        price = parse_price(raw_price)
        if price is None:
            return UsageError("Price must be a valid number greater than 0")
        return CreateProduct(title, price, category, raw_price)

    if method == "DELETE":
        if "/" not in resource:
            return UsageError("You must specify a product ID to delete", usage=DELETE_USAGE)
        product_id = _id_from_resource(resource)
        if isinstance(product_id, UsageError):
            return product_id
        return DeleteProduct(product_id)

    return UsageError(
        f'HTTP method "{args[0]}" not supported',
        usage="Available methods: " + ", ".join(METHODS),
        show_help=True,
    )
