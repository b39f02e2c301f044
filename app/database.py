from typing import Any, Dict, List

# In-memory product store for the local fake API.

SEED_PRODUCTS: List[Dict[str, Any]] = [
    {
        "id": 1,
        "title": "Fjallraven - Foldsack No. 1 Backpack, Fits 15 Laptops",
        "price": 109.95,
        "description": "Your perfect pack for everyday use and walks in the forest.",
        "image": "https://fakestoreapi.com/img/81fPKd-2AYL._AC_SL1500_.jpg",
        "category": "men's clothing",
        "rating": {"rate": 3.9, "count": 120},
    },
    {
        "id": 2,
        "title": "Mens Casual Premium Slim Fit T-Shirts",
        "price": 22.3,
        "description": "Slim-fitting style, contrast raglan long sleeve.",
        "image": "https://fakestoreapi.com/img/71-3HjGNDUL._AC_SY879._SX._UX._SY._UY_.jpg",
        "category": "men's clothing",
        "rating": {"rate": 4.1, "count": 259},
    },
    {
        "id": 3,
        "title": "John Hardy Women's Legends Naga Bracelet",
        "price": 695,
        "description": "From our Legends Collection, the Naga was inspired by the mythical water dragon.",
        "image": "https://fakestoreapi.com/img/71pWzhdJNwL._AC_UL640_QL65_ML3_.jpg",
        "category": "jewelery",
        "rating": {"rate": 4.6, "count": 400},
    },
    {
        "id": 4,
        "title": "WD 2TB Elements Portable External Hard Drive - USB 3.0",
        "price": 64,
        "description": "USB 3.0 and USB 2.0 compatibility, fast data transfers.",
        "image": "https://fakestoreapi.com/img/61IBBVJvSDL._AC_SY879_.jpg",
        "category": "electronics",
        "rating": {"rate": 3.3, "count": 203},
    },
    {
        "id": 5,
        "title": "Opna Women's Short Sleeve Moisture",
        "price": 7.95,
        "description": "100% Polyester, machine wash, lightweight and breathable.",
        "image": "https://fakestoreapi.com/img/51eg55uWmdL._AC_UX679_.jpg",
        "category": "women's clothing",
        "rating": {"rate": 4.5, "count": 146},
    },
]

PRODUCTS: Dict[int, Dict[str, Any]] = {}


def reset_products():
    PRODUCTS.clear()
    for p in SEED_PRODUCTS:
        PRODUCTS[p["id"]] = {**p, "rating": dict(p["rating"])}


def next_product_id() -> int:
    return max(PRODUCTS, default=0) + 1


reset_products()
