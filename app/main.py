# app/main.py
from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException

from .database import PRODUCTS, next_product_id, reset_products
from .models import Product, ProductIn

app = FastAPI(title="techlab fake products API (in-memory)")


def _get_or_404(product_id: int) -> Dict[str, Any]:
    p = PRODUCTS.get(product_id)
    if not p:
        raise HTTPException(status_code=404, detail="product not found")
    return p


# ---------------------------
# Product endpoints
# ---------------------------
@app.get("/products", response_model=List[Product])
async def list_products():
    return list(PRODUCTS.values())


@app.get("/products/{product_id}", response_model=Product)
async def get_product(product_id: int):
    return _get_or_404(product_id)


@app.post("/products", response_model=Product, status_code=201)
async def create_product(payload: ProductIn):
    product = Product(id=next_product_id(), **payload.model_dump())
    PRODUCTS[product.id] = product.model_dump()
    return PRODUCTS[product.id]


@app.delete("/products/{product_id}", response_model=Product)
async def delete_product(product_id: int):
    _get_or_404(product_id)
    return PRODUCTS.pop(product_id)


# Demo helper: restore the seed catalogue
@app.post("/reset")
async def reset():
    reset_products()
    return {"status": "reset", "products": len(PRODUCTS)}


def serve(host: str = "127.0.0.1", port: int = 8085):
    import uvicorn
    uvicorn.run(app, host=host, port=port, log_level="info")


if __name__ == "__main__":
    serve()
