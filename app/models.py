# app/models.py
from pydantic import BaseModel


class Rating(BaseModel):
    rate: float = 0
    count: int = 0


class ProductIn(BaseModel):
    title: str
    price: float
    description: str = ""
    image: str = ""
    category: str = "general"


class Product(ProductIn):
    id: int
    rating: Rating = Rating()
