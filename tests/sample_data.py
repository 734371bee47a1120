# catalog records shaped like the remote product API
from store.models import Product

RAW_PRODUCTS = [
    {
        "id": 1,
        "title": "Red Shirt",
        "price": 20,
        "category": "clothing",
        "image": "https://img.test/1.png",
        "rating": {"rate": 4.5, "count": 10},
    },
    {
        "id": 2,
        "title": "Wireless Mouse",
        "price": 35.5,
        "description": "Two buttons and a wheel.",
        "category": "electronics",
        "image": "https://img.test/2.png",
        "rating": {"rate": 3.9, "count": 120},
    },
    {
        "id": 3,
        "title": "Blue Jeans",
        "price": 55.99,
        "category": "clothing",
        "image": "https://img.test/3.png",
        "rating": {"rate": 4.1, "count": 42},
    },
    {
        "id": 4,
        "title": "Gold Ring",
        "price": 999.99,
        "category": "jewelery",
        "image": "https://img.test/4.png",
        "rating": {"rate": 2.5, "count": 3},
    },
]

PRODUCTS = [Product.from_json(raw) for raw in RAW_PRODUCTS]
