"""
Static seed data for the two catalog variants and the category list.
Loaded once at startup; nothing writes to it afterwards.
"""

BASIC_PRODUCTS: tuple[dict, ...] = (
    {
        "id": 1,
        "name": "Wireless Bluetooth Headphones",
        "category": "Electronics",
        "price": 79.99,
        "description": "High-quality wireless headphones with noise cancellation",
        "in_stock": True,
        "rating": 4.5,
        "review_count": 120,
    },
    {
        "id": 2,
        "name": "Smart Watch",
        "category": "Electronics",
        "price": 199.99,
        "description": "Feature-rich smartwatch with health tracking",
        "in_stock": True,
        "rating": 4.7,
        "review_count": 85,
    },
    {
        "id": 3,
        "name": "Running Shoes",
        "category": "Sports",
        "price": 89.99,
        "description": "Comfortable running shoes for all terrains",
        "in_stock": False,
        "rating": 4.2,
        "review_count": 64,
    },
    {
        "id": 4,
        "name": "GPS Sports Watch",
        "category": "Sports",
        "price": 129.99,
        "description": "Water-resistant watch with GPS and heart rate monitor",
        "in_stock": True,
        "rating": 4.4,
        "review_count": 210,
    },
    {
        "id": 5,
        "name": "Organic Cotton T-Shirt",
        "category": "Clothing",
        "price": 24.99,
        "description": "Soft breathable t-shirt made from organic cotton",
        "in_stock": True,
        "rating": 4.1,
        "review_count": 33,
    },
    {
        "id": 6,
        "name": "Python Programming Handbook",
        "category": "Books",
        "price": 39.99,
        "description": "Practical guide to writing clean Python code",
        "in_stock": True,
        "rating": 4.8,
        "review_count": 512,
    },
    {
        "id": 7,
        "name": "Ceramic Garden Planter",
        "category": "Home & Garden",
        "price": 34.5,
        "description": "Glazed planter with drainage hole for indoor and outdoor plants",
        "in_stock": True,
        "rating": 4.0,
        "review_count": 18,
    },
    {
        "id": 8,
        "name": "Classic Analog Watch",
        "category": "Clothing",
        "price": 45.0,
        "description": "Minimalist wrist watch with leather strap",
        "in_stock": False,
    },
)

SKU_PRODUCTS: tuple[dict, ...] = (
    {
        "id": "B014TMV5YE",
        "name": "Sion Softside Expandable Roller Luggage, Black, Checked-Large 29-Inch",
        "category": 104,
        "price": 139.99,
        "list_price": 0.0,
        "rating": 4.5,
        "review_count": 0,
        "is_best_seller": False,
        "popularity": 2000,
        "image_url": "https://m.media-amazon.com/images/I/815dLQKYIYL._AC_UL320_.jpg",
        "product_url": "https://www.amazon.com/dp/B014TMV5YE",
    },
    {
        "id": "B08N5WRWNW",
        "name": "Samsonite Omni PC Hardside Expandable Luggage with Spinner Wheels",
        "category": 104,
        "price": 119.99,
        "list_price": 159.99,
        "rating": 4.7,
        "review_count": 15234,
        "is_best_seller": True,
        "popularity": 5000,
        "image_url": "https://m.media-amazon.com/images/I/81L+gu1bLJL._AC_UL320_.jpg",
        "product_url": "https://www.amazon.com/dp/B08N5WRWNW",
    },
    {
        "id": "B07ZPKN6YR",
        "name": "Apple AirPods Pro (2nd Generation) Wireless Earbuds",
        "category": 201,
        "price": 249.99,
        "list_price": 279.99,
        "rating": 4.8,
        "review_count": 89453,
        "is_best_seller": True,
        "popularity": 15000,
        "image_url": "https://m.media-amazon.com/images/I/61SUj2aKoEL._AC_UL320_.jpg",
        "product_url": "https://www.amazon.com/dp/B07ZPKN6YR",
    },
    {
        "id": "B09X5JNC5R",
        "name": "Sony WH-1000XM5 Wireless Noise Canceling Headphones",
        "category": 201,
        "price": 398.0,
        "list_price": 419.99,
        "rating": 4.6,
        "review_count": 12543,
        "is_best_seller": True,
        "popularity": 8000,
        "image_url": "https://m.media-amazon.com/images/I/61vFO3CUoYL._AC_UL320_.jpg",
        "product_url": "https://www.amazon.com/dp/B09X5JNC5R",
    },
    {
        "id": "B0BSHF7WHW",
        "name": "Amazon Basics Hardside Spinner Luggage - 20-Inch, Carry-On",
        "category": 104,
        "price": 54.99,
        "list_price": 79.99,
        "rating": 4.3,
        "review_count": 3421,
        "is_best_seller": False,
        "popularity": 1200,
        "image_url": "https://m.media-amazon.com/images/I/81r1KHHYX1L._AC_UL320_.jpg",
        "product_url": "https://www.amazon.com/dp/B0BSHF7WHW",
    },
)

CATEGORIES: tuple[dict, ...] = (
    {"id": 1, "name": "Electronics", "count": 150},
    {"id": 2, "name": "Sports", "count": 80},
    {"id": 3, "name": "Clothing", "count": 200},
    {"id": 4, "name": "Books", "count": 120},
    {"id": 5, "name": "Home & Garden", "count": 95},
)

CATALOG_VARIANTS: dict[str, tuple[dict, ...]] = {
    "basic": BASIC_PRODUCTS,
    "sku": SKU_PRODUCTS,
}
