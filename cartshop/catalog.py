# Demo catalog shared by the in-memory backend and scripts/db_seed.py
DEMO_PRODUCTS = [
    ("Apple", 10),
    ("Banana", 5),
    ("Orange", 8),
    ("Milk", 25),
    ("Bread", 15),
    ("Coffee", 60),
]
