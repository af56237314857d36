"""MongoDB helpers for the employees collection.

`seed_employees` resets the collection to its fixed batch, `verify_seed`
checks it, and both reach the server through `connect_db.get_database`.
"""

__all__ = [
    "connect_db",
    "seed_data",
    "seed_employees",
    "verify_seed",
]
