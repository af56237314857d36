# seed_data.py

COLLECTION_NAME = "employees"

EMPLOYEES = [
    {"firstName": "John", "lastName": "Doe"},
    {"firstName": "Jane", "lastName": "Smith"},
    {"firstName": "Peter", "lastName": "Jones"},
]


def employee_documents() -> list[dict]:
    """Fresh copies of EMPLOYEES; insert_many writes `_id` into what it gets."""
    return [dict(doc) for doc in EMPLOYEES]
