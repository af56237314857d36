from employees_mongodb.connect_db import get_database
from employees_mongodb.seed_data import COLLECTION_NAME, employee_documents


def seed(db=None):
    """Reset the employees collection to the fixed batch.

    Drops the collection, then inserts the three fixed records in order.
    Driver errors are not caught: a failure after the drop leaves the
    collection empty.
    """
    if db is None:
        db = get_database()

    collection = db[COLLECTION_NAME]
    collection.drop()
    result = collection.insert_many(employee_documents(), ordered=True)
    return result.inserted_ids


def main():
    inserted_ids = seed()
    print(f"✅ Seeded '{COLLECTION_NAME}' with {len(inserted_ids)} employees.")


if __name__ == "__main__":
    main()
