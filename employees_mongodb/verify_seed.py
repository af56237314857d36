# verify_seed.py
import sys
from collections import Counter

from employees_mongodb.connect_db import get_database
from employees_mongodb.seed_data import COLLECTION_NAME, EMPLOYEES


def _pairs(docs) -> Counter:
    return Counter((d.get("firstName"), d.get("lastName")) for d in docs)


def verify_seed(db=None) -> bool:
    if db is None:
        db = get_database()

    docs = list(db[COLLECTION_NAME].find({}, {"_id": 0}))
    print(f"\n Employees in '{COLLECTION_NAME}':")
    for doc in docs:
        print(f"   {doc.get('firstName')} {doc.get('lastName')}")
    print(f"   Count: {len(docs)}")

    if _pairs(docs) == _pairs(EMPLOYEES):
        print("✅ Seed data matches.")
        return True
    print(f"❌ Expected exactly {len(EMPLOYEES)} seeded employees.")
    return False


def main():
    if not verify_seed():
        sys.exit(1)


if __name__ == "__main__":
    main()
