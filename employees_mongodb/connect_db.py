# connect_db.py - env-driven MongoDB connection
import os
from dotenv import load_dotenv
from pymongo import MongoClient

load_dotenv()
MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017")
DB_NAME = os.getenv("DB_NAME", "test")
MONGO_TLS = os.getenv("MONGO_TLS", "false").lower() in ("1", "true", "yes")
MONGO_TIMEOUT_MS = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))


def _client_options() -> dict:
    options = {"serverSelectionTimeoutMS": MONGO_TIMEOUT_MS}
    if MONGO_TLS:
        # Hosted clusters with self-signed certs
        options.update(tls=True, tlsAllowInvalidCertificates=True)
    return options


def get_database():
    """Open a client, ping the server and return the configured database."""
    try:
        client = MongoClient(MONGO_URI, **_client_options())
        client.admin.command("ping")
    except Exception as e:
        print(f"❌ Could not reach MongoDB at {MONGO_URI}: {e}")
        raise

    print(f"✅ Using MongoDB database '{DB_NAME}'")
    return client[DB_NAME]


if __name__ == "__main__":
    get_database()
