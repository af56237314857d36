import mongomock
import pytest


@pytest.fixture
def mongo_db():
    client = mongomock.MongoClient()
    yield client["test"]
    client.close()
