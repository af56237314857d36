from typing import Optional

import uvicorn
from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel
from pymongo.errors import PyMongoError

from employees_mongodb.connect_db import get_database
from employees_mongodb.seed_data import COLLECTION_NAME

app = FastAPI(title="Employees API (Mongo)", version="1.0.0")


def db_conn():
    try:
        db = get_database()
    except PyMongoError:
        raise HTTPException(status_code=500, detail="db ping failed")
    try:
        yield db
    finally:
        # get_database creates a client per request; release its sockets
        db.client.close()


class EmployeeOut(BaseModel):
    id: str
    firstName: Optional[str] = None
    lastName: Optional[str] = None


def _format_employee(doc: dict) -> dict:
    return {
        "id": str(doc.get("_id")),
        "firstName": doc.get("firstName"),
        "lastName": doc.get("lastName"),
    }


@app.get("/", response_model=list[EmployeeOut], tags=["Employees"])
def list_employees(db=Depends(db_conn)):
    cursor = db[COLLECTION_NAME].find({}).sort("_id", 1)
    return [EmployeeOut(**_format_employee(doc)) for doc in cursor]


@app.get("/health", response_model=dict, tags=["Health"])
def health(db=Depends(db_conn)):
    # Simple ping
    try:
        db.client.admin.command("ping")
        return {"status": "ok"}
    except PyMongoError:
        raise HTTPException(status_code=500, detail="db ping failed")


def main():
    uvicorn.run("api.main:app", host="127.0.0.1", port=8000)


if __name__ == "__main__":
    main()
