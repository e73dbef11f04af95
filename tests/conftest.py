from __future__ import annotations

from collections.abc import Iterator
from io import BytesIO
from pathlib import Path
import sys
from types import SimpleNamespace

import pytest
from botocore.exceptions import ClientError
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from share_registry.api.deps import get_db_session
from share_registry.main import app
from share_registry.models import Base


class InMemoryS3Client:
    """Simple in-memory S3 stub used by the audit middleware during tests."""

    exceptions = SimpleNamespace(NoSuchKey=type("NoSuchKey", (Exception,), {}))

    def __init__(self) -> None:
        self._buckets: dict[str, dict[str, bytes]] = {}

    def head_bucket(self, *, Bucket: str) -> None:
        if Bucket not in self._buckets:
            raise ClientError({"Error": {"Code": "404", "Message": "Not Found"}}, "HeadBucket")

    def create_bucket(self, *, Bucket: str, **_: object) -> None:
        self._buckets.setdefault(Bucket, {})

    def get_object(self, *, Bucket: str, Key: str) -> dict[str, BytesIO]:
        if Bucket not in self._buckets:
            raise ClientError({"Error": {"Code": "NoSuchBucket"}}, "GetObject")
        bucket = self._buckets[Bucket]
        if Key not in bucket:
            raise self.exceptions.NoSuchKey()
        return {"Body": BytesIO(bucket[Key])}

    def put_object(
        self,
        *,
        Bucket: str,
        Key: str,
        Body: bytes,
        ContentType: str | None = None,
        **_: object,
    ) -> dict[str, str]:
        bucket = self._buckets.setdefault(Bucket, {})
        bucket[Key] = Body.encode("utf-8") if isinstance(Body, str) else Body
        return {"ETag": "in-memory"}

    @property
    def buckets(self) -> dict[str, dict[str, bytes]]:
        return self._buckets


DATABASE_URL = "sqlite+pysqlite:///:memory:"


engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture()
def s3_client() -> InMemoryS3Client:
    return InMemoryS3Client()


@pytest.fixture()
def db_session() -> Iterator[Session]:
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    yield session
    session.close()


@pytest.fixture()
def client(db_session: Session) -> Iterator[TestClient]:
    def override_get_db() -> Iterator[Session]:
        yield db_session

    app.dependency_overrides[get_db_session] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.pop(get_db_session, None)


@pytest.fixture()
def holding_payload() -> dict[str, object]:
    return {
        "companyName": "Infosys Ltd",
        "isinNumber": "ine009a01021",
        "folioNumber": "F-1001",
        "certificateNumber": "C-77",
        "distinctiveNumber": {"from": "1000", "to": "1099"},
        "quantity": 100,
        "faceValue": "5",
        "purchaseDate": "2021-04-12",
    }


@pytest.fixture()
def profile_payload(holding_payload: dict[str, object]) -> dict[str, object]:
    return {
        "shareholderName": {"name1": "Akanksha Deshmukh", "name2": "R"},
        "panNumber": "abcde1234f",
        "address": "12 MG Road, Pune",
        "bankDetails": {
            "bankNumber": "00112233445",
            "branch": "Camp",
            "bankName": "State Bank",
            "ifscCode": "sbin0000123",
            "micrCode": "411002003",
        },
        "dematAccountNumber": "IN30012345678901",
        "shareHoldings": [holding_payload],
        "status": "Active",
        "remarks": "Transferred from physical",
    }
