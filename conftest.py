# conftest.py

from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from authentication.application.auth_service import AuthService
from authentication.domain.entities import Identity, SessionClaim
from authentication.infrastructure.auth_repository import CredentialStore
from authentication.infrastructure.token_service import TokenService
from authentication.utils.dependencies import get_credential_store, get_token_service
from authentication.utils.password_utils import hash_password
from sales.api.routes import get_sales_repository
from sales.domain.entities import SalesRecord
from sales.domain.query_builder import SalesQuery
from sales_inquiry.config import settings
from sales_inquiry.main import create_app

TEST_SECRET = "test-secret"


class InMemoryCredentialStore(CredentialStore):
    """Dict-backed store that counts reads and writes."""

    def __init__(self, identities: List[Identity]):
        self.identities: Dict[str, Identity] = {i.code: i for i in identities}
        self.reads = 0
        self.writes = 0

    def find_by_code(self, code: str) -> Optional[Identity]:
        self.reads += 1
        identity = self.identities.get(code)
        if identity is None:
            return None
        return Identity(identity.code, identity.display_name, identity.password_hash, identity.access_scope)

    def set_password_hash(self, code: str, password_hash: str) -> bool:
        if code not in self.identities:
            return False
        self.writes += 1
        self.identities[code].password_hash = password_hash
        return True


class FakeSalesRepository:
    """Returns canned rows and keeps every query it was asked to run."""

    def __init__(self, rows: List[SalesRecord]):
        self.rows = rows
        self.queries: List[SalesQuery] = []

    def search(self, query: SalesQuery) -> List[SalesRecord]:
        self.queries.append(query)
        return list(self.rows)


class FakeCursor:
    """Stands in for a psycopg2 cursor: canned results, recorded executes, optional failure."""

    def __init__(self, rows=None, rowcount=0, error=None):
        self.rows = list(rows or [])
        self.rowcount = rowcount
        self.error = error
        self.executed = []

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, query, params=None):
        self.executed.append((query, params))
        if self.error is not None:
            raise self.error

    def fetchone(self):
        return self.rows[0] if self.rows else None

    def fetchall(self):
        return list(self.rows)


class FakeConnection:
    def __init__(self, cursor: FakeCursor):
        self.fake_cursor = cursor
        self.cursor_factories = []
        self.commits = 0
        self.rollbacks = 0

    def cursor(self, cursor_factory=None):
        self.cursor_factories.append(cursor_factory)
        return self.fake_cursor

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    monkeypatch.setattr(settings, "BCRYPT_ROUNDS", 4)


@pytest.fixture
def store(fast_bcrypt):
    return InMemoryCredentialStore([
        Identity("E001", "Alice Tan", hash_password("secret1"), "R1"),
        Identity("E002", "Bob Lim", None, "ALL"),
        Identity("E003", "Chen Wei", None, "R2"),
    ])


@pytest.fixture
def tokens():
    return TokenService(secret_key=TEST_SECRET, algorithm="HS256", ttl_hours=8)


@pytest.fixture
def auth_service(store, tokens):
    return AuthService(store, tokens)


@pytest.fixture
def sales_rows():
    return [
        SalesRecord("INV-0001", "ACME01", "Acme Trading", "G-100", "Widget", 10, 1500.5),
        SalesRecord("INV-0001", "ACME01", "Acme Trading", "G-200", "Gadget", -2, -300.25),
        SalesRecord("INV-0002", "BETA02", "Beta Foods", "G-100", "Widget", 3, 450.0),
    ]


@pytest.fixture
def sales_repo(sales_rows):
    return FakeSalesRepository(sales_rows)


@pytest.fixture
def client(store, tokens, sales_repo):
    app = create_app()
    app.dependency_overrides[get_credential_store] = lambda: store
    app.dependency_overrides[get_token_service] = lambda: tokens
    app.dependency_overrides[get_sales_repository] = lambda: sales_repo
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_header(tokens):
    def _header(code="E001", name="Alice Tan", scope="R1"):
        token = tokens.issue(SessionClaim(code, name, scope))
        return {"Authorization": f"Bearer {token}"}
    return _header


@pytest.fixture
def make_connection():
    def _make(rows=None, rowcount=0, error=None):
        return FakeConnection(FakeCursor(rows=rows, rowcount=rowcount, error=error))
    return _make
