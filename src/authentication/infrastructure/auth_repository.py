# authentication/infrastructure/auth_repository.py

from abc import ABC, abstractmethod
from typing import Optional

import psycopg2

from authentication.domain.entities import Identity
from sales_inquiry.config import settings
from sales_inquiry.errors import StoreUnavailable
from utils.logging_factory import get_logger

logger = get_logger("authentication")

# Active employees of the owning company, master rows in the configured language
EMPLOYEE_FILTER = """
    company = %(company)s
    AND lang = %(lang)s
    AND flexmaster1 = '1'
    AND code = %(code)s
"""


class CredentialStore(ABC):
    """Persistence contract for employee credentials.

    `find_by_code` returns None and `set_password_hash` returns False when
    no active employee has the given code.
    """

    @abstractmethod
    def find_by_code(self, code: str) -> Optional[Identity]:
        ...

    @abstractmethod
    def set_password_hash(self, code: str, password_hash: str) -> bool:
        ...


class EmployeeRepository(CredentialStore):
    def __init__(self, conn):
        if conn is None:
            raise ValueError("❌ Database connection is None.")
        self.conn = conn

    def _params(self, code: str) -> dict:
        return {"company": settings.COMPANY_CODE, "lang": settings.MASTER_LANG, "code": code}

    def find_by_code(self, code: str) -> Optional[Identity]:
        query = f"""
        SELECT code, name, flextext3, flexmaster3
        FROM m_employee
        WHERE {EMPLOYEE_FILTER}
        LIMIT 1
        """
        try:
            with self.conn.cursor() as cur:
                cur.execute(query, self._params(code))
                row = cur.fetchone()
        except psycopg2.Error as e:
            logger.error(f"❌ Error looking up employee {code}: {e}")
            raise StoreUnavailable()

        if not row:
            return None

        emp_code, name, stored_hash, scope = row
        # A blank hash column means the first-login setup has not happened yet
        if stored_hash is not None and not stored_hash.strip():
            stored_hash = None
        return Identity(
            code=emp_code,
            display_name=name or "",
            password_hash=stored_hash,
            access_scope=(scope or "").strip(),
        )

    def set_password_hash(self, code: str, password_hash: str) -> bool:
        query = f"""
        UPDATE m_employee
        SET flextext3 = %(password_hash)s
        WHERE {EMPLOYEE_FILTER}
        """
        params = self._params(code)
        params["password_hash"] = password_hash
        try:
            with self.conn.cursor() as cur:
                cur.execute(query, params)
                updated = cur.rowcount
            self.conn.commit()
        except psycopg2.Error as e:
            self.conn.rollback()
            logger.error(f"❌ Error saving password for employee {code}: {e}")
            raise StoreUnavailable()
        return updated > 0
