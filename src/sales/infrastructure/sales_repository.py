# sales/infrastructure/sales_repository.py

from typing import List

import psycopg2
from psycopg2.extras import RealDictCursor

from sales.domain.entities import SalesRecord
from sales.domain.query_builder import SalesQuery
from sales_inquiry.errors import StoreUnavailable
from utils.logging_factory import get_logger

logger = get_logger("sales")


class SalesRepository:
    def __init__(self, conn):
        if conn is None:
            raise ValueError("❌ Database connection is None.")
        self.conn = conn

    def search(self, query: SalesQuery) -> List[SalesRecord]:
        try:
            with self.conn.cursor(cursor_factory=RealDictCursor) as cur:
                cur.execute(query.text, query.params)
                rows = cur.fetchall()
        except psycopg2.Error as e:
            logger.error(f"❌ Error running sales query: {e}")
            raise StoreUnavailable()

        logger.info(f"✅ {len(rows)} sales rows loaded.")
        return [SalesRecord(**row) for row in rows]
