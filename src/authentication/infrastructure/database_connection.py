#authentication/infrastructure/database_connection.py

import psycopg2

from sales_inquiry.config import settings
from sales_inquiry.errors import StoreUnavailable
from utils.logging_factory import get_logger

logger = get_logger("database")


def connect_database():
    try:
        conn = psycopg2.connect(
            dbname=settings.DB_DATABASE,
            user=settings.DB_USER,
            password=settings.DB_PASSWORD,
            host=settings.DB_HOST,
            port=settings.DB_PORT,
        )
        logger.info("✅ Database connection established.")
        return conn
    except psycopg2.Error as e:
        logger.error(f"❌ Could not connect to the database: {e}")
        raise StoreUnavailable()


def close_connection(conn):
    if conn:
        conn.close()
