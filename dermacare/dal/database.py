import duckdb
import os
import logging
from contextlib import contextmanager
from typing import Optional
from dermacare.config import DEFAULT_DUCKDB_PATH

logger = logging.getLogger(__name__)

class DuckDBManager:
    """
    Namespaced key-value store on DuckDB.
    A namespace is one session; values are JSON text written by the caller.
    """

    def __init__(self, db_path: str = DEFAULT_DUCKDB_PATH):
        self.db_path = db_path
        self.available = False
        self._init_schema()

    def _init_schema(self):
        """Initializes the database schema."""
        try:
            parent = os.path.dirname(self.db_path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            with self.get_connection() as con:
                con.execute("""
                    CREATE TABLE IF NOT EXISTS kv_store (
                        namespace VARCHAR,
                        key VARCHAR,
                        value VARCHAR,
                        updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                        PRIMARY KEY (namespace, key)
                    );
                """)
            self.available = True
            logger.info(f"Database schema initialized at {self.db_path}.")
        except Exception as e:
            logger.error(f"Failed to init schema: {e}")

    @contextmanager
    def get_connection(self):
        """Yields a DuckDB connection."""
        # One connection per operation keeps the file unlocked between requests
        con = duckdb.connect(self.db_path)
        try:
            yield con
        finally:
            con.close()

    def is_available(self) -> bool:
        return self.available

    def get_item(self, namespace: str, key: str) -> Optional[str]:
        with self.get_connection() as con:
            row = con.execute(
                "SELECT value FROM kv_store WHERE namespace = ? AND key = ?",
                [namespace, key],
            ).fetchone()
        return row[0] if row else None

    def set_item(self, namespace: str, key: str, value: str):
        with self.get_connection() as con:
            con.execute(
                "INSERT OR REPLACE INTO kv_store (namespace, key, value, updated_at) VALUES (?, ?, ?, CURRENT_TIMESTAMP)",
                [namespace, key, value],
            )

    def remove_item(self, namespace: str, key: str):
        with self.get_connection() as con:
            con.execute("DELETE FROM kv_store WHERE namespace = ? AND key = ?", [namespace, key])

    def clear_namespace(self, namespace: str):
        with self.get_connection() as con:
            con.execute("DELETE FROM kv_store WHERE namespace = ?", [namespace])

db_manager = DuckDBManager(db_path=os.getenv("DUCKDB_PATH", DEFAULT_DUCKDB_PATH))
