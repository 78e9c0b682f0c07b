from __future__ import annotations

import json
from typing import Any, List, Optional

from .connection import DatabaseConnection
from .document_store import Document, DocumentCollection, check_name
from .mysql_base import db_cursor, decode_json_column, fetchall, fetchone


class MySQLDocumentCollection(DocumentCollection):
    """A collection stored as a MySQL table of JSON documents.

    Table layout (see database/schema.sql): ``id`` primary key, ``seq``
    auto-increment for insertion order, ``doc`` JSON.
    """

    def __init__(self, conn_factory: DatabaseConnection, name: str):
        self._conn_factory = conn_factory
        self.name = check_name(name)

    def _select(self, where: str = "", params: tuple = ()) -> List[Document]:
        sql = f"SELECT id, doc FROM `{self.name}`"
        if where:
            sql += f" WHERE {where}"
        sql += " ORDER BY seq"
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return [self._to_document(r) for r in fetchall(cur)]

    @staticmethod
    def _to_document(row: dict) -> Document:
        doc = decode_json_column(row.get("doc"))
        doc["id"] = row["id"]
        return doc

    def find_all(self) -> List[Document]:
        return self._select()

    def find_by_id(self, doc_id: str) -> Optional[Document]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT id, doc FROM `{self.name}` WHERE id=%s", (doc_id,))
            row = fetchone(cur)
            if not row:
                return None
            return self._to_document(row)

    def find_where(self, field: str, value: Any) -> List[Document]:
        path = f"$.{check_name(field)}"
        if isinstance(value, str):
            return self._select(
                "JSON_UNQUOTE(JSON_EXTRACT(doc, %s)) = %s AND JSON_TYPE(JSON_EXTRACT(doc, %s)) <> 'NULL'",
                (path, value, path),
            )
        return self._select("JSON_EXTRACT(doc, %s) = CAST(%s AS JSON)", (path, json.dumps(value)))

    def find_between(self, field: str, low: Any, high: Any) -> List[Document]:
        path = f"$.{check_name(field)}"
        return self._select(
            "JSON_UNQUOTE(JSON_EXTRACT(doc, %s)) BETWEEN %s AND %s AND JSON_TYPE(JSON_EXTRACT(doc, %s)) <> 'NULL'",
            (path, low, high, path),
        )

    def upsert(self, doc_id: str, doc: Document) -> None:
        body = {k: v for k, v in doc.items() if k != "id"}
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO `{self.name}`(id, doc)
                VALUES(%s, %s)
                ON DUPLICATE KEY UPDATE doc=VALUES(doc)
                """,
                (doc_id, json.dumps(body)),
            )

    def delete(self, doc_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"DELETE FROM `{self.name}` WHERE id=%s", (doc_id,))
            return cur.rowcount > 0

    def exists(self, doc_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT 1 AS hit FROM `{self.name}` WHERE id=%s", (doc_id,))
            return fetchone(cur) is not None
