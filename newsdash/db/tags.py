"""Tag and keyword management in database."""

from typing import Dict, List

from psycopg import Connection
from psycopg.errors import UniqueViolation

from ..models import Tag, TagKeyword
from .errors import NotFoundError

MAX_TAG_NAME_LENGTH = 50
MAX_KEYWORDS = 20


def parse_keywords(raw: str) -> List[str]:
    """Split a comma-separated keyword string, dropping blanks."""
    if not raw or not raw.strip():
        return []
    return [k.strip() for k in raw.split(",") if k.strip()]


def _validate_keywords(keywords: List[str]) -> List[str]:
    keywords = [k.strip() for k in keywords if k and k.strip()]
    if len(keywords) > MAX_KEYWORDS:
        raise ValueError(f"Maximum {MAX_KEYWORDS} keywords allowed")
    return keywords


class TagManager:
    """Manage interest tags in database."""

    def get_tags(self, conn: Connection) -> List[Tag]:
        """Get all tags with their keywords, newest first."""
        with conn.cursor() as cur:
            cur.execute("SELECT * FROM tags ORDER BY created_at DESC, id DESC")
            tag_rows = cur.fetchall()

            cur.execute("SELECT * FROM tag_keywords ORDER BY id")
            keyword_rows = cur.fetchall()

        keywords_by_tag: Dict[int, List[TagKeyword]] = {}
        for row in keyword_rows:
            keywords_by_tag.setdefault(row["tag_id"], []).append(TagKeyword(**row))

        return [
            Tag(**row, keywords=keywords_by_tag.get(row["id"], []))
            for row in tag_rows
        ]

    def create_tag(self, conn: Connection, name: str, keywords: List[str]) -> Tag:
        """
        Create a tag and its keywords.

        Raises:
            ValueError: invalid name, too many keywords, or duplicate name
        """
        name = (name or "").strip()
        if not name:
            raise ValueError("Tag name is required")
        if len(name) > MAX_TAG_NAME_LENGTH:
            raise ValueError(f"Tag name must be at most {MAX_TAG_NAME_LENGTH} characters")
        keywords = _validate_keywords(keywords)

        try:
            with conn.cursor() as cur:
                cur.execute(
                    "INSERT INTO tags (name) VALUES (%s) RETURNING *",
                    (name,),
                )
                tag_row = cur.fetchone()
                keyword_rows = self._insert_keywords(cur, tag_row["id"], keywords)
        except UniqueViolation:
            conn.rollback()
            raise ValueError("A tag with this name already exists")

        conn.commit()
        return Tag(**tag_row, keywords=[TagKeyword(**row) for row in keyword_rows])

    def update_tag_keywords(
        self,
        conn: Connection,
        tag_id: int,
        keywords: List[str],
    ) -> List[TagKeyword]:
        """
        Replace the keyword set of a tag.

        Existing article-tag links are left untouched; only future
        ingestion runs see the new keywords.
        """
        keywords = _validate_keywords(keywords)

        with conn.cursor() as cur:
            cur.execute("SELECT id FROM tags WHERE id = %s", (tag_id,))
            if cur.fetchone() is None:
                conn.rollback()
                raise NotFoundError(f"Tag {tag_id} not found")

            cur.execute("DELETE FROM tag_keywords WHERE tag_id = %s", (tag_id,))
            keyword_rows = self._insert_keywords(cur, tag_id, keywords)

        conn.commit()
        return [TagKeyword(**row) for row in keyword_rows]

    def set_tag_active(self, conn: Connection, tag_id: int, is_active: bool) -> None:
        """Include or exclude a tag from matching."""
        with conn.cursor() as cur:
            cur.execute(
                "UPDATE tags SET is_active = %s WHERE id = %s",
                (is_active, tag_id),
            )
            updated = cur.rowcount
        conn.commit()
        if not updated:
            raise NotFoundError(f"Tag {tag_id} not found")

    def delete_tag(self, conn: Connection, tag_id: int) -> None:
        """Delete a tag together with its keywords and article links."""
        with conn.cursor() as cur:
            cur.execute("DELETE FROM tags WHERE id = %s", (tag_id,))
            deleted = cur.rowcount
        conn.commit()
        if not deleted:
            raise NotFoundError(f"Tag {tag_id} not found")

    def _insert_keywords(self, cur, tag_id: int, keywords: List[str]) -> List[dict]:
        rows = []
        for keyword in keywords:
            cur.execute(
                "INSERT INTO tag_keywords (tag_id, keyword) VALUES (%s, %s) RETURNING *",
                (tag_id, keyword),
            )
            rows.append(cur.fetchone())
        return rows
