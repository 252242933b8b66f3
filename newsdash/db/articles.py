"""Article storage and management."""

from datetime import datetime
from typing import Iterable, List, Optional, Set, Tuple

from psycopg import Connection

from ..models import Article, ArticleListItem, ArticleStatus
from .errors import NotFoundError

_LIST_COLUMNS = """
    a.*,
    s.name AS source_name,
    COALESCE(
        ARRAY(
            SELECT t.name FROM article_tags atg
            JOIN tags t ON t.id = atg.tag_id
            WHERE atg.article_id = a.id
            ORDER BY t.name
        ),
        ARRAY[]::TEXT[]
    ) AS tags,
    EXISTS (SELECT 1 FROM favorites f WHERE f.article_id = a.id) AS is_favorite
"""


def _sanitize_search(search: Optional[str]) -> str:
    if not search:
        return ""
    return search.replace(",", "").replace("(", "").replace(")", "").strip()


class ArticleStorage:
    """Handle article storage and deduplication."""

    def article_exists_by_canonical_url(self, conn: Connection, canonical_url: str) -> bool:
        """Check whether an article with this canonical URL is stored."""
        with conn.cursor() as cur:
            cur.execute(
                "SELECT id FROM articles WHERE canonical_url = %s LIMIT 1",
                (canonical_url,),
            )
            return cur.fetchone() is not None

    def create_article(
        self,
        conn: Connection,
        *,
        title: str,
        description: Optional[str],
        link: str,
        canonical_url: Optional[str],
        published_at: Optional[datetime],
        source_id: int,
        status: ArticleStatus,
    ) -> Article:
        """Insert a new article and commit it."""
        with conn.cursor() as cur:
            cur.execute(
                """
                INSERT INTO articles (
                    title, description, link, canonical_url,
                    published_at, source_id, status
                ) VALUES (%s, %s, %s, %s, %s, %s, %s)
                RETURNING *
                """,
                (
                    title,
                    description,
                    link,
                    canonical_url,
                    published_at,
                    source_id,
                    ArticleStatus(status).value,
                ),
            )
            row = cur.fetchone()

        conn.commit()
        return Article(**row)

    def attach_tags(self, conn: Connection, article_id: int, tag_ids: List[int]) -> None:
        """Link an article to the tags it matched."""
        if not tag_ids:
            return

        with conn.cursor() as cur:
            cur.executemany(
                "INSERT INTO article_tags (article_id, tag_id) VALUES (%s, %s)",
                [(article_id, tag_id) for tag_id in tag_ids],
            )

        conn.commit()

    def delete_article(self, conn: Connection, article_id: int) -> None:
        """Delete an article; its tag links and favorite go with it."""
        with conn.cursor() as cur:
            cur.execute("DELETE FROM articles WHERE id = %s", (article_id,))
        conn.commit()

    def get_articles(
        self,
        conn: Connection,
        page: int = 1,
        limit: int = 20,
        status: ArticleStatus = ArticleStatus.VISIBLE,
        tag_id: Optional[int] = None,
        search: Optional[str] = None,
        favorites_only: bool = False,
    ) -> Tuple[List[ArticleListItem], int]:
        """
        Get one page of articles.

        Returns:
            Tuple of (articles, total matching count)
        """
        page = max(page, 1)
        conditions = ["a.status = %s"]
        params: list = [ArticleStatus(status).value]

        if tag_id is not None:
            conditions.append(
                "EXISTS (SELECT 1 FROM article_tags at2 WHERE at2.article_id = a.id AND at2.tag_id = %s)"
            )
            params.append(tag_id)

        term = _sanitize_search(search)
        if term:
            conditions.append("(a.title ILIKE %s OR a.description ILIKE %s)")
            params.extend([f"%{term}%", f"%{term}%"])

        if favorites_only:
            conditions.append("EXISTS (SELECT 1 FROM favorites f2 WHERE f2.article_id = a.id)")

        where = " AND ".join(conditions)

        with conn.cursor() as cur:
            cur.execute(f"SELECT COUNT(*) AS count FROM articles a WHERE {where}", params)
            total = cur.fetchone()["count"]

            cur.execute(
                f"""
                SELECT {_LIST_COLUMNS}
                FROM articles a
                LEFT JOIN sources s ON s.id = a.source_id
                WHERE {where}
                ORDER BY a.published_at DESC NULLS LAST, a.id DESC
                LIMIT %s OFFSET %s
                """,
                [*params, limit, (page - 1) * limit],
            )
            rows = cur.fetchall()

        return [ArticleListItem(**row) for row in rows], total

    def get_article(self, conn: Connection, article_id: int) -> Optional[ArticleListItem]:
        """Get a single article with its source name and tags."""
        with conn.cursor() as cur:
            cur.execute(
                f"""
                SELECT {_LIST_COLUMNS}
                FROM articles a
                LEFT JOIN sources s ON s.id = a.source_id
                WHERE a.id = %s
                """,
                (article_id,),
            )
            row = cur.fetchone()
        return ArticleListItem(**row) if row else None

    def update_article_status(
        self,
        conn: Connection,
        article_id: int,
        status: ArticleStatus,
    ) -> Article:
        """Exclude or restore an article."""
        with conn.cursor() as cur:
            cur.execute(
                "UPDATE articles SET status = %s WHERE id = %s RETURNING *",
                (ArticleStatus(status).value, article_id),
            )
            row = cur.fetchone()
        conn.commit()
        if row is None:
            raise NotFoundError(f"Article {article_id} not found")
        return Article(**row)

    def toggle_favorite(self, conn: Connection, article_id: int) -> bool:
        """
        Flip the favorite flag of an article.

        Returns:
            True if the article is now favorited
        """
        with conn.cursor() as cur:
            cur.execute("DELETE FROM favorites WHERE article_id = %s", (article_id,))
            if cur.rowcount:
                conn.commit()
                return False

            cur.execute("SELECT id FROM articles WHERE id = %s", (article_id,))
            if cur.fetchone() is None:
                conn.rollback()
                raise NotFoundError(f"Article {article_id} not found")

            cur.execute("INSERT INTO favorites (article_id) VALUES (%s)", (article_id,))

        conn.commit()
        return True

    def get_favorited_article_ids(self, conn: Connection) -> Set[int]:
        """Get IDs of all favorited articles."""
        with conn.cursor() as cur:
            cur.execute("SELECT article_id FROM favorites")
            return {row["article_id"] for row in cur.fetchall()}

    def delete_articles_older_than(
        self,
        conn: Connection,
        cutoff: datetime,
        exclude_ids: Iterable[int] = (),
    ) -> int:
        """
        Delete articles created before the cutoff.

        Returns:
            Number of deleted rows
        """
        with conn.cursor() as cur:
            cur.execute(
                """
                DELETE FROM articles
                WHERE created_at < %s
                  AND NOT (id = ANY(%s::int[]))
                """,
                (cutoff, list(exclude_ids)),
            )
            deleted = cur.rowcount
        conn.commit()
        return deleted
