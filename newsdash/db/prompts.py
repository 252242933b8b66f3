"""Prompt template management in database."""

from typing import List, Optional

from psycopg import Connection

from ..models import Prompt
from .errors import NotFoundError

MAX_PROMPT_NAME_LENGTH = 255
MAX_TEMPLATE_LENGTH = 10000


def _validate_name(name: str) -> str:
    if not name or not name.strip():
        raise ValueError("Prompt name is required")
    if len(name) > MAX_PROMPT_NAME_LENGTH:
        raise ValueError(f"Prompt name must be at most {MAX_PROMPT_NAME_LENGTH} characters")
    return name.strip()


def _validate_template(template: str) -> str:
    if not template or not template.strip():
        raise ValueError("Prompt template is required")
    if len(template) > MAX_TEMPLATE_LENGTH:
        raise ValueError(f"Prompt template must be at most {MAX_TEMPLATE_LENGTH} characters")
    return template


class PromptManager:
    """Manage share-draft prompt templates."""

    def get_prompts(self, conn: Connection) -> List[Prompt]:
        """Get all prompts, newest first."""
        with conn.cursor() as cur:
            cur.execute("SELECT * FROM prompts ORDER BY created_at DESC, id DESC")
            return [Prompt(**row) for row in cur.fetchall()]

    def get_prompt(self, conn: Connection, prompt_id: int) -> Optional[Prompt]:
        """Get a prompt by ID."""
        with conn.cursor() as cur:
            cur.execute("SELECT * FROM prompts WHERE id = %s", (prompt_id,))
            row = cur.fetchone()
        return Prompt(**row) if row else None

    def get_default_prompt(self, conn: Connection) -> Optional[Prompt]:
        """Get the prompt flagged as default, if any."""
        with conn.cursor() as cur:
            cur.execute("SELECT * FROM prompts WHERE is_default LIMIT 1")
            row = cur.fetchone()
        return Prompt(**row) if row else None

    def create_prompt(
        self,
        conn: Connection,
        name: str,
        template: str,
        is_default: bool = False,
    ) -> Prompt:
        """Create a prompt; a new default replaces the previous one."""
        name = _validate_name(name)
        template = _validate_template(template)

        with conn.cursor() as cur:
            if is_default:
                cur.execute("UPDATE prompts SET is_default = FALSE WHERE is_default")
            cur.execute(
                """
                INSERT INTO prompts (name, template, is_default)
                VALUES (%s, %s, %s)
                RETURNING *
                """,
                (name, template, is_default),
            )
            row = cur.fetchone()

        conn.commit()
        return Prompt(**row)

    def update_prompt(
        self,
        conn: Connection,
        prompt_id: int,
        name: Optional[str] = None,
        template: Optional[str] = None,
        is_default: Optional[bool] = None,
    ) -> Prompt:
        """Update the given fields of a prompt."""
        assignments = []
        params: list = []
        if name is not None:
            assignments.append("name = %s")
            params.append(_validate_name(name))
        if template is not None:
            assignments.append("template = %s")
            params.append(_validate_template(template))
        if is_default is not None:
            assignments.append("is_default = %s")
            params.append(is_default)

        if not assignments:
            prompt = self.get_prompt(conn, prompt_id)
            if prompt is None:
                raise NotFoundError("Prompt not found")
            return prompt

        with conn.cursor() as cur:
            if is_default:
                cur.execute(
                    "UPDATE prompts SET is_default = FALSE WHERE is_default AND id <> %s",
                    (prompt_id,),
                )
            cur.execute(
                f"UPDATE prompts SET {', '.join(assignments)} WHERE id = %s RETURNING *",
                [*params, prompt_id],
            )
            row = cur.fetchone()

        if row is None:
            conn.rollback()
            raise NotFoundError("Prompt not found")

        conn.commit()
        return Prompt(**row)

    def delete_prompt(self, conn: Connection, prompt_id: int) -> None:
        """Delete a prompt."""
        with conn.cursor() as cur:
            cur.execute("DELETE FROM prompts WHERE id = %s", (prompt_id,))
            deleted = cur.rowcount
        conn.commit()
        if not deleted:
            raise NotFoundError("Prompt not found")
