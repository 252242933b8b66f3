"""Slack-style share drafts for articles."""

from typing import Optional

import pendulum

from ..models import ArticleListItem
from .llm_provider import LLMProvider
from .models import ArticleContext, GeneratedPost, GeneratePostInput

TEMPLATE_VARIABLES = ("title", "description", "link", "publishedAt", "matchedTags")


def replace_template_variables(template: str, article: ArticleContext) -> str:
    """Fill ``{{variable}}`` placeholders; missing values become empty strings."""
    values = {
        "title": article.title,
        "description": article.description or "",
        "link": article.link,
        "publishedAt": article.published_at or "",
        "matchedTags": ", ".join(article.matched_tags or []),
    }
    result = template
    for name in TEMPLATE_VARIABLES:
        result = result.replace("{{" + name + "}}", values[name])
    return result


def build_prompt(template: str, article: ArticleContext) -> str:
    """Wrap the filled template with article details and output instructions."""
    filled_template = replace_template_variables(template, article)
    tags = ", ".join(article.matched_tags) if article.matched_tags is not None else "N/A"

    return f"""You are a helpful assistant that creates Slack posts for sharing tech articles.

Based on the following template and article information, generate a concise and engaging Slack post.

Template:
{filled_template}

Article Information:
- Title: {article.title}
- Description: {article.description or "N/A"}
- Link: {article.link}
- Published: {article.published_at or "N/A"}
- Tags: {tags}

Generate a Slack-friendly post that follows the template style. Keep it concise and professional.
Do not include any markdown formatting. Output only the post text."""


def article_context(article: ArticleListItem) -> ArticleContext:
    """Build template context from a stored article."""
    published_at: Optional[str] = None
    if article.published_at:
        published_at = pendulum.instance(article.published_at).format("MMM DD, YYYY")

    return ArticleContext(
        title=article.title,
        description=article.description,
        link=article.link,
        published_at=published_at,
        matched_tags=list(article.tags),
    )


class PostGenerator:
    """Generate share drafts with an LLM provider."""

    def __init__(self, llm_provider: LLMProvider) -> None:
        self.llm_provider = llm_provider

    def generate_post(self, post_input: GeneratePostInput) -> GeneratedPost:
        """Generate a draft for one article."""
        prompt = build_prompt(post_input.template, post_input.article)
        text = self.llm_provider.generate_text(prompt)
        llm_stats = self.llm_provider.get_usage_stats()

        return GeneratedPost(
            text=text,
            provider=self.llm_provider.name,
            model=llm_stats.get("model"),
            tokens_used=llm_stats.get("total_tokens", 0),
        )
