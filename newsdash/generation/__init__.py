"""Share-draft generation."""

from .llm_provider import (
    AnthropicProvider,
    LLMProvider,
    MockLLMProvider,
    OpenAIProvider,
    get_llm_provider,
)
from .models import ArticleContext, GeneratedPost, GeneratePostInput
from .post import PostGenerator, article_context, build_prompt, replace_template_variables

__all__ = [
    "AnthropicProvider",
    "ArticleContext",
    "GeneratePostInput",
    "GeneratedPost",
    "LLMProvider",
    "MockLLMProvider",
    "OpenAIProvider",
    "PostGenerator",
    "article_context",
    "build_prompt",
    "get_llm_provider",
    "replace_template_variables",
]
