"""Tests for share-draft generation."""

from datetime import datetime, timezone

import pytest

from newsdash.generation import (
    ArticleContext,
    GeneratePostInput,
    MockLLMProvider,
    OpenAIProvider,
    PostGenerator,
    article_context,
    build_prompt,
    get_llm_provider,
    replace_template_variables,
)
from newsdash.models import ArticleListItem


@pytest.fixture
def context():
    return ArticleContext(
        title="Rust in the kernel",
        description="A look at the progress",
        link="https://example.com/rust",
        published_at="Jun 10, 2025",
        matched_tags=["Rust", "Linux"],
    )


class TestTemplates:
    def test_replaces_all_variables(self, context):
        template = "{{title}} | {{description}} | {{link}} | {{publishedAt}} | {{matchedTags}}"

        filled = replace_template_variables(template, context)

        assert filled == (
            "Rust in the kernel | A look at the progress | https://example.com/rust"
            " | Jun 10, 2025 | Rust, Linux"
        )

    def test_repeated_and_unknown_placeholders(self, context):
        filled = replace_template_variables("{{title}} {{title}} {{author}}", context)

        assert filled == "Rust in the kernel Rust in the kernel {{author}}"

    def test_missing_values_become_empty(self):
        bare = ArticleContext(title="T", link="https://example.com/t")

        assert replace_template_variables("[{{description}}][{{publishedAt}}][{{matchedTags}}]", bare) == "[][][]"

    def test_build_prompt_embeds_template_and_details(self, context):
        prompt = build_prompt("Share: {{title}}", context)

        assert "Share: Rust in the kernel" in prompt
        assert "- Link: https://example.com/rust" in prompt
        assert "- Tags: Rust, Linux" in prompt
        assert prompt.endswith("Output only the post text.")

    def test_build_prompt_placeholders_for_missing(self):
        prompt = build_prompt("x", ArticleContext(title="T", link="https://example.com/t"))

        assert "- Description: N/A" in prompt
        assert "- Published: N/A" in prompt
        assert "- Tags: N/A" in prompt


def test_article_context_from_list_item():
    item = ArticleListItem(
        id=5,
        title="Rust",
        link="https://example.com/rust",
        source_id=1,
        published_at=datetime(2025, 6, 10, 4, 0, tzinfo=timezone.utc),
        tags=["Rust"],
    )

    ctx = article_context(item)

    assert ctx.published_at == "Jun 10, 2025"
    assert ctx.matched_tags == ["Rust"]
    assert ctx.description is None


def test_generate_post_with_mock_provider(context):
    provider = MockLLMProvider()

    post = PostGenerator(provider).generate_post(GeneratePostInput(template="Hi {{title}}", article=context))

    assert post.provider == "mock"
    assert post.text.startswith("[Mock draft]")
    assert len(provider.calls) == 1
    assert "Hi Rust in the kernel" in provider.calls[0]
    assert post.model == "mock"
    assert post.tokens_used == 100
    assert provider.get_usage_stats()["api_calls"] == 1


class TestGetLLMProvider:
    def test_missing_key_falls_back_to_mock(self):
        assert isinstance(get_llm_provider({"provider": "openai"}), MockLLMProvider)

    def test_unknown_provider_falls_back_to_mock(self):
        assert isinstance(get_llm_provider({"provider": "cohere", "api_key": "k"}), MockLLMProvider)

    def test_openai_with_key(self):
        provider = get_llm_provider({"provider": "OpenAI", "api_key": "sk-test"})

        assert isinstance(provider, OpenAIProvider)
        assert provider.model == "gpt-4o-mini"
