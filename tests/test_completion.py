import openai
import pytest

from contentforge import completion, image_generator
from contentforge.completion import CompletionError


def test_complete_returns_first_choice(app, fake_openai):
    fake_openai.replies.append("hello")

    assert completion.complete("Say hello", temperature=0.2) == "hello"

    call = fake_openai.chat_calls[0]
    assert call == {
        'model': "gpt-4o-mini",
        'messages': [{'role': 'user', 'content': "Say hello"}],
        'temperature': 0.2,
    }


def test_complete_with_system_prompt_and_json_mode(app, fake_openai):
    fake_openai.replies.append("{}")

    completion.complete("Extract", system_prompt="You extract JSON.", json_mode=True, max_tokens=50)

    call = fake_openai.chat_calls[0]
    assert call['messages'][0] == {'role': 'system', 'content': "You extract JSON."}
    assert call['response_format'] == {'type': 'json_object'}
    assert call['max_tokens'] == 50


def test_complete_uses_configured_model(app, fake_openai):
    app.config['OPENAI_MODEL'] = "gpt-4o"
    completion.complete("x")
    assert fake_openai.chat_calls[0]['model'] == "gpt-4o"


def test_complete_without_api_key(app, fake_openai):
    app.config['OPENAI_API_KEY'] = None
    with pytest.raises(CompletionError, match="not configured"):
        completion.complete("x")
    assert fake_openai.chat_calls == []


def test_complete_empty_reply(app, fake_openai):
    fake_openai.replies.append("")
    with pytest.raises(CompletionError, match="No content"):
        completion.complete("x")


def test_complete_wraps_api_errors(app, fake_openai):
    fake_openai.replies.append(openai.OpenAIError("quota exceeded"))
    with pytest.raises(CompletionError, match="quota exceeded"):
        completion.complete("x")


def test_generate_image_url(app, fake_openai):
    assert image_generator.generate_image_url("Flask tips") == fake_openai.image_url

    call = fake_openai.image_calls[0]
    assert call['size'] == "1024x1024"
    assert call['quality'] == "standard"
    assert call['n'] == 1
    assert 'titled "Flask tips"' in call['prompt']


def test_generate_image_url_swallows_errors(app, fake_openai):
    fake_openai.image_error = RuntimeError("boom")
    assert image_generator.generate_image_url("Flask tips") is None


def test_generate_image_url_without_key(app, fake_openai):
    app.config['OPENAI_API_KEY'] = ""
    assert image_generator.generate_image_url("Flask tips") is None
    assert fake_openai.image_calls == []
