from datetime import datetime
from types import SimpleNamespace

import openai
import pytest

from contentforge import create_app, db
from contentforge.config import TestConfig
from contentforge.models import Article


class FakeOpenAI:
    """Stands in for openai.OpenAI; replies are consumed in order."""

    def __init__(self):
        self.replies = []
        self.chat_calls = []
        self.image_calls = []
        self.image_url = "https://images.example.test/header.png"
        self.image_error = None

    def __call__(self, api_key=None, timeout=None):
        return SimpleNamespace(
            chat=SimpleNamespace(completions=SimpleNamespace(create=self._create)),
            images=SimpleNamespace(generate=self._generate),
        )

    def _create(self, **kwargs):
        self.chat_calls.append(kwargs)
        reply = self.replies.pop(0) if self.replies else "<p>Generated text</p>"
        if isinstance(reply, Exception):
            raise reply
        message = SimpleNamespace(content=reply)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])

    def _generate(self, **kwargs):
        self.image_calls.append(kwargs)
        if self.image_error is not None:
            raise self.image_error
        return SimpleNamespace(data=[SimpleNamespace(url=self.image_url)])


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self._payload = payload
        self.status_code = status_code

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def fake_openai(monkeypatch):
    fake = FakeOpenAI()
    monkeypatch.setattr(openai, "OpenAI", fake)
    return fake


@pytest.fixture
def make_article(app):
    counter = {'n': 0}

    def _make(**overrides):
        counter['n'] += 1
        n = counter['n']
        fields = {
            'title': f"Article {n}",
            'description': f"Description {n}",
            'content': f"<p>Body {n}</p>",
            'slug': f"article-{n}",
            'word_count': 100,
            'read_time_minutes': 1,
            'content_type': 'article',
            'difficulty_level': 'beginner',
            'status': 'published',
            'created_at': datetime(2025, 1, n % 28 + 1),
        }
        fields.update(overrides)
        article = Article(**fields)
        db.session.add(article)
        db.session.commit()
        return article

    return _make
