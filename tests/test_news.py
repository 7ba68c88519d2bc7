import pytest
import requests

from contentforge import news_client
from contentforge.models import NewsSummary
from tests.conftest import FakeResponse

ARTICLES = [
    {'title': "Tesla opens factory", 'description': "New plant in Texas",
     'url': "https://news.test/1", 'source': {'name': "Reuters"}},
    {'title': "EV sales rise", 'description': None,
     'url': "https://news.test/2", 'source': {'name': "Bloomberg"}},
]


@pytest.fixture
def http_calls(monkeypatch):
    calls = []

    def fake_get(url, params=None, timeout=None):
        calls.append(('GET', url, params))
        return FakeResponse({'status': 'ok', 'totalResults': 1, 'articles': ARTICLES[:1]})

    monkeypatch.setattr(news_client.requests, 'get', fake_get)
    return calls


def test_news_search_passthrough(client, http_calls):
    response = client.get('/api/news?q=electric&from=2025-07-18')

    assert response.status_code == 200
    assert response.get_json()['articles'][0]['title'] == "Tesla opens factory"
    method, url, params = http_calls[0]
    assert url == "https://newsapi.org/v2/everything"
    assert params == {'q': "electric", 'from': "2025-07-18", 'sortBy': 'publishedAt', 'apiKey': "test-news-key"}


def test_news_search_default_query(client, http_calls):
    client.get('/api/news')
    params = http_calls[0][2]
    assert params['q'] == "tesla"
    assert 'from' not in params


def test_news_search_transport_error(client, monkeypatch):
    def boom(*args, **kwargs):
        raise requests.exceptions.ConnectionError("down")

    monkeypatch.setattr(news_client.requests, 'get', boom)

    response = client.get('/api/news')
    assert response.status_code == 500
    assert response.get_json() == {'error': "Failed to fetch news"}


def test_summarize_stores_digest(client, fake_openai):
    fake_openai.replies.append("- Tesla opened a plant.\n- EV sales are up.")

    response = client.post('/api/summarize', json={'articles': ARTICLES})

    assert response.status_code == 200
    body = response.get_json()
    assert body['summaries'].startswith("- Tesla")
    call = fake_openai.chat_calls[0]
    assert call['temperature'] == 0.5
    assert "1. Tesla opens factory\nNew plant in Texas" in call['messages'][0]['content']
    assert call['messages'][0]['content'].endswith("2. EV sales rise")

    digest = NewsSummary.query.filter_by(id=body['summaryId']).one()
    assert digest.title == "Summary of 2 articles"
    assert digest.source == "Reuters, Bloomberg"
    assert digest.provider == 'openai'
    assert digest.approved is False


@pytest.mark.parametrize("payload", [{}, {'articles': []}, {'articles': [{'description': "no title"}]}, ARTICLES])
def test_summarize_rejects_bad_payload(client, fake_openai, payload):
    assert client.post('/api/summarize', json=payload).status_code == 400
    assert fake_openai.chat_calls == []


def test_hf_summarize_per_article_with_fallback(client, monkeypatch):
    calls = []
    replies = [FakeResponse([{'summary_text': "Tesla built a plant."}]), FakeResponse({'error': "loading"}, 503)]

    def fake_post(url, headers=None, json=None, timeout=None):
        calls.append((url, headers, json))
        return replies.pop(0)

    monkeypatch.setattr(news_client.requests, 'post', fake_post)

    response = client.post('/api/hf-summarize', json={'articles': ARTICLES})

    assert response.get_json() == {'summaries': ["Tesla built a plant.", "Could not summarize"]}
    url, headers, body = calls[0]
    assert url == "https://api-inference.huggingface.co/models/facebook/bart-large-cnn"
    assert headers['Authorization'] == "Bearer test-hf-key"
    assert body == {'inputs': "Tesla opens factory\nNew plant in Texas"}
    assert calls[1][2] == {'inputs': "EV sales rise\n"}

    stored = NewsSummary.query.order_by(NewsSummary.id).all()
    assert [(s.title, s.source, s.provider) for s in stored] == [
        ("Tesla opens factory", "Reuters", 'huggingface'),
        ("EV sales rise", "Bloomberg", 'huggingface'),
    ]


def test_hf_summarize_missing_key(client, app):
    app.config['HF_API_KEY'] = None
    response = client.post('/api/hf-summarize', json={'articles': ARTICLES})
    assert response.status_code == 500
    assert response.get_json() == {'error': "HF summarization failed"}


def test_list_and_approve_summaries(client, app):
    from contentforge import db
    pending = NewsSummary(title="Pending", summary="text")
    done = NewsSummary(title="Done", summary="text", approved=True)
    db.session.add_all([pending, done])
    db.session.commit()

    unapproved = client.get('/api/news/summaries?approved=false').get_json()['summaries']
    assert [s['title'] for s in unapproved] == ["Pending"]

    response = client.post(f'/api/news/summaries/{pending.id}/approve')
    assert response.get_json()['summary']['approved'] is True
    assert len(client.get('/api/news/summaries?approved=true').get_json()['summaries']) == 2
    assert len(client.get('/api/news/summaries').get_json()['summaries']) == 2
    assert client.post('/api/news/summaries/999/approve').status_code == 404


def test_approve_summary_database_error_returns_json_500(client, app, monkeypatch):
    from contentforge import db
    summary = NewsSummary(title="Pending", summary="text")
    db.session.add(summary)
    db.session.commit()
    summary_id = summary.id

    def failing_commit():
        raise RuntimeError("database is locked")

    monkeypatch.setattr(db.session, 'commit', failing_commit)

    response = client.post(f'/api/news/summaries/{summary_id}/approve')
    assert response.status_code == 500
    assert response.get_json() == {'error': "Failed to approve summary"}
