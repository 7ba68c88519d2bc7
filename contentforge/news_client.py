# contentforge/news_client.py
import logging
from typing import Any, Dict, List, Optional

import requests
from flask import current_app

from contentforge.prompts import format_news_item

logger = logging.getLogger('contentforge.external.news_client')

HF_INFERENCE_URL = "https://api-inference.huggingface.co/models/{model}"
SUMMARY_FALLBACK = "Could not summarize"


class NewsClientError(Exception):
    """Raised when a news or summarisation provider cannot be reached."""


def search_news(query: str, from_date: Optional[str] = None) -> Dict[str, Any]:
    """
    Search NewsAPI for articles matching a query, newest first

    Args:
        query: Free text search query
        from_date: Optional ISO date (YYYY-MM-DD) for the oldest article

    Returns:
        The decoded NewsAPI response
    """
    api_key = current_app.config.get('NEWS_API_KEY')
    if not api_key:
        raise NewsClientError("News API key not configured")

    params = {
        'q': query,
        'sortBy': 'publishedAt',
        'apiKey': api_key,
    }
    if from_date:
        params['from'] = from_date

    logger.info(f"Searching news for '{query}' (from={from_date})")
    try:
        response = requests.get(
            current_app.config.get('NEWS_API_URL'),
            params=params,
            timeout=current_app.config.get('HTTP_TIMEOUT', 30)
        )
        return response.json()
    except (requests.exceptions.RequestException, ValueError) as e:
        logger.error(f"Error fetching news: {e}")
        raise NewsClientError(f"Failed to fetch news: {e}") from e


def summarize_with_huggingface(articles: List[Dict[str, Any]]) -> List[str]:
    """
    Summarise each article with the Hugging Face inference API, one request per article

    Articles the model cannot summarise get a fallback text instead of failing the batch.
    """
    api_key = current_app.config.get('HF_API_KEY')
    if not api_key:
        raise NewsClientError("Hugging Face API key not configured")

    url = HF_INFERENCE_URL.format(model=current_app.config.get('HF_SUMMARY_MODEL'))
    headers = {
        'Authorization': f"Bearer {api_key}",
        'Content-Type': 'application/json',
    }

    summaries = []
    for article in articles:
        try:
            response = requests.post(
                url,
                headers=headers,
                json={'inputs': format_news_item(article)},
                timeout=current_app.config.get('HTTP_TIMEOUT', 30)
            )
            data = response.json()
        except requests.exceptions.RequestException as e:
            logger.error(f"Error calling Hugging Face: {e}")
            raise NewsClientError(f"Hugging Face request failed: {e}") from e
        except ValueError:
            logger.warning(f"Non-JSON response from Hugging Face (status {response.status_code})")
            data = None

        summary = None
        if isinstance(data, list) and data and isinstance(data[0], dict):
            summary = data[0].get('summary_text')
        if not summary:
            logger.warning(f"No summary for article: {article.get('title')}")
        summaries.append(summary or SUMMARY_FALLBACK)

    return summaries
