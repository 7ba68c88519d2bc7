# contentforge/news.py
import logging

from flask import Blueprint, current_app, jsonify, request

from contentforge import completion, db, news_client
from contentforge.models import NewsSummary
from contentforge.prompts import build_news_digest_prompt

logger = logging.getLogger('contentforge.news')

news_bp = Blueprint('news', __name__)


def _selected_articles():
    """Articles picked in the news view; None when the payload is unusable."""
    data = request.get_json(silent=True)
    articles = data.get('articles') if isinstance(data, dict) else None
    if not isinstance(articles, list) or not articles:
        return None
    if not all(isinstance(a, dict) and a.get('title') for a in articles):
        return None
    return articles


def _source_name(article):
    source = article.get('source')
    if isinstance(source, dict):
        return source.get('name')
    return source


@news_bp.route('/news', methods=['GET'])
def get_news():
    query = request.args.get('q') or current_app.config.get('NEWS_DEFAULT_QUERY')
    from_date = request.args.get('from') or None
    try:
        return jsonify(news_client.search_news(query, from_date))
    except Exception as e:
        logger.error(f"Failed to fetch news: {e}", exc_info=True)
        return jsonify({'error': "Failed to fetch news"}), 500


@news_bp.route('/summarize', methods=['POST'])
def summarize():
    """
    Summarise the selected articles into one Markdown digest and store it for review
    """
    articles = _selected_articles()
    if articles is None:
        return jsonify({'error': "A non-empty list of articles with titles is required"}), 400

    try:
        summaries = completion.complete(build_news_digest_prompt(articles), temperature=0.5)

        sources = []
        for article in articles:
            name = _source_name(article)
            if name and name not in sources:
                sources.append(name)
        digest = NewsSummary(
            title=f"Summary of {len(articles)} article{'s' if len(articles) != 1 else ''}",
            source=", ".join(sources)[:300] or None,
            summary=summaries,
            provider='openai',
        )
        db.session.add(digest)
        db.session.commit()

        return jsonify({'summaries': summaries, 'summaryId': digest.id})
    except Exception as e:
        db.session.rollback()
        logger.error(f"Failed to summarize: {e}", exc_info=True)
        return jsonify({'error': "Failed to summarize"}), 500


@news_bp.route('/hf-summarize', methods=['POST'])
def hf_summarize():
    articles = _selected_articles()
    if articles is None:
        return jsonify({'error': "A non-empty list of articles with titles is required"}), 400

    try:
        summaries = news_client.summarize_with_huggingface(articles)
        for article, summary in zip(articles, summaries):
            db.session.add(NewsSummary(
                title=article['title'],
                source=_source_name(article),
                url=article.get('url'),
                summary=summary,
                provider='huggingface',
            ))
        db.session.commit()
        return jsonify({'summaries': summaries})
    except Exception as e:
        db.session.rollback()
        logger.error(f"Hugging Face summarization failed: {e}", exc_info=True)
        return jsonify({'error': "HF summarization failed"}), 500


@news_bp.route('/news/summaries', methods=['GET'])
def list_summaries():
    try:
        query = NewsSummary.query
        approved = request.args.get('approved')
        if approved in ('true', 'false'):
            query = query.filter(NewsSummary.approved.is_(approved == 'true'))
        summaries = query.order_by(NewsSummary.created_at.desc(), NewsSummary.id.desc()).all()
        return jsonify({'summaries': [s.to_dict() for s in summaries]})
    except Exception as e:
        logger.error(f"Failed to fetch news summaries: {e}", exc_info=True)
        return jsonify({'error': "Failed to fetch news summaries"}), 500


@news_bp.route('/news/summaries/<int:summary_id>/approve', methods=['POST'])
def approve_summary(summary_id):
    try:
        summary = NewsSummary.query.filter_by(id=summary_id).first()
        if summary is None:
            return jsonify({'error': "Summary not found"}), 404

        summary.approved = True
        db.session.commit()
        logger.info(f"Approved news summary ID={summary.id}")
        return jsonify({'summary': summary.to_dict()})
    except Exception as e:
        db.session.rollback()
        logger.error(f"Failed to approve news summary {summary_id}: {e}", exc_info=True)
        return jsonify({'error': "Failed to approve summary"}), 500
