# contentforge/health.py
import datetime

from flask import Blueprint, jsonify, current_app

from contentforge import __version__
from contentforge.models import Article, JobPosting, NewsSummary

health_bp = Blueprint('health', __name__)


@health_bp.route('/')
def health_check():
    """
    Health endpoint: database reachability, record counts and configured integrations
    """
    try:
        status = {
            'status': 'healthy',
            'timestamp': datetime.datetime.now().isoformat(),
            'database': {
                'connected': True,
                'articles_count': Article.query.count(),
                'job_postings_count': JobPosting.query.count(),
                'news_summaries_count': NewsSummary.query.count()
            },
            'config': {
                'openai_api_configured': bool(current_app.config.get('OPENAI_API_KEY')),
                'news_api_configured': bool(current_app.config.get('NEWS_API_KEY')),
                'huggingface_configured': bool(current_app.config.get('HF_API_KEY'))
            },
            'version': __version__
        }
        return jsonify(status)
    except Exception as e:
        current_app.logger.error(f"Health check failed: {e}", exc_info=True)
        return jsonify({
            'status': 'unhealthy',
            'error': str(e),
            'timestamp': datetime.datetime.now().isoformat()
        }), 500
