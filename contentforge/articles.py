# contentforge/articles.py
import logging
import math
import time
from datetime import datetime

from flask import Blueprint, current_app, jsonify, request
from sqlalchemy import func, or_

from contentforge import completion, db, image_generator
from contentforge.models import Article
from contentforge.prompts import CONTENT_TYPE_PROMPTS, DIFFICULTY_PROMPTS, build_article_prompt
from contentforge.utils.text_utils import (
    build_meta_title,
    calculate_read_time,
    count_words,
    extract_meta_from_content,
    generate_slug,
    is_uuid,
    parse_keywords,
)

logger = logging.getLogger('contentforge.articles')

articles_bp = Blueprint('articles', __name__)

STATUSES = ('published', 'draft', 'archived')
SORT_FIELDS = ('created_at', 'updated_at', 'title', 'word_count', 'read_time_minutes', 'publish_date')
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 50


class ValidationError(Exception):
    pass


def unique_slug(title):
    """
    Slug for a new article; a taken slug gets a millisecond timestamp suffix.
    Best effort only: two concurrent creations can still pick the same slug.
    """
    slug = generate_slug(title)
    if Article.query.filter_by(slug=slug).first() is not None:
        slug = f"{slug}-{int(time.time() * 1000)}"
    return slug


def _string(payload, key, default=None):
    value = payload.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        raise ValidationError(f"{key} must be a string")
    return value


def _flag(payload, key, default):
    value = payload.get(key)
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() in ('true', 'false'):
        return value.lower() == 'true'
    raise ValidationError(f"{key} must be true or false")


def _validate_payload(payload, article=None):
    """
    Check the editor form payload. Fields left out of an edit keep the stored values;
    fields left out of a new article get the creation defaults.
    """
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")

    title = _string(payload, 'title', article.title if article else '').strip()
    description = _string(payload, 'description', article.description if article else '').strip()
    if not title:
        raise ValidationError("Article title is required")
    if not description:
        raise ValidationError("Article description is required")

    content_type = _string(payload, 'contentType') or (article.content_type if article else 'article')
    difficulty = _string(payload, 'difficultyLevel') or (article.difficulty_level if article else 'beginner')
    status = _string(payload, 'status') or (article.status if article else 'published')
    if content_type not in CONTENT_TYPE_PROMPTS:
        raise ValidationError(f"Unsupported content type: {content_type}")
    if difficulty not in DIFFICULTY_PROMPTS:
        raise ValidationError(f"Unsupported difficulty level: {difficulty}")
    if status not in STATUSES:
        raise ValidationError(f"Unsupported status: {status}")

    try:
        keywords = parse_keywords(payload.get('keywords'))
    except ValueError as e:
        raise ValidationError(str(e)) from e

    return {
        'title': title,
        'description': description,
        'keywords': keywords,
        'content_type': content_type,
        'difficulty_level': difficulty,
        'status': status,
        'featured': _flag(payload, 'featured', article.featured if article else False),
        'generate_image': _flag(payload, 'generateImage', False),
        'custom_image_url': _string(payload, 'customImageUrl') or None,
        'content': _string(payload, 'content') or None,
        'excerpt': _string(payload, 'excerpt') or None,
        'meta_title': _string(payload, 'metaTitle') or None,
        'meta_description': _string(payload, 'metaDescription') or None,
    }


def _generate_content(fields):
    prompt = build_article_prompt(
        fields['title'],
        fields['description'],
        fields['keywords'],
        fields['content_type'],
        fields['difficulty_level'],
    )
    return completion.complete(prompt, temperature=0.7, max_tokens=3000)


def _apply_content(article, content, fields):
    """Store the body and the metrics/SEO fields derived from it."""
    article.content = content
    article.word_count = count_words(content)
    article.read_time_minutes = calculate_read_time(article.word_count)
    meta = extract_meta_from_content(content)
    article.excerpt = fields['excerpt'] or meta['excerpt']
    article.meta_description = fields['meta_description'] or meta['meta_description']
    article.meta_title = fields['meta_title'] or build_meta_title(fields['title'])


def _resolve_image(fields):
    if fields['custom_image_url']:
        return fields['custom_image_url']
    if fields['generate_image']:
        return image_generator.generate_image_url(fields['title'])
    return None


def create_article(fields):
    slug = unique_slug(fields['title'])
    # New articles are always generated; a supplied body is only used for edits
    content = _generate_content(fields)

    now = datetime.utcnow()
    article = Article(
        title=fields['title'],
        url=f"{current_app.config['SITE_URL'].rstrip('/')}/articles/{slug}",
        description=fields['description'],
        image_url=_resolve_image(fields),
        content_type=fields['content_type'],
        difficulty_level=fields['difficulty_level'],
        slug=slug,
        status='published',
        featured=fields['featured'],
        trending=False,
        created_at=now,
        updated_at=now,
    )
    _apply_content(article, content, fields)

    db.session.add(article)
    db.session.commit()
    logger.info(f"Created article ID={article.id} slug={article.slug} ({article.word_count} words)")
    return article


def update_article(article, fields):
    content = fields['content'] or _generate_content(fields)

    article.title = fields['title']
    article.description = fields['description']
    article.content_type = fields['content_type']
    article.difficulty_level = fields['difficulty_level']
    article.status = fields['status']
    article.featured = fields['featured']
    image_url = _resolve_image(fields)
    if image_url:
        article.image_url = image_url
    _apply_content(article, content, fields)
    article.updated_at = datetime.utcnow()

    db.session.commit()
    logger.info(f"Updated article ID={article.id}")
    return article


@articles_bp.route('/article', methods=['POST'])
def save_article():
    """
    Generate a new article, or save edits to an existing one when `id` is given
    """
    payload = request.get_json(silent=True)
    try:
        article = None
        article_id = payload.get('id') if isinstance(payload, dict) else None
        if article_id:
            article = Article.query.filter_by(id=str(article_id)).first()
            if article is None:
                return jsonify({'error': "Article not found"}), 404

        fields = _validate_payload(payload, article)
        if article is not None:
            article = update_article(article, fields)
        else:
            article = create_article(fields)

        return jsonify({'success': True, 'article': article.to_editor_dict()})
    except ValidationError as e:
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        db.session.rollback()
        logger.error(f"Failed to generate and save article: {e}", exc_info=True)
        return jsonify({'error': str(e) or "Failed to generate and save article"}), 500


def _int_arg(name, default):
    try:
        value = int(request.args.get(name, ''))
    except ValueError:
        return default
    return value if value > 0 else default


def _article_filters(filters):
    conditions = []
    if filters['status']:
        conditions.append(Article.status == filters['status'])
    if filters['contentType']:
        conditions.append(Article.content_type == filters['contentType'])
    if filters['difficulty']:
        conditions.append(Article.difficulty_level == filters['difficulty'])
    if filters['featured']:
        conditions.append(Article.featured.is_(True))
    if filters['trending']:
        conditions.append(Article.trending.is_(True))
    if filters['search']:
        pattern = f"%{filters['search']}%"
        conditions.append(or_(Article.title.ilike(pattern), Article.description.ilike(pattern)))
    return conditions


def _round(value):
    return int(math.floor(float(value) + 0.5)) if value else 0


def _article_stats(conditions):
    total, avg_words, avg_read = db.session.query(
        func.count(Article.id),
        func.avg(func.coalesce(Article.word_count, 0)),
        func.avg(func.coalesce(Article.read_time_minutes, 0)),
    ).filter(*conditions).one()

    def breakdown(column):
        rows = (
            db.session.query(column, func.count(Article.id))
            .filter(*conditions)
            .filter(column.isnot(None))
            .group_by(column)
            .all()
        )
        return {value: count for value, count in rows}

    return {
        'total': total,
        'avgWordCount': _round(avg_words),
        'avgReadTime': _round(avg_read),
        'contentTypes': breakdown(Article.content_type),
        'difficultyLevels': breakdown(Article.difficulty_level),
    }


@articles_bp.route('/article/get', methods=['GET'])
def list_articles():
    """
    Paginated article listing with filters, sorting and aggregate stats
    """
    try:
        page = _int_arg('page', 1)
        limit = min(_int_arg('limit', DEFAULT_PAGE_SIZE), MAX_PAGE_SIZE)
        filters = {
            'status': request.args.get('status') or 'published',
            'contentType': request.args.get('content_type') or None,
            'difficulty': request.args.get('difficulty') or None,
            'featured': request.args.get('featured') == 'true',
            'trending': request.args.get('trending') == 'true',
            'search': request.args.get('search') or None,
            'sortBy': request.args.get('sort_by') or 'created_at',
            'sortOrder': request.args.get('sort_order') or 'desc',
        }

        conditions = _article_filters(filters)
        query = Article.query.filter(*conditions)
        total_items = query.count()

        if filters['sortBy'] in SORT_FIELDS:
            column = getattr(Article, filters['sortBy'])
            ordering = column.asc() if filters['sortOrder'] == 'asc' else column.desc()
            query = query.order_by(ordering.nulls_last())

        articles = query.offset((page - 1) * limit).limit(limit).all()
        total_pages = math.ceil(total_items / limit)

        return jsonify({
            'success': True,
            'data': {
                'articles': [a.to_dict(include_content=False) for a in articles],
                'pagination': {
                    'currentPage': page,
                    'totalPages': total_pages,
                    'totalItems': total_items,
                    'itemsPerPage': limit,
                    'hasNextPage': page < total_pages,
                    'hasPrevPage': page > 1,
                },
                'stats': _article_stats(conditions),
                'filters': filters,
            }
        })
    except Exception as e:
        logger.error(f"Failed to fetch articles: {e}", exc_info=True)
        return jsonify({'error': str(e) or "Failed to fetch articles"}), 500


@articles_bp.route('/article/get/<identifier>', methods=['GET'])
def get_article(identifier):
    """
    Fetch one article by UUID or, for anything else, by slug
    """
    try:
        if is_uuid(identifier):
            article = Article.query.filter_by(id=identifier.lower()).first()
        else:
            article = Article.query.filter_by(slug=identifier).first()

        if article is None:
            return jsonify({'success': False, 'error': "Article not found"}), 404

        return jsonify({'success': True, 'data': {'article': article.to_dict()}})
    except Exception as e:
        logger.error(f"Failed to fetch article {identifier}: {e}", exc_info=True)
        return jsonify({'success': False, 'error': "Failed to fetch article"}), 500
