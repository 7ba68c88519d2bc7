# contentforge/models.py
import uuid
from datetime import datetime

from contentforge import db


def _isoformat(value):
    return value.isoformat() if value else None


class Article(db.Model):
    __tablename__ = 'articles'

    id                = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title             = db.Column(db.String(300), nullable=False)
    url               = db.Column(db.String(500), nullable=True)
    description       = db.Column(db.Text, nullable=False)
    content           = db.Column(db.Text, nullable=False)
    excerpt           = db.Column(db.Text, nullable=True)
    image_url         = db.Column(db.String(1000), nullable=True)
    word_count        = db.Column(db.Integer, default=0)
    read_time_minutes = db.Column(db.Integer, default=0)
    content_type      = db.Column(db.String(20), default='article', index=True)
    difficulty_level  = db.Column(db.String(20), default='beginner', index=True)
    slug              = db.Column(db.String(120), unique=True, index=True, nullable=False)
    meta_title        = db.Column(db.String(300), nullable=True)
    meta_description  = db.Column(db.String(300), nullable=True)
    status            = db.Column(db.String(20), default='published', index=True)
    featured          = db.Column(db.Boolean, default=False)
    trending          = db.Column(db.Boolean, default=False)
    created_at        = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at        = db.Column(db.DateTime, default=datetime.utcnow)
    publish_date      = db.Column(db.DateTime, nullable=True)

    def to_dict(self, include_content=True):
        """Database-shaped representation used by the list and fetch endpoints."""
        data = {
            'id': self.id,
            'title': self.title,
            'url': self.url,
            'description': self.description,
            'excerpt': self.excerpt,
            'image_url': self.image_url,
            'word_count': self.word_count,
            'read_time_minutes': self.read_time_minutes,
            'content_type': self.content_type,
            'difficulty_level': self.difficulty_level,
            'slug': self.slug,
            'meta_title': self.meta_title,
            'meta_description': self.meta_description,
            'status': self.status,
            'featured': self.featured,
            'trending': self.trending,
            'created_at': _isoformat(self.created_at),
            'updated_at': _isoformat(self.updated_at),
            'publish_date': _isoformat(self.publish_date),
        }
        if include_content:
            data['content'] = self.content
        return data

    def to_editor_dict(self):
        """camelCase representation returned to the article editor form."""
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'content': self.content,
            'excerpt': self.excerpt,
            'slug': self.slug,
            'url': self.url,
            'wordCount': self.word_count,
            'readTime': self.read_time_minutes,
            'contentType': self.content_type,
            'difficultyLevel': self.difficulty_level,
            'imageUrl': self.image_url,
            'featured': self.featured,
            'metaTitle': self.meta_title,
            'metaDescription': self.meta_description,
            'status': self.status,
            'createdAt': _isoformat(self.created_at),
            'updatedAt': _isoformat(self.updated_at),
        }


class JobPosting(db.Model):
    __tablename__ = 'job_postings'

    id          = db.Column(db.Integer, primary_key=True)
    title       = db.Column(db.String(300), nullable=True)
    location    = db.Column(db.String(300), nullable=True)
    skills      = db.Column(db.JSON, default=list)
    description = db.Column(db.Text, nullable=True)
    created_at  = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'location': self.location,
            'skills': self.skills or [],
            'description': self.description,
            'created_at': _isoformat(self.created_at),
        }


class NewsSummary(db.Model):
    __tablename__ = 'news_summaries'

    id         = db.Column(db.Integer, primary_key=True)
    title      = db.Column(db.String(500), nullable=False)
    source     = db.Column(db.String(300), nullable=True)
    url        = db.Column(db.String(1000), nullable=True)
    summary    = db.Column(db.Text, nullable=False)
    provider   = db.Column(db.String(20), default='openai')
    approved   = db.Column(db.Boolean, default=False, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'source': self.source,
            'url': self.url,
            'summary': self.summary,
            'provider': self.provider,
            'approved': self.approved,
            'created_at': _isoformat(self.created_at),
        }
