# contentforge/generators.py
import json
import logging

from flask import Blueprint, jsonify, request

from contentforge import completion, db
from contentforge.models import JobPosting
from contentforge.prompts import (
    JOB_EXTRACTION_SYSTEM_PROMPT,
    TWEET_SYSTEM_PROMPT,
    build_blog_prompt,
    build_job_extraction_prompt,
    build_job_tweets_prompt,
    build_tweet_prompt,
)
from contentforge.utils.text_utils import parse_keywords, split_tweets

logger = logging.getLogger('contentforge.generators')

generators_bp = Blueprint('generators', __name__)


def _required_text(data, key):
    """Stripped string field of a JSON object body, or None when absent or not text."""
    if not isinstance(data, dict):
        return None
    value = data.get(key)
    if not isinstance(value, str):
        return None
    return value.strip() or None


@generators_bp.route('/generate', methods=['POST'])
def generate_blog():
    """
    Generate an SEO blog post from a topic and keyword list
    """
    data = request.get_json(silent=True)
    topic = _required_text(data, 'topic')
    if not topic:
        return jsonify({'error': "Topic is required"}), 400
    try:
        keywords = parse_keywords(data.get('keywords'))
    except ValueError as e:
        return jsonify({'error': str(e)}), 400

    try:
        logger.info(f"Generating blog for topic: {topic}")
        blog = completion.complete(build_blog_prompt(topic, keywords), temperature=0.7)
        return jsonify({'blog': blog})
    except Exception as e:
        logger.error(f"Failed to generate blog: {e}", exc_info=True)
        return jsonify({'error': "Failed to generate blog"}), 500


@generators_bp.route('/generate-tweet', methods=['POST'])
def generate_tweets():
    content = _required_text(request.get_json(silent=True), 'content')
    if not content:
        return jsonify({'error': "Content is required"}), 400

    try:
        raw_output = completion.complete(build_tweet_prompt(content), temperature=0.7, max_tokens=500)
        return jsonify({'tweets': split_tweets(raw_output)})
    except Exception as e:
        logger.error(f"Failed to generate tweets: {e}", exc_info=True)
        return jsonify({'error': "Failed to generate tweets"}), 500


def _extract_job_data(content):
    raw = completion.complete(
        build_job_extraction_prompt(content),
        system_prompt=JOB_EXTRACTION_SYSTEM_PROMPT,
        json_mode=True,
    )
    job_data = json.loads(raw or '{}')
    if not isinstance(job_data, dict):
        raise ValueError("Job data is not a JSON object")

    skills = job_data.get('skills') or []
    if isinstance(skills, str):
        skills = parse_keywords(skills)
    return {
        'title': job_data.get('title'),
        'location': job_data.get('location'),
        'skills': skills,
        'description': job_data.get('description'),
    }


@generators_bp.route('/generate-job-post', methods=['POST'])
def generate_job_post():
    """
    Turn a raw job posting into tweets and a stored, structured JobPosting
    """
    content = _required_text(request.get_json(silent=True), 'content')
    if not content:
        return jsonify({'error': "Content is required"}), 400

    try:
        tweets = split_tweets(completion.complete(
            build_job_tweets_prompt(content),
            system_prompt=TWEET_SYSTEM_PROMPT,
        ))
        job = JobPosting(**_extract_job_data(content))
        db.session.add(job)
        db.session.commit()
        logger.info(f"Stored job posting ID={job.id}: {job.title}")
        return jsonify({'tweets': tweets, 'jobData': job.to_dict()})
    except Exception as e:
        db.session.rollback()
        logger.error(f"Failed to generate job post: {e}", exc_info=True)
        return jsonify({'error': "Failed to generate job post"}), 500


@generators_bp.route('/jobs', methods=['GET'])
def list_jobs():
    page = max(request.args.get('page', 1, type=int), 1)
    limit = min(max(request.args.get('limit', 20, type=int), 1), 50)
    try:
        query = JobPosting.query.order_by(JobPosting.created_at.desc(), JobPosting.id.desc())
        total = query.count()
        jobs = query.offset((page - 1) * limit).limit(limit).all()
        return jsonify({'jobs': [job.to_dict() for job in jobs], 'total': total, 'page': page})
    except Exception as e:
        logger.error(f"Failed to fetch job postings: {e}", exc_info=True)
        return jsonify({'error': "Failed to fetch job postings"}), 500


@generators_bp.route('/jobs/<int:job_id>', methods=['GET'])
def get_job(job_id):
    try:
        job = JobPosting.query.filter_by(id=job_id).first()
        if job is None:
            return jsonify({'error': "Job posting not found"}), 404
        return jsonify({'job': job.to_dict()})
    except Exception as e:
        logger.error(f"Failed to fetch job posting {job_id}: {e}", exc_info=True)
        return jsonify({'error': "Failed to fetch job posting"}), 500
