"""Prompt templates for every content generator."""

from typing import Dict, List, Optional

CONTENT_TYPE_PROMPTS = {
    "article": "Write a comprehensive, well-researched article",
    "tutorial": "Write a step-by-step tutorial with clear instructions and examples",
    "news": "Write a news article with facts, quotes, and current relevance",
    "video": "Write a detailed video script with timestamps and visual cues",
    "podcast": "Write a podcast episode script with engaging dialogue and segments",
}

DIFFICULTY_PROMPTS = {
    "beginner": "suitable for beginners with no prior knowledge",
    "intermediate": "for readers with some background knowledge",
    "advanced": "for expert-level audience with deep technical knowledge",
}

TUTORIAL_REQUIREMENTS = """
Additional Tutorial Requirements:
- Number each main step clearly
- Include prerequisites section
- Add troubleshooting tips
- Provide expected outcomes for each step
"""

NEWS_REQUIREMENTS = """
Additional News Requirements:
- Start with the most important information (inverted pyramid)
- Include relevant background context
- Use present tense for recent events
- Maintain journalistic objectivity
"""

TWEET_SYSTEM_PROMPT = "You are a copywriter who creates engaging tweets."
JOB_EXTRACTION_SYSTEM_PROMPT = "You extract structured job data in JSON format."


def build_blog_prompt(topic: str, keywords: List[str]) -> str:
    return f"""
Write a detailed SEO-friendly blog post about "{topic}".
Include the following keywords: {", ".join(keywords)}.
Use clear headings (H2/H3), bullet points, and a conclusion.
Make it engaging, professional, and optimized for Google SEO.
""".strip()


def build_article_prompt(
    title: str,
    description: str,
    keywords: List[str],
    content_type: str = "article",
    difficulty_level: str = "beginner",
) -> str:
    """
    Article prompt shaped by content type and audience level:
    - opening instruction picked from the content type
    - shared structure/SEO requirements
    - extra requirements for tutorials and news pieces
    - clean HTML output so the result can be stored as-is
    """
    intro = CONTENT_TYPE_PROMPTS.get(content_type, CONTENT_TYPE_PROMPTS["article"])
    audience = DIFFICULTY_PROMPTS.get(difficulty_level, DIFFICULTY_PROMPTS["beginner"])
    keyword_line = f"Keywords to include: {', '.join(keywords)}" if keywords else ""

    extra = ""
    if content_type == "tutorial":
        extra = TUTORIAL_REQUIREMENTS
    elif content_type == "news":
        extra = NEWS_REQUIREMENTS

    return f"""
{intro} about "{title}".

Description: {description}
{keyword_line}

Requirements:
- Target audience: {audience}
- Content type: {content_type}
- Use clear H1, H2, and H3 headings with proper hierarchy
- Include an engaging introduction that hooks the reader
- Provide detailed, actionable content with examples
- Add relevant bullet points and numbered lists where appropriate
- Include a strong conclusion with key takeaways
- Aim for 1500-2500 words for comprehensive coverage
- Write in a professional yet engaging tone
- Optimize for SEO with natural keyword integration
- Include relevant examples, case studies, or practical applications
{extra}
Format the response in clean HTML with proper heading tags (h1, h2, h3), paragraphs (p), lists (ul, ol), and emphasis tags (strong, em) where appropriate.
""".strip()


def build_tweet_prompt(content: str) -> str:
    return f"""
Convert the following job posting into 2-3 professional, catchy tweets.
- Keep each tweet under 280 characters.
- Use simple language and engaging tone.
- Add relevant hashtags and a call to action (like "Apply now!").
- Avoid repeating the same phrasing in every tweet.

Job Posting:
{content}
""".strip()


def build_job_tweets_prompt(content: str) -> str:
    return f"Turn this job posting into 3 short, catchy tweets:\n\n{content}"


def build_job_extraction_prompt(content: str) -> str:
    return (
        "Extract JSON with fields: title, location, skills (array), description from:"
        f"\n\n{content}"
    )


def format_news_item(article: Dict) -> str:
    return f"{article.get('title', '')}\n{article.get('description') or ''}"


def build_news_digest_prompt(articles: List[Dict]) -> str:
    items = "\n\n".join(
        f"{i}. {format_news_item(article)}" for i, article in enumerate(articles, start=1)
    )
    return f"""
Summarize the following news articles into concise, easy-to-read points (2-3 sentences each).
Focus on the key information only. Return results in Markdown format.

Articles:
{items}
""".strip()


def build_image_prompt(title: str, style: Optional[str] = None) -> str:
    style = style or "modern, minimalist, suitable for a blog header"
    return (
        f'Create a professional, clean illustration for an article titled "{title}". '
        f"Style: {style}."
    )
