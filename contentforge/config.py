# contentforge/config.py
import os
import logging

from dotenv import load_dotenv

load_dotenv()


class Config:
    # Database settings
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL', 'sqlite:///contentforge.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # OpenAI settings
    OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
    OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
    OPENAI_TIMEOUT = float(os.getenv("OPENAI_TIMEOUT", "120"))

    # DALL-E settings
    DALLE_MODEL = os.getenv("DALLE_MODEL", "dall-e-3")
    DALLE_SIZE = os.getenv("DALLE_SIZE", "1024x1024")
    DALLE_QUALITY = os.getenv("DALLE_QUALITY", "standard")

    # News search and summarisation
    NEWS_API_KEY = os.getenv("NEWS_API_KEY")
    NEWS_API_URL = os.getenv("NEWS_API_URL", "https://newsapi.org/v2/everything")
    NEWS_DEFAULT_QUERY = os.getenv("NEWS_DEFAULT_QUERY", "tesla")
    HF_API_KEY = os.getenv("HF_API_KEY")
    HF_SUMMARY_MODEL = os.getenv("HF_SUMMARY_MODEL", "facebook/bart-large-cnn")
    HTTP_TIMEOUT = int(os.getenv("HTTP_TIMEOUT", "30"))

    # Public URL used to build article links
    SITE_URL = os.getenv("SITE_URL", "https://yourdomain.com")

    # Logging settings
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_LEVEL_VALUE = getattr(logging, LOG_LEVEL.upper(), logging.INFO)
    LOG_DIR = os.getenv("LOG_DIR", "logs")


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    OPENAI_API_KEY = "test-openai-key"
    NEWS_API_KEY = "test-news-key"
    HF_API_KEY = "test-hf-key"
    SITE_URL = "https://example.test"
