# contentforge/run.py
import os

from contentforge import create_app, db
from contentforge.config import Config
from contentforge.utils.logging_utils import setup_logging

# Create the application
app = create_app()

# Set up logging
loggers = setup_logging(app, log_level=Config.LOG_LEVEL_VALUE)
logger = loggers['app_logger']

# Fresh SQLite databases get their tables here; other databases use `flask db upgrade`
if app.config['SQLALCHEMY_DATABASE_URI'].startswith('sqlite'):
    with app.app_context():
        db.create_all()

if __name__ == "__main__":
    logger.info("Starting content generation service")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")))
