import logging

from utils.logging_config import setup_logging, silence_sql_loggers

# Initialize centralized logging configuration
setup_logging()

from app import main

# Must run after the app import: SQLAlchemy configures its loggers on engine creation
silence_sql_loggers()
logging.info("SQL loggers silenced (aiosqlite, sqlalchemy.*)")

if __name__ == '__main__':
    main()
