"""
talentmatch: skill-based matching of talent and marketplace postings.
"""

from loguru import logger

__app_name__ = "talentmatch"
__version__ = "0.1.0"

# Silent when used as a library until the application calls setup_logging()
logger.disable(__app_name__)
