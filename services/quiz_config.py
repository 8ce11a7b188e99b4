# services/quiz_config.py
import logging

from database import new_id, utcnow
from models.config import QuizConfig

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def get_config(db) -> dict:
    """Return the singleton config document, creating the default one if missing."""
    config = await db.config.find_one({}, {"_id": 0})
    if config:
        return config

    now = utcnow()
    config = QuizConfig(id=new_id(), createdAt=now, updatedAt=now).model_dump()
    await db.config.insert_one(config.copy())
    logger.info("Default config initialized")
    return config
