# services/category_status.py
"""Category readiness.

A category is ready to be quizzed once the marks of its questions add up to
READY_MARKS. The per-category result is cached on the config document under
``categoryStatus`` and refreshed after every question mutation.
"""
import logging
from pymongo.errors import PyMongoError

from database import utcnow
from services.quiz_config import get_config
from settings import CATEGORIES, READY_MARKS

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def question_marks(question: dict) -> int:
    return question.get("marks") or 1


def total_marks(questions) -> int:
    return sum(question_marks(q) for q in questions)


def is_ready(marks: int) -> bool:
    return marks >= READY_MARKS


def remaining_marks(marks: int) -> int:
    return READY_MARKS - marks


def fits_marks_ceiling(current_marks: int, new_marks: int) -> bool:
    return current_marks + new_marks <= READY_MARKS


def category_stats(questions) -> dict:
    marks = total_marks(questions)
    count = len(questions)
    return {
        "totalMarks": marks,
        "questionCount": count,
        "isReady": is_ready(marks),
        "percentage": marks / READY_MARKS * 100,
        "remainingMarks": remaining_marks(marks),
        "averageMarks": round(marks / count, 2) if count else 0,
    }


async def find_category_questions(db, category: str):
    # Stored order; the quiz handed out and the quiz scored must agree
    return await db.questions.find({"category": category}, {"_id": 0}).sort(
        [("createdAt", 1), ("id", 1)]
    ).to_list(None)


async def category_total_marks(db, category: str) -> int:
    return total_marks(await find_category_questions(db, category))


async def check_category_ready(db, category: str) -> bool:
    return is_ready(await category_total_marks(db, category))


async def refresh_category_status(db):
    """Recompute readiness for every category and store it on the config.

    Read-then-write with no locking. Returns None if the store write fails.
    """
    status = {}
    try:
        for category in CATEGORIES:
            status[category] = await check_category_ready(db, category)

        config = await get_config(db)
        await db.config.update_one(
            {"id": config["id"]},
            {"$set": {"categoryStatus": status, "updatedAt": utcnow()}},
        )
    except PyMongoError as e:
        logger.error(f"Error updating category status: {str(e)}")
        return None

    logger.info(f"Category status refreshed: {status}")
    return status


async def cached_category_ready(db, category: str) -> bool:
    config = await get_config(db)
    return bool(config.get("categoryStatus", {}).get(category, False))
