# routes/config.py
from fastapi import APIRouter, Depends, HTTPException
import logging

from database import get_db, utcnow
from models.config import ConfigUpdate
from services.quiz_config import get_config

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/config", tags=["config"])


def _config_view(config: dict) -> dict:
    return {
        "quizTime": config["quizTime"],
        "passingPercentage": config["passingPercentage"],
        "totalQuestions": config["totalQuestions"],
        "maxMarks": config["maxMarks"],
        "categoryStatus": config.get("categoryStatus", {}),
        "updatedAt": config.get("updatedAt"),
    }


@router.get("/")
async def read_config(db=Depends(get_db)):
    config = await get_config(db)
    return {"success": True, "config": _config_view(config)}


@router.post("/")
@router.put("/")
async def update_config(update: ConfigUpdate, db=Depends(get_db)):
    if update.missing_fields():
        raise HTTPException(400, "All fields are required")

    error = update.range_error()
    if error:
        raise HTTPException(400, error)

    config = await get_config(db)
    changes = update.model_dump()
    changes["updatedAt"] = utcnow()
    await db.config.update_one({"id": config["id"]}, {"$set": changes})
    config.update(changes)

    logger.info(
        f"Config updated: quizTime={update.quizTime}, passingPercentage={update.passingPercentage}, "
        f"totalQuestions={update.totalQuestions}, maxMarks={update.maxMarks}"
    )
    return {"success": True, "message": "Configuration updated successfully", "config": _config_view(config)}
