# routes/admin.py
from fastapi import APIRouter, HTTPException, Depends
from datetime import datetime, time
from typing import Optional
import logging
import re

from database import get_db
from routes import questions
from services.category_status import category_stats, find_category_questions
from services.quiz_config import get_config
from settings import CATEGORIES

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["admin"])

RESULT_FIELDS = {"_id": 0, "id": 1, "name": 1, "rollNumber": 1, "category": 1, "score": 1,
                 "percentage": 1, "marksObtained": 1, "totalMarks": 1, "totalQuestions": 1,
                 "passed": 1, "submittedAt": 1, "createdAt": 1}

SUBMITTED = {"submittedAt": {"$ne": None}}

# Stored questions without marks count as 1
MARKS_OR_ONE = {"$ifNull": ["$marks", 1]}


@router.get("/dashboard")
async def get_dashboard(db=Depends(get_db)):
    total_users = await db.users.count_documents({})
    total_questions = await db.questions.count_documents({})
    total_results = await db.users.count_documents(SUBMITTED)

    today = datetime.combine(datetime.utcnow().date(), time.min)
    today_results = await db.users.count_documents({"createdAt": {"$gte": today}})

    category_aggregates = await db.questions.aggregate([
        {
            "$group": {
                "_id": "$category",
                "totalMarks": {"$sum": MARKS_OR_ONE},
                "questionCount": {"$sum": 1},
                "averageMarks": {"$avg": MARKS_OR_ONE},
            }
        }
    ]).to_list(None)

    recent_results = await db.users.find({}, RESULT_FIELDS).sort("createdAt", -1).limit(5).to_list(None)

    category_status = {}
    for category in CATEGORIES:
        category_status[category] = category_stats(await find_category_questions(db, category))

    config = await get_config(db)
    return {
        "success": True,
        "stats": {
            "totalUsers": total_users,
            "totalQuestions": total_questions,
            "totalResults": total_results,
            "todayResults": today_results,
            "categoryStats": [
                {
                    "category": agg["_id"],
                    "totalMarks": agg["totalMarks"],
                    "questionCount": agg["questionCount"],
                    "averageMarks": round(agg["averageMarks"] or 0, 2),
                }
                for agg in category_aggregates
            ],
            "recentResults": recent_results,
            "categoryStatus": category_status,
            "config": {
                "quizTime": config["quizTime"],
                "passingPercentage": config["passingPercentage"],
                "totalQuestions": config["totalQuestions"],
            },
        },
        "timestamp": datetime.utcnow().isoformat(),
    }


@router.get("/statistics")
async def get_statistics(db=Depends(get_db)):
    results = await db.users.find(SUBMITTED, RESULT_FIELDS).to_list(None)

    attempts = len(results)
    passed = sum(1 for r in results if r.get("passed"))
    by_category = {category: {"attempts": 0, "passed": 0, "averagePercentage": 0} for category in CATEGORIES}
    for r in results:
        entry = by_category.setdefault(r["category"], {"attempts": 0, "passed": 0, "averagePercentage": 0})
        entry["attempts"] += 1
        entry["passed"] += 1 if r.get("passed") else 0
        entry["averagePercentage"] += r.get("percentage", 0)
    for entry in by_category.values():
        if entry["attempts"]:
            entry["averagePercentage"] = round(entry["averagePercentage"] / entry["attempts"], 2)

    return {
        "success": True,
        "statistics": {
            "totalAttempts": attempts,
            "uniqueStudents": len({r["rollNumber"] for r in results}),
            "averagePercentage": round(sum(r.get("percentage", 0) for r in results) / attempts, 2) if attempts else 0,
            "passed": passed,
            "failed": attempts - passed,
            "passRate": round(passed / attempts * 100, 2) if attempts else 0,
            "byCategory": by_category,
        },
    }


@router.get("/results")
async def get_results(search: Optional[str] = None, category: Optional[str] = None, db=Depends(get_db)):
    query = {}
    if category:
        query["category"] = category.lower()
    if search:
        pattern = re.escape(search.strip())
        query["$or"] = [
            {"name": {"$regex": pattern, "$options": "i"}},
            {"rollNumber": {"$regex": pattern, "$options": "i"}},
            {"category": {"$regex": pattern, "$options": "i"}},
        ]
    results = await db.users.find(query, RESULT_FIELDS).sort("createdAt", -1).to_list(None)
    return {"success": True, "results": results, "count": len(results)}


@router.get("/results/{result_id}")
async def get_result(result_id: str, db=Depends(get_db)):
    result = await db.users.find_one({"id": result_id}, RESULT_FIELDS)
    if not result:
        raise HTTPException(status_code=404, detail="Result not found")
    return {"success": True, "result": result}


@router.delete("/results/{result_id}")
async def delete_result(result_id: str, db=Depends(get_db)):
    deleted = await db.users.delete_one({"id": result_id})
    if deleted.deleted_count == 0:
        raise HTTPException(status_code=404, detail="Result not found")
    logger.info(f"Result {result_id} deleted")
    return {"success": True, "message": "Result deleted"}


router.add_api_route("/questions", questions.get_questions, methods=["GET"])
router.add_api_route("/questions/{question_id}", questions.delete_question, methods=["DELETE"])
