# routes/questions.py
from fastapi import APIRouter, Depends, HTTPException
from typing import Optional
from datetime import datetime

import logging

from database import get_db, new_id, utcnow
from errors import QuizAPIError
from models.question import QuestionCreate, QuestionUpdate, has_correct_option
from services.category_status import (
    category_stats,
    find_category_questions,
    fits_marks_ceiling,
    is_ready,
    refresh_category_status,
    remaining_marks,
    total_marks,
)
from settings import CATEGORIES, CATEGORY_LABELS, READY_MARKS

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/questions", tags=["questions"])


@router.post("/")
async def add_question(question: QuestionCreate, db=Depends(get_db)):
    if len(question.options) < 2:
        raise HTTPException(400, "At least 2 options are required")

    options = [option.model_dump() for option in question.options]
    if not has_correct_option(options):
        raise HTTPException(400, "Please mark one option as correct")

    current_marks = total_marks(await find_category_questions(db, question.category))
    if not fits_marks_ceiling(current_marks, question.marks):
        remaining = remaining_marks(current_marks)
        logger.info(f"Rejected question for {question.category}: {current_marks}+{question.marks} marks")
        raise QuizAPIError(
            400,
            f'Cannot add question. Category "{question.category}" already has '
            f"{current_marks}/{READY_MARKS} marks. Only {remaining} marks remaining.",
            currentMarks=current_marks,
            remainingMarks=remaining,
        )

    question_dict = question.model_dump()
    question_dict["options"] = options
    question_dict["id"] = new_id()
    question_dict["createdAt"] = utcnow()
    question_dict["updatedAt"] = question_dict["createdAt"]

    await db.questions.insert_one(question_dict.copy())
    logger.info(f"Question {question_dict['id']} added to {question.category} ({question.marks} marks)")

    await refresh_category_status(db)

    new_marks = current_marks + question.marks
    return {
        "success": True,
        "message": "Question added successfully!",
        "question": question_dict,
        "categoryStatus": {
            "currentMarks": new_marks,
            "isReady": is_ready(new_marks),
            "remaining": remaining_marks(new_marks),
        },
    }


@router.get("/")
async def get_questions(category: Optional[str] = None, db=Depends(get_db)):
    query = {"category": category.lower()} if category else {}
    questions = await db.questions.find(query, {"_id": 0}).sort("createdAt", -1).to_list(None)
    return {"success": True, "questions": questions, "count": len(questions)}


@router.get("/category/{category}")
async def get_category_questions(category: str, db=Depends(get_db)):
    category = category.lower()
    questions = await find_category_questions(db, category)
    marks = total_marks(questions)

    if not is_ready(marks):
        raise HTTPException(
            400,
            f"The {category.upper()} category is not yet available. "
            f"It needs {READY_MARKS} total marks worth of questions.",
        )

    return {
        "success": True,
        "questions": questions,
        "categoryInfo": {
            "name": category,
            "questionCount": len(questions),
            "totalMarks": marks,
            "isReady": True,
        },
    }


@router.get("/available-categories")
async def get_available_categories(db=Depends(get_db)):
    available = []
    for category in CATEGORIES:
        questions = await find_category_questions(db, category)
        marks = total_marks(questions)
        if is_ready(marks):
            available.append({
                "value": category,
                "label": CATEGORY_LABELS[category],
                "isReady": True,
                "questionCount": len(questions),
                "totalMarks": marks,
            })
    return {"success": True, "categories": available, "totalAvailable": len(available)}


@router.get("/category-stats")
async def get_category_stats(db=Depends(get_db)):
    stats = {}
    for category in CATEGORIES:
        stats[category] = category_stats(await find_category_questions(db, category))
    return {"success": True, "stats": stats, "timestamp": datetime.utcnow().isoformat()}


@router.get("/check-category/{category}")
async def check_category(category: str, db=Depends(get_db)):
    category = category.lower()
    questions = await find_category_questions(db, category)
    marks = total_marks(questions)
    return {
        "success": True,
        "category": category,
        "isReady": is_ready(marks),
        "totalMarks": marks,
        "questionCount": len(questions),
        "remaining": remaining_marks(marks),
    }


@router.post("/update-category-status")
async def update_category_status(db=Depends(get_db)):
    status = await refresh_category_status(db)
    if status is None:
        raise HTTPException(500, "Failed to update category status")
    return {"success": True, "message": "Category status updated successfully", "categoryStatus": status}


@router.get("/{question_id}")
async def get_question_by_id(question_id: str, db=Depends(get_db)):
    question = await db.questions.find_one({"id": question_id}, {"_id": 0})
    if not question:
        raise HTTPException(status_code=404, detail="Question not found")
    return {"success": True, "question": question}


@router.put("/{question_id}")
async def update_question(question_id: str, update: QuestionUpdate, db=Depends(get_db)):
    question = await db.questions.find_one({"id": question_id}, {"_id": 0})
    if not question:
        raise HTTPException(status_code=404, detail="Question not found")

    update_data = update.model_dump(exclude_unset=True, exclude_none=True)
    if "options" in update_data and not has_correct_option(update_data["options"]):
        raise HTTPException(400, "Please mark one option as correct")
    update_data["updatedAt"] = utcnow()

    await db.questions.update_one({"id": question_id}, {"$set": update_data})
    question.update(update_data)
    logger.info(f"Question {question_id} updated: {sorted(update_data)}")

    await refresh_category_status(db)
    return {"success": True, "message": "Question updated successfully!", "question": question}


@router.delete("/{question_id}")
async def delete_question(question_id: str, db=Depends(get_db)):
    question = await db.questions.find_one({"id": question_id}, {"_id": 0})
    if not question:
        raise HTTPException(status_code=404, detail="Question not found")

    await db.questions.delete_one({"id": question_id})
    logger.info(f"Question {question_id} deleted from {question['category']}")

    await refresh_category_status(db)
    return {
        "success": True,
        "message": "Question deleted successfully!",
        "deletedQuestion": {
            "id": question["id"],
            "category": question["category"],
            "questionText": question["questionText"],
        },
    }
