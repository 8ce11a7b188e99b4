# routes/users.py
from fastapi import APIRouter, HTTPException, Depends
import logging
from pymongo.errors import DuplicateKeyError

from database import get_db, new_id, utcnow
from models.question import public_question
from models.user import QuizSubmission, UserRegister, UserResult
from services.category_status import cached_category_ready, find_category_questions, total_marks
from services.quiz_config import get_config
from services.scoring import score_quiz
from settings import READY_MARKS

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("/register")
async def register_user(user: UserRegister, db=Depends(get_db)):
    name = (user.name or "").strip()
    roll_number = (user.rollNumber or "").strip()
    category = (user.category or "").strip().lower()
    if not name or not roll_number or not category:
        raise HTTPException(status_code=400, detail="Name, roll number and category are required")

    if not await cached_category_ready(db, category):
        raise HTTPException(
            status_code=400,
            detail=f"The {category.upper()} category is not yet available for quizzes. Please select another category.",
        )

    if await db.users.find_one({"rollNumber": roll_number}):
        raise HTTPException(status_code=400, detail="Roll number already exists")

    user_dict = UserResult(
        id=new_id(), name=name, rollNumber=roll_number, category=category, createdAt=utcnow()
    ).model_dump()
    try:
        await db.users.insert_one(user_dict.copy())
    except DuplicateKeyError:
        raise HTTPException(status_code=400, detail="Roll number already exists")

    logger.info(f"Registered {roll_number} for {category}")
    return {
        "success": True,
        "message": "Registration successful",
        "user": {
            "id": user_dict["id"],
            "name": name,
            "rollNumber": roll_number,
            "category": category,
        },
    }


@router.get("/questions/{category}")
async def get_quiz_questions(category: str, db=Depends(get_db)):
    category = category.lower()
    if not await cached_category_ready(db, category):
        raise HTTPException(
            status_code=400,
            detail=f"The {category.upper()} category is not yet available. It needs {READY_MARKS} total marks worth of questions.",
        )

    config = await get_config(db)
    questions = await find_category_questions(db, category)
    return {
        "success": True,
        "questions": [public_question(q) for q in questions[:config["totalQuestions"]]],
        "timeLimit": config["quizTime"],
        "totalQuestions": config["totalQuestions"],
        "categoryInfo": {
            "name": category.upper(),
            "totalQuestions": len(questions),
            "totalMarks": total_marks(questions),
        },
    }


@router.post("/submit")
async def submit_quiz(submission: QuizSubmission, db=Depends(get_db)):
    user = await db.users.find_one({"id": submission.userId}, {"_id": 0})
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    config = await get_config(db)
    questions = await find_category_questions(db, user["category"])
    result = score_quiz(questions, submission.answers, config["totalQuestions"], config["passingPercentage"])

    # A resubmission overwrites the stored result
    if user.get("submittedAt"):
        logger.warning(f"{user['rollNumber']} resubmitted; previous result overwritten")
    await db.users.update_one(
        {"id": user["id"]},
        {"$set": {**result, "submittedAt": utcnow()}},
    )
    logger.info(
        f"Submission from {user['rollNumber']}: {result['marksObtained']}/{result['totalMarks']} "
        f"marks, passed={result['passed']}"
    )

    return {
        "success": True,
        "score": result["score"],
        "marksObtained": result["marksObtained"],
        "totalMarks": result["totalMarks"],
        "percentage": f"{result['percentage']:.2f}",
        "totalQuestions": result["totalQuestions"],
        "passed": result["passed"],
        "category": user["category"],
        "grade": "PASS" if result["passed"] else "FAIL",
    }
