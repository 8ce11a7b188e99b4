# settings.py
import os
from dotenv import load_dotenv

load_dotenv()

MONGODB_URI = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
MONGODB_DB = os.getenv("MONGODB_DB", "quiz_system")

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000").split(",")
    if origin.strip()
]

HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "5000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

CATEGORIES = ("mern", "react", "node", "mongodb", "express")
CATEGORY_LABELS = {
    "mern": "MERN Stack",
    "react": "React.js",
    "node": "Node.js",
    "mongodb": "MongoDB",
    "express": "Express.js",
}
DIFFICULTIES = ("easy", "medium", "hard")

# A category can be quizzed once its questions carry this many marks
READY_MARKS = 100
