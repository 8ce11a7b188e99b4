# main.py
import sys
import os
import logging
from datetime import datetime
from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from pymongo.errors import PyMongoError

sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from settings import CORS_ORIGINS, HOST, PORT, LOG_LEVEL
from database import get_db, init_db
from errors import register_exception_handlers
from routes import admin, config, questions, users
from services.category_status import refresh_category_status
from services.quiz_config import get_config

logging.basicConfig(level=logging.INFO)
logging.getLogger().setLevel(LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Quiz System API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(config.router)
app.include_router(questions.router)
app.include_router(users.router)
app.include_router(admin.router)


@app.get("/")
async def root():
    return {"message": "Quiz API Running", "status": "OK", "timestamp": datetime.utcnow().isoformat()}


@app.get("/api/health")
async def health(db=Depends(get_db)):
    try:
        await db.command("ping")
        status = "Connected"
    except PyMongoError as e:
        logger.warning(f"Health check failed: {str(e)}")
        status = "Disconnected"
    return {"success": True, "db": status, "timestamp": datetime.utcnow().isoformat()}


@app.on_event("startup")
async def startup_event():
    db = get_db()
    await init_db()
    await get_config(db)
    await refresh_category_status(db)
    logger.info("Database initialized")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host=HOST, port=PORT, reload=True)
