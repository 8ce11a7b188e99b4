# database.py
from motor.motor_asyncio import AsyncIOMotorClient
from datetime import datetime
from bson import ObjectId
import logging

from settings import MONGODB_URI, MONGODB_DB
from models.admin import Admin

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

client = AsyncIOMotorClient(MONGODB_URI)
db = client[MONGODB_DB]


def get_db():
    return db


def new_id() -> str:
    return str(ObjectId())


def utcnow() -> datetime:
    return datetime.utcnow()


async def init_db():
    await db.users.create_index("id", unique=True)
    await db.users.create_index("rollNumber", unique=True)
    await db.questions.create_index("id", unique=True)
    await db.questions.create_index("category")
    await db.admins.create_index("username", unique=True)

    # Seed the default admin record; credentials are not used for authorization
    if await db.admins.count_documents({}) == 0:
        admin = Admin(id=new_id()).model_dump()
        await db.admins.insert_one(admin)
        logger.info(f"Default admin '{admin['username']}' created")
