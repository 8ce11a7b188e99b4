import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from database import get_db
from main import app


@pytest.fixture
def db():
    return AsyncMongoMockClient()["quiz_system_test"]


@pytest.fixture
def client(db):
    app.dependency_overrides[get_db] = lambda: db
    yield TestClient(app)
    app.dependency_overrides.clear()


def make_question(category="react", marks=10, number=0, difficulty="medium"):
    return {
        "category": category,
        "questionText": f"Question {number}?",
        "options": [
            {"text": f"Right {number}", "isCorrect": True},
            {"text": f"Wrong {number}"},
        ],
        "marks": marks,
        "difficulty": difficulty,
    }


def add_questions(client, category="react", count=10, marks=10, start=0):
    created = []
    for number in range(start, start + count):
        response = client.post("/api/questions/", json=make_question(category, marks, number))
        assert response.status_code == 200, response.json()
        created.append(response.json()["question"])
    return created


def register(client, roll_number="R-001", category="react", name="Ayesha"):
    return client.post(
        "/api/users/register",
        json={"name": name, "rollNumber": roll_number, "category": category},
    )
