import pytest
from httpx import ASGITransport, AsyncClient

from main import app
from conftest import add_questions, register


def submit(client, user_id, answers):
    return client.post("/api/users/submit", json={"userId": user_id, "answers": answers})


def seed_results(client):
    add_questions(client, "react", count=10, marks=10)
    questions = client.get("/api/users/questions/react").json()["questions"]
    right = {q["id"]: q["options"][0]["text"] for q in questions}

    passed = register(client, "R-001", name="Ayesha Khan").json()["user"]
    failed = register(client, "R-002", name="Bilal Ahmed").json()["user"]
    register(client, "R-003", name="Not Submitted")
    submit(client, passed["id"], right)
    submit(client, failed["id"], {})
    return passed, failed


def test_results_listing_and_search(client):
    seed_results(client)

    body = client.get("/api/admin/results").json()
    assert body["count"] == 3
    assert all("_id" not in r for r in body["results"])

    found = client.get("/api/admin/results", params={"search": "bilal"}).json()["results"]
    assert [r["rollNumber"] for r in found] == ["R-002"]

    assert client.get("/api/admin/results", params={"category": "node"}).json()["count"] == 0


def test_delete_result(client):
    passed, _ = seed_results(client)

    response = client.delete(f"/api/admin/results/{passed['id']}")
    assert response.status_code == 200
    assert client.get(f"/api/admin/results/{passed['id']}").status_code == 404
    assert client.delete(f"/api/admin/results/{passed['id']}").status_code == 404


def test_statistics(client):
    seed_results(client)

    stats = client.get("/api/admin/statistics").json()["statistics"]

    assert stats["totalAttempts"] == 2
    assert stats["uniqueStudents"] == 2
    assert stats["passed"] == 1
    assert stats["failed"] == 1
    assert stats["passRate"] == 50.0
    assert stats["averagePercentage"] == 50.0
    assert stats["byCategory"]["react"] == {"attempts": 2, "passed": 1, "averagePercentage": 50.0}


def test_dashboard(client):
    seed_results(client)

    stats = client.get("/api/admin/dashboard").json()["stats"]

    assert stats["totalUsers"] == 3
    assert stats["totalQuestions"] == 10
    assert stats["totalResults"] == 2
    assert stats["todayResults"] == 3
    assert len(stats["recentResults"]) == 3
    assert stats["categoryStatus"]["react"]["isReady"] is True
    assert stats["categoryStats"] == [
        {"category": "react", "totalMarks": 100, "questionCount": 10, "averageMarks": 10.0}
    ]
    assert stats["config"]["passingPercentage"] == 40


def test_admin_question_routes(client):
    created = add_questions(client, "node", count=2, marks=2)

    assert client.get("/api/admin/questions").json()["count"] == 2
    assert client.delete(f"/api/admin/questions/{created[0]['id']}").status_code == 200
    assert client.get("/api/admin/questions").json()["count"] == 1


@pytest.mark.asyncio
async def test_dashboard_counts_missing_marks_as_one(client, db):
    await db.questions.insert_many([
        {"id": "legacy-1", "category": "node", "questionText": "Old?", "options": []},
        {"id": "legacy-2", "category": "node", "questionText": "Older?", "options": [], "marks": 3},
    ])

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http:
        stats = (await http.get("/api/admin/dashboard")).json()["stats"]

    assert stats["categoryStats"] == [
        {"category": "node", "totalMarks": 4, "questionCount": 2, "averageMarks": 2.0}
    ]
    assert stats["categoryStatus"]["node"]["totalMarks"] == 4
