# -*- coding: utf-8 -*-
"""
Интеграционные тесты маршрутов API v1 поверх хранилища в памяти
"""


class TestCatalogApi:
    def test_list_topics(self, client):
        response = client.get("/api/v1/topics")

        assert response.status_code == 200
        assert [t["id"] for t in response.json()] == ["T1", "T2"]

    def test_unknown_topic_is_404(self, client):
        response = client.get("/api/v1/topics/nope")

        assert response.status_code == 404
        assert "nope" in response.json()["detail"]

    def test_get_quiz(self, client):
        response = client.get("/api/v1/quizzes/QZ1")

        assert response.status_code == 200
        assert len(response.json()["questions"]) == 2

    def test_list_resources(self, client):
        response = client.get("/api/v1/resources")

        assert response.status_code == 200
        assert len(response.json()) == 5

    def test_empty_collections(self, client):
        assert client.get("/api/v1/challenges").json() == []
        assert client.get("/api/v1/recommendations").json() == []


class TestActivitiesApi:
    def test_submit_quiz(self, client):
        response = client.post(
            "/api/v1/quizzes/QZ1/submit",
            json={
                "user_id": "user-1",
                "answers": [
                    {"question_id": "Q1", "selected_option": "A"},
                    {"question_id": "Q2", "selected_option": "B"},
                ],
            },
        )

        assert response.status_code == 200
        body = response.json()
        assert body["total_questions"] == 2
        assert body["xp_earned"] == 20
        assert body["correct_answers"] == ["Q1", "Q2"]
        assert body["feedback"].startswith("Excellent")

    def test_submit_quiz_without_answers_is_422(self, client):
        response = client.post(
            "/api/v1/quizzes/QZ1/submit", json={"user_id": "user-1", "answers": []}
        )

        assert response.status_code == 422

    def test_complete_topic_then_progress(self, client):
        response = client.post("/api/v1/topics/T1/complete", json={"user_id": "user-1"})

        assert response.status_code == 200
        assert response.json() == {
            "message": "Topic completed successfully",
            "xp_earned": 50,
        }

        progress = client.get("/api/v1/progress/user-1").json()
        assert progress["topics_completed"] == 1
        assert progress["total_topics"] == 2
        assert progress["total_quizzes"] == 3
        assert progress["total_resources"] == 5
        assert progress["overall_progress"] == 10.0

    def test_complete_resource(self, client):
        response = client.post("/api/v1/resources/complete", json={"user_id": "user-1"})

        assert response.status_code == 200
        assert response.json()["message"] == "Resource completed successfully"

    def test_feedback(self, client):
        response = client.post(
            "/api/v1/feedback",
            json={"user_id": "user-1", "topic_id": "T1", "rating": 4, "comment": "ok"},
        )

        assert response.status_code == 201
        assert response.json()["xp_earned"] == 10

    def test_feedback_bad_rating_is_422(self, client):
        response = client.post(
            "/api/v1/feedback",
            json={"user_id": "user-1", "topic_id": "T1", "rating": 0},
        )

        assert response.status_code == 422

    def test_start_game_and_conflict(self, client):
        first = client.post("/api/v1/game/start", json={"user_id": "new-user"})
        second = client.post("/api/v1/game/start", json={"user_id": "new-user"})

        assert first.status_code == 201
        assert first.json() == {"message": "Success"}
        assert second.status_code == 409

        progress = client.get("/api/v1/progress/new-user").json()
        assert progress["overall_progress"] == 0.0

    def test_activity_for_unknown_user_is_404(self, client):
        response = client.post("/api/v1/resources/complete", json={"user_id": "ghost"})

        assert response.status_code == 404

    def test_progress_for_unknown_user_is_404(self, client):
        assert client.get("/api/v1/progress/ghost").status_code == 404


class TestHealthApi:
    def test_health(self, client):
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "database": "lerning_test"}
