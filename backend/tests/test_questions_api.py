"""Tests for question endpoints, including /api/questions/practice."""

from datetime import UTC, datetime, timedelta

from tests.helpers.auth import STUDENT_ID, make_access_token
from tests.helpers.fakes import BASE_TIME, make_question

PRACTICE_URL = "/api/questions/practice"


class TestPracticeAuthAndValidation:
    def test_unauthenticated_returns_401(self, client):
        response = client.get(PRACTICE_URL, params={"question_type_id": "qt-1"})

        assert response.status_code == 401
        assert response.json()["error"] == "Unauthorized"

    def test_expired_token_returns_401(self, client):
        token = make_access_token(STUDENT_ID, expires_in=timedelta(minutes=-5))

        response = client.get(
            PRACTICE_URL,
            params={"question_type_id": "qt-1"},
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 401

    def test_missing_question_type_returns_400(self, client, auth_headers_student):
        response = client.get(PRACTICE_URL, headers=auth_headers_student)

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "question_type_id is required"
        assert body["error_code"] == "INVALID_REQUEST"

    def test_non_integer_count_returns_400(self, client, auth_headers_student):
        response = client.get(
            PRACTICE_URL,
            params={"question_type_id": "qt-1", "count": "many"},
            headers=auth_headers_student,
        )

        assert response.status_code == 400
        assert response.json()["error"] == "count must be an integer"

    def test_session_cookie_accepted(self, client, repo):
        repo.add_questions(make_question("q1"))
        client.cookies.set("sb-access-token", make_access_token(STUDENT_ID))

        response = client.get(PRACTICE_URL, params={"question_type_id": "qt-1"})

        assert response.status_code == 200
        assert [q["id"] for q in response.json()] == ["q1"]


class TestPracticeSelection:
    def test_returns_band_matched_questions(self, client, repo, auth_headers_student):
        repo.set_score(STUDENT_ID, "qt-1", 85)
        repo.add_questions(
            make_question("easy", difficulty=1, age_minutes=1),
            make_question("hard", difficulty=5, age_minutes=2),
            make_question("harder", difficulty=4, age_minutes=3),
        )

        response = client.get(
            PRACTICE_URL,
            params={"question_type_id": "qt-1", "count": 2},
            headers=auth_headers_student,
        )

        assert response.status_code == 200
        assert [q["id"] for q in response.json()] == ["hard", "harder"]

    def test_count_absent_or_zero_returns_one(self, client, repo, auth_headers_student):
        repo.add_questions(*[make_question(f"q{i}", age_minutes=i) for i in range(4)])

        for params in ({"question_type_id": "qt-1"}, {"question_type_id": "qt-1", "count": 0}):
            response = client.get(PRACTICE_URL, params=params, headers=auth_headers_student)
            assert response.status_code == 200
            assert len(response.json()) == 1

    def test_recently_attempted_questions_skipped(self, client, repo, auth_headers_student):
        repo.add_questions(make_question("seen"), make_question("fresh", age_minutes=30))
        repo.add_past_attempt(STUDENT_ID, "seen", datetime.now(UTC) - timedelta(days=1))

        response = client.get(
            PRACTICE_URL,
            params={"question_type_id": "qt-1"},
            headers=auth_headers_student,
        )

        assert [q["id"] for q in response.json()] == ["fresh"]

    def test_empty_question_type_returns_empty_list(self, client, auth_headers_student):
        response = client.get(
            PRACTICE_URL,
            params={"question_type_id": "qt-empty"},
            headers=auth_headers_student,
        )

        assert response.status_code == 200
        assert response.json() == []

    def test_response_shape(self, client, repo, auth_headers_student):
        repo.add_questions(make_question("q1"))

        response = client.get(
            PRACTICE_URL,
            params={"question_type_id": "qt-1"},
            headers=auth_headers_student,
        )

        question = response.json()[0]
        assert question["question_type_id"] == "qt-1"
        assert question["is_active"] is True
        assert question["difficulty_level"] == 3
        assert question["created_at"].startswith(BASE_TIME.date().isoformat())


class TestPracticeFailures:
    def test_repository_error_returns_400_with_message(self, client, repo, auth_headers_student):
        repo.error = 'relation "questions" does not exist'

        response = client.get(
            PRACTICE_URL,
            params={"question_type_id": "qt-1"},
            headers=auth_headers_student,
        )

        assert response.status_code == 400
        assert response.json()["error"] == 'relation "questions" does not exist'
        assert response.json()["error_code"] == "REPOSITORY_ERROR"

    def test_unexpected_error_returns_500(self, client, repo, auth_headers_student, monkeypatch):
        def explode(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(repo, "average_score", explode)

        response = client.get(
            PRACTICE_URL,
            params={"question_type_id": "qt-1"},
            headers=auth_headers_student,
        )

        assert response.status_code == 500
        assert response.json()["error"] == "Internal server error"


class TestListQuestions:
    def test_requires_auth(self, client):
        assert client.get("/api/questions").status_code == 401

    def test_lists_active_newest_first(self, client, repo, auth_headers_student):
        repo.add_questions(
            make_question("old", age_minutes=10),
            make_question("new", age_minutes=1),
            make_question("off", is_active=False),
        )

        response = client.get("/api/questions", headers=auth_headers_student)

        assert response.status_code == 200
        assert [q["id"] for q in response.json()] == ["new", "old"]

    def test_difficulty_and_paging(self, client, repo, auth_headers_student):
        repo.add_questions(
            *[make_question(f"q{i}", difficulty=2, age_minutes=i) for i in range(5)],
            make_question("other", difficulty=4),
        )

        response = client.get(
            "/api/questions",
            params={"difficulty": 2, "limit": 2, "offset": 1},
            headers=auth_headers_student,
        )

        assert [q["id"] for q in response.json()] == ["q1", "q2"]

    def test_section_filter_resolves_question_types(self, client, repo, auth_headers_student):
        repo.section_types["speaking"] = ["qt-1"]
        repo.add_questions(make_question("a", "qt-1"), make_question("b", "qt-2"))

        response = client.get(
            "/api/questions", params={"section_id": "speaking"}, headers=auth_headers_student
        )

        assert [q["id"] for q in response.json()] == ["a"]

    def test_exam_without_question_types_returns_empty(self, client, repo, auth_headers_student):
        repo.add_questions(make_question("a"))

        response = client.get(
            "/api/questions", params={"exam_id": "pte"}, headers=auth_headers_student
        )

        assert response.status_code == 200
        assert response.json() == []

    def test_invalid_difficulty_rejected(self, client, auth_headers_student):
        response = client.get(
            "/api/questions", params={"difficulty": 9}, headers=auth_headers_student
        )

        assert response.status_code == 422
        assert response.json()["error_code"] == "VALIDATION_ERROR"


class TestGetQuestion:
    def test_get_active_question(self, client, repo, auth_headers_student):
        repo.add_questions(make_question("q1"))

        response = client.get("/api/questions/q1", headers=auth_headers_student)

        assert response.status_code == 200
        assert response.json()["id"] == "q1"

    def test_inactive_question_not_found(self, client, repo, auth_headers_student):
        repo.add_questions(make_question("q1", is_active=False))

        response = client.get("/api/questions/q1", headers=auth_headers_student)

        assert response.status_code == 404
        assert response.json()["error"] == "Question not found"
