from services.errors import BackendUnavailable


def test_health_reports_storage(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.get_json() == {"status": "ok", "storage": "memory"}


def test_list_questions(client):
    data = client.get("/api/questions").get_json()
    assert len(data) == 12
    assert set(data[0]) == {"id", "question", "answer", "category", "difficulty"}
    assert [q["id"] for q in data] == list(range(1, 13))


def test_list_questions_filtered_by_difficulty(client):
    data = client.get("/api/questions?difficulty=Hard").get_json()
    assert [q["difficulty"] for q in data] == ["hard"] * 3
    assert len(client.get("/api/questions?difficulty=beginner").get_json()) == 5


def test_list_questions_unknown_difficulty_returns_everything(client):
    assert len(client.get("/api/questions?difficulty=expert").get_json()) == 12


def test_get_question(client):
    res = client.get("/api/questions/2")
    assert res.status_code == 200
    assert res.get_json()["question"] == "What is Ruby on Rails?"


def test_get_question_not_found(client):
    res = client.get("/api/questions/404")
    assert res.status_code == 404
    assert res.get_json()["message"] == "Question not found"


def test_get_question_invalid_id(client):
    assert client.get("/api/questions/abc").status_code == 400


def test_backend_failure_is_reported(client, storage, monkeypatch):
    def broken():
        raise BackendUnavailable("down")

    monkeypatch.setattr(storage, "get_all_questions", broken)
    res = client.get("/api/questions")
    assert res.status_code == 500
    assert res.get_json()["message"] == "Failed to fetch questions"


def test_preferences_empty_for_new_user(client):
    res = client.get("/api/user-preferences/1")
    assert res.status_code == 200
    assert res.get_json() == []


def test_preferences_invalid_user(client):
    assert client.get("/api/user-preferences/me").status_code == 400


def test_post_preference_upserts(client):
    res = client.post("/api/user-preferences", json={"userId": 1, "questionId": 7, "isFavorite": True})
    assert res.status_code == 200
    assert res.get_json()["isFavorite"] is True
    assert res.get_json()["isCompleted"] is False

    res = client.post("/api/user-preferences", json={"userId": 1, "questionId": 7, "isCompleted": True})
    body = res.get_json()
    assert body["isFavorite"] is True and body["isCompleted"] is True

    prefs = client.get("/api/user-preferences/1").get_json()
    assert len(prefs) == 1


def test_post_preference_validation_error(client):
    res = client.post("/api/user-preferences", json={"questionId": 7})
    assert res.status_code == 400
    assert "userId" in res.get_json()["message"]


def test_post_preference_requires_json(client):
    res = client.post("/api/user-preferences", data="userId=1")
    assert res.status_code == 400


def test_question_view_paginates(client):
    body = client.get("/api/questions/view?page=3").get_json()
    assert body["totalFiltered"] == 12
    assert body["totalPages"] == 3
    assert body["page"] == 3
    assert body["pageSize"] == 5
    assert [q["id"] for q in body["items"]] == [11, 12]


def test_question_view_applies_user_favorites(client):
    client.post("/api/user-preferences", json={"userId": 2, "questionId": 9, "isFavorite": True})
    body = client.get("/api/questions/view?userId=2&favoritesOnly=true").get_json()
    assert [q["id"] for q in body["items"]] == [9]
    assert body["items"][0]["favorite"] is True
    assert body["items"][0]["expanded"] is False

    other = client.get("/api/questions/view?userId=1&favoritesOnly=true").get_json()
    assert other["totalFiltered"] == 0
    assert other["totalPages"] == 1


def test_question_view_search_and_clamp(client):
    body = client.get("/api/questions/view?search=RAILS&page=5").get_json()
    assert body["totalFiltered"] == 2
    assert body["page"] == 1


def test_categories_and_difficulties(client):
    assert client.get("/api/categories").get_json() == ["Fundamentals", "ORM", "Performance"]
    values = [d["value"] for d in client.get("/api/difficulties").get_json()]
    assert values == ["all", "easy", "medium", "hard"]


def test_post_preference_does_not_coerce_types(client):
    res = client.post("/api/user-preferences", json={"userId": "1", "questionId": 7, "isFavorite": "no"})
    assert res.status_code == 400
    assert "userId" in res.get_json()["message"]

    res = client.post("/api/user-preferences", json={"userId": True, "questionId": 7.0, "isCompleted": 1})
    assert res.status_code == 400

    assert client.get("/api/user-preferences/1").get_json() == []
