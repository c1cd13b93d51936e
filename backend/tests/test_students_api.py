# tests/test_students_api.py


def create(client, payload):
    response = client.post("/api/students", json=payload)
    assert response.status_code == 201
    return response.json()


def test_create_student(client, sample_payload):
    response = client.post("/api/students", json=sample_payload)

    assert response.status_code == 201
    body = response.json()
    assert body["id"]
    assert body["stream"] == "Stream-1"
    assert body["fullname"] == "Ana Li"
    assert body["class"] == "10A"
    assert body["courses"] == [{"courseCode": "C1", "subject": "Math"}]


def test_create_student_reports_all_defects(client, sample_payload):
    sample_payload["stream"] = "Stream-3"
    sample_payload["emailId"] = ""

    response = client.post("/api/students", json=sample_payload)

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Invalid student record"
    assert sorted(defect["field"] for defect in body["defects"]) == ["emailId", "stream"]
    assert client.get("/api/students").json() == []


def test_create_student_rejects_non_object_body(client):
    for body in ["null", "[]", "\"Ana Li\""]:
        response = client.post(
            "/api/students", content=body, headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert response.json()["defects"] == [{"field": "record", "reason": "must be an object"}]


def test_create_student_without_body(client):
    response = client.post("/api/students")

    assert response.status_code == 400
    assert [defect["field"] for defect in response.json()["defects"]] == ["record"]


def test_get_student(client, sample_payload):
    created = create(client, sample_payload)

    response = client.get(f"/api/students/{created['id']}")

    assert response.status_code == 200
    assert response.json() == created


def test_get_missing_student(client):
    response = client.get("/api/students/no-such-id")

    assert response.status_code == 404
    assert response.json() == {"message": "Student not found"}


def test_update_student_balance(client, sample_payload):
    created = create(client, sample_payload)

    response = client.put(f"/api/students/{created['id']}", json={"balance": -50})

    assert response.status_code == 200
    assert response.json() == {**created, "balance": -50}


def test_update_student_invalid_stream(client, sample_payload):
    created = create(client, sample_payload)

    response = client.put(f"/api/students/{created['id']}", json={"stream": "Stream-3"})

    assert response.status_code == 400
    assert response.json()["defects"] == [
        {"field": "stream", "reason": "must be one of Stream-1, Stream-2"}
    ]


def test_update_student_null_body(client, sample_payload):
    created = create(client, sample_payload)

    response = client.put(
        f"/api/students/{created['id']}", content="null", headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 400
    assert response.json()["defects"] == [{"field": "record", "reason": "must be an object"}]
    assert client.get(f"/api/students/{created['id']}").json() == created


def test_update_missing_student(client):
    response = client.put("/api/students/no-such-id", json={"balance": 1})

    assert response.status_code == 404


def test_delete_student(client, sample_payload):
    created = create(client, sample_payload)

    response = client.delete(f"/api/students/{created['id']}")

    assert response.status_code == 200
    assert response.json() == {"message": "Student deleted successfully"}
    assert client.get(f"/api/students/{created['id']}").status_code == 404
    assert client.delete(f"/api/students/{created['id']}").status_code == 404


def test_search_students(client, sample_payload, second_payload):
    create(client, sample_payload)
    create(client, second_payload)

    assert len(client.get("/api/students").json()) == 2

    by_name = client.get("/api/students", params={"fullname": "ANA"}).json()
    assert [student["fullname"] for student in by_name] == ["Ana Li"]

    by_stream = client.get("/api/students", params={"stream": "Stream-2"}).json()
    assert [student["enrollmentNumber"] for student in by_stream] == ["E200"]

    assert client.get("/api/students", params={"stream": "Stream-3"}).json() == []
    assert client.get("/api/students", params={"fullname": ""}).status_code == 200


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
