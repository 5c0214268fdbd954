from todo_api.models.todo import Todo


def _create(client, headers, name, color=None):
    body = {"name": name}
    if color is not None:
        body["color"] = color
    return client.post("/createAssignee", json=body, headers=headers)


def test_create_and_list_sorted_by_name(client, auth_headers):
    for name in ["Charlie", "alice", "Bob"]:
        assert _create(client, auth_headers, name).status_code == 200

    r = client.get("/allAssignees", headers=auth_headers)
    assert r.status_code == 200
    names = [a["name"] for a in r.json()]
    assert names == sorted(names)
    assert set(names) == {"Charlie", "alice", "Bob"}


def test_create_with_color(client, auth_headers):
    r = _create(client, auth_headers, "Dana", "#ff0000")
    assert r.status_code == 200
    data = r.json()
    assert data["color"] == "#ff0000"
    assert isinstance(data["id"], int)

    r = _create(client, auth_headers, "Eve", "")
    assert r.json()["color"] is None


def test_duplicate_name_is_a_conflict(client, auth_headers):
    assert _create(client, auth_headers, "Dana").status_code == 200
    r = _create(client, auth_headers, "Dana")
    assert r.status_code == 400
    assert "exists" in r.json()["error"]

    r = client.get("/allAssignees", headers=auth_headers)
    assert len(r.json()) == 1


def test_empty_name_is_invalid(client, auth_headers):
    r = _create(client, auth_headers, "   ")
    assert r.status_code == 400


def test_edit_assignee(client, auth_headers):
    assignee_id = _create(client, auth_headers, "Dana", "#111111").json()["id"]
    r = client.put(f"/editAssignee/{assignee_id}", json={"name": "Dani"}, headers=auth_headers)
    assert r.status_code == 200
    assert r.json()["name"] == "Dani"
    # color untouched when not supplied
    assert r.json()["color"] == "#111111"


def test_edit_missing_assignee(client, auth_headers):
    r = client.put("/editAssignee/999", json={"name": "Nobody"}, headers=auth_headers)
    assert r.status_code == 400
    assert "not found" in r.json()["error"]


def test_edit_to_existing_name_is_a_conflict(client, auth_headers):
    _create(client, auth_headers, "Dana")
    other = _create(client, auth_headers, "Eve").json()["id"]
    r = client.put(f"/editAssignee/{other}", json={"name": "Dana"}, headers=auth_headers)
    assert r.status_code == 400


def test_delete_nullifies_todos(client, auth_headers, db):
    assignee_id = _create(client, auth_headers, "Dana").json()["id"]
    keep_id = _create(client, auth_headers, "Eve").json()["id"]
    for i in range(3):
        r = client.post("/createTodo", json={"title": f"t{i}", "assigneeId": assignee_id}, headers=auth_headers)
        assert r.json()["assignee"]["name"] == "Dana"
    client.post("/createTodo", json={"title": "other", "assigneeId": keep_id}, headers=auth_headers)

    r = client.delete(f"/deleteAssignee/{assignee_id}", headers=auth_headers)
    assert r.status_code == 200
    assert r.json()["name"] == "Dana"

    todos = client.get("/allTodos", headers=auth_headers).json()
    assert len(todos) == 4
    orphaned = [t for t in todos if t["title"].startswith("t")]
    assert all(t["assigneeId"] is None and t["assignee"] is None for t in orphaned)
    assert [t["assigneeId"] for t in todos if t["title"] == "other"] == [keep_id]

    names = [a["name"] for a in client.get("/allAssignees", headers=auth_headers).json()]
    assert names == ["Eve"]
    assert db.query(Todo).filter(Todo.assignee_id == assignee_id).count() == 0


def test_delete_missing_assignee(client, auth_headers):
    r = client.delete("/deleteAssignee/999", headers=auth_headers)
    assert r.status_code == 400


def test_name_can_be_reused_after_delete(client, auth_headers):
    assignee_id = _create(client, auth_headers, "Dana").json()["id"]
    client.delete(f"/deleteAssignee/{assignee_id}", headers=auth_headers)
    assert _create(client, auth_headers, "Dana").status_code == 200
