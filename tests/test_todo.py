import logging

import pytest

pytestmark = pytest.mark.anyio

async def test_create_and_get_todo(client, ana):
    uid = ana["id"]
    todo_payload = {"title": "Buy milk", "content": ""}
    res = await client.post(f"/auth/{uid}/todos", json=todo_payload)
    assert res.status_code == 200
    assert res.json() == {"title": "Buy milk", "content": "", "creator": uid}

    res = await client.get("/todos")
    todo_id = res.json()[0]["id"]

    res = await client.get(f"/todos/{todo_id}")
    assert res.status_code == 200
    assert res.json() == {"id": todo_id, "title": "Buy milk", "content": "", "creator": uid}

async def test_update_with_empty_title_keeps_todo(client, ana):
    await client.post(f"/auth/{ana['id']}/todos", json={"title": "Buy milk", "content": ""})
    todo_id = (await client.get("/todos")).json()[0]["id"]

    res = await client.patch(f"/updatetodo/{todo_id}", json={"title": "", "content": "x"})
    assert res.status_code == 200
    assert res.text == "Todo title is required!"

    res = await client.get(f"/todos/{todo_id}")
    assert res.json()["title"] == "Buy milk"
    assert res.json()["content"] == ""

async def test_create_todo_with_empty_title(client, ana):
    res = await client.post(f"/auth/{ana['id']}/todos", json={"title": "", "content": "c"})
    assert res.status_code == 200
    assert res.text == "Todo title is required!"
    assert (await client.get("/todos")).json() == []

async def test_update_todo(client, ana):
    await client.post(f"/auth/{ana['id']}/todos", json={"title": "Buy milk", "content": ""})
    todo_id = (await client.get("/todos")).json()[0]["id"]

    res = await client.patch(f"/updatetodo/{todo_id}", json={"title": "Buy oat milk", "content": "2L"})
    assert res.status_code == 200
    assert res.json() == {"title": "Buy oat milk", "content": "2L"}

async def test_update_missing_todo(client):
    res = await client.patch("/updatetodo/7", json={"title": "t", "content": "c"})
    assert res.status_code == 500
    assert res.json() == "Failed to update todo"

async def test_list_todos_by_owner(client, ana):
    bob = (await client.post("/auths", json={"name": "Bob", "email": "b@x.com", "password1": "q", "password2": "q"})).json()
    await client.post(f"/auth/{ana['id']}/todos", json={"title": "one", "content": ""})
    await client.post(f"/auth/{bob['id']}/todos", json={"title": "two", "content": ""})
    await client.post(f"/auth/{ana['id']}/todos", json={"title": "three", "content": ""})

    res = await client.get(f"/auth/{ana['id']}/todos")
    assert res.status_code == 200
    todos = res.json()
    assert sorted(t["title"] for t in todos) == ["one", "three"]
    assert all(t["creator"] == ana["id"] for t in todos)

    res = await client.get("/auth/999/todos")
    assert res.json() == []

async def test_delete_todo(client, ana):
    await client.post(f"/auth/{ana['id']}/todos", json={"title": "Buy milk", "content": "soon"})
    todo_id = (await client.get("/todos")).json()[0]["id"]

    res = await client.delete(f"/delete_todo/{todo_id}")
    assert res.status_code == 200
    assert res.json() == {"id": todo_id, "title": "Buy milk", "content": "soon", "creator": ana["id"]}

    res = await client.get(f"/todos/{todo_id}")
    assert res.status_code == 500
    assert res.json() == "Failed to get todo"

async def test_delete_missing_todo_is_logged(client, caplog):
    caplog.set_level(logging.ERROR, logger="todo_api.services.todo_service")
    res = await client.delete("/delete_todo/123")
    assert res.status_code == 500
    assert res.json() == "Failed to delete todo"
    assert "Error deleting todo 123" in caplog.text
