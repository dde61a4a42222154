# tests/test_users.py
from auth import security


def test_create_user_end_to_end(client):
    resp = client.post(
        "/users",
        json={"nome": "Teste", "email": "teste@jest.com", "senha": "123456"},
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "Usuário criado!"
    assert body["user"]["email"] == "teste@jest.com"
    assert body["user"]["senha"] != "123456"


def test_list_users_returns_raw_array(client):
    client.post("/users", json={"nome": "A", "email": "a@x.com", "senha": "1"})
    client.post("/users", json={"nome": "B", "email": "b@x.com", "senha": "2"})

    resp = client.get("/users")

    assert resp.status_code == 200
    assert [u["email"] for u in resp.json()] == ["a@x.com", "b@x.com"]


def test_update_user_only_touches_supplied_fields(client, store):
    user = client.post("/users", json={"nome": "A", "email": "a@x.com", "senha": "1"}).json()["user"]
    old_hash = store.users.rows[user["id"]]["senha"]

    resp = client.put(f"/users/{user['id']}", json={"nome": "Renamed"})

    assert resp.status_code == 200
    assert resp.json() == {"message": "Usuário atualizado!"}
    row = store.users.rows[user["id"]]
    assert row["nome"] == "Renamed"
    assert row["email"] == "a@x.com"
    assert row["senha"] == old_hash


def test_update_user_rehashes_new_password(client, store):
    user = client.post("/users", json={"nome": "A", "email": "a@x.com", "senha": "1"}).json()["user"]

    client.put(f"/users/{user['id']}", json={"senha": "nova"})

    stored = store.users.rows[user["id"]]["senha"]
    assert stored != "nova"
    assert security.verify_password("nova", stored)


def test_update_missing_user_is_400(client):
    resp = client.put("/users/999", json={"nome": "X"})

    assert resp.status_code == 400
    assert resp.json()["error"] == "Erro ao atualizar usuário"
    assert resp.json()["details"]["id"] == 999


def test_delete_user_same_message_whether_or_not_it_exists(client):
    user = client.post("/users", json={"nome": "A", "email": "a@x.com", "senha": "1"}).json()["user"]

    existing = client.delete(f"/users/{user['id']}")
    missing = client.delete("/users/12345")

    assert existing.status_code == missing.status_code == 200
    assert existing.json() == missing.json() == {"message": "Usuário deletado!"}
