def test_login_returns_working_bearer_token(client, make_user, make_class, enroll):
    uid = make_user("sarah", role_id=1)
    cid = make_class("Kettlebells")
    enroll(cid, uid)

    r = client.post("/api/auth/login", json={"username": " sarah ", "password": "hunter22"})

    assert r.status_code == 200
    body = r.json()
    assert body["token_type"] == "bearer"
    assert body["roleId"] == 1

    classes = client.get("/api/user/classes", headers={"Authorization": f"Bearer {body['access_token']}"})
    assert classes.status_code == 200
    assert [row["classId"] for row in classes.json()] == [cid]


def test_login_rejects_wrong_password(client, make_user):
    make_user("jo")

    r = client.post("/api/auth/login", json={"username": "jo", "password": "wrong-one"})

    assert r.status_code == 401
    assert r.json() == {"message": "Unauthorized"}


def test_login_rejects_unknown_user(client):
    r = client.post("/api/auth/login", json={"username": "nobody", "password": "hunter22"})

    assert r.status_code == 401
    assert r.json() == {"message": "Unauthorized"}
