from trustbyte.core.security import verify_token


def test_register_success(register):
    """Register a user"""
    response = register()
    assert response.status_code == 201
    assert response.json() == {"success": True, "message": "User registered successfully"}


def test_register_missing_fields(client):
    """Missing name, email or password -> 400"""
    response = client.post("/auth/register", json={"email": "jane@x.com", "password": "secret123"})
    assert response.status_code == 400
    data = response.json()
    assert data["success"] is False
    assert data["message"] == "Name, email, and password are required"


def test_register_blank_field_counts_as_missing(client):
    response = client.post("/auth/register", json={"name": "  ", "email": "jane@x.com", "password": "secret123"})
    assert response.status_code == 400
    assert response.json()["message"] == "Name, email, and password are required"


def test_register_duplicate_email(register):
    """Cannot register the same email twice, whatever the case"""
    register()
    response = register(email="Jane@X.com")
    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "User already exists"}


def test_register_invalid_email(client):
    response = client.post("/auth/register", json={"name": "Jane", "email": "not-an-email", "password": "secret123"})
    assert response.status_code == 400
    data = response.json()
    assert data["success"] is False
    assert "email" in data["message"]


def test_register_short_password(client):
    response = client.post("/auth/register", json={"name": "Jane", "email": "jane@x.com", "password": "123"})
    assert response.status_code == 400
    assert "password" in response.json()["message"]


def test_login_success(client, register):
    """Login returns the token and the profile"""
    register()
    response = client.post("/auth/login", json={"email": "jane@x.com", "password": "secret123"})
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["email"] == "jane@x.com"
    assert data["name"] == "Jane"

    payload = verify_token(data["jwtToken"])
    assert payload["email"] == "jane@x.com"
    assert payload["name"] == "Jane"
    assert "exp" in payload


def test_login_wrong_password(client, register):
    register()
    response = client.post("/auth/login", json={"email": "jane@x.com", "password": "wrongpass"})
    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "Invalid credentials"}


def test_login_unknown_email_same_message(client):
    """No difference between unknown account and wrong password"""
    response = client.post("/auth/login", json={"email": "nobody@x.com", "password": "secret123"})
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid credentials"


def test_login_missing_fields(client):
    response = client.post("/auth/login", json={"email": "jane@x.com"})
    assert response.status_code == 400
    assert response.json()["message"] == "Email and password are required"


def test_password_not_stored_in_clear(register, db):
    from trustbyte.models.user import User

    register()
    user = db.query(User).filter(User.email == "jane@x.com").first()
    assert user.password_hash != "secret123"
    assert user.verify_password("secret123")


def test_health(client):
    assert client.get("/healthz").text == "ok"
    assert client.get("/ping").text == "Pong"


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/nope")
    assert response.status_code == 404
    assert response.json()["success"] is False
