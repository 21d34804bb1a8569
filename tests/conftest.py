import pytest
from fastapi.testclient import TestClient

from db import models
from db.database import Base, create_db_engine, create_session_factory, get_db
from db.repositories import UserRepository
from main import app
from services.auth_service import get_password_hash, issue_token

TEST_PASSWORD = "Aa1!aaaa"


@pytest.fixture(scope="session")
def password_hash():
    return get_password_hash(TEST_PASSWORD)


@pytest.fixture
def engine():
    engine = create_db_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    yield db
    db.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_session, password_hash):
    counter = {"n": 0}

    def _make_user(email=None, role=models.UserRole.USER, allergies=(), ingredients=(), full_name="Test User"):
        counter["n"] += 1
        email = email or f"user{counter['n']}@example.com"
        user = UserRepository(db_session).create_user(full_name, email, password_hash, list(allergies))
        if ingredients:
            user.ingredients = list(ingredients)
        user.role = role
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make_user


@pytest.fixture
def auth_headers():
    def _auth_headers(user):
        return {"Authorization": f"Bearer {issue_token(user)}"}

    return _auth_headers


@pytest.fixture
def admin(make_user):
    return make_user(email="admin@example.com", role=models.UserRole.ADMIN, full_name="Admin User")


@pytest.fixture
def admin_headers(admin, auth_headers):
    return auth_headers(admin)


@pytest.fixture
def make_tag(db_session):
    def _make_tag(model, name):
        tag = model(name=name)
        db_session.add(tag)
        db_session.commit()
        db_session.refresh(tag)
        return tag

    return _make_tag


@pytest.fixture
def restaurant(db_session):
    restaurant = models.Restaurant(name="Pasta House", email="pasta@example.com", phone="0501234567")
    db_session.add(restaurant)
    db_session.commit()
    db_session.refresh(restaurant)
    return restaurant


@pytest.fixture
def make_dish(db_session, restaurant):
    def _make_dish(name, allergies=(), ingredients=(), description="A tasty dish", owner=None, price=42.5):
        dish = models.Dish(
            name=name,
            description=description,
            price=price,
            image="https://example.com/dish.webp",
            restaurant=owner or restaurant,
            allergies=list(allergies),
            ingredients=list(ingredients),
        )
        db_session.add(dish)
        db_session.commit()
        db_session.refresh(dish)
        return dish

    return _make_dish
