import os
import tempfile
from datetime import datetime

# Configure before anything imports portfolio.config
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET_KEY"] = "test-secret"
os.environ.setdefault("UPLOADS_DIR", tempfile.mkdtemp(prefix="portfolio-uploads-"))

import pytest
from fastapi.testclient import TestClient

from portfolio.db.engine import Base, engine, SessionLocal
from portfolio.main import app
from portfolio.models.content_models import Blog, Project
from portfolio.models.skill_models import Skill

OWNER_EMAIL = "owner@portfolio.dev"
OWNER_PASSWORD = "correct-horse-battery"


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers(client):
    resp = client.post(
        "/auth/register-admin",
        json={"email": OWNER_EMAIL, "password": OWNER_PASSWORD},
    )
    assert resp.status_code == 200, resp.text
    resp = client.post(
        "/auth/login",
        json={"email": OWNER_EMAIL, "password": OWNER_PASSWORD},
    )
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['access_token']}"}


@pytest.fixture
def add_blog(db):
    def _add(title, created_at="2024-01-01", **fields):
        fields.setdefault("slug", title.lower().replace(" ", "-"))
        fields.setdefault("author", "Saran")
        fields.setdefault("content", "Some words here")
        fields.setdefault("published", True)
        blog = Blog(
            title=title,
            created_at=datetime.fromisoformat(created_at),
            **fields,
        )
        db.add(blog)
        db.commit()
        db.refresh(blog)
        return blog
    return _add


@pytest.fixture
def add_project(db):
    def _add(title, created_at="2024-01-01", **fields):
        fields.setdefault("slug", title.lower().replace(" ", "-"))
        fields.setdefault("description", f"About {title}")
        fields.setdefault("published", True)
        project = Project(
            title=title,
            created_at=datetime.fromisoformat(created_at),
            **fields,
        )
        db.add(project)
        db.commit()
        db.refresh(project)
        return project
    return _add


@pytest.fixture
def add_skill(db):
    def _add(name, **fields):
        fields.setdefault("website_url", f"https://{name.lower()}.example.org")
        skill = Skill(name=name, **fields)
        db.add(skill)
        db.commit()
        db.refresh(skill)
        return skill
    return _add
