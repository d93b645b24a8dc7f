import os
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import nexttalent.models  # noqa: F401  (registers every table on Base.metadata)
from nexttalent.core.session import SessionContext
from nexttalent.database import Base, get_db
from nexttalent.dependencies import get_current_session
from nexttalent.main import app
from nexttalent.models.enums import Role
from nexttalent.repos import profile_repo


@pytest.fixture
def session_factory():
    """Fresh in-memory SQLite database per test; StaticPool keeps one shared connection."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    yield factory
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def admin_ctx() -> SessionContext:
    return SessionContext(actor_id="admin-1", role=Role.ADMIN)


@pytest.fixture
def employer_ctx() -> SessionContext:
    return SessionContext(actor_id="employer-1", role=Role.EMPLOYER)


@pytest.fixture
def seeker_ctx() -> SessionContext:
    return SessionContext(actor_id="seeker-1", role=Role.USER)


@pytest.fixture
def profiles(db):
    """One admin, one employer (Acme) and one job seeker."""
    return {
        "admin": profile_repo.create(db, "admin-1", Role.ADMIN.value, name="Ada Admin"),
        "employer": profile_repo.create(
            db, "employer-1", Role.EMPLOYER.value, name="Erin Employer", company_name="Acme"
        ),
        "seeker": profile_repo.create(
            db, "seeker-1", Role.USER.value, name="Sam Seeker", email="sam@example.com", phone="555-0100"
        ),
    }


@pytest.fixture
def api(db):
    """TestClient bound to the test database; call ``api.act_as(ctx)`` to pick the caller."""

    def _db_override():
        yield db

    client = TestClient(app)

    def act_as(ctx: SessionContext) -> TestClient:
        app.dependency_overrides[get_current_session] = lambda: ctx
        return client

    app.dependency_overrides[get_db] = _db_override
    client.act_as = act_as
    yield client
    app.dependency_overrides.clear()


@pytest.fixture
def stub_client():
    """TestClient with no database; router tests monkeypatch the service calls."""
    client = TestClient(app)

    def act_as(ctx: SessionContext) -> TestClient:
        app.dependency_overrides[get_current_session] = lambda: ctx
        return client

    def _db_override():
        yield object()

    app.dependency_overrides[get_db] = _db_override
    client.act_as = act_as
    yield client
    app.dependency_overrides.clear()


@pytest.fixture
def approved_job(db, profiles, employer_ctx, admin_ctx):
    """An Approved + Open posting owned by employer-1, with setup notifications cleared."""
    from nexttalent.models.enums import ModerationStatus
    from nexttalent.models.notification import Notification
    from nexttalent.services.job_workflow import moderate_job, post_job

    job = post_job(db, employer_ctx, title="Backend Engineer", location="Remote", required_skills=["Python"])
    moderate_job(db, admin_ctx, job.id, ModerationStatus.APPROVED)
    db.query(Notification).delete()
    db.commit()
    return job
