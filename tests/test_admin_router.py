from datetime import datetime, timezone

import nexttalent.routers.admin as admin_mod
from nexttalent.core.errors import InvalidTransitionError, NotFoundError


class _Employer:
    company_name = "Acme"


class _Job:
    def __init__(self, status="Pending"):
        self.id = "j1"
        self.employer_id = "employer-1"
        self.title = "Backend Engineer"
        self.location = "Remote"
        self.salary = None
        self.description = None
        self.image_url = None
        self.required_skills = ["no skills provided from company"]
        self.application_deadline = None
        self.status = status
        self.job_status = "Open"
        self.employer = _Employer()
        self.created_at = datetime.now(timezone.utc)


class _News:
    id = "n1"
    title = "Hiring fair"
    description = "Next week"
    image_url = None
    created_at = None


def test_admin_routes_require_admin(stub_client, employer_ctx):
    resp = stub_client.act_as(employer_ctx).get("/admin/jobs")
    assert resp.status_code == 403
    assert resp.json()["detail"] == "Admin access required"


def test_list_jobs_paginates(monkeypatch, stub_client, admin_ctx):
    captured = {}

    def fake_list(db, status, limit, offset):
        captured.update(status=status, limit=limit, offset=offset)
        return [_Job()], 41

    monkeypatch.setattr(admin_mod, "get_jobs_paginated", fake_list)
    resp = stub_client.act_as(admin_ctx).get("/admin/jobs?status_filter=Pending&page=3&page_size=20")
    assert resp.status_code == 200
    body = resp.json()
    assert body["total"] == 41
    assert body["items"][0]["company_name"] == "Acme"
    assert captured == {"status": "Pending", "limit": 20, "offset": 40}


def test_list_jobs_rejects_unknown_status_filter(monkeypatch, stub_client, admin_ctx):
    monkeypatch.setattr(admin_mod, "get_jobs_paginated", lambda db, status, limit, offset: ([], 0))
    resp = stub_client.act_as(admin_ctx).get("/admin/jobs?status_filter=Bogus")
    assert resp.status_code == 422


def test_approve_job(monkeypatch, stub_client, admin_ctx):
    monkeypatch.setattr(admin_mod, "moderate_job", lambda db, ctx, job_id, status, reasons, comment: _Job(status.value))
    resp = stub_client.act_as(admin_ctx).patch("/admin/jobs/j1/status", json={"status": "Approved"})
    assert resp.status_code == 200
    assert resp.json()["status"] == "Approved"


def test_reject_without_reason_is_422(stub_client, admin_ctx):
    resp = stub_client.act_as(admin_ctx).patch("/admin/jobs/j1/status", json={"status": "Rejected"})
    assert resp.status_code == 422


def test_reject_with_unknown_reason_is_422(stub_client, admin_ctx):
    resp = stub_client.act_as(admin_ctx).patch(
        "/admin/jobs/j1/status", json={"status": "Rejected", "reasons": ["Not shiny enough"]}
    )
    assert resp.status_code == 422


def test_reject_passes_reasons_and_comment(monkeypatch, stub_client, admin_ctx):
    captured = {}

    def fake_moderate(db, ctx, job_id, status, reasons, comment):
        captured.update(reasons=reasons, comment=comment)
        return _Job("Rejected")

    monkeypatch.setattr(admin_mod, "moderate_job", fake_moderate)
    resp = stub_client.act_as(admin_ctx).patch(
        "/admin/jobs/j1/status",
        json={"status": "Rejected", "reasons": ["Poor grammar or tone"], "comment": "Proofread it"},
    )
    assert resp.status_code == 200
    assert captured == {"reasons": ["Poor grammar or tone"], "comment": "Proofread it"}


def test_same_state_moderation_is_409(monkeypatch, stub_client, admin_ctx):
    def fake_moderate(db, ctx, job_id, status, reasons, comment):
        raise InvalidTransitionError("Invalid transition from Approved to Approved")

    monkeypatch.setattr(admin_mod, "moderate_job", fake_moderate)
    resp = stub_client.act_as(admin_ctx).patch("/admin/jobs/j1/status", json={"status": "Approved"})
    assert resp.status_code == 409


def test_delete_job(monkeypatch, stub_client, admin_ctx):
    calls = []
    monkeypatch.setattr(admin_mod, "delete_job", lambda db, ctx, job_id: calls.append(job_id))
    resp = stub_client.act_as(admin_ctx).delete("/admin/jobs/j1")
    assert resp.status_code == 200
    assert calls == ["j1"]


def test_delete_missing_job_is_404(monkeypatch, stub_client, admin_ctx):
    def fake_delete(db, ctx, job_id):
        raise NotFoundError("Job not found")

    monkeypatch.setattr(admin_mod, "delete_job", fake_delete)
    resp = stub_client.act_as(admin_ctx).delete("/admin/jobs/missing")
    assert resp.status_code == 404


def test_send_notification_to_each_target(monkeypatch, stub_client, admin_ctx):
    monkeypatch.setattr(admin_mod, "notify_user", lambda db, recipient_id, role, title, message: True)
    monkeypatch.setattr(admin_mod, "notify_role", lambda db, role, title, message: 7)
    monkeypatch.setattr(admin_mod, "notify_all_users", lambda db, title, message: 12)
    client = stub_client.act_as(admin_ctx)

    resp = client.post(
        "/admin/notifications",
        json={"target": "recipient", "recipient_id": "u1", "role": "user", "title": "Hi", "message": "There"},
    )
    assert resp.json() == {"sent": 1}
    resp = client.post("/admin/notifications", json={"target": "role", "role": "employer", "title": "Hi", "message": "x"})
    assert resp.json() == {"sent": 7}
    resp = client.post("/admin/notifications", json={"target": "all", "title": "Hi", "message": "x"})
    assert resp.json() == {"sent": 12}


def test_send_notification_validates_target_fields(stub_client, admin_ctx):
    client = stub_client.act_as(admin_ctx)
    resp = client.post("/admin/notifications", json={"target": "role", "title": "Hi", "message": "x"})
    assert resp.status_code == 422
    resp = client.post("/admin/notifications", json={"target": "recipient", "role": "user", "title": "Hi", "message": "x"})
    assert resp.status_code == 422
    resp = client.post("/admin/notifications", json={"target": "everyone", "title": "Hi", "message": "x"})
    assert resp.status_code == 422


def test_publish_news_announces_to_employers_and_seekers(monkeypatch, stub_client, admin_ctx):
    sent = []
    monkeypatch.setattr(admin_mod, "create_news", lambda db, title, description, image_url: _News())
    monkeypatch.setattr(admin_mod, "notify_role", lambda db, role, title, message: sent.append((role, title)) or 1)

    resp = stub_client.act_as(admin_ctx).post("/admin/news", json={"title": "Hiring fair", "description": "Next week"})
    assert resp.status_code == 200
    assert resp.json()["title"] == "Hiring fair"
    assert sent == [("employer", "New News Published"), ("user", "Latest News Update")]


def test_publish_news_failure_sanitized(monkeypatch, stub_client, admin_ctx):
    sent = []

    def boom(db, title, description, image_url):
        raise RuntimeError("db fail")

    monkeypatch.setattr(admin_mod, "create_news", boom)
    monkeypatch.setattr(admin_mod, "notify_role", lambda db, role, title, message: sent.append(role) or 1)
    resp = stub_client.act_as(admin_ctx).post("/admin/news", json={"title": "x", "description": "y"})
    assert resp.status_code == 500
    assert resp.json()["detail"] == "Failed to add news"
    assert sent == []


def test_remove_missing_news_is_404(monkeypatch, stub_client, admin_ctx):
    monkeypatch.setattr(admin_mod, "delete_news", lambda db, news_id: False)
    resp = stub_client.act_as(admin_ctx).delete("/admin/news/missing")
    assert resp.status_code == 404
