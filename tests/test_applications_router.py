from datetime import datetime, timezone

import nexttalent.routers.applications as apps_mod
from nexttalent.core.errors import InvalidTransitionError, PermissionDeniedError
from nexttalent.models.enums import SUGGESTION_CATEGORIES
from nexttalent.services.application_workflow import TransitionResult


class _Job:
    id = "j1"
    title = "Backend Engineer"
    employer = None


class _Application:
    def __init__(self, status="Pending", interview=None):
        self.id = "a1"
        self.job_id = "j1"
        self.job = _Job()
        self.applicant_id = "seeker-1"
        self.applicant_name = "Sam Seeker"
        self.applicant_email = "sam@example.com"
        self.applicant_phone = None
        self.resume_link = "https://cv.example.com/sam"
        self.status = status
        self.interview = interview
        self.created_at = datetime.now(timezone.utc)


class _Suggestion:
    id = "s1"
    job_title = "Backend Engineer"
    company_name = "Acme"
    questions_answers = {c: "Good" for c in SUGGESTION_CATEGORIES}
    comment = "Keep going"
    video_link = None
    created_at = None


def _ratings(value="Good"):
    return {c: value for c in SUGGESTION_CATEGORIES}


def test_approve_application(monkeypatch, stub_client, employer_ctx):
    captured = {}

    def fake_transition(db, ctx, application_id, to_status, suggestion):
        captured.update(application_id=application_id, to_status=to_status, suggestion=suggestion)
        return TransitionResult(application=_Application(status="Approved"))

    monkeypatch.setattr(apps_mod, "transition_application", fake_transition)
    resp = stub_client.act_as(employer_ctx).patch("/applications/a1/status", json={"status": "Approved"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["application"]["status"] == "Approved"
    assert body["application"]["company_name"] == "N/A"
    assert body["suggestion_saved"] is None
    assert captured["to_status"] == "Approved"
    assert captured["suggestion"] is None


def test_reject_with_suggestion_passes_ratings(monkeypatch, stub_client, employer_ctx):
    captured = {}

    def fake_transition(db, ctx, application_id, to_status, suggestion):
        captured["suggestion"] = suggestion
        return TransitionResult(application=_Application(status="Rejected"), suggestion_saved=True)

    monkeypatch.setattr(apps_mod, "transition_application", fake_transition)
    resp = stub_client.act_as(employer_ctx).patch(
        "/applications/a1/status",
        json={"status": "Rejected", "suggestion": {"ratings": _ratings("Poor"), "comment": "Practice"}},
    )
    assert resp.status_code == 200
    assert resp.json()["suggestion_saved"] is True
    suggestion = captured["suggestion"]
    assert set(suggestion.ratings) == set(SUGGESTION_CATEGORIES)
    assert suggestion.comment == "Practice"


def test_suggestion_with_approval_is_422(stub_client, employer_ctx):
    resp = stub_client.act_as(employer_ctx).patch(
        "/applications/a1/status", json={"status": "Approved", "suggestion": {"ratings": _ratings()}}
    )
    assert resp.status_code == 422


def test_incomplete_or_bad_ratings_are_422(stub_client, employer_ctx):
    ratings = _ratings()
    del ratings["presentation"]
    client = stub_client.act_as(employer_ctx)
    resp = client.patch("/applications/a1/status", json={"status": "Rejected", "suggestion": {"ratings": ratings}})
    assert resp.status_code == 422

    resp = client.patch(
        "/applications/a1/status", json={"status": "Rejected", "suggestion": {"ratings": _ratings("Amazing")}}
    )
    assert resp.status_code == 422


def test_unknown_status_is_422(stub_client, employer_ctx):
    resp = stub_client.act_as(employer_ctx).patch("/applications/a1/status", json={"status": "Hired"})
    assert resp.status_code == 422


def test_invalid_transition_is_409(monkeypatch, stub_client, employer_ctx):
    def fake_transition(db, ctx, application_id, to_status, suggestion):
        raise InvalidTransitionError("Invalid transition from Approved to Approved")

    monkeypatch.setattr(apps_mod, "transition_application", fake_transition)
    resp = stub_client.act_as(employer_ctx).patch("/applications/a1/status", json={"status": "Approved"})
    assert resp.status_code == 409
    assert "Invalid transition" in resp.json()["detail"]


def test_foreign_application_is_403(monkeypatch, stub_client, employer_ctx):
    def fake_transition(db, ctx, application_id, to_status, suggestion):
        raise PermissionDeniedError("Application belongs to another employer's job")

    monkeypatch.setattr(apps_mod, "transition_application", fake_transition)
    resp = stub_client.act_as(employer_ctx).patch("/applications/a1/status", json={"status": "Rejected"})
    assert resp.status_code == 403


def test_job_seekers_cannot_change_status(stub_client, seeker_ctx):
    resp = stub_client.act_as(seeker_ctx).patch("/applications/a1/status", json={"status": "Approved"})
    assert resp.status_code == 403


def test_employer_applicant_list_reports_interview_flag(monkeypatch, stub_client, employer_ctx):
    monkeypatch.setattr(
        apps_mod, "list_applicants", lambda db, ctx, search: [_Application(status="Approved", interview=object())]
    )
    resp = stub_client.act_as(employer_ctx).get("/applications?search=sam")
    assert resp.status_code == 200
    assert resp.json()[0]["has_interview"] is True


def test_my_applications_and_suggestions(monkeypatch, stub_client, seeker_ctx):
    monkeypatch.setattr(apps_mod, "list_my_applications", lambda db, ctx: [_Application()])
    monkeypatch.setattr(apps_mod, "list_suggestions_for_user", lambda db, user_id: [_Suggestion()])
    client = stub_client.act_as(seeker_ctx)

    resp = client.get("/applications/mine")
    assert resp.status_code == 200
    assert resp.json()[0]["job_title"] == "Backend Engineer"

    resp = client.get("/applications/suggestions")
    assert resp.status_code == 200
    body = resp.json()[0]
    assert body["company_name"] == "Acme"
    assert body["questions_answers"]["technical"] == "Good"
