from datetime import datetime, timezone

import nexttalent.routers.news as news_mod
import nexttalent.routers.notifications as notif_mod


class _Notification:
    def __init__(self, notification_id="n1", is_read=False):
        self.id = notification_id
        self.recipient_id = "seeker-1"
        self.role = "user"
        self.title = "Application Status Updated"
        self.message = 'Your application for "Backend Engineer" was Approved.'
        self.is_read = is_read
        self.created_at = datetime.now(timezone.utc)


class _News:
    id = "n1"
    title = "Hiring fair"
    description = "Next week"
    image_url = None
    created_at = None


def test_requires_authentication(stub_client):
    resp = stub_client.get("/notifications/unread-count")
    assert resp.status_code == 401


def test_unread_count(monkeypatch, stub_client, seeker_ctx):
    captured = {}

    def fake_count(db, actor_id, role):
        captured.update(actor_id=actor_id, role=role)
        return 3

    monkeypatch.setattr(notif_mod, "count_unread", fake_count)
    resp = stub_client.act_as(seeker_ctx).get("/notifications/unread-count")
    assert resp.status_code == 200
    assert resp.json() == {"unread": 3}
    assert captured["actor_id"] == "seeker-1"


def test_list_notifications_clamps_limit(monkeypatch, stub_client, seeker_ctx):
    captured = {}

    def fake_list(db, actor_id, role, limit):
        captured.update(role=role, limit=limit)
        return [_Notification()]

    monkeypatch.setattr(notif_mod, "list_for", fake_list)
    resp = stub_client.act_as(seeker_ctx).get("/notifications?limit=10000")
    assert resp.status_code == 200
    assert resp.json()[0]["is_read"] is False
    assert captured == {"role": "user", "limit": 500}


def test_mark_read(monkeypatch, stub_client, seeker_ctx):
    monkeypatch.setattr(notif_mod, "mark_read", lambda db, nid, actor_id, role: _Notification(nid, is_read=True))
    resp = stub_client.act_as(seeker_ctx).patch("/notifications/n1/read")
    assert resp.status_code == 200
    assert resp.json()["is_read"] is True


def test_mark_read_of_someone_elses_notification_is_404(monkeypatch, stub_client, seeker_ctx):
    monkeypatch.setattr(notif_mod, "mark_read", lambda db, nid, actor_id, role: None)
    resp = stub_client.act_as(seeker_ctx).patch("/notifications/n1/read")
    assert resp.status_code == 404


def test_delete(monkeypatch, stub_client, seeker_ctx):
    monkeypatch.setattr(notif_mod, "delete", lambda db, nid, actor_id, role: nid == "n1")
    client = stub_client.act_as(seeker_ctx)
    assert client.delete("/notifications/n1").json() == {"deleted": True}
    assert client.delete("/notifications/n2").status_code == 404


def test_news_list_for_any_role(monkeypatch, stub_client, employer_ctx):
    monkeypatch.setattr(news_mod, "get_all", lambda db: [_News()])
    resp = stub_client.act_as(employer_ctx).get("/news")
    assert resp.status_code == 200
    assert resp.json()[0]["title"] == "Hiring fair"
