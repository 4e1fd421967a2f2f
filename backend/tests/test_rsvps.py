"""Tests for RSVP upsert and invitee-only access."""
from tests.conftest import create_test_user, create_test_event, auth


def _rsvp(client, event, user, status):
    return client.put(f"/api/events/{event['id']}/rsvp", json={"status": status}, headers=auth(user))


class TestRSVP:
    def test_invitee_can_rsvp(self, client):
        organizer = create_test_user(client, name="Alice")
        invitee = create_test_user(client, name="Bob")
        event = create_test_event(client, organizer, invitees=[invitee])

        resp = _rsvp(client, event, invitee, "accepted")
        assert resp.status_code == 200
        body = resp.json()
        assert body["message"] == "RSVP updated successfully"
        assert [(r["user"], r["status"]) for r in body["rsvps"]] == [(invitee["id"], "accepted")]

    def test_second_rsvp_overwrites_in_place(self, client):
        organizer = create_test_user(client, name="Alice")
        bob = create_test_user(client, name="Bob")
        dan = create_test_user(client, name="Dan")
        event = create_test_event(client, organizer, invitees=[bob, dan])

        _rsvp(client, event, bob, "accepted")
        _rsvp(client, event, dan, "declined")
        rsvps = _rsvp(client, event, bob, "maybe").json()["rsvps"]

        assert [(r["user"], r["status"]) for r in rsvps] == [
            (bob["id"], "maybe"),
            (dan["id"], "declined"),
        ]

    def test_rsvp_visible_on_event(self, client):
        organizer = create_test_user(client, name="Alice")
        invitee = create_test_user(client, name="Bob")
        event = create_test_event(client, organizer, invitees=[invitee])
        _rsvp(client, event, invitee, "declined")

        fetched = client.get(f"/api/events/{event['id']}", headers=auth(organizer)).json()
        assert fetched["rsvps"][0]["status"] == "declined"

    def test_non_invitee_forbidden(self, client):
        organizer = create_test_user(client, name="Alice")
        invitee = create_test_user(client, name="Bob")
        outsider = create_test_user(client, name="Carol")
        event = create_test_event(client, organizer, invitees=[invitee])
        _rsvp(client, event, invitee, "accepted")

        resp = _rsvp(client, event, outsider, "accepted")
        assert resp.status_code == 403
        assert resp.json()["detail"] == "You are not invited to this event"

        fetched = client.get(f"/api/events/{event['id']}", headers=auth(organizer)).json()
        assert len(fetched["rsvps"]) == 1

    def test_organizer_is_not_an_invitee(self, client):
        organizer = create_test_user(client, name="Alice")
        event = create_test_event(client, organizer)
        assert _rsvp(client, event, organizer, "accepted").status_code == 403

    def test_invalid_status_rejected(self, client):
        organizer = create_test_user(client, name="Alice")
        invitee = create_test_user(client, name="Bob")
        event = create_test_event(client, organizer, invitees=[invitee])

        resp = _rsvp(client, event, invitee, "going")
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Invalid RSVP status"

        missing = client.put(f"/api/events/{event['id']}/rsvp", json={}, headers=auth(invitee))
        assert missing.status_code == 400

    def test_rsvp_missing_event(self, client):
        invitee = create_test_user(client, name="Bob")
        resp = client.put("/api/events/missing/rsvp", json={"status": "maybe"}, headers=auth(invitee))
        assert resp.status_code == 404


class TestStandupScenario:
    """A organizes, B responds twice, C is refused, A deletes."""

    def test_scenario(self, client):
        a = create_test_user(client, name="A")
        b = create_test_user(client, name="B")
        c = create_test_user(client, name="C")
        event = create_test_event(client, a, title="Standup", invitees=[b])

        first = _rsvp(client, event, b, "accepted").json()["rsvps"]
        assert [(r["user"], r["status"]) for r in first] == [(b["id"], "accepted")]

        second = _rsvp(client, event, b, "maybe").json()["rsvps"]
        assert [(r["user"], r["status"]) for r in second] == [(b["id"], "maybe")]

        assert _rsvp(client, event, c, "accepted").status_code == 403

        assert client.delete(f"/api/events/{event['id']}", headers=auth(a)).status_code == 200
        for user in (a, b, c):
            assert client.get(f"/api/events/{event['id']}", headers=auth(user)).status_code == 404
