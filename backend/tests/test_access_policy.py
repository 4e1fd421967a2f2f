"""Unit tests for the authorization predicates."""
from app.models.event import Event
from app.services import access_policy


def _event(organizer="alice", invitees=("bob",)):
    event = Event(title="Standup", organizer_id=organizer)
    event.set_invitees(list(invitees))
    return event


class TestAccessPolicy:
    def test_is_organizer(self):
        event = _event()
        assert access_policy.is_organizer(event, "alice")
        assert not access_policy.is_organizer(event, "bob")

    def test_is_invitee(self):
        event = _event()
        assert access_policy.is_invitee(event, "bob")
        assert not access_policy.is_invitee(event, "alice")
        assert not access_policy.is_invitee(event, "carol")

    def test_is_invitee_or_organizer(self):
        event = _event()
        assert access_policy.is_invitee_or_organizer(event, "alice")
        assert access_policy.is_invitee_or_organizer(event, "bob")
        assert not access_policy.is_invitee_or_organizer(event, "carol")

    def test_reflects_invite_list_changes(self):
        event = _event()
        event.set_invitees(["carol"])
        assert access_policy.is_invitee(event, "carol")
        assert not access_policy.is_invitee(event, "bob")
