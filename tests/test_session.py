from ddns_dashboard.config import MSG_NAME_REQUIRED
from ddns_dashboard.models import ClientDraft, Equipment


def good_draft():
    return ClientDraft(name="Acme", ddns_link="acme.ddns.net", equipment=Equipment.PFSENSE)


def test_submit_add_closes_dialog_and_notifies(session, fake_notification):
    session.open_add()

    result = session.submit_add(good_draft())

    assert result.ok
    assert session.adding is False
    assert len(session.registry) == 3
    assert fake_notification.calls[-1]["title"] == "Client Added"


def test_failed_add_keeps_dialog_open_with_errors(session, fake_notification):
    session.open_add()

    result = session.submit_add(ClientDraft(ddns_link="acme.ddns.net", equipment="unifi"))

    assert not result
    assert session.adding is True
    assert session.errors == [MSG_NAME_REQUIRED]
    assert fake_notification.calls == []


def test_cancel_add_clears_errors(session):
    session.open_add()
    session.submit_add(ClientDraft())
    session.cancel_add()
    assert session.errors == []
    assert session.adding is False


def test_open_edit_prefills_draft(session):
    draft = session.open_edit("2")
    assert draft == ClientDraft(name="Example Client 2", ddns_link="client2.ddns.net", equipment=Equipment.MIKROTIK)
    assert session.editing_id == "2"


def test_open_edit_for_stale_id_returns_none(session):
    assert session.open_edit("gone") is None
    assert session.editing_id is None


def test_submit_edit_updates_selected_client(session, fake_notification):
    session.open_edit("1")

    result = session.submit_edit(good_draft())

    assert result.ok
    assert result.client.id == "1"
    assert session.editing_id is None
    assert session.registry.snapshot()[0].name == "Acme"
    assert fake_notification.calls[-1]["title"] == "Client Updated"


def test_submit_edit_with_errors_keeps_dialog_open(session):
    session.open_edit("1")
    result = session.submit_edit(ClientDraft(name="", ddns_link="client1.ddns.net", equipment="fortigate"))
    assert result.errors == [MSG_NAME_REQUIRED]
    assert session.editing_id == "1"
    session.cancel_edit()
    assert session.errors == []
    assert session.editing_id is None


def test_submit_edit_after_client_was_removed_closes_dialog(session):
    session.open_edit("1")
    session.registry.remove("1")

    result = session.submit_edit(good_draft())

    assert result.found is False
    assert session.editing_id is None


def test_submit_edit_without_open_dialog_is_a_no_op(session):
    result = session.submit_edit(good_draft())
    assert result.found is False
    assert len(session.registry) == 2


def test_delete_requires_confirmation(session, fake_notification):
    pending = session.request_delete("1")

    assert pending.id == "1"
    assert len(session.registry) == 2

    removed = session.confirm_delete()

    assert removed == pending
    assert session.pending_delete is None
    assert [c.id for c in session.registry.snapshot()] == ["2"]
    assert fake_notification.calls[-1]["title"] == "Client Removed"


def test_cancel_delete_keeps_client(session):
    session.request_delete("1")
    session.cancel_delete()
    assert session.confirm_delete() is None
    assert len(session.registry) == 2


def test_request_delete_for_stale_id(session):
    assert session.request_delete("gone") is None
    assert session.confirm_delete() is None


def test_confirm_delete_after_client_already_removed(session, fake_notification):
    session.request_delete("2")
    session.registry.remove("2")
    assert session.confirm_delete() is None
    assert fake_notification.calls == []
