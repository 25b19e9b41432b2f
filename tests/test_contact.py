from sqlmodel import select

from models.contact_message import ContactMessage
from core.mail import get_mailer
from tests.conftest import MAILBOX, FailingMailer

VALID = {"name": "A", "email": "a@x.com", "message": "hi"}


def stored_messages(session):
    session.expire_all()
    return session.exec(select(ContactMessage)).all()


def test_valid_submission_is_stored_and_mailed(client, session, mailer):
    response = client.post("/contact", json=VALID)

    assert response.status_code == 200
    assert response.json() == {"message": "Message sent successfully."}

    messages = stored_messages(session)
    assert len(messages) == 1
    assert messages[0].name == "A"
    assert messages[0].phone is None
    assert messages[0].created_at is not None

    assert len(mailer.sent) == 1
    assert mailer.sent[0]["to"] == MAILBOX
    assert mailer.sent[0]["subject"] == "New Contact Form Message"
    assert mailer.sent[0]["body"] == (
        "You have a new message from A (a@x.com):\n"
        "Phone: N/A\n"
        "Subject: N/A\n"
        "\n"
        "hi"
    )


def test_subject_and_phone_are_included(client, mailer):
    payload = dict(VALID, phone="555-0100", subject="Hello")
    response = client.post("/contact", json=payload)

    assert response.status_code == 200
    assert mailer.sent[0]["subject"] == "New Contact Form Message: Hello"
    assert "Phone: 555-0100\nSubject: Hello\n" in mailer.sent[0]["body"]


def test_missing_name_is_rejected(client, session, mailer):
    response = client.post("/contact", json={"email": "a@x.com", "message": "hi"})

    assert response.status_code == 400
    assert response.json() == {"error": "Please provide name, email, and message."}
    assert stored_messages(session) == []
    assert mailer.sent == []


def test_empty_required_field_is_rejected(client, session, mailer):
    response = client.post("/contact", json=dict(VALID, message=""))

    assert response.status_code == 400
    assert stored_messages(session) == []
    assert mailer.sent == []


def test_malformed_body_is_rejected(client, mailer):
    for body in ([1, 2, 3], dict(VALID, name=42)):
        response = client.post("/contact", json=body)
        assert response.status_code == 400
        assert response.json() == {"error": "Please provide name, email, and message."}

    response = client.post("/contact", content="not json", headers={"content-type": "application/json"})
    assert response.status_code == 400
    assert mailer.sent == []


def test_mail_failure_still_stores_message(app, client, session, settings):
    app.dependency_overrides[get_mailer] = lambda: FailingMailer(settings)

    response = client.post("/contact", json=VALID)

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error."}
    assert len(stored_messages(session)) == 1


def test_storage_failure_skips_mail(client, session, mailer, monkeypatch):
    def broken_save(session, data):
        raise RuntimeError("database unavailable")

    monkeypatch.setattr("api.contact.save_contact_message", broken_save)

    response = client.post("/contact", json=VALID)

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error."}
    assert "database unavailable" not in response.text
    assert mailer.sent == []


def test_identical_submissions_are_not_deduplicated(client, session, mailer):
    client.post("/contact", json=VALID)
    client.post("/contact", json=VALID)

    messages = stored_messages(session)
    assert len(messages) == 2
    assert messages[0].id != messages[1].id
    assert len(mailer.sent) == 2
