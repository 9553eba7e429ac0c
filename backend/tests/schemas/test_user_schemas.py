"""User and webhook schemas — boundary validation without HTTP.

Invariants:
    - NewUser requires a non-blank name and a syntactically valid email
    - Accepted values are kept byte-for-byte (no strip, no email normalization)
    - User reads ORM attributes (from_attributes)
    - ElevenLabsWebhook requires all four string fields
"""

import pytest
from pydantic import ValidationError

from honc_api.models.user import User as UserModel
from honc_api.schemas.user import NewUser, User
from honc_api.schemas.webhook import ElevenLabsWebhook


def test_new_user_keeps_padded_name():
    user = NewUser(name="  Matthew  ", email="matthew@cloudflare.com")
    assert user.name == "  Matthew  "


def test_new_user_keeps_email_case():
    user = NewUser(name="Matthew", email="Matthew@CloudFlare.COM")
    assert user.email == "Matthew@CloudFlare.COM"


def test_new_user_rejects_blank_name():
    with pytest.raises(ValidationError):
        NewUser(name="   ", email="matthew@cloudflare.com")


@pytest.mark.parametrize("email", ["matthew-at-cloudflare", "a@", "@b.com", "a b@c.com"])
def test_new_user_rejects_invalid_email(email):
    with pytest.raises(ValidationError) as exc_info:
        NewUser(name="Matthew", email=email)
    assert exc_info.value.errors()[0]["loc"] == ("email",)


def test_new_user_requires_both_fields():
    with pytest.raises(ValidationError) as exc_info:
        NewUser()
    assert {e["loc"][0] for e in exc_info.value.errors()} == {"name", "email"}


def test_user_reads_orm_row():
    row = UserModel(id=3, name="Ada", email="Ada@Example.COM")
    assert User.model_validate(row).model_dump() == {
        "id": 3, "name": "Ada", "email": "Ada@Example.COM",
    }


def test_webhook_requires_all_fields():
    with pytest.raises(ValidationError):
        ElevenLabsWebhook(caller_id="+15551234567", agent_id="A1", called_number="+1")


def test_webhook_rejects_non_string_caller_id():
    with pytest.raises(ValidationError):
        ElevenLabsWebhook(
            caller_id=15551234567, agent_id="A1",
            called_number="+15559876543", call_sid="CA123",
        )
