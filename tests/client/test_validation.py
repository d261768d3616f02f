import pytest

from contact_relay.client.validation import FormValues, is_valid_email, validate


@pytest.mark.parametrize(
    "values,expected",
    [
        (FormValues("Ada", "ada@example.com", "Hi"), {}),
        (
            FormValues(),
            {
                "user_name": "Name field is required",
                "user_email": "Email field is required",
                "message": "Message field is required",
            },
        ),
        (FormValues("", "ada@example.com", "Hi"), {"user_name": "Name field is required"}),
        (FormValues("Ada", "", "Hi"), {"user_email": "Email field is required"}),
        (FormValues("Ada", "ada@example.com", ""), {"message": "Message field is required"}),
        (
            FormValues("", "ada@example.com", ""),
            {"user_name": "Name field is required", "message": "Message field is required"},
        ),
    ],
)
def test__validate(values: FormValues, expected: dict[str, str]) -> None:
    assert validate(values) == expected


@pytest.mark.parametrize(
    "email", ["ada", "ada@", "@example.com", "ada@example", "ada@@example.com", "ada@exa mple.com", "ada@example.c"]
)
def test__validate_invalid_email(email: str) -> None:
    assert validate(FormValues("Ada", email, "Hi")) == {"user_email": "Please enter a valid email address"}


@pytest.mark.parametrize(
    "email,expected",
    [
        ("ada@example.com", True),
        ("ada.lovelace@mail.example.co.uk", True),
        ("ada+shop@example.io", True),
        ('"ada lovelace"@example.com', True),
        ("ada@[192.168.0.1]", True),
        ("ada.@example.com", False),
        ("ada@example.com\n", False),
    ],
)
def test__is_valid_email(email: str, expected: bool) -> None:
    assert is_valid_email(email) is expected


def test__validate_is_idempotent() -> None:
    values = FormValues("", "not-an-email", "")

    assert validate(values) == validate(values)
    assert values == FormValues("", "not-an-email", "")
