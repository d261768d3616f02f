import re
from dataclasses import asdict, dataclass


FIELDS = ("user_name", "user_email", "message")

EMAIL_REGEX = (
    r'^(([^<>()\[\]\\.,;:\s@"]+(\.[^<>()\[\]\\.,;:\s@"]+)*)|(".+"))'
    r"@((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}])|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))$"
)

FieldErrors = dict[str, str]


@dataclass
class FormValues:
    user_name: str = ""
    user_email: str = ""
    message: str = ""

    def as_form(self) -> dict[str, str]:
        return asdict(self)


def is_valid_email(email: str) -> bool:
    return re.fullmatch(EMAIL_REGEX, email) is not None


def validate(values: FormValues) -> FieldErrors:
    """Return the validation errors of the given form values (empty if the form can be submitted)."""

    errors: FieldErrors = {}
    if not values.user_name:
        errors["user_name"] = "Name field is required"
    if not values.user_email:
        errors["user_email"] = "Email field is required"
    elif not is_valid_email(values.user_email):
        errors["user_email"] = "Please enter a valid email address"
    if not values.message:
        errors["message"] = "Message field is required"
    return errors
