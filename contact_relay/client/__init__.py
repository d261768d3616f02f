from .controller import FAILED_MESSAGE, SENT_MESSAGE, ContactForm, Outcome, SubmissionState
from .validation import FIELDS, FieldErrors, FormValues, validate


__all__ = [
    "FAILED_MESSAGE",
    "SENT_MESSAGE",
    "ContactForm",
    "Outcome",
    "SubmissionState",
    "FIELDS",
    "FieldErrors",
    "FormValues",
    "validate",
]
