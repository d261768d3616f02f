import asyncio
from enum import Enum
from types import TracebackType
from typing import Any

import httpx

from .validation import FIELDS, FieldErrors, FormValues, validate
from ..logger import get_logger
from ..settings import settings


logger = get_logger(__name__)

SENT_MESSAGE = "Message Sent"
FAILED_MESSAGE = "Failed: Please try again later"


class SubmissionState(Enum):
    IDLE = "idle"
    PENDING = "pending"
    SETTLED = "settled"


class Outcome(Enum):
    SENT = "sent"
    FAILED = "failed"


class ContactForm:
    """
    State of the storefront contact form.

    Tracks the field values, which fields have been touched and the current submission.
    After a submission has settled, the feedback is shown for `feedback_delay` seconds
    before the form returns to idle.
    """

    def __init__(
        self, client: httpx.AsyncClient | None = None, *, url: str | None = None, feedback_delay: float | None = None
    ) -> None:
        self._client = client or httpx.AsyncClient()
        self._owns_client = client is None
        self.url: str = url or settings.contact_relay_url
        self.feedback_delay: float = settings.contact_feedback_delay if feedback_delay is None else feedback_delay

        self.values = FormValues()
        self.touched: set[str] = set()
        self.errors: FieldErrors = validate(self.values)
        self.state = SubmissionState.IDLE
        self.outcome: Outcome | None = None

        self._submission = 0
        self._revert: asyncio.Task[None] | None = None

    @property
    def pending(self) -> bool:
        return self.state is SubmissionState.PENDING

    @property
    def can_submit(self) -> bool:
        return not self.pending

    @property
    def submit_label(self) -> str:
        return "Sending..." if self.pending else "Send Message"

    @property
    def visible_errors(self) -> FieldErrors:
        return {field: error for field, error in self.errors.items() if field in self.touched}

    @property
    def feedback(self) -> str | None:
        if self.state is not SubmissionState.SETTLED:
            return None
        return SENT_MESSAGE if self.outcome is Outcome.SENT else FAILED_MESSAGE

    def change(self, field: str, value: str) -> None:
        if field not in FIELDS:
            raise KeyError(field)

        setattr(self.values, field, value)
        self.errors = validate(self.values)

    def blur(self, field: str) -> None:
        if field not in FIELDS:
            raise KeyError(field)

        self.touched.add(field)

    async def submit(self) -> Outcome | None:
        """
        Submit the form to the relay endpoint.

        Returns the outcome of the submission or `None` if nothing has been sent,
        either because the form is invalid or because another submission is still pending.
        """

        self.touched.update(FIELDS)
        self.errors = validate(self.values)
        if self.errors or self.pending:
            return None

        self._cancel_revert()
        self._submission += 1
        submission = self._submission
        self.state = SubmissionState.PENDING
        self.outcome = None

        logger.debug(f"Submitting contact form #{submission} to {self.url}")
        outcome = await self._send(self.values.as_form())
        self._settle(submission, outcome)
        return outcome

    async def _send(self, data: dict[str, str]) -> Outcome:
        try:
            response = await self._client.post(self.url, data=data)
            if response.is_success:
                return Outcome.SENT

            error: Any = response.json()
            if isinstance(error, dict):
                error = error.get("error")
            logger.warning(f"Contact form was rejected ({response.status_code}): {error}")
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Could not submit contact form: {e!r}")
        except Exception:
            logger.exception("Unexpected error while submitting contact form")

        return Outcome.FAILED

    def _settle(self, submission: int, outcome: Outcome) -> None:
        self.state = SubmissionState.SETTLED
        self.outcome = outcome
        logger.info(f"Contact form #{submission} settled: {outcome.value}")

        if outcome is Outcome.SENT:
            self.values = FormValues()
            self.touched.clear()
            self.errors = validate(self.values)

        self._revert = asyncio.create_task(self._revert_after(submission))

    async def _revert_after(self, submission: int) -> None:
        await asyncio.sleep(self.feedback_delay)
        # a newer submission owns the state now
        if submission != self._submission or self.state is not SubmissionState.SETTLED:
            return

        self.state = SubmissionState.IDLE
        self.outcome = None

    def _cancel_revert(self) -> None:
        if self._revert and not self._revert.done():
            self._revert.cancel()
        self._revert = None

    async def aclose(self) -> None:
        self._cancel_revert()
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "ContactForm":
        return self

    async def __aexit__(
        self, exc_type: type[BaseException] | None, exc: BaseException | None, tb: TracebackType | None
    ) -> None:
        await self.aclose()
