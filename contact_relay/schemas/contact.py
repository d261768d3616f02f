from typing import Any

from pydantic import BaseModel, Field

from ..utils.docs import example, get_example


class TemplateParams(BaseModel):
    user_name: str | None = Field(None, description="Full name of the user")
    user_email: str | None = Field(None, description="Email of the user")
    message: str | None = Field(None, description="Content of the message")

    model_config = example(user_name="Ada Lovelace", user_email="ada@example.com", message="Hello!")


class RelayPayload(BaseModel):
    service_id: str = Field(description="EmailJS service identifier")
    template_id: str = Field(description="EmailJS template identifier")
    user_id: str = Field(description="EmailJS public key")
    template_params: TemplateParams = Field(description="Values rendered into the email template")

    model_config = example(
        service_id="service_abc123",
        template_id="template_xyz789",
        user_id="pUbL1cKeY",
        template_params=get_example(TemplateParams),
    )


class RelayResult(BaseModel):
    success: bool = Field(description="Whether the message has been handed over to the email provider")
    response: Any = Field(None, description="Body returned by the email provider")
    error: str | None = Field(None, description="Reason why the message could not be sent")

    model_config = example(success=True, response="OK")
