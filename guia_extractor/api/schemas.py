from pydantic import BaseModel, ConfigDict, Field


class ExtractGuideRequest(BaseModel):
    """Upload body sent by the mobile client.

    Both fields are optional at the schema level so that a missing one is
    reported by the pipeline as a MissingFieldError (400).
    """

    model_config = ConfigDict(populate_by_name=True)

    file_base64: str | None = Field(default=None, alias="fileBase64")
    file_name: str | None = Field(default=None, alias="fileName")


class ErrorResponse(BaseModel):
    error: str
