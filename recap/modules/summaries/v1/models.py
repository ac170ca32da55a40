from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from recap.errors import ErrorKind
from recap.modules.summaries.prompts import default_instruction


class SummaryResult(BaseModel):
    summary_text: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
    message: Optional[str] = None

    @property
    def is_successful(self) -> bool:
        return self.error_kind is None and bool(self.summary_text)


class GenerateSummaryPayload(BaseModel):
    transcript: Optional[str] = ''
    custom_prompt: Optional[str] = Field('', alias='customPrompt')

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            'examples': [
                {
                    'transcript': "John: Let's ship by Friday. Sarah: I'll write the release notes.",
                    'customPrompt': default_instruction,
                }
            ]
        },
    )


class GenerateSummaryResponse(BaseModel):
    summary: str


class ErrorResponse(BaseModel):
    error: str
    error_kind: Optional[ErrorKind] = Field(None, serialization_alias='errorKind')
