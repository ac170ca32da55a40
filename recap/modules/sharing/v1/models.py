from typing import Optional

from pydantic import BaseModel, Field

from recap.errors import ErrorKind


class ShareResult(BaseModel):
    delivered: bool = False
    error_kind: Optional[ErrorKind] = None
    message: Optional[str] = None


class ShareSummaryPayload(BaseModel):
    summary: Optional[str] = ''
    # the web client sends a list, free-form strings are accepted as well
    recipients: list[str] | str | None = Field(default_factory=list)

    model_config = {
        'json_schema_extra': {
            'examples': [
                {
                    'summary': '- Ship by Friday\n- Sarah to write release notes',
                    'recipients': ['john@example.com', 'sarah@example.com'],
                }
            ]
        }
    }


class ShareSummaryResponse(BaseModel):
    success: bool
    message: Optional[str] = None
    error: Optional[str] = None
    error_kind: Optional[ErrorKind] = Field(None, serialization_alias='errorKind')
