from fastapi.responses import JSONResponse

from recap.errors import error_kind_to_status_code
from recap.utils import get_router

from ..generator import SummaryGenerator
from .models import ErrorResponse, GenerateSummaryPayload, GenerateSummaryResponse

router = get_router()
generator = SummaryGenerator()


@router.post('/generate-summary', response_model=GenerateSummaryResponse)
async def generate_summary(payload: GenerateSummaryPayload):
    """
    Summarizes the given transcript, following **customPrompt** when provided.
    """

    result = await generator.generate(payload.transcript, payload.custom_prompt)

    if not result.is_successful:
        error = ErrorResponse(error=result.message, error_kind=result.error_kind)

        return JSONResponse(
            status_code=error_kind_to_status_code[result.error_kind],
            content=error.model_dump(mode='json', by_alias=True),
        )

    return GenerateSummaryResponse(summary=result.summary_text)
