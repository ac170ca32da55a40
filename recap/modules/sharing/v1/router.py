from fastapi.responses import JSONResponse

from recap.errors import error_kind_to_status_code
from recap.utils import get_router

from ..distributor import SummaryDistributor
from .models import ShareSummaryPayload, ShareSummaryResponse

router = get_router()
distributor = SummaryDistributor()

success_message = 'Meeting summary shared successfully!'


@router.post(
    '/share-summary',
    response_model=ShareSummaryResponse,
    response_model_exclude_none=True,
    responses={403: {"description": "The email provider only allows sending to verified addresses"}},
)
async def share_summary(payload: ShareSummaryPayload):
    """
    Emails the (possibly edited) summary to the given recipients.
    """

    result = await distributor.share(payload.summary, payload.recipients)

    if not result.delivered:
        response = ShareSummaryResponse(success=False, error=result.message, error_kind=result.error_kind)

        return JSONResponse(
            status_code=error_kind_to_status_code[result.error_kind],
            content=response.model_dump(mode='json', by_alias=True, exclude_none=True),
        )

    return ShareSummaryResponse(success=True, message=success_message)
