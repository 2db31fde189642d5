import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from kotoba_service.core.dependencies import get_user_api_key, get_word_detail_service
from kotoba_service.core.exceptions import ServiceError, UpstreamRequestError
from kotoba_service.models.word_detail_models import WordDetailRequest
from kotoba_service.services.word_detail_service import WordDetailService

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/word-detail")
async def word_detail(
    payload: WordDetailRequest,
    user_api_key: str = Depends(get_user_api_key),
    word_detail_service: WordDetailService = Depends(get_word_detail_service),
):
    """
    Explain a Japanese word in the context of its sentence.

    The upstream chat-completion response is returned verbatim; failures
    come back as ``{"error": {...}}`` with an appropriate status.
    """
    try:
        data = await word_detail_service.get_word_detail(payload, user_api_key=user_api_key)
    except ServiceError:
        raise
    except Exception as e:
        logger.exception("Word detail proxy failed: %s", e)
        raise UpstreamRequestError(str(e))
    return JSONResponse(data)
