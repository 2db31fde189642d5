from typing import Optional

from fastapi import Header, HTTPException, Request

from kotoba_service.services.word_detail_service import WordDetailService


def get_word_detail_service(request: Request) -> WordDetailService:
    """Dependency to get the WordDetailService built by the lifespan."""
    service = getattr(request.app.state, "word_detail_service", None)
    if service is None:
        raise HTTPException(status_code=503, detail="Word detail service unavailable")
    return service


def get_user_api_key(authorization: Optional[str] = Header(None, alias="Authorization")) -> str:
    """Caller-supplied upstream key from ``Authorization: Bearer <key>``, or ``""``."""
    if not authorization:
        return ""
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() == "bearer":
        return token.strip()
    # No scheme given; treat the whole header as the key
    return authorization.strip()
