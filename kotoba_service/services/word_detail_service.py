import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from kotoba_service.core.exceptions import (
    MissingCredentialError,
    MissingRequiredFieldError,
    UpstreamError,
    UpstreamRequestError,
)
from kotoba_service.models.word_detail_models import ChatMessage, UpstreamPayload, WordDetailRequest
from kotoba_service.services.prompts import build_word_detail_prompt

logger = logging.getLogger(__name__)

UPSTREAM_FALLBACK_MESSAGE = "获取词汇详情时出错"


@dataclass(frozen=True)
class ResolvedUpstream:
    api_key: str
    api_url: str
    model: str


class WordDetailService:
    """
    Proxies word-detail lookups to an OpenAI-compatible chat-completion API.

    The server-side key, URL and model are fixed at construction time; callers
    may override each of them per request. Each lookup makes exactly one
    upstream attempt.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        api_key: str = "",
        api_url: str = "",
        default_model: str = "",
    ):
        self.http_client = http_client
        self.api_key = api_key
        self.api_url = api_url
        self.default_model = default_model

    def resolve_upstream(self, request: WordDetailRequest, user_api_key: Optional[str] = None) -> ResolvedUpstream:
        """Apply caller-over-server precedence to key, URL and model."""
        api_key = user_api_key or self.api_key
        if not api_key:
            raise MissingCredentialError()
        return ResolvedUpstream(
            api_key=api_key,
            api_url=request.api_url or self.api_url,
            model=request.model or self.default_model,
        )

    @staticmethod
    def require_fields(request: WordDetailRequest) -> None:
        if not request.word or not request.pos or not request.sentence:
            raise MissingRequiredFieldError()

    def build_payload(self, request: WordDetailRequest, model: str) -> Dict[str, Any]:
        prompt = build_word_detail_prompt(
            word=request.word,
            pos=request.pos,
            sentence=request.sentence,
            furigana=request.furigana,
            romaji=request.romaji,
        )
        payload = UpstreamPayload(
            model=model,
            messages=[ChatMessage(role="user", content=prompt)],
        )
        return payload.model_dump()

    async def get_word_detail(self, request: WordDetailRequest, user_api_key: Optional[str] = None) -> Any:
        """
        Look up ``request.word`` upstream and return the upstream JSON untouched.

        Raises:
            MissingCredentialError: no key from the caller or the server
            MissingRequiredFieldError: word, pos or sentence is missing
            UpstreamError: the upstream answered with a non-2xx status
            UpstreamRequestError: transport failure or unreadable upstream body
        """
        target = self.resolve_upstream(request, user_api_key)
        self.require_fields(request)
        payload = self.build_payload(request, target.model)

        logger.info("Requesting word detail", extra={"word": request.word, "model": target.model})

        try:
            response = await self.http_client.post(
                target.api_url,
                json=payload,
                headers={
                    "Content-Type": "application/json",
                    "Authorization": f"Bearer {target.api_key}",
                },
            )
            data = response.json()
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            logger.error("Server error (word detail)", extra={"word": request.word, "error": str(e)}, exc_info=True)
            raise UpstreamRequestError(str(e))

        if not response.is_success:
            logger.error("Upstream API error (word detail)", extra={
                "status_code": response.status_code,
                "response": str(data)[:500],
            })
            error = data.get("error") if isinstance(data, dict) else None
            raise UpstreamError(response.status_code, error or {"message": UPSTREAM_FALLBACK_MESSAGE})

        return data
