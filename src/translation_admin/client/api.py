"""Async client for the translation admin API.

Every call returns the same public schemas the API serves. Error responses
are raised as ``RemoteApiError`` carrying the server's status, error code
and details; transport failures become ``ExternalServiceError`` (or
``TimeoutError``).

With ``fallback_to_sample`` enabled, a transport failure is logged and
answered from the static sample set instead: reads return sample records
and translation mutations pretend to succeed. This exists for demos and
UI work without a running server. It is off unless ``CLIENT_FALLBACK_TO_SAMPLE``
is set, and it never hides error responses the server actually sent.
"""

from collections.abc import Callable
from typing import Any, TypeVar
import uuid

import httpx
from pydantic import BaseModel

from translation_admin.core.base_models import SuccessResponse
from translation_admin.core.config import Settings, settings
from translation_admin.core.exceptions import (
    ExternalServiceError,
    RemoteApiError,
    TimeoutError,
)
from translation_admin.core.http import UPLOAD_TIMEOUT, create_http_client
from translation_admin.core.logging import get_logger
from translation_admin.languages.models import (
    LanguageCreate,
    LanguagePublic,
    LanguageUpdate,
)
from translation_admin.modules.models import ModuleCreate, ModulePublic, ModuleUpdate
from translation_admin.sample_data import (
    sample_languages,
    sample_modules,
    sample_sections,
    sample_translations,
)
from translation_admin.sections.models import (
    SectionCreate,
    SectionPublic,
    SectionUpdate,
)
from translation_admin.translations.models import (
    ImportResult,
    TranslationCreate,
    TranslationPublic,
    TranslationUpdate,
)

logger = get_logger(__name__)

SERVICE_NAME = "Translation API"

ModelT = TypeVar("ModelT", bound=BaseModel)


def _dump(records: list[BaseModel]) -> list[dict[str, Any]]:
    return [record.model_dump() for record in records]


def _body(data: BaseModel | dict[str, Any]) -> dict[str, Any]:
    if isinstance(data, BaseModel):
        return data.model_dump(exclude_unset=True)
    return data


class TranslationApiClient:
    """Typed wrapper around the REST endpoints.

    Usage:
        async with TranslationApiClient() as client:
            modules = await client.fetch_modules()
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: httpx.Timeout | float | None = None,
        fallback_to_sample: bool | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        config: Settings = settings,
    ) -> None:
        self.base_url = (base_url or config.CLIENT_BASE_URL).rstrip("/")
        self.fallback_to_sample = (
            config.CLIENT_FALLBACK_TO_SAMPLE
            if fallback_to_sample is None
            else fallback_to_sample
        )
        self._client = create_http_client(
            timeout=timeout if timeout is not None else config.CLIENT_TIMEOUT_SECONDS,
            base_url=self.base_url,
            transport=transport,
        )

    async def __aenter__(self) -> "TranslationApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        fallback: Callable[[], Any] | None = None,
        **kwargs: Any,
    ) -> Any:
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.RequestError as e:
            if fallback is not None and self.fallback_to_sample:
                logger.warning(
                    "api_unreachable_using_sample_data",
                    method=method,
                    path=path,
                    error=str(e),
                )
                return fallback()
            if isinstance(e, httpx.TimeoutException):
                raise TimeoutError(f"{method} {path}") from e
            raise ExternalServiceError(SERVICE_NAME, str(e) or type(e).__name__) from e

        if response.is_error:
            try:
                payload = response.json()
            except ValueError:
                payload = None
            logger.warning(
                "api_error_response",
                method=method,
                path=path,
                status_code=response.status_code,
            )
            raise RemoteApiError.from_payload(response.status_code, payload)

        return response.json()

    @staticmethod
    def _one(model: type[ModelT], data: Any) -> ModelT:
        if isinstance(data, model):
            return data
        return model.model_validate(data)

    @classmethod
    def _many(cls, model: type[ModelT], data: Any) -> list[ModelT]:
        return [cls._one(model, item) for item in data]

    # Translations

    async def fetch_translations(self, module: str | None = None) -> list[TranslationPublic]:
        path = f"/translations/{module}" if module else "/translations"
        data = await self._request(
            "GET", path, fallback=lambda: _dump(sample_translations(module))
        )
        return self._many(TranslationPublic, data)

    async def add_translation(
        self, translation: TranslationCreate | dict[str, Any]
    ) -> TranslationPublic:
        body = _body(translation)

        def echo() -> dict[str, Any]:
            # Offline stand-in for the record the server would have created
            return {
                "id": str(uuid.uuid4()),
                "module": body.get("module") or "",
                "translation_key": body.get("translation_key") or "",
                "en": body.get("en") or "",
                "de": body.get("de") or "",
                "fr": body.get("fr") or "",
                "es": body.get("es") or "",
                "active": True,
            }

        data = await self._request("POST", "/translations", json=body, fallback=echo)
        return self._one(TranslationPublic, data)

    async def update_translation(
        self, module: str, key: str, language: str, value: str
    ) -> SuccessResponse:
        """Set one language value of translation ``key`` in ``module``."""
        data = await self._request(
            "POST",
            f"/translations/{module}",
            json={"key": key, "language": language, "value": value},
            fallback=SuccessResponse,
        )
        return self._one(SuccessResponse, data)

    async def edit_translation(
        self, translation_id: str, translation_in: TranslationUpdate | dict[str, Any]
    ) -> TranslationPublic:
        data = await self._request(
            "PUT", f"/translations/{translation_id}", json=_body(translation_in)
        )
        return self._one(TranslationPublic, data)

    async def delete_translation(self, translation_id: str) -> SuccessResponse:
        data = await self._request(
            "DELETE", f"/translations/{translation_id}", fallback=SuccessResponse
        )
        return self._one(SuccessResponse, data)

    async def toggle_translation_status(
        self, translation_id: str, active: bool
    ) -> SuccessResponse:
        data = await self._request(
            "PUT",
            f"/translations/{translation_id}/status",
            json={"active": active},
            fallback=SuccessResponse,
        )
        return self._one(SuccessResponse, data)

    async def upload_translations(self, filename: str, content: bytes) -> ImportResult:
        data = await self._request(
            "POST",
            "/translations/upload",
            files={"file": (filename, content)},
            timeout=UPLOAD_TIMEOUT,
        )
        return self._one(ImportResult, data)

    # Modules

    async def fetch_modules(self) -> list[ModulePublic]:
        data = await self._request(
            "GET", "/modules", fallback=lambda: _dump(sample_modules())
        )
        return self._many(ModulePublic, data)

    async def create_module(self, module_in: ModuleCreate | dict[str, Any]) -> ModulePublic:
        data = await self._request("POST", "/modules", json=_body(module_in))
        return self._one(ModulePublic, data)

    async def update_module(
        self, module_id: str, module_in: ModuleUpdate | dict[str, Any]
    ) -> ModulePublic:
        data = await self._request("PUT", f"/modules/{module_id}", json=_body(module_in))
        return self._one(ModulePublic, data)

    async def delete_module(self, module_id: str) -> SuccessResponse:
        data = await self._request("DELETE", f"/modules/{module_id}")
        return self._one(SuccessResponse, data)

    # Sections

    async def fetch_sections(self, module_id: str | None = None) -> list[SectionPublic]:
        params = {"module": module_id} if module_id else None
        data = await self._request(
            "GET",
            "/sections",
            params=params,
            fallback=lambda: _dump(sample_sections(module_id)),
        )
        return self._many(SectionPublic, data)

    async def create_section(
        self, section_in: SectionCreate | dict[str, Any]
    ) -> SectionPublic:
        data = await self._request("POST", "/sections", json=_body(section_in))
        return self._one(SectionPublic, data)

    async def update_section(
        self, section_id: str, section_in: SectionUpdate | dict[str, Any]
    ) -> SectionPublic:
        data = await self._request(
            "PUT", f"/sections/{section_id}", json=_body(section_in)
        )
        return self._one(SectionPublic, data)

    async def delete_section(self, section_id: str) -> SuccessResponse:
        data = await self._request("DELETE", f"/sections/{section_id}")
        return self._one(SuccessResponse, data)

    # Languages

    async def fetch_languages(self) -> list[LanguagePublic]:
        data = await self._request(
            "GET", "/languages", fallback=lambda: _dump(sample_languages())
        )
        return self._many(LanguagePublic, data)

    async def create_language(
        self, language_in: LanguageCreate | dict[str, Any]
    ) -> LanguagePublic:
        data = await self._request("POST", "/languages", json=_body(language_in))
        return self._one(LanguagePublic, data)

    async def update_language(
        self, language_id: str, language_in: LanguageUpdate | dict[str, Any]
    ) -> LanguagePublic:
        data = await self._request(
            "PUT", f"/languages/{language_id}", json=_body(language_in)
        )
        return self._one(LanguagePublic, data)

    async def set_language_status(self, language_id: str, active: bool) -> SuccessResponse:
        data = await self._request(
            "PUT", f"/languages/{language_id}/status", json={"active": active}
        )
        return self._one(SuccessResponse, data)

    async def set_default_language(self, language_id: str) -> SuccessResponse:
        data = await self._request("PUT", f"/languages/{language_id}/default")
        return self._one(SuccessResponse, data)

    async def delete_language(self, language_id: str) -> SuccessResponse:
        data = await self._request("DELETE", f"/languages/{language_id}")
        return self._one(SuccessResponse, data)
