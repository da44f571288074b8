from typing import Any

from fastapi import APIRouter, status

from translation_admin.api.deps import StoreDep
from translation_admin.core.base_models import StatusUpdate, SuccessResponse
from translation_admin.core.logging import get_logger
from translation_admin.languages import (
    LanguageCreate,
    LanguagePublic,
    LanguageUpdate,
    create_language,
    delete_language,
    get_language,
    list_languages,
    set_default_language,
    set_language_active,
    update_language,
)

router = APIRouter(prefix="/languages", tags=["languages"])
logger = get_logger(__name__)


@router.get("", response_model=list[LanguagePublic])
def read_languages(store: StoreDep) -> Any:
    return list_languages(store=store)


@router.post("", response_model=LanguagePublic, status_code=status.HTTP_201_CREATED)
def create_language_endpoint(store: StoreDep, language_in: LanguageCreate) -> Any:
    """Create a language. The first language created becomes the default."""
    language = create_language(store=store, language_in=language_in)
    logger.info(
        "language_created",
        language_id=language.id,
        code=language.code,
        is_default=language.is_default,
    )
    return language


@router.get("/{language_id}", response_model=LanguagePublic)
def read_language(store: StoreDep, language_id: str) -> Any:
    return get_language(store=store, language_id=language_id)


@router.put("/{language_id}", response_model=LanguagePublic)
def update_language_endpoint(
    store: StoreDep, language_id: str, language_in: LanguageUpdate
) -> Any:
    """Update a language.

    The default language cannot be deactivated, and stops being default only
    when another language is made default.
    """
    language = update_language(
        store=store, language_id=language_id, language_in=language_in
    )
    logger.info("language_updated", language_id=language_id)
    return language


@router.put("/{language_id}/status", response_model=SuccessResponse)
def update_language_status(
    store: StoreDep, language_id: str, status_in: StatusUpdate
) -> Any:
    set_language_active(store=store, language_id=language_id, active=status_in.active)
    logger.info("language_status_changed", language_id=language_id, active=status_in.active)
    return SuccessResponse(message="Language status updated successfully")


@router.put("/{language_id}/default", response_model=SuccessResponse)
def update_default_language(store: StoreDep, language_id: str) -> Any:
    set_default_language(store=store, language_id=language_id)
    return SuccessResponse(message="Default language updated successfully")


@router.delete("/{language_id}", response_model=SuccessResponse)
def delete_language_endpoint(store: StoreDep, language_id: str) -> Any:
    delete_language(store=store, language_id=language_id)
    logger.info("language_deleted", language_id=language_id)
    return SuccessResponse(message="Language deleted successfully")
