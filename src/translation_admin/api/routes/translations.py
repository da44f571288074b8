from typing import Annotated, Any

from fastapi import APIRouter, File, UploadFile, status

from translation_admin.api.deps import SettingsDep, StoreDep
from translation_admin.core.base_models import StatusUpdate, SuccessResponse
from translation_admin.core.logging import get_logger
from translation_admin.translations import (
    ImportResult,
    TranslationCreate,
    TranslationFieldUpdate,
    TranslationPublic,
    TranslationUpdate,
    bulk_import,
    create_translation,
    delete_translation,
    list_translations,
    parse_upload,
    set_translation_active,
    set_translation_field,
    update_translation,
)

router = APIRouter(prefix="/translations", tags=["translations"])
logger = get_logger(__name__)


@router.get("", response_model=list[TranslationPublic])
def read_translations(store: StoreDep) -> Any:
    """List all translations ordered by module and section."""
    return list_translations(store=store)


@router.post("", response_model=TranslationPublic, status_code=status.HTTP_201_CREATED)
def create_translation_endpoint(
    store: StoreDep, translation_in: TranslationCreate
) -> Any:
    """Create a translation for an existing section of the module.

    The section id doubles as the translation key and may carry only one
    translation.
    """
    translation = create_translation(store=store, translation_in=translation_in)
    logger.info(
        "translation_created",
        translation_id=translation.id,
        module_id=translation.module,
        translation_key=translation.translation_key,
    )
    return translation


# Registered before the "/{module}" routes so "upload" is never read as a module id
@router.post("/upload", response_model=ImportResult)
def upload_translations(
    store: StoreDep,
    config: SettingsDep,
    file: Annotated[UploadFile | None, File(description="Excel (.xlsx/.xls) or JSON file")] = None,
) -> Any:
    """Bulk create or update translations from an uploaded file.

    Rows that fail validation are reported in ``errors``; the other rows
    are imported regardless.
    """
    filename = file.filename if file else None
    # One byte past the limit is enough for parse_upload to reject the file
    content = file.file.read(config.MAX_UPLOAD_BYTES + 1) if file else b""
    rows = parse_upload(filename, content, max_bytes=config.MAX_UPLOAD_BYTES)
    return bulk_import(store=store, rows=rows)


@router.get("/{module}", response_model=list[TranslationPublic])
def read_module_translations(store: StoreDep, module: str) -> Any:
    return list_translations(store=store, module=module)


@router.post("/{module}", response_model=SuccessResponse)
def set_translation_field_endpoint(
    store: StoreDep, module: str, field_in: TranslationFieldUpdate
) -> Any:
    """Set a single language value of the translation ``key`` in ``module``."""
    set_translation_field(
        store=store,
        module=module,
        key=field_in.key,
        language=field_in.language,
        value=field_in.value,
    )
    logger.info(
        "translation_field_updated",
        module_id=module,
        translation_key=field_in.key,
        language=field_in.language,
    )
    return SuccessResponse(message="Translation updated successfully")


@router.put("/{translation_id}", response_model=TranslationPublic)
def update_translation_endpoint(
    store: StoreDep, translation_id: str, translation_in: TranslationUpdate
) -> Any:
    translation = update_translation(
        store=store, translation_id=translation_id, translation_in=translation_in
    )
    logger.info("translation_updated", translation_id=translation_id)
    return translation


@router.put("/{translation_id}/status", response_model=SuccessResponse)
def update_translation_status(
    store: StoreDep, translation_id: str, status_in: StatusUpdate
) -> Any:
    set_translation_active(
        store=store, translation_id=translation_id, active=status_in.active
    )
    logger.info(
        "translation_status_changed",
        translation_id=translation_id,
        active=status_in.active,
    )
    return SuccessResponse(message="Translation status updated successfully")


@router.delete("/{translation_id}", response_model=SuccessResponse)
def delete_translation_endpoint(store: StoreDep, translation_id: str) -> Any:
    delete_translation(store=store, translation_id=translation_id)
    logger.info("translation_deleted", translation_id=translation_id)
    return SuccessResponse(message="Translation deleted successfully")
