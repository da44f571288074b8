from collections.abc import Iterable
import math
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from translation_admin.core.exceptions import (
    ResourceExistsError,
    ResourceNotFoundError,
    ValidationError,
)
from translation_admin.core.logging import get_logger
from translation_admin.sections.models import Section
from translation_admin.store import ContentStore
from translation_admin.translations.models import (
    SUPPORTED_LANGUAGES,
    ImportResult,
    ImportRowError,
    Translation,
    TranslationCreate,
    TranslationUpdate,
    TranslationValues,
)

logger = get_logger(__name__)

__all__ = [
    "bulk_import",
    "clean_cell",
    "create_translation",
    "delete_translation",
    "get_translation",
    "list_translations",
    "set_translation_active",
    "set_translation_field",
    "update_translation",
]


def clean_cell(value: Any) -> str:
    """Normalize an imported cell: None and NaN become "", everything else a stripped str."""
    if value is None:
        return ""
    if isinstance(value, float) and math.isnan(value):
        return ""
    return str(value).strip()


def _require_section(store: ContentStore, module_id: str, key: str) -> Section:
    section = store.get(Section, key)
    if section is None or section.module != module_id:
        raise ValidationError(
            "Section does not exist in the specified module", field="translation_key"
        )
    return section


def list_translations(
    *, store: ContentStore, module: str | None = None
) -> list[Translation]:
    """Get translations ordered by module then section, optionally for one module."""
    if module:
        translations = store.find(Translation, module=module)
    else:
        translations = store.find(Translation)
    return sorted(translations, key=lambda t: (t.module, t.translation_key))


def get_translation(*, store: ContentStore, translation_id: str) -> Translation:
    translation = store.get(Translation, translation_id)
    if translation is None:
        raise ResourceNotFoundError("Translation", translation_id)
    return translation


def create_translation(
    *, store: ContentStore, translation_in: TranslationCreate
) -> Translation:
    """Create an active translation for an existing section.

    The key is unique across the whole store, not just within the module.

    Raises:
        ValidationError: If module, key or English text is blank, or the
            section does not exist under the module
        ResourceExistsError: If a translation already uses this key
    """
    module_id = translation_in.module.strip()
    key = translation_in.translation_key.strip()
    if not module_id or not key or not translation_in.en.strip():
        raise ValidationError(
            "Module, translation key, and English translation are required"
        )

    with store.transaction():
        _require_section(store, module_id, key)
        if store.exists(Translation, translation_key=key):
            raise ResourceExistsError("Translation", "translation_key")

        translation = Translation.model_validate(
            {
                "module": module_id,
                "translation_key": key,
                "en": translation_in.en,
                "de": translation_in.de or "",
                "fr": translation_in.fr or "",
                "es": translation_in.es or "",
                "active": True,
            }
        )
        return store.add(translation)


def set_translation_field(
    *, store: ContentStore, module: str, key: str, language: str, value: str
) -> Translation:
    """Overwrite one language value of the translation ``key`` in ``module``.

    Other language values are left untouched.
    """
    if not key or not language or not value or not value.strip():
        raise ValidationError("Translation key, language, and value are required")
    if language not in SUPPORTED_LANGUAGES:
        raise ValidationError(
            f"Invalid language. Supported languages: {', '.join(SUPPORTED_LANGUAGES)}",
            field="language",
        )

    with store.transaction():
        translation = store.first(Translation, module=module, translation_key=key)
        if translation is None:
            raise ResourceNotFoundError("Translation", key)
        setattr(translation, language, value)
        return store.save(translation)


def update_translation(
    *, store: ContentStore, translation_id: str, translation_in: TranslationUpdate
) -> Translation:
    data = translation_in.model_dump(exclude_unset=True, exclude_none=True)

    with store.transaction():
        translation = get_translation(store=store, translation_id=translation_id)
        if not data:
            raise ValidationError("No fields to update")
        if "en" in data and not data["en"].strip():
            raise ValidationError("English translation cannot be empty", field="en")

        translation.sqlmodel_update(data)
        return store.save(translation)


def set_translation_active(
    *, store: ContentStore, translation_id: str, active: bool
) -> Translation:
    with store.transaction():
        translation = get_translation(store=store, translation_id=translation_id)
        translation.active = active
        return store.save(translation)


def delete_translation(*, store: ContentStore, translation_id: str) -> None:
    with store.transaction():
        get_translation(store=store, translation_id=translation_id)
        store.delete(Translation, translation_id)


def _import_row(store: ContentStore, module_id: str, key: str, values: dict[str, str]) -> None:
    with store.transaction():
        _require_section(store, module_id, key)

        existing = store.first(Translation, translation_key=key)
        if existing is not None:
            # Blank cells never overwrite stored text
            for language, value in values.items():
                if value:
                    setattr(existing, language, value)
            store.save(existing)
            return

        store.add(
            Translation.model_validate(
                {"module": module_id, "translation_key": key, **values, "active": True}
            )
        )


def bulk_import(*, store: ContentStore, rows: Iterable[Any]) -> ImportResult:
    """Upsert translation rows one by one.

    A bad row is recorded in ``errors`` and skipped; rows imported before
    or after it stay imported. Each row runs in its own store transaction.
    """
    result = ImportResult()

    for row in rows:
        if not isinstance(row, dict):
            result.errors.append(
                ImportRowError(translation=row, error="Row must be an object")
            )
            continue

        module_id = clean_cell(row.get("module"))
        key = clean_cell(row.get("translation_key"))
        values = {lang: clean_cell(row.get(lang)) for lang in SUPPORTED_LANGUAGES}
        if not module_id or not key or not values["en"]:
            result.errors.append(
                ImportRowError(
                    translation=row,
                    error="Missing required fields (module, translation_key, en)",
                )
            )
            continue

        try:
            TranslationValues.model_validate(values)
            _import_row(store, module_id, key, values)
        except ValidationError as e:
            result.errors.append(ImportRowError(translation=row, error=e.message))
            continue
        except PydanticValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"])
            result.errors.append(
                ImportRowError(translation=row, error=f"Invalid {field}: {first['msg']}")
            )
            continue
        except Exception:
            logger.exception("translation_import_row_failed", translation_key=key)
            result.errors.append(
                ImportRowError(translation=row, error="Processing error")
            )
            continue

        result.success += 1

    logger.info(
        "translation_import_finished",
        success=result.success,
        errors=len(result.errors),
    )
    return result
