from translation_admin.translations.models import (
    IMPORT_COLUMNS,
    REQUIRED_IMPORT_COLUMNS,
    SUPPORTED_LANGUAGES,
    ImportResult,
    ImportRowError,
    Translation,
    TranslationCreate,
    TranslationFieldUpdate,
    TranslationPublic,
    TranslationUpdate,
    TranslationValues,
)
from translation_admin.translations.crud import (
    bulk_import,
    create_translation,
    delete_translation,
    get_translation,
    list_translations,
    set_translation_active,
    set_translation_field,
    update_translation,
)
from translation_admin.translations.importer import parse_upload

__all__ = [
    # Models
    "IMPORT_COLUMNS",
    "REQUIRED_IMPORT_COLUMNS",
    "SUPPORTED_LANGUAGES",
    "ImportResult",
    "ImportRowError",
    "Translation",
    "TranslationCreate",
    "TranslationFieldUpdate",
    "TranslationPublic",
    "TranslationUpdate",
    "TranslationValues",
    # CRUD
    "bulk_import",
    "create_translation",
    "delete_translation",
    "get_translation",
    "list_translations",
    "set_translation_active",
    "set_translation_field",
    "update_translation",
    # Import
    "parse_upload",
]
