from translation_admin.languages.models import (
    MAX_CODE_LENGTH,
    Language,
    LanguageBase,
    LanguageCreate,
    LanguagePublic,
    LanguageUpdate,
)
from translation_admin.languages.crud import (
    create_language,
    delete_language,
    get_language,
    list_languages,
    set_default_language,
    set_language_active,
    update_language,
)

__all__ = [
    # Models
    "MAX_CODE_LENGTH",
    "Language",
    "LanguageBase",
    "LanguageCreate",
    "LanguagePublic",
    "LanguageUpdate",
    # CRUD
    "create_language",
    "delete_language",
    "get_language",
    "list_languages",
    "set_default_language",
    "set_language_active",
    "update_language",
]
