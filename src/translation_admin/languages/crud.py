"""Language operations.

The store holds at most one default language. Every path that sets
``is_default`` clears it on the other records inside the same store
transaction, and the default can neither be deactivated nor deleted. A
language stops being default only when another one becomes default.
"""

from translation_admin.core.exceptions import (
    ConflictError,
    ResourceExistsError,
    ResourceNotFoundError,
    ValidationError,
)
from translation_admin.core.logging import get_logger
from translation_admin.languages.models import (
    MAX_CODE_LENGTH,
    Language,
    LanguageCreate,
    LanguageUpdate,
)
from translation_admin.store import ContentStore
from translation_admin.translations.models import SUPPORTED_LANGUAGES, Translation

logger = get_logger(__name__)


def _clean_code(code: str) -> str:
    code = code.strip()
    if not code:
        raise ValidationError("Language code cannot be empty", field="code")
    if len(code) > MAX_CODE_LENGTH:
        raise ValidationError(
            f"Language code must be at most {MAX_CODE_LENGTH} characters",
            field="code",
        )
    return code


def _code_taken(store: ContentStore, code: str, exclude_id: str | None = None) -> bool:
    return any(lang.id != exclude_id for lang in store.find(Language, code=code))


def _clear_default(store: ContentStore, keep_id: str | None = None) -> None:
    for language in store.find(Language, is_default=True):
        if language.id != keep_id:
            language.is_default = False
            store.save(language)


def list_languages(*, store: ContentStore) -> list[Language]:
    return sorted(store.find(Language), key=lambda lang: (lang.name.lower(), lang.code))


def get_language(*, store: ContentStore, language_id: str) -> Language:
    language = store.get(Language, language_id)
    if language is None:
        raise ResourceNotFoundError("Language", language_id)
    return language


def create_language(*, store: ContentStore, language_in: LanguageCreate) -> Language:
    """Create a language.

    The first language in the store always becomes the (active) default.

    Raises:
        ValidationError: If the code or name is blank, or the code is too long
        ResourceExistsError: If another language already uses the code
    """
    code = _clean_code(language_in.code)
    name = language_in.name.strip()
    if not name:
        raise ValidationError("Language name is required", field="name")

    with store.transaction():
        if _code_taken(store, code):
            raise ResourceExistsError("Language", "code")

        is_default = language_in.is_default or not store.exists(Language)
        language = Language.model_validate(
            {
                "code": code,
                "name": name,
                "active": True if is_default else language_in.active,
                "is_default": is_default,
            }
        )
        if is_default:
            _clear_default(store)
        return store.add(language)


def update_language(
    *, store: ContentStore, language_id: str, language_in: LanguageUpdate
) -> Language:
    """Merge the provided fields into a language; absent or null fields are kept.

    Raises:
        ResourceNotFoundError: If no language has this id
        ValidationError: If no field is given, a value is blank, or the
            request would leave the store without an active default
        ResourceExistsError: If the new code belongs to another language
    """
    data = language_in.model_dump(exclude_unset=True, exclude_none=True)

    with store.transaction():
        language = get_language(store=store, language_id=language_id)
        if not data:
            raise ValidationError("No fields to update")

        if "code" in data:
            data["code"] = _clean_code(data["code"])
            if _code_taken(store, data["code"], exclude_id=language_id):
                raise ResourceExistsError("Language", "code")
        if "name" in data:
            data["name"] = data["name"].strip()
            if not data["name"]:
                raise ValidationError("Language name cannot be empty", field="name")

        becomes_default = data.get("is_default") is True
        if language.is_default and data.get("is_default") is False:
            raise ValidationError(
                "Cannot unset the default language. Set another language as default instead.",
                field="is_default",
            )
        if (language.is_default or becomes_default) and data.get("active") is False:
            raise ValidationError(
                "Cannot deactivate the default language", field="active"
            )

        if becomes_default:
            data["active"] = True
            _clear_default(store, keep_id=language_id)

        language.sqlmodel_update(data)
        return store.save(language)


def set_language_active(
    *, store: ContentStore, language_id: str, active: bool
) -> Language:
    with store.transaction():
        language = get_language(store=store, language_id=language_id)
        if language.is_default and not active:
            raise ValidationError(
                "Cannot deactivate the default language", field="active"
            )
        language.active = active
        return store.save(language)


def set_default_language(*, store: ContentStore, language_id: str) -> Language:
    """Make one language the default and clear the flag on all others.

    Raises:
        ResourceNotFoundError: If no language has this id
        ValidationError: If the language is inactive
    """
    with store.transaction():
        language = get_language(store=store, language_id=language_id)
        if not language.active:
            raise ValidationError(
                "Cannot set an inactive language as default. Activate it first."
            )

        _clear_default(store, keep_id=language_id)
        language.is_default = True
        language = store.save(language)

    logger.info("default_language_changed", language_id=language_id, code=language.code)
    return language


def delete_language(*, store: ContentStore, language_id: str) -> None:
    """Delete a non-default language no translation has text for.

    Raises:
        ResourceNotFoundError: If no language has this id
        ConflictError: If it is the default language, or a translation holds
            a non-empty value under its code
    """
    with store.transaction():
        language = get_language(store=store, language_id=language_id)
        if language.is_default:
            raise ConflictError(
                "Cannot delete the default language",
                "LANGUAGE_IS_DEFAULT",
                {"language": language.code},
            )

        # Only the supported codes have a value field on translations
        in_use = 0
        if language.code in SUPPORTED_LANGUAGES:
            in_use = sum(
                1 for t in store.find(Translation) if getattr(t, language.code)
            )
        if in_use:
            raise ConflictError(
                "Cannot delete language with existing translations",
                "LANGUAGE_IN_USE",
                {"language": language.code, "translations": in_use},
            )

        store.delete(Language, language_id)
