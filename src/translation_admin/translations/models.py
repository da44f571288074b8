from typing import Any
import uuid

from sqlmodel import Field, SQLModel

from translation_admin.core.base_models import ActiveMixin, StrictInput

# Languages that have a value column on a translation
SUPPORTED_LANGUAGES: tuple[str, ...] = ("en", "de", "fr", "es")

# Columns expected in an uploaded sheet; the first three are required
IMPORT_COLUMNS: tuple[str, ...] = ("module", "translation_key", *SUPPORTED_LANGUAGES)
REQUIRED_IMPORT_COLUMNS: tuple[str, ...] = ("module", "translation_key", "en")


class TranslationValues(SQLModel):
    en: str = Field(max_length=1000)
    de: str = Field(default="", max_length=1000)
    fr: str = Field(default="", max_length=1000)
    es: str = Field(default="", max_length=1000)


class Translation(TranslationValues, ActiveMixin, table=True):
    """One unit of multi-language text tied to a module and section."""

    __tablename__ = "translations"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    module: str = Field(
        foreign_key="translation_modules.id", max_length=50, index=True
    )
    # Section id; unique because a section carries at most one translation
    translation_key: str = Field(
        foreign_key="translation_sections.id", max_length=50, unique=True
    )


class TranslationCreate(StrictInput):
    module: str = Field(max_length=50)
    translation_key: str = Field(max_length=50)
    en: str = Field(max_length=1000)
    de: str | None = Field(default=None, max_length=1000)
    fr: str | None = Field(default=None, max_length=1000)
    es: str | None = Field(default=None, max_length=1000)


class TranslationUpdate(StrictInput):
    en: str | None = Field(default=None, max_length=1000)
    de: str | None = Field(default=None, max_length=1000)
    fr: str | None = Field(default=None, max_length=1000)
    es: str | None = Field(default=None, max_length=1000)
    active: bool | None = None


class TranslationFieldUpdate(StrictInput):
    """Body of ``POST /translations/{module}``: set one language value."""

    key: str
    language: str
    value: str = Field(max_length=1000)


class TranslationPublic(TranslationValues):
    id: str
    module: str
    translation_key: str
    active: bool


class ImportRowError(SQLModel):
    translation: Any
    error: str


class ImportResult(SQLModel):
    success: int = 0
    errors: list[ImportRowError] = Field(default_factory=list)
