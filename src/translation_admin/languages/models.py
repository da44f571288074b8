import uuid

from sqlmodel import Field, SQLModel

from translation_admin.core.base_models import ActiveMixin, StrictInput

MAX_CODE_LENGTH = 5


class LanguageBase(SQLModel):
    code: str = Field(min_length=1, max_length=MAX_CODE_LENGTH)
    name: str = Field(min_length=1, max_length=100)


class Language(LanguageBase, ActiveMixin, table=True):
    """A supported locale.

    Exactly one language carries ``is_default``; the default is always
    active and cannot be deleted.
    """

    __tablename__ = "languages"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    code: str = Field(max_length=MAX_CODE_LENGTH, unique=True, index=True)
    is_default: bool = Field(default=False)


# Length checks happen in crud so they answer with our own messages
class LanguageCreate(StrictInput):
    code: str
    name: str = Field(max_length=100)
    active: bool = True
    is_default: bool = False


class LanguageUpdate(StrictInput):
    code: str | None = None
    name: str | None = Field(default=None, max_length=100)
    active: bool | None = None
    is_default: bool | None = None


class LanguagePublic(LanguageBase):
    id: str
    active: bool
    is_default: bool
