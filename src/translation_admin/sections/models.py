from sqlmodel import Field, SQLModel

from translation_admin.core.base_models import ActiveMixin, StrictInput


class SectionBase(SQLModel):
    name: str = Field(min_length=1, max_length=100)
    module: str = Field(max_length=50)
    description: str = Field(default="", max_length=500)


class Section(SectionBase, ActiveMixin, table=True):
    """Sub-topic of a module. Its id doubles as the translation key."""

    __tablename__ = "translation_sections"

    id: str = Field(primary_key=True, max_length=50)
    module: str = Field(
        foreign_key="translation_modules.id", max_length=50, index=True
    )


class SectionCreate(StrictInput):
    id: str = Field(max_length=50)
    name: str = Field(max_length=100)
    module: str = Field(max_length=50)
    description: str | None = Field(default=None, max_length=500)


class SectionUpdate(StrictInput):
    name: str | None = Field(default=None, max_length=100)
    description: str | None = Field(default=None, max_length=500)
    active: bool | None = None


class SectionPublic(SectionBase):
    id: str
    active: bool
