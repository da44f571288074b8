from sqlmodel import Field, SQLModel

from translation_admin.core.base_models import ActiveMixin, StrictInput


class ModuleBase(SQLModel):
    name: str = Field(min_length=1, max_length=100)
    description: str = Field(default="", max_length=500)


class Module(ModuleBase, ActiveMixin, table=True):
    """Top-level grouping of content, e.g. a business process area."""

    __tablename__ = "translation_modules"

    # Slug chosen by the operator or derived from the name
    id: str = Field(primary_key=True, max_length=50)


class ModuleCreate(StrictInput):
    id: str | None = Field(default=None, min_length=1, max_length=50)
    name: str = Field(max_length=100)
    description: str | None = Field(default=None, max_length=500)


class ModuleUpdate(StrictInput):
    name: str | None = Field(default=None, max_length=100)
    description: str | None = Field(default=None, max_length=500)
    active: bool | None = None


class ModulePublic(ModuleBase):
    id: str
    active: bool
