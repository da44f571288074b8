from translation_admin.sections.models import (
    Section,
    SectionBase,
    SectionCreate,
    SectionPublic,
    SectionUpdate,
)
from translation_admin.sections.crud import (
    create_section,
    delete_section,
    get_section,
    list_sections,
    set_section_active,
    update_section,
)

__all__ = [
    # Models
    "Section",
    "SectionBase",
    "SectionCreate",
    "SectionPublic",
    "SectionUpdate",
    # CRUD
    "create_section",
    "delete_section",
    "get_section",
    "list_sections",
    "set_section_active",
    "update_section",
]
