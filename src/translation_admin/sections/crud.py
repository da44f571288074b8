from translation_admin.core.exceptions import (
    ConflictError,
    ResourceExistsError,
    ResourceNotFoundError,
    ValidationError,
)
from translation_admin.modules.models import Module
from translation_admin.sections.models import Section, SectionCreate, SectionUpdate
from translation_admin.store import ContentStore
from translation_admin.translations.models import Translation


def _name_taken(
    store: ContentStore, module_id: str, name: str, exclude_id: str | None = None
) -> bool:
    return any(
        s.id != exclude_id for s in store.find(Section, module=module_id, name=name)
    )


def list_sections(
    *, store: ContentStore, module_id: str | None = None
) -> list[Section]:
    """Get sections ordered by name, optionally only those of one module."""
    if module_id:
        sections = store.find(Section, module=module_id)
    else:
        sections = store.find(Section)
    return sorted(sections, key=lambda s: (s.name.lower(), s.id))


def get_section(*, store: ContentStore, section_id: str) -> Section:
    section = store.get(Section, section_id)
    if section is None:
        raise ResourceNotFoundError("Section", section_id)
    return section


def create_section(*, store: ContentStore, section_in: SectionCreate) -> Section:
    """Create a new, active section under an existing module.

    Raises:
        ValidationError: If id, name or module is blank
        ResourceNotFoundError: If the module does not exist
        ResourceExistsError: If the id is used, or the module already has
            a section with this name
    """
    section_id = section_in.id.strip()
    name = section_in.name.strip()
    module_id = section_in.module.strip()
    if not section_id or not name or not module_id:
        raise ValidationError("Section ID, name, and module are required")

    with store.transaction():
        if store.get(Module, module_id) is None:
            raise ResourceNotFoundError("Module", module_id)
        if store.get(Section, section_id) is not None:
            raise ResourceExistsError("Section", "id")
        if _name_taken(store, module_id, name):
            raise ResourceExistsError("Section", "name")

        section = Section.model_validate(
            {
                "id": section_id,
                "name": name,
                "module": module_id,
                "description": section_in.description or "",
                "active": True,
            }
        )
        return store.add(section)


def update_section(
    *, store: ContentStore, section_id: str, section_in: SectionUpdate
) -> Section:
    """Merge the provided fields into a section; absent or null fields are kept."""
    data = section_in.model_dump(exclude_unset=True, exclude_none=True)

    with store.transaction():
        section = get_section(store=store, section_id=section_id)
        if not data:
            raise ValidationError("No fields to update")

        if "name" in data:
            data["name"] = data["name"].strip()
            if not data["name"]:
                raise ValidationError("Section name cannot be empty", field="name")
            if data["name"] != section.name and _name_taken(
                store, section.module, data["name"], exclude_id=section_id
            ):
                raise ResourceExistsError("Section", "name")

        section.sqlmodel_update(data)
        return store.save(section)


def set_section_active(
    *, store: ContentStore, section_id: str, active: bool
) -> Section:
    with store.transaction():
        section = get_section(store=store, section_id=section_id)
        section.active = active
        return store.save(section)


def delete_section(*, store: ContentStore, section_id: str) -> None:
    """Delete a section no translation references.

    Raises:
        ResourceNotFoundError: If no section has this id
        ConflictError: If a translation still uses the section as its key
    """
    with store.transaction():
        get_section(store=store, section_id=section_id)

        if store.exists(Translation, translation_key=section_id):
            raise ConflictError(
                "Cannot delete section with associated translations. "
                "Remove translations first.",
                "SECTION_HAS_TRANSLATIONS",
                {"section": section_id},
            )

        store.delete(Section, section_id)
