import re

from translation_admin.core.exceptions import (
    ConflictError,
    ResourceExistsError,
    ResourceNotFoundError,
    ValidationError,
)
from translation_admin.modules.models import Module, ModuleCreate, ModuleUpdate
from translation_admin.sections.models import Section
from translation_admin.store import ContentStore

MAX_ID_LENGTH = 50


def slugify(name: str) -> str:
    """Derive a module id from its name: "Shift Allowance" -> "shift_allowance"."""
    return re.sub(r"[^a-z0-9]+", "_", name.strip().lower()).strip("_")[:MAX_ID_LENGTH]


def _name_taken(store: ContentStore, name: str, exclude_id: str | None = None) -> bool:
    return any(m.id != exclude_id for m in store.find(Module, name=name))


def list_modules(*, store: ContentStore) -> list[Module]:
    """Get all modules ordered by name."""
    return sorted(store.find(Module), key=lambda m: (m.name.lower(), m.id))


def get_module(*, store: ContentStore, module_id: str) -> Module:
    """Get a module by id.

    Raises:
        ResourceNotFoundError: If no module has this id
    """
    module = store.get(Module, module_id)
    if module is None:
        raise ResourceNotFoundError("Module", module_id)
    return module


def create_module(*, store: ContentStore, module_in: ModuleCreate) -> Module:
    """Create a new, active module.

    The id is taken from the request or derived from the name.

    Raises:
        ValidationError: If the name is blank
        ResourceExistsError: If the id or the name is already used
    """
    name = module_in.name.strip()
    if not name:
        raise ValidationError("Module name is required", field="name")

    module_id = (module_in.id or "").strip() or slugify(name)
    if not module_id:
        raise ValidationError("Module id could not be derived from the name", field="id")

    with store.transaction():
        if store.get(Module, module_id) is not None:
            raise ResourceExistsError("Module", "id")
        if _name_taken(store, name):
            raise ResourceExistsError("Module", "name")

        module = Module.model_validate(
            {
                "id": module_id,
                "name": name,
                "description": module_in.description or "",
                "active": True,
            }
        )
        return store.add(module)


def update_module(
    *, store: ContentStore, module_id: str, module_in: ModuleUpdate
) -> Module:
    """Merge the provided fields into a module; absent or null fields are kept."""
    data = module_in.model_dump(exclude_unset=True, exclude_none=True)

    with store.transaction():
        module = get_module(store=store, module_id=module_id)
        if not data:
            raise ValidationError("No fields to update")

        if "name" in data:
            data["name"] = data["name"].strip()
            if not data["name"]:
                raise ValidationError("Module name cannot be empty", field="name")
            if data["name"] != module.name and _name_taken(
                store, data["name"], exclude_id=module_id
            ):
                raise ResourceExistsError("Module", "name")

        module.sqlmodel_update(data)
        return store.save(module)


def set_module_active(*, store: ContentStore, module_id: str, active: bool) -> Module:
    with store.transaction():
        module = get_module(store=store, module_id=module_id)
        module.active = active
        return store.save(module)


def delete_module(*, store: ContentStore, module_id: str) -> None:
    """Delete a module that no section references.

    Raises:
        ResourceNotFoundError: If no module has this id
        ConflictError: If any section still belongs to the module
    """
    with store.transaction():
        get_module(store=store, module_id=module_id)

        sections = store.find(Section, module=module_id)
        if sections:
            raise ConflictError(
                "Cannot delete module with associated sections. Remove sections first.",
                "MODULE_HAS_SECTIONS",
                {"module": module_id, "sections": len(sections)},
            )

        store.delete(Module, module_id)
