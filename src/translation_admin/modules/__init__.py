from translation_admin.modules.models import (
    Module,
    ModuleBase,
    ModuleCreate,
    ModulePublic,
    ModuleUpdate,
)
from translation_admin.modules.crud import (
    create_module,
    delete_module,
    get_module,
    list_modules,
    set_module_active,
    slugify,
    update_module,
)

__all__ = [
    # Models
    "Module",
    "ModuleBase",
    "ModuleCreate",
    "ModulePublic",
    "ModuleUpdate",
    # CRUD
    "create_module",
    "delete_module",
    "get_module",
    "list_modules",
    "set_module_active",
    "slugify",
    "update_module",
]
