from typing import Any

from fastapi import APIRouter, status

from translation_admin.api.deps import StoreDep
from translation_admin.core.base_models import StatusUpdate, SuccessResponse
from translation_admin.core.logging import get_logger
from translation_admin.modules import (
    ModuleCreate,
    ModulePublic,
    ModuleUpdate,
    create_module,
    delete_module,
    get_module,
    list_modules,
    set_module_active,
    update_module,
)

router = APIRouter(prefix="/modules", tags=["modules"])
logger = get_logger(__name__)


@router.get("", response_model=list[ModulePublic])
def read_modules(store: StoreDep) -> Any:
    """List all modules ordered by name."""
    return list_modules(store=store)


@router.post("", response_model=ModulePublic, status_code=status.HTTP_201_CREATED)
def create_module_endpoint(store: StoreDep, module_in: ModuleCreate) -> Any:
    """Create a module. Without an id, one is derived from the name."""
    module = create_module(store=store, module_in=module_in)
    logger.info("module_created", module_id=module.id)
    return module


@router.get("/{module_id}", response_model=ModulePublic)
def read_module(store: StoreDep, module_id: str) -> Any:
    return get_module(store=store, module_id=module_id)


@router.put("/{module_id}", response_model=ModulePublic)
def update_module_endpoint(
    store: StoreDep, module_id: str, module_in: ModuleUpdate
) -> Any:
    module = update_module(store=store, module_id=module_id, module_in=module_in)
    logger.info("module_updated", module_id=module_id)
    return module


@router.put("/{module_id}/status", response_model=ModulePublic)
def update_module_status(
    store: StoreDep, module_id: str, status_in: StatusUpdate
) -> Any:
    module = set_module_active(store=store, module_id=module_id, active=status_in.active)
    logger.info("module_status_changed", module_id=module_id, active=status_in.active)
    return module


@router.delete("/{module_id}", response_model=SuccessResponse)
def delete_module_endpoint(store: StoreDep, module_id: str) -> Any:
    """Delete a module. Fails while sections still belong to it."""
    delete_module(store=store, module_id=module_id)
    logger.info("module_deleted", module_id=module_id)
    return SuccessResponse(message="Module deleted successfully")
