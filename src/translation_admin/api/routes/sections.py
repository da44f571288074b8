from typing import Annotated, Any

from fastapi import APIRouter, Query, status

from translation_admin.api.deps import StoreDep
from translation_admin.core.base_models import StatusUpdate, SuccessResponse
from translation_admin.core.logging import get_logger
from translation_admin.sections import (
    SectionCreate,
    SectionPublic,
    SectionUpdate,
    create_section,
    delete_section,
    get_section,
    list_sections,
    set_section_active,
    update_section,
)

router = APIRouter(prefix="/sections", tags=["sections"])
logger = get_logger(__name__)


@router.get("", response_model=list[SectionPublic])
def read_sections(
    store: StoreDep,
    module: Annotated[str | None, Query(description="Only sections of this module")] = None,
) -> Any:
    return list_sections(store=store, module_id=module)


@router.post("", response_model=SectionPublic, status_code=status.HTTP_201_CREATED)
def create_section_endpoint(store: StoreDep, section_in: SectionCreate) -> Any:
    section = create_section(store=store, section_in=section_in)
    logger.info("section_created", section_id=section.id, module_id=section.module)
    return section


@router.get("/{section_id}", response_model=SectionPublic)
def read_section(store: StoreDep, section_id: str) -> Any:
    return get_section(store=store, section_id=section_id)


@router.put("/{section_id}", response_model=SectionPublic)
def update_section_endpoint(
    store: StoreDep, section_id: str, section_in: SectionUpdate
) -> Any:
    section = update_section(store=store, section_id=section_id, section_in=section_in)
    logger.info("section_updated", section_id=section_id)
    return section


@router.put("/{section_id}/status", response_model=SectionPublic)
def update_section_status(
    store: StoreDep, section_id: str, status_in: StatusUpdate
) -> Any:
    section = set_section_active(
        store=store, section_id=section_id, active=status_in.active
    )
    logger.info("section_status_changed", section_id=section_id, active=status_in.active)
    return section


@router.delete("/{section_id}", response_model=SuccessResponse)
def delete_section_endpoint(store: StoreDep, section_id: str) -> Any:
    """Delete a section. Fails while translations still use it as their key."""
    delete_section(store=store, section_id=section_id)
    logger.info("section_deleted", section_id=section_id)
    return SuccessResponse(message="Section deleted successfully")
