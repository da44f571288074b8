from typing import Annotated

from fastapi import Depends, Request

from translation_admin.core.config import Settings, get_settings
from translation_admin.store import ContentStore


def get_store(request: Request) -> ContentStore:
    """Return the store the application was created with."""
    return request.app.state.store


SettingsDep = Annotated[Settings, Depends(get_settings)]
StoreDep = Annotated[ContentStore, Depends(get_store)]
