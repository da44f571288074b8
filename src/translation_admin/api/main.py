from fastapi import APIRouter

from translation_admin.api.routes import languages, modules, sections, translations

api_router = APIRouter()
api_router.include_router(modules.router)
api_router.include_router(sections.router)
api_router.include_router(translations.router)
api_router.include_router(languages.router)
