"""Static sample content set.

Seeds an empty store at startup and backs the API client's offline
fallback. Record ids are derived with uuid5 so every process produces the
same ids for the same sample rows.
"""

import uuid

from translation_admin.core.logging import get_logger
from translation_admin.languages.models import Language
from translation_admin.modules.models import Module
from translation_admin.sections.models import Section
from translation_admin.store import ContentStore
from translation_admin.translations.models import Translation

logger = get_logger(__name__)

SAMPLE_NAMESPACE = uuid.UUID("6f1d8a52-3c1e-4e0b-9d7a-2b6a4f0c9e11")

MODULES = [
    {"id": "offboarding", "name": "Offboarding", "description": "Offboarding processes"},
    {
        "id": "shift_allowance",
        "name": "Shift Allowance",
        "description": "Shift allowance management",
    },
]

SECTIONS = [
    {
        "id": "exit_interview",
        "name": "Exit Interview",
        "module": "offboarding",
        "description": "Employee exit interview process",
    },
    {
        "id": "equipment_return",
        "name": "Equipment Return",
        "module": "offboarding",
        "description": "Equipment return process",
    },
    {
        "id": "final_paycheck",
        "name": "Final Paycheck",
        "module": "offboarding",
        "description": "Final paycheck process",
    },
    {
        "id": "night_shift",
        "name": "Night Shift",
        "module": "shift_allowance",
        "description": "Night shift allowances",
    },
    {
        "id": "weekend_allowance",
        "name": "Weekend Allowance",
        "module": "shift_allowance",
        "description": "Weekend work allowances",
    },
    {
        "id": "holiday_pay",
        "name": "Holiday Pay",
        "module": "shift_allowance",
        "description": "Holiday pay calculations",
    },
]

TRANSLATIONS = [
    {
        "module": "offboarding",
        "translation_key": "exit_interview",
        "en": "Exit Interview",
        "de": "Austrittsgespräch",
        "fr": "Entretien de départ",
        "es": "Entrevista de salida",
    },
    {
        "module": "offboarding",
        "translation_key": "equipment_return",
        "en": "Return Equipment",
        "de": "Geräterückgabe",
        "fr": "Retour de l'équipement",
        "es": "Devolución de equipo",
    },
    {
        "module": "offboarding",
        "translation_key": "final_paycheck",
        "en": "Final Paycheck",
        "de": "Letzte Gehaltsabrechnung",
        "fr": "Dernier salaire",
        "es": "Cheque final",
    },
    {
        "module": "shift_allowance",
        "translation_key": "night_shift",
        "en": "Night Shift",
        "de": "Nachtschicht",
        "fr": "Quart de nuit",
        "es": "Turno nocturno",
    },
    {
        "module": "shift_allowance",
        "translation_key": "weekend_allowance",
        "en": "Weekend Allowance",
        "de": "Wochenendzulage",
        "fr": "Allocation de week-end",
        "es": "Subsidio de fin de semana",
    },
    {
        "module": "shift_allowance",
        "translation_key": "holiday_pay",
        "en": "Holiday Pay",
        "de": "Feiertagszuschlag",
        "fr": "Prime de jour férié",
        "es": "Pago por días festivos",
        "active": False,
    },
]

LANGUAGES = [
    {"code": "en", "name": "English", "is_default": True},
    {"code": "de", "name": "German"},
    {"code": "fr", "name": "French"},
    {"code": "es", "name": "Spanish"},
]


def _sample_id(kind: str, key: str) -> str:
    return str(uuid.uuid5(SAMPLE_NAMESPACE, f"{kind}:{key}"))


def sample_modules() -> list[Module]:
    return [Module.model_validate(data) for data in MODULES]


def sample_sections(module: str | None = None) -> list[Section]:
    return [
        Section.model_validate(data)
        for data in SECTIONS
        if not module or data["module"] == module
    ]


def sample_translations(module: str | None = None) -> list[Translation]:
    return [
        Translation.model_validate(
            {"id": _sample_id("translation", data["translation_key"]), **data}
        )
        for data in TRANSLATIONS
        if not module or data["module"] == module
    ]


def sample_languages() -> list[Language]:
    return [
        Language.model_validate({"id": _sample_id("language", data["code"]), **data})
        for data in LANGUAGES
    ]


def seed_store(store: ContentStore) -> bool:
    """Load the sample set into an empty store.

    Returns:
        True if the store was seeded, False if it already held content
    """
    with store.transaction():
        if not store.is_empty():
            return False

        # Parents first so foreign keys resolve in the relational store
        for record in [
            *sample_modules(),
            *sample_sections(),
            *sample_translations(),
            *sample_languages(),
        ]:
            store.add(record)

    logger.info(
        "sample_data_seeded",
        modules=len(MODULES),
        sections=len(SECTIONS),
        translations=len(TRANSLATIONS),
        languages=len(LANGUAGES),
    )
    return True
