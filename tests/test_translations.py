import pytest

from translation_admin.core.exceptions import (
    ResourceExistsError,
    ResourceNotFoundError,
    ValidationError,
)
from translation_admin.translations import (
    TranslationCreate,
    TranslationUpdate,
    create_translation,
    delete_translation,
    get_translation,
    list_translations,
    set_translation_active,
    set_translation_field,
    update_translation,
)


def _by_key(store, key):
    return next(t for t in list_translations(store=store) if t.translation_key == key)


def test_list_ordered_by_module_then_section(seeded_store):
    translations = list_translations(store=seeded_store)

    assert [(t.module, t.translation_key) for t in translations] == sorted(
        (t.module, t.translation_key) for t in translations
    )
    assert len(translations) == 6


def test_list_by_module(seeded_store):
    translations = list_translations(store=seeded_store, module="shift_allowance")

    assert {t.translation_key for t in translations} == {
        "holiday_pay",
        "night_shift",
        "weekend_allowance",
    }


def test_create_translation_defaults(seeded_store):
    from translation_admin.sections import SectionCreate, create_section

    create_section(
        store=seeded_store,
        section_in=SectionCreate(id="notice", name="Notice", module="offboarding"),
    )

    translation = create_translation(
        store=seeded_store,
        translation_in=TranslationCreate(
            module="offboarding", translation_key="notice", en="Notice", fr="Préavis"
        ),
    )

    assert translation.active is True
    assert (translation.de, translation.fr, translation.es) == ("", "Préavis", "")
    assert get_translation(store=seeded_store, translation_id=translation.id).en == "Notice"


def test_create_translation_requires_english(seeded_store):
    with pytest.raises(ValidationError):
        create_translation(
            store=seeded_store,
            translation_in=TranslationCreate(
                module="offboarding", translation_key="exit_interview", en=" "
            ),
        )


def test_create_translation_section_must_belong_to_module(seeded_store):
    with pytest.raises(ValidationError) as exc_info:
        create_translation(
            store=seeded_store,
            translation_in=TranslationCreate(
                module="offboarding", translation_key="night_shift", en="Night"
            ),
        )
    assert exc_info.value.message == "Section does not exist in the specified module"


def test_create_translation_duplicate_key(seeded_store):
    with pytest.raises(ResourceExistsError):
        create_translation(
            store=seeded_store,
            translation_in=TranslationCreate(
                module="offboarding", translation_key="exit_interview", en="Again"
            ),
        )


def test_set_field_changes_only_that_language(seeded_store):
    before = _by_key(seeded_store, "night_shift")

    set_translation_field(
        store=seeded_store,
        module="shift_allowance",
        key="night_shift",
        language="de",
        value="Nachtdienst",
    )

    after = _by_key(seeded_store, "night_shift")
    assert after.de == "Nachtdienst"
    assert (after.en, after.fr, after.es, after.active) == (
        before.en,
        before.fr,
        before.es,
        before.active,
    )


@pytest.mark.parametrize(
    "key, language, value",
    [
        ("", "de", "x"),
        ("night_shift", "", "x"),
        ("night_shift", "de", ""),
        ("night_shift", "en", "   "),
        ("night_shift", "it", "x"),
    ],
)
def test_set_field_validation(seeded_store, key, language, value):
    with pytest.raises(ValidationError):
        set_translation_field(
            store=seeded_store,
            module="shift_allowance",
            key=key,
            language=language,
            value=value,
        )


def test_set_field_wrong_module_is_not_found(seeded_store):
    with pytest.raises(ResourceNotFoundError):
        set_translation_field(
            store=seeded_store,
            module="offboarding",
            key="night_shift",
            language="de",
            value="x",
        )


def test_update_translation(seeded_store):
    translation = _by_key(seeded_store, "holiday_pay")

    updated = update_translation(
        store=seeded_store,
        translation_id=translation.id,
        translation_in=TranslationUpdate(es="Pago festivo", active=True),
    )

    assert updated.es == "Pago festivo"
    assert updated.active is True
    assert updated.en == "Holiday Pay"


def test_update_translation_cannot_blank_english(seeded_store):
    translation = _by_key(seeded_store, "holiday_pay")

    with pytest.raises(ValidationError):
        update_translation(
            store=seeded_store,
            translation_id=translation.id,
            translation_in=TranslationUpdate(en=""),
        )
    assert _by_key(seeded_store, "holiday_pay").en == "Holiday Pay"


def test_set_active_and_delete(seeded_store):
    translation = _by_key(seeded_store, "night_shift")

    set_translation_active(store=seeded_store, translation_id=translation.id, active=False)
    assert get_translation(store=seeded_store, translation_id=translation.id).active is False

    delete_translation(store=seeded_store, translation_id=translation.id)
    with pytest.raises(ResourceNotFoundError):
        get_translation(store=seeded_store, translation_id=translation.id)


class TestTranslationRoutes:
    def test_list_by_module(self, client):
        response = client.get("/api/translations/offboarding")

        assert response.status_code == 200
        assert [t["translation_key"] for t in response.json()] == [
            "equipment_return",
            "exit_interview",
            "final_paycheck",
        ]

    def test_set_field(self, client):
        response = client.post(
            "/api/translations/shift_allowance",
            json={"key": "night_shift", "language": "fr", "value": "Nuit"},
        )

        assert response.status_code == 200
        assert response.json()["success"] is True
        row = next(
            t
            for t in client.get("/api/translations/shift_allowance").json()
            if t["translation_key"] == "night_shift"
        )
        assert row["fr"] == "Nuit"
        assert row["de"] == "Nachtschicht"

    def test_set_field_invalid_language_is_400(self, client):
        response = client.post(
            "/api/translations/shift_allowance",
            json={"key": "night_shift", "language": "it", "value": "Notte"},
        )

        assert response.status_code == 400
        assert "Supported languages: en, de, fr, es" in response.json()["message"]

    def test_set_field_blank_english_is_400(self, client):
        response = client.post(
            "/api/translations/shift_allowance",
            json={"key": "night_shift", "language": "en", "value": "   "},
        )

        assert response.status_code == 400
        row = next(
            t
            for t in client.get("/api/translations/shift_allowance").json()
            if t["translation_key"] == "night_shift"
        )
        assert row["en"] == "Night Shift"

    def test_update_status_and_delete(self, client):
        translation = client.get("/api/translations/offboarding").json()[0]

        response = client.put(
            f"/api/translations/{translation['id']}/status", json={"active": False}
        )
        assert response.status_code == 200
        assert response.json()["success"] is True

        response = client.put(
            f"/api/translations/{translation['id']}", json={"de": "Neu"}
        )
        assert response.status_code == 200
        assert response.json()["de"] == "Neu"
        assert response.json()["active"] is False

        response = client.delete(f"/api/translations/{translation['id']}")
        assert response.status_code == 200
        assert len(client.get("/api/translations/offboarding").json()) == 2

    def test_status_requires_active_flag(self, client):
        translation = client.get("/api/translations").json()[0]

        response = client.put(f"/api/translations/{translation['id']}/status", json={})

        assert response.status_code == 400
