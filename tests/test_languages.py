import pytest

from translation_admin.core.exceptions import (
    ConflictError,
    ResourceExistsError,
    ResourceNotFoundError,
    ValidationError,
)
from translation_admin.languages import (
    LanguageCreate,
    LanguageUpdate,
    create_language,
    delete_language,
    get_language,
    list_languages,
    set_default_language,
    set_language_active,
    update_language,
)


def _by_code(store, code):
    return next(lang for lang in list_languages(store=store) if lang.code == code)


def _defaults(store):
    return [lang.code for lang in list_languages(store=store) if lang.is_default]


def test_first_language_becomes_default(store):
    language = create_language(
        store=store, language_in=LanguageCreate(code="en", name="English", active=False)
    )

    assert language.is_default is True
    assert language.active is True


def test_second_language_is_not_default(store):
    create_language(store=store, language_in=LanguageCreate(code="en", name="English"))
    language = create_language(store=store, language_in=LanguageCreate(code="de", name="German"))

    assert language.is_default is False
    assert _defaults(store) == ["en"]


def test_create_default_moves_the_flag(store):
    create_language(store=store, language_in=LanguageCreate(code="en", name="English"))

    language = create_language(
        store=store,
        language_in=LanguageCreate(code="de", name="German", active=False, is_default=True),
    )

    assert language.active is True
    assert _defaults(store) == ["de"]


def test_create_language_validation(store):
    with pytest.raises(ValidationError):
        create_language(store=store, language_in=LanguageCreate(code="", name="Nothing"))
    with pytest.raises(ValidationError):
        create_language(store=store, language_in=LanguageCreate(code="toolong", name="X"))
    with pytest.raises(ValidationError):
        create_language(store=store, language_in=LanguageCreate(code="en", name=" "))
    assert list_languages(store=store) == []


def test_create_language_duplicate_code(seeded_store):
    with pytest.raises(ResourceExistsError):
        create_language(store=seeded_store, language_in=LanguageCreate(code="de", name="Deutsch"))


def test_list_languages_ordered_by_name(seeded_store):
    assert [lang.name for lang in list_languages(store=seeded_store)] == [
        "English",
        "French",
        "German",
        "Spanish",
    ]


def test_set_default_swaps_the_flag(seeded_store):
    german = _by_code(seeded_store, "de")

    set_default_language(store=seeded_store, language_id=german.id)

    assert _defaults(seeded_store) == ["de"]


def test_set_default_rejects_inactive(seeded_store):
    french = _by_code(seeded_store, "fr")
    set_language_active(store=seeded_store, language_id=french.id, active=False)

    with pytest.raises(ValidationError):
        set_default_language(store=seeded_store, language_id=french.id)
    assert _defaults(seeded_store) == ["en"]


def test_set_default_missing(seeded_store):
    with pytest.raises(ResourceNotFoundError):
        set_default_language(store=seeded_store, language_id="nope")


def test_default_cannot_be_deactivated(seeded_store):
    english = _by_code(seeded_store, "en")

    with pytest.raises(ValidationError):
        set_language_active(store=seeded_store, language_id=english.id, active=False)

    english = get_language(store=seeded_store, language_id=english.id)
    assert english.active is True
    assert english.is_default is True


def test_non_default_toggles_freely(seeded_store):
    spanish = _by_code(seeded_store, "es")

    assert set_language_active(store=seeded_store, language_id=spanish.id, active=False).active is False
    assert set_language_active(store=seeded_store, language_id=spanish.id, active=True).active is True


class TestUpdateLanguage:
    def test_rename(self, seeded_store):
        german = _by_code(seeded_store, "de")

        updated = update_language(
            store=seeded_store, language_id=german.id, language_in=LanguageUpdate(name="Deutsch")
        )

        assert updated.name == "Deutsch"
        assert updated.code == "de"

    def test_code_collision(self, seeded_store):
        german = _by_code(seeded_store, "de")

        with pytest.raises(ResourceExistsError):
            update_language(
                store=seeded_store, language_id=german.id, language_in=LanguageUpdate(code="fr")
            )

    def test_requires_a_field(self, seeded_store):
        german = _by_code(seeded_store, "de")

        with pytest.raises(ValidationError):
            update_language(
                store=seeded_store, language_id=german.id, language_in=LanguageUpdate()
            )

    def test_cannot_deactivate_default(self, seeded_store):
        english = _by_code(seeded_store, "en")

        with pytest.raises(ValidationError):
            update_language(
                store=seeded_store, language_id=english.id, language_in=LanguageUpdate(active=False)
            )

    def test_cannot_unset_default(self, seeded_store):
        english = _by_code(seeded_store, "en")

        with pytest.raises(ValidationError):
            update_language(
                store=seeded_store,
                language_id=english.id,
                language_in=LanguageUpdate(is_default=False),
            )
        assert _defaults(seeded_store) == ["en"]

    def test_make_default_activates_and_clears_others(self, seeded_store):
        french = _by_code(seeded_store, "fr")
        set_language_active(store=seeded_store, language_id=french.id, active=False)

        updated = update_language(
            store=seeded_store, language_id=french.id, language_in=LanguageUpdate(is_default=True)
        )

        assert updated.is_default is True
        assert updated.active is True
        assert _defaults(seeded_store) == ["fr"]

    def test_make_default_and_deactivate_is_rejected(self, seeded_store):
        french = _by_code(seeded_store, "fr")

        with pytest.raises(ValidationError):
            update_language(
                store=seeded_store,
                language_id=french.id,
                language_in=LanguageUpdate(is_default=True, active=False),
            )
        assert _defaults(seeded_store) == ["en"]


def test_delete_default_conflicts(seeded_store):
    english = _by_code(seeded_store, "en")

    with pytest.raises(ConflictError) as exc_info:
        delete_language(store=seeded_store, language_id=english.id)
    assert exc_info.value.error_code == "LANGUAGE_IS_DEFAULT"


def test_delete_language_in_use_conflicts(seeded_store):
    german = _by_code(seeded_store, "de")

    with pytest.raises(ConflictError) as exc_info:
        delete_language(store=seeded_store, language_id=german.id)
    assert exc_info.value.error_code == "LANGUAGE_IN_USE"
    assert exc_info.value.details["translations"] == 6


def test_delete_unused_language(seeded_store):
    italian = create_language(
        store=seeded_store, language_in=LanguageCreate(code="it", name="Italian")
    )

    delete_language(store=seeded_store, language_id=italian.id)

    assert "it" not in [lang.code for lang in list_languages(store=seeded_store)]


def test_delete_unused_language_named_like_a_record_field(seeded_store):
    indonesian = create_language(
        store=seeded_store, language_in=LanguageCreate(code="id", name="Indonesian")
    )

    delete_language(store=seeded_store, language_id=indonesian.id)

    assert "id" not in [lang.code for lang in list_languages(store=seeded_store)]


class TestLanguageRoutes:
    def test_two_languages_second_made_default(self, empty_client):
        first = empty_client.post("/api/languages", json={"code": "en", "name": "English"})
        second = empty_client.post("/api/languages", json={"code": "de", "name": "German"})
        assert first.status_code == 201
        assert first.json()["is_default"] is True

        response = empty_client.put(f"/api/languages/{second.json()['id']}/default")
        assert response.status_code == 200

        languages = {lang["code"]: lang for lang in empty_client.get("/api/languages").json()}
        assert languages["de"]["is_default"] is True
        assert languages["en"]["is_default"] is False

    def test_deactivate_default_is_400(self, client):
        english = next(
            lang for lang in client.get("/api/languages").json() if lang["code"] == "en"
        )

        response = client.put(f"/api/languages/{english['id']}/status", json={"active": False})

        assert response.status_code == 400
        assert client.get(f"/api/languages/{english['id']}").json()["active"] is True

    def test_delete_default_is_409(self, client):
        english = next(
            lang for lang in client.get("/api/languages").json() if lang["code"] == "en"
        )

        response = client.delete(f"/api/languages/{english['id']}")

        assert response.status_code == 409

    def test_code_too_long_is_400(self, client):
        response = client.post("/api/languages", json={"code": "english", "name": "English"})

        assert response.status_code == 400
        assert response.json()["details"] == {"field": "code"}
