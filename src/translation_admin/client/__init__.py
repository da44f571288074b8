from translation_admin.client.api import TranslationApiClient

__all__ = ["TranslationApiClient"]
