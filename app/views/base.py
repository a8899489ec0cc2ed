from typing import Optional

from app.core.i18n import LANGUAGE_NAMES, speech_locale, strings_for
from app.models.common import Language, RequestContext
from app.views.generation_guard import GenerationGuard

LANGUAGE_CYCLE = (Language.ENGLISH, Language.HINDI, Language.KANNADA)


def next_language(language: Language) -> Language:
    index = LANGUAGE_CYCLE.index(language)
    return LANGUAGE_CYCLE[(index + 1) % len(LANGUAGE_CYCLE)]


class BaseView:
    def __init__(
        self,
        language: Language = Language.ENGLISH,
        district: Optional[str] = None,
        crop: Optional[str] = None,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
    ) -> None:
        self.context = RequestContext(
            language=language,
            district=district,
            crop=crop,
            latitude=latitude,
            longitude=longitude,
        )
        self.loading = False
        self._guard = GenerationGuard()

    @property
    def language(self) -> Language:
        return self.context.language

    @property
    def labels(self) -> dict[str, str]:
        return strings_for(self.language)

    @property
    def speech_locale(self) -> str:
        return speech_locale(self.language)

    @property
    def language_toggle_label(self) -> str:
        return LANGUAGE_NAMES[next_language(self.language)]

    def set_language(self, language: Language) -> None:
        self.context = self.context.model_copy(update={"language": language})
