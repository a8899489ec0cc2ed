from fastapi import APIRouter, Query
from pydantic import BaseModel

from app.core.i18n import speech_locale, strings_for
from app.models.common import Language

router = APIRouter(prefix="/ui", tags=["UI"])


class UiStringsResponse(BaseModel):
    language: Language
    speech_locale: str
    strings: dict[str, str]


@router.get("/strings", response_model=UiStringsResponse)
async def get_ui_strings(language: Language = Query(default=Language.ENGLISH)):
    """
    Static labels, placeholders and greetings for the selected language.
    """
    return UiStringsResponse(
        language=language,
        speech_locale=speech_locale(language),
        strings=strings_for(language),
    )
