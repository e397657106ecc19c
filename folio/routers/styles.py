from fastapi import APIRouter, Depends
from fastapi.responses import Response

from folio.dependencies import get_settings
from folio.services.markdown_renderer import highlight_stylesheet
from folio.settings import Settings

router = APIRouter()


@router.get("/styles/highlight.css")
def get_highlight_css(current_settings: Settings = Depends(get_settings)):
    """Code highlighting rules for the light and dark site themes."""
    css = highlight_stylesheet(
        current_settings.CODE_THEME_LIGHT, current_settings.CODE_THEME_DARK
    )
    return Response(content=css, media_type="text/css")
