from fastapi import APIRouter, Query, Response

from localegate.logging import get_module_logger
from localegate.services import TranslatorDep

router = APIRouter(tags=["Messages"])
logger = get_module_logger()


@router.get("/greeting")
def get_greeting(
    _: TranslatorDep,
    response: Response,
    name: str = Query(default="world", max_length=100),
    notifications: int = Query(default=0, ge=0),
):
    """Greet the caller in their preferred language."""
    response.headers["Content-Language"] = _.locale
    logger.info("greeting_rendered", notifications=notifications)
    return {
        "locale": _.locale,
        "greeting": _("Hello, {0}!", name),
        "notifications": _.ngettext(
            "You have one new notification",
            "You have {0} new notifications",
            notifications,
        ),
    }
