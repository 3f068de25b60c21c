from fastapi import APIRouter

from localegate.api.routes.messages import router as messages_router
from localegate.api.routes.system import router as system_router

api_router = APIRouter()

api_router.include_router(system_router)
api_router.include_router(messages_router)
