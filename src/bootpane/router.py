from fastapi import APIRouter

from bootpane.routers.tabs import router as tabs_router

router = APIRouter()
router.include_router(tabs_router)
