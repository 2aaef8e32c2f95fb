"""Root Route - welcome message at GET /."""

from fastapi import APIRouter

from casework.config import get_settings

router = APIRouter(tags=["root"])


@router.get("/")
async def welcome():
    return {"message": f"Welcome to the {get_settings().app_name}"}
