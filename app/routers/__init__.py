from fastapi import APIRouter
from app.routers import animal, posts

router = APIRouter()

router.include_router(
    animal.router,
    prefix="/animal",
    tags=["Animals"]
)

router.include_router(
    posts.router,
    prefix="/posts",
    tags=["Posts"]
)
