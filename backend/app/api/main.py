from fastapi import APIRouter

from app.api.routes import claude, files, login, product_info, prompts, social_posts, templates, utils

api_router = APIRouter()
api_router.include_router(login.router, tags=["login"])
api_router.include_router(utils.router)
api_router.include_router(product_info.router, tags=["product-info"])
api_router.include_router(prompts.router, tags=["prompts"])
api_router.include_router(claude.router, tags=["ai"])
api_router.include_router(files.router, prefix="/files", tags=["files"])
api_router.include_router(templates.router, tags=["templates"])
api_router.include_router(social_posts.router, prefix="/social-posts", tags=["social-posts"])
