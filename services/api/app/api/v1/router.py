from fastapi import APIRouter

from app.api.v1 import account, auth, relay, rewrite

router = APIRouter()
router.include_router(rewrite.router, tags=["rewrite"])
router.include_router(relay.router, tags=["relay"])
router.include_router(auth.router, tags=["auth"])
router.include_router(account.router, tags=["account"])
