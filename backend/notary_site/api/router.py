from fastapi import APIRouter

from notary_site.api.routes import auth, contact_messages, dashboard, health, service_requests, site, users
from notary_site.api.routes.resources import build_admin_router, build_public_router
from notary_site.services.catalog import RESOURCES

api_router = APIRouter()
api_router.include_router(health.router, prefix="/health", tags=["health"])  # GET /
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])  # POST /login, /logout, GET /me
api_router.include_router(users.router, prefix="/users", tags=["users"])  # admin-only user management
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])  # GET /stats
api_router.include_router(site.router, tags=["site"])  # singleton settings
api_router.include_router(contact_messages.router, tags=["contact-messages"])
api_router.include_router(service_requests.router, tags=["service-requests"])
for resource in RESOURCES:
    # GET /{path}, GET /pages/{slug}
    api_router.include_router(build_public_router(resource))
    # GET /admin/{path}, POST/PATCH/DELETE /{path}..., POST /{path}/reorder, PATCH /{path}/{id}/toggle
    api_router.include_router(build_admin_router(resource))
