import logging

from nextstep.auth import routes as auth_router
from nextstep.chatbot import routes as chatbot_router
from nextstep.goals import routes as goals_router
from nextstep.intake import routes as intake_router
from nextstep.notices import routes as notices_router
from nextstep.profiles import routes as profiles_router
from nextstep.site import routes as site_router
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from nextstep.core.config import CORS_ORIGINS, LOG_LEVEL
from nextstep.core.database import Base, engine

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

app = FastAPI(
    title="NextStep Guidance API",
    version="1.0.0",
    description="Backend for NextStep Guidance: goal tracking, intake questionnaires, admin console and site assistant.",
)

# CORS config
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(site_router.router)
app.include_router(auth_router.router)
app.include_router(profiles_router.router)
app.include_router(goals_router.router)
app.include_router(intake_router.router)
app.include_router(notices_router.router)
app.include_router(profiles_router.admin_router)
app.include_router(goals_router.admin_router)
app.include_router(intake_router.admin_router)
app.include_router(notices_router.admin_router)
app.include_router(site_router.admin_router)
app.include_router(chatbot_router.router)


# DB Tables
@app.on_event("startup")
def create_tables():
    Base.metadata.create_all(bind=engine)
