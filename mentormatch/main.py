# mentormatch/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mentormatch.api import auth, mentorship, profile, users
from mentormatch.config import settings
from mentormatch.database import Base, engine
from mentormatch.errors import register_error_handlers

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# Create database tables (Alembic owns the schema outside development)
if settings.APP_ENV == "development":
    Base.metadata.create_all(bind=engine)

# Initialize FastAPI app
app = FastAPI(title="MentorMatch API")

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# API routers
app.include_router(auth.router)         # /auth/*
app.include_router(profile.router)      # /profile/*
app.include_router(users.router)        # /users/*
app.include_router(mentorship.router)   # /mentorship/*

logger.info("MentorMatch API started (env=%s)", settings.APP_ENV)


@app.get("/health")
def health_check():
    return {
        "status": "healthy",
        "message": "MentorMatch API is running",
        "version": "1.0.0",
    }
