from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from nfaviz import config
from nfaviz.api.routes import router

app = FastAPI(
    title="NFA Diagram Generator",
    version="0.1.0",
)

# ✅ Middleware FIRST
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ✅ Routes AFTER middleware
app.include_router(router)

print(f"[main] NFA diagram API ready (default format: {config.DEFAULT_FORMAT})")
