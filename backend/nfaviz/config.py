import os
from dotenv import load_dotenv

# Load .env from project root
load_dotenv()

DEFAULT_FORMAT = os.getenv("NFAVIZ_DEFAULT_FORMAT", "penrose")
EPSILON_SYMBOL = os.getenv("NFAVIZ_EPSILON_SYMBOL", "ε")
MAX_PATTERN_LENGTH = int(os.getenv("NFAVIZ_MAX_PATTERN_LENGTH", "512"))
MAX_NFA_NODES = int(os.getenv("NFAVIZ_MAX_NFA_NODES", "10000"))
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("NFAVIZ_CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]
DEBUG = os.getenv("NFAVIZ_DEBUG", "").lower() in {"1", "true", "yes"}
