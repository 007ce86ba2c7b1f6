import os

from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./ecoaction.db")
FRONTEND_URL = os.getenv("FRONTEND_URL")
PORT = int(os.getenv("PORT", 5000))

# No auth yet, every request acts as this user
DEFAULT_USER_ID = os.getenv("DEFAULT_USER_ID", "eco_user_123")

# --- UI client settings ---
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:5000/api")
API_TIMEOUT = float(os.getenv("API_TIMEOUT", 10))

# --- CORS ---
ALLOWED_ORIGINS = [
    origin for origin in ["http://localhost:3000", FRONTEND_URL] if origin
]
