# config.py
import os
from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "si", "on")


# --- CONFIGURACIÓN DE LA BASE DE DATOS ---
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./facturacion.db")

# --- CONFIGURACIÓN DE AUTENTICACIÓN (JWT) ---
JWT_SECRET = os.getenv("JWT_SECRET", "fel-secret-key")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
JWT_EXPIRES_MINUTES = int(os.getenv("JWT_EXPIRES_MINUTES", "1440"))

# --- CONFIGURACIÓN DE LA API ---
API_PREFIX = os.getenv("API_PREFIX", "/api/v1")
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173").split(",")
    if origin.strip()
]
DEFAULT_PAGE_SIZE = int(os.getenv("DEFAULT_PAGE_SIZE", "10"))
MAX_PAGE_SIZE = int(os.getenv("MAX_PAGE_SIZE", "100"))

# --- REGLAS DE FACTURACIÓN ---
# Días que se suman a la fecha de emisión cuando no se envía fecha de vencimiento
DEFAULT_DUE_DAYS = int(os.getenv("DEFAULT_DUE_DAYS", "30"))
# Con True solo se permiten emitida -> pagada/cancelada; pagada y cancelada son finales
STRICT_STATUS_TRANSITIONS = _as_bool(os.getenv("STRICT_STATUS_TRANSITIONS", "false"))

# --- CONTRASEÑAS ---
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "10"))

# --- LOGGING ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
