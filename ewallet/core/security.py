from datetime import datetime, timedelta
from typing import Optional
from jose import JWTError, jwt
import bcrypt
import logging
from ewallet.core.config import settings

# Configurar logging
logger = logging.getLogger(__name__)

# Configuración JWT
ALGORITHM = "HS256"


def _truncate_password_safely(password: str) -> bytes:
    """
    Truncar contraseña de forma segura a 72 bytes para bcrypt.
    Retorna bytes directamente para evitar problemas de codificación.
    """
    password_bytes = password.encode('utf-8')
    if len(password_bytes) <= 72:
        return password_bytes
    return password_bytes[:72]


class BCryptHashProvider:
    """Hash de contraseñas de una sola vía usando bcrypt"""

    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    def generate_hash(self, payload: str) -> str:
        """Generar hash de contraseña"""
        safe_password_bytes = _truncate_password_safely(payload)
        salt = bcrypt.gensalt(rounds=self.rounds)
        hashed = bcrypt.hashpw(safe_password_bytes, salt)
        return hashed.decode('utf-8')

    def compare_hash(self, payload: str, hashed: str) -> bool:
        """Verificar contraseña plana contra hash"""
        if not hashed:
            return False

        hashed_bytes = hashed.encode('utf-8') if isinstance(hashed, str) else hashed
        try:
            return bcrypt.checkpw(_truncate_password_safely(payload), hashed_bytes)
        except ValueError:
            # Hash almacenado con formato inválido
            logger.error("Hash de contraseña con formato inválido")
            return False


class JWTSigningProvider:
    """Emisión y verificación de tokens JWT firmados"""

    def __init__(self, secret_key: str, expires_minutes: int, algorithm: str = ALGORITHM):
        self.secret_key = secret_key
        self.expires_minutes = expires_minutes
        self.algorithm = algorithm

    def issue(self, subject: str, expires_delta: Optional[timedelta] = None) -> str:
        """Crear token de acceso con el id de usuario como subject"""
        now = datetime.utcnow()
        expire = now + (expires_delta or timedelta(minutes=self.expires_minutes))
        to_encode = {"sub": str(subject), "iat": now, "exp": expire}
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def decode(self, token: str) -> Optional[dict]:
        """Verificar y decodificar token; None si es inválido o expiró"""
        try:
            return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError:
            return None


hash_provider = BCryptHashProvider()
signing_provider = JWTSigningProvider(settings.secret_key, settings.access_token_expire_minutes)


def get_hash_provider() -> BCryptHashProvider:
    return hash_provider


def get_signing_provider() -> JWTSigningProvider:
    return signing_provider
