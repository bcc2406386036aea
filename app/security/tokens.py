import hashlib
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import TypedDict

from jose import jwt, JWTError

# ==========================================================
# 🔧 Configuration : paramètres de génération/validation JWT
# ==========================================================

@dataclass(frozen=True)
class JWTSettings:
    """
    Configuration des tokens de session.

    - `secret` : clé secrète pour signer/valider les tokens
    - `issuer` : émetteur (utilisé dans le payload)
    - `algorithm` : seul algo accepté à la signature ET à la validation
    - `ttl` : durée de vie d'un token de session (7 jours par défaut)
    """
    secret: str
    issuer: str = "media-management"
    algorithm: str = "HS256"
    ttl: timedelta = timedelta(hours=168)


# ==========================================================
# 🧱 Types
# ==========================================================

class DecodedToken(TypedDict, total=False):
    iss: str
    sub: str            # identité déclarée du client (User-Agent)
    jti: str
    iat: int
    exp: int


# ==========================================================
# 🧩 Fonctions utilitaires
# ==========================================================

def _now() -> datetime:
    """Renvoie l'heure UTC actuelle."""
    return datetime.now(timezone.utc)

def new_jti() -> str:
    """Crée un identifiant unique pour un token."""
    return str(uuid.uuid4())

def hash_token(token: str) -> str:
    """Empreinte SHA-256 stockée en base à la place du token brut."""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()

def to_datetime(timestamp: int) -> datetime:
    return datetime.fromtimestamp(timestamp, tz=timezone.utc)


# ==========================================================
# 🎟️ Génération
# ==========================================================

def create_session_token(*, subject: str, settings: JWTSettings, now: datetime | None = None) -> str:
    """
    Crée un token de session signé (par défaut valable 7 jours).
    Le `jti` aléatoire garantit deux tokens distincts pour deux logins dans la même seconde.
    """
    now = now or _now()
    payload: DecodedToken = {
        "iss": settings.issuer,
        "sub": subject,
        "jti": new_jti(),
        "iat": int(now.timestamp()),
        "exp": int((now + settings.ttl).timestamp()),
    }
    return jwt.encode(payload, settings.secret, algorithm=settings.algorithm)


# ==========================================================
# 🔍 Décodage / Validation
# ==========================================================

def decode_token(token: str, settings: JWTSettings) -> DecodedToken:
    """
    Décode et valide un token (signature, algo, expiration, émetteur).
    Lève JWTError si l'un des contrôles échoue.
    """
    decoded = jwt.decode(
        token,
        settings.secret,
        algorithms=[settings.algorithm],
        issuer=settings.issuer,
        options={"verify_aud": False, "require_exp": True, "require_iat": True},
    )
    return decoded  # type: ignore[return-value]

