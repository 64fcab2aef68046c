import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional, TypedDict

from jose import jwt, JWTError

from todo_api.core.errors import TokenExpired, TokenInvalid

# ==========================================================
# 🔧 Configuration : paramètres de génération/validation JWT
# ==========================================================

@dataclass(frozen=True)
class JWTSettings:
    """
    Configuration des tokens JWT (chargée une fois au démarrage, jamais modifiée ensuite).

    - `secret` : clé secrète pour signer/valider les tokens
    - `algorithm` : algo de signature (HS256 recommandé)
    - `ttl` : durée de vie d'un token
    """
    secret: str
    algorithm: str = "HS256"
    ttl: timedelta = timedelta(hours=1)


# ==========================================================
# 🧱 Types
# ==========================================================

class DecodedToken(TypedDict):
    userId: int
    email: str
    iat: int
    exp: int


# ==========================================================
# 🧩 Fonctions utilitaires
# ==========================================================

_TTL_RE = re.compile(r"^\s*(\d+)\s*([smhd]?)\s*$")
_TTL_UNITS = {"": "seconds", "s": "seconds", "m": "minutes", "h": "hours", "d": "days"}


def parse_ttl(value: str) -> timedelta:
    """
    Convertit une durée "3600", "45s", "30m", "1h", "7d" en timedelta.
    Lève ValueError si le format n'est pas reconnu.
    """
    match = _TTL_RE.match(str(value).lower())
    if not match:
        raise ValueError(f"Invalid token TTL: {value!r}")
    amount, unit = match.groups()
    ttl = timedelta(**{_TTL_UNITS[unit]: int(amount)})
    if ttl <= timedelta(0):
        raise ValueError(f"Token TTL must be positive: {value!r}")
    return ttl


def _now() -> datetime:
    """Renvoie l'heure UTC actuelle."""
    return datetime.now(timezone.utc)


# ==========================================================
# 🎟️ Génération du token
# ==========================================================

def create_access_token(
    *,
    user_id: int,
    email: str,
    settings: JWTSettings,
    now: Optional[datetime] = None,
) -> str:
    """
    Crée un token JWT signé portant {userId, email, iat, exp}.
    """
    now = now or _now()
    payload: DecodedToken = {
        "userId": user_id,
        "email": email,
        "iat": int(now.timestamp()),
        "exp": int((now + settings.ttl).timestamp()),
    }
    return jwt.encode(payload, settings.secret, algorithm=settings.algorithm)


# ==========================================================
# 🔍 Décodage / Validation
# ==========================================================

def decode_token(token: str, settings: JWTSettings, now: Optional[datetime] = None) -> DecodedToken:
    """
    Décode et valide un token JWT (signature + payload + expiration).

    - TokenInvalid : signature invalide ou payload malformé
    - TokenExpired : now >= exp
    """
    try:
        decoded = jwt.decode(
            token,
            settings.secret,
            algorithms=[settings.algorithm],
            # l'expiration est vérifiée ci-dessous (borne incluse)
            options={"verify_aud": False, "verify_exp": False},
        )
    except JWTError as e:
        raise TokenInvalid(detail=str(e)) from e

    user_id = decoded.get("userId")
    email = decoded.get("email")
    exp = decoded.get("exp")
    if (
        not isinstance(user_id, int) or isinstance(user_id, bool)
        or not isinstance(email, str)
        or not isinstance(exp, int) or isinstance(exp, bool)
    ):
        raise TokenInvalid(detail="Malformed token payload")

    now = now or _now()
    if int(now.timestamp()) >= exp:
        raise TokenExpired()

    return {
        "userId": user_id,
        "email": email,
        "iat": decoded.get("iat", 0),
        "exp": exp,
    }
