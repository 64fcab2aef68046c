import bcrypt

from todo_api.core.errors import HashingError

# Coût fixe (2^10 itérations)
BCRYPT_ROUNDS = 10
# bcrypt ne prend en compte que les 72 premiers octets
BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    """Hash bcrypt avec sel aléatoire intégré au résultat."""
    try:
        hashed = bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=BCRYPT_ROUNDS))
    except (ValueError, OSError) as e:
        raise HashingError(detail=str(e)) from e
    return hashed.decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    """Ne lève jamais : False si le mot de passe ne correspond pas ou si le hash est illisible."""
    try:
        return bcrypt.checkpw(_encode(password), hashed_password.encode("utf-8"))
    except (ValueError, TypeError, AttributeError):
        return False
