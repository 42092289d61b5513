from datetime import datetime, timezone, timedelta
from jose import jwt, JWTError
from core.config import settings
from core.exceptions import AuthError
from utils.logger import get_logger

logger = get_logger(__name__)


class TokenService:
    """
    Issues and verifies the bearer tokens handed out at login.

    Tokens are stateless: there is no refresh and no revocation, a token is
    valid until its ``exp`` claim passes.
    """

    @staticmethod
    def create_access_token(user_id: int, expires_delta: timedelta = None) -> str:
        """
        Creates a signed JWT for the given user.

        Args:
            user_id: User's ID, stored in the ``id`` claim
            expires_delta: Token lifetime (default: ACCESS_TOKEN_EXPIRE_MINUTES)

        Returns:
            Encoded JWT string
        """
        if expires_delta is None:
            expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

        now = datetime.now(timezone.utc)

        payload = {
            "id": user_id,
            "iat": now,
            "exp": now + expires_delta
        }

        return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

    @staticmethod
    def decode_access_token(token: str) -> int:
        """
        Verifies signature and expiry and returns the user id.

        Raises:
            AuthError: If the token is malformed, expired, badly signed or
                has no ``id`` claim
        """
        try:
            payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        except JWTError as exc:
            logger.debug("Token rejected", extra={"reason": str(exc)})
            raise AuthError("Could not validate credentials") from exc

        user_id = payload.get("id")
        if user_id is None:
            raise AuthError("Could not validate credentials")

        return user_id
