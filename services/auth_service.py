from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from core.exceptions import AuthError, InternalError, ValidationError
from models.users import User
from schemas.auth_schemas import CreateUserRequest
from services.token_service import TokenService
from utils.hashing import verify_password, get_password_hash
from utils.logger import get_logger

logger = get_logger(__name__)

class AuthService:

    @staticmethod
    def create_user(request: CreateUserRequest, db: Session) -> User:
        """
        Creates a new user with a bcrypt-hashed password.

        Flow:
        1. Reject usernames that are already taken
        2. Hash the password
        3. Insert and return the user

        The unique constraint on ``username`` backs up step 1 when two
        signups for the same name race each other.
        """
        existing_user = db.query(User).filter(User.username == request.username).first()
        if existing_user:
            logger.warning(
                "Signup attempt with existing username",
                extra={"username": request.username}
            )
            raise ValidationError("Username already registered")

        model = User(
            username=request.username,
            hashed_password=get_password_hash(request.password)
        )

        try:
            db.add(model)
            db.commit()
        except IntegrityError as exc:
            db.rollback()
            logger.warning(
                "Signup lost a race on an existing username",
                extra={"username": request.username}
            )
            raise ValidationError("Username already registered") from exc
        except SQLAlchemyError as exc:
            db.rollback()
            raise InternalError("Could not create user") from exc

        db.refresh(model)
        return model


    @staticmethod
    def authenticate_user(username: str, password: str, db: Session) -> User:
        user = db.query(User).filter(User.username == username).first()

        if not user:
            logger.warning(
            "Login failed - user not found",
            extra={"username": username}
            )
            raise AuthError("Invalid credentials")

        if not verify_password(password, user.hashed_password):
            logger.warning(
                "Login failed - invalid password",
                extra={"user_id": user.id, "username": username}
            )
            raise AuthError("Invalid credentials")

        logger.debug(
            "User authenticated successfully",
            extra={"user_id": user.id, "username": username}
        )

        return user

    @staticmethod
    def login(username: str, password: str, db: Session) -> str:
        """Authenticates and returns a fresh bearer token for the user."""
        user = AuthService.authenticate_user(username, password, db)
        return TokenService.create_access_token(user.id)

    @staticmethod
    def get_user_by_id(db: Session, user_id: int) -> User | None:
        return db.query(User).filter(User.id == user_id).one_or_none()
