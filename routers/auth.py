from fastapi import APIRouter
from starlette import status
from schemas.auth_schemas import CreateUserRequest, LoginRequest, Token, UserResponse
from services.auth_service import AuthService
from utils.deps import db_dependency
from utils.logger import get_logger, sanitize_log_data

# Setup logger
logger = get_logger(__name__)


router = APIRouter(
    tags=["auth"]
)


@router.post("/signup", status_code=status.HTTP_201_CREATED, response_model=UserResponse)
async def signup(body: CreateUserRequest, db: db_dependency):
    logger.debug("Signup requested", extra=sanitize_log_data(body.model_dump()))

    user = AuthService.create_user(body, db)

    logger.info(
        "User registered successfully",
        extra={"user_id": user.id, "username": user.username}
    )

    # Includes the stored hash; callers must not pass it on to end users
    return UserResponse(
        id=user.id,
        username=user.username,
        password=user.hashed_password,
        created_at=user.created_at,
        updated_at=user.updated_at
    )


@router.post("/login", response_model=Token)
async def login(body: LoginRequest, db: db_dependency):
    token = AuthService.login(body.username, body.password, db)

    logger.info("User logged in successfully", extra={"username": body.username})

    return Token(token=token)
