from fastapi import APIRouter
from starlette import status
from core.exceptions import NotFoundError
from schemas.auth_schemas import CurrentUserResponse
from services.auth_service import AuthService
from utils.deps import db_dependency, user_id_dependency


router = APIRouter(
    prefix="/users",
    tags=["users"]
)

@router.get("/me", status_code=status.HTTP_200_OK, response_model=CurrentUserResponse)
async def get_user_info(user_id: user_id_dependency, db: db_dependency):
    """
    Current user for the bearer token (protected endpoint).
    """
    model = AuthService.get_user_by_id(db=db, user_id=user_id)

    if not model:
        raise NotFoundError("User not found")

    return model
