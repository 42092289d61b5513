from core.database import SessionLocal
from typing import Annotated
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from services.token_service import TokenService

oauth2_bearer = OAuth2PasswordBearer(tokenUrl="login")


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

db_dependency = Annotated[Session, Depends(get_db)]


def get_current_user_id(token: Annotated[str, Depends(oauth2_bearer)]) -> int:
    # AuthError propagates to the handler in main.py as a 401
    return TokenService.decode_access_token(token)


user_id_dependency = Annotated[int, Depends(get_current_user_id)]
