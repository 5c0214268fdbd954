from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from todo_api.schemas.user import LoginRequest, LoginResponse
from todo_api.services import auth as auth_service
from todo_api.database import get_db

router = APIRouter(tags=["auth"])

@router.post("/login", response_model=LoginResponse)
def login(body: LoginRequest, db: Session = Depends(get_db)):
    token = auth_service.login(db, body.username, body.password)
    return {"token": token, "username": body.username}
