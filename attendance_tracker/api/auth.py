from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from attendance_tracker.api.deps import get_db, get_current_user
from attendance_tracker.core.security import verify_password, create_access_token
from attendance_tracker.crud import user as crud_user
from attendance_tracker.db.models.user import User as UserModel
from attendance_tracker.schemas.user import UserCreate, UserLogin, Token, User

router = APIRouter()


@router.post("/register", response_model=Token)
def register(user_in: UserCreate, db: Session = Depends(get_db)):
    email = user_in.email.strip().lower()
    if not email or not user_in.password:
        raise HTTPException(status_code=400, detail="Email and password are required")
    if crud_user.get_user_by_email(db, email):
        raise HTTPException(status_code=400, detail="Email is already registered")

    user = crud_user.create_user(db, user_in)
    access_token = create_access_token(user.email)
    return {"access_token": access_token, "token_type": "bearer"}


@router.post("/login", response_model=Token)
def login(form: UserLogin, db: Session = Depends(get_db)):
    user = crud_user.get_user_by_email(db, form.email.strip().lower())
    if not user or not verify_password(form.password, user.hashed_password):
        raise HTTPException(status_code=401, detail="Invalid email or password")
    access_token = create_access_token(user.email)
    return {"access_token": access_token, "token_type": "bearer"}


@router.get("/me", response_model=User)
def me(current_user: UserModel = Depends(get_current_user)):
    return current_user
