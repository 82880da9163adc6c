# attendance_tracker/api/deps.py
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError
from sqlalchemy.orm import Session

from attendance_tracker.core.security import token_owner_email
from attendance_tracker.crud import user as crud_user
from attendance_tracker.db.session import SessionLocal

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login")


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_current_user(token: str = Depends(oauth2_scheme), db: Session = Depends(get_db)):
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        email = token_owner_email(token)
    except JWTError:
        raise credentials_exception

    user = crud_user.get_user_by_email(db, email)
    if not user:
        raise credentials_exception
    return user
