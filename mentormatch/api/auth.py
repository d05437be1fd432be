import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from mentormatch.crud import user as user_crud
from mentormatch.database import commit_or_raise, get_db
from mentormatch.errors import ConflictError
from mentormatch.models.user import User
from mentormatch.schemas.auth import LoginRequest, RegisterRequest, Token
from mentormatch.schemas.user import User as UserSchema
from mentormatch.utils.security import authenticate_user, create_access_token, get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


# ===== REGISTER ENDPOINT =====

@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(user_data: RegisterRequest, db: Session = Depends(get_db)):
    """Register a new mentor or mentee account"""
    normalized_email = user_data.email.strip().lower()

    if user_crud.get_user_by_email(db, normalized_email):
        raise ConflictError("Email already registered")

    new_user = user_crud.create_user(
        db,
        name=user_data.name.strip(),
        email=normalized_email,
        password=user_data.password,
        role=user_data.role,
    )
    commit_or_raise(db, "register user")

    logger.info("Registered %s user %s", new_user.role.value, new_user.id)
    return {"message": "Registration successful", "id": new_user.id}


# ===== LOGIN ENDPOINT =====

@router.post("/login", response_model=Token)
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    """Verify credentials and return access token"""
    user = authenticate_user(db, credentials.email, credentials.password)

    if not user or not user.is_active:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid email or password")

    access_token = create_access_token(data={"sub": user.email, "role": user.role.value})

    return {
        "access_token": access_token,
        "token_type": "bearer",
        "role": user.role
    }


# ===== CURRENT USER =====

@router.get("/me", response_model=UserSchema)
def read_current_user(current_user: User = Depends(get_current_user)):
    return current_user
