from typing import Optional

from sqlalchemy.orm import Session

from mentormatch import models
from mentormatch.utils.security import get_password_hash


def create_user(db: Session, *, name: str, email: str, password: str, role: models.UserRole) -> models.User:
    db_user = models.User(
        name=name,
        email=email.strip().lower(),
        password_hash=get_password_hash(password),
        role=role,
        is_active=True,
    )
    db.add(db_user)
    db.flush()
    return db_user


def get_user_by_email(db: Session, email: str) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.email == email.strip().lower()).first()


def update_user_name(db: Session, db_user: models.User, name: str) -> models.User:
    db_user.name = name
    db.flush()
    return db_user
