# mentormatch/api/users.py
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from mentormatch.crud import user as user_crud
from mentormatch.database import commit_or_raise, get_db
from mentormatch.models.user import User
from mentormatch.schemas.user import NameUpdate, User as UserSchema
from mentormatch.utils.security import get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.patch("/name", response_model=UserSchema)
def update_name(
    payload: NameUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Rename the caller; the name is trimmed and must keep at least 2 characters."""
    user = user_crud.update_user_name(db, current_user, payload.name)
    commit_or_raise(db, "update user name")
    db.refresh(user)

    logger.info("User %s changed their name", user.id)
    return user
