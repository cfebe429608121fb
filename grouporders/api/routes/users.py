"""User Routes: registration and lookup."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from grouporders.core.drafts import UserDraft
from grouporders.core.errors import (
    EmailAlreadyRegisteredError, ResourceNotFoundError,
)
from grouporders.infrastructure.database import get_db
from grouporders.repositories import SqlUserRepository
from grouporders.schemas.user import UserCreate, UserResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.post(
    "", response_model=UserResponse, status_code=status.HTTP_201_CREATED,
)
async def create_user(body: UserCreate, db: AsyncSession = Depends(get_db)):
    users = SqlUserRepository(db)
    if await users.find_by_email(body.email):
        raise EmailAlreadyRegisteredError()
    try:
        user = await users.save(
            UserDraft(name=body.name, email=body.email, password=body.password),
        )
        await db.commit()
    except IntegrityError as e:
        # concurrent registration won the unique email index
        await db.rollback()
        raise EmailAlreadyRegisteredError() from e
    logger.info("User registered", extra={"user_id": user.id})
    # fresh user: reference lists are empty, no need to load them
    return UserResponse(
        id=user.id, name=user.name, email=user.email,
        orders=[], orders_packs=[], created_at=user.created_at,
    )


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: UUID, db: AsyncSession = Depends(get_db)):
    user = await SqlUserRepository(db).find_by_id(user_id)
    if user is None:
        raise ResourceNotFoundError("User", str(user_id))
    return UserResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        orders=[o.id for o in user.orders],
        orders_packs=[p.id for p in user.orders_packs],
        created_at=user.created_at,
    )
