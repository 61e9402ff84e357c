"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Iterable, Optional, Union
from uuid import UUID

from sqlalchemy import delete, exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from lobby.domain.shared.time import ensure_tz_aware
from lobby.domain.user import (
    Email,
    EmailAlreadyExistsError,
    IdentityAlreadyBoundError,
    User,
    UserRepository,
)
from lobby.infrastructure.persistence.sqlalchemy.models import (
    UserIdentityModel,
    UserModel,
)

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        model = await self._find_model_by_id(user_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def find_by_identity(self, identity: str) -> Optional[User]:
        stmt = (
            select(UserModel)
            .join(UserIdentityModel, UserIdentityModel.user_id == UserModel.id)
            .where(UserIdentityModel.identity == identity)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        # Normalize email for lookup
        email_value = email.value if isinstance(email, Email) else Email(email).value

        stmt = select(UserModel).where(UserModel.email == email_value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def exists_by_identities_in(self, identity: str) -> bool:
        stmt = select(exists().where(UserIdentityModel.identity == identity))
        return bool(await self._session.scalar(stmt))

    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        user = await self.find_by_email(email)
        return user is not None

    async def create(self, user: User) -> User:
        if await self.exists_by_email(user.email_obj):
            raise EmailAlreadyExistsError(user.email)
        for identity in user.identities:
            if await self.exists_by_identities_in(identity):
                raise IdentityAlreadyBoundError(identity)

        model = self._map_to_model(user)
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as e:
            # Lost a race against a concurrent registration
            logger.warning("User %s rejected by the store: %s", user.id, e.orig)
            raise EmailAlreadyExistsError(user.email) from e

        logger.info("Created user: %s (email: %s)", user.id, user.email)
        return user

    async def update(self, user: User) -> User:
        model = await self._find_model_by_id(user.id)
        if model is None:
            # Nothing to update; persist as new
            return await self.create(user)

        self._update_model(model, user)
        try:
            await self._session.flush()
        except IntegrityError as e:
            logger.warning("User %s rejected by the store: %s", user.id, e.orig)
            raise IdentityAlreadyBoundError(", ".join(sorted(user.identities))) from e

        logger.debug("Updated user: %s", user.id)
        return user

    async def find_all_by_id(self, user_ids: Iterable[UUID]) -> list[User]:
        ids = list(user_ids)
        if not ids:
            return []
        stmt = select(UserModel).where(UserModel.id.in_(ids))
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def delete_all(self) -> None:
        await self._session.execute(delete(UserIdentityModel))
        await self._session.execute(delete(UserModel))
        await self._session.flush()
        logger.info("Deleted all users")

    async def _find_model_by_id(self, user_id: UUID) -> Optional[UserModel]:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            email=model.email,
            nickname=model.nickname,
            identities=[identity.identity for identity in model.identities],
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            email=user.email,
            nickname=user.nickname,
            identities=[
                UserIdentityModel(identity=identity, user_id=user.id)
                for identity in sorted(user.identities)
            ],
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def _update_model(self, model: UserModel, user: User):
        model.email = user.email
        model.nickname = user.nickname
        model.updated_at = user.updated_at

        known = {identity.identity for identity in model.identities}
        for identity in sorted(user.identities - known):
            model.identities.append(
                UserIdentityModel(identity=identity, user_id=user.id),
            )
