"""Authentication domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from authn.domain.model import User
from authn.domain.repository import UserRepository
from authn.domain.value import (
    AuthenticationResponse,
    FederatedAuthnParams,
    PlatformId,
    UserId,
)

from .base import Service
from .jwt_service import JWTService
from .platform_service import PlatformService


class AuthenticationService(Service):
    """Signs users in (or up) and issues session tokens."""

    def __init__(
        self,
        user_repository: UserRepository,
        platform_service: PlatformService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize authentication service.

        Args:
            user_repository: User repository
            platform_service: Platform domain service
            jwt_service: JWT token domain service
        """
        self.user_repository = user_repository
        self.platform_service = platform_service
        self.jwt_service = jwt_service

    async def federated_authn(
        self, params: FederatedAuthnParams
    ) -> AuthenticationResponse:
        """Sign in a user whose identity was verified by a third party.

        Steps:
        1. Find the user's account on the predefined platform, or their
           self-serve account when there is no predefined platform
        2. If found: record the login
        3. If not: create a verified user, and for self-serve sign-ups a
           platform owned by that user
        4. Issue a session token

        Args:
            params: Identity and sign-up preferences from the provider

        Returns:
            Token and user details

        Raises:
            NotFoundError: If the predefined platform does not exist
        """
        email = params.email.lower()
        platform_id = params.predefined_platform_id

        with logfire.span(
            "authentication_service.federated_authn",
            provider=params.provider.value,
            predefined_platform_id=platform_id,
        ):
            user = await self._find_existing_user(email, platform_id)

            if user:
                user = await self.user_repository.save(
                    user.model_copy(
                        update={"last_login_at": datetime.now(timezone.utc)}
                    )
                )
                logfire.info(
                    "Existing user signed in",
                    user_id=str(user.id),
                    platform_id=user.platform_id,
                )
            else:
                user = await self._sign_up(email, params)

            token = self.jwt_service.create_token(
                user_id=str(user.id), email=user.email, platform_id=user.platform_id
            )

            return AuthenticationResponse(
                token=token,
                user_id=str(user.id),
                email=user.email,
                first_name=user.first_name,
                last_name=user.last_name,
                platform_id=user.platform_id,
            )

    async def _find_existing_user(
        self, email: str, platform_id: PlatformId | None
    ) -> User | None:
        """Find the account to sign in to.

        With a predefined platform, only an account on that platform counts.
        Without one, the account must own its platform (a self-serve sign-up);
        memberships of other tenants' platforms are ignored.
        """
        for user in await self.user_repository.find_all_by_email(email):
            if platform_id is not None:
                if user.platform_id == platform_id:
                    return user
                continue

            if user.platform_id is None:
                continue
            platform = await self.platform_service.get_one(user.platform_id)
            if platform and platform.owner_id == user.id:
                return user
        return None

    async def _sign_up(self, email: str, params: FederatedAuthnParams) -> User:
        platform_id = params.predefined_platform_id
        if platform_id is not None:
            # Must exist before anyone can join it
            await self.platform_service.get_one_or_throw(platform_id)

        now = datetime.now(timezone.utc)
        user = User(
            id=UserId(uuid4()),
            email=email,
            first_name=params.first_name,
            last_name=params.last_name,
            platform_id=platform_id,
            provider=params.provider,
            verified=True,
            track_events=params.track_events,
            news_letter=params.news_letter,
            created_at=now,
            updated_at=now,
            last_login_at=now,
        )
        user = await self.user_repository.save(user)

        if platform_id is None:
            platform = await self.platform_service.create(
                owner_id=user.id, name=f"{user.first_name}'s Platform"
            )
            user = await self.user_repository.save(
                user.model_copy(update={"platform_id": platform.id})
            )

        logfire.info(
            "New user signed up",
            user_id=str(user.id),
            provider=params.provider.value,
            platform_id=user.platform_id,
        )
        return user
