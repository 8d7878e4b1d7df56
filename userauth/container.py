"""Application dependency container."""

from __future__ import annotations

from functools import cached_property

from userauth.application.services.password_hashing import (
    Argon2PasswordHasher,
    BoundedPasswordHasher,
)
from userauth.application.services.token_issuer import JwtTokenIssuer
from userauth.application.use_cases.users.change_password import ChangePasswordUseCase
from userauth.application.use_cases.users.login_user import LoginUserUseCase
from userauth.application.use_cases.users.register_user import RegisterUserUseCase
from userauth.infrastructure.db import Database
from userauth.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from userauth.interfaces.http.controllers.status_controller import StatusController
from userauth.interfaces.http.controllers.users_controller import UsersController
from userauth.shared.config import AppConfig


class Container:
    """Builds every collaborator once; each Flask app owns one container."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    @cached_property
    def database(self) -> Database:
        return Database(self.config.database)

    @cached_property
    def password_hasher(self) -> BoundedPasswordHasher:
        hashing = self.config.hashing
        return BoundedPasswordHasher(
            Argon2PasswordHasher(
                time_cost=hashing.time_cost,
                memory_cost=hashing.memory_cost,
                parallelism=hashing.parallelism,
            ),
            max_workers=hashing.max_workers,
            timeout=hashing.timeout,
        )

    @cached_property
    def token_issuer(self) -> JwtTokenIssuer:
        return JwtTokenIssuer(self.config.jwt_secret)

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.database)

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
            token_issuer=self.token_issuer,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
            token_issuer=self.token_issuer,
        )

    @cached_property
    def change_password_use_case(self) -> ChangePasswordUseCase:
        return ChangePasswordUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
            token_issuer=self.token_issuer,
        )

    @cached_property
    def users_controller(self) -> UsersController:
        return UsersController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            change_password_use_case=self.change_password_use_case,
        )

    @cached_property
    def status_controller(self) -> StatusController:
        return StatusController()

    def close(self) -> None:
        if "password_hasher" in self.__dict__:
            self.password_hasher.shutdown(wait=False)
        if "database" in self.__dict__:
            self.database.dispose()
