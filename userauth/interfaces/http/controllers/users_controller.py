# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from flask import Blueprint, Response, jsonify, request

from userauth.application.use_cases.users.change_password import ChangePasswordUseCase
from userauth.application.use_cases.users.login_user import LoginUserUseCase
from userauth.application.use_cases.users.register_user import RegisterUserUseCase
from userauth.interfaces.http.dto.users import AuthResultDTO


def _json_body() -> dict[str, Any]:
    # Malformed or non-object bodies fall through to field validation.
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


class UsersController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        change_password_use_case: ChangePasswordUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._change_password_use_case = change_password_use_case

    def register(self) -> tuple[Response, int]:
        result = self._register_use_case.execute(_json_body())
        return jsonify(AuthResultDTO.payload(result)), 200

    def login(self) -> tuple[Response, int]:
        result = self._login_use_case.execute(_json_body())
        return jsonify(AuthResultDTO.payload(result)), 200

    def change_password(self) -> tuple[Response, int]:
        result = self._change_password_use_case.execute(_json_body())
        return jsonify(AuthResultDTO.payload(result)), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("users", __name__, url_prefix="/api/users")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/password", view_func=self.change_password, methods=["PUT"])
        return bp
