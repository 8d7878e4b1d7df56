# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Mapping
from http import HTTPStatus
from typing import Any

from flask import Flask, Response, jsonify, request
from werkzeug.exceptions import HTTPException

from userauth.shared.logging import logger

from .base import AppError, InfrastructureError

ErrorTranslator = Callable[[Any], AppError]


def handle_app_error(error: AppError) -> tuple[Response, HTTPStatus]:
    response = jsonify(error.to_dict())
    return response, error.status


def _log_translated(exc: Exception, error: AppError, debug_mode: bool) -> None:
    where = f"{request.method} {request.path}"
    if error.status >= HTTPStatus.INTERNAL_SERVER_ERROR:
        logger.opt(exception=exc).error(f"Internal error {error.code} on {where}")
    elif debug_mode:
        logger.info(f"Handled error {error.code} on {where} -> {int(error.status)}")


def register_error_handler(
    app: Flask,
    *,
    translators: Mapping[type[Exception], ErrorTranslator] | None = None,
    debug_mode: bool = False,
    default_status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR,
) -> None:

    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        if exc.status >= HTTPStatus.INTERNAL_SERVER_ERROR:
            logger.opt(exception=exc).error(
                f"Internal error {exc.code} on {request.method} {request.path}"
            )
        return handle_app_error(exc)

    for exc_type, translate in (translators or {}).items():

        def _handle_translated(exc: Exception, _translate: ErrorTranslator = translate):
            error = _translate(exc)
            _log_translated(exc, error, debug_mode)
            return handle_app_error(error)

        app.register_error_handler(exc_type, _handle_translated)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        response = jsonify({"message": (exc.name or "").lower()})
        return response, exc.code or default_status

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        if debug_mode:
            logger.exception(
                f"Unhandled exception: {request.method} {request.path} "
                f"query={dict(request.args)}, body_size={len(request.data)}"
            )
        else:
            logger.error(f"Error: {type(exc).__name__} on {request.method} {request.path}")

        return handle_app_error(InfrastructureError("internal_error", status=default_status))
