# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping

from flask import Flask

from userauth.shared.errors import register_error_handler
from userauth.shared.errors.http import ErrorTranslator


def configure_error_handling(
    app: Flask,
    *,
    translators: Mapping[type[Exception], ErrorTranslator] | None = None,
    debug_mode: bool = False,
) -> None:
    register_error_handler(app, translators=translators, debug_mode=debug_mode)
