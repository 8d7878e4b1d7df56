# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify

from userauth.interfaces.http.dto.users import StatusDTO


class StatusController:
    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("status", __name__)
        bp.add_url_rule("/status", view_func=self.status, methods=["GET"])
        return bp

    def status(self):
        return jsonify(StatusDTO().model_dump())
