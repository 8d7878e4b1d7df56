# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .users import AuthError, AuthErrorKind, AuthResult, Claims, User, UserProfile

__all__ = [
    "AuthError",
    "AuthErrorKind",
    "AuthResult",
    "Claims",
    "User",
    "UserProfile",
]
