# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .password_hashing import Argon2PasswordHasher, BoundedPasswordHasher
from .token_issuer import TOKEN_LIFETIME, JwtTokenIssuer

__all__ = [
    "Argon2PasswordHasher",
    "BoundedPasswordHasher",
    "JwtTokenIssuer",
    "TOKEN_LIFETIME",
]
