"""
ⒸAngelaMos | 2025
constants.py
"""

API_PREFIX = "/api/v1"
API_VERSION = "v1"

EMAIL_MAX_LENGTH = 320
USERNAME_MAX_LENGTH = 100
NAME_MAX_LENGTH = 100
BIO_MAX_LENGTH = 255
PHOTO_MAX_LENGTH = 512

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 64
PASSWORD_HASH_MAX_LENGTH = 1024

CAPTION_MAX_LENGTH = 255
IMAGE_MAX_LENGTH = 512
COMMENT_MAX_LENGTH = 255

ACCESS_TOKEN_COOKIE_NAME = "jwt"

RESET_TOKEN_BYTES = 32
RESET_TOKEN_HASH_LENGTH = 64

# password_changed_at is stamped this far in the past so a credential
# issued in the same request is strictly newer than the change
PASSWORD_CHANGED_AT_SKEW_SECONDS = 1

SENSITIVE_FIELDS = frozenset(
    {
        "hashed_password",
        "password_reset_token_hash",
        "password_reset_expires_at",
        "password_changed_at",
        "email",
    }
)
