"""Static tables shared by the decoders: alphabets, epochs and lookup maps."""

from __future__ import annotations

from datetime import datetime, timezone

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Alphabets
NANOID_ALPHABET = "_-0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
PUSHID_ALPHABET = "-0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ_abcdefghijklmnopqrstuvwxyz"
CUID2_ALPHABET = "abcdefghijklmnopqrstuvwxyz0123456789"

# Epochs
KSUID_EPOCH_SECONDS = 1400000000
TSID_EPOCH_MS = 1577836800000
TWITTER_EPOCH_MS = 1288834974657
GREGORIAN_UUID_OFFSET = 0x01B21DD213814000  # 100ns ticks from 1582-10-15 to 1970-01-01

# Largest valid KSUID in base62 (2^160 - 1)
KSUID_MAX_STRING = "aWgEPTl1tmebfsQzFP4bxwgy80V"

# Probable algorithm by hex digest length
HASH_LENGTHS = {
    32: "MD5",
    40: "SHA-1",
    56: "SHA-224",
    64: "SHA-256",
    96: "SHA-384",
    128: "SHA-512",
}

HASH_STRENGTH = {
    "MD5": ("broken (collisions found)", "checksums only"),
    "SHA-1": ("weak (collisions found)", "deprecated for security"),
    "SHA-224": ("strong", "cryptographic applications"),
    "SHA-256": ("strong", "cryptographic applications"),
    "SHA-384": ("very strong", "high-security applications"),
    "SHA-512": ("very strong", "high-security applications"),
}

BASE32_SIZE_HINTS = {
    16: "128-bit identifier (UUID size)",
    20: "160-bit hash (SHA-1 size)",
    32: "256-bit hash (SHA-256 size)",
    48: "384-bit hash (SHA-384 size)",
    64: "512-bit hash (SHA-512 size)",
}

TYPEID_PREFIX_DESCRIPTIONS = {
    "user": "User Account",
    "org": "Organization",
    "post": "Post/Article",
    "comment": "Comment",
    "product": "Product",
    "order": "Order",
    "payment": "Payment",
    "invoice": "Invoice",
    "session": "Session",
    "token": "Token",
    "file": "File Upload",
    "event": "Event",
    "task": "Task",
    "project": "Project",
    "customer": "Customer",
    "account": "Account",
    "document": "Document",
    "message": "Message",
}

# Force/generate aliases keyed by lowercase canonical decoder name
FORMAT_ALIASES = {
    "uuid": ["guid"],
    "objectid": ["mongodb", "bson"],
    "cuid": ["cuid2"],
    "scru128": ["scru"],
    "nuid": ["nats-uid", "nats-id"],
    "nanoid": ["nano-id", "nano_id"],
    "snowflake": ["sf", "sf-twitter", "sf-discord", "twitter", "discord"],
    "unixtime": ["unix", "timestamp"],
    "hashhex": ["hash", "hex"],
    "base58": ["b58", "bitcoin"],
    "pushid": ["push-id", "firebase"],
    "base32": ["b32"],
    "shortuuid": ["short-uuid", "suuid"],
    "sqids": ["sqid"],
    "typeid": ["type-id"],
}

OUTPUT_FORMATS = ("card", "short", "json", "binary")
