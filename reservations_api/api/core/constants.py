API_VERSION_HEADER = "X-Reservations-Version"

# JWT Configuration
JWT_ALGORITHM = "HS256"

# Identifiers are UUID4 strings stored in 36-character columns
ID_LENGTH = 36

# Upper bound for page number and page size (32-bit signed int)
MAX_PAGE_VALUE = 2**31 - 1

# Role granted to the creator of an organization
ADMIN_ROLE_ID = "admin"
MEMBER_ROLE_ID = "member"

DEFAULT_ROLES = {
    ADMIN_ROLE_ID: "Administrator",
    MEMBER_ROLE_ID: "Member",
}

# Authentication endpoints configuration
SKIP_AUTH_PATHS = {
    "/openapi.json",
    "/docs",
    "/redoc",
    "/health",
    "/health/liveness",
    "/login",
    "/register",
}
