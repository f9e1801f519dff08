"""Database schema definitions"""

# Thumbnails table
THUMBNAILS_TABLE = """
CREATE TABLE thumbnails (
    id TEXT,
    data BLOB,
    filename TEXT,
    mime TEXT,
    size INTEGER
)
"""

# Path to ID mapping table
IDS_TABLE = """
CREATE TABLE ids (
    path TEXT,
    id TEXT,
    is_title INTEGER  -- 1 for top-level titles, 0 for nested items
)
"""

# Users table
USERS_TABLE = """
CREATE TABLE users (
    username TEXT,
    password TEXT,  -- bcrypt hash
    token TEXT,
    admin INTEGER
)
"""

# Order matters: the first statement failing with "already exists" means
# the whole schema is present.
SCHEMA = [
    THUMBNAILS_TABLE,
    "CREATE UNIQUE INDEX tn_index ON thumbnails (id)",
    IDS_TABLE,
    "CREATE UNIQUE INDEX path_idx ON ids (path)",
    "CREATE UNIQUE INDEX id_idx ON ids (id)",
    USERS_TABLE,
]

# Only created together with a fresh users table
USER_INDEXES = [
    "CREATE UNIQUE INDEX username_idx ON users (username)",
    "CREATE UNIQUE INDEX token_idx ON users (token)",
]
