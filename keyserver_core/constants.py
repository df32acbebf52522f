# keyserver_core/constants.py

# Collection holding one document per (key, email) user ID claim
USERID_COLLECTION = "userid"

DEFAULT_DB_PATH = "db/keyserver.db"
DEFAULT_STORAGE_PROVIDER = "sqlite"
