from starlette.config import Config
from starlette.datastructures import CommaSeparatedStrings


# Load environment variables from .env file
config = Config(".env")

# Database
DATABASE_URL = config("DATABASE_URL", default="sqlite:///./social_media.db")
DATABASE_ECHO = config("DATABASE_ECHO", cast=bool, default=False)

# Defaults applied to posts and comments submitted without author details
DEFAULT_USERNAME = config("DEFAULT_USERNAME", default="Anonymous")
DEFAULT_USER_IMAGE_URL = config(
    "DEFAULT_USER_IMAGE_URL",
    default="https://randomuser.me/api/portraits/lego/1.jpg",
)
MAX_URL_LENGTH = config("MAX_URL_LENGTH", cast=int, default=2048)

# HTTP
CORS_ALLOW_ORIGINS = config("CORS_ALLOW_ORIGINS", cast=CommaSeparatedStrings, default="*")
LOG_LEVEL = config("LOG_LEVEL", default="INFO")
