import os
from pathlib import Path

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "fallback-secret-key")
DEBUG = os.getenv("DEBUG", "false").lower() == "true"

ALLOWED_HOSTS = [
    "localhost",
    "127.0.0.1",
    "testserver",
]

INSTALLED_APPS = [
    "linetree",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "linetree.urls"

TEMPLATES = []

# no models; lines live in the URL, not the database
DATABASES = {}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = False
USE_TZ = True

STATIC_URL = "/static/"

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "{levelname} {name}: {message}", "style": "{"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "linetree": {
            "handlers": ["console"],
            "level": os.getenv("LINETREE_LOG_LEVEL", "INFO"),
        },
    },
}

# Query string parameter holding a compressed lines document
LINETREE_SHARE_PARAM = "l"

# Board orientation when a document never branches, or branches for both sides
LINETREE_DEFAULT_ORIENTATION = "white"

LINETREE_BASE_URL = os.getenv("LINETREE_BASE_URL", "http://localhost:8000")
