import os
from dotenv import load_dotenv

load_dotenv()


def _csv(value):
    return tuple(part.strip().lower() for part in value.split(",") if part.strip())


def _flag(value):
    return value.strip().lower() in ("1", "true", "yes", "on")


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", SECRET_KEY)
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Custom domain routing
    PLATFORM_DOMAINS = _csv(os.getenv("PLATFORM_DOMAINS", "localhost,127.0.0.1"))
    DOMAIN_CACHE_TTL = int(os.getenv("DOMAIN_CACHE_TTL", "60"))
    DEFAULT_PAGE_SLUG = os.getenv("DEFAULT_PAGE_SLUG", "home")
    NOT_FOUND_PATH = os.getenv("NOT_FOUND_PATH", "/404")
    PASSTHROUGH_PREFIXES = (
        "/api",
        "/static",
        "/openapi",
        "/swagger",
        "/login",
        "/register",
    )
    RESOLVE_PARENT_DOMAINS = _flag(os.getenv("RESOLVE_PARENT_DOMAINS", "false"))

    # Domain lookup collaborator: "sql" reads the mapping table, "http" calls
    # the public lookup endpoint of another deployment.
    DOMAIN_LOOKUP_MODE = os.getenv("DOMAIN_LOOKUP_MODE", "sql")
    DOMAIN_LOOKUP_URL = os.getenv("DOMAIN_LOOKUP_URL", "http://127.0.0.1:5000/api/v1")
    DOMAIN_LOOKUP_TIMEOUT = float(os.getenv("DOMAIN_LOOKUP_TIMEOUT", "2.0"))

    # Where merchants point their A record
    DOMAIN_TARGET = os.getenv("DOMAIN_TARGET", "127.0.0.1")


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.getenv("DEV_DATABASE_URI", "sqlite:///storefront-dev.db")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")


class ProductionConfig(BaseConfig):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI")


class TestingConfig(BaseConfig):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    JWT_SECRET_KEY = "test-secret-key-with-enough-length-for-hs256"
    PLATFORM_DOMAINS = ("example.com", "localhost")
    DOMAIN_LOOKUP_MODE = "sql"
    RESOLVE_PARENT_DOMAINS = False


config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
