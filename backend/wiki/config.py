import os
from dotenv import load_dotenv
from sqlalchemy.pool import StaticPool

load_dotenv()


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_DATABASE_URI = os.getenv("WIKI_DATABASE_URI", "sqlite:///wiki.db")
    SQLALCHEMY_ENGINE_OPTIONS: dict = {}

    WIKI_HOST = os.getenv("WIKI_HOST", "0.0.0.0")
    WIKI_PORT = int(os.getenv("WIKI_PORT", "8080"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    INDEX_TITLE = os.getenv("WIKI_INDEX_TITLE", "Home of our Wiki")


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")


class ProductionConfig(BaseConfig):
    DEBUG = False
    # Server-backed engines get a bounded pool; SQLite's default pool takes no size.
    SQLALCHEMY_ENGINE_OPTIONS = (
        {
            "pool_size": int(os.getenv("WIKI_DB_POOL_SIZE", "30")),
            "pool_pre_ping": True,
        }
        if not BaseConfig.SQLALCHEMY_DATABASE_URI.startswith("sqlite")
        else {}
    )


class TestingConfig(BaseConfig):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    # One shared in-memory connection across threads
    SQLALCHEMY_ENGINE_OPTIONS = {
        "poolclass": StaticPool,
        "connect_args": {"check_same_thread": False},
    }
    LOG_LEVEL = "WARNING"


config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
