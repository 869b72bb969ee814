"""Async MongoDB connection helper."""

from mongo_connect.config.logging import configure_logging
from mongo_connect.config.settings import Settings, get_settings
from mongo_connect.config.storage.models import ConnectOptions
from mongo_connect.resources.mongo.client import BaseMongoDriver, MongoConnection, MotorDriver
from mongo_connect.resources.mongo.errors import ConfigurationError
from mongo_connect.services.connector import ConnectOutcome, Connector, connect_mongo

__all__ = [
    "BaseMongoDriver",
    "ConfigurationError",
    "ConnectOptions",
    "ConnectOutcome",
    "Connector",
    "MongoConnection",
    "MotorDriver",
    "Settings",
    "configure_logging",
    "connect_mongo",
    "get_settings",
]
