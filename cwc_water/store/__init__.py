"""Document store module."""
from cwc_water.store.connection import MongoConnection
