"""usersapi: serverless users API over a key-value table."""

__version__ = "0.1.0"
