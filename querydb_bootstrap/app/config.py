from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017/")
    MONGO_DBNAME = os.getenv("MONGO_DBNAME", "querydb")
    READ_MODEL_COLLECTION = os.getenv("READ_MODEL_COLLECTION", "pedido_read")
    MONGO_TIMEOUT_MS = int(os.getenv("MONGO_TIMEOUT_MS", "10000"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


config = Config()
