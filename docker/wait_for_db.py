import os
import time

from pymongo import MongoClient
from pymongo.errors import PyMongoError


def build_mongo_uri() -> str | None:
    return os.getenv("MONGO_URI")


def ping(uri: str, timeout_ms: int) -> None:
    client = MongoClient(uri, serverSelectionTimeoutMS=timeout_ms)
    try:
        client.admin.command("ping")
    finally:
        client.close()


def main() -> int:
    timeout_s = int(os.getenv("DB_WAIT_TIMEOUT", "60"))
    interval_s = float(os.getenv("DB_WAIT_INTERVAL", "2"))
    uri = build_mongo_uri()
    if not uri:
        print("[wait_for_db] ERROR: MONGO_URI is not set")
        return 1

    start = time.time()
    while True:
        try:
            ping(uri, timeout_ms=int(interval_s * 1000) or 1000)
            print("[wait_for_db] MongoDB is ready")
            return 0
        except PyMongoError as e:
            print(f"[wait_for_db] waiting for MongoDB... ({e})")
        # DB_WAIT_TIMEOUT=0 -> uma única tentativa
        if time.time() - start >= timeout_s:
            break
        time.sleep(interval_s)

    print("[wait_for_db] ERROR: MongoDB not ready")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
