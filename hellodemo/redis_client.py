"""Store and read back one key on a Redis server."""

import redis

KEY = "the phone rang"
VALUE = "but nobody came..."


def run_demo(host: str = "127.0.0.1", port: int = 6379) -> bytes | None:
    """Set a fixed key, read it back, print and return the stored value."""
    with redis.Redis(host=host, port=port) as client:
        client.set(KEY, VALUE)
        value = client.get(KEY)
    print(f"Got: {value!r}")
    return value