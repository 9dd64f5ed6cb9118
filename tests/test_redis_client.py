from unittest.mock import patch

import pytest
import redis

from hellodemo.redis_client import KEY, VALUE, run_demo


class FakeRedis:
    instances = []

    def __init__(self, host, port):
        self.host = host
        self.port = port
        self.store = {}
        self.closed = False
        FakeRedis.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True
        return False

    def set(self, key, value):
        self.store[key] = value.encode()
        return True

    def get(self, key):
        return self.store.get(key)


class DownRedis(FakeRedis):
    def set(self, key, value):
        raise redis.ConnectionError("connection refused")


@patch("hellodemo.redis_client.redis.Redis", FakeRedis)
def test_run_demo_round_trips_value(capsys):
    FakeRedis.instances.clear()
    value = run_demo()
    assert value == VALUE.encode()
    client = FakeRedis.instances[-1]
    assert (client.host, client.port) == ("127.0.0.1", 6379)
    assert client.store == {KEY: VALUE.encode()}
    assert client.closed
    assert capsys.readouterr().out.startswith("Got: ")


@patch("hellodemo.redis_client.redis.Redis", FakeRedis)
def test_run_demo_uses_given_address():
    FakeRedis.instances.clear()
    value = run_demo("localhost", 7000)
    assert value == VALUE.encode()
    client = FakeRedis.instances[-1]
    assert (client.host, client.port) == ("localhost", 7000)
    assert client.store == {KEY: VALUE.encode()}


@patch("hellodemo.redis_client.redis.Redis", DownRedis)
def test_run_demo_propagates_connection_error():
    with pytest.raises(redis.ConnectionError):
        run_demo()