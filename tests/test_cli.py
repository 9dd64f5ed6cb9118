from unittest.mock import patch

import pytest

from hellodemo.cli import main


class FakeRedis:
    def __init__(self, host, port):
        self.store = {}

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def set(self, key, value):
        self.store[key] = value.encode()

    def get(self, key):
        return self.store.get(key)


def test_unknown_command_is_reported(capsys):
    assert main(["fly"]) == 0
    assert capsys.readouterr().out == "Unknown command: fly\n"


def test_missing_command_exits():
    with pytest.raises(SystemExit) as info:
        main([])
    assert "usage" in str(info.value.code)


@patch("hellodemo.redis_client.redis.Redis", FakeRedis)
def test_app_command_runs_redis_demo(capsys):
    assert main(["app"]) == 0
    assert capsys.readouterr().out == "Got: b'but nobody came...'\n"