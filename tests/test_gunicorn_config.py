"""
Tests for the gunicorn deployment config.
"""
import importlib.util
from pathlib import Path
from unittest import mock

CONFIG_PATH = Path(__file__).resolve().parent.parent / 'deployment' / 'gunicorn' / 'gunicorn_config.py'


def load_config():
    spec = importlib.util.spec_from_file_location('gunicorn_config', CONFIG_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestWorkerDefaults:
    """Worker count follows the contact rate limit store."""

    def test_default_store_runs_single_worker(self, monkeypatch):
        monkeypatch.delenv('RATE_LIMIT_STORE', raising=False)
        monkeypatch.delenv('GUNICORN_WORKERS', raising=False)

        config = load_config()

        assert config.in_memory_rate_limit is True
        assert config.workers == 1

    def test_shared_store_scales_workers(self, monkeypatch):
        monkeypatch.setenv('RATE_LIMIT_STORE', 'contact.rate_limiting.CacheRateLimitStore')
        monkeypatch.delenv('GUNICORN_WORKERS', raising=False)

        config = load_config()

        assert config.in_memory_rate_limit is False
        assert config.workers > 1

    def test_warns_when_default_store_is_forced_onto_many_workers(self, monkeypatch):
        monkeypatch.delenv('RATE_LIMIT_STORE', raising=False)
        monkeypatch.setenv('GUNICORN_WORKERS', '4')
        config = load_config()
        server = mock.Mock()

        config.when_ready(server)

        server.log.warning.assert_called_once()
        assert server.log.warning.call_args.args[1] == 4

    def test_no_warning_with_shared_store(self, monkeypatch):
        monkeypatch.setenv('RATE_LIMIT_STORE', 'contact.rate_limiting.CacheRateLimitStore')
        monkeypatch.setenv('GUNICORN_WORKERS', '4')
        config = load_config()
        server = mock.Mock()

        config.when_ready(server)

        server.log.warning.assert_not_called()
