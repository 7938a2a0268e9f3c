"""
Gunicorn configuration for the portfolio contact API.

Usage:
    gunicorn core.wsgi:application -c deployment/gunicorn/gunicorn_config.py
"""
import multiprocessing
import os

bind = os.getenv("GUNICORN_BIND", f"0.0.0.0:{os.getenv('PORT', '8000')}")

IN_MEMORY_RATE_LIMIT_STORE = "contact.rate_limiting.InMemoryRateLimitStore"

# Same default as core.settings: unset means per-process counters
rate_limit_store = os.getenv("RATE_LIMIT_STORE") or IN_MEMORY_RATE_LIMIT_STORE
in_memory_rate_limit = rate_limit_store == IN_MEMORY_RATE_LIMIT_STORE

# Per-process counters are only exact with a single worker
default_workers = 1 if in_memory_rate_limit else multiprocessing.cpu_count() * 2 + 1
workers = int(os.getenv("GUNICORN_WORKERS", default_workers))
worker_class = "sync"
worker_tmp_dir = "/dev/shm"
max_requests = 1000
max_requests_jitter = 100
timeout = 30
keepalive = 5

# Logging to stdout/stderr, collected by the platform
accesslog = "-"
errorlog = "-"
loglevel = os.getenv("GUNICORN_LOG_LEVEL", "info")
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)s'

proc_name = "portfolio-contact-api"


def on_starting(server):
    server.log.info("Starting portfolio contact API")


def when_ready(server):
    server.log.info("Gunicorn server is ready. Spawning workers")
    if in_memory_rate_limit and workers > 1:
        server.log.warning(
            "In-memory rate limiting with %s workers: each worker counts separately", workers
        )


def worker_abort(worker):
    worker.log.info("Worker received SIGABRT signal")
