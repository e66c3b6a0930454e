"""
Gunicorn configuration for LifeJournal.
Every request is a short read-modify-write against the key-value store, so
a threaded worker with a modest timeout is enough. All values can be
overridden from the environment.
"""

from __future__ import annotations

import logging
import multiprocessing
import os

wsgi_app = os.environ.get("GUNICORN_APP", "lifejournal.wsgi:app")
bind = os.environ.get("GUNICORN_BIND", "0.0.0.0:8000")

# ===== Workers =====
worker_class = os.environ.get("GUNICORN_WORKER_CLASS", "gthread")
workers = int(os.environ.get("GUNICORN_WORKERS", str(multiprocessing.cpu_count() + 1)))
threads = int(os.environ.get("GUNICORN_THREADS", "4"))
max_requests = int(os.environ.get("GUNICORN_MAX_REQUESTS", "5000"))
max_requests_jitter = int(os.environ.get("GUNICORN_MAX_REQUESTS_JITTER", "500"))

# ===== Timeouts =====
# Store calls carry their own socket timeout (KV_SOCKET_TIMEOUT_SECONDS)
timeout = int(os.environ.get("GUNICORN_TIMEOUT", "30"))
graceful_timeout = int(os.environ.get("GUNICORN_GRACEFUL_TIMEOUT", "15"))
keepalive = int(os.environ.get("GUNICORN_KEEPALIVE", "5"))

# ===== Logging =====
accesslog = os.environ.get("GUNICORN_ACCESSLOG", "-")
errorlog = os.environ.get("GUNICORN_ERRORLOG", "-")
loglevel = os.environ.get("GUNICORN_LOGLEVEL", "info")
capture_output = True
access_log_format = os.environ.get(
    "GUNICORN_ACCESS_LOG_FORMAT",
    '{"timestamp": "%(t)s", "remote": "%(h)s", "request": "%(r)s", '
    '"status": %(s)s, "response_time": %(D)s}',
)

proc_name = os.environ.get("GUNICORN_PROC_NAME", "lifejournal")
forwarded_allow_ips = os.environ.get("GUNICORN_FORWARDED_ALLOW_IPS", "127.0.0.1")
preload_app = os.environ.get("GUNICORN_PRELOAD", "false").lower() in ("1", "true", "yes")


def when_ready(server):
    """Called just after the server is started."""
    logging.getLogger(__name__).info(
        "LifeJournal listening on %s (workers=%s, threads=%s)", bind, workers, threads
    )


def worker_abort(worker):
    """Called when a worker is timed out and is being replaced."""
    logging.getLogger(__name__).warning("Worker %s timed out (>%ss), aborting", worker.pid, timeout)
