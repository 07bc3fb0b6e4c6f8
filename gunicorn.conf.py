"""Gunicorn config for container deployment."""
import os

bind = f"0.0.0.0:{os.environ.get('PORT', '8000')}"

# Uvicorn async workers; each worker loads its own copy of the dataset
# on its first request. Tune via WEB_CONCURRENCY env var.
worker_class = "uvicorn.workers.UvicornWorker"
workers = int(os.environ.get("WEB_CONCURRENCY", "2"))

timeout = 60
graceful_timeout = 30

# Keep-alive must exceed the fronting proxy's keep-alive
keepalive = 65

accesslog = "-"
errorlog = "-"
loglevel = os.environ.get("SALES_EXPLORER_LOG_LEVEL", "info").lower()

wsgi_app = "sales_explorer.main:app"
