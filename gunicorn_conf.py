import os

from thumbnail_studio.config import config

bind = f"0.0.0.0:{os.getenv('PORT', '8080')}"
worker_class = "uvicorn.workers.UvicornWorker"
workers = int(os.getenv("WEB_CONCURRENCY", "2"))

# a request may run up to max_variations sequential image calls;
# without a gateway timeout there is no upper bound, so fall back to 30 minutes
if config.gateway_timeout:
    timeout = int(config.gateway_timeout * config.max_variations) + 60
else:
    timeout = 1800
graceful_timeout = 120
keepalive = 75

max_requests = int(os.getenv("MAX_REQUESTS", "1000"))
max_requests_jitter = int(os.getenv("MAX_REQUESTS_JITTER", "100"))

accesslog = "-"
errorlog = "-"
loglevel = config.log_level.lower()
