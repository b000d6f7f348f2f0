import os

wsgi_app = "app:server"
worker_class = "gthread"
workers = int(os.getenv("WEB_CONCURRENCY", "2"))
threads = 4
bind = f"0.0.0.0:{os.getenv('PORT', '8050')}"
timeout = 60
graceful_timeout = 30
keepalive = 5
forwarded_allow_ips = "10.0.0.0/8,127.0.0.1"

# recycle workers so cached frames do not grow without bound
max_requests = 2000
max_requests_jitter = 200

limit_request_fields = 100
limit_request_field_size = 8190
