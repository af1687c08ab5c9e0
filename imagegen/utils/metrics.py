"""
Prometheus metrics definitions.
All metrics are registered here and can be imported by other modules.
"""
from prometheus_client import Counter, Histogram

# HTTP request metrics
http_requests_total = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'path', 'status']
)

http_request_duration_seconds = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'path'],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0, 60.0]
)

# Error metrics
errors_total = Counter(
    'errors_total',
    'Total errors',
    ['error_type']
)

# Generation metrics
images_generated_total = Counter(
    'images_generated_total',
    'Total images generated'
)

generation_rejected_total = Counter(
    'generation_rejected_total',
    'Generation requests rejected before or after the provider call',
    ['reason']
)

# Image provider metrics
image_provider_requests_total = Counter(
    'image_provider_requests_total',
    'Total image provider requests',
    ['provider']
)

image_provider_failures_total = Counter(
    'image_provider_failures_total',
    'Total image provider failures',
    ['provider']
)

image_provider_latency_seconds = Histogram(
    'image_provider_latency_seconds',
    'Image provider request latency in seconds',
    ['provider'],
    buckets=[0.1, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0, 60.0, 120.0]
)
