"""
Thoughts API — Middleware Package
===================================

Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Rate Limit] → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Rate Limit first: reject abusive clients before any processing
    2. Request ID: correlation id for logs and error bodies
    3. Logging: method, path, status and duration with the request id
    4. CORS: Starlette's CORSMiddleware (handles preflight)
"""
