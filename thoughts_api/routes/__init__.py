"""
Thoughts API — Routes Package
===============================

Route Inventory:
    - index.py:    GET    /                       (service info + route list)
    - thoughts.py: GET    /thoughts               (paginated list)
                   GET    /thoughts/{id}          (single thought)
                   POST   /thoughts               (post, optional auth)
                   POST   /thoughts/{id}/like     (add a heart)
                   PATCH  /thoughts/{id}          (edit, owner only)
                   DELETE /thoughts/{id}          (delete, owner only)
    - auth.py:     POST   /register, POST /login
    - health.py:   GET    /health

Routes stay thin: read the request, call a service, set status/headers.
"""
