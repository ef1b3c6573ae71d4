# Routes package init
"""
GameStore Backend - API Routes Package
========================================

Route Inventory:
    - root.py:    GET /                (plain-text greeting)
    - games.py:   GET/POST /games, GET/PUT/DELETE /games/{id}
    - genres.py:  GET /genres          (genre reference data)
    - health.py:  GET /health          (service health check)

Routes stay thin: extract input, call GameService, set status and headers.
"""
