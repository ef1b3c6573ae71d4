# Services package init
"""
GameStore Backend - Services Layer
====================================

What:  Business logic between routes (HTTP) and stores (persistence).

Service Inventory:
    - validation.py:   field rules for create/update bodies
    - mapping.py:      entity <-> DTO functions
    - game_service.py: GameService, the per-route workflows
"""
