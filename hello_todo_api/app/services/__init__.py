"""
Service layer abstraction.

Each service encapsulates the logic for one domain.  Services are
plain objects constructed by ``create_app`` and stored on
``app.state`` so every application instance owns its own data.
"""
