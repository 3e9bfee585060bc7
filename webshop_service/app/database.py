from common import Base, get_db

# Engines are created per application in main.create_app and stored on app.state
__all__ = ["Base", "get_db"]
