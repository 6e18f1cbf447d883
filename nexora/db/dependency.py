from fastapi import Request


def get_db(request: Request):
    """
    Dependency to get a database session.
    Yields a session from the app's session factory and ensures it is closed after use.
    """
    db = request.app.state.db.SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_settings(request: Request):
    return request.app.state.settings
