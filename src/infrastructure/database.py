from flask import current_app
from werkzeug.local import LocalProxy

from src.infrastructure.repositories import MongoUserRepository

def get_user_repository():
    """
    Returns the user repository registered on the current app.
    Created from MONGO_URI on first use unless one was injected via init_app.
    """
    if 'user_repository' not in current_app.extensions:
        current_app.extensions['user_repository'] = MongoUserRepository.connect(
            current_app.config['MONGO_URI'],
            db_name=current_app.config['MONGO_DB_NAME'],
        )

    return current_app.extensions['user_repository']

def init_app(app, repository=None):
    """Register the user repository with the Flask app."""
    if repository is not None:
        app.extensions['user_repository'] = repository

# Use a LocalProxy to access the repository within the application context,
# e.g. `from src.infrastructure.database import user_repository` in a view,
# then `user_repository.get_user(email_address)`.
user_repository = LocalProxy(get_user_repository)
