from unittest.mock import MagicMock, patch

from src.infrastructure.database import get_user_repository, user_repository


def test_injected_repository_is_used(app, mock_repository):
    with app.app_context():
        assert get_user_repository() is mock_repository


def test_proxy_forwards_to_repository(app, mock_repository):
    mock_repository.reset_mock()
    with app.app_context():
        user_repository.ping()
    mock_repository.ping.assert_called_once_with()


def test_repository_is_connected_lazily_from_config():
    from app import create_app

    with patch('src.infrastructure.database.MongoUserRepository') as mock_repo_class:
        connected = MagicMock()
        mock_repo_class.connect.return_value = connected

        app = create_app()
        app.config.update({
            "MONGO_URI": "mongodb://db.internal:27017",
            "MONGO_DB_NAME": "mindful-insights-test",
        })
        mock_repo_class.connect.assert_not_called()

        with app.app_context():
            first = get_user_repository()
            second = get_user_repository()

    assert first is connected
    assert second is connected
    mock_repo_class.connect.assert_called_once_with(
        "mongodb://db.internal:27017", db_name="mindful-insights-test"
    )


def test_ping_route_does_not_connect():
    from app import create_app

    with patch('src.infrastructure.database.MongoUserRepository') as mock_repo_class:
        app = create_app()
        response = app.test_client().get('/ping')

    assert response.status_code == 200
    mock_repo_class.connect.assert_not_called()


def test_proxy_reads_users_in_a_view(app, mock_repository):
    mock_repository.reset_mock()
    with app.test_request_context('/ping'):
        user_repository.get_user("ada@example.com")
    mock_repository.get_user.assert_called_once_with("ada@example.com")
