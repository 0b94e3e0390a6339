import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock()
    uow.users.get_by_id = AsyncMock()
    uow.users.create = AsyncMock()
    uow.users.update = AsyncMock()

    uow.tasks = MagicMock()
    uow.tasks.create = AsyncMock()
    uow.tasks.list_by_owner = AsyncMock()
    uow.tasks.get_for_owner = AsyncMock()
    uow.tasks.update = AsyncMock()
    uow.tasks.delete = AsyncMock()

    return uow
