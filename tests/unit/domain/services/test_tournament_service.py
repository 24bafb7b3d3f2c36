"""Tests for TournamentService and the shared lifecycle operations."""

from uuid import uuid4
from unittest.mock import AsyncMock

import pytest

from arena_api.domain.errors import ConflictError, NotFoundError
from arena_api.domain.models.enums import TournamentStatus
from arena_api.domain.models.pagination import ListQuery
from arena_api.domain.models.tournaments import Tournament, TournamentCreate, TournamentUpdate
from arena_api.domain.repositories.tournaments import TournamentRepository
from arena_api.domain.services.tournaments import TournamentService


def _tournament(**overrides):
    defaults = dict(id=1, external_id=uuid4(), title="Summer Cup")
    defaults.update(overrides)
    return Tournament(**defaults)


@pytest.fixture
def repo():
    repo = AsyncMock(spec=TournamentRepository)
    repo.title_exists.return_value = False
    return repo


@pytest.fixture
def service(repo):
    return TournamentService(repo, max_page_size=50)


# --- create / update ---

async def test_create_passes_only_given_fields(service, repo):
    repo.create.return_value = _tournament()
    await service.create(TournamentCreate(title="Summer Cup", entry_fee="100"))
    repo.create.assert_awaited_once_with({"title": "Summer Cup", "entry_fee": "100"})


async def test_create_duplicate_title_raises_conflict(service, repo):
    repo.title_exists.return_value = True
    with pytest.raises(ConflictError) as info:
        await service.create(TournamentCreate(title="Summer Cup"))
    assert info.value.field == "title"
    repo.create.assert_not_awaited()


async def test_update_checks_title_excluding_self(service, repo):
    current = _tournament(id=4)
    repo.find_by_external_id.return_value = current
    repo.update.return_value = _tournament(id=4, title="Winter Cup")
    await service.update(current.external_id, TournamentUpdate(title="Winter Cup"))
    repo.title_exists.assert_awaited_once_with("Winter Cup", 4)
    repo.update.assert_awaited_once_with(4, {"title": "Winter Cup"})


async def test_update_same_title_skips_uniqueness_check(service, repo):
    current = _tournament()
    repo.find_by_external_id.return_value = current
    repo.update.return_value = current
    await service.update(current.external_id, TournamentUpdate(title="Summer Cup"))
    repo.title_exists.assert_not_awaited()


async def test_update_taken_title_raises_conflict(service, repo):
    repo.find_by_external_id.return_value = _tournament()
    repo.title_exists.return_value = True
    with pytest.raises(ConflictError):
        await service.update(uuid4(), TournamentUpdate(title="Winter Cup"))


async def test_update_unknown_raises_not_found(service, repo):
    repo.find_by_external_id.return_value = None
    with pytest.raises(NotFoundError):
        await service.update(uuid4(), TournamentUpdate(tagline="x"))


async def test_change_status(service, repo):
    current = _tournament(id=2)
    repo.find_by_external_id.return_value = current
    repo.change_status.return_value = _tournament(id=2, status=TournamentStatus.LIVE)
    result = await service.change_status(current.external_id, TournamentStatus.LIVE)
    assert result.status == TournamentStatus.LIVE
    repo.change_status.assert_awaited_once_with(2, TournamentStatus.LIVE)


# --- list ---

async def test_list_clamps_limit(service, repo):
    await service.list(ListQuery(limit=500))
    (query,), _ = repo.get_tournaments_with_pagination.await_args
    assert query.limit == 50


async def test_list_keeps_small_limit(service, repo):
    await service.list(ListQuery(limit=5, search="cup"))
    (query,), _ = repo.get_tournaments_with_pagination.await_args
    assert (query.limit, query.search) == (5, "cup")


# --- lifecycle ---

async def test_get_soft_deleted_raises_not_found(service, repo):
    repo.find_by_id.return_value = _tournament(is_deleted=True)
    with pytest.raises(NotFoundError):
        await service.get(1)


async def test_get_missing_raises_not_found(service, repo):
    repo.find_by_id.return_value = None
    with pytest.raises(NotFoundError, match="tournament 1 not found"):
        await service.get(1)


async def test_soft_delete_uses_internal_id(service, repo):
    current = _tournament(id=9)
    repo.find_by_external_id.return_value = current
    await service.soft_delete(current.external_id)
    repo.soft_delete.assert_awaited_once_with(9)


async def test_soft_delete_already_deleted_raises_not_found(service, repo):
    repo.find_by_external_id.return_value = _tournament(is_deleted=True)
    with pytest.raises(NotFoundError):
        await service.soft_delete(uuid4())


async def test_restore_accepts_soft_deleted(service, repo):
    deleted = _tournament(id=3, is_deleted=True)
    repo.find_by_external_id.return_value = deleted
    repo.find_by_id.return_value = _tournament(id=3)
    restored = await service.restore(deleted.external_id)
    repo.restore.assert_awaited_once_with(3)
    assert restored.is_deleted is False


async def test_permanent_delete_purges_soft_deleted(service, repo):
    deleted = _tournament(id=3, is_deleted=True)
    repo.find_by_external_id.return_value = deleted
    await service.permanent_delete(deleted.external_id)
    repo.delete.assert_awaited_once_with(3)


async def test_permanent_delete_unknown_raises(service, repo):
    repo.find_by_external_id.return_value = None
    with pytest.raises(NotFoundError):
        await service.permanent_delete(uuid4())


async def test_bulk_delete_empty_raises(service):
    with pytest.raises(ValueError):
        await service.bulk_delete([])


async def test_bulk_delete_returns_repository_result(service, repo):
    repo.bulk_delete.return_value = True
    assert await service.bulk_delete([1, 2]) is True
    repo.bulk_delete.assert_awaited_once_with([1, 2])
