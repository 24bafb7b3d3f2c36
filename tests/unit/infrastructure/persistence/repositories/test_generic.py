"""Behaviour of SqlRepository against an in-memory SQLite database.

SqlRepository is used standalone here, configured with the tournament table
and a plain row mapper, so every test exercises the generic code path only.
"""

import asyncio

import pytest

from arena_api.domain.models.enums import SortOrder, TournamentStatus
from arena_api.domain.models.pagination import PaginationOptions
from arena_api.infrastructure.persistence.models.sessions import Session as OrmSession
from arena_api.infrastructure.persistence.models.tournaments import Tournament as OrmTournament
from arena_api.infrastructure.persistence.repositories.generic import (
    EntityConfig,
    SqlRepository,
    escape_like,
)
from arena_api.infrastructure.persistence.repositories.tournaments import (
    SqlTournamentRepository,
)


@pytest.fixture
def repo(session):
    config = EntityConfig("tournament", OrmTournament, SqlTournamentRepository._to_domain)
    return SqlRepository(session, config)


async def _seed(repo, *titles):
    return await repo.bulk_create([{"title": title} for title in titles])


# --- EntityConfig ---

def test_config_lists_table_columns():
    config = EntityConfig("tournament", OrmTournament, lambda row: row)
    assert {"id", "external_id", "title", "is_deleted"} <= config.columns


def test_config_soft_deletable_for_audited_table():
    assert EntityConfig("tournament", OrmTournament, lambda row: row).soft_deletable


def test_config_not_soft_deletable_for_session_table():
    assert not EntityConfig("session", OrmSession, lambda row: row).soft_deletable


# --- escape_like ---

def test_escape_like_escapes_percent_and_underscore():
    assert escape_like("50%_off") == "50\\%\\_off"


def test_escape_like_escapes_escape_character():
    assert escape_like("a\\b") == "a\\\\b"


def test_escape_like_leaves_plain_text():
    assert escape_like("Summer Cup") == "Summer Cup"


# --- create / find_by_id ---

async def test_create_then_find_by_id_returns_given_fields(repo):
    created = await repo.create({"title": "Summer Cup", "max_participants": 64})
    found = await repo.find_by_id(created.id)
    assert found is not None
    assert found.title == "Summer Cup"
    assert found.max_participants == 64


async def test_create_populates_store_assigned_fields(repo):
    created = await repo.create({"title": "Summer Cup"})
    assert created.id is not None
    assert created.external_id is not None
    assert created.created_at is not None
    assert created.is_deleted is False
    assert created.is_active is True
    assert created.status == TournamentStatus.UPCOMING


async def test_create_accepts_enum_values(repo):
    created = await repo.create({"title": "Live Cup", "status": TournamentStatus.LIVE})
    assert created.status == TournamentStatus.LIVE


async def test_create_stores_json_rules(repo):
    rules = {"format": "knockout", "rounds": [1, 2, 3]}
    created = await repo.create({"title": "Rules Cup", "rules": rules})
    assert (await repo.find_by_id(created.id)).rules == rules


@pytest.mark.parametrize("field", ["id", "external_id", "created_at"])
async def test_create_rejects_store_assigned_field(repo, field):
    with pytest.raises(ValueError):
        await repo.create({"title": "Cup", field: None})


async def test_create_rejects_unknown_field(repo):
    with pytest.raises(ValueError, match="no field"):
        await repo.create({"title": "Cup", "colour": "red"})


async def test_find_by_id_missing_returns_none(repo):
    assert await repo.find_by_id(9999) is None


# --- find_one / find_all ---

async def test_find_one_ands_predicate_fields(repo):
    await repo.create({"title": "A", "type": "solo"})
    await repo.create({"title": "B", "type": "solo", "entry_fee": "10"})
    found = await repo.find_one({"type": "solo", "entry_fee": "10"})
    assert found.title == "B"


async def test_find_one_no_match_returns_none(repo):
    await repo.create({"title": "A"})
    assert await repo.find_one({"title": "Z"}) is None


async def test_find_one_returns_soft_deleted_rows(repo):
    created = await repo.create({"title": "Gone"})
    await repo.soft_delete(created.id)
    found = await repo.find_one({"title": "Gone"})
    assert found is not None and found.is_deleted


async def test_find_one_none_value_matches_null(repo):
    await repo.create({"title": "No tagline"})
    assert (await repo.find_one({"tagline": None})).title == "No tagline"


async def test_find_all_without_predicate_returns_live_rows(repo):
    a, b, c = await _seed(repo, "A", "B", "C")
    await repo.soft_delete(b.id)
    titles = {t.title for t in await repo.find_all()}
    assert titles == {"A", "C"}


async def test_find_all_include_deleted(repo):
    _, b = await _seed(repo, "A", "B")
    await repo.soft_delete(b.id)
    assert len(await repo.find_all(include_deleted=True)) == 2


async def test_find_all_predicate_naming_is_deleted_overrides_default(repo):
    _, b = await _seed(repo, "A", "B")
    await repo.soft_delete(b.id)
    deleted = await repo.find_all({"is_deleted": True})
    assert [t.title for t in deleted] == ["B"]


async def test_find_all_rejects_unknown_predicate_field(repo):
    with pytest.raises(ValueError):
        await repo.find_all({"colour": "red"})


# --- update ---

async def test_update_changes_only_given_fields(repo):
    created = await repo.create({"title": "Cup", "tagline": "old", "entry_fee": "5"})
    updated = await repo.update(created.id, {"tagline": "new"})
    assert updated.tagline == "new"
    assert updated.entry_fee == "5"
    assert updated.title == "Cup"


async def test_update_missing_returns_none(repo):
    assert await repo.update(9999, {"tagline": "x"}) is None


async def test_update_with_no_fields_returns_current(repo):
    created = await repo.create({"title": "Cup"})
    assert (await repo.update(created.id, {})).title == "Cup"


async def test_update_rejects_external_id(repo):
    created = await repo.create({"title": "Cup"})
    with pytest.raises(ValueError):
        await repo.update(created.id, {"external_id": created.external_id})


# --- delete / soft_delete / restore ---

async def test_delete_removes_row(repo):
    created = await repo.create({"title": "Cup"})
    assert await repo.delete(created.id) is True
    assert await repo.find_by_id(created.id) is None


async def test_delete_missing_returns_false(repo):
    assert await repo.delete(9999) is False


async def test_soft_delete_sets_flag_and_timestamp(repo):
    created = await repo.create({"title": "Cup"})
    assert await repo.soft_delete(created.id) is True
    found = await repo.find_by_id(created.id)
    assert found.is_deleted is True
    assert found.deleted_at is not None


async def test_soft_delete_then_restore_clears_flag_and_timestamp(repo):
    created = await repo.create({"title": "Cup"})
    await repo.soft_delete(created.id)
    assert await repo.restore(created.id) is True
    found = await repo.find_by_id(created.id)
    assert found.is_deleted is False
    assert found.deleted_at is None
    assert await repo.exists({"title": "Cup"})


async def test_soft_delete_missing_returns_false(repo):
    assert await repo.soft_delete(9999) is False


async def test_restore_missing_returns_false(repo):
    assert await repo.restore(9999) is False


async def test_delete_after_soft_delete_removes_row(repo):
    created = await repo.create({"title": "Cup"})
    await repo.soft_delete(created.id)
    assert await repo.delete(created.id) is True
    assert await repo.find_by_id(created.id) is None


async def test_soft_delete_on_table_without_flag_raises(session):
    config = EntityConfig("session", OrmSession, lambda row: row)
    with pytest.raises(ValueError, match="soft delete"):
        await SqlRepository(session, config).soft_delete(1)


# --- exists / count ---

async def test_exists_true_and_false(repo):
    await repo.create({"title": "Cup"})
    assert await repo.exists({"title": "Cup"}) is True
    assert await repo.exists({"title": "Bowl"}) is False


async def test_exists_ignores_soft_deleted_by_default(repo):
    created = await repo.create({"title": "Cup"})
    await repo.soft_delete(created.id)
    assert await repo.exists({"title": "Cup"}) is False
    assert await repo.exists({"title": "Cup"}, include_deleted=True) is True


async def test_count_matches_find_all_length(repo):
    await _seed(repo, "A", "B", "C")
    await repo.create({"title": "D", "type": "team"})
    assert await repo.count() == 4
    assert await repo.count({"type": "team"}) == 1
    assert await repo.count() == len(await repo.find_all())


# --- bulk operations ---

async def test_bulk_create_returns_rows_in_input_order(repo):
    created = await _seed(repo, "A", "B", "C")
    assert [t.title for t in created] == ["A", "B", "C"]
    assert len({t.id for t in created}) == 3


async def test_bulk_create_empty_returns_empty_list(repo):
    assert await repo.bulk_create([]) == []


async def test_bulk_update_applies_fields_to_listed_ids(repo):
    a, b, c = await _seed(repo, "A", "B", "C")
    assert await repo.bulk_update([a.id, b.id], {"type": "team"}) is True
    assert {t.title for t in await repo.find_all({"type": "team"})} == {"A", "B"}
    assert (await repo.find_by_id(c.id)).type is None


async def test_bulk_update_no_match_returns_false(repo):
    assert await repo.bulk_update([9998, 9999], {"type": "team"}) is False


async def test_bulk_update_empty_ids_returns_false(repo):
    assert await repo.bulk_update([], {"type": "team"}) is False


async def test_bulk_delete_removes_exactly_listed_ids(repo):
    a, b, c = await _seed(repo, "A", "B", "C")
    assert await repo.bulk_delete([a.id, c.id]) is True
    remaining = await repo.find_all(include_deleted=True)
    assert [t.id for t in remaining] == [b.id]


async def test_bulk_delete_no_match_returns_false(repo):
    assert await repo.bulk_delete([9999]) is False


async def test_bulk_delete_empty_returns_false(repo):
    assert await repo.bulk_delete([]) is False


# --- find_all_with_pagination ---

async def test_pagination_first_page_of_25(repo):
    await _seed(repo, *(f"Cup {i:02d}" for i in range(25)))
    page = await repo.find_all_with_pagination(PaginationOptions(page=1, limit=10))
    assert len(page.data) == 10
    meta = page.pagination
    assert (meta.total, meta.total_pages, meta.has_next, meta.has_prev) == (25, 3, True, False)


async def test_pagination_last_page_of_25(repo):
    await _seed(repo, *(f"Cup {i:02d}" for i in range(25)))
    page = await repo.find_all_with_pagination(PaginationOptions(page=3, limit=10))
    assert len(page.data) == 5
    assert page.pagination.has_next is False
    assert page.pagination.has_prev is True


async def test_pagination_page_past_end_is_empty(repo):
    await _seed(repo, "A", "B")
    page = await repo.find_all_with_pagination(PaginationOptions(page=5, limit=10))
    assert page.data == []
    assert page.pagination.total == 2


async def test_pagination_pages_partition_the_rows(repo):
    await _seed(repo, *(f"Cup {i:02d}" for i in range(7)))
    seen = []
    for number in (1, 2, 3):
        options = PaginationOptions(page=number, limit=3, sort_by="id", sort_order=SortOrder.ASC)
        seen.extend(t.title for t in (await repo.find_all_with_pagination(options)).data)
    assert seen == [f"Cup {i:02d}" for i in range(7)]


async def test_pagination_total_equals_count_of_base_filter(repo):
    await _seed(repo, "A", "B", "C")
    await repo.create({"title": "D", "type": "team"})
    await repo.create({"title": "E", "type": "team"})
    page = await repo.find_all_with_pagination(PaginationOptions(limit=1), {"type": "team"})
    assert page.pagination.total == await repo.count({"type": "team"}) == 2
    assert len(page.data) == 1


async def test_pagination_hides_soft_deleted_rows(repo):
    a, _ = await _seed(repo, "A", "B")
    await repo.soft_delete(a.id)
    page = await repo.find_all_with_pagination()
    assert [t.title for t in page.data] == ["B"]


async def test_pagination_search_is_case_insensitive_substring(repo):
    await _seed(repo, "Summer Cup", "Winter Cup", "Spring Bowl")
    options = PaginationOptions(search="cup", search_fields=["title"])
    page = await repo.find_all_with_pagination(options)
    assert {t.title for t in page.data} == {"Summer Cup", "Winter Cup"}
    assert page.pagination.total == 2


async def test_pagination_search_ors_across_fields(repo):
    await repo.create({"title": "Alpha", "tagline": "weekly cup"})
    await repo.create({"title": "Cup Beta"})
    await repo.create({"title": "Gamma"})
    options = PaginationOptions(search="CUP", search_fields=["title", "tagline"])
    page = await repo.find_all_with_pagination(options)
    assert {t.title for t in page.data} == {"Alpha", "Cup Beta"}


async def test_pagination_search_matches_wildcards_literally(repo):
    await _seed(repo, "50% off", "500 off")
    options = PaginationOptions(search="50%", search_fields=["title"])
    page = await repo.find_all_with_pagination(options)
    assert [t.title for t in page.data] == ["50% off"]


async def test_pagination_search_casts_integer_columns(repo):
    await repo.create({"title": "Big", "max_participants": 128})
    await repo.create({"title": "Small", "max_participants": 16})
    options = PaginationOptions(search="12", search_fields=["max_participants"])
    page = await repo.find_all_with_pagination(options)
    assert [t.title for t in page.data] == ["Big"]


async def test_pagination_empty_search_fields_applies_no_search(repo):
    await _seed(repo, "A", "B")
    page = await repo.find_all_with_pagination(PaginationOptions(search="zzz"))
    assert page.pagination.total == 2


async def test_pagination_sorts_ascending_by_title(repo):
    await _seed(repo, "Charlie", "Alpha", "Bravo")
    options = PaginationOptions(sort_by="title", sort_order=SortOrder.ASC)
    page = await repo.find_all_with_pagination(options)
    assert [t.title for t in page.data] == ["Alpha", "Bravo", "Charlie"]


async def test_pagination_sorts_descending_by_title(repo):
    await _seed(repo, "Charlie", "Alpha", "Bravo")
    options = PaginationOptions(sort_by="title", sort_order=SortOrder.DESC)
    page = await repo.find_all_with_pagination(options)
    assert [t.title for t in page.data] == ["Charlie", "Bravo", "Alpha"]


async def test_pagination_unknown_sort_field_raises(repo):
    with pytest.raises(ValueError):
        await repo.find_all_with_pagination(PaginationOptions(sort_by="colour"))


# --- updated_at ---

async def test_update_advances_updated_at(repo):
    created = await repo.create({"title": "Cup"})
    await asyncio.sleep(1.1)  # SQLite CURRENT_TIMESTAMP has one-second resolution
    updated = await repo.update(created.id, {"tagline": "new"})
    assert updated.updated_at > created.updated_at


async def test_soft_delete_advances_updated_at(repo):
    created = await repo.create({"title": "Cup"})
    await asyncio.sleep(1.1)
    await repo.soft_delete(created.id)
    assert (await repo.find_by_id(created.id)).updated_at > created.updated_at
