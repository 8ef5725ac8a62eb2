import pytest
from sqlalchemy import func, select

from nextwatch.domain.actor import ActorScope
from nextwatch.domain.errors import NotFound
from nextwatch.domain.models import WatchlistEntry
from nextwatch.services import WatchlistService


async def count_entries(session) -> int:
    return await session.scalar(select(func.count()).select_from(WatchlistEntry))


async def test_add_is_idempotent(session, make_media, make_user):
    user = await make_user()
    item = await make_media()
    service = WatchlistService(session)
    scope = ActorScope.resolve(user.id)

    first = await service.add(scope, item.id)
    again = await service.add(scope, item.id)

    assert again.id == first.id
    assert again.created_at == first.created_at
    assert await count_entries(session) == 1


async def test_different_actors_get_their_own_entries(session, make_media, make_user):
    alice, bob = await make_user(), await make_user()
    item = await make_media()
    service = WatchlistService(session)
    await service.add(ActorScope.resolve(alice.id), item.id)
    await service.add(ActorScope.resolve(bob.id), item.id)
    await service.add(ActorScope.resolve(session_id="guest_1_abc"), item.id)
    assert await count_entries(session) == 3


async def test_add_unknown_media_item(session):
    with pytest.raises(NotFound):
        await WatchlistService(session).add(ActorScope.resolve(session_id="guest_1_abc"), 12345)


async def test_remove(session, make_media, make_user):
    user = await make_user()
    item = await make_media()
    service = WatchlistService(session)
    scope = ActorScope.resolve(user.id)
    await service.add(scope, item.id)

    assert await service.remove(scope, item.id) is True
    assert await count_entries(session) == 0


async def test_remove_missing_entry_still_succeeds(session):
    assert await WatchlistService(session).remove(ActorScope.resolve(session_id="guest_1_abc"), 1) is True


async def test_remove_without_actor_fails(session):
    assert await WatchlistService(session).remove(None, 1) is False


async def test_remove_only_touches_own_entry(session, make_media, make_user):
    alice, bob = await make_user(), await make_user()
    item = await make_media()
    service = WatchlistService(session)
    await service.add(ActorScope.resolve(alice.id), item.id)
    await service.add(ActorScope.resolve(bob.id), item.id)

    await service.remove(ActorScope.resolve(alice.id), item.id)

    remaining = await service.list_entries(ActorScope.resolve(bob.id))
    assert [e.media_item_id for e in remaining] == [item.id]
    assert await service.list_entries(ActorScope.resolve(alice.id)) == []


async def test_list_includes_media_items(session, make_media):
    first = await make_media(title="Alien")
    second = await make_media(title="Aliens")
    service = WatchlistService(session)
    scope = ActorScope.resolve(session_id="guest_1_abc")
    await service.add(scope, first.id)
    await service.add(scope, second.id)

    entries = await service.list_entries(scope)
    assert {e.media_item.title for e in entries} == {"Alien", "Aliens"}
    assert all(e.media_item.id == e.media_item_id for e in entries)


async def test_list_without_actor_is_empty(session):
    assert await WatchlistService(session).list_entries(None) == []
