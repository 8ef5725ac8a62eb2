"""Helpers shared by the SQLAlchemy repositories."""

from typing import Any

from sqlalchemy import ColumnElement, or_
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from nextwatch.domain.actor import Actor, ActorScope, GuestActor, UserActor


def insert_for(session: AsyncSession, model: Any):
    """Dialect-specific INSERT supporting ON CONFLICT."""
    dialect = session.bind.dialect.name
    if dialect == "postgresql":
        return postgresql.insert(model)
    if dialect == "sqlite":
        return sqlite.insert(model)
    raise NotImplementedError(f"conditional upsert is not supported on {dialect}")


def actor_clause(model: Any, actor: Actor) -> ColumnElement[bool]:
    match actor:
        case UserActor(user_id=user_id):
            return model.user_id == user_id
        case GuestActor(session_id=session_id):
            return model.session_id == session_id
    raise TypeError(f"unknown actor: {actor!r}")


def scope_clause(model: Any, scope: ActorScope) -> ColumnElement[bool]:
    return or_(*(actor_clause(model, actor) for actor in scope.actors))


def conflict_target(actor: Actor) -> list[str]:
    """Columns of the unique constraint owning (actor, media item) rows."""
    match actor:
        case UserActor():
            return ["user_id", "media_item_id"]
        case GuestActor():
            return ["session_id", "media_item_id"]
    raise TypeError(f"unknown actor: {actor!r}")
