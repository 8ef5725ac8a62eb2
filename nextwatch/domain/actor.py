"""Request identities: a registered user or a guest session."""

from dataclasses import dataclass

from nextwatch.domain.errors import InvalidActor


@dataclass(frozen=True)
class UserActor:
    user_id: int


@dataclass(frozen=True)
class GuestActor:
    session_id: str


Actor = UserActor | GuestActor


@dataclass(frozen=True)
class ActorScope:
    """The identities one request speaks for.

    Reads cover every actor in the scope; writes go to ``primary``, which is
    the user when both a user id and a session id were supplied.
    """

    actors: tuple[Actor, ...]

    @property
    def primary(self) -> Actor:
        return self.actors[0]

    @classmethod
    def resolve(cls, user_id: int | None = None, session_id: str | None = None) -> "ActorScope":
        """Build a scope from optional ids. Raises InvalidActor if both are missing."""
        actors: list[Actor] = []
        if user_id is not None:
            actors.append(UserActor(user_id))
        if session_id:
            actors.append(GuestActor(session_id))
        if not actors:
            raise InvalidActor()
        return cls(tuple(actors))

    @classmethod
    def maybe(cls, user_id: int | None = None, session_id: str | None = None) -> "ActorScope | None":
        """Like ``resolve`` but returns None instead of raising."""
        if user_id is None and not session_id:
            return None
        return cls.resolve(user_id, session_id)


def actor_columns(actor: Actor) -> dict[str, int | str | None]:
    """Column values identifying ``actor`` on an actor-owned row."""
    match actor:
        case UserActor(user_id=user_id):
            return {"user_id": user_id, "session_id": None}
        case GuestActor(session_id=session_id):
            return {"user_id": None, "session_id": session_id}
    raise TypeError(f"unknown actor: {actor!r}")


def describe(actor: Actor) -> str:
    match actor:
        case UserActor(user_id=user_id):
            return f"user:{user_id}"
        case GuestActor(session_id=session_id):
            return f"guest:{session_id}"
    raise TypeError(f"unknown actor: {actor!r}")
