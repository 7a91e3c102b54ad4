import logging
from threading import Lock
from typing import Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Module-level state for once-per-type initialization
_instances: dict[type, object] = {}
_locks_by_owner: dict[type, Lock] = {}
_locks_lock = Lock()


def get_shared_instance(owner: type, factory: Callable[[], T]) -> T:
    """Return the shared instance for $owner, creating it with $factory on first access.

    Instances are keyed by the identity of $owner, so a subclass gets its own instance.
    Each owner has its own lock, so a slow $factory only blocks callers of the same owner.

    Args:
        owner: The type that owns the shared instance.
        factory: Creates the instance. Called at most once per $owner unless it raises.

    Returns:
        The one instance of $owner shared by every caller in this process.

    Thread Safety:
        Concurrent first access from many threads runs $factory exactly once and every
        caller receives the same instance. If $factory raises, nothing is stored and the
        exception propagates to that caller; a later access tries again.
    """
    instance = _instances.get(owner)
    if instance is not None:
        return instance

    with _locks_lock:
        owner_lock = _locks_by_owner.setdefault(owner, Lock())

    with owner_lock:
        instance = _instances.get(owner)
        if instance is None:
            instance = factory()

            # Raise: a shared instance must exist once created
            if instance is None:
                raise ValueError(f"Cannot create shared instance because $factory for {owner.__name__} returned None")

            _instances[owner] = instance
            logger.debug(f"Created shared instance for {owner.__name__}")

    return instance


def has_shared_instance(owner: type) -> bool:
    """Check if the shared instance for $owner was already created."""
    return owner in _instances


def clear_shared_instances() -> None:
    """Forget all shared instances. FOR TESTING ONLY."""
    with _locks_lock:
        _instances.clear()
        _locks_by_owner.clear()
