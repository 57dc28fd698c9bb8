from .demo import (  # noqa: F401
    build_options,
    find_identity,
    run_demo,
    seed_sample_data,
)
from .models import InMemoryObjectManager, InMemoryRepository, User  # noqa: F401

__all__ = [
    "build_options",
    "find_identity",
    "run_demo",
    "seed_sample_data",
    "InMemoryObjectManager",
    "InMemoryRepository",
    "User",
]
