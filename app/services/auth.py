"""Authorization - decides which caller identity holds the owner capability."""

from loguru import logger


class StaticAuthority:
    """Treats one configured identity as the privileged owner."""

    def __init__(self, owner_id: str):
        if not owner_id:
            raise ValueError("owner_id must not be empty")
        self._owner_id = owner_id
        logger.debug("StaticAuthority: owner={}", owner_id)

    def is_privileged(self, identity: str) -> bool:
        return identity == self._owner_id
