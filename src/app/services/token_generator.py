from abc import ABC, abstractmethod


class ITokenGenerator(ABC):
    """Produces opaque, unguessable recovery tokens"""

    @abstractmethod
    def generate_token_key(self) -> str:
        pass
