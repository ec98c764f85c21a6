import secrets

from src.app.services.token_generator import ITokenGenerator


class SecureTokenGenerator(ITokenGenerator):
    """URL-safe tokens from the OS CSPRNG"""

    def __init__(self, nbytes: int = 32):
        self.nbytes = nbytes

    def generate_token_key(self) -> str:
        return secrets.token_urlsafe(self.nbytes)
