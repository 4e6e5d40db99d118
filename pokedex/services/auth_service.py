import asyncio

from pokedex.models import User
from pokedex.services.base import StateHolder
from pokedex.states import AuthUiState, Status

CREDENTIAL_REQUIRED = "Username and password required"


class AuthStateHolder(StateHolder[AuthUiState]):
    """
    Local login gate. Only checks that both fields were filled in:
    nothing is sent over the network and nothing is stored.
    """

    def __init__(self):
        super().__init__(AuthUiState())

    def authenticate(self, username: str, password: str) -> asyncio.Task:
        self._publish(status=Status.LOADING)
        return self._launch(self._authenticate(username, password))

    async def _authenticate(self, username: str, password: str):
        if username and password:
            self._publish(user=User(username=username), status=Status.SUCCESS, error=None)
        else:
            self._publish(error=CREDENTIAL_REQUIRED, status=Status.ERROR)
