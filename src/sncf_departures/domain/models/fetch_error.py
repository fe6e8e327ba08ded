"""Error taxonomy for the departures fetch."""


class FetchError(Exception):
    """Base class for every way the single departures fetch can fail."""

    @property
    def user_message(self) -> str:
        """Human-readable French message shown in place of the departures."""
        return "Erreur lors de la récupération des départs."


class FetchTimeout(FetchError):
    """The request did not complete in time."""

    @property
    def user_message(self) -> str:
        return "La requête a expiré, veuillez réessayer."


class NetworkError(FetchError):
    """The request could not reach the server."""

    @property
    def user_message(self) -> str:
        return "Erreur réseau, vérifiez votre connexion."


class BadUrl(FetchError):
    """The configured URL was rejected by the HTTP client."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Invalid URL: {url}")
        self.url = url

    @property
    def user_message(self) -> str:
        return f"URL invalide : {self.url}"


class BadStatus(FetchError):
    """The server answered with a non-2xx status code."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Unexpected HTTP status {status_code}")
        self.status_code = status_code

    @property
    def user_message(self) -> str:
        return f"Erreur du serveur : {self.status_code}"


class BadBody(FetchError):
    """The server answered 2xx but the body could not be decoded."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Could not decode response body: {reason}")
        self.reason = reason

    @property
    def user_message(self) -> str:
        return f"Erreur de décodage de la réponse : {self.reason}"
