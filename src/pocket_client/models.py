"""Request and response models for the Pocket v3 API."""

from dataclasses import asdict, dataclass, field

from .errors import ValidationError


@dataclass
class RequestTokenInput:
    consumer_key: str
    redirect_uri: str


@dataclass
class AuthorizeInput:
    consumer_key: str
    code: str  # the request token


@dataclass
class AuthorizeResult:
    access_token: str
    username: str = ""  # the service may omit it


@dataclass
class AddRequest:
    url: str
    title: str
    tags: str  # comma-joined
    access_token: str
    consumer_key: str

    def to_payload(self) -> dict:
        """JSON body for /add. Empty title and tags are left out."""
        payload = asdict(self)
        for key in ("title", "tags"):
            if not payload[key]:
                del payload[key]
        return payload


@dataclass
class AddInput:
    """An item to save to the user's list."""

    url: str = ""
    title: str = ""
    tags: list[str] = field(default_factory=list)
    access_token: str = ""

    def validate(self) -> None:
        if not self.url:
            raise ValidationError(
                ValidationError.MISSING_URL, "required URL value is empty"
            )
        if not self.access_token:
            raise ValidationError(
                ValidationError.MISSING_ACCESS_TOKEN, "access token is empty"
            )

    def generate_request(self, consumer_key: str) -> AddRequest:
        return AddRequest(
            url=self.url,
            title=self.title,
            tags=",".join(self.tags),
            access_token=self.access_token,
            consumer_key=consumer_key,
        )
