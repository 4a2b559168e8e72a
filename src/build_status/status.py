"""GitHub commit status payloads + authenticated POST."""

import enum
from dataclasses import asdict, dataclass

import requests

from build_status.config import Config


class State(str, enum.Enum):
    PENDING = "pending"
    SUCCESS = "success"
    FAILURE = "failure"
    ERROR = "error"


@dataclass(frozen=True)
class StatusPayload:
    state: State
    target_url: str
    description: str
    context: str

    def to_dict(self) -> dict:
        body = asdict(self)
        body["state"] = self.state.value
        return body


class ReportError(RuntimeError):
    """Creating the commit status failed."""


class SerializationError(ReportError):
    pass


class TransportError(ReportError):
    pass


class UnexpectedStatusError(ReportError):
    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Error creating commit status on GitHub (HTTP {status_code}).\n{body}")


def statuses_url(api_url: str, org_repo: str, sha: str) -> str:
    return f"{api_url.rstrip('/')}/repos/{org_repo}/statuses/{sha}"


def build_payload(config: Config, state: State) -> StatusPayload:
    return StatusPayload(
        state=state,
        target_url=config.target_url,
        description=config.description,
        context=config.context,
    )


def report(url: str, config: Config, state: State) -> None:
    """POST a commit status. Anything other than 201 Created raises ReportError.

    Credentials are sent UTF-8 encoded. Single attempt, no timeout override.
    """
    payload = build_payload(config, state)
    try:
        auth = (config.username.encode(), config.auth.encode())
    except UnicodeError as e:
        raise SerializationError(f"Error encoding basic auth credentials: {e}") from e

    try:
        resp = requests.post(
            url,
            json=payload.to_dict(),
            auth=auth,
            headers={"Accept": "application/vnd.github+json"},
        )
        # Body read failures are transport errors too
        text = resp.text
    except (TypeError, requests.exceptions.InvalidJSONError) as e:
        raise SerializationError(f"Error converting {payload!r} to json: {e}") from e
    except requests.RequestException as e:
        raise TransportError(f"Error executing request to GitHub: {e}") from e

    if resp.status_code != 201:
        raise UnexpectedStatusError(resp.status_code, text)
