"""Flag/env settings table, resolved once into an immutable Config."""

from dataclasses import dataclass, fields

DEFAULT_API_URL = "https://api.github.com"


@dataclass(frozen=True)
class Setting:
    name: str
    flag: str
    envvar: str
    help: str
    required: bool = False
    default: str = ""


# Validation order for required settings follows table order.
SETTINGS: tuple[Setting, ...] = (
    Setting(
        "org_repo",
        "-r",
        "BUILD_ORG_REPO",
        "Required: GitHub repository in the form of organization/repository, "
        "e.g. google/cadvisor",
        required=True,
    ),
    Setting("sha", "-s", "BUILD_SHA", "Required: GitHub commit status SHA", required=True),
    Setting(
        "context", "-c", "BUILD_CONTEXT", "Required: GitHub commit status context", required=True
    ),
    Setting("description", "-d", "BUILD_DESCRIPTION", "Optional: GitHub commit status description"),
    Setting("target_url", "-t", "BUILD_TARGET_URL", "Optional: GitHub commit status target_url"),
    Setting("username", "-u", "BUILD_USER", "Optional: GitHub username for basic auth"),
    Setting(
        "auth",
        "-a",
        "BUILD_AUTH",
        "Required: GitHub password or token for basic auth",
        required=True,
    ),
    Setting(
        "dev",
        "-dev",
        "BUILD_DEV",
        "Optional: If provided, ignores required flags and runs the command as-is, "
        "without any status reporting",
    ),
    Setting(
        "api_url",
        "-api",
        "BUILD_API_URL",
        "Optional: GitHub API base URL (for GitHub Enterprise)",
        default=DEFAULT_API_URL,
    ),
)

_MISSING_MESSAGES = {
    "org_repo": "No GitHub organization/repository provided",
    "sha": "No SHA provided",
    "context": "No GitHub commit status context provided",
    "auth": "No auth token or password provided",
}


class MissingConfiguration(ValueError):
    """A required setting is empty and bypass mode is off."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(_MISSING_MESSAGES.get(field, f"No {field} provided"))


@dataclass(frozen=True)
class Config:
    org_repo: str = ""
    sha: str = ""
    context: str = ""
    description: str = ""
    target_url: str = ""
    username: str = ""
    auth: str = ""
    dev: str = ""
    api_url: str = DEFAULT_API_URL

    @property
    def bypass(self) -> bool:
        return self.dev != ""

    @classmethod
    def from_values(cls, **values: str | None) -> "Config":
        """Build a Config from resolved flag values. None counts as empty.

        Unknown keys are ignored; a missing or empty api_url falls back to
        the public GitHub API.
        """
        known = {f.name for f in fields(cls)}
        kwargs = {k: (v or "") for k, v in values.items() if k in known}
        if not kwargs.get("api_url"):
            kwargs["api_url"] = DEFAULT_API_URL
        return cls(**kwargs)


def required_settings() -> list[Setting]:
    return [s for s in SETTINGS if s.required]


def validate(config: Config) -> None:
    """Raise MissingConfiguration for the first empty required setting.

    Never raises in bypass mode.
    """
    if config.bypass:
        return
    for setting in required_settings():
        if not getattr(config, setting.name):
            raise MissingConfiguration(setting.name)
