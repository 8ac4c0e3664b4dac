import re
from importlib import metadata
from pathlib import Path

SERVICE_NAME = "meta-launch-service"
APP_TITLE = "Meta Ads Launch Service"

CHANGELOG_PATH = Path(__file__).resolve().parent.parent / "CHANGELOG.md"


def _changelog_version(changelog: Path = CHANGELOG_PATH) -> str | None:
    """Latest ``## [x.y.z]`` heading of the changelog."""
    if not changelog.exists():
        return None
    match = re.search(r"^##\s*\[(.+?)\]", changelog.read_text(), re.MULTILINE)
    return match.group(1) if match else None


def resolve_version() -> str:
    # a source checkout is ahead of whatever is installed
    version = _changelog_version()
    if version:
        return version
    try:
        return metadata.version(SERVICE_NAME)
    except metadata.PackageNotFoundError:
        return "unknown"


VERSION = resolve_version()
