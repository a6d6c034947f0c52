import re
from typing import Any, Mapping, Optional

PLACEHOLDER_RE = re.compile(r"\{(.*?)\}")


def _step(value: Any, key: str) -> Optional[Any]:
    """One lookup along a dotted path; None when the key can't be followed."""
    if isinstance(value, Mapping):
        nxt = value.get(key)
        if nxt:
            return nxt
    return None


def resolve_path(payload: Any, path: str) -> Any:
    """
    Walk `path` (e.g. "pull_request.user.login") through the payload.

    Stops at the first segment that is missing or falsy and returns the
    last value that did resolve, so a bad path never raises.
    """
    value = payload
    for key in path.split("."):
        nxt = _step(value, key)
        if nxt is None:
            print(f"Template path '{path}' stopped before '{key}'")
            break
        value = nxt
    return value


def render(payload: Any, template: str) -> str:
    """Fill every `{ dotted.path }` placeholder in `template` from `payload`."""
    message = template
    for match in PLACEHOLDER_RE.finditer(template):
        placeholder = match.group(0)
        path = match.group(1).strip()
        value = resolve_path(payload, path)
        message = message.replace(placeholder, str(value), 1)
    return message
