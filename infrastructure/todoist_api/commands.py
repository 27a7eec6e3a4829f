import json
import logging
import uuid
from typing import Any, Mapping

logger = logging.getLogger("todoist.api")


def make_command(action_type: str, args: Mapping[str, Any]) -> str:
    """Serialize one sync-API command as the ``commands`` form value.

    Returns "" when the arguments cannot be encoded; callers must not send an
    empty envelope.
    """
    command = {
        "type": action_type,
        "args": args,
        "uuid": str(uuid.uuid4()),
        "temp_id": str(uuid.uuid4()),
    }
    try:
        return json.dumps([command])
    except (TypeError, ValueError) as exc:
        logger.warning("unable to encode %s command: %s", action_type, exc)
        return ""


__all__ = ["make_command"]
