"""Read action inputs from ``INPUT_*`` environment variables.

Mirrors how the Actions runner exposes ``with:`` values: the input name is
upper-cased, spaces become underscores, hyphens are kept.
"""

import os
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from diff_sentinel.domain.errors import ConfigurationError
from diff_sentinel.domain.value_objects.sentinel_config import SentinelConfig

TRUE_VALUES = ("true", "True", "TRUE")
FALSE_VALUES = ("false", "False", "FALSE")


def input_env_name(name: str) -> str:
    return f"INPUT_{name.replace(' ', '_').upper()}"


def get_input(name: str, env: Mapping[str, str], required: bool = False) -> str:
    value = env.get(input_env_name(name), "").strip()
    if required and not value:
        raise ConfigurationError(f"Input required and not supplied: {name}")
    return value


def get_multiline_input(name: str, env: Mapping[str, str], required: bool = False) -> list[str]:
    raw = get_input(name, env, required=required)
    return [line.strip() for line in raw.splitlines() if line.strip()]


def get_boolean_input(name: str, env: Mapping[str, str], default: bool) -> bool:
    """Parse a YAML 1.2 core-schema boolean; blank means ``default``."""
    value = get_input(name, env)
    if not value:
        return default
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ConfigurationError(
        f"Input does not meet YAML 1.2 \"Core Schema\" specification: {name}\n"
        "Support boolean input list: `true | True | TRUE | false | False | FALSE`"
    )


def build_config(**values: Any) -> SentinelConfig:
    """Validate resolved values into a SentinelConfig."""
    try:
        return SentinelConfig(**values)
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg', '')}"
            for err in e.errors()
        )
        raise ConfigurationError(f"Invalid configuration: {details}") from None


def load_action_inputs(
    env: Mapping[str, str] | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> SentinelConfig:
    """Resolve configuration from the environment, then apply overrides.

    Overrides whose value is None are ignored. The ``run`` input is only
    required when no ``commands`` override is given.
    """
    env = os.environ if env is None else env
    overrides = {k: v for k, v in (overrides or {}).items() if v is not None}

    values: dict[str, Any] = {
        "fail_message": get_input("fail-message", env) or None,
        "fail_on_command_error": get_boolean_input("fail-on-command-error", env, default=False),
        "fail_on_diff": get_boolean_input("fail-on-diff", env, default=True),
    }
    if overrides.get("commands"):
        values["commands"] = overrides["commands"]
    else:
        values["commands"] = get_multiline_input("run", env, required=True)

    values.update({k: v for k, v in overrides.items() if k != "commands"})
    return build_config(**values)
