from diff_sentinel.infrastructure.config.action_inputs import (
    get_boolean_input,
    get_input,
    get_multiline_input,
    load_action_inputs,
)

__all__ = ["get_boolean_input", "get_input", "get_multiline_input", "load_action_inputs"]
