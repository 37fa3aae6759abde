"""Scene load errors.

All of them derive from ``ValueError`` so callers that already guard
document parsing with ``except ValueError`` keep working.
"""


class SceneError(ValueError):
    """Base class for errors raised while building a scene."""


class SceneConfigError(SceneError):
    """The document does not have the expected structure."""


class UnsupportedTypeError(SceneError):
    def __init__(self, object_id: str, object_type: str):
        self.object_id = object_id
        self.object_type = object_type
        super().__init__(f"Unsupported object type '{object_type}' for object '{object_id}'")


class UnsupportedPatternError(SceneError):
    def __init__(self, pattern: str, object_type: str):
        self.pattern = pattern
        self.object_type = object_type
        super().__init__(f"Unsupported pattern '{pattern}' for object type '{object_type}'")


class UnsupportedBehaviorError(SceneError):
    def __init__(self, behavior_type: str):
        self.behavior_type = behavior_type
        super().__init__(f"Unsupported behavior type '{behavior_type}'")


class MalformedSizeError(SceneError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"Malformed size {value!r}: expected a number or 'WxL'")


class DuplicateObjectIdError(SceneError):
    def __init__(self, object_id: str):
        self.object_id = object_id
        super().__init__(f"Object id '{object_id}' is already registered")


class ConstraintViolationError(SceneError):
    def __init__(self, object_id: str, parameter: str, value):
        self.object_id = object_id
        self.parameter = parameter
        self.value = value
        super().__init__(
            f"Object '{object_id}': parameter '{parameter}' must be positive, got {value!r}"
        )
