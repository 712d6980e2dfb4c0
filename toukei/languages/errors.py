"""Language registry exception hierarchy.

Every build failure is fatal: a registry that raised one of these never
serves a lookup.
"""


class RegistryBuildError(Exception):
    """Base for failures while building or verifying the tag mapping."""


class IncompleteMappingError(RegistryBuildError):
    """A tag has no binding, or a binding names an undefined family."""

    def __init__(self, message: str, missing=()):
        super().__init__(message)
        self.missing = tuple(missing)


class DuplicateTagError(RegistryBuildError):
    """The same tag is bound more than once."""

    def __init__(self, message: str, duplicates=()):
        super().__init__(message)
        self.duplicates = tuple(duplicates)


class InvalidDefinitionError(RegistryBuildError):
    """A family definition breaks the LangDef contract."""
