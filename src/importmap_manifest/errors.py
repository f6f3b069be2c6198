"""Exception types raised while parsing, loading and resolving entries."""


class ImportMapError(Exception):
    """Base class for every error raised by importmap_manifest."""


class InvalidPackageNameError(ImportMapError, ValueError):
    """A package specifier could not be parsed."""

    def __init__(self, package_name: str):
        self.package_name = package_name
        super().__init__(
            f'Package "{package_name}" is not a valid package name format. '
            'Use the format PACKAGE@VERSION - e.g. "lodash" or "lodash@^4"'
        )


class PackageResolutionError(ImportMapError):
    """The registry could not resolve a package version."""


class ImportMapConfigError(ImportMapError, ValueError):
    """The manifest (or an entry in it) breaks a configuration rule."""

    def __init__(self, message: str, import_name: str | None = None):
        self.import_name = import_name
        super().__init__(message)


class InvalidOptionError(ImportMapConfigError):
    def __init__(self, import_name: str, invalid_keys, valid_keys):
        self.invalid_keys = list(invalid_keys)
        invalid = '", "'.join(self.invalid_keys)
        valid = '", "'.join(valid_keys)
        super().__init__(
            "The following keys are not valid for the importmap entry "
            f'"{import_name}": "{invalid}". Valid keys are: "{valid}".',
            import_name,
        )


class InvalidTypeError(ImportMapConfigError):
    def __init__(self, import_name: str, value):
        self.value = value
        super().__init__(
            f'The importmap entry "{import_name}" has an invalid "type" '
            f'option "{value}". Valid types are: "js", "css".',
            import_name,
        )


class EntrypointTypeError(ImportMapConfigError):
    def __init__(self, import_name: str, type_value: str):
        super().__init__(
            'The "entrypoint" option can only be used with the "js" type. '
            f'Found "{type_value}" for key "{import_name}".',
            import_name,
        )


class MissingPathOrVersionError(ImportMapConfigError):
    def __init__(self, import_name: str):
        super().__init__(
            f'The importmap entry "{import_name}" must have either a '
            '"path" or "version" option.',
            import_name,
        )


class PathAndVersionError(ImportMapConfigError):
    def __init__(self, import_name: str):
        super().__init__(
            f'The importmap entry "{import_name}" cannot have both a '
            '"path" and "version" option.',
            import_name,
        )
